# spigot/errors.py
"""Exception types raised by generators and the driver."""


class SpigotError(Exception):
    """Base class for all spigot errors."""


class ConfigError(SpigotError):
    """Configuration is malformed or names something unknown."""


class TemplateError(SpigotError):
    """A template string failed to compile."""

    def __init__(self, name: str, message: str):
        super().__init__(f"template '{name}': {message}")
        self.name = name


class RenderError(SpigotError):
    """A compiled template could not be rendered against a record."""

    def __init__(self, name: str, message: str):
        super().__init__(f"rendering '{name}' failed: {message}")
        self.name = name
