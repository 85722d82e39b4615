# spigot/registry.py
"""Registry mapping format identifiers to generator constructors."""

import logging
import threading
from typing import Any, Callable, Dict, List, Optional

from .errors import ConfigError
from .generator import Generator

Constructor = Callable[..., Generator]


class Registry:
    """Format id (``"<vendor>:<product>"``) to constructor mapping.

    Registering an id that already exists replaces the earlier constructor.
    Entries are never removed.
    """

    def __init__(self):
        self._constructors: Dict[str, Constructor] = {}
        self._lock = threading.Lock()

    def register(self, format_id: str, constructor: Constructor) -> None:
        with self._lock:
            if format_id in self._constructors:
                logging.warning(f"Generator '{format_id}' registered twice, replacing")
            self._constructors[format_id] = constructor
        logging.debug(f"Registered generator: {format_id}")

    def lookup(self, format_id: str) -> Optional[Constructor]:
        """Return the constructor for ``format_id`` or None if unknown."""
        with self._lock:
            return self._constructors.get(format_id)

    def create(self, format_id: str, config: Optional[Any] = None, **kwargs) -> Generator:
        """Construct the generator registered under ``format_id``."""
        constructor = self.lookup(format_id)
        if constructor is None:
            known = ', '.join(self.names()) or 'none'
            raise ConfigError(f"unknown generator type '{format_id}' (available: {known})")
        return constructor(config, **kwargs)

    def names(self) -> List[str]:
        with self._lock:
            return sorted(self._constructors)

    def __contains__(self, format_id: str) -> bool:
        return self.lookup(format_id) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._constructors)


def build_registry() -> Registry:
    """Registry populated with every bundled format."""
    from .formats import FORMATS

    registry = Registry()
    for module in FORMATS:
        module.register(registry)
    logging.debug(f"Generator registry built with {len(registry)} formats")
    return registry
