# spigot/options.py
"""Unpacking of generator configuration into per-format option dataclasses."""

import dataclasses
from typing import Any, Mapping, Optional, Type, TypeVar

from .errors import ConfigError

O = TypeVar('O')

# Keys every generator section may carry besides its own options.
RESERVED_KEYS = frozenset({'type'})


@dataclasses.dataclass(frozen=True)
class NoOptions:
    """Options for formats that recognize none."""


def unpack(options_cls: Type[O], config: Optional[Any], generator: str) -> O:
    """Build ``options_cls`` from ``config``.

    ``config`` may be ``None`` (all defaults), an ``options_cls`` instance,
    or a mapping such as the generator section of a config file. Unknown
    keys and values whose type does not match the field default are
    rejected. If the options class defines ``validate()`` it is called and
    may raise ``ConfigError`` (or ``ValueError``, which is converted).
    """
    if config is None:
        options = options_cls()
    elif isinstance(config, options_cls):
        options = config
    elif isinstance(config, Mapping):
        options = _from_mapping(options_cls, config, generator)
    else:
        raise ConfigError(
            f"{generator}: configuration must be a mapping, got {type(config).__name__}"
        )

    validate = getattr(options, 'validate', None)
    if validate is not None:
        try:
            validate()
        except ValueError as e:
            raise ConfigError(f"{generator}: {e}") from e
    return options


def _from_mapping(options_cls: Type[O], config: Mapping[str, Any], generator: str) -> O:
    fields = {f.name: f for f in dataclasses.fields(options_cls)}
    values = {}

    for key, value in config.items():
        if key in RESERVED_KEYS:
            continue
        field = fields.get(key)
        if field is None:
            known = ', '.join(sorted(fields)) or 'none'
            raise ConfigError(
                f"{generator}: unrecognized option '{key}' (recognized options: {known})"
            )
        expected = _default_type(field)
        if expected is not None and not isinstance(value, expected):
            raise ConfigError(
                f"{generator}: option '{key}' must be {expected.__name__}, "
                f"got {type(value).__name__}"
            )
        values[key] = value

    return options_cls(**values)


def _default_type(field: dataclasses.Field) -> Optional[type]:
    if field.default is not dataclasses.MISSING and field.default is not None:
        return type(field.default)
    return None
