# spigot/formats/__init__.py
"""Bundled log formats.

Each module exposes ``register(registry)``; ``FORMATS`` is the bootstrap
list consumed by :func:`spigot.registry.build_registry`.
"""

from . import citrix_cef, fortinet_firewall
from .citrix_cef import CitrixCEF
from .fortinet_firewall import FortinetFirewall

FORMATS = (
    citrix_cef,
    fortinet_firewall,
)

__all__ = ['FORMATS', 'CitrixCEF', 'FortinetFirewall']
