"""
Pytest configuration and shared fixtures for spigot tests
"""

import random

import pytest

from spigot.formats import CitrixCEF, FortinetFirewall
from spigot.registry import build_registry


@pytest.fixture
def rng():
    """Seeded random source so failures can be reproduced"""
    return random.Random(20240305)


@pytest.fixture
def registry():
    return build_registry()


@pytest.fixture
def firewall(rng):
    return FortinetFirewall(rng=rng)


@pytest.fixture
def cef(rng):
    return CitrixCEF(rng=rng)


@pytest.fixture(params=['citrix:cef', 'fortinet:firewall'])
def any_generator(request, registry, rng):
    """Every bundled format, built through the registry"""
    return registry.create(request.param, rng=rng)
