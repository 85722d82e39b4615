# spigot/rand.py
"""Random value helpers shared by all generators.

Every helper draws from one process-wide ``random.Random`` seeded once at
import time. Pass ``rng`` to draw from a different source instead.
"""

import random
from datetime import datetime, timedelta
from ipaddress import IPv4Address
from typing import Optional, Sequence, TypeVar

from faker import Faker

T = TypeVar('T')

RECENT_WINDOW = timedelta(minutes=20)

_source = random.Random()
_fake = Faker()
_fake.random = _source


def source() -> random.Random:
    """Return the process-wide random source."""
    return _source


def seed(value) -> None:
    """Reseed the process-wide random source."""
    _source.seed(value)


def faker(rng: Optional[random.Random] = None) -> Faker:
    """Faker drawing from ``rng``; the shared instance for the process-wide source."""
    if rng is None or rng is _source:
        return _fake
    fake = Faker()
    fake.random = rng
    return fake


def ipv4(rng: Optional[random.Random] = None) -> IPv4Address:
    """Random address from the whole IPv4 space.

    No effort is made to avoid reserved or non-routable ranges.
    """
    rng = rng or _source
    return IPv4Address(rng.getrandbits(32))


def port(rng: Optional[random.Random] = None) -> int:
    """Random TCP/UDP port from 0 to 65535."""
    rng = rng or _source
    return rng.randrange(65536)


def recent_time(rng: Optional[random.Random] = None,
                window: timedelta = RECENT_WINDOW,
                now: Optional[datetime] = None) -> str:
    """Random time of day within ``window`` before ``now``, as HH:MM:SS."""
    rng = rng or _source
    now = now or datetime.now()
    span = int(window.total_seconds() * 1_000_000)
    if span > 0:
        now = now - timedelta(microseconds=rng.randrange(span))
    return now.strftime("%H:%M:%S")


def choice(table: Sequence[T], rng: Optional[random.Random] = None) -> T:
    """Uniform pick from a lookup table."""
    if not table:
        raise ValueError("cannot choose from an empty lookup table")
    rng = rng or _source
    return table[rng.randrange(len(table))]


def hex_bytes(count: int, fake: Optional[Faker] = None) -> str:
    """``count`` random bytes rendered as lowercase hex."""
    return (fake or _fake).hexify(text='^' * (count * 2))
