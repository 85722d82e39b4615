"""
Unit tests for the random value helpers
"""

import gc
import random
import string
import weakref
from datetime import datetime, timedelta
from ipaddress import IPv4Address

import pytest

from spigot import rand


class TestIPv4:

    def test_returns_ipv4_address(self, rng):
        assert isinstance(rand.ipv4(rng), IPv4Address)

    def test_same_seed_same_addresses(self):
        a, b = random.Random(7), random.Random(7)
        assert [rand.ipv4(a) for _ in range(20)] == [rand.ipv4(b) for _ in range(20)]

    def test_covers_whole_address_space(self, rng):
        """Reserved ranges are not excluded, so high and low octets both appear"""
        first_octets = {rand.ipv4(rng).packed[0] for _ in range(5000)}
        assert min(first_octets) < 16
        assert max(first_octets) > 239


class TestPort:

    def test_ports_in_range(self, rng):
        ports = [rand.port(rng) for _ in range(10000)]
        assert all(0 <= p <= 65535 for p in ports)

    def test_ports_vary(self, rng):
        assert len({rand.port(rng) for _ in range(100)}) > 90


class TestRecentTime:

    def test_within_window(self, rng):
        now = datetime(2024, 3, 5, 12, 0, 0)
        for _ in range(500):
            stamp = rand.recent_time(rng, now=now)
            assert "11:40:00" <= stamp <= "12:00:00"

    def test_format(self, rng):
        stamp = rand.recent_time(rng)
        assert len(stamp) == 8
        hours, minutes, seconds = stamp.split(":")
        assert 0 <= int(hours) < 24
        assert 0 <= int(minutes) < 60
        assert 0 <= int(seconds) < 60

    def test_zero_window_is_now(self, rng):
        now = datetime(2024, 3, 5, 1, 2, 3)
        assert rand.recent_time(rng, window=timedelta(0), now=now) == "01:02:03"


class TestChoice:

    def test_only_table_members(self, rng):
        table = ("a", "b", "c")
        picks = {rand.choice(table, rng) for _ in range(300)}
        assert picks == set(table)

    def test_empty_table_rejected(self, rng):
        with pytest.raises(ValueError):
            rand.choice((), rng)


class TestHexBytes:

    def test_length_and_alphabet(self, rng):
        value = rand.hex_bytes(16, rand.faker(rng))
        assert len(value) == 32
        assert set(value) <= set(string.hexdigits.lower())

    def test_seeded_sources_agree(self):
        first = rand.hex_bytes(8, rand.faker(random.Random(3)))
        second = rand.hex_bytes(8, rand.faker(random.Random(3)))
        assert first == second

    def test_default_uses_process_source(self):
        rand.seed(11)
        first = rand.hex_bytes(8)
        rand.seed(11)
        assert rand.hex_bytes(8) == first


class TestFaker:

    def test_bound_to_source(self, rng):
        assert rand.faker(rng).random is rng

    def test_process_source_shares_one_instance(self):
        assert rand.faker() is rand.faker(rand.source())
        assert rand.faker().random is rand.source()

    def test_private_sources_are_not_retained(self):
        """Nothing keeps a Faker alive once its generator is gone"""
        rng = random.Random(5)
        ref = weakref.ref(rand.faker(rng))
        gc.collect()
        assert ref() is None


class TestSeed:

    def test_same_seed_same_values(self):
        rand.seed(424242)
        first = [rand.ipv4(), rand.port(), rand.choice("abcdef")]
        rand.seed(424242)
        assert [rand.ipv4(), rand.port(), rand.choice("abcdef")] == first
