"""Tests for clock sources."""

import time

import pytest

from quantum_rand.clock import (
    ALL_CLOCKS,
    DEFAULT_CLOCK,
    MonotonicClock,
    ReplayClock,
    get_clock,
    subsec_ns,
)
from quantum_rand.errors import ClockExhaustedError, UnknownClockError
from quantum_rand.platform import detect_available_clocks, platform_info


class TestSubsec:
    def test_drops_whole_seconds(self):
        assert subsec_ns(5_000_000_123) == 123

    def test_below_one_second(self):
        assert subsec_ns(999_999_999) == 999_999_999

    def test_fits_32_bits(self):
        assert subsec_ns(time.monotonic_ns()) < 2**32


class TestRegisteredClocks:
    @pytest.mark.parametrize("name", sorted(ALL_CLOCKS))
    def test_read_in_range(self, name):
        value = get_clock(name).read()
        assert 0 <= value < 1_000_000_000

    @pytest.mark.parametrize("name", sorted(ALL_CLOCKS))
    def test_callable(self, name):
        assert isinstance(get_clock(name)(), int)

    @pytest.mark.parametrize("name", sorted(ALL_CLOCKS))
    def test_info(self, name):
        info = get_clock(name).info()
        assert info["name"] == name
        assert info["resolution"] > 0
        assert "implementation" in info

    @pytest.mark.parametrize("cls", list(ALL_CLOCKS.values()), ids=lambda c: c.name)
    def test_has_metadata(self, cls):
        assert isinstance(cls.name, str) and len(cls.name) > 0
        assert isinstance(cls.description, str)
        assert isinstance(cls().is_available(), bool)

    def test_default_is_monotonic(self):
        assert DEFAULT_CLOCK == "monotonic"
        assert isinstance(get_clock(DEFAULT_CLOCK), MonotonicClock)

    def test_unknown(self):
        with pytest.raises(UnknownClockError) as exc:
            get_clock("sundial")
        assert exc.value.name == "sundial"
        assert "monotonic" in str(exc.value)

    def test_unknown_is_value_error(self):
        with pytest.raises(ValueError):
            get_clock("sundial")


class TestReplayClock:
    def test_replays_in_order(self):
        clock = ReplayClock([3, 1, 2])
        assert [clock(), clock(), clock()] == [3, 1, 2]
        assert clock.reads == 3
        assert clock.remaining == 0

    def test_exhausted(self):
        clock = ReplayClock([1])
        clock.read()
        assert not clock.is_available()
        with pytest.raises(ClockExhaustedError) as exc:
            clock.read()
        assert exc.value.reads == 1

    def test_masks_samples(self):
        assert ReplayClock([2**32 + 9]).read() == 9

    def test_info_without_clock_id(self):
        assert ReplayClock([]).info() == {"name": "replay", "description": "Fixed sample sequence"}


class TestPlatform:
    def test_detects_monotonic(self):
        names = [c.name for c in detect_available_clocks()]
        assert "monotonic" in names

    def test_platform_info(self):
        info = platform_info()
        assert set(info) == {"system", "machine", "python", "interpreter"}
