"""Clock sources that feed the entropy core.

Every source yields the sub-second component of "now" in nanoseconds,
reduced to a 32-bit unsigned value.  The core only ever calls the source;
it never inspects it, so any zero-argument callable returning an int
works in its place.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from collections.abc import Iterable

from quantum_rand.errors import ClockExhaustedError, UnknownClockError

NS_PER_SECOND = 1_000_000_000
MASK32 = 0xFFFFFFFF


def subsec_ns(ns: int) -> int:
    """Sub-second part of a nanosecond timestamp as a 32-bit unsigned value."""
    return (ns % NS_PER_SECOND) & MASK32


class ClockSource(ABC):
    """Base class for a clock the core can poll.

    Subclasses declare ``name``/``description`` and implement ``read``.
    ``clock_id`` names the clock understood by ``time.get_clock_info``.
    """

    name: str = "unnamed"
    description: str = ""
    clock_id: str | None = None

    def is_available(self) -> bool:
        """Return True if the clock can be read on this machine."""
        try:
            self.read()
        except (OSError, AttributeError):
            return False
        return True

    @abstractmethod
    def read(self) -> int:
        """Return the current sub-second nanoseconds (0 <= value < 2**32)."""
        ...

    def info(self) -> dict:
        """Implementation details as reported by the interpreter."""
        out = {"name": self.name, "description": self.description}
        if self.clock_id is None:
            return out
        ci = time.get_clock_info(self.clock_id)
        out.update(
            implementation=ci.implementation,
            resolution=ci.resolution,
            monotonic=ci.monotonic,
            adjustable=ci.adjustable,
        )
        return out

    def __call__(self) -> int:
        return self.read()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"


class MonotonicClock(ClockSource):
    """``time.monotonic_ns()``, the steady clock the OS uses for intervals.

    The low digits of the nanosecond field move with interrupt latency and
    scheduling; reading it back to back is what the core turns into bits.
    """

    name = "monotonic"
    description = "Steady monotonic clock, sub-second nanoseconds"
    clock_id = "monotonic"

    def read(self) -> int:
        return subsec_ns(time.monotonic_ns())


class PerfCounterClock(ClockSource):
    """``time.perf_counter_ns()``, the highest-resolution timer available."""

    name = "perf_counter"
    description = "Performance counter, sub-second nanoseconds"
    clock_id = "perf_counter"

    def read(self) -> int:
        return subsec_ns(time.perf_counter_ns())


class WallClock(ClockSource):
    """``time.time_ns()``.  Adjustable by NTP, so steps are possible."""

    name = "wall"
    description = "System wall clock, sub-second nanoseconds"
    clock_id = "time"

    def read(self) -> int:
        return subsec_ns(time.time_ns())


class ReplayClock(ClockSource):
    """Replays a fixed sequence of samples, one per read.

    Makes the core deterministic: the same samples always produce the same
    bits and the same final state.  ``reads`` counts how many samples have
    been handed out.
    """

    name = "replay"
    description = "Fixed sample sequence"

    def __init__(self, samples: Iterable[int]) -> None:
        self._samples = [int(s) & MASK32 for s in samples]
        self.reads = 0

    def is_available(self) -> bool:
        return self.remaining > 0

    @property
    def remaining(self) -> int:
        return len(self._samples) - self.reads

    def read(self) -> int:
        if self.reads >= len(self._samples):
            raise ClockExhaustedError(self.reads)
        value = self._samples[self.reads]
        self.reads += 1
        return value


ALL_CLOCKS: dict[str, type[ClockSource]] = {
    cls.name: cls for cls in (MonotonicClock, PerfCounterClock, WallClock)
}

DEFAULT_CLOCK = MonotonicClock.name


def get_clock(name: str) -> ClockSource:
    """Instantiate the registered clock called *name*."""
    try:
        cls = ALL_CLOCKS[name]
    except KeyError:
        raise UnknownClockError(name, sorted(ALL_CLOCKS)) from None
    return cls()

