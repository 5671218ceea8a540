"""The entropy core: clock jitter in, bits and fixed-width integers out.

Each bit comes from busy-polling a clock until its sub-second nanosecond
reading changes.  Every reading, changed or not, is added into a 32-bit
accumulator; when a change is seen the accumulator is multiplied by an odd
constant and the top bit of the 32-bit product is the output.

Precondition: the clock's sub-second component must advance.  On a host
whose clock is frozen at sub-second granularity ``bit()`` spins forever
unless a ``max_polls`` budget is given.

Not thread-safe.  Give each thread its own ``QRNG`` or serialize calls.
"""

from __future__ import annotations

from collections.abc import Callable

from quantum_rand.clock import MASK32, MonotonicClock
from quantum_rand.errors import ClockStalledError

MIX_CONSTANT = 1210758371  # odd, so multiplication permutes the 32-bit space
WIDTHS = (8, 16, 32, 64, 128)


def to_signed(value: int, width: int) -> int:
    """Reinterpret an unsigned *width*-bit pattern as two's complement."""
    if value >> (width - 1):
        return value - (1 << width)
    return value


def _check_width(width: int) -> None:
    if width not in WIDTHS:
        raise ValueError(f"unsupported width {width!r}, expected one of {WIDTHS}")


class QRNG:
    """Timing-jitter random number generator.

    Parameters
    ----------
    clock:
        Zero-argument callable returning the current sub-second
        nanoseconds.  Defaults to :class:`~quantum_rand.clock.MonotonicClock`.
        Values are masked to 32 bits.
    max_polls:
        If set, one ``bit()`` call that reads the clock this many times
        without seeing a change raises :class:`ClockStalledError`.  ``None``
        polls without bound.

    Usage::

        rng = QRNG()
        rng.u8(), rng.i64(), rng.bool()
    """

    def __init__(
        self,
        clock: Callable[[], int] | None = None,
        max_polls: int | None = None,
    ) -> None:
        if max_polls is not None and max_polls < 1:
            raise ValueError(f"max_polls must be positive, got {max_polls}")
        self.last_ns = 0
        self.sum = 0
        self._clock = clock if clock is not None else MonotonicClock()
        self._max_polls = max_polls

    @property
    def clock(self) -> Callable[[], int]:
        return self._clock

    @property
    def state(self) -> tuple[int, int]:
        """``(sum, last_ns)`` snapshot."""
        return self.sum, self.last_ns

    # ── primitives ──

    def bit(self) -> int:
        """Poll the clock until it changes, then return one mixed bit."""
        polls = 0
        while True:
            ns = self._clock() & MASK32
            self.sum = (self.sum + ns) & MASK32
            if ns != self.last_ns:
                self.last_ns = ns
                return ((self.sum * MIX_CONSTANT) & MASK32) >> 31
            polls += 1
            if self._max_polls is not None and polls >= self._max_polls:
                raise ClockStalledError(polls, ns)

    def bool(self) -> bool:
        """One bit as a boolean."""
        return self.bit() != 0

    # ── integers ──

    def unsigned(self, width: int) -> int:
        """Assemble *width* bits, least significant first."""
        _check_width(width)
        value = 0
        for i in range(width):
            value |= self.bit() << i
        return value

    def signed(self, width: int) -> int:
        """Like :meth:`unsigned`, reinterpreted as two's complement."""
        return to_signed(self.unsigned(width), width)

    def bytes(self, n: int) -> bytes:
        """*n* random bytes, one ``u8()`` each."""
        if n < 0:
            raise ValueError(f"byte count must be non-negative, got {n}")
        return bytes(self.unsigned(8) for _ in range(n))

    def __repr__(self) -> str:
        name = getattr(self._clock, "name", None) or getattr(self._clock, "__name__", "?")
        return f"<QRNG clock={name!r} sum={self.sum} last_ns={self.last_ns}>"


def _unsigned_accessor(width: int):
    def accessor(self: QRNG) -> int:
        return self.unsigned(width)

    accessor.__name__ = f"u{width}"
    accessor.__qualname__ = f"QRNG.u{width}"
    accessor.__doc__ = f"Unsigned {width}-bit integer in [0, 2**{width} - 1]."
    return accessor


def _signed_accessor(width: int):
    def accessor(self: QRNG) -> int:
        return self.signed(width)

    accessor.__name__ = f"i{width}"
    accessor.__qualname__ = f"QRNG.i{width}"
    accessor.__doc__ = f"Signed {width}-bit integer (two's complement of u{width})."
    return accessor


for _width in WIDTHS:
    setattr(QRNG, f"u{_width}", _unsigned_accessor(_width))
    setattr(QRNG, f"i{_width}", _signed_accessor(_width))
del _width
