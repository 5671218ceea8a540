"""
quantum-rand: random numbers from clock jitter.

Busy-polls a high-resolution clock, folds every reading into a 32-bit
accumulator and emits one mixed bit each time the sub-second reading
changes.  Bits are assembled into 8- to 128-bit signed and unsigned
integers.  Not a cryptographic source.
"""

__version__ = "0.1.0"

from quantum_rand.clock import ClockSource, ReplayClock, get_clock
from quantum_rand.core import MIX_CONSTANT, QRNG, WIDTHS
from quantum_rand.errors import (
    ClockExhaustedError,
    ClockStalledError,
    QRNGError,
    UnknownClockError,
)

__all__ = [
    "QRNG",
    "ClockSource",
    "ReplayClock",
    "get_clock",
    "MIX_CONSTANT",
    "WIDTHS",
    "QRNGError",
    "ClockStalledError",
    "ClockExhaustedError",
    "UnknownClockError",
    "__version__",
]
