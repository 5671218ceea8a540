"""NumPy array output backed by a timing-jitter QRNG.

Usage::

    from quantum_rand.numpy_compat import QRNGBitGenerator
    bg = QRNGBitGenerator()
    bg.random_raw(4)
    bg.integers(8, size=(512, 512))
"""

from __future__ import annotations

import operator

import numpy as np

from quantum_rand.core import QRNG, WIDTHS

_DTYPES = {
    (8, False): np.uint8,
    (16, False): np.uint16,
    (32, False): np.uint32,
    (64, False): np.uint64,
    (8, True): np.int8,
    (16, True): np.int16,
    (32, True): np.int32,
    (64, True): np.int64,
}


def _as_shape(size) -> tuple[int, ...]:
    """Normalise an int-like or sequence *size* to a non-negative shape."""
    try:
        shape = (operator.index(size),)
    except TypeError:
        shape = tuple(operator.index(d) for d in size)
    if any(d < 0 for d in shape):
        raise ValueError(f"negative dimensions are not allowed: {shape}")
    return shape


class QRNGBitGenerator:
    """A BitGenerator-like object that fills arrays from a ``QRNG``.

    Not a true numpy BitGenerator subclass (that requires C capsules).
    Every element costs *width* clock-jitter bits, so this is meant for
    modest array sizes.

    Parameters
    ----------
    rng : QRNG or None
        Generator to draw from.  If None, a fresh ``QRNG()`` is used.
    """

    def __init__(self, rng: QRNG | None = None):
        self._rng = rng if rng is not None else QRNG()

    @property
    def rng(self) -> QRNG:
        return self._rng

    def random_raw(self, n: int = 1) -> np.ndarray:
        """*n* random 64-bit words as a uint64 array."""
        return np.fromiter((self._rng.u64() for _ in range(n)), dtype=np.uint64, count=n)

    def integers(self, width: int, size=1, signed: bool = False) -> np.ndarray:
        """Array of *size* (int or shape) random *width*-bit integers."""
        if width not in WIDTHS:
            raise ValueError(f"unsupported width {width!r}, expected one of {WIDTHS}")
        if (width, signed) not in _DTYPES:
            raise ValueError(f"no numpy dtype holds {width}-bit integers")
        dtype = _DTYPES[(width, signed)]
        shape = _as_shape(size)
        count = int(np.prod(shape, dtype=np.int64))
        draw = self._rng.signed if signed else self._rng.unsigned
        flat = np.fromiter((draw(width) for _ in range(count)), dtype=dtype, count=count)
        return flat.reshape(shape)

    def bytes(self, n: int) -> bytes:
        """*n* random bytes straight from the core."""
        return self._rng.bytes(n)

    @property
    def state(self) -> dict:
        return {
            "bit_generator": "QRNGBitGenerator",
            "sum": self._rng.sum,
            "last_ns": self._rng.last_ns,
        }
