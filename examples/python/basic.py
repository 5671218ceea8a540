#!/usr/bin/env python3
"""Draw a few values of every width from the default monotonic clock.

Usage:
    pip install -e .
    python examples/python/basic.py
"""

from quantum_rand import QRNG, WIDTHS

rng = QRNG()
print(rng)

print(f"\nbool: {rng.bool()}")
for w in WIDTHS:
    print(f"u{w:<4} {rng.unsigned(w)}")
    print(f"i{w:<4} {rng.signed(w)}")

print(f"\n16 bytes (hex): {rng.bytes(16).hex()}")
print(f"\nstate (sum, last_ns): {rng.state}")
