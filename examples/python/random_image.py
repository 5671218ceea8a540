#!/usr/bin/env python3
"""Fill a 512x512 grayscale image with clock-jitter bytes.

Usage:
    pip install -e '.[image]'
    python examples/python/random_image.py
"""

from PIL import Image

from quantum_rand import QRNG

rng = QRNG()
img = Image.new("L", (512, 512))
img.putdata([rng.u8() for _ in range(512 * 512)])
img.save("random.png")
print("Wrote random.png")
