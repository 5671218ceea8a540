"""Platform detection: discover readable clocks."""

from __future__ import annotations

import platform as _platform

from quantum_rand.clock import ALL_CLOCKS, ClockSource


def detect_available_clocks() -> list[ClockSource]:
    """Instantiate and return all clocks readable on this machine."""
    available: list[ClockSource] = []
    for cls in ALL_CLOCKS.values():
        src = cls()
        if src.is_available():
            available.append(src)
    return available


def platform_info() -> dict:
    """Return basic platform metadata."""
    return {
        "system": _platform.system(),
        "machine": _platform.machine(),
        "python": _platform.python_version(),
        "interpreter": _platform.python_implementation(),
    }
