"""Exceptions raised by quantum-rand.

The core never raises on its own; these only surface when a caller opts
into a polling budget, replays a finite clock, or asks for a clock that
does not exist.
"""

from __future__ import annotations


class QRNGError(Exception):
    """Base class for quantum-rand errors."""


class ClockStalledError(QRNGError, RuntimeError):
    """The clock did not change within the polling budget of one bit."""

    def __init__(self, polls: int, sample: int) -> None:
        self.polls = polls
        self.sample = sample
        super().__init__(
            f"clock sample stuck at {sample} for {polls} polls; "
            "the host clock is not advancing at sub-second resolution"
        )


class ClockExhaustedError(QRNGError):
    """A replayed clock ran out of samples."""

    def __init__(self, reads: int) -> None:
        self.reads = reads
        super().__init__(f"replay clock exhausted after {reads} reads")


class UnknownClockError(QRNGError, ValueError):
    """No clock source is registered under the requested name."""

    def __init__(self, name: str, known: list[str]) -> None:
        self.name = name
        self.known = known
        super().__init__(f"unknown clock {name!r} (choose from: {', '.join(known)})")
