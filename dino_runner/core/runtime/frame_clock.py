"""
frame_clock.py
--------------
Turns per-frame timestamps into per-cycle deltas.

The display driver hands over one timestamp per refresh (pygame ticks in
the real loop, plain numbers in tests). The clock remembers the previous
one so each cycle can tell how much time it covers.
"""

from dino_runner.core.debug.debug_logger import DebugLogger


class FrameClock:
    """Delta source for the update cycle."""

    def __init__(self):
        self.last_time = None

    @property
    def started(self) -> bool:
        return self.last_time is not None

    def start(self, now: float) -> None:
        """Anchor the clock; the first tick measures from here."""
        self.last_time = now
        DebugLogger.trace(f"Clock started at {now:.1f}", category="timing")

    def tick(self, now: float) -> float:
        """
        Advance to `now` and return the time since the previous tick.

        A timestamp earlier than the last one yields a zero delta, so
        accumulated time never runs backwards.
        """
        if self.last_time is None:
            self.start(now)
            return 0.0

        delta = now - self.last_time
        if delta < 0:
            DebugLogger.warn(
                f"Timestamp went backwards ({now:.1f} < {self.last_time:.1f})",
                category="timing"
            )
            delta = 0.0
        else:
            self.last_time = now

        return delta
