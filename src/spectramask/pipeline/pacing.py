"""
Frame Pacing
============

Best-effort pacing of the video loop to the source's nominal frame rate,
and a once-per-second measured FPS counter.

No guarantee of an exact frame rate: a frame becomes eligible once at
least one nominal interval has elapsed since the previous one.
"""

import logging
import time
from typing import Callable, Optional


logger = logging.getLogger(__name__)


Clock = Callable[[], float]


class FramePacer:
    """
    Decide when the next frame is due.

    Attributes:
        fps: Nominal frame rate
        interval: Seconds between eligible ticks
    """

    def __init__(self, fps: float, clock: Clock = time.perf_counter) -> None:
        """
        Initialize pacer.

        Args:
            fps: Nominal frames per second. Must be > 0.
            clock: Monotonic clock in seconds
        """
        if fps <= 0:
            raise ValueError(f"fps must be > 0, got {fps}")

        self.fps = fps
        self.interval = 1.0 / fps
        self._clock = clock
        self._last_tick: Optional[float] = None

    def ready(self) -> bool:
        """Return True (and start a new interval) if a frame is due."""
        now = self._clock()
        if self._last_tick is None or now - self._last_tick >= self.interval:
            self._last_tick = now
            return True
        return False

    def remaining(self) -> float:
        """Seconds until the next frame is due (0 if already due)."""
        if self._last_tick is None:
            return 0.0
        return max(0.0, self.interval - (self._clock() - self._last_tick))


class FpsCounter:
    """
    Count processed frames per whole second.

    The measured value is updated once per second and is None until the
    first full second has passed.
    """

    def __init__(self, clock: Clock = time.perf_counter) -> None:
        self._clock = clock
        self._window_start = clock()
        self._count = 0
        self.fps: Optional[float] = None

    def tick(self) -> Optional[float]:
        """Record one processed frame and return the current measurement."""
        self._count += 1
        now = self._clock()
        elapsed = now - self._window_start
        if elapsed >= 1.0:
            self.fps = self._count / elapsed
            self._count = 0
            self._window_start = now
        return self.fps
