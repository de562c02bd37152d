"""Frame timing: delta time and frames per second."""

from __future__ import annotations

import time
from typing import Callable, Optional


class TimeManager:
    """Measures the time between frames and the frame rate once per second."""

    def __init__(
        self,
        clock: Callable[[], float] = time.perf_counter,
        on_report: Optional[Callable[[int, float], None]] = None,
    ) -> None:
        self._clock = clock
        self._on_report = on_report
        self.dt = 0.0
        self.fps = 0
        self._frame_count = 0
        self._frame_time = 0.0
        self._prev = clock()

    def reset(self) -> None:
        """Start measuring from now."""
        self._prev = self._clock()

    def update(self) -> float:
        """Advance one frame and return the time it took, in seconds."""
        now = self._clock()
        self.dt = now - self._prev
        self._prev = now

        self._frame_count += 1
        self._frame_time += self.dt
        if self._frame_time >= 1.0:
            self.fps = int(self._frame_count / self._frame_time)
            self._frame_time = 0.0
            self._frame_count = 0
            if self._on_report is not None:
                self._on_report(self.fps, self.dt)
        return self.dt