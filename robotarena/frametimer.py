"""Keeping a loop in step with a fixed frame duration."""

from __future__ import annotations

import time
from typing import Callable


class FrameTimer:
    """Measures frame durations and optionally waits for the frame to end."""

    def __init__(
        self,
        time_step: float = 1 / 60.0,
        clock: Callable[[], float] = time.perf_counter,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.time_step = time_step
        self.frame_time = 0.0
        self._clock = clock
        self._sleep = sleep
        self._start_of_frame = clock()

    def sync(self, wait: bool = True) -> None:
        """End the current frame, first waiting out its time step if ``wait``."""
        if wait:
            remaining = self._start_of_frame + self.time_step - self._clock()
            if remaining > 0:
                self._sleep(remaining)
        end_of_frame = self._clock()
        self.frame_time = end_of_frame - self._start_of_frame
        self._start_of_frame = end_of_frame

    def output(self) -> str:
        """Frames per second and frame time, as ``fps(ms ms)``."""
        fps = 1.0 / self.frame_time if self.frame_time else float("inf")
        return f"{fps:g}({self.frame_time * 1000:g} ms)"