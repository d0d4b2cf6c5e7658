"""Frame timer measuring elapsed time, world time and frame rate."""

from __future__ import annotations

import time
from collections.abc import Callable


class Timer:
    """Tracks time between ticks, optionally holding to a frame-rate cap."""

    def __init__(self, clock: Callable[[], float] | None = None):
        self._clock = clock or time.perf_counter
        self._last_time = self._clock()
        self._elapsed = 0.0
        self._frame_rate = 0
        self._fps_frame_count = 0
        self._fps_time_elapsed = 0.0
        self._world_time = 0.0

    @property
    def elapsed_time(self) -> float:
        """Seconds between the last two ticks."""
        return self._elapsed

    @property
    def world_time(self) -> float:
        """Total seconds counted by ticks."""
        return self._world_time

    @property
    def frame_rate(self) -> int:
        """Frames counted in the last full second."""
        return self._frame_rate

    def tick(self, lock_fps: float = 0.0) -> None:
        """Record a frame, waiting until 1/lock_fps seconds have passed if set."""
        current = self._clock()
        self._elapsed = current - self._last_time
        if lock_fps > 0.0:
            min_interval = 1.0 / lock_fps
            while self._elapsed < min_interval:
                current = self._clock()
                self._elapsed = current - self._last_time
        self._last_time = current
        self._fps_frame_count += 1
        self._fps_time_elapsed += self._elapsed
        self._world_time += self._elapsed
        if self._fps_time_elapsed > 1.0:
            self._frame_rate = self._fps_frame_count
            self._fps_frame_count = 0
            self._fps_time_elapsed = 0.0

    def frame_rate_text(self) -> str:
        return f"FPS : {self._frame_rate}"

    def status_lines(self) -> list[str]:
        """Frame rate, world time and elapsed time as display lines."""
        return [
            f"framePerSec : {self._frame_rate}",
            f"worldTime : {self._world_time:f}",
            f"elapsedTime : {self._elapsed:f}",
        ]