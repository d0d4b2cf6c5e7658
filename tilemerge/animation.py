"""Frame-based sprite sheet animation."""

from __future__ import annotations

from collections.abc import Iterable


class Animation:
    """Plays a list of frame indices over a sprite sheet split into a grid."""

    def __init__(self, total_width: int, total_height: int, frame_width: int, frame_height: int):
        if frame_width <= 0 or frame_height <= 0:
            raise ValueError("frame size must be positive")
        self.frame_width = frame_width
        self.frame_height = frame_height
        columns = total_width // frame_width
        rows = total_height // frame_height
        self.frame_count = columns * rows
        self._frames = [
            (col * frame_width, row * frame_height)
            for row in range(rows)
            for col in range(columns)
        ]
        self.loop = False
        self._play_list: list[int] = []
        self._update_interval = 0.0
        self._elapsed = 0.0
        self._index = 0
        self._playing = False
        self.set_default_play_frames()

    @property
    def play_list(self) -> tuple[int, ...]:
        return tuple(self._play_list)

    @property
    def play_index(self) -> int:
        return self._index

    @property
    def is_playing(self) -> bool:
        return self._playing

    def set_default_play_frames(self, reverse: bool = False, loop: bool = False) -> None:
        """Play every frame in order, optionally going back again."""
        self.loop = loop
        n = self.frame_count
        frames = list(range(n))
        if reverse:
            back_stop = 0 if loop else -1
            frames.extend(range(n - 2, back_stop, -1))
        self._play_list = frames

    def set_play_frames(self, frames: Iterable[int], loop: bool = False) -> None:
        """Play an explicit sequence of frame indices."""
        self.loop = loop
        self._play_list = list(frames)

    def set_play_range(self, start: int, end: int, reverse: bool = False, loop: bool = False) -> None:
        """Play frames from start to end inclusive.

        A range whose ends are equal clears the list and stops playback.
        """
        self.loop = loop
        self._play_list = []
        if start == end:
            self.stop()
            return
        if start > end:
            frames = list(range(start, end - 1, -1))
            if reverse and loop:
                frames.extend(range(end + 1, start))
        elif reverse:
            if loop:
                frames = list(range(start, end + 1))
                frames.extend(range(end - 1, start, -1))
            else:
                # Counting down from a lower start yields no frames.
                frames = list(range(start, end - 1, -1))
        else:
            frames = list(range(start, end + 1))
        self._play_list = frames

    def set_fps(self, frames_per_second: float) -> None:
        """Set how many frame advances happen per second."""
        if frames_per_second <= 0:
            raise ValueError("frames per second must be positive")
        self._update_interval = 1.0 / frames_per_second

    def frame_update(self, elapsed: float) -> None:
        """Advance the clock by elapsed seconds."""
        if not self._playing:
            return
        self._elapsed += elapsed
        if self._elapsed < self._update_interval:
            return
        self._elapsed = 0.0
        self._index += 1
        if self._index == len(self._play_list):
            if self.loop:
                self._index = 0
            else:
                self._index -= 1
                self._playing = False

    def start(self) -> None:
        self._playing = True
        self._index = 0

    def stop(self) -> None:
        self._playing = False
        self._index = 0

    def pause(self) -> None:
        self._playing = False

    def resume(self) -> None:
        self._playing = True

    def frame_position(self) -> tuple[int, int]:
        """Top-left pixel of the current frame in the sheet."""
        return self._frames[self._play_list[self._index]]