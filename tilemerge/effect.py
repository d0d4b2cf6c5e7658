"""A one-shot sprite sheet effect played at a point."""

from __future__ import annotations

from tilemerge.animation import Animation


class Effect:
    """Plays every frame of a sheet once, centred on where it was started."""

    def __init__(
        self,
        sheet_width: int,
        sheet_height: int,
        frame_width: int,
        frame_height: int,
        fps: float,
        elapsed_time: float,
    ):
        self.x = 0
        self.y = 0
        self.is_running = False
        self.elapsed_time = elapsed_time
        self.animation = Animation(sheet_width, sheet_height, frame_width, frame_height)
        self.animation.set_default_play_frames(False, False)
        self.animation.set_fps(fps)
        self.animation.stop()

    def update(self) -> None:
        """Advance the animation; the effect ends when playback does."""
        if not self.is_running:
            return
        self.animation.frame_update(self.elapsed_time)
        if not self.animation.is_playing:
            self.kill_effect()

    def start_effect(self, x: int, y: int) -> None:
        """Start playing with the frame centred on (x, y)."""
        self.x = x - self.animation.frame_width // 2
        self.y = y - self.animation.frame_height // 2
        self.is_running = True
        self.animation.start()

    def kill_effect(self) -> None:
        self.is_running = False

    def frame_position(self) -> tuple[int, int] | None:
        """Sheet position of the frame to draw, or None when idle."""
        if not self.is_running:
            return None
        return self.animation.frame_position()