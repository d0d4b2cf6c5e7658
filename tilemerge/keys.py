"""Edge detection on key presses from a polled key-state function."""

from __future__ import annotations

from collections.abc import Callable

KEYMAX = 256


class KeyTracker:
    """Turns a "is this key held now?" query into press and release events."""

    def __init__(self, is_pressed: Callable[[int], bool]):
        self._is_pressed = is_pressed
        self._down: set[int] = set()
        self._up: set[int] = set()

    @staticmethod
    def _check(key: int) -> None:
        if not 0 <= key < KEYMAX:
            raise ValueError(f"key code {key} out of range 0..{KEYMAX - 1}")

    def is_once_key_down(self, key: int) -> bool:
        """True only on the first poll after the key goes down."""
        self._check(key)
        if self._is_pressed(key):
            if key not in self._down:
                self._down.add(key)
                return True
        else:
            self._down.discard(key)
        return False

    def is_once_key_up(self, key: int) -> bool:
        """True only on the first poll after the key is released."""
        self._check(key)
        if self._is_pressed(key):
            self._up.add(key)
        elif key in self._up:
            self._up.discard(key)
            return True
        return False

    def is_stay_key_down(self, key: int) -> bool:
        """True for as long as the key is held."""
        self._check(key)
        return bool(self._is_pressed(key))