"""Integer and float random draws in the style of a 15-bit generator."""

from __future__ import annotations

import random

RAND_MAX = 32767


class RandomSource:
    """Random numbers drawn from raw values in 0..RAND_MAX."""

    def __init__(self, seed: int | None = None):
        self._rng = random.Random(seed)

    def _raw(self) -> int:
        return self._rng.randint(0, RAND_MAX)

    def get_int(self, num: int) -> int:
        """A value in [0, |num|)."""
        if num == 0:
            raise ValueError("num must not be zero")
        return self._raw() % abs(num)

    def get_from_int_to(self, from_num: int, to_num: int) -> int:
        """A value between from_num and to_num inclusive."""
        span = to_num - from_num + 1
        if span == 0:
            raise ValueError("empty range")
        return self._raw() % abs(span) + from_num

    def get_float(self, num: float) -> float:
        """A value between 0 and num inclusive."""
        return self._raw() / RAND_MAX * num

    def get_from_float_to(self, from_num: float, to_num: float) -> float:
        """A value between from_num and to_num inclusive."""
        return self._raw() / RAND_MAX * (to_num - from_num) + from_num