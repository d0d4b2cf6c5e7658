"""Comma-separated value lists stored in small text files."""

from __future__ import annotations

import os
from collections.abc import Iterable

MAX_LOAD_BYTES = 128
SEPARATOR = ","


def split_fields(text: str) -> list[str]:
    """Split text on commas, dropping empty fields."""
    fields = [field for field in text.split(SEPARATOR) if field]
    if not fields:
        raise ValueError("text holds no fields")
    return fields


def join_fields(values: Iterable[str]) -> str:
    """Join values with commas."""
    return SEPARATOR.join(values)


def load_fields(path: str | os.PathLike[str]) -> list[str]:
    """Read at most the first 128 bytes of a file and split them into fields."""
    with open(path, "rb") as handle:
        raw = handle.read(MAX_LOAD_BYTES)
    raw = raw.split(b"\0", 1)[0]
    return split_fields(raw.decode("utf-8", errors="ignore"))


def save_fields(path: str | os.PathLike[str], values: Iterable[str]) -> None:
    """Write values to a file as one comma-separated line, replacing it."""
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(join_fields(values))