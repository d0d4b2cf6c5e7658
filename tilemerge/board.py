"""The tile-merging board: blocks on a grid, numbered units that slide and merge."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

BLOCK_SIZE = 100
BLOCK_GAP = 20
DEFAULT_WIDTH = 4
DEFAULT_HEIGHT = 4
UNIT_SPEED = 5000

SPAWN_CHANCE = 8
SPAWN_HIT = 7
FOUR_CHANCE = 10
FOUR_HIT = 9

# Sprite column for each tile value; 0 means "no tile shown".
FRAME_FOR_NUMBER = {0: -1, **{2 ** (column + 1): column for column in range(11)}}


class IntSource(Protocol):
    def get_int(self, num: int) -> int: ...


class Direction(Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


@dataclass(eq=False)
class Block:
    """One cell of the board, with its screen rectangle and the unit it holds."""

    x: int
    y: int
    width: int
    height: int
    unit: Unit | None = None

    @property
    def pos(self) -> tuple[int, int]:
        return (self.x, self.y)

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)


@dataclass(eq=False)
class Unit:
    """A numbered tile that glides toward the block it belongs to."""

    x: int
    y: int
    width: int
    height: int
    number: int = 0
    frame_x: int = -1
    block: Block | None = None
    speed: int = UNIT_SPEED

    @classmethod
    def on_block(cls, block: Block) -> Unit:
        unit = cls(block.x, block.y, block.width, block.height, block=block)
        block.unit = unit
        return unit

    def set_number(self, number: int) -> None:
        """Set the value; a known value also selects its sprite frame."""
        self.number = number
        frame = FRAME_FOR_NUMBER.get(number)
        if frame is not None:
            self.frame_x = frame

    def set_random_number(self, rng: IntSource) -> None:
        """Take 4 one time in ten, otherwise 2."""
        self.set_number(4 if rng.get_int(FOUR_CHANCE) == FOUR_HIT else 2)

    @property
    def pos(self) -> tuple[int, int]:
        return (self.x, self.y)

    def update(self, elapsed: float) -> None:
        """Move toward the owning block by speed * elapsed, never overshooting."""
        if self.block is None:
            return
        step = self.speed * elapsed
        self.x = _approach(self.x, self.block.x, step)
        self.y = _approach(self.y, self.block.y, step)


def _approach(current: int, target: int, step: float) -> int:
    if current < target:
        return min(int(current + step), target)
    if current > target:
        return max(int(current - step), target)
    return current


class Board:
    """A grid of blocks on which units slide, merge and spawn."""

    def __init__(self, rng: IntSource, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT):
        if width < 1 or height < 1:
            raise ValueError("board must be at least one block each way")
        self.rng = rng
        self.width = width
        self.height = height
        pitch = BLOCK_SIZE + BLOCK_GAP
        self.blocks = [
            [
                Block(pitch * col + BLOCK_GAP, pitch * row + BLOCK_GAP, BLOCK_SIZE, BLOCK_SIZE)
                for col in range(width)
            ]
            for row in range(height)
        ]
        self.units: list[Unit] = []
        self.spawn_unit()
        self.spawn_unit()

    @property
    def unit_count(self) -> int:
        return len(self.units)

    def is_full(self) -> bool:
        """True when every block holds a unit, which ends the game."""
        return self.unit_count == self.width * self.height

    def numbers(self) -> tuple[tuple[int, ...], ...]:
        """Tile values row by row, 0 for an empty block."""
        return tuple(
            tuple(block.unit.number if block.unit else 0 for block in row)
            for row in self.blocks
        )

    def place_unit(self, row: int, col: int, number: int) -> Unit:
        """Put a unit with the given value on an empty block."""
        block = self.blocks[row][col]
        if block.unit is not None:
            raise ValueError(f"block ({row}, {col}) is occupied")
        unit = Unit.on_block(block)
        unit.set_number(number)
        self.units.append(unit)
        return unit

    def spawn_unit(self) -> Unit:
        """Create a unit on a randomly chosen empty block."""
        empty = [block for row in self.blocks for block in row if block.unit is None]
        if not empty:
            raise RuntimeError("no empty block to spawn a unit on")
        while True:
            for block in empty:
                if self.rng.get_int(SPAWN_CHANCE) == SPAWN_HIT:
                    unit = Unit.on_block(block)
                    unit.set_random_number(self.rng)
                    self.units.append(unit)
                    return unit

    def move(self, direction: Direction) -> bool:
        """Slide every unit toward one edge; spawn a new unit if anything changed."""
        results = [self._slide_line(line) for line in self._lines(direction)]
        handled = any(results)
        if handled:
            self.spawn_unit()
        return handled

    def update(self, elapsed: float) -> None:
        """Advance the sliding animation of every unit."""
        for unit in self.units:
            unit.update(elapsed)

    def _lines(self, direction: Direction) -> list[list[Block]]:
        """Lines of blocks, each ordered from the edge units move toward."""
        rows = self.blocks
        columns = [list(column) for column in zip(*rows)]
        if direction is Direction.LEFT:
            return [list(row) for row in rows]
        if direction is Direction.RIGHT:
            return [row[::-1] for row in rows]
        if direction is Direction.UP:
            return columns
        return [column[::-1] for column in columns]

    def _slide_line(self, line: list[Block]) -> bool:
        handled = False
        for start in range(1, len(line)):
            for pos in range(start, 0, -1):
                source, target = line[pos], line[pos - 1]
                occupied = target.unit is not None
                if self._shift(source, target):
                    handled = True
                if occupied:
                    break
        return handled

    def _shift(self, source: Block, target: Block) -> bool:
        moving = source.unit
        if moving is None:
            return False
        if target.unit is None:
            moving.block = target
            target.unit = moving
            source.unit = None
            return True
        if moving.number == target.unit.number:
            target.unit.set_number(target.unit.number + moving.number)
            self.units.remove(moving)
            source.unit = None
            return True
        return False