"""Play the tile-merging game in a terminal."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from tilemerge.board import DEFAULT_HEIGHT, DEFAULT_WIDTH, Board, Direction
from tilemerge.randomness import RandomSource
from tilemerge.scenes import (
    GAME_OVER_SCENE,
    GAME_SCENE,
    GameOverScene,
    GameScene,
    SceneManager,
)
from tilemerge.timer import Timer

LOCK_FPS = 60.0

COMMANDS = {
    "a": Direction.LEFT,
    "h": Direction.LEFT,
    "left": Direction.LEFT,
    "d": Direction.RIGHT,
    "l": Direction.RIGHT,
    "right": Direction.RIGHT,
    "w": Direction.UP,
    "k": Direction.UP,
    "up": Direction.UP,
    "s": Direction.DOWN,
    "j": Direction.DOWN,
    "down": Direction.DOWN,
}
QUIT_COMMANDS = {"q", "quit", "exit"}


def render_board(board: Board) -> str:
    """Draw the board as right-aligned numbers, '.' for an empty block."""
    numbers = board.numbers()
    widest = max((len(str(value)) for row in numbers for value in row), default=1)
    cell = max(widest, 4)
    return "\n".join(
        " ".join(f"{value if value else '.':>{cell}}" for value in row) for row in numbers
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tilemerge",
        description="Slide numbered tiles; equal tiles merge. Moves: w/a/s/d, h/j/k/l "
        "or up/down/left/right; q quits.",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="blocks per row")
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help="blocks per column")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    if args.width < 1 or args.height < 1:
        print("board must be at least one block each way", file=sys.stderr)
        return 2

    timer = Timer()
    manager = SceneManager()
    game = GameScene(
        manager,
        RandomSource(args.seed),
        args.width,
        args.height,
        elapsed_time=lambda: timer.elapsed_time,
    )
    game_over = GameOverScene()
    manager.add_scene(GAME_SCENE, game)
    manager.add_scene(GAME_OVER_SCENE, game_over)
    manager.change_scene(GAME_SCENE)

    try:
        while True:
            timer.tick()
            manager.update()
            if manager.current is game_over:
                print(manager.render())
                return 0
            assert game.board is not None
            print(render_board(game.board))
            print()
            line = sys.stdin.readline()
            if not line:
                return 0
            command = line.strip().lower()
            if command in QUIT_COMMANDS:
                return 0
            direction = COMMANDS.get(command)
            if direction is None:
                print(f"unknown command: {command!r}", file=sys.stderr)
                continue
            game.push_direction(direction)
    finally:
        manager.release()


if __name__ == "__main__":
    sys.exit(main())