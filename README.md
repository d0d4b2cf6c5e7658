# tilemerge

A sliding-tile number puzzle in the spirit of 2048, played line by line in
a terminal, together with the small game-loop pieces it is built from.

## Playing

After installing the package, start a game with:

```
tilemerge
```

Options:

- `--seed N`: seed the random source so a game can be repeated.
- `--width N`, `--height N`: blocks per row and per column (default 4 each;
  both must be at least 1).

The board is printed as right-aligned numbers, with `.` for an empty block.
Type a move and press Enter:

- left: `a`, `h` or `left`
- right: `d`, `l` or `right`
- up: `w`, `k` or `up`
- down: `s`, `j` or `down`
- quit: `q`, `quit` or `exit` (end of input also quits)

The board opens with two tiles. A new tile holds 4 one time in ten and 2
otherwise. A move slides every tile toward that edge; when a tile meets one
with the same number, the two merge into one tile holding their sum. After
any move that changes the board, a new tile appears on a random empty block.
The game ends, printing `Game Over`, as soon as every block holds a tile,
whether or not a merge would still be possible.

## Using the pieces in code

```python
from tilemerge.board import Board, Direction
from tilemerge.randomness import RandomSource

board = Board(RandomSource(42), 4, 4)
board.move(Direction.LEFT)   # True if anything slid or merged
print(board.numbers())       # rows of tile values, 0 for empty
print(board.is_full())
```

- `tilemerge.board`: `Board`, `Block`, `Unit` and `Direction`.
  `Board.move` slides and merges tiles and spawns a new one when the board
  changed; `Board.spawn_unit` places a tile on a random empty block;
  `Board.place_unit` puts a tile of a given value on a chosen block;
  `Board.numbers` and `Board.is_full` report the state; `Board.update`
  moves each `Unit`'s screen position toward its block.
- `tilemerge.randomness.RandomSource`: seeded integer and float draws
  (`get_int`, `get_from_int_to`, `get_float`, `get_from_float_to`).
- `tilemerge.scenes`: `Scene`, `SceneManager` (`add_scene`,
  `add_loading_scene`, `change_scene`, `change_scene_with_loading`,
  `wait_for_loading`, `update`, `render`, `release`), `GameScene` and
  `GameOverScene`.
- `tilemerge.cli`: `main` and `render_board`, which draws a board as text.
- `tilemerge.timer.Timer`: elapsed time between ticks, world time, a frame
  rate counted each second, an optional frame-rate lock in `tick`, and
  `status_lines` for display. It takes any clock function.
- `tilemerge.keys.KeyTracker`: "pressed once", "released once" and "held"
  checks on top of any function that reports whether a key code (0–255) is
  held.
- `tilemerge.animation.Animation`: frame lists and timed playback over a
  sprite sheet split into a grid; `frame_position` gives the current
  frame's top-left pixel.
- `tilemerge.effect.Effect`: a one-shot animation started centred on a point.
- `tilemerge.textdata`: comma-separated fields (`split_fields`,
  `join_fields`, `load_fields`, which reads at most the first 128 bytes of a
  file, and `save_fields`).
- `tilemerge.geometry`: `Rect`, `rect_make`, `rect_make_center`,
  `get_angle` and `get_distance`.

## What it does not do

There is no graphical window: the game is played as text, one typed command
per line, and tiles do not visibly slide. `Animation` and `Effect` only work
out which sprite-sheet frame to show; nothing loads or draws images.
`KeyTracker` needs a key-state function from the caller; the terminal game
does not use it. Games are not saved, and there is no score.