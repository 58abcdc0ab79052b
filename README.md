# brickbreaker

The game model of a brick-breaking arcade game. It opens no window and
draws to no real screen. A front end feeds it input events and time steps,
then reads back its state.

## Modules

- `brickbreaker.geometry` provides the immutable `Vec2` and the `Rect` given by its edges. `Rect` has `from_center`, `from_pos_size`, `overlaps` and `contains`.
- `brickbreaker.ball` provides `Ball`, with movement, `rebound_x`/`rebound_y`, placement against a brick, and `do_wall_collision`. That method returns a `WallHit`. The module also has `Player`.
- `brickbreaker.paddle` provides `Paddle` with `Size`:
  - keyboard movement for player 1 (`A`/`D`) or player 2 (left/right arrows);
  - growing and shrinking;
  - `do_ball_collision`;
  - the sliding exit animation at the end of a round.
- `brickbreaker.brick` provides `BreakableBrick`, `BreakableHpBrick` and `UnbreakableBrick`. They share the binary record format written by `Brick.write`. `read_brick` or `Brick.read` reads a record back.
- `brickbreaker.brick_grid` provides `BrickGrid`. It adds bricks, replacing any brick they overlap, and removes them. It snaps positions to grid cells (`rect_for_round_pos`) and finds the nearest brick a ball touches (`check_ball_collision`). It resolves that hit (`execute_ball_collision`). It also saves, loads and deletes level files (`.dat`).
- `brickbreaker.game_stats` provides `GameStats`: a score counted up over two seconds and rounded to hundreds, lives, rounds, a play timer and the high score. It also has `read_high_score` and `format_play_time`.
- `brickbreaker.animation` provides `Animation`, a strip of frames advanced at a fixed hold time.
- `brickbreaker.character` provides `Character`, a walker with one animation per `Sequence` and a short hit flash.
- `brickbreaker.keyboard` provides `Keyboard` and `KeyEvent`: held keys plus key and character queues that keep the last four entries.
- `brickbreaker.mouse` provides `Mouse` and `MouseEvent`: cursor and button state plus a queue of the last four events.
- `brickbreaker.font` provides `Font` for sheets of 32×3 glyphs. It maps glyphs and lays text out (`layout`, `layout_centered`, `text_rect`). It also has `longest_line_length` and `line_count`.
- `brickbreaker.framebuffer` provides `Framebuffer`, an RGB pixel buffer (800×600 by default) with lines, filled circles and sectors, circle outlines, rectangles and a darkening "disabled" overlay.
- `brickbreaker.sprites` provides `Surface` and `draw_sprite`. `draw_sprite` blits a clipped source rectangle through an effect callable `effect(color, x, y, framebuffer)`.

## Installing

```
pip install .
```

## Example

```python
from brickbreaker.ball import Ball, WallHit
from brickbreaker.brick import BrickColor, BrickType
from brickbreaker.brick_grid import BrickGrid
from brickbreaker.geometry import Rect, Vec2

walls = Rect.from_pos_size(Vec2(24.0, 24.0), 605.0, 576.0)

grid = BrickGrid(walls, "levels/")
cell = grid.rect_for_round_pos(Vec2(100, 100))
grid.add_brick(grid.create_brick(BrickType.BREAKABLE, cell, BrickColor.RED))
grid.save("", "round1")          # writes levels/round1.dat; FileExistsError if it exists

ball = Ball(Vec2(300.0, 300.0), speed=580.0, radius=10.0)   # starts moving down
while True:
    ball.update(0.0025)
    if ball.do_wall_collision(walls) is WallHit.BOTTOM_WALL:
        print("ball lost")
        break
    found = grid.check_ball_collision(ball)
    if found is not None:
        brick, index = found
        centre = grid.execute_ball_collision(ball, index)
        if centre is not None:
            print("brick destroyed at", centre)
```

`BrickGrid.load` raises `FileNotFoundError` for a missing level file. It raises `ValueError` for a truncated or malformed one.

## What it does not do

The package has the pieces of the game but no game loop that ties them together. It has no manager that keeps balls waiting on a paddle, shoots them or counts lost balls. There are no menus, editor screen or message boxes. It does not read image files: a `Surface` is built from pixel lists. Its `Framebuffer` is never presented in a window. There is no sound and no command to run.

## Running the tests

```
pip install .[test]
pytest
```