import struct
from pathlib import Path

import pytest

from brickbreaker.ball import Ball
from brickbreaker.brick import (
    BreakableBrick,
    BreakableHpBrick,
    BrickColor,
    BrickType,
    UnbreakableBrick,
)
from brickbreaker.brick_grid import BRICK_HEIGHT, BRICK_WIDTH, BrickGrid
from brickbreaker.geometry import Rect, Vec2

WALLS = Rect.from_pos_size(Vec2(24.0, 24.0), 605.0, 576.0)


@pytest.fixture
def grid(tmp_path):
    (tmp_path / "Edits").mkdir()
    return BrickGrid(WALLS, str(tmp_path) + "/")


def brick_rect(col, row):
    return Rect.from_pos_size(
        Vec2(24 + col * BRICK_WIDTH, 24 + row * BRICK_HEIGHT), BRICK_WIDTH, BRICK_HEIGHT
    )


def test_path_for_replaces_extension():
    g = BrickGrid(WALLS, "Files/BrickGrid/")
    assert g.path_for("Rounds/", "round1") == Path("Files/BrickGrid/Rounds/round1.dat")
    assert g.path_for("Rounds/", "round1.txt") == Path("Files/BrickGrid/Rounds/round1.dat")


def test_save_load_round_trip(grid):
    grid.add_brick(grid.create_brick(BrickType.BREAKABLE, brick_rect(0, 0), BrickColor.BLUE))
    grid.add_brick(grid.create_brick(BrickType.UNBREAKABLE, brick_rect(1, 0)))
    grid.save("Edits/", "level")
    original = [(b.type, b.rect) for b in grid]

    other = BrickGrid(WALLS, grid.directory, breakable_sprite="sheet")
    other.load("Edits/", "level")
    assert [(b.type, b.rect) for b in other] == original
    assert other.bricks[0].src_rect == BreakableBrick.SRC_RECT_BLUE
    assert other.bricks[0].sprite == "sheet"


def test_file_starts_with_brick_count(grid):
    grid.add_brick(grid.create_brick(BrickType.UNBREAKABLE, brick_rect(0, 0)))
    grid.add_brick(grid.create_brick(BrickType.UNBREAKABLE, brick_rect(2, 0)))
    grid.save("Edits/", "count")
    data = grid.path_for("Edits/", "count").read_bytes()
    assert data[:8] == struct.pack("<Q", 2)


def test_save_refuses_to_overwrite(grid):
    grid.save("Edits/", "same")
    with pytest.raises(FileExistsError):
        grid.save("Edits/", "same")


def test_load_missing_file(grid):
    with pytest.raises(FileNotFoundError):
        grid.load("Edits/", "missing")


def test_load_calls_hook_and_replaces_bricks(tmp_path):
    calls = []
    g = BrickGrid(WALLS, str(tmp_path) + "/", on_load=lambda: calls.append(1))
    g.save("", "empty")
    g.add_brick(g.create_brick(BrickType.BREAKABLE, brick_rect(0, 0)))
    g.load("", "empty")
    assert len(g) == 0
    assert calls == [1]


def test_load_rejects_hp_brick(grid):
    grid.add_brick(grid.create_brick(BrickType.BREAKABLE_HP, brick_rect(0, 0)))
    grid.save("Edits/", "hp")
    with pytest.raises(ValueError):
        grid.load("Edits/", "hp")


def test_delete(grid):
    grid.save("Edits/", "gone")
    grid.delete("Edits/", "gone")
    assert not grid.path_for("Edits/", "gone").exists()
    with pytest.raises(FileNotFoundError):
        grid.delete("Edits/", "gone")


def test_create_brick_types(grid):
    hp = grid.create_brick(BrickType.BREAKABLE_HP, brick_rect(0, 0))
    assert isinstance(hp, BreakableHpBrick)
    assert hp.hp == 5
    assert isinstance(grid.create_brick(BrickType.UNBREAKABLE), UnbreakableBrick)
    default_color = grid.create_brick(BrickType.BREAKABLE)
    assert default_color.src_rect == BreakableBrick.SRC_RECT_GREEN
    assert default_color.rect == Rect(0, BRICK_WIDTH, 0, BRICK_HEIGHT)


def test_add_brick_replaces_overlapping(grid):
    grid.add_brick(grid.create_brick(BrickType.BREAKABLE, brick_rect(0, 0)))
    grid.add_brick(grid.create_brick(BrickType.BREAKABLE, brick_rect(1, 0)))
    grid.add_brick(grid.create_brick(BrickType.UNBREAKABLE, brick_rect(0, 0)))
    assert len(grid) == 2
    assert [b.type for b in grid] == [BrickType.BREAKABLE, BrickType.UNBREAKABLE]


def test_remove_at(grid):
    grid.add_brick(grid.create_brick(BrickType.BREAKABLE, brick_rect(0, 0)))
    grid.add_brick(grid.create_brick(BrickType.BREAKABLE, brick_rect(1, 0)))
    grid.remove_at(brick_rect(1, 0).center)
    assert [b.rect for b in grid] == [brick_rect(0, 0)]
    grid.remove_at(Vec2(0, 0))
    assert len(grid) == 1


def test_is_round_finished(grid):
    assert grid.is_round_finished()
    grid.add_brick(grid.create_brick(BrickType.UNBREAKABLE, brick_rect(0, 0)))
    assert grid.is_round_finished()
    grid.add_brick(grid.create_brick(BrickType.BREAKABLE, brick_rect(1, 0)))
    assert not grid.is_round_finished()
    grid.clear()
    assert len(grid) == 0


def test_check_ball_collision_picks_nearest(grid):
    a = grid.create_brick(BrickType.BREAKABLE, brick_rect(0, 0))
    b = grid.create_brick(BrickType.BREAKABLE, brick_rect(1, 0))
    grid.add_brick(a)
    grid.add_brick(b)
    boundary = brick_rect(1, 0).left
    ball = Ball(Vec2(boundary + 5, brick_rect(0, 0).bottom + 5), 100.0)
    found = grid.check_ball_collision(ball)
    assert found == (b, 1)
    far = Ball(Vec2(300, 500), 100.0)
    assert grid.check_ball_collision(far) is None


def test_execute_vertical_hit_destroys_breakable(grid):
    rect = brick_rect(2, 3)
    grid.add_brick(grid.create_brick(BrickType.BREAKABLE, brick_rect(0, 0)))
    grid.add_brick(grid.create_brick(BrickType.BREAKABLE, rect))
    grid.add_brick(grid.create_brick(BrickType.BREAKABLE, brick_rect(5, 0)))
    ball = Ball(Vec2(rect.center.x, rect.top - 5), 100.0)
    hit_pos = grid.execute_ball_collision(ball, 1)
    assert hit_pos == rect.center
    assert ball.pos_center.y == rect.top - ball.radius
    assert ball.velocity.y == -100.0
    assert [b.rect for b in grid] == [brick_rect(0, 0), brick_rect(5, 0)]


def test_execute_side_hit_rebounds_x(grid):
    rect = brick_rect(4, 4)
    grid.add_brick(grid.create_brick(BrickType.UNBREAKABLE, rect))
    ball = Ball(Vec2(rect.left - 5, rect.center.y), 100.0)
    ball.velocity = Vec2(60.0, 80.0)
    assert grid.execute_ball_collision(ball, 0) is None
    assert ball.pos_center.x == rect.left - ball.radius
    assert ball.velocity == Vec2(-60.0, 80.0)
    assert len(grid) == 1
    assert grid.bricks[0].active_animation


def test_execute_bad_index(grid):
    with pytest.raises(IndexError):
        grid.execute_ball_collision(Ball(Vec2(0, 0), 1.0), 0)


def test_rect_for_round_pos_outside_grid(grid):
    assert grid.rect_for_round_pos(Vec2(0, 0)) == Rect(
        WALLS.left, BRICK_WIDTH, WALLS.top, BRICK_HEIGHT
    )


@pytest.mark.parametrize("pos", [Vec2(24, 24), Vec2(100, 57), Vec2(333, 211), Vec2(600, 400)])
def test_rect_for_round_pos_snaps_to_cells(grid, pos):
    rect = grid.rect_for_round_pos(pos)
    assert rect.width == BRICK_WIDTH
    assert rect.height == BRICK_HEIGHT
    center = rect.center
    assert (center.x - 1 - WALLS.left - BRICK_WIDTH // 2) % BRICK_WIDTH == 0
    assert (center.y - WALLS.top - BRICK_HEIGHT // 2) % BRICK_HEIGHT == 0
    assert abs(center.x - 1 - pos.x) <= BRICK_WIDTH
    assert abs(center.y - pos.y) <= BRICK_HEIGHT