# tests/test_data_models.py
import random

import pytest

from flappy_console.console import CellBuffer
from flappy_console.constants import YELLOW, RED
from flappy_console.data_models import GameConfig, Obstacle, Player


def test_spawned_player_has_initial_speed():
    player = Player.spawn(40, 25)
    assert (player.x, player.y, player.speed) == (40, 25, 1.0)


def test_flap_resets_speed_and_jumps_two_rows():
    player = Player(x=40, y=10, speed=7.3)
    player.flap()
    assert player.y == 8
    assert player.speed == 1.0


def test_flap_near_top_is_clamped_by_next_gravity_step():
    player = Player(x=40, y=1, speed=3.0)
    player.flap()
    assert player.y == -1
    player.apply_gravity(0.0)
    assert player.y == 0


def test_apply_gravity_honours_config():
    player = Player.spawn(40, 25)
    player.apply_gravity(80.0, GameConfig(gravity=0.0))
    assert player.y == 26
    assert player.speed == 1.0


def test_player_renders_single_yellow_cell():
    buf = CellBuffer(80, 50)
    Player.spawn(40, 25).render(buf)
    cells = buf.positions_of("@")
    assert list(cells) == [(40, 25)]
    assert cells[(40, 25)].fg == YELLOW


@pytest.mark.parametrize("score", range(0, 30))
def test_spawned_obstacle_geometry(score):
    rng = random.Random(score)
    obstacle = Obstacle.spawn(80, score, rng)
    assert obstacle.x == 80
    assert 10 <= obstacle.gap_y < 40
    assert obstacle.size == max(2, 20 - score)


def test_obstacle_spawn_is_deterministic_for_a_seed():
    first = [Obstacle.spawn(80, 0, random.Random(42)).gap_y for _ in range(3)]
    second = [Obstacle.spawn(80, 0, random.Random(42)).gap_y for _ in range(3)]
    assert first == second


def test_move_left():
    obstacle = Obstacle(x=5, gap_y=20, size=10)
    obstacle.move_left()
    obstacle.move_left()
    assert obstacle.x == 3


@pytest.mark.parametrize("px,py,hit", [
    (40, 19, True),
    (40, 20, False),
    (40, 25, False),
    (40, 30, False),
    (40, 31, True),
    (40, 0, True),
    (41, 0, False),
    (39, 49, False),
])
def test_intersects(px, py, hit):
    obstacle = Obstacle(x=40, gap_y=25, size=10)
    assert obstacle.intersects(Player(x=px, y=py)) is hit


def test_obstacle_render_leaves_gap_band_empty():
    buf = CellBuffer(80, 50)
    Obstacle(x=10, gap_y=25, size=10).render(buf, 50)

    bars = buf.positions_of("|")
    rows = sorted(y for (_, y) in bars)
    assert rows == list(range(0, 20)) + list(range(30, 50))
    assert all(x == 10 for (x, _) in bars)
    assert all(cell.fg == RED for cell in bars.values())


def test_obstacle_off_the_right_edge_draws_nothing():
    buf = CellBuffer(80, 50)
    Obstacle(x=80, gap_y=25, size=10).render(buf, 50)
    assert buf.positions_of("|") == {}


@pytest.mark.parametrize("overrides", [
    {"player_x": 0},
    {"player_x": -3},
    {"player_x": 80},
    {"screen_width": 20, "player_x": 25},
    {"gap_y_min": 40, "gap_y_max": 40},
    {"gap_y_min": 30, "gap_y_max": 10},
    {"min_gap_size": 1},
])
def test_config_rejects_geometry_that_starves_obstacles(overrides):
    with pytest.raises(ValueError):
        GameConfig(**overrides)


def test_config_accepts_small_screens():
    config = GameConfig(screen_width=20, screen_height=30, player_x=1)
    assert config.player_x == 1
