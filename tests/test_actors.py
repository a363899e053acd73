from __future__ import annotations

import pytest

from paclike import constants as c
from paclike.actors import Player
from paclike.ghost import make_ghost
from paclike.maze import Grid, load_maze

ROOM = (
    "#######",
    "#     #",
    "### ###",
    "#     #",
    "#######",
)

TUNNEL = (
    "#####",
    "     ",
    "#####",
)


def _player(rows: tuple[str, ...] = ROOM, **kwargs: int) -> Player:
    return Player(Grid.from_rows(rows), **kwargs)


def _run(actor: Player, ticks: int) -> list[bool]:
    return [actor.update() for _ in range(ticks)]


def test_aligned_turn_applies_immediately() -> None:
    p = _player(x=1, y=1)

    assert p.process_input(*c.RIGHT) is True
    assert p.heading == c.RIGHT
    assert p.queued == c.STOP


def test_steps_once_per_move_period() -> None:
    p = _player(x=1, y=1, dx=1)

    _run(p, c.PLAYER_MOVE_SUBFRAMES - 1)
    assert (p.x, p.y) == (1, 1)

    p.update()
    assert (p.x, p.y) == (2, 1)
    assert p.sub == 0


def test_perpendicular_turn_applies_mid_step_when_open() -> None:
    p = _player(x=3, y=1, dx=1, sub=3)

    assert p.process_input(*c.DOWN) is True
    assert p.heading == c.DOWN


def test_perpendicular_turn_into_wall_is_queued() -> None:
    p = _player(x=2, y=1, dx=1, sub=3)

    assert p.process_input(*c.DOWN) is False
    assert p.heading == c.RIGHT
    assert p.queued == c.DOWN


def test_reverse_applies_mid_step() -> None:
    p = _player(x=2, y=1, dx=1, sub=3)

    assert p.process_input(*c.LEFT) is True
    assert p.heading == c.LEFT
    assert p.queued == c.STOP


def test_queued_heading_applies_at_next_alignment() -> None:
    # Stopped mid-count: neither aligned nor a perpendicular turn, so the intent waits.
    p = _player(x=3, y=1, sub=2)

    assert p.process_input(*c.DOWN) is False
    assert p.queued == c.DOWN

    _run(p, c.PLAYER_MOVE_SUBFRAMES - 2)
    assert (p.x, p.y) == (3, 2)
    assert p.heading == c.DOWN
    assert p.queued == c.STOP


def test_queued_heading_into_wall_is_dropped() -> None:
    p = _player(x=1, y=1, sub=2)
    p.process_input(*c.UP)

    _run(p, c.PLAYER_MOVE_SUBFRAMES - 2)
    assert (p.x, p.y) == (1, 1)
    assert p.heading == c.STOP
    assert p.queued == c.STOP


def test_wall_stops_actor_and_clears_queue() -> None:
    p = _player(x=5, y=1, dx=1, sub=c.PLAYER_MOVE_SUBFRAMES - 1)
    p.queued_dx, p.queued_dy = c.UP

    assert p.update() is True
    assert (p.x, p.y) == (5, 1)
    assert p.heading == c.STOP
    assert p.queued == c.STOP


def test_stopped_actor_never_reports_blocked() -> None:
    p = _player(x=1, y=1)

    assert not any(_run(p, 3 * c.PLAYER_MOVE_SUBFRAMES))
    assert (p.x, p.y) == (1, 1)


def test_same_heading_intent_is_a_no_op() -> None:
    p = _player(x=1, y=1, dx=1, sub=2)
    p.queued_dx, p.queued_dy = c.DOWN

    assert p.process_input(*c.RIGHT) is False
    assert p.queued == c.DOWN


def test_diagonal_intent_is_rejected() -> None:
    p = _player(x=1, y=1)

    with pytest.raises(ValueError):
        p.process_input(1, 1)
    with pytest.raises(ValueError):
        p.process_input(2, 0)


def test_tunnel_row_wraps_left_edge_to_right_edge() -> None:
    p = Player(Grid.from_rows(TUNNEL, tunnel_row=1), x=0, y=1, dx=-1, sub=c.PLAYER_MOVE_SUBFRAMES - 1)

    p.update()
    assert (p.x, p.y) == (4, 1)
    assert p.heading == c.LEFT


def test_tunnel_row_wraps_right_edge_to_left_edge() -> None:
    p = Player(Grid.from_rows(TUNNEL, tunnel_row=1), x=4, y=1, dx=1, sub=c.PLAYER_MOVE_SUBFRAMES - 1)

    p.update()
    assert (p.x, p.y) == (0, 1)


def test_leaving_the_grid_off_the_tunnel_row_is_blocked() -> None:
    p = Player(Grid.from_rows(TUNNEL, tunnel_row=0), x=0, y=1, dx=-1, sub=c.PLAYER_MOVE_SUBFRAMES - 1)

    assert p.update() is True
    assert (p.x, p.y) == (0, 1)


def test_classic_maze_tunnel_wraps() -> None:
    p = Player(load_maze(1), x=0, y=c.TUNNEL_ROW, dx=-1, sub=c.PLAYER_MOVE_SUBFRAMES - 1)

    p.update()
    assert (p.x, p.y) == (c.GRID_W - 1, c.TUNNEL_ROW)


def test_teleporter_relocates_to_its_pair() -> None:
    p = Player(load_maze(2), x=12, y=1, dx=0, dy=-1, sub=c.PLAYER_MOVE_SUBFRAMES - 1)

    p.update()
    assert (p.x, p.y) == (12, 30)
    assert p.heading == c.UP

    _run(p, c.PLAYER_MOVE_SUBFRAMES)
    assert (p.x, p.y) == (12, 29)


def test_tunnel_edge_teleporters_carry_actor_across() -> None:
    p = Player(load_maze(2), x=1, y=c.TUNNEL_ROW, dx=-1, sub=c.PLAYER_MOVE_SUBFRAMES - 1)

    p.update()
    assert (p.x, p.y) == (27, c.TUNNEL_ROW)

    _run(p, c.PLAYER_MOVE_SUBFRAMES)
    assert (p.x, p.y) == (26, c.TUNNEL_ROW)


def test_ghosts_share_the_movement_rules() -> None:
    g = make_ghost(load_maze(2), 12, 1)
    g.sub = c.GHOST_MOVE_SUBFRAMES - 1

    g.update()
    assert (g.x, g.y) == (12, 30)


def test_reset_to_spawn_restores_position_and_heading() -> None:
    p = _player(x=1, y=1, dx=1)
    p.x, p.y, p.dx = 4, 3, -1
    p.queued_dx, p.queued_dy = c.UP

    p.reset_to_spawn()
    assert (p.x, p.y, p.dx, p.dy) == (1, 1, 1, 0)
    assert p.queued == c.STOP
