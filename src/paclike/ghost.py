"""Ghost AI and movement."""

from __future__ import annotations

from dataclasses import dataclass

from . import constants as c
from .actors import Actor
from .maze import Grid
from .rng import Lfsr


def signf(val: int) -> int:
    return 1 if val > 0 else -1 if val < 0 else 0


def _open_headings(actor: Actor) -> list[tuple[int, int]]:
    # Every open direction except turning straight back.
    reverse = (-actor.dx, -actor.dy)
    return [
        (dx, dy)
        for dx, dy in c.DIRECTIONS
        if not actor.grid.is_wall(actor.x + dx, actor.y + dy) and (dx, dy) != reverse
    ]


def wander_heading(actor: Actor, rng: Lfsr) -> tuple[int, int]:
    opts = _open_headings(actor)
    if not opts:
        return -actor.dx, -actor.dy
    return opts[rng.range(0, len(opts) - 1)]


def flee_heading(actor: Actor, target_x: int, target_y: int, rng: Lfsr) -> tuple[int, int]:
    """Prefer headings that lead directly away from the target.

    Ties inside the best tier are broken with the generator, so flee paths stay hard
    to predict.
    """
    to_x = signf(target_x - actor.x)
    to_y = signf(target_y - actor.y)

    weighted: list[tuple[int, int, int]] = []
    for dx, dy in _open_headings(actor):
        away = (dx == 0 and to_y == -dy) or (dy == 0 and to_x == -dx)
        weighted.append((dx, dy, c.FLEE_AWAY_PRIORITY if away else c.FLEE_OTHER_PRIORITY))

    if not weighted:
        return -actor.dx, -actor.dy

    weighted.sort(key=lambda opt: opt[2], reverse=True)
    best = weighted[0][2]
    best_count = sum(1 for opt in weighted if opt[2] == best)
    dx, dy, _ = weighted[rng.range(0, best_count - 1)]
    return dx, dy


@dataclass(slots=True)
class Ghost(Actor):
    move_period: int = c.GHOST_MOVE_SUBFRAMES
    think_interval: int = c.GHOST_THINK_INTERVAL
    think_timer: int = 0
    vulnerable: bool = False

    def think(self, target_x: int, target_y: int, rng: Lfsr) -> None:
        if self.vulnerable:
            self.dx, self.dy = flee_heading(self, target_x, target_y, rng)
        else:
            self.dx, self.dy = wander_heading(self, rng)

    def update_ai(self, target_x: int, target_y: int, rng: Lfsr) -> None:
        """One tick of an AI ghost: think on cadence, then move.

        Running into a wall forces an immediate re-think instead of waiting for the
        next scheduled one.
        """
        self.think_timer += 1
        if self.think_timer >= self.think_interval:
            self.think(target_x, target_y, rng)
            self.think_timer = 0

        if self.update():
            self.think(target_x, target_y, rng)


def make_ghost(grid: Grid, x: int, y: int, heading: tuple[int, int] = c.GHOST_START_HEADING) -> Ghost:
    return Ghost(grid, x=x, y=y, dx=heading[0], dy=heading[1])
