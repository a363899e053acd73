from __future__ import annotations

from dataclasses import dataclass, field

from . import constants as c
from .maze import Grid


def check_heading(dx: int, dy: int) -> None:
    if (dx, dy) != c.STOP and (dx, dy) not in c.DIRECTIONS:
        raise ValueError(f"Heading must be a cardinal unit vector or (0, 0), got ({dx}, {dy})")


@dataclass(slots=True)
class Actor:
    """A grid actor that steps one cell every `move_period` ticks."""

    grid: Grid = field(repr=False)
    x: int = 0
    y: int = 0
    dx: int = 0
    dy: int = 0
    sub: int = 0
    queued_dx: int = 0
    queued_dy: int = 0
    move_period: int = c.PLAYER_MOVE_SUBFRAMES
    spawn: tuple[int, int, int, int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.spawn = (self.x, self.y, self.dx, self.dy)

    @property
    def heading(self) -> tuple[int, int]:
        return self.dx, self.dy

    @property
    def queued(self) -> tuple[int, int]:
        return self.queued_dx, self.queued_dy

    @property
    def aligned(self) -> bool:
        return self.sub == 0

    def clear_queue(self) -> None:
        self.queued_dx = 0
        self.queued_dy = 0

    def process_input(self, dx: int, dy: int) -> bool:
        """Queue a heading and apply it at once when the turn is allowed now.

        Returns True when the heading changed immediately.
        """
        check_heading(dx, dy)
        if (dx, dy) == c.STOP or (dx, dy) == (self.dx, self.dy):
            return False

        self.queued_dx = dx
        self.queued_dy = dy

        open_ahead = not self.grid.is_wall(self.x + dx, self.y + dy)
        perpendicular = (dx != 0 and self.dy != 0) or (dy != 0 and self.dx != 0)
        reverse = (self.dx or self.dy) and dx == -self.dx and dy == -self.dy
        if reverse or (open_ahead and (self.aligned or perpendicular)):
            self.dx = dx
            self.dy = dy
            self.clear_queue()
            return True
        return False

    def update(self) -> bool:
        """Advance the sub-frame counter; step a cell when it rolls over.

        Returns True when the step ran into a wall.
        """
        self.sub += 1
        if self.sub < self.move_period:
            return False
        self.sub = 0
        return self.step()

    def step(self) -> bool:
        grid = self.grid
        if self.queued_dx or self.queued_dy:
            if not grid.is_wall(self.x + self.queued_dx, self.y + self.queued_dy):
                self.dx = self.queued_dx
                self.dy = self.queued_dy
            self.clear_queue()

        if not (self.dx or self.dy):
            return False

        nx = self.x + self.dx
        ny = self.y + self.dy
        if ny == grid.tunnel_row:
            if nx < 0:
                nx = grid.width - 1
            elif nx >= grid.width:
                nx = 0

        if grid.is_wall(nx, ny):
            self.dx = 0
            self.dy = 0
            self.clear_queue()
            return True

        self.x = nx
        self.y = ny
        pair = grid.find_paired_teleporter(nx, ny)
        if pair is not None:
            self.x, self.y = pair
        return False

    def reset_to_spawn(self) -> None:
        self.x, self.y, self.dx, self.dy = self.spawn
        self.clear_queue()


@dataclass(slots=True)
class Player(Actor):
    move_period: int = c.PLAYER_MOVE_SUBFRAMES


def make_player(grid: Grid, x: int = c.PLAYER_START_X, y: int = c.PLAYER_START_Y) -> Player:
    return Player(grid, x=x, y=y)
