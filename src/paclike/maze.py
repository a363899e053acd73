"""Static tile layouts and the queries every movement rule goes through."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field

from . import constants as c

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Grid:
    width: int
    height: int
    cells: tuple[int, ...]
    tunnel_row: int = c.TUNNEL_ROW
    # (x, y, id) in row-major order
    teleporters: tuple[tuple[int, int, int], ...] = ()
    _teleporter_at: dict[tuple[int, int], int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_teleporter_at", {(x, y): tid for x, y, tid in self.teleporters})

    @classmethod
    def from_rows(cls, rows: tuple[str, ...] | list[str], tunnel_row: int = c.TUNNEL_ROW) -> Grid:
        """Build a grid from text rows.

        `#` is a wall, `.` a pickup, `*` a power pickup, a space is open floor and a
        digit is a teleporter carrying that id. Short rows are padded with walls and
        unknown symbols become open floor; both are reported as warnings.
        """
        height = len(rows)
        width = max((len(row) for row in rows), default=0)

        cells: list[int] = []
        teleporters: list[tuple[int, int, int]] = []
        for y, row in enumerate(rows):
            if len(row) != width:
                logger.warning("Maze row %d has %d columns, expected %d; padding with walls", y, len(row), width)
            for x in range(width):
                if x >= len(row):
                    cells.append(c.WALL)
                    continue
                ch = row[x]
                if ch in "0123456789":
                    cells.append(c.TELEPORTER)
                    teleporters.append((x, y, int(ch)))
                elif ch in c.TILE_SYMBOLS:
                    cells.append(c.TILE_SYMBOLS[ch])
                else:
                    logger.warning("Unknown maze symbol %r at (%d, %d); treating as open", ch, x, y)
                    cells.append(c.OPEN)

        counts = Counter(tid for _, _, tid in teleporters)
        for tid, n in sorted(counts.items()):
            if n < 2:
                logger.warning("Teleporter %d has no partner; it will act as open floor", tid)

        return cls(
            width=width,
            height=height,
            cells=tuple(cells),
            tunnel_row=tunnel_row,
            teleporters=tuple(teleporters),
        )

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def index(self, x: int, y: int) -> int:
        return y * self.width + x

    def tile(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            return c.WALL
        return self.cells[self.index(x, y)]

    def is_wall(self, x: int, y: int) -> bool:
        return self.tile(x, y) == c.WALL

    def is_pickup(self, x: int, y: int) -> bool:
        return self.tile(x, y) in (c.PICKUP, c.POWER_PICKUP)

    def is_power_pickup(self, x: int, y: int) -> bool:
        return self.tile(x, y) == c.POWER_PICKUP

    def is_teleporter(self, x: int, y: int) -> int | None:
        return self._teleporter_at.get((x, y))

    def find_paired_teleporter(self, x: int, y: int) -> tuple[int, int] | None:
        tid = self.is_teleporter(x, y)
        if tid is None:
            return None
        for tx, ty, other in self.teleporters:
            if other == tid and (tx, ty) != (x, y):
                return tx, ty
        return None

    def count_pickups(self) -> int:
        return sum(1 for kind in self.cells if kind in (c.PICKUP, c.POWER_PICKUP))


MAZES: dict[int, tuple[str, ...]] = {
    1: c.MAZE_1,
    2: c.MAZE_2,
}


def load_maze(number: int) -> Grid:
    try:
        rows = MAZES[number]
    except KeyError:
        raise ValueError(f"Unknown maze {number}; choose one of {sorted(MAZES)}") from None
    return Grid.from_rows(rows)
