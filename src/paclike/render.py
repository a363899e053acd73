from __future__ import annotations

from dataclasses import dataclass, field

import pygame

from . import constants as c
from .game import ActorView, RoundSnapshot
from .maze import Grid


def ghost_color(ghost: ActorView, power_timer: int, frame: int) -> tuple[int, int, int]:
    if not ghost.vulnerable:
        return c.COLOR_GHOSTS[(ghost.slot - 1) % len(c.COLOR_GHOSTS)]
    if power_timer < c.POWER_PELLET_FLASH_START and (frame // c.GHOST_FLASH_SPEED) % 2 == 0:
        return c.COLOR_GHOST_FLASH
    return c.COLOR_GHOST_VULNERABLE


def power_pellet_visible(frame: int) -> bool:
    return (frame // c.POWER_PELLET_FLASH_SPEED) % 2 == 0


@dataclass(slots=True)
class Layout:
    scale: float
    ox: int
    oy: int
    board_y: int

    @classmethod
    def fit(cls, grid: Grid, ww: int, wh: int) -> Layout:
        view_w = max(1, grid.width * c.TILE)
        view_h = max(1, grid.height * c.TILE + c.SCORE_AREA)
        scale = min(ww / view_w, wh / view_h)
        sw = int(view_w * scale)
        sh = int(view_h * scale)
        ox = (ww - sw) // 2
        oy = (wh - sh) // 2
        return cls(scale=scale, ox=ox, oy=oy, board_y=oy + int(c.SCORE_AREA * scale))

    def cell_rect(self, x: int, y: int) -> pygame.Rect:
        size = c.TILE * self.scale
        left = self.ox + int(x * size)
        top = self.board_y + int(y * size)
        return pygame.Rect(left, top, max(1, int((x + 1) * size) - int(x * size)), max(1, int((y + 1) * size) - int(y * size)))


@dataclass
class Renderer:
    screen: pygame.Surface
    grid: Grid
    font: pygame.font.Font = field(init=False)
    layout: Layout = field(init=False)
    text_cache: dict[tuple[str, tuple[int, int, int]], pygame.Surface] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.resize()

    def resize(self) -> None:
        self.layout = Layout.fit(self.grid, *self.screen.get_size())
        self.font = pygame.font.Font(None, max(8, int(c.SCORE_AREA * self.layout.scale * 0.8)))
        self.text_cache.clear()

    def clear(self) -> None:
        self.screen.fill(c.COLOR_BG)

    def draw_text(self, x: int, y: int, text: str, color: tuple[int, int, int]) -> None:
        key = (text, color)
        surf = self.text_cache.get(key)
        if surf is None:
            surf = self.font.render(text, False, color)
            self.text_cache[key] = surf
        self.screen.blit(surf, (x, y))

    def draw_board(self, snap: RoundSnapshot) -> None:
        grid = self.grid
        for y in range(grid.height):
            for x in range(grid.width):
                kind = grid.tile(x, y)
                rect = self.layout.cell_rect(x, y)
                if kind == c.WALL:
                    self.screen.fill(c.COLOR_WALL, rect)
                elif kind == c.TELEPORTER:
                    pygame.draw.rect(self.screen, c.COLOR_TELEPORTER, rect, 1)
                elif kind in (c.PICKUP, c.POWER_PICKUP) and not snap.is_collected(x, y):
                    if kind == c.POWER_PICKUP:
                        if power_pellet_visible(snap.frame):
                            pygame.draw.circle(self.screen, c.COLOR_PELLET, rect.center, max(1, rect.w // 2))
                    else:
                        pygame.draw.circle(self.screen, c.COLOR_PELLET, rect.center, max(1, rect.w // 6))

    def draw_actors(self, snap: RoundSnapshot) -> None:
        for ghost in snap.ghosts:
            rect = self.layout.cell_rect(ghost.x, ghost.y)
            pygame.draw.rect(self.screen, ghost_color(ghost, snap.power_timer, snap.frame), rect)

        p = snap.player
        rect = self.layout.cell_rect(p.x, p.y)
        color = c.COLOR_PLAYER if snap.alive else c.COLOR_DEAD
        pygame.draw.circle(self.screen, color, rect.center, max(1, rect.w // 2))

    def draw_score(self, snap: RoundSnapshot) -> None:
        status = ""
        if not snap.alive:
            status = "  GAME OVER"
        elif snap.pickups_remaining <= 0:
            status = "  CLEAR"
        self.draw_text(self.layout.ox, self.layout.oy, f"{snap.score:06d}{status}", c.COLOR_TEXT)

    def draw(self, snap: RoundSnapshot) -> None:
        self.clear()
        self.draw_board(snap)
        self.draw_actors(snap)
        self.draw_score(snap)
