from __future__ import annotations

import logging

import pygame

from . import constants as c
from .config import GameConfig
from .game import Game
from .maze import Grid
from .pacer import FramePacer
from .render import Renderer

logger = logging.getLogger(__name__)

# Human player number -> (key, heading) in polling priority order.
PLAYER_KEYS: dict[int, tuple[tuple[int, tuple[int, int]], ...]] = {
    1: (
        (pygame.K_UP, c.UP),
        (pygame.K_DOWN, c.DOWN),
        (pygame.K_LEFT, c.LEFT),
        (pygame.K_RIGHT, c.RIGHT),
    ),
    2: (
        (pygame.K_w, c.UP),
        (pygame.K_s, c.DOWN),
        (pygame.K_a, c.LEFT),
        (pygame.K_d, c.RIGHT),
    ),
}


class GameEngine:
    TARGET_RENDER_FPS = c.FPS

    def __init__(self, grid: Grid, config: GameConfig | None = None) -> None:
        self.grid = grid
        self.config = config if config is not None else GameConfig()
        self.human_slots = self.config.human_slots()
        self.game = Game(grid, self.config)
        self.pacer = FramePacer()
        self.exit_program = False

        self._key_map: dict[int, tuple[int, tuple[int, int]]] = {}
        for player, keys in PLAYER_KEYS.items():
            if player in self.human_slots:
                for key, heading in keys:
                    self._key_map[key] = (player, heading)

        self._screen: pygame.Surface | None = None
        self._renderer: Renderer | None = None
        self._clock: pygame.time.Clock | None = None

    def new_round(self) -> None:
        self.game = Game(self.grid, self.config)
        self.pacer.reset(self.pacer.last)

    def _handle_key(self, key: int) -> None:
        if key == pygame.K_ESCAPE:
            self.exit_program = True
        elif key == pygame.K_r:
            if not self.game.running:
                self.new_round()
        elif key in self._key_map and self.game.running:
            # Key presses turn the actor right away instead of waiting for the next tick.
            player, (dx, dy) = self._key_map[key]
            self.game.apply_intent(self.human_slots[player], dx, dy)

    def _pump_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.exit_program = True
            elif event.type == pygame.KEYDOWN:
                self._handle_key(event.key)
            elif event.type == pygame.VIDEORESIZE and self._renderer is not None:
                self._renderer.resize()

    def _read_intents(self) -> dict[int, tuple[int, int]]:
        pressed = pygame.key.get_pressed()
        intents: dict[int, tuple[int, int]] = {}
        for player, slot in self.human_slots.items():
            for key, heading in PLAYER_KEYS[player]:
                if pressed[key]:
                    intents[slot] = heading
                    break
        return intents

    def _tick(self) -> None:
        self.game.tick(self._read_intents())

    def _tick_frame(self, now: float) -> int:
        if not self.game.running:
            self.pacer.reset(now)
            return 0
        return self.pacer.pump(self._tick, now)

    def run(self) -> None:
        pygame.init()
        pygame.display.set_caption(c.GAME_TITLE)
        size = (
            self.grid.width * c.TILE * c.WINDOW_SCALE,
            (self.grid.height * c.TILE + c.SCORE_AREA) * c.WINDOW_SCALE,
        )
        self._screen = pygame.display.set_mode(size, pygame.RESIZABLE)
        self._renderer = Renderer(self._screen, self.grid)
        self._clock = pygame.time.Clock()
        logger.info("Session started with slots %s", self.human_slots)

        self.pacer.reset(pygame.time.get_ticks() / 1000.0)
        while not self.exit_program:
            self._pump_events()
            self._tick_frame(pygame.time.get_ticks() / 1000.0)

            self._renderer.draw(self.game.snapshot())
            pygame.display.flip()
            self._clock.tick(self.TARGET_RENDER_FPS)

        logger.info("Session ended at frame %d with score %d", self.game.frame, self.game.score)
        pygame.quit()
        self._screen = None
        self._renderer = None
        self._clock = None
