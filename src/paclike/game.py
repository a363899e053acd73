"""Round state and the fixed per-tick order of operations."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from . import constants as c
from .actors import Actor, Player, make_player
from .config import PACMAN_SLOT, ControllerKind, GameConfig
from .ghost import Ghost, make_ghost, wander_heading
from .maze import Grid
from .rng import Lfsr

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ActorView:
    slot: int
    x: int
    y: int
    dx: int
    dy: int
    vulnerable: bool
    controller: ControllerKind


@dataclass(frozen=True, slots=True)
class RoundSnapshot:
    frame: int
    score: int
    alive: bool
    pickups_remaining: int
    power_timer: int
    eaten_count: int
    width: int
    actors: tuple[ActorView, ...]
    collected: tuple[bool, ...]

    @property
    def player(self) -> ActorView:
        return self.actors[PACMAN_SLOT]

    @property
    def ghosts(self) -> tuple[ActorView, ...]:
        return self.actors[1:]

    def is_collected(self, x: int, y: int) -> bool:
        if not (0 <= x < self.width):
            return False
        idx = y * self.width + x
        return 0 <= idx < len(self.collected) and self.collected[idx]


class Game:
    def __init__(
        self,
        grid: Grid,
        config: GameConfig | None = None,
        *,
        player_spawn: tuple[int, int] = (c.PLAYER_START_X, c.PLAYER_START_Y),
        ghost_spawns: Sequence[tuple[int, int]] = c.GHOST_SPAWNS,
        seed: int | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        if self.config.ghost_count > 0 and not ghost_spawns:
            raise ValueError("ghost_spawns must name at least one tile")

        self.grid = grid
        self.controllers: tuple[ControllerKind, ...] = self.config.controllers()
        self.rng = Lfsr(self.config.seed if seed is None else seed)

        self.player: Player = make_player(grid, *player_spawn)
        self.ghosts: list[Ghost] = [
            make_ghost(grid, *ghost_spawns[i % len(ghost_spawns)]) for i in range(self.config.ghost_count)
        ]
        for slot, actor in enumerate(self.actors):
            if grid.is_wall(actor.x, actor.y):
                logger.warning("Spawn tile (%d, %d) for slot %d is a wall", actor.x, actor.y, slot)

        self.collected: list[bool] = [False] * (grid.width * grid.height)
        self.pickups_remaining = grid.count_pickups()
        self.score = 0
        self.alive = True
        self.power_timer = 0
        self.eaten_count = 0
        self.frame = 0
        self._player_think_timer = 0

        logger.info(
            "Round started: %dx%d grid, %d pickups, %d ghosts, seed=0x%04X",
            grid.width,
            grid.height,
            self.pickups_remaining,
            len(self.ghosts),
            self.rng.state,
        )

    @property
    def actors(self) -> list[Actor]:
        return [self.player, *self.ghosts]

    @property
    def cleared(self) -> bool:
        return self.pickups_remaining <= 0

    @property
    def running(self) -> bool:
        return self.alive and not self.cleared

    def actor(self, slot: int) -> Actor:
        if slot == PACMAN_SLOT:
            return self.player
        if 1 <= slot <= len(self.ghosts):
            return self.ghosts[slot - 1]
        raise ValueError(f"No actor in slot {slot}")

    def is_external(self, slot: int) -> bool:
        return self.controllers[slot] is ControllerKind.EXTERNAL

    def is_collected(self, x: int, y: int) -> bool:
        if not self.grid.in_bounds(x, y):
            return False
        return self.collected[self.grid.index(x, y)]

    def apply_intent(self, slot: int, dx: int, dy: int) -> bool:
        """Feed a directional intent to an externally driven actor.

        Intents for AI-driven slots are ignored. Returns True if the actor turned now.
        """
        actor = self.actor(slot)
        if not self.is_external(slot):
            logger.debug("Ignoring intent for AI slot %d", slot)
            return False
        return actor.process_input(dx, dy)

    def tick(self, intents: Mapping[int, tuple[int, int]] | None = None) -> None:
        if not self.alive:
            return
        self.frame += 1

        if intents:
            for slot in sorted(intents):
                dx, dy = intents[slot]
                self.apply_intent(slot, dx, dy)

        self._advance_player()
        self.resolve_pickup()
        self._decay_power_timer()
        self._advance_ghosts()
        self.resolve_collisions()

    def _advance_player(self) -> None:
        p = self.player
        if self.is_external(PACMAN_SLOT):
            p.update()
            return

        self._player_think_timer += 1
        if self._player_think_timer >= c.GHOST_THINK_INTERVAL:
            p.dx, p.dy = wander_heading(p, self.rng)
            self._player_think_timer = 0
        if p.update():
            p.dx, p.dy = wander_heading(p, self.rng)

    def resolve_pickup(self) -> int:
        """Collect the pickup under the player, once. Returns the points awarded."""
        p = self.player
        if not self.grid.is_pickup(p.x, p.y):
            return 0
        idx = self.grid.index(p.x, p.y)
        if self.collected[idx]:
            return 0

        self.collected[idx] = True
        self.pickups_remaining -= 1
        if self.grid.is_power_pickup(p.x, p.y):
            points = c.SCORE_POWER_PELLET
            self.power_timer = c.POWER_PELLET_DURATION
            for ghost in self.ghosts:
                ghost.vulnerable = True
            self.eaten_count = 0
            logger.debug("Frame %d: power pickup at (%d, %d)", self.frame, p.x, p.y)
        else:
            points = c.SCORE_PELLET
        self.score += points
        if self.cleared:
            logger.info("Frame %d: maze cleared with score %d", self.frame, self.score)
        return points

    def _decay_power_timer(self) -> None:
        if self.power_timer <= 0:
            return
        self.power_timer -= 1
        if self.power_timer == 0:
            for ghost in self.ghosts:
                ghost.vulnerable = False

    def _advance_ghosts(self) -> None:
        p = self.player
        for slot, ghost in enumerate(self.ghosts, start=1):
            if self.is_external(slot):
                ghost.update()
            else:
                ghost.update_ai(p.x, p.y, self.rng)

    def resolve_collisions(self) -> None:
        p = self.player
        for slot, ghost in enumerate(self.ghosts, start=1):
            if (ghost.x, ghost.y) != (p.x, p.y):
                continue
            if ghost.vulnerable:
                points = c.SCORE_GHOST[min(self.eaten_count, len(c.SCORE_GHOST) - 1)]
                self.score += points
                self.eaten_count += 1
                ghost.reset_to_spawn()
                logger.debug("Frame %d: ghost %d eaten for %d points", self.frame, slot, points)
            else:
                self.alive = False
                logger.info("Frame %d: caught by ghost %d, final score %d", self.frame, slot, self.score)
                break

    def snapshot(self) -> RoundSnapshot:
        views = tuple(
            ActorView(
                slot=slot,
                x=actor.x,
                y=actor.y,
                dx=actor.dx,
                dy=actor.dy,
                vulnerable=getattr(actor, "vulnerable", False),
                controller=self.controllers[slot],
            )
            for slot, actor in enumerate(self.actors)
        )
        return RoundSnapshot(
            frame=self.frame,
            score=self.score,
            alive=self.alive,
            pickups_remaining=self.pickups_remaining,
            power_timer=self.power_timer,
            eaten_count=self.eaten_count,
            width=self.grid.width,
            actors=views,
            collected=tuple(self.collected),
        )
