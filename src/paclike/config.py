"""Session configuration: who drives which actor slot.

Slot 0 is Pac-Man; slots 1..ghost_count are ghosts. The configuration is resolved once
at round start into a per-slot `ControllerKind`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from . import constants as c

PACMAN_SLOT = 0


class GameMode(Enum):
    SINGLE_PLAYER = "single"
    MULTIPLAYER = "multi"


class PlayerRole(Enum):
    PACMAN = "pacman"
    GHOST = "ghost"


class ControllerKind(Enum):
    AI = "ai"
    EXTERNAL = "external"


@dataclass
class GameConfig:
    mode: GameMode = GameMode.SINGLE_PLAYER
    player1_role: PlayerRole = PlayerRole.PACMAN
    player2_role: PlayerRole | None = None
    ghost_count: int = 1
    seed: int = c.RNG_SEED

    def _roles(self) -> list[PlayerRole]:
        roles = [self.player1_role]
        if self.mode is GameMode.MULTIPLAYER and self.player2_role is not None:
            roles.append(self.player2_role)
        return roles

    def pacman_is_ai(self) -> bool:
        return PlayerRole.PACMAN not in self._roles()

    def ghosts_are_ai(self) -> bool:
        return PlayerRole.GHOST not in self._roles()

    def human_slots(self) -> dict[int, int]:
        """Map human player number (1 or 2) to the actor slot they drive."""
        slots: dict[int, int] = {}
        next_ghost = 1
        for player, role in enumerate(self._roles(), start=1):
            if role is PlayerRole.PACMAN:
                slots[player] = PACMAN_SLOT
            else:
                slots[player] = next_ghost
                next_ghost += 1
        return slots

    def controllers(self) -> tuple[ControllerKind, ...]:
        kinds = [ControllerKind.AI] * (self.ghost_count + 1)
        for slot in self.human_slots().values():
            if slot < len(kinds):
                kinds[slot] = ControllerKind.EXTERNAL
        return tuple(kinds)

    def validate(self) -> list[str]:
        errors = []
        if not (1 <= self.ghost_count <= c.MAX_GHOSTS):
            errors.append(f"ghost_count must be in [1, {c.MAX_GHOSTS}], got {self.ghost_count}")
        if self.mode is GameMode.MULTIPLAYER:
            if self.player2_role is None:
                errors.append("multiplayer needs a role for player 2")
            elif self.player1_role is PlayerRole.PACMAN and self.player2_role is PlayerRole.PACMAN:
                errors.append("only one player can be Pac-Man")
        elif self.player2_role is not None:
            errors.append("player2_role is only used in multiplayer")
        ghost_players = sum(1 for role in self._roles() if role is PlayerRole.GHOST)
        if ghost_players > self.ghost_count:
            errors.append(f"{ghost_players} ghost players need at least {ghost_players} ghosts")
        if not (0 <= self.seed <= 0xFFFF):
            errors.append(f"seed must fit in 16 bits, got {self.seed}")
        return errors
