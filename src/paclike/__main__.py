from __future__ import annotations

import argparse
import logging

from . import constants as c
from .config import GameConfig, GameMode, PlayerRole
from .engine import GameEngine
from .maze import MAZES, load_maze


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Atari 2600 style Pac-Man clone")
    p.add_argument("--maze", type=int, choices=sorted(MAZES), default=1, help="Maze layout to play")
    p.add_argument("--mode", choices=[m.value for m in GameMode], default=GameMode.SINGLE_PLAYER.value)
    p.add_argument("--role", choices=[r.value for r in PlayerRole], default=PlayerRole.PACMAN.value, help="Player 1 role")
    p.add_argument("--role2", choices=[r.value for r in PlayerRole], default=None, help="Player 2 role (multiplayer)")
    p.add_argument("--ghosts", type=int, default=1, help=f"Number of ghosts (1-{c.MAX_GHOSTS})")
    p.add_argument("--seed", type=lambda s: int(s, 0), default=c.RNG_SEED, help="Ghost AI seed")
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level",
    )
    return p


def config_from_args(args: argparse.Namespace) -> GameConfig:
    return GameConfig(
        mode=GameMode(args.mode),
        player1_role=PlayerRole(args.role),
        player2_role=PlayerRole(args.role2) if args.role2 else None,
        ghost_count=args.ghosts,
        seed=args.seed,
    )


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    config = config_from_args(args)
    errors = config.validate()
    if errors:
        parser.error("; ".join(errors))

    engine = GameEngine(load_maze(args.maze), config)
    engine.run()


if __name__ == "__main__":
    main()
