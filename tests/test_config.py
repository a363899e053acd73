from __future__ import annotations

from paclike.config import ControllerKind, GameConfig, GameMode, PlayerRole

AI = ControllerKind.AI
EXT = ControllerKind.EXTERNAL


def test_single_player_pacman_faces_ai_ghosts() -> None:
    cfg = GameConfig(ghost_count=2)

    assert not cfg.pacman_is_ai()
    assert cfg.ghosts_are_ai()
    assert cfg.human_slots() == {1: 0}
    assert cfg.controllers() == (EXT, AI, AI)
    assert cfg.validate() == []


def test_single_player_ghost_chases_ai_pacman() -> None:
    cfg = GameConfig(player1_role=PlayerRole.GHOST, ghost_count=3)

    assert cfg.pacman_is_ai()
    assert not cfg.ghosts_are_ai()
    assert cfg.human_slots() == {1: 1}
    assert cfg.controllers() == (AI, EXT, AI, AI)


def test_multiplayer_pacman_versus_ghost() -> None:
    cfg = GameConfig(
        mode=GameMode.MULTIPLAYER,
        player1_role=PlayerRole.GHOST,
        player2_role=PlayerRole.PACMAN,
        ghost_count=2,
    )

    assert cfg.human_slots() == {1: 1, 2: 0}
    assert cfg.controllers() == (EXT, EXT, AI)
    assert cfg.validate() == []


def test_multiplayer_two_ghosts_leave_pacman_to_ai() -> None:
    cfg = GameConfig(
        mode=GameMode.MULTIPLAYER,
        player1_role=PlayerRole.GHOST,
        player2_role=PlayerRole.GHOST,
        ghost_count=2,
    )

    assert cfg.pacman_is_ai()
    assert cfg.human_slots() == {1: 1, 2: 2}
    assert cfg.controllers() == (AI, EXT, EXT)


def test_player_two_is_ignored_in_single_player() -> None:
    cfg = GameConfig(player2_role=PlayerRole.GHOST)

    assert cfg.human_slots() == {1: 0}
    assert "player2_role is only used in multiplayer" in cfg.validate()


def test_validate_reports_every_problem() -> None:
    cfg = GameConfig(
        mode=GameMode.MULTIPLAYER,
        player1_role=PlayerRole.PACMAN,
        player2_role=PlayerRole.PACMAN,
        ghost_count=0,
        seed=0x1_0000,
    )

    errors = cfg.validate()
    assert len(errors) == 3
    assert any("ghost_count" in e for e in errors)
    assert any("Pac-Man" in e for e in errors)
    assert any("seed" in e for e in errors)


def test_validate_needs_enough_ghosts_for_ghost_players() -> None:
    cfg = GameConfig(
        mode=GameMode.MULTIPLAYER,
        player1_role=PlayerRole.GHOST,
        player2_role=PlayerRole.GHOST,
        ghost_count=1,
    )

    assert cfg.validate() == ["2 ghost players need at least 2 ghosts"]
