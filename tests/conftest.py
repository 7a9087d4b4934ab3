from __future__ import annotations

import pytest

from falling_blocks.game import ActivePiece, FallingBlockGame, GameConfig, Phase, Piece, TetrominoType


@pytest.fixture
def game() -> FallingBlockGame:
    return FallingBlockGame(GameConfig(random_seed=1234))


@pytest.fixture
def place():
    """Force a specific falling piece into a game."""

    def _place(game: FallingBlockGame, kind: TetrominoType, x: int, y: int) -> ActivePiece:
        game.active = ActivePiece(Piece.from_catalog(kind), x, y)
        game.phase = Phase.FALLING
        if game.next_piece is None:
            game.next_piece = game.spawner.random_piece()
        return game.active

    return _place
