"""Game module for Falling Blocks.

Exports the core game engine and supporting classes:
- GameGrid: Locked-cell grid and row clearing
- Piece, ActivePiece, PieceSpawner: Tetromino catalog, rotation and random spawns
- collides: Placement legality check shared by every move
- ScoringRules: Flat per-line bonus
- GameConfig: Board size, spawn offset, seed and tick interval
- FallingBlockGame: Engine state and the lock/score/spawn pipeline
"""

from .config import GameConfig
from .grid import GameGrid
from .pieces import BASE_SHAPES, ActivePiece, Piece, PieceSpawner, TetrominoType, rotate_cw
from .collision import collides
from .rules import ScoringRules
from .core import Action, DropResult, FallingBlockGame, Phase

__all__ = [
    "GameConfig",
    "GameGrid",
    "BASE_SHAPES",
    "ActivePiece",
    "Piece",
    "PieceSpawner",
    "TetrominoType",
    "rotate_cw",
    "collides",
    "ScoringRules",
    "Action",
    "DropResult",
    "FallingBlockGame",
    "Phase",
]
