from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List, Optional, Tuple

import numpy as np


class TetrominoType(IntEnum):
    I = 1
    O = 2
    T = 3
    S = 4
    Z = 5
    J = 6
    L = 7


Shape = np.ndarray


def _frozen(rows: List[List[int]]) -> Shape:
    arr = np.array(rows, dtype=np.int8)
    arr.setflags(write=False)
    return arr


BASE_SHAPES: Dict[TetrominoType, Shape] = {
    TetrominoType.I: _frozen([[1, 1, 1, 1]]),
    TetrominoType.O: _frozen([[1, 1], [1, 1]]),
    TetrominoType.T: _frozen([[0, 1, 0], [1, 1, 1]]),
    TetrominoType.S: _frozen([[0, 1, 1], [1, 1, 0]]),
    TetrominoType.Z: _frozen([[1, 1, 0], [0, 1, 1]]),
    TetrominoType.J: _frozen([[1, 0, 0], [1, 1, 1]]),
    TetrominoType.L: _frozen([[0, 0, 1], [1, 1, 1]]),
}


def rotate_cw(shape: Shape) -> Shape:
    """Rotate a shape 90 degrees clockwise.

    Transpose, then reverse every row: an R x C input becomes C x R with
    ``out[i][j] == shape[R - 1 - j][i]``.
    """
    return np.ascontiguousarray(shape.T[:, ::-1])


@dataclass(frozen=True, eq=False)
class Piece:
    """A tetromino instance: an occupancy matrix plus its color tag."""

    kind: TetrominoType
    shape: Shape

    @classmethod
    def from_catalog(cls, kind: TetrominoType) -> "Piece":
        return cls(kind=kind, shape=BASE_SHAPES[kind].copy())

    def rotated(self) -> "Piece":
        return Piece(self.kind, rotate_cw(self.shape))

    def cells_at(self, origin_x: int, origin_y: int) -> List[Tuple[int, int]]:
        cells: List[Tuple[int, int]] = []
        for dy, dx in zip(*np.nonzero(self.shape)):
            cells.append((origin_x + int(dx), origin_y + int(dy)))
        return cells


@dataclass
class ActivePiece:
    piece: Piece
    x: int
    y: int

    @property
    def kind(self) -> TetrominoType:
        return self.piece.kind

    @property
    def shape(self) -> Shape:
        return self.piece.shape

    def cells(self) -> List[Tuple[int, int]]:
        return self.piece.cells_at(self.x, self.y)


class PieceSpawner:
    """Uniform random piece source. No bag, repeats allowed."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.rng = random.Random(seed)

    def random_piece(self) -> Piece:
        kind = self.rng.choice(list(TetrominoType))
        return Piece.from_catalog(kind)
