from __future__ import annotations

import numpy as np

from .pieces import Shape, TetrominoType


class GameGrid:
    """Locked-cell matrix with row clearing.

    The grid uses 0 for empty cells and the ``TetrominoType`` value of the
    piece that locked there for filled cells. Row 0 is the top.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(0)

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_occupied(self, row: int, col: int) -> bool:
        if not self.is_inside(col, row):
            raise IndexError(f"cell ({row}, {col}) outside {self.height}x{self.width} grid")
        return self.grid[row, col] != 0

    def lock(self, shape: Shape, color: TetrominoType, x: int, y: int) -> None:
        """Write ``color`` under every occupied cell of ``shape`` at (x, y).

        Assumes the placement was already checked with ``collides``. Rows above
        the top edge are dropped.
        """
        for dy, dx in zip(*np.nonzero(shape)):
            row = y + int(dy)
            if row >= 0:
                self.grid[row, x + int(dx)] = int(color)

    def clear_full_rows(self) -> int:
        full = np.all(self.grid != 0, axis=1)
        num = int(full.sum())
        if num == 0:
            return 0
        # Remove full rows and add empty rows at the top
        new_rows = np.zeros((num, self.width), dtype=np.int8)
        self.grid = np.vstack((new_rows, self.grid[~full]))
        return num

    def get_max_height(self) -> int:
        # y=0 is top; find first non-empty from top
        non_empty_rows = np.where(np.any(self.grid != 0, axis=1))[0]
        if non_empty_rows.size == 0:
            return 0
        return self.height - int(non_empty_rows[0])

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()
