from __future__ import annotations

import numpy as np

from .grid import GameGrid
from .pieces import Shape


def collides(grid: GameGrid, x: int, y: int, shape: Shape, dx: int = 0, dy: int = 0) -> bool:
    """Return True if ``shape`` placed at (x + dx, y + dy) is illegal.

    A cell collides when it falls left or right of the grid, below the floor,
    or on a locked cell. Rows above the top edge are never blocked, so tall
    pieces may sit partly off-grid.
    """
    for r, c in zip(*np.nonzero(shape)):
        tx = x + int(c) + dx
        ty = y + int(r) + dy
        if tx < 0 or tx >= grid.width or ty >= grid.height:
            return True
        if ty >= 0 and grid.is_occupied(ty, tx):
            return True
    return False
