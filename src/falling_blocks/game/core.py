from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional

import numpy as np

from .collision import collides
from .config import GameConfig
from .grid import GameGrid
from .pieces import ActivePiece, Piece, PieceSpawner
from .rules import ScoringRules

logger = logging.getLogger(__name__)


class Action(IntEnum):
    LEFT = 0
    RIGHT = 1
    ROTATE = 2
    SOFT_DROP = 3
    HARD_DROP = 4
    NONE = 5


class Phase(Enum):
    NO_PIECE = "no_piece"
    FALLING = "falling"
    GAME_OVER = "game_over"


@dataclass
class DropResult:
    moved: bool
    locked: bool = False
    lines_cleared: int = 0
    game_over: bool = False


class FallingBlockGame:
    """Board engine: grid, active piece, lookahead piece and score.

    The engine has no clock. A driver calls ``tick`` on an interval and
    forwards player input through ``try_move``, ``try_rotate`` and
    ``hard_drop`` (or ``step`` with an ``Action``).
    """

    def __init__(self, config: Optional[GameConfig] = None, rules: Optional[ScoringRules] = None) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.spawner = PieceSpawner(self.config.random_seed)
        self.grid = GameGrid(self.config.width, self.config.height)
        self.score = 0
        self.lines_cleared_total = 0
        self.pieces_locked = 0
        self.phase = Phase.NO_PIECE
        self.active: Optional[ActivePiece] = None
        self.next_piece: Optional[Piece] = None

    @property
    def running(self) -> bool:
        return self.phase is Phase.FALLING

    @property
    def game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    def reset(self) -> None:
        self.grid.reset()
        self.score = 0
        self.lines_cleared_total = 0
        self.pieces_locked = 0
        self.phase = Phase.NO_PIECE
        self.active = None
        self.next_piece = None

    def new_game(self) -> bool:
        self.reset()
        logger.info("New game on %dx%d grid", self.grid.width, self.grid.height)
        return self.spawn()

    def spawn(self) -> bool:
        """Promote the lookahead piece and check for a blocked spawn.

        Returns False when the spawn position is already taken, which ends
        the session.
        """
        piece = self.next_piece or self.spawner.random_piece()
        self.next_piece = self.spawner.random_piece()
        x, y = self.config.spawn_column, self.config.spawn_y
        if collides(self.grid, x, y, piece.shape):
            self.active = None
            self.phase = Phase.GAME_OVER
            logger.info("Game over, final score %d", self.score)
            return False
        self.active = ActivePiece(piece, x, y)
        self.phase = Phase.FALLING
        logger.debug("Spawned %s at (%d, %d), next %s", piece.kind.name, x, y, self.next_piece.kind.name)
        return True

    def try_move(self, dx: int, dy: int) -> bool:
        if self.active is None:
            return False
        if collides(self.grid, self.active.x, self.active.y, self.active.shape, dx, dy):
            return False
        self.active.x += dx
        self.active.y += dy
        return True

    def try_rotate(self) -> bool:
        if self.active is None:
            return False
        rotated = self.active.piece.rotated()
        if collides(self.grid, self.active.x, self.active.y, rotated.shape):
            return False
        self.active.piece = rotated
        return True

    def ghost_row(self) -> Optional[int]:
        """Row the active piece would land on if dropped straight down."""
        if self.active is None:
            return None
        a = self.active
        row = a.y
        while not collides(self.grid, a.x, row, a.shape, 0, 1):
            row += 1
        return row

    def tick(self) -> DropResult:
        if not self.running:
            return DropResult(moved=False, game_over=self.game_over)
        if self.try_move(0, 1):
            return DropResult(moved=True)
        return self._lock_piece()

    def hard_drop(self) -> DropResult:
        if not self.running:
            return DropResult(moved=False, game_over=self.game_over)
        assert self.active is not None
        landing = self.ghost_row()
        moved = landing != self.active.y
        self.active.y = landing
        result = self._lock_piece()
        result.moved = moved
        return result

    def _lock_piece(self) -> DropResult:
        assert self.active is not None
        a = self.active
        self.grid.lock(a.shape, a.kind, a.x, a.y)
        self.pieces_locked += 1
        lines = self.grid.clear_full_rows()
        self.lines_cleared_total += lines
        self.score += self.rules.score_for_lines(lines)
        logger.debug("Locked %s at (%d, %d), cleared %d rows", a.kind.name, a.x, a.y, lines)
        self.active = None
        alive = self.spawn()
        return DropResult(moved=False, locked=True, lines_cleared=lines, game_over=not alive)

    def step(self, action: Action) -> DropResult:
        if not self.running:
            return DropResult(moved=False, game_over=self.game_over)

        if action == Action.LEFT:
            return DropResult(moved=self.try_move(-1, 0))
        elif action == Action.RIGHT:
            return DropResult(moved=self.try_move(1, 0))
        elif action == Action.ROTATE:
            return DropResult(moved=self.try_rotate())
        elif action == Action.SOFT_DROP:
            return self.tick()
        elif action == Action.HARD_DROP:
            return self.hard_drop()
        return DropResult(moved=False)

    def get_state(self) -> np.ndarray:
        # Overlay current piece on a copy of the grid
        state = self.grid.clone_state()
        if self.active is not None:
            for x, y in self.active.cells():
                if self.grid.is_inside(x, y):
                    # Use negative to indicate falling piece overlay
                    state[y, x] = -int(self.active.kind)
        return state

    def get_stats(self) -> dict:
        return {
            "final_score": self.score,
            "lines_cleared": self.lines_cleared_total,
            "pieces_locked": self.pieces_locked,
            "max_height": self.grid.get_max_height(),
            "avg_lines_per_piece": self.lines_cleared_total / max(1, self.pieces_locked),
        }
