from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import pygame

from falling_blocks.game import FallingBlockGame, TetrominoType

PREVIEW_CELLS = 4
BACKGROUND = (10, 10, 14)
TEXT_COLOR = (230, 230, 230)

EMPTY_COLOR = (20, 20, 26)

PIECE_COLORS = {
    TetrominoType.I: (0, 240, 240),
    TetrominoType.O: (240, 240, 0),
    TetrominoType.T: (160, 0, 240),
    TetrominoType.S: (0, 240, 0),
    TetrominoType.Z: (240, 0, 0),
    TetrominoType.J: (0, 0, 240),
    TetrominoType.L: (240, 160, 0),
}


def cell_color(v: int) -> Tuple[int, int, int]:
    # Negative values mark the falling piece in get_state()
    if v == 0:
        return EMPTY_COLOR
    return PIECE_COLORS[TetrominoType(abs(v))]


def ghost_color(kind: TetrominoType) -> Tuple[int, int, int]:
    r, g, b = PIECE_COLORS[kind]
    return r // 2, g // 2, b // 2


class Renderer:
    """Paints engine state; reads only, never mutates the game."""

    def __init__(self, cell_size: int = 30, margin: int = 20) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self._font: Optional[pygame.font.Font] = None

    def window_size(self, game: FallingBlockGame) -> Tuple[int, int]:
        board_w = game.grid.width * self.cell_size
        board_h = game.grid.height * self.cell_size
        panel_w = (PREVIEW_CELLS + 2) * self.cell_size
        return self.margin * 3 + board_w + panel_w, self.margin * 2 + board_h

    def _cell_rect(self, x: int, y: int, x0: int = 0, y0: int = 0) -> pygame.Rect:
        return pygame.Rect(
            x0 + x * self.cell_size,
            y0 + y * self.cell_size,
            self.cell_size - 1,
            self.cell_size - 1,
        )

    def _board_surface(self, game: FallingBlockGame) -> pygame.Surface:
        """Locked cells, then the ghost outline, then the falling piece on top."""
        locked = game.grid.grid
        h, w = locked.shape
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill((30, 30, 36))
        for y in range(h):
            for x in range(w):
                pygame.draw.rect(surf, cell_color(int(locked[y, x])), self._cell_rect(x, y))
        self._draw_ghost(surf, game)
        state = game.get_state()
        for y, x in zip(*np.nonzero(state < 0)):
            pygame.draw.rect(surf, cell_color(int(state[y, x])), self._cell_rect(int(x), int(y)))
        return surf

    def _draw_ghost(self, surf: pygame.Surface, game: FallingBlockGame) -> None:
        ghost_y = game.ghost_row()
        if game.active is None or ghost_y is None or ghost_y == game.active.y:
            return
        color = ghost_color(game.active.kind)
        for x, y in game.active.piece.cells_at(game.active.x, ghost_y):
            if game.grid.is_inside(x, y):
                pygame.draw.rect(surf, color, self._cell_rect(x, y), 2)

    def _draw_next(self, screen: pygame.Surface, game: FallingBlockGame, x0: int, y0: int) -> None:
        size = PREVIEW_CELLS * self.cell_size
        pygame.draw.rect(screen, (30, 30, 36), pygame.Rect(x0, y0, size, size))
        if game.next_piece is None:
            return
        color = PIECE_COLORS[game.next_piece.kind]
        for x, y in game.next_piece.cells_at(0, 0):
            pygame.draw.rect(screen, color, self._cell_rect(x, y, x0, y0))

    def _text(self, screen: pygame.Surface, txt: str, pos: Tuple[int, int],
              color: Tuple[int, int, int] = TEXT_COLOR) -> None:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 24)
        screen.blit(self._font.render(txt, True, color), pos)

    def draw(self, screen: pygame.Surface, game: FallingBlockGame) -> None:
        screen.fill(BACKGROUND)
        screen.blit(self._board_surface(game), (self.margin, self.margin))

        x_panel = self.margin * 2 + game.grid.width * self.cell_size
        self._text(screen, "Next", (x_panel, self.margin))
        self._draw_next(screen, game, x_panel, self.margin + 24)

        y_text = self.margin + 24 + PREVIEW_CELLS * self.cell_size + 16
        info_lines = [
            f"Score: {game.score}",
            f"Lines: {game.lines_cleared_total}",
            "Move: Left/Right",
            "Rotate: Up",
            "Soft drop: Down",
            "Hard drop: Space",
            "New game: Enter/N",
        ]
        for i, txt in enumerate(info_lines):
            self._text(screen, txt, (x_panel, y_text + i * 20))

        if game.game_over:
            self._text(screen, f"Game Over! Score: {game.score}", (self.margin, 2), (255, 100, 100))
        elif not game.running:
            self._text(screen, "Press Enter to start", (self.margin, 2))
        pygame.display.flip()
