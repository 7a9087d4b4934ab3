from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class GameConfig:
    width: int = 10
    height: int = 20
    random_seed: Optional[int] = None
    spawn_x: Optional[int] = None  # None centers a 4-wide box
    spawn_y: int = 0
    tick_ms: int = 500

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"grid dimensions must be positive, got {self.width}x{self.height}")
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        if self.spawn_x is not None and not 0 <= self.spawn_x < self.width:
            raise ValueError(f"spawn_x must be within [0, {self.width}), got {self.spawn_x}")
        if self.spawn_y >= self.height:
            raise ValueError(f"spawn_y must be above row {self.height}, got {self.spawn_y}")

    @property
    def spawn_column(self) -> int:
        if self.spawn_x is not None:
            return self.spawn_x
        return max(0, (self.width - 4) // 2)
