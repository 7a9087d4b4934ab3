from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScoringRules:
    line_bonus: int = 10

    def score_for_lines(self, lines: int) -> int:
        if lines <= 0:
            return 0
        return lines * self.line_bonus
