from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScoringRules:
    """Line clears score the square of the lines removed in one pass."""

    exponent: int = 2

    def score_for_lines(self, lines: int) -> int:
        if lines <= 0:
            return 0
        return lines ** self.exponent
