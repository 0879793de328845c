"""Search scores and transposition-table entries."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from connectfour.board import NB_CELLS

WIN_SCORE = 1_000_000
LOSS_SCORE = -WIN_SCORE
MAX_DEPTH = NB_CELLS


class Flag(Enum):
    """How a stored score relates to the true value of a position."""

    EXACT = "exact"
    LOWER_BOUND = "lower_bound"
    UPPER_BOUND = "upper_bound"


def bound_flag(score: int, start_alpha: int, beta: int) -> Flag:
    """Classify ``score`` against the search window it was found in."""
    if score <= start_alpha:
        return Flag.UPPER_BOUND
    if score >= beta:
        return Flag.LOWER_BOUND
    return Flag.EXACT


@dataclass(frozen=True)
class Entry:
    """A stored search result for one position."""

    flag: Flag
    score: int
    depth: int

    def get_score(self, ply: int) -> int:
        """Return the score, with win and loss scores adjusted to ``ply``."""
        if self.score + MAX_DEPTH >= WIN_SCORE:
            return WIN_SCORE - ply
        if self.score - MAX_DEPTH <= LOSS_SCORE:
            return LOSS_SCORE + ply
        return self.score