"""Board geometry, cell naming and players."""

from __future__ import annotations

from enum import Enum

from connectfour.bitboard import bit_mask

NB_ROWS = 6
NB_COLS = 7
NB_CELLS = NB_ROWS * NB_COLS
NB_PLAYERS = 2
NB_CONNECTED = 4
"""The number of pieces that must be connected to win the game."""

EMPTY_SYMBOL = "⚪"

_ROW_NAMES = "123456"
_COL_NAMES = "ABCDEFG"


def mask_cell(row: int, col: int) -> int:
    """Return a bitboard with only the cell at ``row``, ``col`` set."""
    return bit_mask(cell_of(row, col))


def row_of(cell: int) -> int:
    return cell // NB_COLS


def col_of(cell: int) -> int:
    return cell % NB_COLS


def cell_of(row: int, col: int) -> int:
    return row * NB_COLS + col


def rev_row(row: int) -> int:
    return NB_ROWS - row - 1


def rev_col(col: int) -> int:
    return NB_COLS - col - 1


COL_MASKS: tuple[int, ...] = tuple(
    sum(mask_cell(row, col) for row in range(NB_ROWS)) for col in range(NB_COLS)
)


def row_name_of(row: int) -> str:
    if not 0 <= row < NB_ROWS:
        raise ValueError(f"row out of range: {row}")
    return _ROW_NAMES[row]


def col_name_of(col: int) -> str:
    if not 0 <= col < NB_COLS:
        raise ValueError(f"column out of range: {col}")
    return _COL_NAMES[col]


class Player(Enum):
    """A side in the game; the value is its board index."""

    YELLOW = 0
    RED = 1

    def opponent(self) -> Player:
        return Player.RED if self is Player.YELLOW else Player.YELLOW

    def symbol(self) -> str:
        return "🟡" if self is Player.YELLOW else "🔴"

    def color(self) -> str:
        return "\x1b[33m" if self is Player.YELLOW else "\x1b[31m"