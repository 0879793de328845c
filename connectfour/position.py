"""Game positions: move generation, results and incremental hashing."""

from __future__ import annotations

from enum import Enum

from connectfour.bitboard import bit_clear, bit_mask, is_bit_set, iter_bits
from connectfour.board import (
    NB_CELLS,
    NB_COLS,
    NB_CONNECTED,
    NB_ROWS,
    Player,
    cell_of,
    mask_cell,
)
from connectfour.direction import Direction
from connectfour.zobrist import zobrist_hash


class GameResult(Enum):
    """Outcome of a position from the side to move's point of view."""

    LOSS = "loss"
    DRAW = "draw"
    ONGOING = "ongoing"


def get_legal_moves(full_occ: int) -> list[int]:
    """Return the lowest free cell of each non-full column, left to right."""
    moves = []
    for col in range(NB_COLS):
        free = next(
            (cell_of(row, col) for row in range(NB_ROWS)
             if not is_bit_set(full_occ, cell_of(row, col))),
            None,
        )
        if free is not None:
            moves.append(free)
    return moves


_WIN_DIRECTIONS = (
    Direction.EAST,
    Direction.NORTH,
    Direction.SOUTH_EAST,
    Direction.NORTH_EAST,
)

_WIN_MASKS = (
    sum(mask_cell(0, i) for i in range(NB_CONNECTED)),
    sum(mask_cell(i, 0) for i in range(NB_CONNECTED)),
    sum(mask_cell(i, NB_CONNECTED - i - 1) for i in range(NB_CONNECTED)),
    sum(mask_cell(i, i) for i in range(NB_CONNECTED)),
)

_FULL_BOARD = (1 << NB_CELLS) - 1


def _is_connected(player_occ: int, direction: Direction, win_mask: int, cell: int) -> bool:
    if direction.distance_to_edge(cell) < NB_CONNECTED - 1:
        return False
    if direction is Direction.SOUTH_EAST:
        shift = cell - NB_COLS * (NB_CONNECTED - 1)
    else:
        shift = cell
    shifted = win_mask << shift
    return player_occ & shifted == shifted


def is_win(player_occ: int) -> bool:
    """Tell whether the pieces in ``player_occ`` contain a connected line."""
    return any(
        _is_connected(player_occ, direction, mask, cell)
        for cell in iter_bits(player_occ)
        for direction, mask in zip(_WIN_DIRECTIONS, _WIN_MASKS)
    )


def is_draw(full_occ: int) -> bool:
    """Tell whether every cell of the board is occupied."""
    return full_occ == _FULL_BOARD


class Position:
    """A board with both players' pieces, the side to move and a Zobrist key."""

    def __init__(self) -> None:
        self._board = [0] * len(Player)
        self._active = Player.YELLOW
        self._key = 0

    def active_player(self) -> Player:
        return self._active

    def occupancy_of(self, player: Player) -> int:
        return self._board[player.value]

    def full_occupancy(self) -> int:
        return self.occupancy_of(Player.YELLOW) | self.occupancy_of(Player.RED)

    def zobrist_key(self) -> int:
        return self._key

    def result(self) -> GameResult:
        """Return the outcome for the side to move."""
        if is_win(self.occupancy_of(self._active.opponent())):
            return GameResult.LOSS
        if is_draw(self.full_occupancy()):
            return GameResult.DRAW
        return GameResult.ONGOING

    def legal_moves(self) -> list[int]:
        return get_legal_moves(self.full_occupancy())

    def play_move(self, mv: int) -> None:
        """Place a piece of the side to move on cell ``mv``."""
        player = self._active
        self._board[player.value] |= bit_mask(mv)
        self._key ^= zobrist_hash(mv, player)
        self._active = player.opponent()

    def undo_move(self, mv: int) -> None:
        """Take back the piece last placed on cell ``mv``."""
        player = self._active.opponent()
        self._board[player.value] &= bit_clear(mv)
        self._key ^= zobrist_hash(mv, player)
        self._active = player