"""Static evaluation of non-terminal positions."""

from __future__ import annotations

from connectfour.bitboard import is_bit_set, iter_bits
from connectfour.board import COL_MASKS, Player
from connectfour.direction import Direction
from connectfour.position import Position

BONUS_COL_OCCUPIED = 127
MALUS_ISLAND = 61

_NEIGHBOUR_DIRECTIONS = (
    Direction.SOUTH,
    Direction.NORTH,
    Direction.WEST,
    Direction.EAST,
    Direction.SOUTH_WEST,
    Direction.SOUTH_EAST,
    Direction.NORTH_WEST,
    Direction.NORTH_EAST,
)

_PLAYER_MULTIPLIERS = {Player.YELLOW: 1, Player.RED: -1}


def _flood(player_occ: int, start: int, seen: set[int]) -> None:
    stack = [start]
    seen.add(start)
    while stack:
        cell = stack.pop()
        for direction in _NEIGHBOUR_DIRECTIONS:
            if direction.distance_to_edge(cell) == 0:
                continue
            neighbour = direction.next_cell(cell)
            if neighbour not in seen and is_bit_set(player_occ, neighbour):
                seen.add(neighbour)
                stack.append(neighbour)


def count_islands(player_occ: int) -> int:
    """Count groups of pieces connected in any of the eight directions."""
    seen: set[int] = set()
    count = 0
    for cell in iter_bits(player_occ):
        if cell not in seen:
            _flood(player_occ, cell, seen)
            count += 1
    return count


def count_occupied_columns(player_occ: int) -> int:
    """Count the columns holding at least one of the pieces."""
    return sum(1 for mask in COL_MASKS if player_occ & mask)


def eval_player(player_occ: int) -> int:
    """Score one side's pieces: spread over columns is good, fragments are bad."""
    return (
        count_occupied_columns(player_occ) * BONUS_COL_OCCUPIED
        - count_islands(player_occ) * MALUS_ISLAND
    )


def static_eval(pos: Position) -> int:
    """Evaluate ``pos`` from the side to move's point of view."""
    yellow_score = eval_player(pos.occupancy_of(Player.YELLOW))
    red_score = eval_player(pos.occupancy_of(Player.RED))
    return (yellow_score - red_score) * _PLAYER_MULTIPLIERS[pos.active_player()]