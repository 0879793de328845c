"""Compass directions on the board and their geometry."""

from __future__ import annotations

from enum import Enum

from connectfour.board import NB_COLS, col_of, rev_col, rev_row, row_of


class Direction(Enum):
    """One of the eight directions a neighbouring cell can lie in."""

    SOUTH = "south"
    NORTH = "north"
    WEST = "west"
    EAST = "east"
    SOUTH_WEST = "south_west"
    SOUTH_EAST = "south_east"
    NORTH_WEST = "north_west"
    NORTH_EAST = "north_east"

    def opposite(self) -> Direction:
        """Return the direction pointing the other way."""
        return _OPPOSITES[self]

    def distance_to_edge(self, cell: int) -> int:
        """Return how many steps can be taken from ``cell`` before leaving the board."""
        if self is Direction.SOUTH:
            return row_of(cell)
        if self is Direction.NORTH:
            return rev_row(row_of(cell))
        if self is Direction.WEST:
            return col_of(cell)
        if self is Direction.EAST:
            return rev_col(col_of(cell))
        vertical, horizontal = _COMPONENTS[self]
        return min(vertical.distance_to_edge(cell), horizontal.distance_to_edge(cell))

    def next_cell(self, cell: int) -> int:
        """Return the cell one step away from ``cell`` in this direction."""
        return cell + _OFFSETS[self]


_OPPOSITES = {
    Direction.SOUTH: Direction.NORTH,
    Direction.NORTH: Direction.SOUTH,
    Direction.WEST: Direction.EAST,
    Direction.EAST: Direction.WEST,
    Direction.SOUTH_WEST: Direction.NORTH_EAST,
    Direction.SOUTH_EAST: Direction.NORTH_WEST,
    Direction.NORTH_WEST: Direction.SOUTH_EAST,
    Direction.NORTH_EAST: Direction.SOUTH_WEST,
}

_OFFSETS = {
    Direction.SOUTH: -NB_COLS,
    Direction.NORTH: NB_COLS,
    Direction.WEST: -1,
    Direction.EAST: 1,
    Direction.SOUTH_WEST: -NB_COLS - 1,
    Direction.SOUTH_EAST: -NB_COLS + 1,
    Direction.NORTH_WEST: NB_COLS - 1,
    Direction.NORTH_EAST: NB_COLS + 1,
}

_COMPONENTS = {
    Direction.SOUTH_WEST: (Direction.SOUTH, Direction.WEST),
    Direction.SOUTH_EAST: (Direction.SOUTH, Direction.EAST),
    Direction.NORTH_WEST: (Direction.NORTH, Direction.WEST),
    Direction.NORTH_EAST: (Direction.NORTH, Direction.EAST),
}