"""Bitboard helpers and a small deterministic pseudo-random generator."""

from __future__ import annotations

from collections.abc import Iterator

_U64 = (1 << 64) - 1

SEEDS: tuple[int, int] = (999999, 4100382397009)


def bit_mask(cell: int) -> int:
    """Return a bitboard with only ``cell`` set."""
    return 1 << cell


def bit_clear(cell: int) -> int:
    """Return a 64-bit bitboard with every bit set except ``cell``."""
    return ~bit_mask(cell) & _U64


def is_bit_set(bb: int, cell: int) -> bool:
    """Tell whether ``cell`` is set in ``bb``."""
    return bb & bit_mask(cell) != 0


def pop_bit(bb: int) -> tuple[int, int]:
    """Return the lowest set cell of ``bb`` and the bitboard without it."""
    if bb == 0:
        raise ValueError("cannot pop a bit from an empty bitboard")
    cell = (bb & -bb).bit_length() - 1
    return cell, bb & bit_clear(cell)


def iter_bits(bb: int) -> Iterator[int]:
    """Yield the set cells of ``bb`` from lowest to highest."""
    while bb:
        cell, bb = pop_bit(bb)
        yield cell


class Rng:
    """Xorshift generator over 64-bit unsigned integers."""

    def __init__(self, seed: int) -> None:
        self.state = seed & _U64

    def next(self) -> int:
        """Advance the generator and return the new state."""
        n = self.state
        n ^= (n << 13) & _U64
        n ^= n >> 7
        n ^= (n << 17) & _U64
        self.state = n
        return n

    def sparse_u64(self) -> int:
        """Return the AND of three successive values, giving few set bits."""
        return self.next() & self.next() & self.next()