"""Zobrist keys for (cell, player) pairs."""

from __future__ import annotations

from connectfour.bitboard import SEEDS, Rng
from connectfour.board import NB_CELLS, NB_PLAYERS, Player


def _make_hashes() -> tuple[int, ...]:
    rng = Rng(SEEDS[1])
    return tuple(rng.sparse_u64() for _ in range(NB_CELLS * NB_PLAYERS))


HASHES: tuple[int, ...] = _make_hashes()


def zobrist_hash(cell: int, player: Player) -> int:
    """Return the key for ``player`` holding ``cell``."""
    if not 0 <= cell < NB_CELLS:
        raise ValueError(f"cell out of range: {cell}")
    return HASHES[cell + NB_CELLS * player.value]