import pytest

from connectfour.bitboard import SEEDS, Rng
from connectfour.board import NB_CELLS, Player
from connectfour.zobrist import HASHES, zobrist_hash


def test_first_key_comes_from_seeded_generator():
    assert zobrist_hash(0, Player.YELLOW) == Rng(SEEDS[1]).sparse_u64()


def test_red_keys_follow_yellow_keys_in_generator_order():
    rng = Rng(SEEDS[1])
    values = [rng.sparse_u64() for _ in range(NB_CELLS + 1)]
    assert zobrist_hash(0, Player.RED) == values[NB_CELLS]


def test_all_keys_are_distinct():
    keys = {zobrist_hash(cell, p) for cell in range(NB_CELLS) for p in Player}
    assert len(keys) == 2 * NB_CELLS
    assert len(HASHES) == 2 * NB_CELLS


def test_keys_fit_in_64_bits():
    keys = [zobrist_hash(cell, p) for cell in range(NB_CELLS) for p in Player]
    assert all(0 <= key < (1 << 64) for key in keys)


@pytest.mark.parametrize("cell", [-1, NB_CELLS])
def test_out_of_range_cell_is_rejected(cell):
    with pytest.raises(ValueError):
        zobrist_hash(cell, Player.YELLOW)