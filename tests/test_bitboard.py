import pytest

from connectfour.bitboard import (
    SEEDS,
    Rng,
    bit_clear,
    bit_mask,
    is_bit_set,
    iter_bits,
    pop_bit,
)

U64 = (1 << 64) - 1


@pytest.mark.parametrize("cell", [0, 1, 7, 41, 63])
def test_bit_mask_single_bit(cell):
    mask = bit_mask(cell)
    assert mask.bit_count() == 1 if hasattr(int, "bit_count") else bin(mask).count("1") == 1
    assert mask >> cell == 1


@pytest.mark.parametrize("cell", [0, 5, 63])
def test_bit_clear_is_complement(cell):
    cleared = bit_clear(cell)
    assert cleared | bit_mask(cell) == U64
    assert cleared & bit_mask(cell) == 0


def test_is_bit_set():
    bb = bit_mask(3) | bit_mask(10)
    assert is_bit_set(bb, 3)
    assert is_bit_set(bb, 10)
    assert not is_bit_set(bb, 4)


def test_pop_bit_returns_lowest():
    bb = bit_mask(2) | bit_mask(9) | bit_mask(40)
    cell, rest = pop_bit(bb)
    assert cell == 2
    assert rest == bit_mask(9) | bit_mask(40)


def test_pop_bit_empty_raises():
    with pytest.raises(ValueError):
        pop_bit(0)


def test_iter_bits_order_and_roundtrip():
    cells = [0, 6, 13, 41]
    bb = 0
    for c in cells:
        bb |= bit_mask(c)
    assert list(iter_bits(bb)) == cells
    assert list(iter_bits(0)) == []


def test_rng_deterministic():
    a = Rng(SEEDS[1])
    b = Rng(SEEDS[1])
    assert [a.next() for _ in range(10)] == [b.next() for _ in range(10)]


def test_rng_values_stay_in_u64_and_nonzero():
    rng = Rng(SEEDS[0])
    for _ in range(100):
        value = rng.next()
        assert 0 < value <= U64


def test_sparse_u64_is_and_of_three_nexts():
    sparse = Rng(SEEDS[1])
    plain = Rng(SEEDS[1])
    for _ in range(20):
        expected = plain.next() & plain.next() & plain.next()
        assert sparse.sparse_u64() == expected


def test_sparse_u64_is_subset_of_each_draw():
    rng = Rng(SEEDS[0])
    state = rng.state
    value = rng.sparse_u64()
    check = Rng(state)
    for _ in range(3):
        assert value & check.next() == value