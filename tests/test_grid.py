# tests/test_grid.py
import pytest

from sudoku_solver.grid import FULL_MASK, CandidateGrid, bit, mask_to_digits, popcount, single_digit


def test_bit_helpers():
    assert bit(1) == 1
    assert bit(9) == 256
    assert popcount(FULL_MASK) == 9
    assert mask_to_digits(bit(2) | bit(7)) == [2, 7]
    assert single_digit(bit(6)) == 6


def test_full_grid():
    g = CandidateGrid.full()
    assert g.candidates("a0") == list(range(1, 10))
    assert not g.is_solved()
    assert not g.is_determined(0)


def test_clone_is_independent():
    g = CandidateGrid.full()
    c = g.clone()
    c.cand[0] = bit(3)
    assert g.mask_at(0) == FULL_MASK
    assert c.mask_at(0) == bit(3)
    assert g != c


def test_to_solution_requires_solved_grid():
    with pytest.raises(ValueError):
        CandidateGrid.full().to_solution()


def test_wrong_size_rejected():
    with pytest.raises(ValueError):
        CandidateGrid([FULL_MASK] * 80)


def test_pretty_marks_undetermined():
    g = CandidateGrid.full()
    g.cand[0] = bit(5)
    first = g.pretty().splitlines()[0]
    assert first.startswith("5 . .")
