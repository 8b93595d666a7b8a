"""Constraint propagation: assign / eliminate.

Both functions mutate the grid in place and return False on a contradiction.
After a False return the grid is half-propagated and must be thrown away.
Candidate sets only ever shrink, so the mutual recursion terminates.
"""
from __future__ import annotations

from sudoku_solver.grid import CandidateGrid, bit, mask_to_digits, single_digit
from sudoku_solver.topology import INDEX, PEERS_OF, UNITS_OF


def assign(grid: CandidateGrid, i: int, d: int) -> bool:
    """Fix cell i to digit d by eliminating every other candidate."""
    others = grid.cand[i] & ~bit(d)
    for other in mask_to_digits(others):
        if not eliminate(grid, i, other):
            return False
    return True


def eliminate(grid: CandidateGrid, i: int, d: int) -> bool:
    """Remove digit d from cell i and propagate the consequences."""
    cand = grid.cand
    b = bit(d)
    if not cand[i] & b:
        return True  # already eliminated

    cand[i] &= ~b
    remaining = cand[i]

    if remaining == 0:
        return False  # cell has no possible value

    # (1) cell reduced to one value: remove it from the peers
    if remaining & (remaining - 1) == 0:
        last = single_digit(remaining)
        for p in PEERS_OF[i]:
            if not eliminate(grid, p, last):
                return False

    # (2) a unit reduced to one place for d: put it there
    for unit in UNITS_OF[i]:
        places = [j for j in unit if cand[j] & b]
        if not places:
            return False
        if len(places) == 1:
            if not assign(grid, places[0], d):
                return False

    return True


def assign_cell(grid: CandidateGrid, cid: str, d: int) -> bool:
    return assign(grid, INDEX[cid], d)
