from __future__ import annotations

import logging
from typing import Optional

from sudoku_solver.grid import CandidateGrid, mask_to_digits, popcount
from sudoku_solver.models import SearchBudgetExceeded, SearchStats
from sudoku_solver.propagate import assign

log = logging.getLogger(__name__)


def select_cell(grid: CandidateGrid) -> int:
    """
    Undetermined cell with the fewest candidates.
    Ties go to the first cell in row-major order. Returns -1 if none is left.
    """
    best = -1
    best_count = 10
    for i, m in enumerate(grid.cand):
        n = popcount(m)
        if 1 < n < best_count:
            best = i
            best_count = n
            if n == 2:
                break  # cannot do better than two
    return best


def search(
    grid: CandidateGrid,
    stats: Optional[SearchStats] = None,
    max_branches: Optional[int] = None,
    depth: int = 0,
) -> Optional[CandidateGrid]:
    """
    Depth-first search over clones of grid.
    Returns the first solved grid found, or None when every branch fails.
    Raises SearchBudgetExceeded once more than max_branches digits were tried.
    """
    if stats is None:
        stats = SearchStats()
    if depth > stats.max_depth:
        stats.max_depth = depth

    i = select_cell(grid)
    if i < 0:
        return grid if grid.is_solved() else None

    for d in mask_to_digits(grid.cand[i]):
        stats.branches += 1
        if max_branches is not None and stats.branches > max_branches:
            raise SearchBudgetExceeded(max_branches)

        branch = grid.clone()
        if not assign(branch, i, d):
            stats.contradictions += 1
            continue

        solved = search(branch, stats, max_branches, depth + 1)
        if solved is not None:
            return solved

    if depth == 0:
        log.debug("Search exhausted after %d branches", stats.branches)
    return None
