from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Mapping, Optional

from sudoku_solver.grid import CandidateGrid
from sudoku_solver.models import (
    ContradictoryPuzzleError,
    FailureKind,
    InvalidPuzzleError,
    Puzzle,
    SearchBudgetExceeded,
    SearchStats,
    Solution,
    SolutionResult,
)
from sudoku_solver.propagate import assign_cell
from sudoku_solver.search import search
from sudoku_solver.topology import ALL_UNITS, CELL_IDS, INDEX, is_cell_id

log = logging.getLogger(__name__)


# ------------------ puzzle input ------------------
def _norm_digit(cid: str, value: Any) -> int:
    if isinstance(value, bool):
        raise InvalidPuzzleError(f"Invalid digit {value!r} for cell {cid}", cid)
    if isinstance(value, str) and len(value) == 1 and value in "0123456789":
        value = int(value)
    if not isinstance(value, int) or not 1 <= value <= 9:
        raise InvalidPuzzleError(f"Invalid digit {value!r} for cell {cid}", cid)
    return value


def normalize_puzzle(puzzle: Mapping[str, Any]) -> Puzzle:
    """Check cell ids and digits; string digits are turned into ints."""
    out: Puzzle = {}
    for cid, value in puzzle.items():
        if cid not in INDEX:
            raise InvalidPuzzleError(f"Unknown cell id {cid!r}", cid)
        out[cid] = _norm_digit(cid, value)
    return out


def parse_81(s: str) -> Puzzle:
    """81 characters, digits for givens and '.' or '0' for blanks; whitespace ignored."""
    s = "".join(ch for ch in (s or "") if not ch.isspace())
    if len(s) != 81:
        raise InvalidPuzzleError(f"Expected 81 characters after removing whitespace, got {len(s)}")
    puzzle: Puzzle = {}
    for i, ch in enumerate(s):
        if ch in ".0":
            continue
        if ch not in "123456789":
            raise InvalidPuzzleError(f"Invalid char '{ch}' in grid.", CELL_IDS[i])
        puzzle[CELL_IDS[i]] = int(ch)
    return puzzle


def puzzle_from_records(records: Iterable[Mapping[str, Any]]) -> Puzzle:
    """Puzzle from catalog records shaped like {"id": "a0", "value": "5"}."""
    raw: Dict[str, Any] = {}
    for rec in records:
        try:
            cid, value = rec["id"], rec["value"]
        except (KeyError, TypeError):
            raise InvalidPuzzleError(f"Malformed cell record {rec!r}") from None
        if not is_cell_id(cid):
            raise InvalidPuzzleError(f"Unknown cell id {cid!r}")
        if cid in raw:
            raise InvalidPuzzleError(f"Cell {cid} given more than once", cid)
        raw[cid] = value
    return normalize_puzzle(raw)


def solution_to_81(solution: Solution) -> str:
    return "".join(str(solution[cid]) for cid in CELL_IDS)


def verify_solution(puzzle: Mapping[str, int], solution: Mapping[str, int]) -> bool:
    """True if every unit holds 1..9 once and every given is kept."""
    if set(solution) != set(CELL_IDS):
        return False
    for unit in ALL_UNITS:
        if sorted(solution[CELL_IDS[i]] for i in unit) != list(range(1, 10)):
            return False
    return all(solution[cid] == d for cid, d in puzzle.items())


# ------------------ solving ------------------
def initial_grid(puzzle: Mapping[str, Any]) -> CandidateGrid:
    """
    Full-candidate grid with every given assigned.
    Raises ContradictoryPuzzleError on the first given that cannot be placed.
    """
    givens = normalize_puzzle(puzzle)
    grid = CandidateGrid.full()
    for cid in sorted(givens, key=INDEX.__getitem__):
        d = givens[cid]
        if not assign_cell(grid, cid, d):
            log.warning("Couldn't assign value %d to cell %s", d, cid)
            raise ContradictoryPuzzleError(
                f"Given {d} at cell {cid} contradicts the other givens", cid, d
            )
    return grid


def solve(
    puzzle: Mapping[str, Any],
    *,
    max_branches: Optional[int] = None,
    stats: Optional[SearchStats] = None,
) -> Optional[Solution]:
    """
    Solve a puzzle given as {cell id: digit}.
    Returns the completed grid, or None if no completion exists.
    """
    if stats is None:
        stats = SearchStats()
    grid = initial_grid(puzzle)
    if grid.is_solved():
        return grid.to_solution()

    log.debug("Searching from:\n%s", grid.pretty())
    solved = search(grid, stats, max_branches)
    if solved is None:
        log.info("No solution after %d branches", stats.branches)
        return None
    log.debug("Solved with %d branches, depth %d", stats.branches, stats.max_depth)
    return solved.to_solution()


def solve_result(puzzle: Mapping[str, Any], *, max_branches: Optional[int] = None) -> SolutionResult:
    """Like solve() but every outcome, puzzle errors included, comes back as a SolutionResult."""
    stats = SearchStats()
    try:
        solution = solve(puzzle, max_branches=max_branches, stats=stats)
    except ContradictoryPuzzleError as e:
        return SolutionResult(False, None, stats, FailureKind.CONTRADICTORY_GIVENS, str(e))
    except InvalidPuzzleError as e:
        return SolutionResult(False, None, stats, FailureKind.INVALID_PUZZLE, str(e))
    except SearchBudgetExceeded as e:
        return SolutionResult(False, None, stats, FailureKind.BUDGET_EXCEEDED, str(e))

    if solution is None:
        return SolutionResult(False, None, stats, FailureKind.NO_SOLUTION, "Puzzle has no solution.")
    return SolutionResult(True, solution, stats)
