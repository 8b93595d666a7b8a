from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

CellId = str  # row label + column label, e.g. "a0"
Puzzle = Dict[CellId, int]
Solution = Dict[CellId, int]


class InvalidPuzzleError(ValueError):
    """Puzzle could not be turned into a starting grid."""

    def __init__(self, message: str, cell_id: Optional[CellId] = None, digit: Optional[int] = None):
        super().__init__(message)
        self.cell_id = cell_id
        self.digit = digit


class ContradictoryPuzzleError(InvalidPuzzleError):
    """A given conflicts with the other givens."""


class SearchBudgetExceeded(RuntimeError):
    def __init__(self, max_branches: int):
        super().__init__(f"Search gave up after {max_branches} branches")
        self.max_branches = max_branches


class FailureKind(str, Enum):
    NONE = "NONE"
    INVALID_PUZZLE = "INVALID_PUZZLE"
    CONTRADICTORY_GIVENS = "CONTRADICTORY_GIVENS"
    NO_SOLUTION = "NO_SOLUTION"
    BUDGET_EXCEEDED = "BUDGET_EXCEEDED"


@dataclass
class SearchStats:
    branches: int = 0        # candidate digits tried by search
    contradictions: int = 0  # branches rejected by assign
    max_depth: int = 0

    def as_dict(self) -> Dict[str, int]:
        return {
            "branches": self.branches,
            "contradictions": self.contradictions,
            "max_depth": self.max_depth,
        }


@dataclass(frozen=True)
class SolutionResult:
    is_solvable: bool
    solution: Optional[Solution] = None
    stats: Optional[SearchStats] = None
    failure: FailureKind = FailureKind.NONE
    message: str = ""
