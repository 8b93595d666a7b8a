from __future__ import annotations
from typing import List, Optional

from sudoku_solver.models import Solution
from sudoku_solver.topology import CELL_IDS, INDEX, N_CELLS

FULL_MASK = (1 << 9) - 1  # 0b111111111


def bit(d: int) -> int:
    return 1 << (d - 1)


def popcount(mask: int) -> int:
    return mask.bit_count()


def mask_to_digits(mask: int) -> List[int]:
    return [d for d in range(1, 10) if mask & bit(d)]


def single_digit(mask: int) -> int:
    """Digit held by a one-bit mask."""
    return mask.bit_length()


class CandidateGrid:
    """
    Working state of one solve attempt:
    - cand[i] = bitmask of digits still possible for flat cell index i
    - solved when every mask has exactly one bit
    - clone() gives each search branch its own copy
    """

    __slots__ = ("cand",)

    def __init__(self, cand: Optional[List[int]] = None):
        if cand is None:
            cand = [FULL_MASK] * N_CELLS
        elif len(cand) != N_CELLS:
            raise ValueError(f"Expected {N_CELLS} candidate masks, got {len(cand)}")
        self.cand = cand

    @staticmethod
    def full() -> "CandidateGrid":
        return CandidateGrid()

    def clone(self) -> "CandidateGrid":
        return CandidateGrid(self.cand[:])

    def mask_at(self, i: int) -> int:
        return self.cand[i]

    def candidates(self, cid: str) -> List[int]:
        return mask_to_digits(self.cand[INDEX[cid]])

    def is_determined(self, i: int) -> bool:
        return popcount(self.cand[i]) == 1

    def is_solved(self) -> bool:
        return all(popcount(m) == 1 for m in self.cand)

    def to_solution(self) -> Solution:
        if not self.is_solved():
            raise ValueError("Grid is not solved")
        return {CELL_IDS[i]: single_digit(m) for i, m in enumerate(self.cand)}

    def pretty(self) -> str:
        lines = []
        for r in range(9):
            if r in (3, 6):
                lines.append("-" * 21)
            row = []
            for c in range(9):
                if c in (3, 6):
                    row.append("|")
                m = self.cand[r * 9 + c]
                row.append(str(single_digit(m)) if popcount(m) == 1 else ".")
            lines.append(" ".join(row))
        return "\n".join(lines)

    def __eq__(self, other) -> bool:
        return isinstance(other, CandidateGrid) and self.cand == other.cand

    def __repr__(self) -> str:
        determined = sum(1 for m in self.cand if popcount(m) == 1)
        return f"<CandidateGrid {determined}/{N_CELLS} determined>"
