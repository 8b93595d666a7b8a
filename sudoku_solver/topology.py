"""Fixed 9x9 layout: cell ids, the 27 units and the 20 peers of every cell.

Everything here is computed once at import and never mutated. Two views are
exposed: id-keyed dicts for callers that speak cell ids, and tuples indexed by
the flat row-major cell index for the propagator.
"""
from __future__ import annotations
from typing import Dict, FrozenSet, List, Tuple

ROWS = "abcdefghi"
COLS = "012345678"

N_CELLS = 81


def cell_id(r: int, c: int) -> str:
    return ROWS[r] + COLS[c]


# canonical row-major order: a0, a1, ... a8, b0, ... i8
CELL_IDS: Tuple[str, ...] = tuple(cell_id(r, c) for r in range(9) for c in range(9))
INDEX: Dict[str, int] = {cid: i for i, cid in enumerate(CELL_IDS)}


def _build_units() -> List[Tuple[int, ...]]:
    rows = [tuple(r * 9 + c for c in range(9)) for r in range(9)]
    cols = [tuple(r * 9 + c for r in range(9)) for c in range(9)]
    boxes = [
        tuple(r * 9 + c
              for r in range(br * 3, br * 3 + 3)
              for c in range(bc * 3, bc * 3 + 3))
        for br in range(3) for bc in range(3)
    ]
    return rows + cols + boxes


ALL_UNITS: Tuple[Tuple[int, ...], ...] = tuple(_build_units())


def box_index(r: int, c: int) -> int:
    return (r // 3) * 3 + (c // 3)


# (row unit, column unit, box unit) for every flat index
UNITS_OF: Tuple[Tuple[Tuple[int, ...], ...], ...] = tuple(
    (ALL_UNITS[i // 9], ALL_UNITS[9 + i % 9], ALL_UNITS[18 + box_index(i // 9, i % 9)])
    for i in range(N_CELLS)
)

# peers kept in row-major order so propagation is reproducible
PEERS_OF: Tuple[Tuple[int, ...], ...] = tuple(
    tuple(sorted({j for unit in UNITS_OF[i] for j in unit} - {i}))
    for i in range(N_CELLS)
)

UNITS: Dict[str, List[List[str]]] = {
    CELL_IDS[i]: [[CELL_IDS[j] for j in unit] for unit in UNITS_OF[i]]
    for i in range(N_CELLS)
}
PEERS: Dict[str, FrozenSet[str]] = {
    CELL_IDS[i]: frozenset(CELL_IDS[j] for j in PEERS_OF[i])
    for i in range(N_CELLS)
}


def is_cell_id(value) -> bool:
    return isinstance(value, str) and value in INDEX


def index_of(cid: str) -> int:
    """Flat row-major index of a cell id; KeyError for unknown ids."""
    return INDEX[cid]
