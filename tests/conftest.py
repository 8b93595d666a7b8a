# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "sudoku_solver" and "flask_api" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sudoku_solver.solver import parse_81  # noqa: E402

# 30 givens, solvable by propagation and search
EASY_81 = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)
EASY_SOLUTION_81 = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)

# 17 givens, needs guessing
HARD_81 = "4.....8.5.3..........7......2.....6.....8.4......1.......6.3.7.5..2.....1.4......"
HARD_SOLUTION_81 = "417369825632158947958724316825437169791586432346912758289643571573291684164875293"


@pytest.fixture
def easy_puzzle():
    return parse_81(EASY_81)


@pytest.fixture
def hard_puzzle():
    return parse_81(HARD_81)


@pytest.fixture
def full_puzzle():
    return parse_81(EASY_SOLUTION_81)
