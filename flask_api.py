from __future__ import annotations

import logging

from flask import Flask, request, jsonify
from flask_cors import CORS

from sudoku_solver.models import InvalidPuzzleError, SolutionResult
from sudoku_solver.solver import normalize_puzzle, parse_81, puzzle_from_records, solve_result, solution_to_81

log = logging.getLogger(__name__)

app = Flask(__name__)
CORS(app)


def _puzzle_from_body(data):
    """
    Accepts any one of:
      {"givens": "<81 chars>"}
      {"cells": [{"id": "a0", "value": 5}, ...]}
      {"puzzle": {"a0": 5, ...}}
    """
    if data.get("givens") is not None:
        return parse_81(str(data["givens"]))
    if data.get("cells") is not None:
        cells = data["cells"]
        if not isinstance(cells, list):
            raise InvalidPuzzleError("'cells' must be a list of {id, value} records")
        return puzzle_from_records(cells)
    if data.get("puzzle") is not None:
        puzzle = data["puzzle"]
        if not isinstance(puzzle, dict):
            raise InvalidPuzzleError("'puzzle' must map cell ids to digits")
        return normalize_puzzle(puzzle)
    raise InvalidPuzzleError("Request needs one of 'givens', 'cells' or 'puzzle'")


def _max_branches(data):
    raw = data.get("max_branches")
    if raw is None:
        return None
    if isinstance(raw, bool) or not isinstance(raw, int) or raw < 0:
        raise ValueError("'max_branches' must be a non-negative integer")
    return raw


def _result_json(result: SolutionResult):
    return {
        "ok": result.is_solvable,
        "solution81": solution_to_81(result.solution) if result.solution else None,
        "solution": result.solution,
        "failure": result.failure.value,
        "message": result.message,
        "stats": result.stats.as_dict() if result.stats is not None else None,
    }


@app.get("/health")
def health():
    return jsonify({"ok": True})


@app.post("/solve")
def solve():
    try:
        data = request.get_json(force=True, silent=True)
        if not isinstance(data, dict):
            raise ValueError("Request body must be a JSON object")
        puzzle = _puzzle_from_body(data)
        max_branches = _max_branches(data)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    result = solve_result(puzzle, max_branches=max_branches)
    log.info("solve: %d givens -> %s", len(puzzle), result.failure.value)
    return jsonify({"solver": _result_json(result)})


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app.run(host="0.0.0.0", port=8000, debug=True)
