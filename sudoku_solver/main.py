import argparse
import logging
import sys

from sudoku_solver.models import InvalidPuzzleError, SolutionResult
from sudoku_solver.solver import parse_81, solve_result, solution_to_81
from sudoku_solver.topology import CELL_IDS


def print_grid(values):
    for r in range(9):
        if r in (3, 6):
            print("-" * 21)
        row = []
        for c in range(9):
            if c in (3, 6):
                row.append("|")
            v = values.get(CELL_IDS[r * 9 + c], 0)
            row.append(str(v) if v != 0 else ".")
        print(" ".join(row))


def print_report(result: SolutionResult):
    print("SOLVER REPORT")
    print("-" * 60)
    stats = result.stats
    if not result.is_solvable or result.solution is None:
        print(f"Status: FAIL ({result.failure.value})")
        print(f"Explanation: {result.message}")
        if stats is not None:
            print(f"Branches tried: {stats.branches}")
        print("=" * 60)
        return
    print("Status: PASS")
    if stats is not None:
        print(f"Branches tried: {stats.branches} | Dead ends: {stats.contradictions} | Depth: {stats.max_depth}")
    print("\nSOLUTION:\n")
    print_grid(result.solution)
    print()
    print(solution_to_81(result.solution))
    print("=" * 60)


def main(argv=None):
    p = argparse.ArgumentParser(description="Solve a 9x9 sudoku by constraint propagation and search.")
    p.add_argument("--givens", required=True, help="81-char givens (digits + . or 0)")
    p.add_argument("--max-branches", type=int, default=None,
                   help="Give up after trying this many guesses")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        puzzle = parse_81(args.givens)
    except InvalidPuzzleError as e:
        p.error(str(e))

    print("\nGIVENS:\n")
    print_grid(puzzle)
    print()

    result = solve_result(puzzle, max_branches=args.max_branches)
    print_report(result)
    return 0 if result.is_solvable else 1


if __name__ == "__main__":
    sys.exit(main())
