#!/usr/bin/env python3
"""
Shooting Stars Solver

Finds the shortest sequence of explosions turning a 3x3 grid of stars and
holes into the winning grid.
"""

import argparse
import sys
from typing import List, Optional

from src.bfs_solver.config import SolverConfig
from src.bfs_solver.solver import BFSSolver
from src.game.grid import ERROR_GRID
from src.game.play import Mode, play, play_all
from src.game.text import parse_grid
from src.util.logger import logger, set_level

# Only the top left cell is a star.
DEMO_GRID = "*..\n...\n..."


def normalize_grid_text(text: str) -> str:
    """Accept "*../.../...", "*........" or the 3-line form."""
    text = text.strip()
    if "/" in text:
        return "\n".join(text.split("/"))
    if "\n" not in text and len(text) == 9:
        return "\n".join(text[i : i + 3] for i in range(0, 9, 3))
    return text


def run_single(text: str, quiet: bool, solver: BFSSolver) -> int:
    log = logger.bind(component="cli")
    grid = parse_grid(normalize_grid_text(text))
    if grid == ERROR_GRID:
        log.error(f"Could not parse grid {text!r}: expected 3 rows of '*' and '.'")
        return 1

    play(grid, Mode.SILENT if quiet else Mode.CHATTY, solver)
    return 0


def run_all(quiet: bool, solver: BFSSolver) -> int:
    summary = play_all(solver, show_progress=not quiet)
    if not quiet:
        print(f"Games played: {summary.games}")
        print(f"Solved: {summary.solved}")
        print(f"Unsolvable: {len(summary.unsolvable)}")
        print(
            f"Longest solution: {summary.longest_solution_length} moves "
            f"(grid {summary.longest_solution_grid})"
        )
        print(f"Leaked path nodes: {summary.live_path_nodes}")
    return 0 if summary.live_path_nodes == 0 else 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Shooting Stars Solver",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                       # Solve the demo grid
  python main.py --grid '***/*.*/***'  # Solve a given grid
  python main.py --file grid.txt       # Read the grid from a file
  python main.py --all                 # Play all 512 games
        """,
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument("--grid", type=str, default=None, help="Grid to solve")
    source.add_argument(
        "--file", type=str, default=None, help="File holding the grid to solve"
    )
    source.add_argument(
        "--all", action="store_true", help="Play every possible grid"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Print no results and only log warnings and errors",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log every search"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        set_level("DEBUG")
    elif args.quiet:
        set_level("WARNING")
    else:
        set_level(None)
    solver = BFSSolver(SolverConfig(log_search=args.verbose))

    if args.all:
        return run_all(args.quiet, solver)

    if args.file is not None:
        try:
            with open(args.file) as f:
                text = f.read()
        except OSError as e:
            logger.bind(component="cli").error(f"Could not read {args.file}: {e}")
            return 1
    else:
        text = args.grid if args.grid is not None else DEMO_GRID

    return run_single(text, args.quiet, solver)


if __name__ == "__main__":
    sys.exit(main())
