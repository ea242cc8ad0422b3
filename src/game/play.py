"""
Playing shooting stars games with the BFS solver.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from tqdm import tqdm

from ..bfs_solver.solver import BFSResult, BFSSolver
from ..util.logger import logger
from .grid import GRID_COUNT, is_valid_grid
from .text import format_grid, format_moves

NO_SOLUTION_MESSAGE = "There's no winning sequence of moves!"
ALREADY_WON_MESSAGE = "Already won, no moves needed."


class Mode(Enum):
    CHATTY = "chatty"
    SILENT = "silent"


@dataclass
class PlayAllSummary:
    games: int = 0
    solved: int = 0
    unsolvable: List[int] = field(default_factory=list)
    longest_solution_length: int = 0
    longest_solution_grid: Optional[int] = None
    nodes_explored: int = 0
    live_path_nodes: int = 0


def render_result(result: BFSResult) -> str:
    if not result.success:
        return NO_SOLUTION_MESSAGE
    if result.solution_length == 0:
        return ALREADY_WON_MESSAGE
    return format_moves(result.solution)


def play(
    grid: int, mode: Mode = Mode.CHATTY, solver: Optional[BFSSolver] = None
) -> Optional[BFSResult]:
    """Solve a single game, printing the moves in chatty mode.

    Returns None without solving if `grid` is not a valid grid (for example
    the ERROR_GRID returned by a failed parse).
    """
    log = logger.bind(component="play")
    if not is_valid_grid(grid):
        log.error(f"Refusing to play invalid grid {grid:#x}")
        return None

    solver = solver or BFSSolver()
    result = solver.solve(grid)

    if mode == Mode.CHATTY:
        print(format_grid(grid))
        print()
        print(render_result(result))

    log.bind(grid=grid).debug(
        f"success={result.success} moves={result.solution_length} "
        f"nodes={result.nodes_explored}"
    )
    return result


def play_all(
    solver: Optional[BFSSolver] = None, show_progress: bool = False
) -> PlayAllSummary:
    """Play every possible grid silently with one shared solver.

    The summary reports how many path nodes are still alive in the solver's
    pool afterwards, which must be zero if no search leaked a reference.
    """
    log = logger.bind(component="play")
    solver = solver or BFSSolver()
    summary = PlayAllSummary()

    for grid in tqdm(range(GRID_COUNT), desc="Playing", disable=not show_progress):
        result = play(grid, Mode.SILENT, solver)
        summary.games += 1
        summary.nodes_explored += result.nodes_explored
        if not result.success:
            summary.unsolvable.append(grid)
            continue

        summary.solved += 1
        if result.solution_length > summary.longest_solution_length:
            summary.longest_solution_length = result.solution_length
            summary.longest_solution_grid = grid

    summary.live_path_nodes = solver.pool.live_nodes
    if summary.live_path_nodes:
        log.warning(f"{summary.live_path_nodes} path nodes still alive after all games")

    log.info(
        f"Played {summary.games} games: {summary.solved} solved, "
        f"{len(summary.unsolvable)} unsolvable, longest solution "
        f"{summary.longest_solution_length} moves"
    )
    return summary
