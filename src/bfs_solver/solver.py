"""
BFS solver for finding the shortest winning sequence of explosions.
"""

import time
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from ..game.grid import (
    GRID_COUNT,
    Outcome,
    classify,
    explode,
    is_valid_grid,
    stars,
)
from ..util.logger import logger
from .config import SolverConfig
from .frontier import Frontier
from .path import EMPTY_PATH, Path, PathPool, to_sequence


class InvalidGridError(ValueError):
    """Raised when the solver is handed something that is not a 3x3 grid."""


@dataclass
class SearchOutcome:
    """Raw result of a search.

    `path` is only meaningful when `found` is True (the empty path is a valid
    zero-move solution). The caller owns one reference to it and must hand it
    back with `release()`.
    """

    found: bool
    path: Path
    nodes_explored: int
    pool: PathPool

    def moves(self) -> Optional[List[int]]:
        if not self.found:
            return None
        return to_sequence(self.path)

    def release(self) -> None:
        if self.found:
            self.pool.release(self.path)
            self.path = EMPTY_PATH
            self.found = False


def shortest_winning_path(initial: int, pool: Optional[PathPool] = None) -> SearchOutcome:
    """Find the shortest sequence of explosions turning `initial` into the
    winning grid.

    Nodes are pushed at the front of the frontier and popped from the back, so
    grids closest to the initial one are always expanded first and the first
    winning grid popped was reached by a shortest path. Among equally short
    paths the one found first when trying cells 1 to 9 in order wins.

    `initial` must be a valid grid; rejecting the error sentinel is up to the
    caller.
    """
    if pool is None:
        pool = PathPool()

    # One slot for each of the 512 possible grids.
    visited = np.zeros(GRID_COUNT, dtype=bool)
    frontier = Frontier(pool)

    winning_path = EMPTY_PATH
    found = False
    nodes_explored = 0

    try:
        frontier.push_front(pool.empty(), initial)

        while not found:
            entry = frontier.pop_back()
            if entry is None:
                break
            nodes_explored += 1

            try:
                visited[entry.grid] = True

                grid_outcome = classify(entry.grid)
                if grid_outcome == Outcome.WON:
                    # The entry keeps its own reference, which is dropped below.
                    pool.retain(entry.path)
                    winning_path = entry.path
                    found = True
                elif grid_outcome == Outcome.CONTINUE:
                    for cell in stars(entry.grid):
                        new_grid = explode(entry.grid, cell)
                        if visited[new_grid]:
                            continue
                        new_path = pool.extend(entry.path, cell)
                        try:
                            frontier.push_front(new_path, new_grid)
                        except BaseException:
                            # Nobody owns the new path until the push succeeds.
                            pool.release(new_path)
                            raise
            finally:
                frontier.release_entry(entry)
    except Exception:
        if found:
            pool.release(winning_path)
        raise
    finally:
        frontier.destroy()

    return SearchOutcome(
        found=found,
        path=winning_path,
        nodes_explored=nodes_explored,
        pool=pool,
    )


@dataclass
class BFSResult:
    """Result of BFS solving."""

    solution: Optional[List[int]]
    solution_length: int
    nodes_explored: int
    time_taken_ms: float
    success: bool


class BFSSolver:
    """BFS solver for the shooting stars puzzle."""

    def __init__(self, config: Optional[SolverConfig] = None, pool: Optional[PathPool] = None):
        """Initialize BFS solver.

        Args:
            config: Solver configuration, defaults to SolverConfig()
            pool: Path pool shared by every search, a new one if not given
        """
        self.config = config or SolverConfig()
        self.pool = pool or PathPool(capacity=self.config.max_path_nodes)
        self.logger = logger.bind(component="solver")

    def solve(self, grid: int) -> BFSResult:
        """Find the shortest winning sequence of moves from `grid`.

        Args:
            grid: Initial grid, 0 to 511

        Returns:
            BFSResult with the moves in play order if a solution exists
        """
        if not is_valid_grid(grid):
            raise InvalidGridError(f"not a 3x3 grid: {grid:#x}")

        start_time = time.time()
        log = self.logger.bind(grid=grid)
        if self.config.log_search:
            log.debug("Starting search")

        outcome = shortest_winning_path(grid, self.pool)
        try:
            moves = outcome.moves()
        finally:
            outcome.release()

        elapsed_ms = (time.time() - start_time) * 1000
        if self.config.log_search:
            if moves is None:
                log.debug(f"No solution after {outcome.nodes_explored} nodes")
            else:
                log.debug(
                    f"Found {len(moves)} move solution after "
                    f"{outcome.nodes_explored} nodes in {elapsed_ms:.2f}ms"
                )

        return BFSResult(
            solution=moves,
            solution_length=len(moves) if moves is not None else 0,
            nodes_explored=outcome.nodes_explored,
            time_taken_ms=elapsed_ms,
            success=moves is not None,
        )
