"""
BFS solver for the shooting stars puzzle.

Finds the shortest sequence of explosions leading to the winning grid.
"""

from .config import SolverConfig
from .frontier import Frontier, FrontierEntry
from .path import (
    EMPTY_PATH,
    PathNode,
    PathPool,
    PathPoolExhausted,
    PathReferenceError,
    to_sequence,
)
from .solver import (
    BFSResult,
    BFSSolver,
    InvalidGridError,
    SearchOutcome,
    shortest_winning_path,
)

__all__ = [
    "BFSSolver",
    "BFSResult",
    "SolverConfig",
    "SearchOutcome",
    "shortest_winning_path",
    "InvalidGridError",
    "PathPool",
    "PathNode",
    "EMPTY_PATH",
    "PathPoolExhausted",
    "PathReferenceError",
    "to_sequence",
    "Frontier",
    "FrontierEntry",
]
