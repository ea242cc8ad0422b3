"""
Configuration for the BFS solver.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class SolverConfig:
    """Configuration for the shooting stars BFS solver."""

    # Maximum number of live path nodes, None for no limit. The search never
    # needs more than a few thousand, so a limit is only useful for tests.
    max_path_nodes: Optional[int] = None

    # Log every search at DEBUG level
    log_search: bool = False

    def __post_init__(self):
        """Validate configuration."""
        if self.max_path_nodes is not None and self.max_path_nodes < 0:
            raise ValueError("max_path_nodes must be non-negative")
