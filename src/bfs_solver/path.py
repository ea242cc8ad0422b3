"""
Persistent, reference-counted paths of moves.

A path is an immutable singly linked list with the most recent move first, so
extending a path by one move is O(1) and shares the whole rest of the path
instead of copying it. The empty path is None and is never allocated.

Nodes are handed out by a PathPool, which keeps explicit reference counts and
reclaims a node as soon as nobody points to it any more. Say two paths share a
common suffix (move | references):

    [1 | 1] -> [2 | 2] -> [9 | 1] -> None
    [5 | 1] ---^

Releasing [1 | 1] frees only that node and leaves

    [5 | 1] -> [2 | 1] -> [9 | 1] -> None
"""

from dataclasses import dataclass
from typing import List, Optional


class PathReferenceError(RuntimeError):
    """Raised when a path node is released more times than it was acquired."""


class PathPoolExhausted(MemoryError):
    """Raised when a PathPool has no room left for another node."""


@dataclass(eq=False)
class PathNode:
    move: int
    rest: Optional["PathNode"]
    references: int = 1
    freed: bool = False


Path = Optional[PathNode]

EMPTY_PATH: Path = None


def to_sequence(path: Path) -> List[int]:
    """Moves in play order (oldest first). Does not touch reference counts."""
    moves = []
    node = path
    while node is not None:
        moves.append(node.move)
        node = node.rest
    moves.reverse()
    return moves


class PathPool:
    """Allocates path nodes and tracks how many of them are alive."""

    def __init__(self, capacity: Optional[int] = None):
        """
        Args:
            capacity: Maximum number of live nodes, None for no limit
        """
        self.capacity = capacity
        self.live_nodes = 0
        self.allocated = 0
        self.freed = 0

    def empty(self) -> Path:
        return EMPTY_PATH

    def extend(self, path: Path, move: int) -> PathNode:
        """Return a new path with `move` on top of `path`.

        The new node holds one reference to `path`; `path` itself is not
        modified and the caller keeps its own reference to it.
        """
        if self.capacity is not None and self.live_nodes >= self.capacity:
            raise PathPoolExhausted(
                f"path pool capacity of {self.capacity} nodes reached"
            )

        node = PathNode(move=move, rest=path)
        self.retain(path)
        self.live_nodes += 1
        self.allocated += 1
        return node

    def retain(self, path: Path) -> None:
        """Record that someone else is holding on to `path`."""
        if path is None:
            return
        if path.freed:
            raise PathReferenceError(f"cannot retain freed path node {path.move}")
        path.references += 1

    def release(self, path: Path) -> None:
        """Drop one reference to `path`, freeing every node nobody else holds.

        Walks down the rest of the path and stops at the first node that is
        still referenced elsewhere.
        """
        node = path
        while node is not None:
            if node.freed or node.references <= 0:
                raise PathReferenceError(
                    f"path node {node.move} released more times than acquired"
                )

            node.references -= 1
            if node.references > 0:
                return

            rest = node.rest
            node.freed = True
            node.rest = None
            self.live_nodes -= 1
            self.freed += 1
            node = rest
