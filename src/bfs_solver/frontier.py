"""
FIFO frontier of (path, grid) pairs for the breadth-first search.

Entries are pushed at the front and popped from the back, so nodes closest to
the root are always visited first.
"""

from collections import deque
from dataclasses import dataclass
from typing import Deque, Optional

from .path import Path, PathPool


@dataclass
class FrontierEntry:
    path: Path
    grid: int


class Frontier:
    """Double ended queue that owns one reference to each queued path."""

    def __init__(self, pool: PathPool):
        self.pool = pool
        self._entries: Deque[FrontierEntry] = deque()

    def __len__(self) -> int:
        return len(self._entries)

    def push_front(self, path: Path, grid: int) -> None:
        """Add an entry at the front.

        The frontier takes over the caller's reference to `path`; it does not
        retain it again.
        """
        self._entries.appendleft(FrontierEntry(path, grid))

    def pop_back(self) -> Optional[FrontierEntry]:
        """Remove the oldest entry, or return None if the frontier is empty.

        The caller now owns the entry's path reference.
        """
        if not self._entries:
            return None
        return self._entries.pop()

    def release_entry(self, entry: FrontierEntry) -> None:
        """Drop the path reference held by a popped entry."""
        self.pool.release(entry.path)
        entry.path = None

    def destroy(self) -> None:
        """Release every queued entry. The frontier is empty afterwards."""
        while self._entries:
            self.release_entry(self._entries.pop())
