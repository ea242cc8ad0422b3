"""
Reading and writing grids and move sequences as text.
"""

from typing import Optional, Sequence

from .grid import CELL_MASKS, CELLS, EMPTY_GRID, ERROR_GRID, GRID_SIZE, to_array

STAR = "*"
HOLE = "."

NO_PATH = "-1"


def parse_grid(text: str) -> int:
    """Turn a 3-line description like "*..\\n...\\n..." into a grid.

    Returns ERROR_GRID if the text has the wrong length or contains anything
    other than stars, holes and the two line breaks.
    """
    if len(text) != GRID_SIZE * GRID_SIZE + GRID_SIZE - 1:
        return ERROR_GRID

    rows = text.split("\n")
    if len(rows) != GRID_SIZE or any(len(row) != GRID_SIZE for row in rows):
        return ERROR_GRID

    grid = EMPTY_GRID
    for cell, symbol in zip(CELLS, "".join(rows)):
        if symbol == STAR:
            grid |= CELL_MASKS[cell]
        elif symbol != HOLE:
            return ERROR_GRID
    return grid


def format_grid(grid: int) -> str:
    rows = ["".join(STAR if star else HOLE for star in row) for row in to_array(grid)]
    return "\n".join(rows)


def format_moves(moves: Optional[Sequence[int]]) -> str:
    """One move per line, oldest first. None means there is no path."""
    if moves is None:
        return NO_PATH
    return "\n".join(str(move) for move in moves)
