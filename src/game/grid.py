"""
Grids and moves for the shooting stars puzzle.

A grid is a plain int where the 9 low bits are 1 if the cell holds a star and
0 if it holds a dark hole. Cell 1 (top left) is the most significant of the 9
bits and cell 9 (bottom right) the least significant, so grids read in
row-major order when written in binary:

    0b100000000  ->  * . .
                     . . .
                     . . .
"""

from enum import Enum
from typing import Dict, List

import numpy as np

GRID_SIZE = 3
GRID_COUNT = 1 << (GRID_SIZE * GRID_SIZE)  # 512
CELLS = range(1, GRID_SIZE * GRID_SIZE + 1)

EMPTY_GRID = 0b000000000
WINNING_GRID = 0b111101111
ERROR_GRID = 0b1111111111111111

CELL_MASKS: Dict[int, int] = {cell: 1 << (9 - cell) for cell in CELLS}

# Cells toggled when the star in a given cell explodes. Corners flip their 2x2
# block, edges their outer row or column and the centre its cross.
EXPLOSION_PATTERNS: Dict[int, int] = {
    1: 0b110110000,
    2: 0b111000000,
    3: 0b011011000,
    4: 0b100100100,
    5: 0b010111010,
    6: 0b001001001,
    7: 0b000110110,
    8: 0b000000111,
    9: 0b000011011,
}


class Outcome(Enum):
    WON = "won"
    LOST = "lost"
    CONTINUE = "continue"


def is_valid_grid(grid: int) -> bool:
    return 0 <= grid < GRID_COUNT


def is_star(grid: int, cell: int) -> bool:
    mask = CELL_MASKS.get(cell)
    if mask is None:
        return False
    return bool(grid & mask)


def explode(grid: int, cell: int) -> int:
    """Return the grid obtained by exploding the star in `cell`.

    Exploding a hole or an invalid cell (< 1 or > 9) is a no-op and returns
    the input grid.
    """
    if not is_star(grid, cell):
        return grid
    return grid ^ EXPLOSION_PATTERNS[cell]


def classify(grid: int) -> Outcome:
    if grid == EMPTY_GRID:
        return Outcome.LOST
    elif grid == WINNING_GRID:
        return Outcome.WON
    else:
        return Outcome.CONTINUE


def stars(grid: int) -> List[int]:
    """Cells holding a star, in ascending order."""
    return [cell for cell in CELLS if is_star(grid, cell)]


def to_array(grid: int) -> np.ndarray:
    """3x3 boolean array, True where a star is."""
    cells = np.array([is_star(grid, cell) for cell in CELLS], dtype=bool)
    return cells.reshape(GRID_SIZE, GRID_SIZE)

