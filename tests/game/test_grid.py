import numpy as np
import pytest

from src.game.grid import (
    CELLS,
    EMPTY_GRID,
    ERROR_GRID,
    EXPLOSION_PATTERNS,
    GRID_COUNT,
    WINNING_GRID,
    Outcome,
    classify,
    explode,
    is_star,
    is_valid_grid,
    stars,
    to_array,
)


def cells_of(mask):
    return [cell for cell in CELLS if mask & (1 << (9 - cell))]


class TestGrid:
    def test_constants(self):
        assert GRID_COUNT == 512
        assert list(CELLS) == list(range(1, 10))
        assert EMPTY_GRID != WINNING_GRID
        assert not is_valid_grid(ERROR_GRID)
        # Every cell but the centre holds a star
        assert stars(WINNING_GRID) == [1, 2, 3, 4, 6, 7, 8, 9]

    def test_is_star(self):
        grid = 0b100000001
        assert is_star(grid, 1)
        assert is_star(grid, 9)
        for cell in range(2, 9):
            assert not is_star(grid, cell)

    def test_is_star_out_of_range(self):
        full = GRID_COUNT - 1
        assert not is_star(full, 0)
        assert not is_star(full, 10)
        assert not is_star(full, -1)

    def test_explosion_patterns(self):
        assert cells_of(EXPLOSION_PATTERNS[1]) == [1, 2, 4, 5]
        assert cells_of(EXPLOSION_PATTERNS[2]) == [1, 2, 3]
        assert cells_of(EXPLOSION_PATTERNS[3]) == [2, 3, 5, 6]
        assert cells_of(EXPLOSION_PATTERNS[4]) == [1, 4, 7]
        assert cells_of(EXPLOSION_PATTERNS[5]) == [2, 4, 5, 6, 8]
        assert cells_of(EXPLOSION_PATTERNS[6]) == [3, 6, 9]
        assert cells_of(EXPLOSION_PATTERNS[7]) == [4, 5, 7, 8]
        assert cells_of(EXPLOSION_PATTERNS[8]) == [7, 8, 9]
        assert cells_of(EXPLOSION_PATTERNS[9]) == [5, 6, 8, 9]

    def test_explode_toggles_pattern(self):
        grid = 0b100000000
        assert explode(grid, 1) == 0b010110000

        grid = 0b000010000
        assert explode(grid, 5) == 0b010101010

    def test_explode_non_star_is_noop(self):
        for grid in range(GRID_COUNT):
            for cell in CELLS:
                if not is_star(grid, cell):
                    assert explode(grid, cell) == grid

    def test_explode_invalid_cell_is_noop(self):
        assert explode(WINNING_GRID, 0) == WINNING_GRID
        assert explode(WINNING_GRID, 10) == WINNING_GRID

    def test_explode_stays_in_range(self):
        for grid in range(GRID_COUNT):
            for cell in CELLS:
                new_grid = explode(grid, cell)
                assert is_valid_grid(new_grid)
                assert new_grid != ERROR_GRID
                assert classify(new_grid) in Outcome

    def test_explode_clears_exploded_star(self):
        for grid in range(GRID_COUNT):
            for cell in stars(grid):
                assert not is_star(explode(grid, cell), cell)

    def test_classify(self):
        assert classify(EMPTY_GRID) == Outcome.LOST
        assert classify(WINNING_GRID) == Outcome.WON
        assert classify(0b100000000) == Outcome.CONTINUE
        assert classify(GRID_COUNT - 1) == Outcome.CONTINUE

    def test_array_conversion(self):
        array = to_array(0b100010001)
        assert array.shape == (3, 3)
        assert array.dtype == bool
        assert np.array_equal(array, np.eye(3, dtype=bool))

        assert not to_array(EMPTY_GRID).any()
        assert to_array(GRID_COUNT - 1).all()
        assert not to_array(WINNING_GRID)[1, 1]

    @pytest.mark.parametrize("grid", [-1, GRID_COUNT, ERROR_GRID])
    def test_invalid_grids(self, grid):
        assert not is_valid_grid(grid)
