from src.game.grid import EMPTY_GRID, ERROR_GRID, GRID_COUNT, WINNING_GRID
from src.game.text import NO_PATH, format_grid, format_moves, parse_grid


class TestParseGrid:
    def test_parse_demo_grid(self):
        assert parse_grid("*..\n...\n...") == 0b100000000

    def test_parse_special_grids(self):
        assert parse_grid("...\n...\n...") == EMPTY_GRID
        assert parse_grid("***\n*.*\n***") == WINNING_GRID
        assert parse_grid("***\n***\n***") == GRID_COUNT - 1

    def test_parse_row_major_order(self):
        assert parse_grid("...\n...\n..*") == 0b000000001
        assert parse_grid("...\n*..\n...") == 0b000100000

    def test_wrong_length(self):
        assert parse_grid("") == ERROR_GRID
        assert parse_grid("*..\n...") == ERROR_GRID
        assert parse_grid("*..\n...\n...\n") == ERROR_GRID
        assert parse_grid("*........") == ERROR_GRID

    def test_invalid_symbols(self):
        assert parse_grid("*..\n.x.\n...") == ERROR_GRID
        assert parse_grid("*.. ... ...") == ERROR_GRID

    def test_misplaced_line_breaks(self):
        assert parse_grid("*...\n..\n...") == ERROR_GRID


class TestFormatting:
    def test_format_grid(self):
        assert format_grid(WINNING_GRID) == "***\n*.*\n***"
        assert format_grid(EMPTY_GRID) == "...\n...\n..."

    def test_format_parse_inverse(self):
        for grid in range(GRID_COUNT):
            assert parse_grid(format_grid(grid)) == grid

    def test_format_moves(self):
        assert format_moves([1, 2, 9]) == "1\n2\n9"
        assert format_moves([]) == ""
        assert format_moves(None) == NO_PATH
