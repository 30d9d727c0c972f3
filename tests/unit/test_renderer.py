"""
Unit tests for the console renderer.
"""
from minesweeper import Board, BoardConfig
from minesweeper.console.renderer import cell_glyph, render_board


class TestCellGlyph:
    """Test observation value to glyph mapping."""

    def test_glyphs(self) -> None:
        assert cell_glyph(-2) == "*"
        assert cell_glyph(-1) == "."
        assert cell_glyph(9) == "X"
        assert cell_glyph(0) == "/"
        assert cell_glyph(3) == "3"


class TestRenderBoard:
    """Test full grid rendering."""

    def test_new_board(self) -> None:
        """Unexplored board shows 1-indexed headers and unknown cells."""
        board = Board(BoardConfig(3, 1))
        assert render_board(board) == "\n".join([
            " |123|",
            "-|---|",
            "1|...|",
            "2|...|",
            "3|...|",
            "-|---|",
        ])

    def test_after_flood_fill_and_mark(self, small_board: Board) -> None:
        """Zero cells show '/', counts show digits, marks show '*'."""
        small_board.reveal((0, 0))
        small_board.mark((2, 2))
        assert render_board(small_board).splitlines()[2:5] == [
            "1|///|",
            "2|/11|",
            "3|/1*|",
        ]

    def test_lost_board_shows_mines(self, small_board: Board) -> None:
        small_board.reveal((2, 2))
        assert render_board(small_board).splitlines()[4] == "3|..X|"

    def test_default_board_width(self, default_board: Board) -> None:
        lines = render_board(default_board).splitlines()
        assert lines[0] == " |123456789|"
        assert len(lines) == 12
