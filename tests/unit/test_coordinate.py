"""
Unit tests for Coordinate.
"""
from minesweeper import Coordinate


class TestCoordinate:
    """Test coordinate value semantics."""

    def test_fields(self) -> None:
        """Row and column should be accessible by name."""
        cell = Coordinate(2, 5)
        assert cell.row == 2
        assert cell.col == 5

    def test_equals_plain_tuple(self) -> None:
        """Coordinate should compare equal to a (row, col) tuple."""
        assert Coordinate(1, 3) == (1, 3)
        assert (1, 3) in {Coordinate(1, 3)}

    def test_structural_equality_and_hash(self) -> None:
        """Equal coordinates should collapse in a set."""
        cells = {Coordinate(0, 0), Coordinate(0, 0), Coordinate(0, 1)}
        assert len(cells) == 2

    def test_row_major_ordering(self) -> None:
        """Sorting should order by row, then column."""
        cells = [Coordinate(1, 0), Coordinate(0, 2), Coordinate(0, 1)]
        assert sorted(cells) == [(0, 1), (0, 2), (1, 0)]

    def test_in_bounds(self) -> None:
        """Bounds check should cover [0, size) on both axes."""
        assert Coordinate(0, 0).in_bounds(1) is True
        assert Coordinate(8, 8).in_bounds(9) is True
        assert Coordinate(9, 0).in_bounds(9) is False
        assert Coordinate(0, -1).in_bounds(9) is False

    def test_str(self) -> None:
        assert str(Coordinate(4, 7)) == "(4, 7)"
