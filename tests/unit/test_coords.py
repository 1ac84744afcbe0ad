"""
Unit tests for mapping world positions to cells.

Uses a 20x15 board with 32-unit cells, centred on the origin, so the
board spans x in [-320, 320) and y in [-240, 240).
"""
import math

import pytest
from minefield import cell_at, cell_center

WIDTH, HEIGHT, SIZE = 20, 15, 32.0


def _cell(x: float, y: float):
    return cell_at((x, y), WIDTH, HEIGHT, SIZE)


class TestCellAt:
    """Test position to cell mapping."""

    def test_origin_maps_to_middle(self) -> None:
        """The origin lies in the middle column and row."""
        assert _cell(0.0, 0.0) == (10, 7)

    def test_lower_corner_is_first_cell(self) -> None:
        """The lower-left corner belongs to cell (0, 0)."""
        assert _cell(-320.0, -240.0) == (0, 0)

    def test_just_inside_upper_corner_is_last_cell(self) -> None:
        """A point just inside the upper-right corner is the last cell."""
        assert _cell(319.9, 239.9) == (19, 14)

    def test_upper_edge_is_outside(self) -> None:
        """The upper outer edges are not part of the board."""
        assert _cell(320.0, 0.0) is None
        assert _cell(0.0, 240.0) is None

    def test_boundary_goes_to_positive_side(self) -> None:
        """A position on an inner boundary belongs to the next cell up."""
        assert _cell(-288.0, -240.0) == (1, 0)
        assert _cell(-288.001, -240.0) == (0, 0)

    def test_just_below_lower_edge_is_outside(self) -> None:
        """Positions within one cell below the board are rejected."""
        assert _cell(-330.0, 0.0) is None
        assert _cell(0.0, -240.5) is None

    def test_far_away_is_outside(self) -> None:
        """Positions far from the board are rejected."""
        assert _cell(5000.0, -5000.0) is None

    def test_odd_dimensions(self) -> None:
        """Centring works with an odd column count."""
        assert cell_at((0.0, 0.0), 3, 3, 10.0) == (1, 1)
        assert cell_at((-15.0, 14.9), 3, 3, 10.0) == (0, 2)

    def test_non_positive_cell_size_raises_error(self) -> None:
        """Cell size must be positive."""
        with pytest.raises(ValueError, match="Cell size"):
            cell_at((0.0, 0.0), 3, 3, 0.0)

    @pytest.mark.parametrize(
        "x, y",
        [(math.nan, 0.0), (0.0, math.nan), (math.inf, 0.0), (0.0, -math.inf)],
    )
    def test_non_finite_position_is_outside(self, x: float, y: float) -> None:
        """NaN and infinite positions map to no cell."""
        assert _cell(x, y) is None


class TestCellCenter:
    """Test cell to position mapping."""

    def test_first_cell_center(self) -> None:
        """Cell (0, 0) is centred half a cell inside the lower-left corner."""
        assert cell_center((0, 0), WIDTH, HEIGHT, SIZE) == (-304.0, -224.0)

    def test_center_maps_back_to_cell(self) -> None:
        """Every cell centre maps back to its own cell."""
        for y in range(HEIGHT):
            for x in range(WIDTH):
                center = cell_center((x, y), WIDTH, HEIGHT, SIZE)
                assert cell_at(center, WIDTH, HEIGHT, SIZE) == (x, y)
