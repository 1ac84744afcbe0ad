"""
Mapping between world positions and board cells.

The grid is centred on the origin: with ``width`` columns of size ``s``
the board spans ``[-width * s / 2, width * s / 2)`` horizontally, and
likewise vertically with ``height``.
"""
import math
from typing import Optional, Tuple

from .board import Cell

Position = Tuple[float, float]


def _axis_index(value: float, cells: int, cell_size: float) -> int:
    # Floor, so the strip just below the lower edge maps to -1, not 0.
    return math.floor((value + 0.5 * cells * cell_size) / cell_size)


def cell_at(
    position: Position, width: int, height: int, cell_size: float
) -> Optional[Cell]:
    """
    Find the cell under a world position.

    A position exactly on a cell boundary belongs to the cell on its
    positive side. The upper outer edges are outside the board.

    Args:
        position: ``(x, y)`` in world units.
        width: Number of columns.
        height: Number of rows.
        cell_size: Edge length of one cell.

    Returns:
        The ``(x, y)`` cell, or None if the position is off the board.
    """
    if cell_size <= 0:
        raise ValueError("Cell size must be positive")
    if not (math.isfinite(position[0]) and math.isfinite(position[1])):
        return None
    col = _axis_index(position[0], width, cell_size)
    row = _axis_index(position[1], height, cell_size)
    if 0 <= col < width and 0 <= row < height:
        return (col, row)
    return None


def cell_center(
    cell: Cell, width: int, height: int, cell_size: float
) -> Position:
    """World position of the centre of a cell."""
    x, y = cell
    return (
        (x - 0.5 * (width - 1)) * cell_size,
        (y - 0.5 * (height - 1)) * cell_size,
    )
