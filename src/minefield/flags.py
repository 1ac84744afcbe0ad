"""Flag toggling for the minefield board."""
from .board import Board, Cell


def toggle_flag(board: Board, cell: Cell) -> bool:
    """
    Toggle the flag on a cell.

    Args:
        board: Board to mutate in place.
        cell: Target cell.

    Returns:
        True if the flag was toggled, False if the cell is revealed or
        off the board.
    """
    if not board.in_bounds(cell) or cell in board.revealed:
        return False
    if cell in board.flagged:
        board.flagged.remove(cell)
    else:
        board.flagged.add(cell)
    return True
