"""
Reveal engine.

Exposes a cell and floods outward through regions with no adjacent
hazards. A zero cell has no hazard neighbours, so all of them can be
exposed safely; the flood continues from any of those that are zero
as well.
"""
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, List, Optional, Sequence, Tuple

from .board import Board, Cell

NeighborOrder = Callable[[List[Cell]], Sequence[Cell]]


@dataclass(frozen=True)
class RevealResult:
    """
    Outcome of a single reveal.

    Attributes:
        revealed: Newly revealed cells, in the order they were exposed.
        hit_hazard: Whether a hazard was exposed.
    """

    revealed: Tuple[Cell, ...] = ()
    hit_hazard: bool = False

    @property
    def changed(self) -> bool:
        return bool(self.revealed)


def reveal_trace(
    board: Board,
    cell: Cell,
    order: Optional[NeighborOrder] = None,
) -> RevealResult:
    """
    Reveal a cell and cascade through zero-count regions.

    Uses an explicit work-list, so board size is not limited by the
    interpreter's recursion depth. Flagged cells are never revealed,
    neither as the target nor during the cascade.

    Args:
        board: Board to mutate in place.
        cell: Target cell.
        order: Optional hook that reorders the neighbours of each zero
            cell before they are queued. The final revealed set is the
            same for every order.

    Returns:
        The newly revealed cells and whether a hazard was exposed.
    """
    if not board.in_bounds(cell):
        return RevealResult()
    if cell in board.flagged or cell in board.revealed:
        return RevealResult()

    board.revealed.add(cell)
    if cell in board.hazards:
        return RevealResult((cell,), True)

    exposed = [cell]
    hit_hazard = False
    pending: Deque[Cell] = deque([cell])

    while pending:
        current = pending.popleft()
        if board.neighbor_count[current] != 0:
            continue

        neighbors = board.neighbors(current)
        if order is not None:
            neighbors = list(order(neighbors))

        for neighbor in neighbors:
            if neighbor in board.flagged or neighbor in board.revealed:
                continue
            board.revealed.add(neighbor)
            exposed.append(neighbor)
            if neighbor in board.hazards:
                hit_hazard = True
            else:
                pending.append(neighbor)

    return RevealResult(tuple(exposed), hit_hazard)


def reveal(
    board: Board,
    cell: Cell,
    order: Optional[NeighborOrder] = None,
) -> bool:
    """
    Reveal a cell on the board.

    Returns:
        True if this call exposed a hazard. Flagged or already revealed
        targets are left alone and return False.
    """
    return reveal_trace(board, cell, order).hit_hazard
