"""
Board module for the minefield core.

Holds the board state (hazards, flags, revealed cells and neighbour
counts) and the generator that lays out a fresh board.
"""
import logging
import random
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Set, Tuple

import numpy as np

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

HIDDEN = -1
FLAGGED = -2
HAZARD = 9

_OFFSETS = [
    (dx, dy)
    for dy in (-1, 0, 1)
    for dx in (-1, 0, 1)
    if (dx, dy) != (0, 0)
]


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minefield board state.

    Cells are ``(x, y)`` tuples with ``0 <= x < width`` and
    ``0 <= y < height``. The sets are mutated only through
    :func:`minefield.reveal.reveal` and :func:`minefield.flags.toggle_flag`.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        hazards: Cells holding a hazard.
        flagged: Cells currently marked by the player.
        revealed: Cells exposed so far. Only ever grows.
        neighbor_count: Adjacent hazard count for every non-hazard cell.
    """

    width: int
    height: int
    hazards: Set[Cell] = field(default_factory=set)
    flagged: Set[Cell] = field(default_factory=set)
    revealed: Set[Cell] = field(default_factory=set)
    neighbor_count: Dict[Cell, int] = field(default_factory=dict)

    @classmethod
    def from_hazards(
        cls, width: int, height: int, hazards: Iterable[Cell]
    ) -> "Board":
        """
        Build a board from an explicit hazard layout.

        Args:
            width: Number of columns.
            height: Number of rows.
            hazards: Hazard cells. Duplicates are collapsed.

        Returns:
            Board with neighbour counts filled in and nothing revealed.

        Raises:
            ValueError: If the dimensions are not positive or a hazard
                lies outside the board.
        """
        _check_dimensions(width, height)
        board = cls(width, height, hazards=set(hazards))
        outside = [cell for cell in board.hazards if not board.in_bounds(cell)]
        if outside:
            raise ValueError(f"Hazards outside the board: {sorted(outside)}")
        board._count_neighbors()
        return board

    # ========================================================================
    # Geometry (Low-level)
    # ========================================================================

    def in_bounds(self, cell: Cell) -> bool:
        """Check if cell is within board bounds."""
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def cells(self) -> Iterator[Cell]:
        """Iterate over every cell in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def neighbors(self, cell: Cell) -> List[Cell]:
        """
        Get the Moore neighbourhood of a cell, clipped to the board.

        Args:
            cell: Centre cell. It is never part of the result.

        Returns:
            List of up to 8 in-bounds neighbouring cells.
        """
        x, y = cell
        result = []
        for dx, dy in _OFFSETS:
            neighbor = (x + dx, y + dy)
            if self.in_bounds(neighbor):
                result.append(neighbor)
        return result

    def _count_neighbors(self) -> None:
        """Recompute neighbour counts for all non-hazard cells."""
        self.neighbor_count = {
            cell: sum(1 for n in self.neighbors(cell) if n in self.hazards)
            for cell in self.cells()
            if cell not in self.hazards
        }

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def safe_cells_remaining(self) -> int:
        """Number of non-hazard cells not yet revealed."""
        return len(self.neighbor_count) - len(self.revealed - self.hazards)

    def is_hidden(self, cell: Cell) -> bool:
        """Check if cell is neither revealed nor flagged."""
        return cell not in self.revealed and cell not in self.flagged

    def hidden_cells(self) -> List[Cell]:
        """
        Get cells that are neither revealed nor flagged.

        Returns:
            List of cells in row-major order.
        """
        return [cell for cell in self.cells() if self.is_hidden(cell)]

    def visibility(self, show_hazards: bool = False) -> np.ndarray:
        """
        Get the board as seen by the player.

        Args:
            show_hazards: Also report hidden hazards, for the final
                display once the game is over.

        Returns:
            Array of shape (height, width), indexed ``[y, x]``, where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent hazard count
                9 = hazard (revealed, or any hazard if show_hazards)
        """
        grid = np.full((self.height, self.width), HIDDEN, dtype=np.int8)
        for x, y in self.flagged:
            grid[y, x] = FLAGGED
        for cell in self.revealed:
            x, y = cell
            if cell in self.hazards:
                grid[y, x] = HAZARD
            else:
                grid[y, x] = self.neighbor_count[cell]
        if show_hazards:
            for x, y in self.hazards:
                grid[y, x] = HAZARD
        return grid


# ============================================================================
# Board Generation
# ============================================================================

def _check_dimensions(width: int, height: int) -> None:
    if width < 1 or height < 1:
        raise ValueError("Board dimensions must be positive")


def generate_board(
    width: int,
    height: int,
    hazard_count: int,
    rng: Optional[random.Random] = None,
) -> Board:
    """
    Lay out a fresh board with randomly placed hazards.

    Hazards are placed by rejection sampling: a uniformly random cell is
    drawn and kept if it is not already a hazard, until the quota is
    met. The quota is clamped to the number of cells.

    Args:
        width: Number of columns (> 0).
        height: Number of rows (> 0).
        hazard_count: Requested number of hazards (>= 0).
        rng: Random source with a ``randrange`` method. Defaults to the
            module-level generator of :mod:`random`.

    Returns:
        Board with hazards and neighbour counts set, and empty flag and
        revealed sets.

    Raises:
        ValueError: If the dimensions are not positive or the hazard
            count is negative.
    """
    _check_dimensions(width, height)
    if hazard_count < 0:
        raise ValueError("Number of mines cannot be negative")

    source = rng if rng is not None else random
    quota = min(hazard_count, width * height)

    hazards: Set[Cell] = set()
    while len(hazards) < quota:
        hazards.add((source.randrange(width), source.randrange(height)))

    board = Board(width, height, hazards=hazards)
    board._count_neighbors()
    logger.debug(
        "Generated %dx%d board with %d hazards (requested %d)",
        width, height, quota, hazard_count,
    )
    return board
