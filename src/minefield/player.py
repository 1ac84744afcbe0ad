"""
Random player for the minefield core.

Stands in for an interactive front-end: it reads the visible board,
picks a hidden cell at random and clicks on that cell's centre.
"""
from typing import Optional

import numpy as np

from .board import HIDDEN, Cell
from .controller import Action, ActionResult, GameController
from .coords import cell_center


# ============================================================================
# Random Player
# ============================================================================

class RandomPlayer:
    """
    Player that reveals hidden cells uniformly at random.

    Never places flags, so every hidden cell is a candidate.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        """
        Initialize the random player.

        Args:
            seed: Random seed for reproducibility.
        """
        self.rng = np.random.default_rng(seed)

    def select_cell(self, visibility: np.ndarray) -> Optional[Cell]:
        """
        Pick a random hidden cell.

        Args:
            visibility: Grid from :meth:`Board.visibility`, indexed [y, x].

        Returns:
            ``(x, y)`` cell, or None if nothing is hidden.
        """
        rows, cols = np.nonzero(visibility == HIDDEN)
        if len(rows) == 0:
            return None
        index = self.rng.integers(len(rows))
        return (int(cols[index]), int(rows[index]))

    def step(self, controller: GameController) -> Optional[ActionResult]:
        """Click one random hidden cell; None if there is nothing left to click."""
        cell = self.select_cell(controller.board.visibility())
        if cell is None:
            return None
        config = controller.config
        position = cell_center(cell, config.width, config.height, config.cell_size)
        return controller.handle_pointer(position, Action.REVEAL)

    def play(
        self, controller: GameController, max_moves: Optional[int] = None
    ) -> int:
        """
        Play until the game ends or no hidden cells remain.

        Args:
            controller: Game to play.
            max_moves: Optional cap on the number of clicks.

        Returns:
            Number of clicks dispatched.
        """
        moves = 0
        while controller.is_playing:
            if max_moves is not None and moves >= max_moves:
                break
            if self.step(controller) is None:
                break
            moves += 1
        return moves
