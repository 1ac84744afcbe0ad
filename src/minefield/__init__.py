"""
Minefield game core.

Provides hazard placement, cell revealing with zero cascades, flagging,
pointer-to-cell mapping and the game state machine.
"""
from .board import Board, Cell, generate_board
from .config import GameConfig, DEFAULT, BEGINNER, INTERMEDIATE, EXPERT
from .controller import Action, ActionResult, GameController, GameState
from .coords import cell_at, cell_center
from .flags import toggle_flag
from .player import RandomPlayer
from .reveal import RevealResult, reveal, reveal_trace

__all__ = [
    "Board",
    "Cell",
    "generate_board",
    "GameConfig",
    "DEFAULT",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "Action",
    "ActionResult",
    "GameController",
    "GameState",
    "cell_at",
    "cell_center",
    "toggle_flag",
    "RandomPlayer",
    "RevealResult",
    "reveal",
    "reveal_trace",
]
