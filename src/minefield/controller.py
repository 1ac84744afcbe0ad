"""
Game controller.

Owns the board for the lifetime of one game and runs the
Playing -> GameOver state machine. Player actions enter here, are
dispatched to the reveal engine or the flag manager, and listeners are
notified when the board changes or the game ends.
"""
import logging
import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, List, Optional, Tuple

from .board import Board, Cell, generate_board
from .config import GameConfig
from .coords import Position, cell_at
from .flags import toggle_flag
from .reveal import reveal_trace

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    GAME_OVER = auto()


class Action(Enum):
    """Player actions the controller accepts."""

    REVEAL = auto()
    FLAG = auto()


@dataclass(frozen=True)
class ActionResult:
    """
    Outcome of one dispatched action.

    Attributes:
        action: Action that was requested.
        cell: Target cell.
        changed: Whether the board was mutated.
        hit_hazard: Whether a hazard was exposed.
        revealed: Newly revealed cells, in reveal order.
        state: Game state after the action.
    """

    action: Action
    cell: Cell
    changed: bool
    hit_hazard: bool
    revealed: Tuple[Cell, ...]
    state: GameState


Listener = Callable[["GameController"], None]


# ============================================================================
# Controller Class
# ============================================================================

class GameController:
    """
    Single owner of a game's board and state.

    The board is replaced wholesale on :meth:`restart` and is otherwise
    only mutated by :meth:`reveal` and :meth:`toggle_flag`.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Start a new game.

        Args:
            config: Game configuration (default: 20x15 with 40 mines).
            rng: Random source for hazard placement.
        """
        self.config = config or GameConfig()
        self._rng = rng
        self._change_listeners: List[Listener] = []
        self._game_over_listeners: List[Listener] = []
        self._board = self._new_board()
        self._state = GameState.PLAYING

    def _new_board(self) -> Board:
        return generate_board(
            self.config.width,
            self.config.height,
            self.config.num_mines,
            rng=self._rng,
        )

    # ========================================================================
    # Notifications
    # ========================================================================

    def on_change(self, listener: Listener) -> None:
        """Register a callback run after every action that mutates the board."""
        self._change_listeners.append(listener)

    def on_game_over(self, listener: Listener) -> None:
        """Register a callback run once when a hazard is exposed."""
        self._game_over_listeners.append(listener)

    def _notify(self, listeners: List[Listener]) -> None:
        for listener in listeners:
            listener(self)

    # ========================================================================
    # Game Actions
    # ========================================================================

    def _dropped(self, action: Action, cell: Cell) -> ActionResult:
        return ActionResult(action, cell, False, False, (), self._state)

    def _accepts(self, action: Action, cell: Cell) -> bool:
        if self._state != GameState.PLAYING:
            logger.debug("Ignoring %s at %s: game is over", action.name, cell)
            return False
        if not self._board.in_bounds(cell):
            logger.debug("Ignoring %s at %s: off the board", action.name, cell)
            return False
        return True

    def reveal(self, cell: Cell) -> ActionResult:
        """
        Reveal a cell.

        Exposing a hazard moves the game to GAME_OVER. Nothing happens
        once the game is over.

        Args:
            cell: ``(x, y)`` target cell.

        Returns:
            What the reveal did.
        """
        if not self._accepts(Action.REVEAL, cell):
            return self._dropped(Action.REVEAL, cell)

        outcome = reveal_trace(self._board, cell)
        if outcome.hit_hazard:
            self._state = GameState.GAME_OVER
            logger.info("Hazard exposed at %s, game over", cell)

        result = ActionResult(
            Action.REVEAL,
            cell,
            outcome.changed,
            outcome.hit_hazard,
            outcome.revealed,
            self._state,
        )
        try:
            if result.changed:
                self._notify(self._change_listeners)
        finally:
            if outcome.hit_hazard:
                self._notify(self._game_over_listeners)
        return result

    def toggle_flag(self, cell: Cell) -> ActionResult:
        """
        Toggle the flag on a cell.

        Flags never end the game. Revealed cells cannot be flagged.
        """
        if not self._accepts(Action.FLAG, cell):
            return self._dropped(Action.FLAG, cell)

        changed = toggle_flag(self._board, cell)
        if changed:
            self._notify(self._change_listeners)
        return ActionResult(Action.FLAG, cell, changed, False, (), self._state)

    def handle_pointer(
        self, position: Position, action: Action
    ) -> Optional[ActionResult]:
        """
        Dispatch an action at a world position.

        Args:
            position: ``(x, y)`` pointer position in world units.
            action: REVEAL or FLAG.

        Returns:
            The action result, or None if the position is off the board.
        """
        cell = cell_at(
            position, self.config.width, self.config.height, self.config.cell_size
        )
        if cell is None:
            return None
        if action is Action.REVEAL:
            return self.reveal(cell)
        return self.toggle_flag(cell)

    def restart(self) -> None:
        """Discard the current board and start a new game."""
        self._board = self._new_board()
        self._state = GameState.PLAYING
        logger.info("New game started")
        self._notify(self._change_listeners)

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def board(self) -> Board:
        """Get the board of the current game."""
        return self._board

    @property
    def state(self) -> GameState:
        """Get current game state."""
        return self._state

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._state == GameState.PLAYING

    @property
    def is_over(self) -> bool:
        """Check if a hazard has ended the game."""
        return self._state == GameState.GAME_OVER
