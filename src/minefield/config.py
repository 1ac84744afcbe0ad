"""
Configuration for a minefield game.

Holds the constructor-time settings shared by the board generator,
the coordinate mapper and the game controller.
"""
from dataclasses import dataclass


# ============================================================================
# Game Configuration
# ============================================================================

@dataclass(frozen=True)
class GameConfig:
    """
    Settings for one game instance.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Requested hazard count. Values above width * height
            are clamped when the board is generated.
        cell_size: Edge length of one cell in world units, used to map
            pointer positions onto the grid.
    """

    width: int = 20
    height: int = 15
    num_mines: int = 40
    cell_size: float = 32.0

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        if self.cell_size <= 0:
            raise ValueError("Cell size must be positive")

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.width * self.height

    @property
    def effective_mines(self) -> int:
        """Hazard count after clamping to the board capacity."""
        return min(self.num_mines, self.total_cells)


# Preset layouts
DEFAULT = GameConfig()
BEGINNER = GameConfig(9, 9, 10)
INTERMEDIATE = GameConfig(16, 16, 40)
EXPERT = GameConfig(30, 16, 99)
