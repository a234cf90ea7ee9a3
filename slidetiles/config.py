"""
Settings of a game session: board size, spawn probability, target tile and undo depth.
"""

from dataclasses import dataclass

from slidetiles.core.errors import InvalidDimension, InvalidProbability, InvalidSetting

# ##>: Choices offered by the interactive front end.
SUPPORTED_SIZES = (3, 4, 5, 6)
TARGET_VALUES = (512, 1024, 2048, 4096)
MAX_PROB4 = 0.5
MAX_UNDO_LIMIT = 50


@dataclass(frozen=True)
class GameSettings:
    """
    Configuration of a game session.

    Attributes
    ----------
    size : int
        Number of rows (and columns) of the board.
    prob4 : float
        Probability that a spawned tile is a 4 rather than a 2.
    target_value : int
        Tile value that wins the game once reached.
    max_undo : int
        Number of moves that can be undone; 0 disables undo.
    """

    size: int = 4
    prob4: float = 0.1
    target_value: int = 2048
    max_undo: int = 10

    def __post_init__(self):
        if self.size < 1:
            raise InvalidDimension(f'size must be at least 1, got {self.size}')
        if not 0.0 <= self.prob4 <= 1.0:
            raise InvalidProbability(f'prob4 must be within [0, 1], got {self.prob4}')
        if self.target_value < 2 or self.target_value & (self.target_value - 1):
            raise InvalidSetting(f'target_value must be a power of two >= 2, got {self.target_value}')
        if self.max_undo < 0:
            raise InvalidSetting(f'max_undo must be non-negative, got {self.max_undo}')
