"""
Error kinds raised when a caller hands the board engine a value it cannot work with.
"""


class BoardError(ValueError):
    """Base class for every error raised by the board engine."""


class InvalidDimension(BoardError):
    """The board size is below one, or a grid is not a square 2-D matrix."""


class InvalidProbability(BoardError):
    """A spawn probability lies outside [0, 1]."""


class InvalidDirection(BoardError):
    """A direction is not one of left, up, right, down."""


class InvalidSetting(BoardError):
    """A game setting other than size or probability is out of range."""
