"""
Grid coercion shared by the board functions and the move helpers.
"""

from numpy import asarray, int64, ndarray

from slidetiles.core.errors import InvalidDimension

# ##>: Tile values are powers of two, far below the int64 range for any playable board.
GRID_DTYPE = int64


def as_grid(grid) -> ndarray:
    """
    Convert a grid-like value into an integer array and check it is square.

    Parameters
    ----------
    grid : array_like
        The board, as a 2-D array or nested sequences.

    Returns
    -------
    ndarray
        The board as an ``int64`` array. Arrays of the right dtype are returned without copying.

    Raises
    ------
    InvalidDimension
        If the board is not 2-D, not square, or has no cells.
    """
    board = asarray(grid, dtype=GRID_DTYPE)
    if board.ndim != 2 or board.shape[0] != board.shape[1]:
        raise InvalidDimension(f'grid must be a square 2-D matrix, got shape {board.shape}')
    if board.shape[0] < 1:
        raise InvalidDimension('grid must have at least one cell')
    return board


def frozen(board: ndarray) -> ndarray:
    """Return ``board`` flagged read-only; callers pass a fresh array."""
    board.setflags(write=False)
    return board
