"""
Directions of play and the helpers telling which of them can change a board.
"""

from enum import IntEnum
from numbers import Integral

from numpy import any as np_any
from numpy import ndarray, rot90

from slidetiles.core.errors import InvalidDirection
from slidetiles.core.grid import as_grid


class Direction(IntEnum):
    """
    The four slide directions.

    The value is the number of quarter turns that brings the direction onto a left slide.
    """

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3

    @classmethod
    def parse(cls, value) -> 'Direction':
        """
        Resolve a direction given as a member, its value or its name.

        Parameters
        ----------
        value : Direction | int | str
            The direction; names are matched regardless of case. Integer scalars (numpy included) are accepted,
            booleans are not.

        Returns
        -------
        Direction
            The matching member.

        Raises
        ------
        InvalidDirection
            If the value names none of the four directions.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise InvalidDirection(f'unknown direction: {value!r}') from None
        if isinstance(value, Integral) and not isinstance(value, bool):
            try:
                return cls(int(value))
            except ValueError:
                raise InvalidDirection(f'unknown direction: {value!r}') from None
        raise InvalidDirection(f'unknown direction: {value!r}')


def _can_slide_left(board: ndarray) -> bool:
    """A left slide changes the board when a tile has an empty or equal cell on its left."""
    left_cols, right_cols = board[:, :-1], board[:, 1:]
    return bool(np_any((right_cols != 0) & ((left_cols == 0) | (left_cols == right_cols))))


def legal_directions_mask(grid) -> tuple[bool, bool, bool, bool]:
    """
    Tell, for each direction, whether moving that way changes the board.

    Parameters
    ----------
    grid : array_like
        The current board.

    Returns
    -------
    tuple[bool, bool, bool, bool]
        Mask in ``Direction`` order (left, up, right, down).

    Notes
    -----
    Each direction is checked on the same counter-clockwise view ``move_board`` slides, so the mask agrees with
    ``move_board(grid, direction).moved`` without collapsing any row.
    """
    board = as_grid(grid)
    left, up, right, down = (_can_slide_left(rot90(board, k=direction.value)) for direction in Direction)
    return left, up, right, down


def legal_directions(grid) -> list[Direction]:
    """
    List the directions that would change the board.

    Parameters
    ----------
    grid : array_like
        The current board.

    Returns
    -------
    list[Direction]
        Legal directions, in (left, up, right, down) order.
    """
    mask = legal_directions_mask(grid)
    return [direction for direction in Direction if mask[direction]]


def illegal_directions(grid) -> list[Direction]:
    """List the directions that would leave the board unchanged."""
    mask = legal_directions_mask(grid)
    return [direction for direction in Direction if not mask[direction]]
