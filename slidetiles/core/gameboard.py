"""
Board engine for the sliding-tile game: board creation, rotation, slide-and-merge and end-of-game detection.

Every function is pure. Grids come back as fresh read-only arrays and randomness only enters through an explicit
random source.
"""

from collections.abc import Callable
from typing import NamedTuple

from numpy import all as np_all
from numpy import any as np_any
from numpy import argwhere, array, ndarray, rot90, stack, zeros
from numpy.random import PCG64DXSM, default_rng

from slidetiles.core.errors import InvalidDimension, InvalidProbability
from slidetiles.core.gamemove import Direction
from slidetiles.core.grid import GRID_DTYPE, as_grid, frozen

RandomSource = Callable[[], float]

# ##>: Default probability that a spawned tile is a 4 rather than a 2.
DEFAULT_PROB4 = 0.1

# ##>: Module-level generator, used when the caller does not inject a random source.
_GENERATOR = default_rng(PCG64DXSM())


class RowCollapse(NamedTuple):
    """Outcome of sliding one row to the left."""

    row: ndarray
    score_gain: int
    changed: bool


class MoveOutcome(NamedTuple):
    """Outcome of one directional move, before any tile is spawned."""

    board: ndarray
    moved: bool
    score_gain: int


def make_random_source(seed: int | None = None) -> RandomSource:
    """
    Build a random source producing uniform floats in [0, 1).

    Parameters
    ----------
    seed : int, optional
        Seed for reproducible sequences.

    Returns
    -------
    RandomSource
        A zero-argument callable.
    """
    return default_rng(seed).random


def _check_probability(prob4: float) -> None:
    if not 0.0 <= prob4 <= 1.0:
        raise InvalidProbability(f'prob4 must be within [0, 1], got {prob4}')


def create_empty_board(size: int) -> ndarray:
    """
    Create a board with no tiles.

    Parameters
    ----------
    size : int
        Number of rows (and columns).

    Returns
    -------
    ndarray
        A ``size x size`` read-only grid of zeros.

    Raises
    ------
    InvalidDimension
        If ``size`` is lower than one.
    """
    if size < 1:
        raise InvalidDimension(f'board size must be at least 1, got {size}')
    return frozen(zeros((size, size), dtype=GRID_DTYPE))


def list_empty_cells(grid) -> list[tuple[int, int]]:
    """
    List the coordinates of empty cells in row-major order.

    Parameters
    ----------
    grid : array_like
        The board to inspect.

    Returns
    -------
    list[tuple[int, int]]
        ``(row, column)`` pairs, top to bottom then left to right.
    """
    board = as_grid(grid)
    return [(int(row), int(col)) for row, col in argwhere(board == 0)]


def spawn_random_tile(grid, random_source: RandomSource = _GENERATOR.random, prob4: float = DEFAULT_PROB4) -> ndarray:
    """
    Place one new tile (2 or 4) in a random empty cell.

    Parameters
    ----------
    grid : array_like
        The board to spawn into. It is never modified.
    random_source : RandomSource, optional
        Callable returning uniform floats in [0, 1).
    prob4 : float, optional
        Probability that the new tile is a 4 (default is 0.1).

    Returns
    -------
    ndarray
        A new board with the extra tile, or a copy of the input when no cell is empty.

    Raises
    ------
    InvalidProbability
        If ``prob4`` lies outside [0, 1].

    Notes
    -----
    The source is drawn twice: first to pick the cell (``floor(r * empty_count)``), then the value
    (4 when the draw is below ``prob4``).
    """
    _check_probability(prob4)
    board = as_grid(grid)

    # ##: A full board is a normal condition, not an error.
    empty_cells = list_empty_cells(board)
    if not empty_cells:
        return frozen(board.copy())

    index = min(int(random_source() * len(empty_cells)), len(empty_cells) - 1)
    value = 4 if random_source() < prob4 else 2

    new_board = board.copy()
    new_board[empty_cells[index]] = value
    return frozen(new_board)


def start_board(size: int, random_source: RandomSource = _GENERATOR.random, prob4: float = DEFAULT_PROB4) -> ndarray:
    """
    Create the opening board: an empty grid with two spawned tiles.

    Parameters
    ----------
    size : int
        Number of rows (and columns).
    random_source : RandomSource, optional
        Callable returning uniform floats in [0, 1).
    prob4 : float, optional
        Probability that each spawned tile is a 4.

    Returns
    -------
    ndarray
        The starting board.

    Notes
    -----
    On a 1x1 board the second spawn finds no empty cell and leaves the board as is.
    """
    _check_probability(prob4)
    board = create_empty_board(size)
    board = spawn_random_tile(board, random_source, prob4)
    return spawn_random_tile(board, random_source, prob4)


def rotate_clockwise(grid) -> ndarray:
    """
    Rotate the board a quarter turn clockwise.

    Entry ``(r, c)`` of the input lands at ``(c, n - 1 - r)`` of the result.
    """
    return frozen(rot90(as_grid(grid), k=-1).copy())


def rotate_times(grid, times: int) -> ndarray:
    """
    Rotate the board clockwise ``times`` quarter turns.

    Parameters
    ----------
    grid : array_like
        The board to rotate.
    times : int
        Number of quarter turns; negative or large values are reduced modulo 4.

    Returns
    -------
    ndarray
        The rotated board. Four quarter turns give back the input.
    """
    board = as_grid(grid)
    for _ in range(times % 4):
        board = rotate_clockwise(board)
    return frozen(board.copy()) if times % 4 == 0 else board


def _merge_tiles(tiles: ndarray) -> tuple[int, list[int]]:
    """
    Merge adjacent equal values of a row without empty cells.

    Each value merges at most once: after a merge the scan resumes past both merged values.
    """
    merged = []
    score = 0

    i = 0
    while i < len(tiles):
        if i + 1 < len(tiles) and tiles[i] == tiles[i + 1]:
            value = int(tiles[i]) * 2
            merged.append(value)
            score += value
            i += 2
        else:
            merged.append(int(tiles[i]))
            i += 1

    return score, merged


def collapse_row(row) -> RowCollapse:
    """
    Slide a row to the left and merge equal neighbours.

    Parameters
    ----------
    row : array_like
        One-dimensional sequence of tile values, 0 for an empty cell.

    Returns
    -------
    RowCollapse
        The new row (right-padded with zeros to the input length), the score gained from merges and whether any
        position changed.

    Raises
    ------
    InvalidDimension
        If ``row`` is not one-dimensional.

    Examples
    --------
    >>> collapse_row([2, 2, 2, 0])
    RowCollapse(row=array([4, 2, 0, 0]), score_gain=4, changed=True)
    """
    line = array(row, dtype=GRID_DTYPE)
    if line.ndim != 1:
        raise InvalidDimension(f'row must be one-dimensional, got shape {line.shape}')

    score, merged = _merge_tiles(line[line != 0])

    result = zeros(len(line), dtype=GRID_DTYPE)
    result[: len(merged)] = merged
    return RowCollapse(frozen(result), score, bool(np_any(result != line)))


def move_board(grid, direction) -> MoveOutcome:
    """
    Slide every tile towards one side of the board, merging equal neighbours.

    Parameters
    ----------
    grid : array_like
        The current board. It is never modified.
    direction : Direction | int | str
        Where the tiles go: left, up, right or down.

    Returns
    -------
    MoveOutcome
        The new board, whether anything changed and the total score of the merges.

    Raises
    ------
    InvalidDirection
        If ``direction`` is not one of the four directions.

    Notes
    -----
    - The board is turned so that the move becomes a left slide, every row is collapsed on its own, then the board
      is turned back.
    - When nothing moved, the returned board holds exactly the input values; the caller must not spawn a tile.
    """
    turns = Direction.parse(direction).value
    board = as_grid(grid)

    # ##: Counter-clockwise turns bring the named side to the left.
    rotated = rotate_times(board, -turns)
    rows = [collapse_row(row) for row in rotated]

    moved = any(result.changed for result in rows)
    score = sum(result.score_gain for result in rows)
    if not moved:
        return MoveOutcome(frozen(board.copy()), False, 0)

    collapsed = stack([result.row for result in rows])
    return MoveOutcome(rotate_times(collapsed, turns), True, score)


def has_any_legal_move(grid) -> bool:
    """
    Check whether any move remains.

    Parameters
    ----------
    grid : array_like
        The current board.

    Returns
    -------
    bool
        True if a cell is empty or two horizontal or vertical neighbours hold the same value.
    """
    board = as_grid(grid)
    return bool(
        not np_all(board != 0) or np_any(board[:-1] == board[1:]) or np_any(board[:, :-1] == board[:, 1:])
    )


def max_tile(grid) -> int:
    """Return the largest tile value on the board, 0 for an empty board."""
    return int(as_grid(grid).max())
