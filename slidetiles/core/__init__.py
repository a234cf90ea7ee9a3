# -*- coding: utf-8 -*-
"""
This module provides the board engine of the sliding-tile game.

It includes functions for creating boards, spawning tiles, rotating boards, sliding and merging rows,
applying directional moves and detecting when no move remains.
"""

from .errors import BoardError, InvalidDimension, InvalidDirection, InvalidProbability, InvalidSetting
from .gameboard import (
    DEFAULT_PROB4,
    MoveOutcome,
    RandomSource,
    RowCollapse,
    collapse_row,
    create_empty_board,
    has_any_legal_move,
    list_empty_cells,
    make_random_source,
    max_tile,
    move_board,
    rotate_clockwise,
    rotate_times,
    spawn_random_tile,
    start_board,
)
from .gamemove import Direction, illegal_directions, legal_directions, legal_directions_mask

__all__ = [
    "BoardError",
    "InvalidDimension",
    "InvalidDirection",
    "InvalidProbability",
    "InvalidSetting",
    "DEFAULT_PROB4",
    "MoveOutcome",
    "RandomSource",
    "RowCollapse",
    "collapse_row",
    "create_empty_board",
    "has_any_legal_move",
    "list_empty_cells",
    "make_random_source",
    "max_tile",
    "move_board",
    "rotate_clockwise",
    "rotate_times",
    "spawn_random_tile",
    "start_board",
    "Direction",
    "illegal_directions",
    "legal_directions",
    "legal_directions_mask",
]
