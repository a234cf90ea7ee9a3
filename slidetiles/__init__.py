# -*- coding: utf-8 -*-
"""
Sliding-tile (2048-style) game: a pure board engine plus the session state that drives it.
"""

from .config import GameSettings
from .core import Direction, has_any_legal_move, move_board, spawn_random_tile, start_board
from .envs import GameSession, GameStatus
from .storage import BestScoreStore

__all__ = [
    "BestScoreStore",
    "Direction",
    "GameSession",
    "GameSettings",
    "GameStatus",
    "has_any_legal_move",
    "move_board",
    "spawn_random_tile",
    "start_board",
]

__version__ = "0.1.0"
