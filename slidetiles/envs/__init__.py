# -*- coding: utf-8 -*-
"""
Game session built on top of the board engine.

This module provides the `GameSession` class, which holds the board, score, best score and undo history of a game.
"""

from .session import GameSession, GameStatus, Snapshot

__all__ = ["GameSession", "GameStatus", "Snapshot"]
