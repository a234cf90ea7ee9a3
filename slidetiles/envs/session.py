"""Game session: the caller-side state wrapped around the board engine."""

import logging
from collections import deque
from dataclasses import replace
from enum import Enum
from typing import NamedTuple

from numpy import ndarray

from slidetiles.config import GameSettings
from slidetiles.core.gameboard import (
    RandomSource,
    has_any_legal_move,
    make_random_source,
    max_tile,
    move_board,
    spawn_random_tile,
    start_board,
)
from slidetiles.core.gamemove import Direction, legal_directions
from slidetiles.storage import BestScoreStore

logger = logging.getLogger(__name__)


class GameStatus(str, Enum):
    """State of the current game."""

    PLAYING = 'playing'
    WON = 'won'
    LOST = 'lost'


class Snapshot(NamedTuple):
    """Board and score recorded before a committed move."""

    board: ndarray
    score: int


class GameSession:
    """
    A game in progress.

    This class holds the board, the score, the best score, the undo history and the settings, and turns player
    moves into engine calls: move, spawn, score and end-of-game checks.
    """

    # ##: Current game state.
    _board: ndarray | None = None
    _score: int = 0
    _status: GameStatus = GameStatus.PLAYING

    def __init__(
        self,
        settings: GameSettings | None = None,
        random_source: RandomSource | None = None,
        store: BestScoreStore | None = None,
    ):
        """
        Start a new game.

        Parameters
        ----------
        settings : GameSettings, optional
            Session configuration (default settings when omitted).
        random_source : RandomSource, optional
            Callable returning uniform floats in [0, 1), used for every spawn.
        store : BestScoreStore, optional
            Where the best score is loaded from and saved to. Without it the best score only lives in memory.
        """
        self.settings = settings or GameSettings()
        self._random = random_source or make_random_source()
        self._store = store
        self._best_score = store.load() if store is not None else 0
        self._history: deque[Snapshot] = deque(maxlen=self.settings.max_undo)

        self.restart()

    @property
    def board(self) -> ndarray:
        """The current board."""
        return self._board

    @property
    def score(self) -> int:
        """The score of the current game."""
        return self._score

    @property
    def best_score(self) -> int:
        """The best score ever reached."""
        return self._best_score

    @property
    def status(self) -> GameStatus:
        """Whether the game is running, won or lost."""
        return self._status

    @property
    def is_finished(self) -> bool:
        """True once the game is won or lost."""
        return self._status is not GameStatus.PLAYING

    @property
    def history(self) -> tuple[Snapshot, ...]:
        """Recorded snapshots, oldest first."""
        return tuple(self._history)

    @property
    def legal_directions(self) -> list[Direction]:
        """Directions that would change the board; empty once the game is won or lost."""
        if self._status is not GameStatus.PLAYING:
            return []
        return legal_directions(self._board)

    @property
    def can_undo(self) -> bool:
        """True if at least one move can be undone."""
        return bool(self._history)

    def restart(self, size: int | None = None) -> ndarray:
        """
        Start a fresh game with two random tiles.

        Parameters
        ----------
        size : int, optional
            New board size; the current one is kept when omitted.

        Returns
        -------
        ndarray
            The new board.
        """
        if size is not None and size != self.settings.size:
            self.settings = replace(self.settings, size=size)

        self._board = start_board(self.settings.size, self._random, self.settings.prob4)
        self._score = 0
        self._status = GameStatus.PLAYING
        self._history.clear()
        logger.info('New %dx%d game started', self.settings.size, self.settings.size)
        return self._board

    def move(self, direction) -> bool:
        """
        Play one move.

        Parameters
        ----------
        direction : Direction | int | str
            Where the tiles go.

        Returns
        -------
        bool
            True if the move changed the board and was committed.

        Notes
        -----
        - Moves are ignored once the game is won or lost.
        - A move that changes nothing spawns no tile and records no history.
        """
        if self._status is not GameStatus.PLAYING:
            return False

        # ##: Blocked directions are rejected before any board is built.
        direction = Direction.parse(direction)
        if direction not in self.legal_directions:
            return False

        outcome = move_board(self._board, direction)

        # ##: Commit: record history, spawn, then score.
        self._history.append(Snapshot(self._board, self._score))
        self._board = spawn_random_tile(outcome.board, self._random, self.settings.prob4)
        self._score += outcome.score_gain
        logger.debug('Move %s committed, score +%d -> %d', direction, outcome.score_gain, self._score)

        if self._score > self._best_score:
            self._update_best_score()

        # ##: Check end of game.
        if max_tile(self._board) >= self.settings.target_value:
            self._status = GameStatus.WON
            logger.info('Target %d reached with score %d', self.settings.target_value, self._score)
        elif not has_any_legal_move(self._board):
            self._status = GameStatus.LOST
            logger.info('Game over with score %d', self._score)
        return True

    def _update_best_score(self) -> None:
        self._best_score = self._score
        if self._store is not None:
            self._store.save(self._best_score)
        logger.info('New best score: %d', self._best_score)

    def undo(self) -> bool:
        """
        Restore the board and score recorded before the last committed move.

        Returns
        -------
        bool
            False if there was nothing to undo.
        """
        if not self._history:
            return False

        snapshot = self._history.pop()
        self._board, self._score = snapshot.board, snapshot.score
        self._status = GameStatus.PLAYING
        logger.debug('Move undone, score back to %d', self._score)
        return True

    def configure(self, **changes) -> GameSettings:
        """
        Change session settings.

        Parameters
        ----------
        **changes
            Fields of :class:`GameSettings` to replace.

        Returns
        -------
        GameSettings
            The new settings.

        Notes
        -----
        - ``prob4`` and ``target_value`` apply from the next move.
        - A smaller ``max_undo`` keeps only the newest snapshots.
        - A new ``size`` restarts the game.
        """
        previous = self.settings
        self.settings = replace(previous, **changes)
        logger.debug('Settings changed: %s', self.settings)

        if self.settings.max_undo != previous.max_undo:
            self._history = deque(self._history, maxlen=self.settings.max_undo)
        if self.settings.size != previous.size:
            self.restart()
        return self.settings

    def render(self) -> None:
        """
        Render the game board. This method prints the current state of the game board to the console.
        """
        for row in self._board.tolist():
            print(' \t'.join(map(str, row)))
