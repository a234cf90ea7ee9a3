"""
Tests for the keyboard handling of the interactive script.
"""

from types import SimpleNamespace

import numpy as np
import pytest

from manuals_control import KEY_DIRECTIONS, key_handler, parse_arguments
from slidetiles.config import GameSettings
from slidetiles.core.gamemove import Direction
from slidetiles.envs.session import GameSession


class FakeWindow:
    """Stand-in for WindowBoard recording what would be drawn."""

    def __init__(self):
        self.frames = []
        self.closed = False

    def show_image(self, board, caption=""):
        self.frames.append((np.array(board), caption))

    def close(self):
        self.closed = True


@pytest.fixture
def session():
    """Session spawning 2s in the first empty cell."""
    return GameSession(settings=GameSettings(prob4=0.0), random_source=lambda: 0.0)


@pytest.fixture
def window():
    return FakeWindow()


def press(session, window, key):
    key_handler(session, window, SimpleNamespace(key=key))


def test_bindings_cover_arrows_and_wasd():
    assert KEY_DIRECTIONS["left"] is KEY_DIRECTIONS["a"] is Direction.LEFT
    assert KEY_DIRECTIONS["up"] is KEY_DIRECTIONS["w"] is Direction.UP
    assert KEY_DIRECTIONS["right"] is KEY_DIRECTIONS["d"] is Direction.RIGHT
    assert KEY_DIRECTIONS["down"] is KEY_DIRECTIONS["s"] is Direction.DOWN


def test_move_key_redraws(session, window):
    press(session, window, "left")
    assert session.score == 4
    board, caption = window.frames[-1]
    np.testing.assert_array_equal(board[0], [4, 2, 0, 0])
    assert caption.startswith("Score: 4")


def test_uppercase_wasd(session, window):
    press(session, window, "A")
    assert session.score == 4


def test_blocked_move_does_not_redraw(session, window):
    press(session, window, "left")
    frames = len(window.frames)
    press(session, window, "up")
    assert len(window.frames) == frames


def test_undo_key(session, window):
    press(session, window, "left")
    press(session, window, "u")
    assert session.score == 0
    assert len(window.frames) == 2


def test_backspace_restarts(session, window):
    press(session, window, "left")
    press(session, window, "backspace")
    assert session.score == 0
    assert np.count_nonzero(session.board) == 2


def test_escape_closes(session, window):
    press(session, window, "escape")
    assert window.closed
    assert window.frames == []


def test_unknown_key_ignored(session, window):
    press(session, window, "x")
    press(session, window, None)
    assert window.frames == []


def test_parse_arguments_defaults():
    args = parse_arguments([])
    assert (args.size, args.prob4, args.target, args.max_undo) == (4, 0.1, 2048, 10)


def test_parse_arguments_rejects_out_of_range():
    with pytest.raises(SystemExit):
        parse_arguments(["--prob4", "0.9"])
    with pytest.raises(SystemExit):
        parse_arguments(["--size", "8"])


def test_blocked_key_does_not_reach_session(session, window, monkeypatch):
    moves = []
    monkeypatch.setattr(session, "move", lambda direction: moves.append(direction) or True)
    press(session, window, "up")
    assert moves == []
    assert window.frames == []

    press(session, window, "down")
    assert moves == [Direction.DOWN]
