"""
Tests for the best score store.
"""

import json
import logging

from slidetiles.storage import BEST_SCORE_KEY, BestScoreStore


def test_missing_file_loads_zero(tmp_path):
    """Nothing stored yet means a best score of zero."""
    store = BestScoreStore(tmp_path / 'best.json')
    assert store.load() == 0


def test_save_then_load(tmp_path):
    """Saved value is read back and the parent folder is created."""
    store = BestScoreStore(tmp_path / 'nested' / 'best.json')
    store.save(1234)
    assert store.load() == 1234
    assert json.loads(store.path.read_text()) == {BEST_SCORE_KEY: 1234}


def test_save_keeps_other_keys(tmp_path):
    """Other entries of the file survive a save."""
    path = tmp_path / 'best.json'
    path.write_text(json.dumps({'theme': 'dark', BEST_SCORE_KEY: 8}))

    BestScoreStore(path).save(16)
    assert json.loads(path.read_text()) == {'theme': 'dark', BEST_SCORE_KEY: 16}


def test_corrupt_file_loads_zero(tmp_path, caplog):
    """Unreadable content falls back to zero with a warning."""
    path = tmp_path / 'best.json'
    path.write_text('{not json')

    with caplog.at_level(logging.WARNING, logger='slidetiles.storage'):
        assert BestScoreStore(path).load() == 0
    assert 'unreadable' in caplog.text


def test_invalid_value_loads_zero(tmp_path):
    """A non-numeric best score is ignored."""
    path = tmp_path / 'best.json'
    path.write_text(json.dumps({BEST_SCORE_KEY: 'lots'}))
    assert BestScoreStore(path).load() == 0


def test_non_mapping_file_loads_zero(tmp_path):
    """A JSON document that is not an object is ignored."""
    path = tmp_path / 'best.json'
    path.write_text('[1, 2, 3]')
    assert BestScoreStore(path).load() == 0


def test_infinite_value_loads_zero(tmp_path, caplog):
    """JSON infinities cannot become an integer score and are ignored."""
    path = tmp_path / 'best.json'
    for content in ('{"best": Infinity}', '{"best": 1e999}'):
        path.write_text(content)
        caplog.clear()
        with caplog.at_level(logging.WARNING, logger='slidetiles.storage'):
            assert BestScoreStore(path).load() == 0
        assert 'invalid best score' in caplog.text


def test_session_starts_with_infinite_best(tmp_path):
    """A session still starts when the stored best score overflows."""
    from slidetiles.envs.session import GameSession

    path = tmp_path / 'best.json'
    path.write_text('{"best": 1e999}')
    assert GameSession(store=BestScoreStore(path)).best_score == 0
