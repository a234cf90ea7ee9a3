"""
File-backed storage of the best score reached across sessions.
"""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

# ##>: Key holding the best score in the stored mapping.
BEST_SCORE_KEY = 'best'


class BestScoreStore:
    """
    Persist a single best score in a JSON key-value file.

    Parameters
    ----------
    path : str | Path
        Location of the JSON file. It is created on the first save.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            content = json.loads(self.path.read_text(encoding='utf-8'))
        except (OSError, ValueError) as error:
            logger.warning('Ignoring unreadable best score file %s: %s', self.path, error)
            return {}
        if not isinstance(content, dict):
            logger.warning('Ignoring best score file %s: expected a JSON object', self.path)
            return {}
        return content

    def load(self) -> int:
        """
        Read the stored best score.

        Returns
        -------
        int
            The best score, or 0 when nothing usable is stored.
        """
        value = self._read().get(BEST_SCORE_KEY, 0)
        try:
            return max(int(value), 0)
        except (TypeError, ValueError, OverflowError):
            logger.warning('Ignoring invalid best score %r in %s', value, self.path)
            return 0

    def save(self, value: int) -> None:
        """
        Store a new best score, keeping any other key of the file.

        Parameters
        ----------
        value : int
            The score to store.
        """
        content = self._read()
        content[BEST_SCORE_KEY] = int(value)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(content), encoding='utf-8')
