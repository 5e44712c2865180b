"""
Stores for the best score reached across sessions.
"""

import json
import logging
from math import isfinite
from pathlib import Path
from typing import Protocol

_logger = logging.getLogger(__name__)

BEST_SCORE_KEY = 'bestScore'


def _as_score(value: object) -> int:
    """Coerce a stored value into a best score, falling back to 0."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            return 0
    if not isinstance(value, (int, float)) or not isfinite(value) or value < 0:
        return 0
    return int(value)


class BestScoreStore(Protocol):
    """Persistence collaborator for the best score."""

    def load_best_score(self) -> int:
        ...

    def save_best_score(self, score: int) -> None:
        ...


class MemoryStore:
    """Keep the best score in memory."""

    def __init__(self, best_score: int = 0):
        self._best_score = _as_score(best_score)

    def load_best_score(self) -> int:
        return self._best_score

    def save_best_score(self, score: int) -> None:
        self._best_score = _as_score(score)


class NullStore:
    """Persistence that is unavailable: reads as 0 and drops writes."""

    def load_best_score(self) -> int:
        return 0

    def save_best_score(self, score: int) -> None:
        _logger.debug('Dropping best score %d, no storage configured', score)


class JsonFileStore:
    """
    Keep the best score in a JSON object file.

    Parameters
    ----------
    path : str or Path
        Location of the JSON file. Parent directories are created on save.
    key : str, optional
        Key holding the score inside the JSON object (default is ``"bestScore"``).

    Notes
    -----
    - A missing, unreadable or malformed file loads as 0.
    - Other keys present in the file are preserved on save.
    - Failed writes are logged and dropped.
    """

    def __init__(self, path: str | Path, key: str = BEST_SCORE_KEY):
        self.path = Path(path)
        self.key = key

    def _read(self) -> dict:
        try:
            content = json.loads(self.path.read_text(encoding='utf-8'))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as error:
            _logger.warning('Cannot read best score from %s: %s', self.path, error)
            return {}
        return content if isinstance(content, dict) else {}

    def load_best_score(self) -> int:
        return _as_score(self._read().get(self.key, 0))

    def save_best_score(self, score: int) -> None:
        content = self._read()
        content[self.key] = int(score)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(content), encoding='utf-8')
        except OSError as error:
            _logger.warning('Cannot save best score to %s: %s', self.path, error)
