# score_store.py
from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class ScoreStore(Protocol):
    def get(self, difficulty: str) -> int: ...
    def set(self, difficulty: str, score: int) -> None: ...


class MemoryScoreStore:
    """Keeps best scores in a dict. Used headless and in tests."""

    def __init__(self, scores: dict[str, int] | None = None):
        self.scores = dict(scores or {})

    def get(self, difficulty: str) -> int:
        return self.scores.get(difficulty, 0)

    def set(self, difficulty: str, score: int) -> None:
        self.scores[difficulty] = int(score)


class JsonScoreStore:
    """Best score per difficulty in a single JSON object on disk."""

    def __init__(self, path: str | Path):
        self.path = Path(path).expanduser()
        self._scores: dict | None = None  # read once, then written through

    def _load(self) -> dict:
        if self._scores is None:
            self._scores = self._read()
        return self._scores

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Could not read scores from %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring malformed score file %s", self.path)
            return {}
        return data

    def get(self, difficulty: str) -> int:
        value = self._load().get(difficulty, 0)
        try:
            return int(value)
        except (TypeError, ValueError):
            logger.warning("Bad score entry %r for %s", value, difficulty)
            self._scores[difficulty] = 0
            return 0

    def set(self, difficulty: str, score: int) -> None:
        data = self._load()
        data[difficulty] = int(score)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, sort_keys=True)
        except OSError as e:
            logger.warning("Could not save scores to %s: %s", self.path, e)
