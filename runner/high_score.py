"""High score persistence.

The best score is a single JSON integer in ``data/high_score.json``
(override with ``RUNNER_HIGHSCORE_FILE``). Storage problems never reach the
game: a failed load means "no high score", a failed save is skipped, and
the in-memory value is kept either way.
"""

from __future__ import annotations

import json
import os

from runner.logger import get_logger

log = get_logger("highscore")

HIGH_SCORE_FILE = "data/high_score.json"


class HighScoreStore:
    def __init__(self, path: str | None = None):
        self.path = path or os.environ.get("RUNNER_HIGHSCORE_FILE", HIGH_SCORE_FILE)
        self.best = 0

    def load(self) -> int | None:
        """Read the stored score; ``None`` when absent or unreadable."""
        if not os.path.exists(self.path):
            return None
        try:
            with open(self.path, "r") as f:
                value = json.load(f)
            value = int(value)
        except (OSError, ValueError, TypeError, OverflowError) as e:
            log.warn("Could not load high score", e)
            return None
        if value < 0:
            log.warn("Ignoring negative high score", value)
            return None
        self.best = max(self.best, value)
        log.debug("High score loaded", value)
        return value

    def save(self, score: int) -> bool:
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.path, "w") as f:
                json.dump(int(score), f)
        except OSError as e:
            log.warn("Could not save high score", e)
            return False
        log.debug("High score saved", score)
        return True

    def submit(self, score: int) -> bool:
        """Adopt ``score`` when it beats the best and persist it."""
        if score <= self.best:
            return False
        self.best = score
        log.info("New high score", score)
        self.save(score)
        return True


class MemoryHighScoreStore(HighScoreStore):
    """Non-persistent store for tests and headless simulation."""

    def __init__(self, best: int = 0):
        super().__init__(path="")
        self.best = best
        self.saved: list[int] = []

    def load(self) -> int | None:
        return self.best or None

    def save(self, score: int) -> bool:
        self.saved.append(score)
        return True


__all__ = ["HighScoreStore", "MemoryHighScoreStore", "HIGH_SCORE_FILE"]
