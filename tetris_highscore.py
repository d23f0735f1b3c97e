"""High-score persistence: one integer in a small JSON file."""
import json
import logging
import os
from dataclasses import dataclass
from typing import Optional

from tetris_config import CONFIG

log = logging.getLogger("tetris.highscore")


@dataclass
class GameResult:
    score: int
    lines: int
    level: int
    high_score: int
    is_new_record: bool


class HighScoreStore:
    """Reads and writes {"high_score": n} at path (CONFIG["HIGH_SCORE_PATH"] by default)."""

    def __init__(self, path: Optional[str] = None):
        self.path = path or CONFIG["HIGH_SCORE_PATH"]

    def load(self) -> int:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                value = json.load(f)["high_score"]
        except FileNotFoundError:
            return 0
        except (OSError, ValueError, KeyError, TypeError) as e:
            log.warning("ignoring unreadable high score file %s: %s", self.path, e)
            return 0
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            log.warning("ignoring invalid high score %r in %s", value, self.path)
            return 0
        return value

    def save(self, score: int):
        folder = os.path.dirname(self.path)
        try:
            if folder:
                os.makedirs(folder, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump({"high_score": score}, f)
        except OSError:
            log.error("could not write high score to %s", self.path)
            raise

    def record(self, score: int, lines: int, level: int) -> GameResult:
        """Compare a finished game against the stored best; overwrite only when beaten."""
        best = self.load()
        is_new = score > best
        if is_new:
            self.save(score)
            log.info("new high score %d (previous %d)", score, best)
            best = score
        return GameResult(score, lines, level, best, is_new)
