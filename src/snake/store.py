# store.py
import json
import os

KEY = "snake_best"


class ScoreStore:
    """One persisted integer: the best score, kept as a small JSON file."""

    def __init__(self, path: str):
        self.path = path

    def load(self) -> int:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return max(0, int(data.get(KEY, 0)))
        except FileNotFoundError:
            return 0
        except (OSError, ValueError, TypeError, AttributeError) as e:
            print(f"[SCORE] Ignoring unreadable best score file {self.path}: {e}")
            return 0

    def save(self, score: int) -> None:
        parent = os.path.dirname(self.path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump({KEY: int(score)}, f)
