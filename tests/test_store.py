"""Tests for src.snake.store."""

from __future__ import annotations

import json

from src.snake.store import KEY, ScoreStore


class TestScoreStore:
    def test_missing_file_is_zero(self, tmp_path) -> None:
        assert ScoreStore(str(tmp_path / "nope.json")).load() == 0

    def test_save_then_load(self, tmp_path) -> None:
        store = ScoreStore(str(tmp_path / "best.json"))
        store.save(17)
        assert store.load() == 17

    def test_file_format(self, tmp_path) -> None:
        path = tmp_path / "best.json"
        ScoreStore(str(path)).save(9)
        assert json.loads(path.read_text(encoding="utf-8")) == {KEY: 9}

    def test_creates_parent_dirs(self, tmp_path) -> None:
        store = ScoreStore(str(tmp_path / "a" / "b" / "best.json"))
        store.save(3)
        assert store.load() == 3

    def test_corrupt_file_is_zero(self, tmp_path) -> None:
        path = tmp_path / "best.json"
        path.write_text("{not json", encoding="utf-8")
        assert ScoreStore(str(path)).load() == 0

    def test_wrong_shape_is_zero(self, tmp_path) -> None:
        path = tmp_path / "best.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        assert ScoreStore(str(path)).load() == 0

    def test_negative_clamped(self, tmp_path) -> None:
        path = tmp_path / "best.json"
        path.write_text(json.dumps({KEY: -4}), encoding="utf-8")
        assert ScoreStore(str(path)).load() == 0
