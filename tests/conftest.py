"""Shared fixtures for the snake tests."""

from __future__ import annotations

from random import Random

import pytest

from src.snake.board import Board
from src.snake.config import Config
from src.snake.scheduler import TickScheduler
from src.snake.session import Session
from src.snake.store import ScoreStore
from tests.helpers import FakeTimer


@pytest.fixture
def cfg() -> Config:
    return Config()


@pytest.fixture
def board() -> Board:
    return Board()


@pytest.fixture
def rng() -> Random:
    return Random(0)


@pytest.fixture
def timer() -> FakeTimer:
    return FakeTimer()


@pytest.fixture
def store(tmp_path) -> ScoreStore:
    return ScoreStore(str(tmp_path / "best.json"))


@pytest.fixture
def session(store: ScoreStore, timer: FakeTimer, cfg: Config, board: Board) -> Session:
    s = Session(store, TickScheduler(set_timer=timer), cfg=cfg, board=board, rng=Random(0))
    s.start()
    return s
