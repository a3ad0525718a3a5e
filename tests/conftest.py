"""Shared fixtures: controllable clock, call-counting origin stub, test app."""
from __future__ import annotations

from collections.abc import Iterable

import pytest
from flask import Flask
from flask.testing import FlaskClient

from lotto_board import config, create_app
from lotto_board.models.draw import DrawRecord
from lotto_board.services.draw_cache import DrawCache


class FakeClock:
    def __init__(self, start: float = 1_700_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class StubOrigin:
    """Origin double: returns the configured draws, None for anything else."""

    def __init__(self, draws: Iterable[DrawRecord] = ()) -> None:
        self.draws = {d.round: d for d in draws}
        self.calls: list[int] = []

    def fetch_draw(self, round_no: int) -> DrawRecord | None:
        self.calls.append(round_no)
        return self.draws.get(round_no)


def make_draw(round_no: int, date: str = "2024-01-06", numbers=(1, 2, 3, 4, 5, 6), bonus: int = 7) -> DrawRecord:
    return DrawRecord(round=round_no, date=date, numbers=tuple(numbers), bonus=bonus)


DRAW_1149 = make_draw(1149, "2024-12-14", (2, 5, 15, 18, 19, 23), 42)
DRAW_1150 = make_draw(1150, "2024-12-21", (7, 11, 16, 21, 27, 33), 24)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock: FakeClock) -> DrawCache:
    return DrawCache(ttl_seconds=86_400, clock=clock)


@pytest.fixture
def origin() -> StubOrigin:
    return StubOrigin([DRAW_1149, DRAW_1150])


@pytest.fixture
def app(cache: DrawCache, origin: StubOrigin) -> Flask:
    return create_app(config.TestingConfig, cache=cache, origin=origin)


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    return app.test_client()
