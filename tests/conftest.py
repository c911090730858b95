"""Shared fixtures for the log explorer tests."""

from __future__ import annotations

import datetime as dt
import json

import pytest

from log_explorer.filtering import FilterRange
from log_explorer.io import parse_entry
from log_explorer.scheduling import PollingScheduler
from log_explorer.session import ExplorerSession


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_record(
    entry_id: str,
    timestamp: str,
    *,
    x: float = 0.0,
    y: float = 0.0,
    microservice: str = "billing",
    message: str = "request failed",
    error_message: str = "connection refused",
    **extra,
) -> dict:
    return {
        "id": entry_id,
        "source": {
            "microservice": microservice,
            "message": message,
            "errorMessage": error_message,
            "timestamp": timestamp,
            **extra,
        },
        "coordinate": {"x": x, "y": y},
    }


def make_entry(entry_id: str, timestamp: str, **kwargs):
    return parse_entry(make_record(entry_id, timestamp, **kwargs))


@pytest.fixture
def records() -> list[dict]:
    return [
        make_record("e1", "2024-01-01T00:00:00Z", x=1.0, y=2.0, microservice="auth"),
        make_record("e2", "2024-02-01T00:00:00Z", x=3.0, y=4.0, microservice="billing"),
        make_record("e3", "2024-03-01T00:00:00Z", x=5.0, y=6.0, microservice="search"),
    ]


@pytest.fixture
def entries(records):
    return tuple(parse_entry(r, i) for i, r in enumerate(records))


@pytest.fixture
def document(records) -> str:
    return json.dumps(records)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def scheduler(clock) -> PollingScheduler:
    return PollingScheduler(clock=clock)


@pytest.fixture
def full_range() -> FilterRange:
    return FilterRange(dt.date(2023, 1, 1), dt.date(2025, 1, 1))


@pytest.fixture
def session(scheduler, full_range, entries):
    s = ExplorerSession(scheduler=scheduler, filter_range=full_range)
    s.load_collection(entries)
    yield s
    s.close()
