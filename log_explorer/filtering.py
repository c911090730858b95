"""Date-range filtering of the log collection."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Iterable

import pandas as pd

from .models import LogEntry


def date_to_epoch_ms(day: dt.date) -> int:
    """Epoch milliseconds of UTC midnight on *day*."""
    return int(pd.Timestamp(day.isoformat(), tz="UTC").value // 1_000_000)


@dataclass(frozen=True)
class FilterRange:
    """Inclusive calendar-date range.

    Both bounds are compared at UTC midnight, so the end date only admits
    entries stamped exactly at its midnight.
    """

    start: dt.date
    end: dt.date

    @property
    def start_ms(self) -> int:
        return date_to_epoch_ms(self.start)

    @property
    def end_ms(self) -> int:
        return date_to_epoch_ms(self.end)

    @property
    def is_empty(self) -> bool:
        return self.start > self.end

    def contains(self, timestamp_ms: int) -> bool:
        return self.start_ms <= timestamp_ms <= self.end_ms

    def replace_bound(self, name: str, value: str) -> "FilterRange":
        """Return a copy with ``start_date``/``end_date`` set from an ISO string."""
        day = dt.date.fromisoformat(value)
        if name in ("start", "start_date", "startDate"):
            return FilterRange(day, self.end)
        if name in ("end", "end_date", "endDate"):
            return FilterRange(self.start, day)
        raise ValueError(f"unknown filter bound {name!r}")

    @classmethod
    def from_strings(cls, start: str, end: str) -> "FilterRange":
        return cls(dt.date.fromisoformat(start), dt.date.fromisoformat(end))


def default_range(today: dt.date | None = None) -> FilterRange:
    """One calendar month back from *today* up to *today*."""
    today = today or dt.date.today()
    start = (pd.Timestamp(today) - pd.DateOffset(months=1)).date()
    return FilterRange(start, today)


def filter_entries(entries: Iterable[LogEntry], date_range: FilterRange) -> tuple[LogEntry, ...]:
    """Entries whose timestamp falls inside *date_range*, in input order."""
    if date_range.is_empty:
        return ()
    start_ms, end_ms = date_range.start_ms, date_range.end_ms
    return tuple(e for e in entries if start_ms <= e.timestamp_ms <= end_ms)
