"""Loading of error-log documents.

Accepts a JSON array of entries in either the plain shape::

    {"id": ..., "source": {"microservice": ..., "message": ...,
     "errorMessage": ..., "timestamp": ...}, "coordinate": {"x": ..., "y": ...}}

or the raw search-index export shape::

    {"_id": ..., "_source": {..., "@timestamp": ...},
     "coordinates": {"error": {"X": ..., "Y": ...}}}

Validation is structural only.  Any problem raises :class:`LogLoadError`
and nothing is returned, so callers never see a partial collection.
"""

from __future__ import annotations

import base64
import json
import logging
import math
import os
from numbers import Real
from types import MappingProxyType
from typing import Any, Iterable, Mapping

import pandas as pd

from .errors import LogLoadError
from .models import Coordinate, LogEntry, LogSource

logger = logging.getLogger(__name__)

_SOURCE_TEXT_FIELDS = {
    "microservice": "microservice",
    "message": "message",
    "errorMessage": "error_message",
}
_TIMESTAMP_KEYS = ("timestamp", "@timestamp")


def parse_timestamp_ms(value: str) -> int:
    """Parse an ISO timestamp into UTC epoch milliseconds.

    Naive timestamps are taken as UTC.
    """
    ts = pd.to_datetime(value, format="ISO8601", utc=True)
    if ts is pd.NaT:
        raise ValueError(f"not a timestamp: {value!r}")
    return int(ts.value // 1_000_000)


def parse_entry(record: Any, position: int = 0) -> LogEntry:
    """Build a :class:`LogEntry` from one decoded JSON object."""
    if not isinstance(record, Mapping):
        raise LogLoadError(f"entry {position}: expected an object, got {type(record).__name__}")

    entry_id = _first(record, ("id", "_id"))
    if not isinstance(entry_id, str) or not entry_id:
        raise LogLoadError(f"entry {position}: missing or invalid 'id'")

    source = _first(record, ("source", "_source"))
    if not isinstance(source, Mapping):
        raise LogLoadError(f"entry {position} ({entry_id}): missing 'source'")

    texts = {}
    for key, attr in _SOURCE_TEXT_FIELDS.items():
        value = source.get(key)
        if not isinstance(value, str):
            raise LogLoadError(f"entry {position} ({entry_id}): missing or invalid 'source.{key}'")
        texts[attr] = value

    ts_key = next((k for k in _TIMESTAMP_KEYS if k in source), None)
    raw_ts = source.get(ts_key) if ts_key else None
    if not isinstance(raw_ts, str):
        raise LogLoadError(f"entry {position} ({entry_id}): missing 'source.timestamp'")
    try:
        ts_ms = parse_timestamp_ms(raw_ts)
    except ValueError as exc:
        raise LogLoadError(f"entry {position} ({entry_id}): bad timestamp {raw_ts!r}") from exc

    extra = {
        k: v for k, v in source.items()
        if k not in _SOURCE_TEXT_FIELDS and k != ts_key
    }

    return LogEntry(
        id=entry_id,
        source=LogSource(
            timestamp=raw_ts,
            timestamp_ms=ts_ms,
            extra=MappingProxyType(extra),
            **texts,
        ),
        coordinate=_parse_coordinate(record, position, entry_id),
    )


def parse_entries(records: Iterable[Any]) -> tuple[LogEntry, ...]:
    """Validate every record and return the full collection.

    Raises
    ------
    LogLoadError
        On the first structurally invalid record or a duplicated id.
    """
    if isinstance(records, (str, bytes, Mapping)):
        raise LogLoadError("expected a list of log entries")
    entries = tuple(parse_entry(r, i) for i, r in enumerate(records))
    check_unique_ids(entries)
    return entries


def check_unique_ids(entries: Iterable[LogEntry]) -> None:
    """Raise :class:`LogLoadError` if two entries share an id."""
    seen: set[str] = set()
    for i, entry in enumerate(entries):
        if entry.id in seen:
            raise LogLoadError(f"entry {i}: duplicate id {entry.id!r}")
        seen.add(entry.id)


def load_document(raw: str | bytes) -> tuple[LogEntry, ...]:
    """Decode a JSON document and parse its entries."""
    try:
        records = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise LogLoadError(f"malformed JSON: {exc}") from exc
    if not isinstance(records, list):
        raise LogLoadError("expected a JSON array of log entries")
    entries = parse_entries(records)
    logger.debug("Parsed %d log entries", len(entries))
    return entries


def load_logs(path: str) -> tuple[LogEntry, ...]:
    """Load a JSON log file from *path*."""
    if not os.path.exists(path):
        raise LogLoadError(f"no such file: {path}")
    with open(path, "rb") as fh:
        return load_document(fh.read())


def decode_upload(contents: str) -> bytes:
    """Decode the ``data:<mime>;base64,<payload>`` string of an upload."""
    try:
        _, payload = contents.split(",", 1)
        return base64.b64decode(payload, validate=True)
    except (ValueError, TypeError) as exc:
        raise LogLoadError("could not decode uploaded file") from exc


def _first(record: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if key in record:
            return record[key]
    return None


def _parse_coordinate(record: Mapping[str, Any], position: int, entry_id: str) -> Coordinate:
    coord = record.get("coordinate")
    if coord is None and isinstance(record.get("coordinates"), Mapping):
        coord = record["coordinates"].get("error")
    if not isinstance(coord, Mapping):
        raise LogLoadError(f"entry {position} ({entry_id}): missing 'coordinate'")

    values = []
    for keys in (("x", "X"), ("y", "Y")):
        value = _first(coord, keys)
        invalid = LogLoadError(f"entry {position} ({entry_id}): invalid 'coordinate.{keys[0]}'")
        if isinstance(value, bool) or not isinstance(value, Real):
            raise invalid
        try:
            number = float(value)
        except (OverflowError, ValueError) as exc:
            raise invalid from exc
        if not math.isfinite(number):
            raise invalid
        values.append(number)
    return Coordinate(*values)
