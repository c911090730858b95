"""Immutable records for error-log entries."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class LogField(str, Enum):
    """Closed set of entry fields that can be shown as text.

    Declaration order is the rendering order for labels and details.
    """

    ID = "id"
    MICROSERVICE = "microservice"
    MESSAGE = "message"
    ERROR_MESSAGE = "errorMessage"

    @classmethod
    def parse(cls, name: str) -> "LogField | None":
        """Return the field called *name*, or ``None`` if unknown."""
        try:
            return cls(name)
        except ValueError:
            return None


FIELD_ORDER: tuple[LogField, ...] = tuple(LogField)


@dataclass(frozen=True)
class Coordinate:
    """Precomputed 2-D similarity coordinate."""

    x: float
    y: float


@dataclass(frozen=True)
class LogSource:
    """Descriptive part of an entry.

    ``timestamp`` keeps the original string, ``timestamp_ms`` is the parsed
    UTC epoch time in milliseconds.  Any other keys of the source record are
    kept read-only in ``extra``.
    """

    microservice: str
    message: str
    error_message: str
    timestamp: str
    timestamp_ms: int
    extra: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))


@dataclass(frozen=True)
class LogEntry:
    """One error-log record with its similarity coordinate."""

    id: str
    source: LogSource
    coordinate: Coordinate

    @property
    def timestamp_ms(self) -> int:
        return self.source.timestamp_ms

    def field_text(self, log_field: LogField) -> str:
        """Raw text of *log_field* for this entry."""
        return _FIELD_GETTERS[log_field](self)


_FIELD_GETTERS = {
    LogField.ID: lambda e: e.id,
    LogField.MICROSERVICE: lambda e: e.source.microservice,
    LogField.MESSAGE: lambda e: e.source.message,
    LogField.ERROR_MESSAGE: lambda e: e.source.error_message,
}
