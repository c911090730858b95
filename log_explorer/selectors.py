"""Label field toggles."""

from __future__ import annotations

import logging
from typing import Mapping

from .models import FIELD_ORDER, LogField

logger = logging.getLogger(__name__)

DEFAULT_SELECTORS: Mapping[LogField, bool] = {
    LogField.ID: True,
    LogField.MICROSERVICE: False,
    LogField.MESSAGE: False,
    LogField.ERROR_MESSAGE: False,
}


class SelectorSet:
    """Independent on/off flags for the fields rendered as text.

    Flags are not mutually exclusive; changing one never touches another.
    """

    def __init__(self, initial: Mapping[LogField, bool] | None = None) -> None:
        self._flags = dict(DEFAULT_SELECTORS)
        if initial:
            for log_field, value in initial.items():
                self._flags[LogField(log_field)] = bool(value)

    def enabled(self, log_field: LogField) -> bool:
        return self._flags[log_field]

    def toggle(self, name: str | LogField, enabled: bool) -> bool:
        """Set the flag called *name*.

        Unknown names are ignored.  Returns whether a flag was set.
        """
        log_field = name if isinstance(name, LogField) else LogField.parse(name)
        if log_field is None:
            logger.debug("Ignoring unknown selector %r", name)
            return False
        self._flags[log_field] = bool(enabled)
        return True

    def enabled_fields(self) -> tuple[LogField, ...]:
        """Enabled fields in rendering order."""
        return tuple(f for f in FIELD_ORDER if self._flags[f])

    def as_dict(self) -> dict[str, bool]:
        return {f.value: self._flags[f] for f in FIELD_ORDER}

    def copy(self) -> "SelectorSet":
        return SelectorSet(self._flags)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SelectorSet):
            return NotImplemented
        return self._flags == other._flags

    def __repr__(self) -> str:
        return f"SelectorSet({self.as_dict()})"
