"""Selection state machine with debounced settle detection."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

from .models import LogEntry
from .scheduling import ScheduledTask, Scheduler

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_SECONDS = 0.25


class SelectionPhase(str, Enum):
    IDLE = "idle"
    SELECTING = "selecting"
    SETTLED = "settled"


@dataclass(frozen=True)
class SelectionState:
    """Snapshot of the selected entries and the settle flag."""

    entries: tuple[LogEntry, ...] = ()
    phase: SelectionPhase = SelectionPhase.IDLE

    @property
    def is_selecting(self) -> bool:
        return self.phase is SelectionPhase.SELECTING


class SelectionController:
    """Interprets drag-selection events against the filtered view.

    Every progress event replaces the selection immediately, but the phase
    only reaches ``SETTLED`` once no further event has arrived for
    ``debounce_seconds``.  The controller owns at most one pending settle
    task and releases it on :meth:`close`.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
    ) -> None:
        self._scheduler = scheduler
        self.debounce_seconds = debounce_seconds
        self._state = SelectionState()
        self._pending: ScheduledTask | None = None

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def phase(self) -> SelectionPhase:
        return self._state.phase

    @property
    def selection(self) -> tuple[LogEntry, ...]:
        return self._state.entries

    @property
    def has_pending_settle(self) -> bool:
        return self._pending is not None

    def on_selecting(self, indices: Iterable[object], view: Sequence[LogEntry]) -> SelectionState:
        """Handle a selection-progress event carrying plot point indices.

        Indices outside the view, or that are not integers, are skipped.
        """
        n = len(view)
        entries = tuple(
            view[i] for i in indices
            if isinstance(i, int) and not isinstance(i, bool) and 0 <= i < n
        )
        self._cancel_pending()
        self._state = SelectionState(entries, SelectionPhase.SELECTING)
        self._pending = self._scheduler.call_later(self.debounce_seconds, self._settle)
        return self._state

    def on_deselect(self) -> SelectionState:
        """Drop the selection and return to idle."""
        return self._reset()

    def on_filter_changed(self) -> SelectionState:
        """Drop the selection because its indices no longer refer to the view."""
        return self._reset()

    def close(self) -> None:
        self._cancel_pending()

    def __enter__(self) -> "SelectionController":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _reset(self) -> SelectionState:
        self._cancel_pending()
        self._state = SelectionState()
        return self._state

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _settle(self) -> None:
        self._pending = None
        if self._state.phase is SelectionPhase.SELECTING:
            self._state = SelectionState(self._state.entries, SelectionPhase.SETTLED)
            logger.debug("Selection settled with %d entries", len(self._state.entries))
