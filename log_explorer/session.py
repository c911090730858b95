"""View-state engine binding the log collection to the plot.

:class:`ExplorerSession` is the single place where events are applied.
Each handler updates its own piece of state and then recomputes the derived
values it invalidates:

* ``filtered_view`` = ``filter_entries(store.entries, filter_range)``
* ``series`` = ``project(filtered_view, selectors)``

Loading, clearing and changing the filter range all replace
``filtered_view``, so each of them also resets the selection in the same
call and bumps ``view_revision``.  Selection events tagged with an older
revision are dropped, so plot indices are never read against a newer view.

Event methods hold the session lock; the Dash server calls them from
several request threads.
"""

from __future__ import annotations

import datetime as dt
import logging
import threading
from typing import Any, Iterable, Mapping

from .config import ExplorerConfig
from .detail import DetailView, render_details
from .filtering import FilterRange, default_range, filter_entries
from .io import check_unique_ids, load_document, parse_entries
from .models import LogEntry, LogField
from .projection import PlotSeries, project
from .scheduling import PollingScheduler, Scheduler
from .selection import SelectionController, SelectionState
from .selectors import SelectorSet
from .store import LogStore

logger = logging.getLogger(__name__)


class ExplorerSession:
    """All state of one explorer view.

    Parameters
    ----------
    config : ExplorerConfig, optional
        Debounce window and label wrap width.
    scheduler : Scheduler, optional
        Runs the selection settle task.  Defaults to a
        :class:`PollingScheduler` advanced by :meth:`tick`.
    filter_range : FilterRange, optional
        Explicit initial range.  When omitted the range follows
        :func:`default_range` and is recomputed on every load until the user
        sets one.
    today : date, optional
        Fixed "today" for the default range; the real date when ``None``.
    """

    def __init__(
        self,
        config: ExplorerConfig | None = None,
        *,
        scheduler: Scheduler | None = None,
        filter_range: FilterRange | None = None,
        today: dt.date | None = None,
    ) -> None:
        self.config = config or ExplorerConfig()
        self.scheduler = scheduler if scheduler is not None else PollingScheduler()
        self.today = today
        self.store = LogStore()
        self.selectors = SelectorSet()
        self.filter_range = filter_range or default_range(today)
        self.range_is_default = filter_range is None
        self.selection = SelectionController(self.scheduler, self.config.debounce_seconds)
        self.view_revision = 0
        self.filtered_view: tuple[LogEntry, ...] = ()
        self.series: PlotSeries = project((), self.selectors)
        self.lock = threading.RLock()

    # ------------------------------------------------------------------ #
    #  Derivations
    # ------------------------------------------------------------------ #

    def _refilter(self) -> None:
        self.filtered_view = filter_entries(self.store.entries, self.filter_range)
        self.view_revision += 1
        self.selection.on_filter_changed()
        self._reproject()

    def _reproject(self) -> None:
        self.series = project(
            self.filtered_view, self.selectors, wrap_width=self.config.wrap_width
        )

    # ------------------------------------------------------------------ #
    #  Events
    # ------------------------------------------------------------------ #

    def load_collection(self, entries: Iterable[LogEntry | Mapping[str, Any]]) -> None:
        """Replace the collection.

        Raw decoded JSON objects are validated first; if any is invalid, or
        two entries share an id, :class:`~log_explorer.errors.LogLoadError`
        is raised and the current collection stays active.
        """
        entries = tuple(entries)
        if all(isinstance(e, LogEntry) for e in entries):
            check_unique_ids(entries)
        else:
            entries = parse_entries(entries)
        with self.lock:
            if self.range_is_default:
                self.filter_range = default_range(self.today)
            self.store.load(entries)
            self._refilter()

    def load_document(self, raw: str | bytes) -> None:
        """Parse and load a JSON document.

        Raises :class:`~log_explorer.errors.LogLoadError` without touching
        the current collection if the document is invalid.
        """
        self.load_collection(load_document(raw))

    def clear_collection(self) -> None:
        """Eject the collection and go back to waiting for input."""
        with self.lock:
            self.store.clear()
            self._refilter()

    def toggle_selector(self, name: str | LogField, enabled: bool) -> bool:
        with self.lock:
            changed = self.selectors.toggle(name, enabled)
            if changed:
                self._reproject()
            return changed

    def set_filter_range(self, filter_range: FilterRange) -> None:
        with self.lock:
            self.filter_range = filter_range
            self.range_is_default = False
            logger.info("Filter range set to %s .. %s", filter_range.start, filter_range.end)
            self._refilter()

    def set_filter_bound(self, name: str, value: str) -> None:
        """Update one bound from a date-picker value (ISO ``YYYY-MM-DD``)."""
        with self.lock:
            self.set_filter_range(self.filter_range.replace_bound(name, value))

    def select(self, indices: Iterable[object], revision: int | None = None) -> SelectionState:
        """Apply a selection-progress event.

        *revision* is the ``view_revision`` the plot was drawn from.  An event
        from an older view is dropped and the current state returned.
        """
        with self.lock:
            if revision is not None and revision != self.view_revision:
                logger.debug(
                    "Dropping selection from view %s (current %s)", revision, self.view_revision
                )
                return self.selection.state
            return self.selection.on_selecting(indices, self.filtered_view)

    def deselect(self) -> SelectionState:
        with self.lock:
            return self.selection.on_deselect()

    def tick(self) -> int:
        """Run due deferred work when driven by a polling scheduler."""
        with self.lock:
            if isinstance(self.scheduler, PollingScheduler):
                return self.scheduler.run_due()
            return 0

    def close(self) -> None:
        with self.lock:
            self.selection.close()

    # ------------------------------------------------------------------ #
    #  Views
    # ------------------------------------------------------------------ #

    @property
    def awaiting_input(self) -> bool:
        return not self.store.is_loaded

    def detail_view(self) -> DetailView:
        with self.lock:
            return render_details(self.selection.state, self.selectors)

    def status_text(self) -> str:
        return f"{len(self.filtered_view)} of {len(self.store)} Logs"
