"""log_explorer — interactive similarity scatter plot for error logs."""

from .config import ExplorerConfig
from .detail import DetailView, EntryDetail, render_details
from .errors import LogExplorerError, LogLoadError
from .filtering import FilterRange, default_range, filter_entries
from .io import load_document, load_logs, parse_entries
from .models import FIELD_ORDER, Coordinate, LogEntry, LogField, LogSource
from .projection import PlotSeries, project, wrap_words
from .scheduling import AsyncioScheduler, PollingScheduler
from .selection import SelectionController, SelectionPhase, SelectionState
from .selectors import SelectorSet
from .session import ExplorerSession
from .store import LogStore

__all__ = [
    # models
    "LogEntry",
    "LogSource",
    "Coordinate",
    "LogField",
    "FIELD_ORDER",
    # io
    "load_document",
    "load_logs",
    "parse_entries",
    # core
    "LogStore",
    "SelectorSet",
    "FilterRange",
    "default_range",
    "filter_entries",
    "PlotSeries",
    "project",
    "wrap_words",
    "SelectionController",
    "SelectionPhase",
    "SelectionState",
    "DetailView",
    "EntryDetail",
    "render_details",
    "ExplorerSession",
    # scheduling
    "PollingScheduler",
    "AsyncioScheduler",
    # config / errors
    "ExplorerConfig",
    "LogExplorerError",
    "LogLoadError",
]
