"""Detail panel content for the selected entries."""

from __future__ import annotations

from dataclasses import dataclass

from .models import FIELD_ORDER, LogEntry
from .selection import SelectionState
from .selectors import SelectorSet


@dataclass(frozen=True)
class EntryDetail:
    id: str
    fields: tuple[tuple[str, str], ...]


@dataclass(frozen=True)
class DetailView:
    """What the detail panel shows.

    ``placeholder`` is set while a drag is still in progress; ``entries`` is
    then empty even if ``count`` is not.
    """

    count: int
    placeholder: bool
    entries: tuple[EntryDetail, ...]


def render_entry(entry: LogEntry, selectors: SelectorSet) -> EntryDetail:
    return EntryDetail(
        id=entry.id,
        fields=tuple(
            (f.value, entry.field_text(f)) for f in FIELD_ORDER if selectors.enabled(f)
        ),
    )


def render_details(selection: SelectionState, selectors: SelectorSet) -> DetailView:
    """Render the enabled fields of every selected entry."""
    if selection.is_selecting:
        return DetailView(len(selection.entries), True, ())
    return DetailView(
        count=len(selection.entries),
        placeholder=False,
        entries=tuple(render_entry(e, selectors) for e in selection.entries),
    )
