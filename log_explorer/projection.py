"""Turn the filtered view into plot series."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from .models import FIELD_ORDER, LogEntry, LogField
from .selectors import SelectorSet

LINE_BREAK = "<br>"
WRAP_WIDTH = 50


@dataclass(frozen=True)
class PlotSeries:
    """Per-point data for one scatter trace.

    ``indices[i]`` is always ``i``: the position of the point's entry in the
    view the series was projected from.
    """

    coordinates: tuple[tuple[float, float], ...]
    labels: tuple[str, ...]
    indices: tuple[int, ...]

    def __len__(self) -> int:
        return len(self.indices)


def wrap_words(text: str, width: int = WRAP_WIDTH) -> list[str]:
    """Greedy word wrap into segments of at most *width* characters.

    Words are never split; a single word longer than *width* gets a segment
    of its own.
    """
    segments: list[str] = []
    current = ""
    for word in text.split():
        if not current:
            current = word
        elif len(current) + 1 + len(word) <= width:
            current = f"{current} {word}"
        else:
            segments.append(current)
            current = word
    if current:
        segments.append(current)
    return segments


def _render_error_message(entry: LogEntry, width: int) -> str:
    wrapped = LINE_BREAK.join(wrap_words(entry.source.error_message, width))
    return f"{LINE_BREAK}{wrapped}{LINE_BREAK}"


LabelRenderer = Callable[[LogEntry, int], str]

LABEL_RENDERERS: dict[LogField, LabelRenderer] = {
    LogField.ID: lambda e, _w: e.id,
    LogField.MICROSERVICE: lambda e, _w: e.source.microservice,
    LogField.MESSAGE: lambda e, _w: e.source.message,
    LogField.ERROR_MESSAGE: _render_error_message,
}


def render_label(entry: LogEntry, selectors: SelectorSet, width: int = WRAP_WIDTH) -> str:
    """Hover text for one entry: enabled fields joined by line breaks."""
    return LINE_BREAK.join(
        LABEL_RENDERERS[f](entry, width) for f in FIELD_ORDER if selectors.enabled(f)
    )


def project(
    view: Sequence[LogEntry],
    selectors: SelectorSet,
    *,
    wrap_width: int = WRAP_WIDTH,
) -> PlotSeries:
    """Project *view* into coordinates, labels and stable indices."""
    return PlotSeries(
        coordinates=tuple((e.coordinate.x, e.coordinate.y) for e in view),
        labels=tuple(render_label(e, selectors, wrap_width) for e in view),
        indices=tuple(range(len(view))),
    )
