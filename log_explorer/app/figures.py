"""Build the log scatter figure from the session's plot series."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import plotly.graph_objects as go

from . import theme

if TYPE_CHECKING:
    from ..session import ExplorerSession


def build_main_figure(session: ExplorerSession, *, point_size: int = 7) -> go.Figure:
    """Build the scatter figure for the current filtered view.

    Every point carries ``[view_revision, index]`` as ``customdata`` so a
    selection event can be mapped back to entries of the view it was drawn
    from, and dropped if that view has since been replaced.
    """
    fig = go.Figure()
    with session.lock:
        series, revision = session.series, session.view_revision

    if len(series):
        xy = np.asarray(series.coordinates, dtype=float)
        fig.add_trace(go.Scattergl(
            x=xy[:, 0],
            y=xy[:, 1],
            mode="markers",
            name="Logs",
            showlegend=False,
            text=list(series.labels),
            customdata=[[revision, i] for i in series.indices],
            hoverinfo="text",
            marker=dict(size=point_size, color=theme.BLUE, opacity=0.8),
            hoverlabel=dict(
                bgcolor=theme.BASE2,
                font=dict(family=theme.FONT_STACK, size=11, color=theme.BASE01),
            ),
        ))

    # A new uirevision per view clears any selection box still drawn on the
    # client.
    fig.update_layout(_base_layout(f"view-{revision}"))
    return fig


def _base_layout(uirevision: str) -> dict:
    """Return common layout kwargs."""
    return dict(
        dragmode="select",
        uirevision=uirevision,
        hovermode="closest",
        paper_bgcolor=theme.BASE3,
        plot_bgcolor=theme.BASE3,
        font=dict(family=theme.FONT_STACK, size=11, color=theme.BASE00),
        margin=dict(l=10, r=10, t=10, b=10),
        xaxis=dict(showticklabels=False, showgrid=False, zeroline=False),
        yaxis=dict(showticklabels=False, showgrid=False, zeroline=False),
    )
