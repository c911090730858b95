"""Full Dash layout: upload page and graph page.

Both pages are always present in the DOM so that callback inputs are never
missing.  Which one is visible is toggled via a callback.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dash import dcc, html

from ..detail import DetailView
from ..models import FIELD_ORDER
from . import theme

if TYPE_CHECKING:
    from ..session import ExplorerSession

_SECTION_TITLE = {
    "margin": "0 0 6px 0",
    "fontSize": "11px",
    "fontWeight": "700",
    "color": theme.BASE01,
    "textTransform": "uppercase",
    "letterSpacing": "0.5px",
}


def build_layout(session: ExplorerSession) -> html.Div:
    """Return the complete app layout."""
    awaiting = session.awaiting_input
    return html.Div(
        className="app-container",
        children=[
            html.Div(
                id="page-upload",
                children=_upload_page(),
                style=page_style(awaiting),
            ),
            html.Div(
                id="page-graph",
                children=_graph_page(session),
                style=page_style(not awaiting, display="flex"),
            ),
            # ── Hidden stores / timers ──
            dcc.Store(id="view-revision", data=0),
            dcc.Interval(
                id="settle-tick",
                interval=session.config.tick_interval_ms,
                n_intervals=0,
                disabled=True,
            ),
        ],
    )


def page_style(visible: bool, display: str = "block") -> dict:
    return {"display": display if visible else "none"}


def _upload_page() -> html.Div:
    return html.Div(
        className="upload-page",
        style={
            "display": "flex",
            "flexDirection": "column",
            "height": "100vh",
            "alignItems": "center",
            "justifyContent": "center",
            "backgroundColor": theme.BASE3,
            "fontFamily": theme.FONT_STACK,
        },
        children=[
            dcc.Upload(
                id="log-upload",
                accept="application/json,.json",
                multiple=False,
                children=html.Div(["Drop a log file here or ", html.A("choose one")]),
                style={
                    "border": f"1px dashed {theme.BASE1}",
                    "padding": "24px",
                    "color": theme.BASE00,
                    "cursor": "pointer",
                },
            ),
            html.Div(id="upload-error", style={"color": theme.RED, "marginTop": "8px"}),
        ],
    )


def _graph_page(session: ExplorerSession) -> list:
    r = session.filter_range
    return [
        # ── Left sidebar ──
        html.Div(
            className="left-sidebar",
            style=_sidebar_style(),
            children=[
                html.H4("Labels", style=_SECTION_TITLE),
                dcc.Checklist(
                    id="label-selectors",
                    options=[{"label": f.value, "value": f.value} for f in FIELD_ORDER],
                    value=[f.value for f in session.selectors.enabled_fields()],
                    labelStyle={"display": "block"},
                ),
                html.H4("Filters", style={**_SECTION_TITLE, "marginTop": "16px"}),
                dcc.DatePickerRange(
                    id="date-filter",
                    start_date=r.start.isoformat(),
                    end_date=r.end.isoformat(),
                    display_format="YYYY-MM-DD",
                    minimum_nights=0,
                ),
            ],
        ),
        # ── Main area ──
        html.Div(
            className="main-area",
            style={"flex": "1", "display": "flex", "flexDirection": "column"},
            children=[
                html.Div(
                    style={
                        "display": "flex",
                        "justifyContent": "space-between",
                        "padding": "0 20px",
                    },
                    children=[
                        html.H2(id="log-count", children=session.status_text()),
                        html.Button("Eject File", id="eject-btn", className="btn-danger"),
                    ],
                ),
                dcc.Graph(
                    id="log-graph",
                    config={
                        "scrollZoom": True,
                        "displayModeBar": True,
                        "modeBarButtonsToAdd": ["lasso2d", "select2d"],
                    },
                    style={"height": "90vh", "width": "100%"},
                ),
            ],
        ),
        # ── Right sidebar ──
        html.Div(
            id="selected-panel",
            className="right-sidebar",
            style={**_sidebar_style(), "overflowY": "auto"},
            children=build_detail_panel(session.detail_view()),
        ),
    ]


def build_detail_panel(view: DetailView) -> list:
    """Render a :class:`DetailView` as the right sidebar content."""
    children: list = [html.H4(f"Selected: {view.count}", style=_SECTION_TITLE)]
    if view.placeholder:
        children.append(html.P("Selecting..."))
        return children

    for entry in view.entries:
        children.append(
            html.Div(
                key=entry.id,
                className="selected-entry",
                style={"fontSize": "12px", "marginBottom": "16px", "wordBreak": "break-all"},
                children=[
                    html.Div([
                        html.P(f"{name}:", style={"color": theme.RED, "margin": 0}),
                        html.P(text, style={"margin": 0}),
                    ])
                    for name, text in entry.fields
                ],
            )
        )
    return children


def _sidebar_style() -> dict:
    return {
        "width": theme.SIDEBAR_WIDTH,
        "minWidth": "100px",
        "height": "100vh",
        "padding": "8px",
        "backgroundColor": theme.BASE2,
        "fontFamily": theme.FONT_STACK,
        "color": theme.BASE00,
    }
