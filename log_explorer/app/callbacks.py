"""All Dash callbacks for the log explorer app.

Each callback is one event for the server-side :class:`ExplorerSession`.
The ``handle_*`` functions do the work against an explicit session; the
callbacks registered in :func:`register` only look up the app's session
and delegate.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dash import Input, Output, State, no_update
from dash.exceptions import PreventUpdate

from ..errors import LogLoadError
from ..filtering import FilterRange
from ..io import decode_upload
from ..models import FIELD_ORDER
from .figures import build_main_figure
from .layout import build_detail_panel, page_style

if TYPE_CHECKING:
    from ..session import ExplorerSession

logger = logging.getLogger(__name__)


def selected_points(selected_data: dict) -> tuple[set, list]:
    """Split a ``selectedData`` payload into view revisions and indices.

    Points without a ``[revision, index]`` customdata pair are skipped.
    """
    revisions, indices = set(), []
    for p in selected_data.get("points", []):
        data = p.get("customdata")
        if isinstance(data, (list, tuple)) and len(data) == 2:
            revisions.add(data[0])
            indices.append(data[1])
    return revisions, indices


# ---------------------------------------------------------------------- #
#  Event handlers
# ---------------------------------------------------------------------- #

def handle_upload(session: ExplorerSession, contents, filename, revision):
    if not contents:
        raise PreventUpdate

    try:
        session.load_document(decode_upload(contents))
    except LogLoadError as exc:
        logger.warning("Rejected upload %s: %s", filename, exc)
        return no_update, f"Could not load {filename or 'file'}: {exc}"

    return (revision or 0) + 1, ""


def handle_eject(session: ExplorerSession, n_clicks, revision):
    if not n_clicks:
        raise PreventUpdate

    session.clear_collection()
    # Reset the upload so the same file can be loaded again
    return (revision or 0) + 1, None


def handle_filter(session: ExplorerSession, start_date, end_date, revision):
    if not start_date or not end_date:
        raise PreventUpdate

    try:
        date_range = FilterRange.from_strings(start_date[:10], end_date[:10])
    except ValueError:
        raise PreventUpdate

    session.set_filter_range(date_range)
    return (revision or 0) + 1


def handle_selectors(session: ExplorerSession, selector_values):
    wanted = set(selector_values or [])
    for log_field in FIELD_ORDER:
        enabled = log_field.value in wanted
        if session.selectors.enabled(log_field) != enabled:
            session.toggle_selector(log_field, enabled)

    return (
        build_main_figure(session),
        session.status_text(),
        build_detail_panel(session.detail_view()),
    )


def handle_select(session: ExplorerSession, selected_data):
    if selected_data is None:
        session.deselect()
    else:
        revisions, indices = selected_points(selected_data)
        revision = next(iter(revisions), None)
        if len(revisions) > 1 or (revision is not None and revision != session.view_revision):
            # Drawn from a view that has since been replaced
            return no_update, no_update
        session.select(indices, revision)

    pending = session.selection.has_pending_settle
    return build_detail_panel(session.detail_view()), not pending


def handle_tick(session: ExplorerSession):
    ran = session.tick()
    pending = session.selection.has_pending_settle
    if not ran:
        return no_update, not pending
    return build_detail_panel(session.detail_view()), not pending


def register(app):
    """Register all callbacks on the Dash app instance."""

    def _session():
        from .app import session
        if session is None:
            raise PreventUpdate
        return session

    # ------------------------------------------------------------------ #
    #  Page visibility toggle
    # ------------------------------------------------------------------ #

    @app.callback(
        Output("page-upload", "style"),
        Output("page-graph", "style"),
        Input("view-revision", "data"),
    )
    def toggle_pages(_revision):
        awaiting = _session().awaiting_input
        return page_style(awaiting), page_style(not awaiting, display="flex")

    # ------------------------------------------------------------------ #
    #  Load / eject
    # ------------------------------------------------------------------ #

    @app.callback(
        Output("view-revision", "data"),
        Output("upload-error", "children"),
        Input("log-upload", "contents"),
        State("log-upload", "filename"),
        State("view-revision", "data"),
        prevent_initial_call=True,
    )
    def on_upload(contents, filename, revision):
        return handle_upload(_session(), contents, filename, revision)

    @app.callback(
        Output("view-revision", "data", allow_duplicate=True),
        Output("log-upload", "contents"),
        Input("eject-btn", "n_clicks"),
        State("view-revision", "data"),
        prevent_initial_call=True,
    )
    def on_eject(n_clicks, revision):
        return handle_eject(_session(), n_clicks, revision)

    # ------------------------------------------------------------------ #
    #  Filters
    # ------------------------------------------------------------------ #

    @app.callback(
        Output("view-revision", "data", allow_duplicate=True),
        Input("date-filter", "start_date"),
        Input("date-filter", "end_date"),
        State("view-revision", "data"),
        prevent_initial_call=True,
    )
    def on_filter(start_date, end_date, revision):
        return handle_filter(_session(), start_date, end_date, revision)

    # ------------------------------------------------------------------ #
    #  Main figure update
    # ------------------------------------------------------------------ #

    @app.callback(
        Output("log-graph", "figure"),
        Output("log-count", "children"),
        Output("selected-panel", "children"),
        Input("label-selectors", "value"),
        Input("view-revision", "data"),
    )
    def update_figure(selector_values, _revision):
        return handle_selectors(_session(), selector_values)

    # ------------------------------------------------------------------ #
    #  Box/lasso select → details
    # ------------------------------------------------------------------ #

    @app.callback(
        Output("selected-panel", "children", allow_duplicate=True),
        Output("settle-tick", "disabled"),
        Input("log-graph", "selectedData"),
        prevent_initial_call=True,
    )
    def on_select(selected_data):
        return handle_select(_session(), selected_data)

    @app.callback(
        Output("selected-panel", "children", allow_duplicate=True),
        Output("settle-tick", "disabled", allow_duplicate=True),
        Input("settle-tick", "n_intervals"),
        prevent_initial_call=True,
    )
    def on_tick(_n_intervals):
        return handle_tick(_session())
