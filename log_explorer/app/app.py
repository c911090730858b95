"""Dash app factory and server-side session."""

from __future__ import annotations

import logging
import os

from ..config import ExplorerConfig
from ..session import ExplorerSession

logger = logging.getLogger(__name__)

# Module-level singleton — set by create_app()
session: ExplorerSession | None = None


def create_app(
    explorer_session: ExplorerSession | None = None,
    config: ExplorerConfig | None = None,
) -> "dash.Dash":
    """Create and configure the Dash application.

    Parameters
    ----------
    explorer_session : ExplorerSession, optional
        Session to serve, possibly with a collection already loaded.  A fresh
        one awaiting upload is created when omitted.
    config : ExplorerConfig, optional
        Used only when a new session is created.

    Returns
    -------
    dash.Dash
    """
    import dash

    from .layout import build_layout
    from . import callbacks

    global session
    session = explorer_session or ExplorerSession(config)

    assets_dir = os.path.join(os.path.dirname(os.path.dirname(__file__)), "assets")

    app = dash.Dash(
        __name__,
        assets_folder=assets_dir,
        suppress_callback_exceptions=True,
        title="Log Explorer",
    )
    app.layout = build_layout(session)
    callbacks.register(app)

    logger.debug("Dash app created (awaiting input: %s)", session.awaiting_input)
    return app
