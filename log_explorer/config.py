"""Runtime settings for the explorer app."""

from __future__ import annotations

import argparse
from dataclasses import dataclass


@dataclass
class ExplorerConfig:
    """Settings shared by the session and the Dash server.

    Parameters
    ----------
    debounce_seconds : float
        Quiet window after the last selection event before it settles.
    wrap_width : int
        Maximum characters per line of a wrapped error message label.
    tick_interval_ms : int
        How often the browser polls the server to advance pending settles.
    host, port, debug
        Passed through to ``app.run``.
    log_level : str
        Root logging level configured by ``run_app.py``.
    """

    debounce_seconds: float = 0.25
    wrap_width: int = 50
    tick_interval_ms: int = 100
    host: str = "127.0.0.1"
    port: int = 8050
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "ExplorerConfig":
        return cls(
            debounce_seconds=args.debounce_ms / 1000.0,
            wrap_width=args.wrap_width,
            host=args.host,
            port=args.port,
            debug=args.debug,
            log_level=args.log_level,
        )
