"""Dash front end for the log explorer."""

from .app import create_app

__all__ = ["create_app"]
