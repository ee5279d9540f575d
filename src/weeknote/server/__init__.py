"""HTTP API for the daily log parser."""

from .app import app, create_app

__all__ = ["app", "create_app"]
