"""HTTP front-end for the calendar bridge."""

from .server import app, create_app, run_local_server, serve_http

__all__ = [
    "app",
    "create_app",
    "run_local_server",
    "serve_http",
]
