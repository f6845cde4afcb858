from __future__ import annotations

from importlib import resources


def static_dir() -> str:
    """Return the directory holding the bundled chat page."""

    return str(resources.files(__name__))
