"""Google Calendar bridge: chat UI, JSON API and MCP tool server."""

from __future__ import annotations

__version__ = "1.0.0"
