"""Shared service state consumed by the HTTP and MCP front-ends."""

from __future__ import annotations

from .state import ApiState, get_api_state

__all__ = ["ApiState", "get_api_state"]
