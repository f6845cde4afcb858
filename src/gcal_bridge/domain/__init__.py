"""Domain models for calendar events and chat intents."""

from __future__ import annotations

from .enums import Intent
from .models import CalendarEvent, EventDraft, parse_boundary

__all__ = ["CalendarEvent", "EventDraft", "Intent", "parse_boundary"]
