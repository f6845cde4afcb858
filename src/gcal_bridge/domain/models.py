from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional


def _boundary(value: Optional[Dict[str, Any]]) -> str:
    """Return the RFC3339 ``dateTime`` of an event boundary, or its all-day ``date``."""

    if not value:
        return ""
    return str(value.get("dateTime") or value.get("date") or "")


def parse_boundary(value: str) -> datetime:
    """Parse an event boundary string into an aware datetime (UTC for all-day dates)."""

    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass(slots=True)
class CalendarEvent:
    id: str
    summary: str
    start: str
    end: str = ""
    status: Optional[str] = None
    html_link: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "CalendarEvent":
        return cls(
            id=str(record["id"]),
            summary=str(record.get("summary") or ""),
            start=_boundary(record.get("start")),
            end=_boundary(record.get("end")),
            status=record.get("status"),
            html_link=record.get("htmlLink"),
            description=record.get("description"),
            location=record.get("location"),
        )

    @property
    def starts_at(self) -> Optional[datetime]:
        if not self.start:
            return None
        return parse_boundary(self.start)

    def to_text(self) -> str:
        return f"{self.summary or '(no title)'} - {self.start}"


@dataclass(frozen=True)
class EventDraft:
    """Event fields pulled out of a chat message before creation."""

    summary: str
    start: str
    end: str

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> Optional["EventDraft"]:
        summary = str(payload.get("summary") or "").strip()
        start = str(payload.get("start") or "").strip()
        end = str(payload.get("end") or "").strip()
        if not (summary and start and end):
            return None
        return cls(summary=summary, start=start, end=end)
