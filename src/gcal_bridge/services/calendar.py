from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from google.oauth2.credentials import Credentials

from ..domain import CalendarEvent
from ..errors import BadRequestError, NotAuthenticatedError
from .context import ServiceContext

logger = logging.getLogger(__name__)

DELETE_CONFIRMATION = "Event deleted."


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True)
class CalendarService:
    context: ServiceContext
    clock: Callable[[], datetime] = field(default=_utcnow)

    # ------------------------------------------------------------------ helpers

    def _credentials(self) -> Credentials:
        credentials = self.context.credentials.get()
        if credentials is None:
            raise NotAuthenticatedError(f"Not authenticated. Visit {self.context.settings.server.auth_url}")
        return credentials

    def _zone(self) -> ZoneInfo:
        name = self.context.settings.google.timezone
        try:
            return ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise BadRequestError(f"Unknown timezone '{name}'") from exc

    def _parse_timestamp(self, value: str, *, field_name: str) -> datetime:
        if not value or not value.strip():
            raise BadRequestError(f"{field_name} is required")
        try:
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError as exc:  # noqa: TRY003
            raise BadRequestError(f"Invalid {field_name} timestamp: {value}") from exc
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=self._zone())
        return parsed

    def _boundary(self, moment: datetime) -> Dict[str, Any]:
        return {"dateTime": moment.isoformat(), "timeZone": self.context.settings.google.timezone}

    # ------------------------------------------------------------------ operations

    def list_events(self, max_results: Optional[int] = None) -> list[CalendarEvent]:
        """Upcoming single-occurrence events, soonest first."""

        credentials = self._credentials()
        limit = self.context.settings.google.default_max_results if max_results is None else max_results
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise BadRequestError("maxResults must be a positive integer")
        records = self.context.gateway.list(
            credentials,
            time_min=self.clock().isoformat(),
            max_results=limit,
        )
        events = [CalendarEvent.from_record(record) for record in records]
        logger.debug("Listed %d events (limit %d)", len(events), limit)
        return events[:limit]

    def create_event(self, summary: str, start: str, end: str) -> CalendarEvent:
        credentials = self._credentials()
        if not summary or not summary.strip():
            raise BadRequestError("summary is required")
        starts_at = self._parse_timestamp(start, field_name="start")
        ends_at = self._parse_timestamp(end, field_name="end")
        if ends_at < starts_at:
            raise BadRequestError("end must not be before start")
        body = {
            "summary": summary.strip(),
            "start": self._boundary(starts_at),
            "end": self._boundary(ends_at),
        }
        created = CalendarEvent.from_record(self.context.gateway.insert(credentials, body))
        logger.info("Created event %s", created.id)
        return created

    def update_event(
        self,
        event_id: str,
        *,
        summary: Optional[str] = None,
        start: Optional[str] = None,
        end: Optional[str] = None,
    ) -> CalendarEvent:
        credentials = self._credentials()
        if not event_id:
            raise BadRequestError("eventId is required")
        body: Dict[str, Any] = {}
        if summary is not None:
            if not summary.strip():
                raise BadRequestError("summary must not be blank")
            body["summary"] = summary.strip()
        starts_at = self._parse_timestamp(start, field_name="start") if start is not None else None
        ends_at = self._parse_timestamp(end, field_name="end") if end is not None else None
        if starts_at and ends_at and ends_at < starts_at:
            raise BadRequestError("end must not be before start")
        if starts_at:
            body["start"] = self._boundary(starts_at)
        if ends_at:
            body["end"] = self._boundary(ends_at)
        updated = CalendarEvent.from_record(self.context.gateway.patch(credentials, event_id, body))
        logger.info("Updated event %s (%s)", event_id, ", ".join(sorted(body)) or "no changes")
        return updated

    def delete_event(self, event_id: str) -> str:
        credentials = self._credentials()
        if not event_id:
            raise BadRequestError("eventId is required")
        self.context.gateway.delete(credentials, event_id)
        logger.info("Deleted event %s", event_id)
        return DELETE_CONFIRMATION
