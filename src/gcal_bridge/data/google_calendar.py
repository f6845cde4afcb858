from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List

from google.auth.exceptions import GoogleAuthError
from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from ..errors import ExternalServiceError

logger = logging.getLogger(__name__)


@dataclass
class GoogleCalendarGateway:
    """Thin wrapper around the Calendar v3 ``events`` resource."""

    calendar_id: str = "primary"

    def _events(self, credentials: Credentials):
        service = build("calendar", "v3", credentials=credentials, cache_discovery=False)
        return service.events()

    def _execute(self, operation: str, request) -> Any:
        try:
            return request.execute()
        except HttpError as exc:
            logger.warning("Google Calendar %s failed with HTTP %s", operation, exc.resp.status)
            raise ExternalServiceError(f"Google Calendar {operation} failed: {exc}") from exc
        except (GoogleAuthError, OSError) as exc:
            logger.warning("Google Calendar %s failed: %s", operation, exc)
            raise ExternalServiceError(f"Google Calendar {operation} failed: {exc}") from exc

    def list(self, credentials: Credentials, *, time_min: str, max_results: int) -> List[Dict[str, Any]]:
        request = self._events(credentials).list(
            calendarId=self.calendar_id,
            timeMin=time_min,
            maxResults=max_results,
            singleEvents=True,
            orderBy="startTime",
        )
        response = self._execute("list", request)
        return list(response.get("items") or [])

    def insert(self, credentials: Credentials, body: Dict[str, Any]) -> Dict[str, Any]:
        request = self._events(credentials).insert(calendarId=self.calendar_id, body=body)
        return self._execute("insert", request)

    def patch(self, credentials: Credentials, event_id: str, body: Dict[str, Any]) -> Dict[str, Any]:
        request = self._events(credentials).patch(calendarId=self.calendar_id, eventId=event_id, body=body)
        return self._execute("patch", request)

    def delete(self, credentials: Credentials, event_id: str) -> None:
        request = self._events(credentials).delete(calendarId=self.calendar_id, eventId=event_id)
        self._execute("delete", request)
