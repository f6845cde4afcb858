"""
Pytest fixtures for gcal-bridge tests.
Google Calendar and the language model are replaced by in-process fakes.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient
from google.oauth2.credentials import Credentials

from gcal_bridge.api import ApiState, get_api_state
from gcal_bridge.config import AppSettings, GoogleSettings, LlmSettings, ServerSettings
from gcal_bridge.data import InMemoryCredentialStore
from gcal_bridge.domain import EventDraft, Intent, parse_boundary
from gcal_bridge.errors import ExternalServiceError
from gcal_bridge.services import ServiceContext

NOW = datetime(2026, 3, 2, 9, 0, tzinfo=timezone.utc)


def make_settings(**server_overrides: Any) -> AppSettings:
    server = {
        "host": "127.0.0.1",
        "port": 4153,
        "public_url": "http://localhost:4153",
        "open_browser": False,
        "credential_store": "memory",
        "log_level": "DEBUG",
    }
    server.update(server_overrides)
    return AppSettings(
        google=GoogleSettings(
            client_id="client-id.apps.googleusercontent.com",
            client_secret="client-secret",
            scope="https://www.googleapis.com/auth/calendar",
            calendar_id="primary",
            timezone="UTC",
            default_max_results=5,
        ),
        llm=LlmSettings(api_key="sk-test", model="gpt-test", base_url=None),
        server=ServerSettings(**server),
    )


class FakeCalendarGateway:
    """In-memory stand-in for the Calendar v3 events resource."""

    def __init__(self) -> None:
        self.events: Dict[str, Dict[str, Any]] = {}
        self.calls: List[tuple] = []
        self._next_id = 1

    def add(self, summary: str, start: str, end: Optional[str] = None) -> Dict[str, Any]:
        record = {
            "id": f"evt{self._next_id}",
            "summary": summary,
            "start": {"dateTime": start},
            "end": {"dateTime": end or start},
            "status": "confirmed",
        }
        self._next_id += 1
        self.events[record["id"]] = record
        return record

    def list(self, credentials, *, time_min: str, max_results: int) -> List[Dict[str, Any]]:
        self.calls.append(("list", time_min, max_results))
        floor = parse_boundary(time_min)
        upcoming = [
            record
            for record in self.events.values()
            if parse_boundary(record["start"]["dateTime"]) >= floor
        ]
        upcoming.sort(key=lambda record: parse_boundary(record["start"]["dateTime"]))
        return upcoming[:max_results]

    def insert(self, credentials, body: Dict[str, Any]) -> Dict[str, Any]:
        self.calls.append(("insert", body))
        record = {"id": f"evt{self._next_id}", "status": "confirmed", **body}
        self._next_id += 1
        self.events[record["id"]] = record
        return record

    def patch(self, credentials, event_id: str, body: Dict[str, Any]) -> Dict[str, Any]:
        self.calls.append(("patch", event_id, body))
        if event_id not in self.events:
            raise ExternalServiceError(f"Google Calendar patch failed: {event_id} not found")
        self.events[event_id].update(body)
        return self.events[event_id]

    def delete(self, credentials, event_id: str) -> None:
        self.calls.append(("delete", event_id))
        if event_id not in self.events:
            raise ExternalServiceError(f"Google Calendar delete failed: {event_id} not found")
        del self.events[event_id]


class FakeClassifier:
    """Returns canned answers and records every message it sees."""

    def __init__(self, intent: Intent = Intent.CHAT, *, draft: Optional[EventDraft] = None, reply: str = "Hello!"):
        self.intent = intent
        self.draft = draft
        self.reply = reply
        self.seen: List[tuple] = []

    def classify(self, message: str) -> Intent:
        self.seen.append(("classify", message))
        return self.intent

    def extract_event(self, message: str) -> Optional[EventDraft]:
        self.seen.append(("extract_event", message))
        return self.draft

    def converse(self, message: str) -> str:
        self.seen.append(("converse", message))
        return self.reply


@pytest.fixture
def settings() -> AppSettings:
    return make_settings()


@pytest.fixture
def gateway() -> FakeCalendarGateway:
    return FakeCalendarGateway()


@pytest.fixture
def credential_store() -> InMemoryCredentialStore:
    return InMemoryCredentialStore()


@pytest.fixture
def context(settings, gateway, credential_store) -> ServiceContext:
    return ServiceContext(settings=settings, credentials=credential_store, gateway=gateway)


@pytest.fixture
def classifier() -> FakeClassifier:
    return FakeClassifier()


@pytest.fixture
def state(context, classifier) -> ApiState:
    api_state = ApiState(context=context, classifier=classifier)
    api_state.calendar.clock = lambda: NOW
    return api_state


@pytest.fixture
def signed_in(state, credential_store) -> ApiState:
    """State whose credential slot already holds a token."""
    credential_store.set(Credentials(token="test-token"))
    return state


@pytest.fixture
def client(state):
    """FastAPI TestClient with the shared state dependency overridden."""
    from gcal_bridge.services.http import app

    app.dependency_overrides[get_api_state] = lambda: state
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def fresh_settings():
    """Re-read the environment for get_settings() inside the test only."""
    from gcal_bridge.config import get_settings

    get_settings.cache_clear()
    yield get_settings
    get_settings.cache_clear()
