"""Data access layer."""

from __future__ import annotations

from .credentials import (
    CredentialStore,
    FileCredentialStore,
    InMemoryCredentialStore,
    build_credential_store,
)
from .google_calendar import GoogleCalendarGateway

__all__ = [
    "CredentialStore",
    "FileCredentialStore",
    "GoogleCalendarGateway",
    "InMemoryCredentialStore",
    "build_credential_store",
]
