from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..config import AppSettings, get_settings
from ..data import CredentialStore, GoogleCalendarGateway, build_credential_store


@dataclass(slots=True)
class ServiceContext:
    """Aggregate root for services to share settings, the credential slot, and the gateway."""

    settings: AppSettings = field(default_factory=get_settings)
    credentials: Optional[CredentialStore] = None
    gateway: Optional[GoogleCalendarGateway] = None

    def __post_init__(self) -> None:
        if self.credentials is None:
            self.credentials = build_credential_store(
                self.settings.server.credential_store,
                scopes=[self.settings.google.scope],
            )
        if self.gateway is None:
            self.gateway = GoogleCalendarGateway(calendar_id=self.settings.google.calendar_id)
