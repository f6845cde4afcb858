from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

from ..errors import ConfigurationError

load_dotenv()

DEFAULT_SCOPE = "https://www.googleapis.com/auth/calendar"
CREDENTIAL_STORES = ("memory", "file")


@dataclass(frozen=True)
class GoogleSettings:
    client_id: Optional[str]
    client_secret: Optional[str]
    scope: str
    calendar_id: str
    timezone: str
    default_max_results: int

    @property
    def is_configured(self) -> bool:
        return bool(self.client_id and self.client_secret)

    @property
    def missing_env_vars(self) -> list[str]:
        missing = []
        if not self.client_id:
            missing.append("GOOGLE_CLIENT_ID")
        if not self.client_secret:
            missing.append("GOOGLE_CLIENT_SECRET")
        return missing


@dataclass(frozen=True)
class LlmSettings:
    api_key: Optional[str]
    model: str
    base_url: Optional[str]

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key and self.model)

    @property
    def missing_env_vars(self) -> list[str]:
        missing = []
        if not self.api_key:
            missing.append("OPENAI_API_KEY")
        if not self.model:
            missing.append("OPENAI_MODEL")
        return missing


@dataclass(frozen=True)
class ServerSettings:
    host: str
    port: int
    public_url: str
    open_browser: bool
    credential_store: str
    log_level: str

    @property
    def redirect_uri(self) -> str:
        return f"{self.public_url}/oauth2callback"

    @property
    def auth_url(self) -> str:
        return f"{self.public_url}/auth"


@dataclass(frozen=True)
class AppSettings:
    google: GoogleSettings
    llm: LlmSettings
    server: ServerSettings


def _bool_from_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    port = _int_from_env("GCAL_PORT", 4153)
    credential_store = os.getenv("GCAL_CREDENTIAL_STORE", "memory").strip().lower()
    if credential_store not in CREDENTIAL_STORES:
        raise ConfigurationError(
            f"GCAL_CREDENTIAL_STORE must be one of {', '.join(CREDENTIAL_STORES)}; got '{credential_store}'"
        )

    google = GoogleSettings(
        client_id=os.getenv("GOOGLE_CLIENT_ID"),
        client_secret=os.getenv("GOOGLE_CLIENT_SECRET"),
        scope=os.getenv("GCAL_SCOPE", DEFAULT_SCOPE),
        calendar_id=os.getenv("GCAL_CALENDAR_ID", "primary"),
        timezone=os.getenv("GCAL_TIMEZONE", "UTC"),
        default_max_results=_int_from_env("GCAL_DEFAULT_MAX_RESULTS", 5),
    )

    llm = LlmSettings(
        api_key=os.getenv("OPENAI_API_KEY"),
        model=os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
        base_url=os.getenv("OPENAI_BASE_URL"),
    )

    server = ServerSettings(
        host=os.getenv("GCAL_HOST", "127.0.0.1"),
        port=port,
        public_url=os.getenv("GCAL_PUBLIC_URL", f"http://localhost:{port}").rstrip("/"),
        open_browser=_bool_from_env("GCAL_OPEN_BROWSER", True),
        credential_store=credential_store,
        log_level=os.getenv("GCAL_LOG_LEVEL", "INFO").upper(),
    )

    return AppSettings(google=google, llm=llm, server=server)
