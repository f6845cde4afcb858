from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Protocol

import orjson
from google.oauth2.credentials import Credentials

from ..config import CREDENTIAL_STORES
from ..core import CREDENTIALS_FILE
from ..errors import ConfigurationError

logger = logging.getLogger(__name__)


class CredentialStore(Protocol):
    """Holds the single OAuth credential shared by every front-end."""

    def get(self) -> Optional[Credentials]: ...

    def set(self, credentials: Credentials) -> None: ...

    def clear(self) -> None: ...


@dataclass
class InMemoryCredentialStore:
    """Process-local slot; the credential is lost on restart."""

    _credentials: Optional[Credentials] = None

    def get(self) -> Optional[Credentials]:
        return self._credentials

    def set(self, credentials: Credentials) -> None:
        self._credentials = credentials

    def clear(self) -> None:
        self._credentials = None


@dataclass
class FileCredentialStore:
    """Credential slot mirrored to an authorized-user JSON file."""

    path: Path = CREDENTIALS_FILE
    scopes: Optional[list[str]] = None
    _credentials: Optional[Credentials] = field(default=None, init=False)
    _loaded: bool = field(default=False, init=False)

    def get(self) -> Optional[Credentials]:
        if not self._loaded:
            self._credentials = self._load()
            self._loaded = True
        return self._credentials

    def set(self, credentials: Credentials) -> None:
        self._credentials = credentials
        self._loaded = True
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = orjson.loads(credentials.to_json())
        self.path.write_bytes(orjson.dumps(payload, option=orjson.OPT_INDENT_2))
        # Holds a refresh token: owner read/write only.
        self.path.chmod(0o600)
        logger.debug("Credential written to %s", self.path)

    def clear(self) -> None:
        self._credentials = None
        self._loaded = True
        if self.path.exists():
            self.path.unlink()

    def _load(self) -> Optional[Credentials]:
        if not self.path.exists():
            return None
        try:
            info = orjson.loads(self.path.read_bytes() or b"{}")
            return Credentials.from_authorized_user_info(info, scopes=self.scopes)
        except (orjson.JSONDecodeError, ValueError) as exc:
            logger.warning("Ignoring unreadable credential file %s: %s", self.path, exc)
            return None


def build_credential_store(kind: str, *, scopes: Optional[list[str]] = None) -> CredentialStore:
    if kind == "memory":
        return InMemoryCredentialStore()
    if kind == "file":
        return FileCredentialStore(scopes=scopes)
    raise ConfigurationError(f"Unknown credential store '{kind}'. Expected one of: {', '.join(CREDENTIAL_STORES)}.")
