from __future__ import annotations

import logging
import webbrowser
from dataclasses import dataclass
from typing import Optional

from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import Flow

from ..errors import BadRequestError, ConfigurationError, ExternalServiceError
from .context import ServiceContext

logger = logging.getLogger(__name__)

AUTH_URI = "https://accounts.google.com/o/oauth2/auth"
TOKEN_URI = "https://oauth2.googleapis.com/token"


@dataclass(slots=True)
class OAuthService:
    """Two-step redirect flow: build the consent URL, then trade the code for tokens."""

    context: ServiceContext

    def _flow(self) -> Flow:
        google = self.context.settings.google
        if not google.is_configured:
            missing = ", ".join(google.missing_env_vars)
            raise ConfigurationError(f"Google OAuth client is not configured. Missing: {missing}")
        redirect_uri = self.context.settings.server.redirect_uri
        return Flow.from_client_config(
            {
                "web": {
                    "client_id": google.client_id,
                    "client_secret": google.client_secret,
                    "auth_uri": AUTH_URI,
                    "token_uri": TOKEN_URI,
                    "redirect_uris": [redirect_uri],
                }
            },
            scopes=[google.scope],
            redirect_uri=redirect_uri,
            autogenerate_code_verifier=False,
        )

    def authorization_url(self) -> str:
        url, _state = self._flow().authorization_url(access_type="offline")
        return url

    def start(self) -> str:
        url = self.authorization_url()
        logger.info("Starting OAuth flow")
        logger.debug("Generated OAuth URL: %s", url)
        if self.context.settings.server.open_browser:
            webbrowser.open(url, new=1, autoraise=True)
        return url

    def exchange_code(self, code: Optional[str]) -> Credentials:
        if not code:
            raise BadRequestError("No authorization code received")
        flow = self._flow()
        logger.info("Received authorization code, exchanging for tokens")
        try:
            flow.fetch_token(code=code)
        except Exception as exc:  # noqa: BLE001
            logger.exception("OAuth token exchange failed")
            raise ExternalServiceError(f"Authentication failed: {exc}") from exc
        credentials = flow.credentials
        self.context.credentials.set(credentials)
        logger.info("Tokens received successfully")
        return credentials

    def is_authenticated(self) -> bool:
        return self.context.credentials.get() is not None

    def sign_out(self) -> None:
        self.context.credentials.clear()
        logger.info("Stored credential cleared")
