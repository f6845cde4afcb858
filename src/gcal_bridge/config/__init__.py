"""Configuration models and helpers."""

from __future__ import annotations

from .settings import (
    CREDENTIAL_STORES,
    DEFAULT_SCOPE,
    AppSettings,
    GoogleSettings,
    LlmSettings,
    ServerSettings,
    get_settings,
)

__all__ = [
    "AppSettings",
    "CREDENTIAL_STORES",
    "DEFAULT_SCOPE",
    "GoogleSettings",
    "LlmSettings",
    "ServerSettings",
    "get_settings",
]
