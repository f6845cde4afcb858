"""Tests for environment-driven settings."""

import pytest

from gcal_bridge.config import DEFAULT_SCOPE
from gcal_bridge.errors import ConfigurationError


def test_defaults(fresh_settings, monkeypatch):
    for name in ("GCAL_PORT", "GCAL_PUBLIC_URL", "GCAL_SCOPE", "GCAL_CREDENTIAL_STORE", "GCAL_DEFAULT_MAX_RESULTS"):
        monkeypatch.delenv(name, raising=False)

    settings = fresh_settings()

    assert settings.server.port == 4153
    assert settings.server.redirect_uri == "http://localhost:4153/oauth2callback"
    assert settings.server.credential_store == "memory"
    assert settings.google.scope == DEFAULT_SCOPE
    assert settings.google.default_max_results == 5


def test_public_url_drives_oauth_urls(fresh_settings, monkeypatch):
    monkeypatch.setenv("GCAL_PUBLIC_URL", "https://cal.example.com/")

    settings = fresh_settings()

    assert settings.server.auth_url == "https://cal.example.com/auth"
    assert settings.server.redirect_uri == "https://cal.example.com/oauth2callback"


def test_credential_store_is_normalised(fresh_settings, monkeypatch):
    monkeypatch.setenv("GCAL_CREDENTIAL_STORE", " File ")
    assert fresh_settings().server.credential_store == "file"


def test_unknown_credential_store_fails_at_load(fresh_settings, monkeypatch):
    """A typo in the store kind is reported when settings load, not on the first request."""
    monkeypatch.setenv("GCAL_CREDENTIAL_STORE", "redis")

    with pytest.raises(ConfigurationError) as excinfo:
        fresh_settings()
    assert "GCAL_CREDENTIAL_STORE" in str(excinfo.value)
