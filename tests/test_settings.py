"""Tests for AuthSettings environment loading."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from tessera.foundation.domain import ProviderKind
from tessera.infra.auth.settings import AuthSettings, get_auth_settings


@pytest.mark.unit
class TestAuthSettings:
    def test_defaults(self) -> None:
        settings = AuthSettings(_env_file=None)  # type: ignore[call-arg]
        assert settings.google_issuer == "https://accounts.google.com"
        assert settings.active_directory_issuer == "AD AUTHORITY"
        assert settings.windows_issuer == "LOCAL AUTHORITY"
        assert settings.excluded_providers == frozenset()

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AUTH_ACTIVE_DIRECTORY_ISSUER", "https://sts.corp.example")
        settings = AuthSettings(_env_file=None)  # type: ignore[call-arg]
        assert settings.active_directory_issuer == "https://sts.corp.example"

    def test_excluded_providers_comma_separated(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AUTH_EXCLUDED_PROVIDERS", "windows, google ,,")
        settings = AuthSettings(_env_file=None)  # type: ignore[call-arg]
        assert settings.excluded_providers == frozenset({"windows", "google"})

    def test_excluded_providers_from_iterable(self) -> None:
        settings = AuthSettings(
            excluded_providers={"google"},
            _env_file=None,  # type: ignore[call-arg]
        )
        assert settings.excluded_providers == frozenset({"google"})

    def test_empty_issuer_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AuthSettings(google_issuer="", _env_file=None)  # type: ignore[call-arg]

    def test_issuer_for(self) -> None:
        settings = AuthSettings(windows_issuer="HOST", _env_file=None)  # type: ignore[call-arg]
        assert settings.issuer_for(ProviderKind.GOOGLE) == "https://accounts.google.com"
        assert settings.issuer_for(ProviderKind.WINDOWS) == "HOST"
        assert settings.issuer_for(ProviderKind.HTTP_CONTEXT) is None

    def test_get_auth_settings_cached(self) -> None:
        assert get_auth_settings() is get_auth_settings()
