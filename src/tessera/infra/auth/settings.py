"""Login resolution configuration settings.

Loaded from environment variables with AUTH_ prefix.
Follows Pydantic BaseSettings pattern for type-safe configuration.

Environment Variables:
    AUTH_GOOGLE_ISSUER: Issuer string of Google tokens
    AUTH_ACTIVE_DIRECTORY_ISSUER: Issuer string of on-premise AD tokens
    AUTH_WINDOWS_ISSUER: Issuer string of local OS identity claims
    AUTH_EXCLUDED_PROVIDERS: Comma-separated entry point names to skip
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from tessera.foundation.domain.login import ProviderKind
from tessera.infra.auth.providers import (
    ACTIVE_DIRECTORY_ISSUER,
    GOOGLE_ISSUER,
    WINDOWS_ISSUER,
)


class AuthSettings(BaseSettings):
    """Login resolution configuration loaded from environment variables.

    Example:
        >>> settings = AuthSettings()
        >>> settings.google_issuer
        'https://accounts.google.com'
        >>> settings.issuer_for(ProviderKind.ACTIVE_DIRECTORY)
        'AD AUTHORITY'
    """

    model_config = SettingsConfigDict(
        env_prefix="AUTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    google_issuer: str = Field(
        default=GOOGLE_ISSUER,
        min_length=1,
        description="Issuer string of Google OIDC tokens",
    )
    active_directory_issuer: str = Field(
        default=ACTIVE_DIRECTORY_ISSUER,
        min_length=1,
        description="Issuer string of on-premise Active Directory tokens",
    )
    windows_issuer: str = Field(
        default=WINDOWS_ISSUER,
        min_length=1,
        description="Issuer string of local OS identity claims",
    )
    excluded_providers: Annotated[frozenset[str], NoDecode] = Field(
        default=frozenset(),
        description="Login factory entry point names to skip at startup",
    )

    @field_validator("excluded_providers", mode="before")
    @classmethod
    def split_excluded_providers(cls, v: Any) -> Any:
        """Accept a comma-separated string from the environment."""
        if isinstance(v, str):
            return frozenset(name.strip() for name in v.split(",") if name.strip())
        return v

    def issuer_for(self, provider: ProviderKind) -> str | None:
        """Return the configured issuer for a claims-based provider.

        Returns:
            The issuer, or None for providers that are not claims-based.
        """
        issuers = {
            ProviderKind.GOOGLE: self.google_issuer,
            ProviderKind.ACTIVE_DIRECTORY: self.active_directory_issuer,
            ProviderKind.WINDOWS: self.windows_issuer,
        }
        return issuers.get(provider)


@lru_cache(maxsize=1)
def get_auth_settings() -> AuthSettings:
    """Get singleton AuthSettings instance.

    Cached for performance - settings are loaded once per application lifecycle.
    Clear cache with ``get_auth_settings.cache_clear()`` for testing.

    Returns:
        AuthSettings instance with configuration from environment.
    """
    return AuthSettings()
