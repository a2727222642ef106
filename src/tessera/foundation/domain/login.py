"""Canonical login record and the claims it is built from.

Pure domain objects with no external dependencies. A ``Login`` is the
provider-agnostic view of an authenticated principal; a ``Claim`` is one
issuer-scoped (type, value) assertion about that principal.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

DEFAULT_ISSUER = "LOCAL AUTHORITY"


class ProviderKind(StrEnum):
    """Identity provider that produced a login."""

    GOOGLE = "Google"
    ACTIVE_DIRECTORY = "ActiveDirectory"
    WINDOWS = "Windows"
    HTTP_CONTEXT = "httpcontext"


@dataclass(frozen=True, slots=True)
class Claim:
    """A single assertion about an authenticated principal.

    Attributes:
        type: Claim type, either a short OIDC name (``"sub"``) or a URI.
        value: Claim value, always a string.
        issuer: Authority that issued the claim.
    """

    type: str
    value: str
    issuer: str = DEFAULT_ISSUER


@dataclass(frozen=True, slots=True)
class Login:
    """Normalized, provider-agnostic authenticated principal.

    Profile fields are ``None`` when the provider does not supply them.

    Attributes:
        provider: Provider tag, fixed by the factory that built the login.
        subject: Stable unique identifier within the provider. Never empty.
        name: Display or login name.
        given_name: First name (federated providers only).
        surname: Last name (federated providers only).
        email: Email address (federated providers only).
        email_verified: Whether the provider verified the email.
        picture: Profile picture URL.

    Raises:
        ValueError: If subject is empty.
    """

    provider: ProviderKind
    subject: str
    name: str | None = None
    given_name: str | None = None
    surname: str | None = None
    email: str | None = None
    email_verified: bool | None = None
    picture: str | None = None

    def __post_init__(self) -> None:
        if not self.subject:
            msg = f"{self.provider} login subject cannot be empty"
            raise ValueError(msg)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase shape returned by HTTP endpoints."""
        return {
            "provider": str(self.provider),
            "subject": self.subject,
            "name": self.name,
            "givenName": self.given_name,
            "surname": self.surname,
            "email": self.email,
            "emailVerified": self.email_verified,
            "picture": self.picture,
        }
