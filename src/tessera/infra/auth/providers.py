"""Built-in login factories.

Each constant is registered through the ``tessera.login_factories`` entry
point group (see pyproject.toml) and picked up by ``build_default_registry``.

Claim types:
- Google tokens arrive either with raw OIDC claim names or, when passed
  through a WS-Federation style claim mapper, with the xmlsoap URIs. Both
  spellings are recognized.
- Active Directory and local OS identities use the xmlsoap/microsoft URIs.
  Their names are normalized (``DOMAIN\\user`` -> ``user``).
"""

from __future__ import annotations

from tessera.foundation.application.factory import LoginFactory, RequiredField, parse_bool
from tessera.foundation.domain.identity import normalize_identity
from tessera.foundation.domain.login import DEFAULT_ISSUER, ProviderKind

_XMLSOAP = "http://schemas.xmlsoap.org/ws/2005/05/identity/claims"

CLAIM_TYPE_NAME_IDENTIFIER = f"{_XMLSOAP}/nameidentifier"
CLAIM_TYPE_NAME = f"{_XMLSOAP}/name"
CLAIM_TYPE_EMAIL = f"{_XMLSOAP}/emailaddress"
CLAIM_TYPE_GIVEN_NAME = f"{_XMLSOAP}/givenname"
CLAIM_TYPE_SURNAME = f"{_XMLSOAP}/surname"
CLAIM_TYPE_PRIMARY_SID = "http://schemas.microsoft.com/ws/2008/06/identity/claims/primarysid"

GOOGLE_ISSUER = "https://accounts.google.com"
ACTIVE_DIRECTORY_ISSUER = "AD AUTHORITY"
WINDOWS_ISSUER = DEFAULT_ISSUER

GOOGLE = LoginFactory(
    provider=ProviderKind.GOOGLE,
    issuer=GOOGLE_ISSUER,
    claim_map={
        "sub": "subject",
        CLAIM_TYPE_NAME_IDENTIFIER: "subject",
        "name": "name",
        "email": "email",
        CLAIM_TYPE_EMAIL: "email",
        "email_verified": "email_verified",
        "picture": "picture",
        "given_name": "given_name",
        CLAIM_TYPE_GIVEN_NAME: "given_name",
        "family_name": "surname",
        CLAIM_TYPE_SURNAME: "surname",
    },
    required=(
        RequiredField(
            "subject",
            "sub",
            "Make sure the openid scope is included in the authentication request.",
        ),
        RequiredField(
            "name",
            "name",
            "Make sure the profile scope is included in the authentication request.",
        ),
        RequiredField(
            "email",
            "email",
            "Make sure the email scope is included in the authentication request.",
        ),
    ),
    converters={"email_verified": parse_bool},
    defaults={"email_verified": False},
)


def _normalize_name(value: str) -> str:
    # Empty stays empty so the required name check still fails.
    return normalize_identity(value) if value else value


_DIRECTORY_CLAIM_MAP = {
    CLAIM_TYPE_PRIMARY_SID: "subject",
    CLAIM_TYPE_NAME: "name",
}
_DIRECTORY_REQUIRED = (
    RequiredField("subject", "primarysid"),
    RequiredField("name", "name"),
)

ACTIVE_DIRECTORY = LoginFactory(
    provider=ProviderKind.ACTIVE_DIRECTORY,
    issuer=ACTIVE_DIRECTORY_ISSUER,
    claim_map=_DIRECTORY_CLAIM_MAP,
    required=_DIRECTORY_REQUIRED,
    converters={"name": _normalize_name},
)

WINDOWS = LoginFactory(
    provider=ProviderKind.WINDOWS,
    issuer=WINDOWS_ISSUER,
    claim_map=_DIRECTORY_CLAIM_MAP,
    required=_DIRECTORY_REQUIRED,
    converters={"name": _normalize_name},
)
