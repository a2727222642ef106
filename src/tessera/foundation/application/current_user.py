"""Legacy current-user lookup.

Predates ``LoginResolver``: returns only a display name taken from the
ambient claims context, without issuer dispatch or validation. Kept for
callers that still want a plain user name; new code should resolve a
``Login`` instead.
"""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING

from tessera.foundation.application.context import get_current_claims
from tessera.foundation.domain.identity import normalize_identity
from tessera.foundation.domain.login import ProviderKind

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tessera.foundation.domain.login import Claim

CLAIM_TYPE_IDENTITY_NAME = "http://schemas.xmlsoap.org/ws/2005/05/identity/claims/name"
CLAIM_TYPE_NAME = "name"
CLAIM_TYPE_PREFERRED_USERNAME = "preferred_username"

_IDENTITY_CLAIM_TYPES = (
    CLAIM_TYPE_IDENTITY_NAME,
    CLAIM_TYPE_NAME,
    CLAIM_TYPE_PREFERRED_USERNAME,
)


def identity_from_claims(claims: Iterable[Claim]) -> str | None:
    """Pick the raw identity name from claims.

    Tries the identity name claim first, then ``name``, then
    ``preferred_username``. Within a claim type the first non-empty value
    is used.
    """
    first: dict[str, str] = {}
    for claim in claims:
        if claim.type in _IDENTITY_CLAIM_TYPES and claim.value:
            first.setdefault(claim.type, claim.value)
    for claim_type in _IDENTITY_CLAIM_TYPES:
        if claim_type in first:
            return first[claim_type]
    return None


class CurrentUserProvider:
    """Returns the normalized name of the current request's principal.

    Deprecated: use ``LoginResolver`` with the claims context.
    """

    provider = ProviderKind.HTTP_CONTEXT

    def __init__(self) -> None:
        warnings.warn(
            "CurrentUserProvider is deprecated; resolve a Login with LoginResolver",
            DeprecationWarning,
            stacklevel=2,
        )

    def get(self) -> str:
        """Return the current user name, or ``"Anonymous"``."""
        return normalize_identity(identity_from_claims(get_current_claims()))
