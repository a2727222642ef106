"""Request-scoped claims context.

Provides a ContextVar holding the claims of the principal authenticated for
the current request. The HTTP layer (``ClaimsContextMiddleware``) sets it;
resolvers and the legacy current-user lookup read it. Each request runs in
its own context, so concurrent requests never see each other's claims.

Usage:
    from tessera.foundation.application.context import get_current_claims

    claims = get_current_claims()  # empty tuple when unauthenticated
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable
    from contextvars import Token

    from tessera.foundation.domain.login import Claim

_claims_context: ContextVar[tuple[Claim, ...]] = ContextVar("claims_context", default=())


def set_claims_context(claims: Iterable[Claim]) -> Token[tuple[Claim, ...]]:
    """Set the claims of the authenticated principal for the current request.

    Args:
        claims: Ordered claims, all from one issuer.

    Returns:
        Token for resetting the context.
    """
    return _claims_context.set(tuple(claims))


def clear_claims_context(token: Token[tuple[Claim, ...]]) -> None:
    """Reset the claims context using the provided token.

    Called in middleware finally block after request completes.

    Args:
        token: Token from set_claims_context.
    """
    _claims_context.reset(token)


def get_current_claims() -> tuple[Claim, ...]:
    """Get the claims of the current principal, or an empty tuple."""
    return _claims_context.get()
