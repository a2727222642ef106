"""Claims context middleware.

Publishes the authenticated principal's claims for the duration of a
request so that ``get_current_claims()`` works anywhere below it.

Claims are taken from request state populated by an upstream
authentication middleware, in order of preference:
  1. ``request.state.claims``: an iterable of ``Claim`` objects.
  2. ``request.state.jwt_claims``: a decoded JWT payload dict.
A request with neither runs with an empty claims context.

Middleware position in stack (LIFO registration order):
  Request -> Auth (sets request.state) -> ClaimsContext -> Route
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware

from tessera.foundation.application.context import (
    clear_claims_context,
    set_claims_context,
)
from tessera.infra.auth.claims import claims_from_jwt

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from starlette.requests import Request
    from starlette.responses import Response

    from tessera.foundation.domain.login import Claim


class ClaimsContextMiddleware(BaseHTTPMiddleware):
    """Sets the claims ContextVar from request state for each request."""

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        """Process request with the claims context set.

        Args:
            request: Incoming HTTP request.
            call_next: Next middleware/handler in stack.

        Returns:
            Response from handler.
        """
        token = set_claims_context(_request_claims(request))
        try:
            return await call_next(request)
        finally:
            clear_claims_context(token)


def _request_claims(request: Request) -> list[Claim]:
    claims = getattr(request.state, "claims", None)
    if claims is not None:
        return list(claims)
    payload = getattr(request.state, "jwt_claims", None)
    if payload:
        return claims_from_jwt(payload)
    return []
