"""FastAPI dependency functions for the current login.

Usage:
    from tessera.infra.auth.dependencies import CurrentLogin, RequiredLogin

    @router.get("/me")
    def me(login: RequiredLogin) -> dict[str, Any]:
        return login.to_dict()
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from tessera.foundation.application.context import get_current_claims
from tessera.foundation.application.resolver import LoginResolver
from tessera.foundation.domain.exceptions import NoLoginError
from tessera.foundation.domain.login import Login


def get_login_resolver(request: Request) -> LoginResolver:
    """Return the resolver built by ``login_lifespan``.

    Raises:
        RuntimeError: If the application was started without ``login_lifespan``.
    """
    resolver = getattr(request.app.state, "login_resolver", None)
    if resolver is None:
        msg = "No login resolver configured. Start the application with login_lifespan."
        raise RuntimeError(msg)
    return resolver


def get_current_login(
    resolver: Annotated[LoginResolver, Depends(get_login_resolver)],
) -> Login | None:
    """FastAPI dependency that returns the current login, or None.

    Reads the claims ContextVar set by ClaimsContextMiddleware.
    """
    return resolver.resolve(get_current_claims())


def require_current_login(
    login: Annotated[Login | None, Depends(get_current_login)],
) -> Login:
    """FastAPI dependency that requires an authenticated login.

    Raises:
        NoLoginError: If the request carries no claims.
    """
    if login is None:
        raise NoLoginError()
    return login


# Type aliases for cleaner endpoint signatures
CurrentLogin = Annotated[Login | None, Depends(get_current_login)]
RequiredLogin = Annotated[Login, Depends(require_current_login)]
