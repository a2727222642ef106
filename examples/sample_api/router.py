"""Sample API router.

Endpoints read the current login through the tessera FastAPI dependencies;
claims reach them through ClaimsContextMiddleware.
"""

from __future__ import annotations

import warnings
from typing import Any

from fastapi import APIRouter

from tessera.foundation.application import CurrentUserProvider
from tessera.infra.auth import CurrentLogin, RequiredLogin

router = APIRouter(prefix="/api/test", tags=["test"])


@router.get("")
def get_login(login: CurrentLogin) -> dict[str, Any] | None:
    """Return the current login, or null when unauthenticated."""
    return login.to_dict() if login is not None else None


@router.get("/required")
def get_required_login(login: RequiredLogin) -> dict[str, Any]:
    """Return the current login; 401 when unauthenticated."""
    return login.to_dict()


@router.get("/user")
def get_user() -> dict[str, str]:
    """Legacy endpoint returning only the normalized user name."""
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", DeprecationWarning)
        provider = CurrentUserProvider()
    return {"provider": str(provider.provider), "user": provider.get()}
