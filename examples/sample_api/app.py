"""Sample API application factory.

Usage::

    from examples.sample_api.app import create_sample_app

    app = create_sample_app()
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import FastAPI

from tessera.infra.auth import ClaimsContextMiddleware, login_lifespan
from tessera.infra.fastapi import register_exception_handlers

from .router import router

if TYPE_CHECKING:
    from collections.abc import Sequence


def create_sample_app(
    *,
    auth_middleware: Sequence[tuple[type[Any], dict[str, Any]]] = (),
) -> FastAPI:
    """Create the sample app.

    The app does not authenticate requests itself. Pass the middleware that
    does (and that populates ``request.state.jwt_claims``) as
    ``auth_middleware``; it is installed outside ClaimsContextMiddleware.

    Args:
        auth_middleware: ``(middleware_class, kwargs)`` pairs, outermost last.
    """
    app = FastAPI(title="Sample API", version="0.1.0", lifespan=login_lifespan)
    app.add_middleware(ClaimsContextMiddleware)
    for middleware_class, kwargs in auth_middleware:
        app.add_middleware(middleware_class, **kwargs)
    register_exception_handlers(app)
    app.include_router(router)
    return app
