"""Startup wiring for login resolution.

Builds the login factory registry once from installed entry points and
stores a ``LoginResolver`` on ``app.state`` for the FastAPI dependencies.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

from tessera.foundation.application.discovery import LOGIN_FACTORY_GROUP, discover
from tessera.foundation.application.factory import LoginFactory
from tessera.foundation.application.registry import (
    LoginFactoryRegistry,
    LoginFactoryRegistryBuilder,
)
from tessera.foundation.application.resolver import LoginResolver
from tessera.infra.auth.settings import AuthSettings, get_auth_settings
from tessera.infra.observability.logging import configure_logging, get_logger

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


def build_default_registry(
    settings: AuthSettings | None = None,
    *,
    exclude_names: frozenset[str] = frozenset(),
) -> LoginFactoryRegistry:
    """Build the registry from the ``tessera.login_factories`` entry points.

    Each factory is registered under the issuer configured for its
    provider in ``AuthSettings``.

    Args:
        settings: Settings to use. Defaults to ``get_auth_settings()``.
        exclude_names: Entry point names to skip, in addition to
            ``settings.excluded_providers``.

    Returns:
        The frozen registry.

    Raises:
        TypeError: If an entry point does not load a ``LoginFactory``.
        DuplicateIssuerError: If two factories resolve to the same issuer.
    """
    if settings is None:
        settings = get_auth_settings()

    builder = LoginFactoryRegistryBuilder()
    contributions = discover(
        LOGIN_FACTORY_GROUP,
        exclude_names=exclude_names | settings.excluded_providers,
    )
    for contribution in contributions:
        factory = contribution.value
        if not isinstance(factory, LoginFactory):
            msg = (
                f"Entry point {contribution.group}:{contribution.name} is not a "
                f"LoginFactory (got {type(factory).__name__})"
            )
            raise TypeError(msg)
        builder.register(factory, issuer=settings.issuer_for(factory.provider))
    return builder.build()


@asynccontextmanager
async def login_lifespan(app: Any) -> AsyncIterator[None]:
    """Manage login resolution across the application lifecycle.

    Startup:
        1. Configure structured logging.
        2. Build the registry and store a resolver on ``app.state.login_resolver``.

    Args:
        app: The application instance.
    """
    configure_logging()
    logger = get_logger(__name__)
    registry = build_default_registry()
    app.state.login_resolver = LoginResolver(registry)
    logger.info("login_lifespan_started", issuers=list(registry.issuers))

    try:
        yield
    finally:
        logger.info("login_lifespan_shutdown")
