"""Shared fixtures for tessera tests."""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable, Iterator

import pytest
from examples.sample_api import create_sample_app
from fastapi import FastAPI
from fastapi.testclient import TestClient
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from tessera.foundation.application import LoginFactoryRegistry, LoginResolver
from tessera.foundation.domain import Claim
from tessera.infra.auth.providers import (
    ACTIVE_DIRECTORY,
    CLAIM_TYPE_NAME,
    CLAIM_TYPE_PRIMARY_SID,
    GOOGLE,
    GOOGLE_ISSUER,
    WINDOWS,
)
from tessera.infra.auth.settings import get_auth_settings
from tessera.infra.observability.logging import get_logging_settings

AD_ISSUER = ACTIVE_DIRECTORY.issuer
SAMPLE_SID = "S-1-5-21-3623811015-3361044348-30300820-1013"
TEST_CLAIMS_HEADER = "X-Test-Claims"


@pytest.fixture(autouse=True)
def _clear_settings_caches() -> Iterator[None]:
    get_auth_settings.cache_clear()
    get_logging_settings.cache_clear()
    yield
    get_auth_settings.cache_clear()
    get_logging_settings.cache_clear()


@pytest.fixture()
def tessera_logger() -> Iterator[logging.Logger]:
    """Restore the ``tessera`` logger after a test reconfigures logging."""
    logger = logging.getLogger("tessera")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


@pytest.fixture()
def google_claims() -> list[Claim]:
    """A complete Google claim set using raw OIDC claim names."""
    return [
        Claim("iss", GOOGLE_ISSUER, GOOGLE_ISSUER),
        Claim("sub", "109876543210", GOOGLE_ISSUER),
        Claim("name", "Alice Example", GOOGLE_ISSUER),
        Claim("email", "alice@example.com", GOOGLE_ISSUER),
        Claim("email_verified", "true", GOOGLE_ISSUER),
        Claim("given_name", "Alice", GOOGLE_ISSUER),
        Claim("family_name", "Example", GOOGLE_ISSUER),
        Claim("picture", "https://example.com/alice.png", GOOGLE_ISSUER),
    ]


@pytest.fixture()
def ad_claims() -> list[Claim]:
    """A complete on-premise Active Directory claim set."""
    return [
        Claim(CLAIM_TYPE_PRIMARY_SID, SAMPLE_SID, AD_ISSUER),
        Claim(CLAIM_TYPE_NAME, "CORP\\alice", AD_ISSUER),
    ]


@pytest.fixture()
def registry() -> LoginFactoryRegistry:
    return LoginFactoryRegistry.from_factories([GOOGLE, ACTIVE_DIRECTORY, WINDOWS])


@pytest.fixture()
def resolver(registry: LoginFactoryRegistry) -> LoginResolver:
    return LoginResolver(registry)


class HeaderClaimsMiddleware(BaseHTTPMiddleware):
    """Test authentication layer: reads a decoded JWT payload from ``X-Test-Claims``."""

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        raw = request.headers.get(TEST_CLAIMS_HEADER)
        if raw:
            request.state.jwt_claims = json.loads(raw)
        return await call_next(request)


@pytest.fixture()
def sample_app() -> FastAPI:
    return create_sample_app(auth_middleware=[(HeaderClaimsMiddleware, {})])


@pytest.fixture()
def client(sample_app: FastAPI, tessera_logger: logging.Logger) -> Iterator[TestClient]:
    """TestClient for the sample app (lifespan hooks executed)."""
    with TestClient(sample_app, raise_server_exceptions=False) as c:
        yield c
