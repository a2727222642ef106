"""Tessera Infra Auth -- built-in providers and HTTP integration.

Provides the Google, Active Directory and local OS login factories,
JWT payload to claim conversion, the claims context middleware, FastAPI
dependencies for the current login, and the startup lifespan that builds
the registry.
"""

from tessera.infra.auth.claims import claims_from_jwt
from tessera.infra.auth.dependencies import (
    CurrentLogin,
    RequiredLogin,
    get_current_login,
    get_login_resolver,
    require_current_login,
)
from tessera.infra.auth.lifespan import build_default_registry, login_lifespan
from tessera.infra.auth.middleware import ClaimsContextMiddleware
from tessera.infra.auth.os_login import (
    current_os_claims,
    get_current_os_login,
    get_current_os_user,
)
from tessera.infra.auth.providers import ACTIVE_DIRECTORY, GOOGLE, WINDOWS
from tessera.infra.auth.settings import AuthSettings, get_auth_settings

__all__ = [
    "ACTIVE_DIRECTORY",
    "GOOGLE",
    "WINDOWS",
    "AuthSettings",
    "ClaimsContextMiddleware",
    "CurrentLogin",
    "RequiredLogin",
    "build_default_registry",
    "claims_from_jwt",
    "current_os_claims",
    "get_auth_settings",
    "get_current_login",
    "get_current_os_login",
    "get_current_os_user",
    "get_login_resolver",
    "login_lifespan",
    "require_current_login",
]
