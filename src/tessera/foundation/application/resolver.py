"""Resolve the current login from an issuer-scoped claim sequence.

The issuer of the first claim selects the factory; a claim sequence is
assumed to come from a single issuer.

Usage:
    resolver = LoginResolver(registry)
    login = resolver.resolve(claims)  # None when unauthenticated
    login = resolver.require(claims)  # raises NoLoginError instead
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from tessera.foundation.domain.exceptions import (
    LoginValidationError,
    NoLoginError,
    SubjectFormatError,
    UnregisteredIssuerError,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tessera.foundation.application.registry import LoginFactoryRegistry
    from tessera.foundation.domain.login import Claim, Login

logger = logging.getLogger(__name__)


class LoginResolver:
    """Dispatches claim sequences to the factory registered for their issuer."""

    def __init__(self, registry: LoginFactoryRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> LoginFactoryRegistry:
        return self._registry

    def resolve(self, claims: Iterable[Claim]) -> Login | None:
        """Resolve a login from claims.

        Args:
            claims: Ordered claims of the current principal. May be empty.

        Returns:
            The login, or None if there are no claims.

        Raises:
            UnregisteredIssuerError: If no factory handles the first claim's issuer.
            LoginValidationError: If the factory rejects the claims.
        """
        claims = tuple(claims)
        if not claims:
            return None

        issuer = claims[0].issuer
        factory = self._registry.lookup(issuer)
        if factory is None:
            logger.error(
                "login_issuer_unregistered",
                extra={"issuer": issuer, "registered": list(self._registry.issuers)},
            )
            raise UnregisteredIssuerError(issuer)

        try:
            login = factory.create(claims)
        except LoginValidationError as exc:
            logger.info(
                "login_validation_failed",
                extra={
                    "issuer": issuer,
                    "provider": exc.provider,
                    "field": exc.field,
                    "error_code": exc.error_code,
                },
            )
            raise

        logger.debug(
            "login_resolved",
            extra={"issuer": issuer, "provider": str(login.provider)},
        )
        return login

    def require(self, claims: Iterable[Claim]) -> Login:
        """Resolve a login, treating an empty claim set as an authentication failure.

        Raises:
            NoLoginError: If there are no claims.
            UnregisteredIssuerError: If no factory handles the issuer.
            LoginValidationError: If the factory rejects the claims.
        """
        login = self.resolve(claims)
        if login is None:
            raise NoLoginError()
        return login

    def require_subject_uuid(self, claims: Iterable[Claim]) -> UUID:
        """Resolve a required login and return its subject as a UUID."""
        return subject_uuid(self.require(claims))


def subject_uuid(login: Login) -> UUID:
    """Interpret a login subject as a UUID.

    Raises:
        SubjectFormatError: If the subject is not a valid UUID.
    """
    try:
        return UUID(login.subject)
    except ValueError:
        raise SubjectFormatError(login.subject, str(login.provider)) from None
