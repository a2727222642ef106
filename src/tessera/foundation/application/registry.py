"""Issuer -> login factory registry.

The registry is assembled once at startup with ``LoginFactoryRegistryBuilder``
and is read-only afterwards, so lookups need no locking. It is an explicit
object handed to ``LoginResolver``, never a module-level singleton.

Usage:
    builder = LoginFactoryRegistryBuilder()
    builder.register(GOOGLE).register(ACTIVE_DIRECTORY)
    registry = builder.build()
    factory = registry.lookup("https://accounts.google.com")
"""

from __future__ import annotations

import dataclasses
import logging
from types import MappingProxyType
from typing import TYPE_CHECKING

from tessera.foundation.domain.exceptions import DuplicateIssuerError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from tessera.foundation.application.factory import LoginFactory

logger = logging.getLogger(__name__)


class LoginFactoryRegistry:
    """Immutable mapping of issuer strings to login factories."""

    __slots__ = ("_factories",)

    def __init__(self, factories: dict[str, LoginFactory]) -> None:
        self._factories = MappingProxyType(dict(factories))

    @classmethod
    def from_factories(cls, factories: Iterable[LoginFactory]) -> LoginFactoryRegistry:
        """Build a registry keyed by each factory's own issuer.

        Raises:
            DuplicateIssuerError: If two factories share an issuer.
        """
        builder = LoginFactoryRegistryBuilder()
        for factory in factories:
            builder.register(factory)
        return builder.build()

    def lookup(self, issuer: str) -> LoginFactory | None:
        """Return the factory registered for ``issuer``, or None."""
        return self._factories.get(issuer)

    @property
    def issuers(self) -> tuple[str, ...]:
        return tuple(self._factories)

    def __contains__(self, issuer: object) -> bool:
        return issuer in self._factories

    def __iter__(self) -> Iterator[LoginFactory]:
        return iter(self._factories.values())

    def __len__(self) -> int:
        return len(self._factories)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(issuers={list(self._factories)!r})"


class LoginFactoryRegistryBuilder:
    """Collects factories during startup and freezes them into a registry.

    Duplicate issuers are rejected rather than silently overwritten.
    """

    def __init__(self) -> None:
        self._factories: dict[str, LoginFactory] = {}

    def register(
        self,
        factory: LoginFactory,
        issuer: str | None = None,
    ) -> LoginFactoryRegistryBuilder:
        """Register a factory.

        Args:
            factory: Factory to register.
            issuer: Issuer to register under. When given and different from
                ``factory.issuer``, the factory is copied with the new issuer.

        Returns:
            The builder, for chaining.

        Raises:
            DuplicateIssuerError: If the issuer is already registered.
        """
        if issuer is not None and issuer != factory.issuer:
            factory = dataclasses.replace(factory, issuer=issuer)

        existing = self._factories.get(factory.issuer)
        if existing is not None:
            raise DuplicateIssuerError(
                factory.issuer,
                existing=str(existing.provider),
                duplicate=str(factory.provider),
            )

        self._factories[factory.issuer] = factory
        logger.debug(
            "login_factory_registered",
            extra={"issuer": factory.issuer, "provider": str(factory.provider)},
        )
        return self

    def build(self) -> LoginFactoryRegistry:
        """Freeze the collected factories."""
        registry = LoginFactoryRegistry(self._factories)
        logger.info(
            "login_registry_built",
            extra={"issuers": list(registry.issuers)},
        )
        return registry
