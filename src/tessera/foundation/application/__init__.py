"""Tessera Foundation Application -- login factories, registry and resolver."""

from tessera.foundation.application.context import (
    clear_claims_context,
    get_current_claims,
    set_claims_context,
)
from tessera.foundation.application.current_user import (
    CurrentUserProvider,
    identity_from_claims,
)
from tessera.foundation.application.discovery import (
    LOGIN_FACTORY_GROUP,
    DiscoveredContribution,
    discover,
)
from tessera.foundation.application.factory import LoginFactory, RequiredField, parse_bool
from tessera.foundation.application.registry import (
    LoginFactoryRegistry,
    LoginFactoryRegistryBuilder,
)
from tessera.foundation.application.resolver import LoginResolver, subject_uuid

__all__ = [
    "LOGIN_FACTORY_GROUP",
    "CurrentUserProvider",
    "DiscoveredContribution",
    "LoginFactory",
    "LoginFactoryRegistry",
    "LoginFactoryRegistryBuilder",
    "LoginResolver",
    "RequiredField",
    "clear_claims_context",
    "discover",
    "get_current_claims",
    "identity_from_claims",
    "parse_bool",
    "set_claims_context",
    "subject_uuid",
]
