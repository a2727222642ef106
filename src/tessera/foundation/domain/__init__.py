"""Tessera Foundation Domain -- pure Python login primitives.

This package provides the canonical login record, the claim value object,
identity-string normalization and the exception hierarchy shared by every
other tessera layer.
"""

from tessera.foundation.domain.exceptions import (
    AuthenticationError,
    ConflictError,
    DomainError,
    DuplicateIssuerError,
    LoginValidationError,
    NoLoginError,
    ResolutionError,
    SubjectFormatError,
    UnregisteredIssuerError,
    ValidationError,
)
from tessera.foundation.domain.identity import ANONYMOUS, normalize_identity
from tessera.foundation.domain.login import DEFAULT_ISSUER, Claim, Login, ProviderKind

__all__ = [
    "ANONYMOUS",
    "DEFAULT_ISSUER",
    "AuthenticationError",
    "Claim",
    "ConflictError",
    "DomainError",
    "DuplicateIssuerError",
    "Login",
    "LoginValidationError",
    "NoLoginError",
    "ProviderKind",
    "ResolutionError",
    "SubjectFormatError",
    "UnregisteredIssuerError",
    "ValidationError",
    "normalize_identity",
]
