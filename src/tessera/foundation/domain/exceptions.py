"""Domain exception hierarchy for login resolution.

All errors carry a machine-readable error code and structured context
(provider, issuer, field) so that callers can log them and map them to
HTTP responses without parsing messages.

Example:
    >>> from tessera.foundation.domain.exceptions import UnregisteredIssuerError
    >>> raise UnregisteredIssuerError("https://login.example.com")
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "AuthenticationError",
    "ConflictError",
    "DomainError",
    "DuplicateIssuerError",
    "LoginValidationError",
    "NoLoginError",
    "ResolutionError",
    "SubjectFormatError",
    "UnregisteredIssuerError",
    "ValidationError",
]


class DomainError(Exception):
    """Base class for all domain errors.

    Attributes:
        error_code: Machine-readable error code for client handling.
        message: Human-readable error description.
        context: Structured debugging information (issuer, provider, field).

    Example:
        >>> raise DomainError("Operation failed", context={"issuer": "AD AUTHORITY"})
        DomainError: Operation failed (issuer=AD AUTHORITY)
    """

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        """Initialize domain error with message and optional context.

        Args:
            message: Human-readable error description.
            context: Structured debugging information. Keys should be snake_case.
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """String representation including context for logging."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}({self.message!r}, context={self.context!r})"


class ValidationError(DomainError):
    """Raised when input fails domain validation rules.

    Attributes:
        error_code: "VALIDATION_ERROR" (class constant).
        field: Field that failed validation.
        reason: Human-readable validation failure reason.
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        field: str,
        reason: str,
        **extra_context: Any,
    ) -> None:
        """Initialize validation error.

        Args:
            field: Field that failed validation.
            reason: Human-readable validation failure reason.
            **extra_context: Additional debugging context.
        """
        self.field = field
        self.reason = reason
        message = f"Validation failed for '{field}': {reason}"
        context = {
            "field": field,
            "reason": reason,
            **extra_context,
        }
        super().__init__(message, context)


class LoginValidationError(ValidationError):
    """Raised when a claim set cannot be turned into a login.

    Either a required claim is missing (``MISSING_CLAIM``) or a claim value
    cannot be converted (``INVALID_CLAIM``). The principal must be
    rejected; the error is never retried.

    Attributes:
        provider: Provider whose factory rejected the claims.
        issuer: Issuer the claims came from.

    Example:
        >>> raise LoginValidationError("ActiveDirectory", "AD AUTHORITY", "name",
        ...     "missing name claim")
    """

    error_code: str = "MISSING_CLAIM"

    def __init__(
        self,
        provider: str,
        issuer: str,
        field: str,
        reason: str,
        error_code: str = "MISSING_CLAIM",
    ) -> None:
        """Initialize login validation error.

        Args:
            provider: Provider tag (e.g., "Google").
            issuer: Issuer string of the rejected claims.
            field: Login field that could not be populated.
            reason: Human-readable reason, including any provider hint.
            error_code: ``MISSING_CLAIM`` or ``INVALID_CLAIM``.
        """
        self.provider = provider
        self.issuer = issuer
        self.error_code = error_code
        super().__init__(field, reason, provider=provider, issuer=issuer)


class ResolutionError(DomainError):
    """Base class for failures selecting a login factory."""

    error_code: str = "RESOLUTION_ERROR"


class UnregisteredIssuerError(ResolutionError):
    """Raised when claims arrive from an issuer with no registered factory.

    This is a deployment defect, not a per-request condition.

    Attributes:
        issuer: The unknown issuer string.
    """

    error_code: str = "UNREGISTERED_ISSUER"

    def __init__(self, issuer: str) -> None:
        self.issuer = issuer
        super().__init__(
            f"No login factory registered for issuer {issuer}",
            {"issuer": issuer},
        )


class ConflictError(DomainError):
    """Raised when an operation conflicts with existing state.

    Attributes:
        error_code: "CONFLICT" (class constant).
        reason: Description of the conflict.
    """

    error_code: str = "CONFLICT"

    def __init__(
        self,
        reason: str,
        **context: Any,
    ) -> None:
        self.reason = reason
        message = f"Conflict: {reason}"
        super().__init__(message, context)


class DuplicateIssuerError(ConflictError):
    """Raised when two login factories claim the same issuer.

    Attributes:
        issuer: The contested issuer string.
    """

    error_code: str = "DUPLICATE_ISSUER"

    def __init__(self, issuer: str, existing: str, duplicate: str) -> None:
        self.issuer = issuer
        super().__init__(
            f"issuer {issuer} is already registered",
            issuer=issuer,
            existing_provider=existing,
            duplicate_provider=duplicate,
        )


class AuthenticationError(DomainError):
    """Raised when a caller requires an authenticated principal and has none.

    Maps to HTTP 401 Unauthorized. All 401 responses include a
    WWW-Authenticate header.

    Attributes:
        error_code: Machine-readable error code (e.g., "NO_LOGIN").
        auth_error: RFC 6750 error code for WWW-Authenticate header.
    """

    error_code: str = "AUTHENTICATION_ERROR"

    def __init__(
        self,
        message: str,
        auth_error: str = "invalid_token",
        error_code: str = "AUTHENTICATION_ERROR",
        context: dict[str, Any] | None = None,
    ) -> None:
        self.auth_error = auth_error
        self.error_code = error_code
        super().__init__(message, context)


class NoLoginError(AuthenticationError):
    """Raised when a login is required but the claim set is empty."""

    def __init__(self) -> None:
        super().__init__("No login found", error_code="NO_LOGIN")


class SubjectFormatError(AuthenticationError):
    """Raised when a login subject is not a valid unique identifier.

    Attributes:
        subject: The offending subject value.
    """

    def __init__(self, subject: str, provider: str) -> None:
        self.subject = subject
        super().__init__(
            "Subject is not a valid unique identifier",
            error_code="INVALID_SUBJECT",
            context={"subject": subject, "provider": provider},
        )
