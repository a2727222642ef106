"""HTTP middleware for the claims context."""

from tessera.infra.auth.middleware.claims_context import ClaimsContextMiddleware

__all__ = ["ClaimsContextMiddleware"]
