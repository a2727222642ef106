"""Tessera Infra FastAPI -- problem+json error handlers."""

from tessera.infra.fastapi.error_handlers import (
    PROBLEM_MEDIA_TYPE,
    ProblemDetail,
    register_exception_handlers,
)

__all__ = [
    "PROBLEM_MEDIA_TYPE",
    "ProblemDetail",
    "register_exception_handlers",
]
