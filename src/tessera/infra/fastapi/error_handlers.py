"""RFC 7807 Problem Details exception handlers for login resolution errors.

Translates tessera domain exceptions into HTTP responses with
Content-Type: application/problem+json.

Status mapping:
    AuthenticationError (NoLoginError, SubjectFormatError) -> 401
    LoginValidationError (claims rejected)                  -> 401
    UnregisteredIssuerError (deployment defect)             -> 500
    ConflictError (DuplicateIssuerError)                    -> 409
    DomainError (fallback)                                  -> 400
    Exception (unhandled)                                   -> 500

Usage:
    from tessera.infra.fastapi.error_handlers import register_exception_handlers

    app = FastAPI()
    register_exception_handlers(app)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from tessera.foundation.domain.exceptions import (
    AuthenticationError,
    ConflictError,
    DomainError,
    LoginValidationError,
    UnregisteredIssuerError,
)

if TYPE_CHECKING:
    from fastapi import FastAPI, Request

logger = logging.getLogger(__name__)

PROBLEM_MEDIA_TYPE = "application/problem+json"


class ProblemDetail(BaseModel):
    """RFC 7807 Problem Details response model.

    Extension fields:
    - error_code: Machine-readable error code for client handling
    - context: Structured debugging information
    """

    type: str = Field(
        ...,
        description="URI reference identifying problem type",
        examples=["/errors/missing-claim", "/errors/no-login"],
    )
    title: str = Field(..., description="Short human-readable summary")
    status: int = Field(..., ge=400, le=599, description="HTTP status code")
    detail: str = Field(..., description="Human-readable explanation")
    instance: str | None = Field(
        default=None,
        description="URI reference to specific occurrence (request path)",
    )
    error_code: str | None = Field(
        default=None,
        description="Machine-readable error code",
        examples=["MISSING_CLAIM", "NO_LOGIN"],
    )
    context: dict[str, Any] | None = Field(
        default=None,
        description="Structured debugging information",
    )


def _create_problem_response(
    problem: ProblemDetail,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=problem.status,
        content=problem.model_dump(exclude_none=True),
        media_type=PROBLEM_MEDIA_TYPE,
        headers=headers,
    )


def _problem_type(error_code: str) -> str:
    return f"/errors/{error_code.lower().replace('_', '-')}"


def _public_context(context: dict[str, Any]) -> dict[str, Any] | None:
    # Subjects identify principals; keep them out of client responses.
    public = {k: str(v) for k, v in context.items() if k != "subject"}
    return public or None


def _www_authenticate(error: str) -> dict[str, str]:
    return {"WWW-Authenticate": f'Bearer realm="API", error="{error}"'}


async def authentication_error_handler(
    request: Request,
    exc: AuthenticationError,
) -> JSONResponse:
    """Translate AuthenticationError to 401 with WWW-Authenticate header.

    Args:
        request: FastAPI request object.
        exc: AuthenticationError instance with auth_error and error_code.

    Returns:
        JSONResponse with 401 status, problem details, and WWW-Authenticate header.
    """
    problem = ProblemDetail(
        type=_problem_type(exc.error_code),
        title="Unauthorized",
        status=401,
        detail=exc.message,
        instance=str(request.url.path),
        error_code=exc.error_code,
        context=_public_context(exc.context),
    )
    return _create_problem_response(problem, _www_authenticate(exc.auth_error))


async def login_validation_error_handler(
    request: Request,
    exc: LoginValidationError,
) -> JSONResponse:
    """Translate LoginValidationError to 401: the principal's claims are rejected.

    Args:
        request: FastAPI request object.
        exc: LoginValidationError with provider, issuer and field.

    Returns:
        JSONResponse with 401 status and problem details.
    """
    problem = ProblemDetail(
        type=_problem_type(exc.error_code),
        title="Unauthorized",
        status=401,
        detail=str(exc),
        instance=str(request.url.path),
        error_code=exc.error_code,
        context=_public_context(exc.context),
    )
    return _create_problem_response(problem, _www_authenticate("invalid_token"))


async def unregistered_issuer_handler(
    request: Request,
    exc: UnregisteredIssuerError,
) -> JSONResponse:
    """Translate UnregisteredIssuerError to 500.

    An unknown issuer means the deployment accepts tokens it cannot
    interpret. This is logged at error level; the issuer is not echoed
    to the client.
    """
    logger.error(
        "login_issuer_unregistered",
        extra={
            "issuer": exc.issuer,
            "path": str(request.url.path),
            "method": request.method,
        },
    )
    problem = ProblemDetail(
        type=_problem_type(exc.error_code),
        title="Internal Server Error",
        status=500,
        detail="Login provider is not configured for this issuer.",
        instance=str(request.url.path),
        error_code=exc.error_code,
    )
    return _create_problem_response(problem)


async def conflict_error_handler(
    request: Request,
    exc: ConflictError,
) -> JSONResponse:
    """Translate ConflictError to 409 with conflict context."""
    problem = ProblemDetail(
        type=_problem_type(exc.error_code),
        title="Conflict",
        status=409,
        detail=str(exc),
        instance=str(request.url.path),
        error_code=exc.error_code,
        context=_public_context(exc.context),
    )
    return _create_problem_response(problem)


async def domain_error_handler(
    request: Request,
    exc: DomainError,
) -> JSONResponse:
    """Translate generic DomainError to 400 Bad Request.

    Fallback for domain errors without a more specific handler.
    """
    problem = ProblemDetail(
        type="/errors/domain-error",
        title="Bad Request",
        status=400,
        detail=str(exc),
        instance=str(request.url.path),
        error_code=exc.error_code,
        context=_public_context(exc.context),
    )
    return _create_problem_response(problem)


async def unhandled_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Catch-all handler for unhandled exceptions.

    Logs full exception details but returns a generic response. In debug
    mode the exception type and message are included.
    """
    logger.exception(
        "unhandled_exception",
        extra={
            "path": str(request.url.path),
            "method": request.method,
            "exception_type": type(exc).__name__,
        },
    )

    if getattr(request.app, "debug", False):
        detail = f"{type(exc).__name__}: {exc}"
    else:
        detail = "An internal error occurred."

    problem = ProblemDetail(
        type="/errors/internal-error",
        title="Internal Server Error",
        status=500,
        detail=detail,
        instance=str(request.url.path),
        error_code="INTERNAL_ERROR",
    )
    return _create_problem_response(problem)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on a FastAPI application.

    Starlette dispatches on the exception's MRO, so the more specific
    handlers win over the DomainError fallback.

    Args:
        app: FastAPI application instance.
    """
    # Type ignores needed due to Starlette's overly strict handler typing
    app.add_exception_handler(
        AuthenticationError,
        authentication_error_handler,  # type: ignore[arg-type]
    )
    app.add_exception_handler(
        LoginValidationError,
        login_validation_error_handler,  # type: ignore[arg-type]
    )
    app.add_exception_handler(
        UnregisteredIssuerError,
        unregistered_issuer_handler,  # type: ignore[arg-type]
    )
    app.add_exception_handler(
        ConflictError,
        conflict_error_handler,  # type: ignore[arg-type]
    )
    app.add_exception_handler(
        DomainError,
        domain_error_handler,  # type: ignore[arg-type]
    )
    app.add_exception_handler(Exception, unhandled_exception_handler)
