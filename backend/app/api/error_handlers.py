"""Error Handlers — global exception handlers for the Usuarios API.

Invariants:
    - UsuariosApiError → structured JSON with error code, message, severity
    - RequestValidationError → 400 with the same field-level details shape as
      UsuarioValidationError, so clients parse one format
    - Exception (catch-all) → 500 problem body, never leaks internal details
    - 500-level responses always carry a problem title and detail
    - Validation failures logged at WARNING, not-found/conflict at INFO, the rest at ERROR
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from app.core.errors import UsuariosApiError, ErrorCategory, ErrorSeverity

logger = logging.getLogger(__name__)

PROBLEM_TITLE = "Erro interno do servidor"
PROBLEM_DETAIL = "An unexpected error occurred"

_LOG_LEVEL_BY_CATEGORY = {
    ErrorCategory.VALIDATION: logging.WARNING,
    ErrorCategory.RESOURCE_NOT_FOUND: logging.INFO,
    ErrorCategory.CONFLICT: logging.INFO,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(UsuariosApiError)
    async def usuarios_api_error_handler(request: Request, exc: UsuariosApiError):
        """Handle all domain/infrastructure errors."""
        logger.log(
            _LOG_LEVEL_BY_CATEGORY.get(exc.category, logging.ERROR),
            f"{type(exc).__name__}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "usuario_id": exc.context.usuario_id,
                "operation": exc.context.operation,
            },
        )
        content = exc.to_response()
        if exc.http_status >= 500:
            content = _build_problem_response(exc.http_status, content)
        return JSONResponse(status_code=exc.http_status, content=content)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors (malformed JSON, unparsable dates)."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_build_problem_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                {
                    "error": {
                        "code": "INTERNAL_ERROR",
                        "message": PROBLEM_DETAIL,
                        "category": ErrorCategory.INTERNAL.value,
                        "severity": ErrorSeverity.CRITICAL.value,
                    },
                },
            ),
        )


def _build_problem_response(status_code: int, envelope: dict) -> dict:
    return {
        "title": PROBLEM_TITLE,
        "status": status_code,
        "detail": PROBLEM_DETAIL,
        **envelope,
    }


def _field_name(loc: tuple) -> str:
    # ("body", "dataNascimento") → "dataNascimento"
    parts = [str(p) for p in loc if p != "body"]
    return ".".join(parts) or "body"


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": ErrorCategory.VALIDATION.value,
            "severity": ErrorSeverity.WARNING.value,
            "details": [
                {
                    "field": _field_name(e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
