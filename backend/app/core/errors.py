"""Error Hierarchy — typed, categorized exceptions for all Usuarios API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable by the caller; infrastructure errors are 500
    - to_response() produces the REST envelope; no internal details in user-facing messages

Design Decisions:
    - Single hierarchy with UsuariosApiError base: one FastAPI handler catches all
    - ErrorContext as dataclass: observability data without coupling to the logging setup
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone

from app.core.domain_types import FieldViolation


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and the response envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    usuario_id: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class UsuariosApiError(Exception):
    """Base exception for all Usuarios API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "usuario_id": self.context.usuario_id,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class UsuarioValidationError(UsuariosApiError):
    """One or more field rules rejected the payload."""
    def __init__(self, violations: list[FieldViolation], context: ErrorContext | None = None):
        super().__init__(
            "Dados do usuário inválidos",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.violations = list(violations)

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = [
            {"field": v.field, "message": v.message} for v in self.violations
        ]
        return response


class ResourceNotFoundError(UsuariosApiError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class UsuarioNotFoundError(ResourceNotFoundError):
    """No active Usuario with the given id (absent or soft-deleted)."""
    def __init__(self, usuario_id: Any, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.usuario_id = str(usuario_id)
        super().__init__("Usuario", str(usuario_id), ctx)
        self.message = f"Usuário com ID {usuario_id} não encontrado."
        self.args = (self.message,)


class EmailConflictError(UsuariosApiError):
    """Normalized email already belongs to another record."""
    def __init__(self, email: str, context: ErrorContext | None = None):
        super().__init__(
            "Email já cadastrado",
            "EMAIL_CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.INFO, context, 409,
        )
        self.email = email


# ─── Internal / Infrastructure Errors (500-level) ───────────────

class InvalidTransitionError(UsuariosApiError):
    """Lifecycle transition attempted from a state that does not allow it."""
    def __init__(self, transition: str, state: str, context: ErrorContext | None = None):
        super().__init__(
            f"Transition '{transition}' not allowed from state '{state}'",
            "INVALID_TRANSITION", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.transition = transition
        self.state = state


class DatabaseError(UsuariosApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
