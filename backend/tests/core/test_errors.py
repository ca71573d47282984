"""Error Hierarchy — tests for codes, statuses and response envelopes."""

from uuid import uuid4

from app.core.domain_types import FieldViolation
from app.core.errors import (
    DatabaseError,
    EmailConflictError,
    ErrorCategory,
    ErrorContext,
    ResourceNotFoundError,
    UsuarioNotFoundError,
    UsuarioValidationError,
)


def test_validation_error_lists_every_violation():
    err = UsuarioValidationError([
        FieldViolation("nome", "Nome é obrigatório"),
        FieldViolation("email", "Email deve ser válido"),
    ])
    body = err.to_response()["error"]
    assert err.http_status == 400
    assert body["code"] == "VALIDATION_ERROR"
    assert body["details"] == [
        {"field": "nome", "message": "Nome é obrigatório"},
        {"field": "email", "message": "Email deve ser válido"},
    ]


def test_usuario_not_found_is_resource_not_found():
    usuario_id = uuid4()
    err = UsuarioNotFoundError(usuario_id, ErrorContext(operation="obter"))
    assert isinstance(err, ResourceNotFoundError)
    assert err.http_status == 404
    assert str(usuario_id) in err.message
    assert err.to_response()["error"]["context"] == {
        "usuario_id": str(usuario_id), "operation": "obter",
    }


def test_email_conflict_is_409():
    err = EmailConflictError("a@x.com")
    assert err.http_status == 409
    assert err.category == ErrorCategory.CONFLICT
    assert err.message == "Email já cadastrado"


def test_database_error_is_500():
    err = DatabaseError("Connection refused", "execute")
    assert err.http_status == 500
    assert err.to_response()["error"]["code"] == "DATABASE_ERROR"
