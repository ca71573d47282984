"""Usuario Validation Rules — field-level business constraints for create/update payloads.

Invariants:
    - All functions are PURE: no IO, no async, no DB, input never mutated
    - Never raise: every rule returns a FieldViolation or None
    - validate_create / validate_update run EVERY rule and collect all violations
      (no first-error-wins), in field order nome, email, senha, dataNascimento, telefone
    - Age uses the exact-anniversary rule, never a 365-day approximation

Design Decisions:
    - Ordered list of (rule) callables instead of a validation framework: each rule
      is testable on its own
    - Email syntax delegated to email-validator with deliverability checks off (no DNS)
"""

import re
from datetime import date
from typing import Callable

from email_validator import EmailNotValidError, validate_email

from app.core.domain_types import (
    IDADE_MINIMA,
    NOME_MAX_LENGTH,
    NOME_MIN_LENGTH,
    SENHA_MIN_LENGTH,
    FieldViolation,
    UsuarioField,
)
from app.schemas.usuario import UsuarioCreate, UsuarioUpdate

TELEFONE_PATTERN = re.compile(r"\(\d{2}\) ?\d{5}-\d{4}")


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def calculate_age(birth_date: date, today: date) -> int:
    """Calendar-year difference, minus one if this year's birthday is still ahead.

    A 29 February birthday is reached on 1 March in non-leap years.
    """
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


# ─── Single-field rules ──────────────────────────────────────────

def check_nome(nome: str | None) -> FieldViolation | None:
    if _is_blank(nome):
        return FieldViolation(UsuarioField.NOME.value, "Nome é obrigatório")
    if not NOME_MIN_LENGTH <= len(nome) <= NOME_MAX_LENGTH:
        return FieldViolation(
            UsuarioField.NOME.value,
            f"Nome deve ter entre {NOME_MIN_LENGTH} e {NOME_MAX_LENGTH} caracteres",
        )
    return None


def check_email(email: str | None) -> FieldViolation | None:
    if _is_blank(email):
        return FieldViolation(UsuarioField.EMAIL.value, "Email é obrigatório")
    try:
        # library default: special-use domains (.test, .local) are invalid
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return FieldViolation(UsuarioField.EMAIL.value, "Email deve ser válido")
    return None


def check_senha(senha: str | None) -> FieldViolation | None:
    if _is_blank(senha):
        return FieldViolation(UsuarioField.SENHA.value, "Senha é obrigatória")
    if len(senha) < SENHA_MIN_LENGTH:
        return FieldViolation(
            UsuarioField.SENHA.value,
            f"Senha deve ter no mínimo {SENHA_MIN_LENGTH} caracteres",
        )
    return None


def check_data_nascimento(
    data_nascimento: date | None, today: date,
) -> FieldViolation | None:
    if data_nascimento is None:
        return FieldViolation(
            UsuarioField.DATA_NASCIMENTO.value, "Data de nascimento é obrigatória",
        )
    if calculate_age(data_nascimento, today) < IDADE_MINIMA:
        return FieldViolation(
            UsuarioField.DATA_NASCIMENTO.value,
            f"Usuário deve ter pelo menos {IDADE_MINIMA} anos",
        )
    return None


def check_telefone(telefone: str | None) -> FieldViolation | None:
    """Absent or empty phone always passes."""
    if not telefone:
        return None
    if not TELEFONE_PATTERN.fullmatch(telefone):
        return FieldViolation(
            UsuarioField.TELEFONE.value,
            "Telefone deve estar no formato (XX) XXXXX-XXXX",
        )
    return None


# ─── Payload validators ──────────────────────────────────────────

def _collect(rules: list[Callable[[], FieldViolation | None]]) -> list[FieldViolation]:
    return [v for v in (rule() for rule in rules) if v is not None]


def validate_create(
    payload: UsuarioCreate, today: date | None = None,
) -> list[FieldViolation]:
    """Run every create rule. Empty list means valid."""
    today = today or date.today()
    return _collect([
        lambda: check_nome(payload.nome),
        lambda: check_email(payload.email),
        lambda: check_senha(payload.senha),
        lambda: check_data_nascimento(payload.data_nascimento, today),
        lambda: check_telefone(payload.telefone),
    ])


def validate_update(
    payload: UsuarioUpdate, today: date | None = None,
) -> list[FieldViolation]:
    """Run every update rule. senha is not part of the update payload."""
    today = today or date.today()
    return _collect([
        lambda: check_nome(payload.nome),
        lambda: check_email(payload.email),
        lambda: check_data_nascimento(payload.data_nascimento, today),
        lambda: check_telefone(payload.telefone),
    ])
