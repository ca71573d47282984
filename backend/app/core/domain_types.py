"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UsuarioId wraps UUID — never use bare UUID in domain logic
    - Lifecycle states encoded as an Enum — no raw string or bool matching
    - FieldViolation is immutable: validators build lists of them, never edit them
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UsuarioId = NewType("UsuarioId", UUID)


# ─── Value Types ─────────────────────────────────────────────────

@dataclass(frozen=True)
class FieldViolation:
    """A single rule failure: API field name + human-readable message."""
    field: str
    message: str


# ─── Enums ───────────────────────────────────────────────────────

class UsuarioStatus(str, Enum):
    """Usuario lifecycle states — derived from the `ativo` column."""
    ACTIVE = "active"
    INACTIVE = "inactive"


class UsuarioField(str, Enum):
    """Field names as exposed by the API (camelCase JSON)."""
    NOME = "nome"
    EMAIL = "email"
    SENHA = "senha"
    DATA_NASCIMENTO = "dataNascimento"
    TELEFONE = "telefone"


# ─── Business Constants ──────────────────────────────────────────

NOME_MIN_LENGTH = 3
NOME_MAX_LENGTH = 100
SENHA_MIN_LENGTH = 6
IDADE_MINIMA = 18
