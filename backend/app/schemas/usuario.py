"""Usuario Schemas — Pydantic request/response contracts for the /usuarios API.

Invariants:
    - JSON uses camelCase (dataNascimento, dataCriacao...); snake_case accepted on input
    - Payload fields are optional at the type level: business rules (required, length,
      format) live in core/validate_usuario.py so every violation is reported together
    - UsuarioUpdate has no senha field — extra keys are ignored, so a password sent on
      update never reaches the entity
    - UsuarioRead never exposes senha
"""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class UsuarioCreate(BaseModel):
    """Create-payload — all five writable fields, including the write-once senha."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore",
    )

    nome: str | None = None
    email: str | None = None
    senha: str | None = None
    data_nascimento: date | None = None
    telefone: str | None = None


class UsuarioUpdate(BaseModel):
    """Update-payload — mutable fields only."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore",
    )

    nome: str | None = None
    email: str | None = None
    data_nascimento: date | None = None
    telefone: str | None = None


class UsuarioRead(BaseModel):
    """Read-shape — the information released to external callers."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )

    id: UUID
    nome: str
    email: str
    data_nascimento: date
    telefone: str | None = None
    data_criacao: datetime
    data_atualizacao: datetime | None = None
    ativo: bool
