"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection
      (repositories/usuario_repository.py, tests' in-memory store)

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: boundary methods are async because implementations do IO,
      but core pure functions that USE these protocols are never async themselves
"""

from datetime import date, datetime
from typing import Protocol
from uuid import UUID


class UsuarioLike(Protocol):
    """Structural contract for Usuario entities handled by the pure core.

    Satisfied by the ORM model and by plain test doubles alike.
    """
    id: UUID
    nome: str
    email: str
    senha: str
    data_nascimento: date
    telefone: str | None
    data_criacao: datetime
    data_atualizacao: datetime | None
    ativo: bool


class UsuarioStore(Protocol):
    """Contract for Usuario persistence — implemented by shell."""
    async def find_by_id(self, usuario_id: UUID) -> UsuarioLike | None: ...
    async def find_by_email(self, email: str) -> UsuarioLike | None: ...
    async def list_active(self) -> list[UsuarioLike]: ...
    async def insert(self, usuario: UsuarioLike) -> UsuarioLike: ...
    async def update(self, usuario: UsuarioLike) -> UsuarioLike: ...
