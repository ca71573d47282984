"""Usuario Service — orchestrates validation, uniqueness, lifecycle and persistence.

Invariants:
    - Sole translator of domain outcomes into the error taxonomy:
      violations → UsuarioValidationError, absent/inactive → UsuarioNotFoundError,
      duplicate email → EmailConflictError
    - Validation runs before any repository call; a failed validation never writes
    - Not-found on update/delete performs no write
    - Email uniqueness: pre-check for the friendly error, unique index as final guard
      (IntegrityError on insert/update becomes EmailConflictError)
    - asyncio.CancelledError is never caught here

Design Decisions:
    - Repository and clocks injected through the constructor (no DI container)
    - Pure core (validate_usuario, map_usuario, usuario_lifecycle) sandwiched between
      repository reads and writes
"""

import logging
from datetime import date, datetime, timezone
from typing import Callable
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from app.core.errors import (
    EmailConflictError, ErrorContext, UsuarioNotFoundError, UsuarioValidationError,
)
from app.core.map_usuario import create_payload_to_fields, normalize_email, to_read
from app.core.repository_protocols import UsuarioLike, UsuarioStore
from app.core.usuario_lifecycle import (
    apply_delete, apply_update, creation_fields, is_visible,
)
from app.core.validate_usuario import validate_create, validate_update
from app.models.usuario import Usuario
from app.schemas.usuario import UsuarioCreate, UsuarioRead, UsuarioUpdate

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UsuarioService:
    """List/get/create/update/soft-delete for Usuario records."""

    def __init__(
        self,
        repository: UsuarioStore,
        now: Callable[[], datetime] = _utcnow,
        today: Callable[[], date] = date.today,
    ):
        self.repository = repository
        self._now = now
        self._today = today

    async def listar(self) -> list[UsuarioRead]:
        usuarios = await self.repository.list_active()
        return [to_read(u) for u in usuarios]

    async def obter(self, usuario_id: UUID) -> UsuarioRead:
        usuario = await self._get_visible(usuario_id, "obter")
        return to_read(usuario)

    async def criar(self, payload: UsuarioCreate) -> UsuarioRead:
        violations = validate_create(payload, today=self._today())
        if violations:
            raise UsuarioValidationError(
                violations, ErrorContext(operation="criar"),
            )

        email = normalize_email(payload.email)
        if await self.repository.find_by_email(email) is not None:
            raise EmailConflictError(email, ErrorContext(operation="criar"))

        usuario = Usuario(
            **creation_fields(create_payload_to_fields(payload), now=self._now()),
        )
        try:
            usuario = await self.repository.insert(usuario)
        except IntegrityError:
            raise EmailConflictError(email, ErrorContext(operation="criar"))

        logger.info(
            f"Usuario {usuario.id} created",
            extra={"usuario_id": str(usuario.id), "operation": "criar"},
        )
        return to_read(usuario)

    async def atualizar(
        self, usuario_id: UUID, payload: UsuarioUpdate,
    ) -> UsuarioRead:
        violations = validate_update(payload, today=self._today())
        if violations:
            raise UsuarioValidationError(
                violations,
                ErrorContext(usuario_id=str(usuario_id), operation="atualizar"),
            )

        usuario = await self._get_visible(usuario_id, "atualizar")

        email = normalize_email(payload.email)
        if email != usuario.email:
            holder = await self.repository.find_by_email(email)
            if holder is not None and holder.id != usuario.id:
                raise EmailConflictError(
                    email,
                    ErrorContext(usuario_id=str(usuario_id), operation="atualizar"),
                )

        apply_update(usuario, payload, now=self._now())
        try:
            usuario = await self.repository.update(usuario)
        except IntegrityError:
            raise EmailConflictError(
                email,
                ErrorContext(usuario_id=str(usuario_id), operation="atualizar"),
            )

        logger.info(
            f"Usuario {usuario_id} updated",
            extra={"usuario_id": str(usuario_id), "operation": "atualizar"},
        )
        return to_read(usuario)

    async def remover(self, usuario_id: UUID) -> None:
        """Soft delete. A second call on the same id is not-found."""
        usuario = await self._get_visible(usuario_id, "remover")
        apply_delete(usuario)
        await self.repository.update(usuario)
        logger.info(
            f"Usuario {usuario_id} deactivated",
            extra={"usuario_id": str(usuario_id), "operation": "remover"},
        )

    async def _get_visible(self, usuario_id: UUID, operation: str) -> UsuarioLike:
        usuario = await self.repository.find_by_id(usuario_id)
        if not is_visible(usuario):
            raise UsuarioNotFoundError(
                usuario_id, ErrorContext(operation=operation),
            )
        return usuario
