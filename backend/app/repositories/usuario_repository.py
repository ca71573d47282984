"""Usuario Repository — the five persistence operations the service consumes.

Invariants:
    - One repository per request-scoped AsyncSession; holds no other state
    - insert/update commit immediately; IntegrityError is rolled back and re-raised
      so the service can translate it (email unique index)
    - find_by_id / find_by_email return inactive rows too — visibility is a
      lifecycle decision, not a query filter
    - list_active orders by data_criacao (storage insertion order)
"""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.usuario import Usuario

logger = logging.getLogger(__name__)


class UsuarioRepository:
    """Async SQLAlchemy store for Usuario rows."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, usuario_id: UUID) -> Usuario | None:
        result = await self.db.execute(
            select(Usuario).where(Usuario.id == usuario_id),
        )
        return result.scalar_one_or_none()

    async def find_by_email(self, email: str) -> Usuario | None:
        result = await self.db.execute(
            select(Usuario).where(Usuario.email == email),
        )
        return result.scalar_one_or_none()

    async def list_active(self) -> list[Usuario]:
        result = await self.db.execute(
            select(Usuario)
            .where(Usuario.ativo.is_(True))
            .order_by(Usuario.data_criacao),
        )
        return list(result.scalars().all())

    async def insert(self, usuario: Usuario) -> Usuario:
        self.db.add(usuario)
        await self._commit("insert")
        await self.db.refresh(usuario)
        return usuario

    async def update(self, usuario: Usuario) -> Usuario:
        await self._commit("update")
        await self.db.refresh(usuario)
        return usuario

    async def _commit(self, operation: str) -> None:
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.info(
                f"Usuario {operation} hit a unique constraint",
                extra={"operation": operation},
            )
            raise
