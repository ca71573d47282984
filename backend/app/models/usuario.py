"""Usuario ORM — persisted user record with soft-delete flag.

Invariants:
    - id is a UUID primary key, assigned by the lifecycle policy at creation
    - email is unique across ALL rows (active and inactive) and stored lowercase
    - ativo = False is the soft-delete tombstone; rows are never physically deleted
    - data_atualizacao is NULL until the first update

Design Decisions:
    - No ORM-level onupdate for data_atualizacao: core/usuario_lifecycle.py owns timestamps
    - Unique index on email is the authoritative uniqueness guard; the service pre-check
      only produces the friendly 409 early
"""

import uuid
from datetime import date, datetime, timezone

from sqlalchemy import String, Text, Boolean, Date, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from app.db.base import Base


class Usuario(Base):
    """Usuario record — visible to reads only while ativo."""
    __tablename__ = "usuarios"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    nome: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(
        String(254), nullable=False, unique=True, index=True,
    )
    senha: Mapped[str] = mapped_column(Text, nullable=False)
    data_nascimento: Mapped[date] = mapped_column(Date, nullable=False)
    telefone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    data_criacao: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    data_atualizacao: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    ativo: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, index=True,
    )

    def __repr__(self) -> str:
        return f"<Usuario id={self.id} email={self.email!r} ativo={self.ativo}>"
