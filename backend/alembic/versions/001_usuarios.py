"""Initial schema — usuarios table with unique email and soft-delete flag.

Revision ID: 001_usuarios
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_usuarios"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "usuarios",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("nome", sa.String(100), nullable=False),
        sa.Column("email", sa.String(254), nullable=False),
        sa.Column("senha", sa.Text(), nullable=False),
        sa.Column("data_nascimento", sa.Date, nullable=False),
        sa.Column("telefone", sa.String(20), nullable=True),
        sa.Column("data_criacao", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("data_atualizacao", sa.DateTime(timezone=True), nullable=True),
        sa.Column("ativo", sa.Boolean, nullable=False, server_default=sa.true()),
    )
    op.create_index("ix_usuarios_email", "usuarios", ["email"], unique=True)
    op.create_index("ix_usuarios_ativo", "usuarios", ["ativo"])


def downgrade() -> None:
    op.drop_index("ix_usuarios_ativo", table_name="usuarios")
    op.drop_index("ix_usuarios_email", table_name="usuarios")
    op.drop_table("usuarios")
