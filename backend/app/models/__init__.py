"""ORM Models — SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)
    - Every model imported here so Base.metadata is complete for create_all and alembic
"""

from app.models.usuario import Usuario  # noqa: F401
