"""Usuario Lifecycle Policy — state transitions and timestamp rules.

States: ACTIVE, INACTIVE (terminal). Transitions:
    ∅      → ACTIVE    creation_fields  (new id, data_criacao = now, ativo, no data_atualizacao)
    ACTIVE → ACTIVE    apply_update     (mapping overwrite, data_atualizacao = now)
    ACTIVE → INACTIVE  apply_delete     (ativo = False)

Invariants:
    - No IO: callers build/persist the entity
    - now is injected; defaults to UTC wall clock
    - A transition from INACTIVE raises InvalidTransitionError; the service checks
      is_visible first and reports not-found instead
    - There is no INACTIVE → ACTIVE transition
"""

import uuid
from datetime import datetime, timezone

from app.core.domain_types import UsuarioStatus
from app.core.errors import InvalidTransitionError
from app.core.map_usuario import apply_update_payload
from app.core.repository_protocols import UsuarioLike
from app.schemas.usuario import UsuarioUpdate


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def status_of(usuario: UsuarioLike) -> UsuarioStatus:
    return UsuarioStatus.ACTIVE if usuario.ativo else UsuarioStatus.INACTIVE


def is_visible(usuario: UsuarioLike | None) -> bool:
    """Exists and is ACTIVE — the only records reads/updates/deletes may see."""
    return usuario is not None and status_of(usuario) == UsuarioStatus.ACTIVE


def _require_active(usuario: UsuarioLike, transition: str) -> None:
    state = status_of(usuario)
    if state != UsuarioStatus.ACTIVE:
        raise InvalidTransitionError(transition, state.value)


def creation_fields(mapped: dict, now: datetime | None = None) -> dict:
    """Complete entity fields for ∅ → ACTIVE: mapped payload + lifecycle fields.

    Lifecycle fields always win over anything present in `mapped`.
    """
    return {
        **mapped,
        "id": uuid.uuid4(),
        "data_criacao": now or _utcnow(),
        "data_atualizacao": None,
        "ativo": True,
    }


def apply_update(
    usuario: UsuarioLike, payload: UsuarioUpdate, now: datetime | None = None,
) -> UsuarioLike:
    _require_active(usuario, "update")
    apply_update_payload(usuario, payload)
    usuario.data_atualizacao = now or _utcnow()
    return usuario


def apply_delete(usuario: UsuarioLike) -> UsuarioLike:
    """Soft delete: flip ativo, keep the row."""
    _require_active(usuario, "delete")
    usuario.ativo = False
    return usuario
