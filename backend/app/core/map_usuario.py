"""Usuario Mapping Policy — explicit field transforms between payloads and the entity.

Invariants:
    - Create-payload → entity fields: nome, senha, data_nascimento, telefone verbatim;
      email lowercased; id, data_criacao, data_atualizacao, ativo NEVER produced here
    - Update-payload → entity: nome, data_nascimento, telefone verbatim; email lowercased;
      id, data_criacao, senha NEVER touched
    - Entity → read-shape: public fields copied verbatim; senha never released
    - No IO: functions only read/assign attributes
"""

from app.core.repository_protocols import UsuarioLike
from app.schemas.usuario import UsuarioCreate, UsuarioRead, UsuarioUpdate


def normalize_email(email: str) -> str:
    """Canonical stored form of an email address."""
    return email.lower()


def create_payload_to_fields(payload: UsuarioCreate) -> dict:
    """Entity fields derived from a create-payload (lifecycle fields excluded)."""
    return {
        "nome": payload.nome,
        "email": normalize_email(payload.email),
        "senha": payload.senha,
        "data_nascimento": payload.data_nascimento,
        "telefone": payload.telefone,
    }


def apply_update_payload(usuario: UsuarioLike, payload: UsuarioUpdate) -> UsuarioLike:
    """Overwrite mutable fields in place."""
    usuario.nome = payload.nome
    usuario.email = normalize_email(payload.email)
    usuario.data_nascimento = payload.data_nascimento
    usuario.telefone = payload.telefone
    return usuario


def to_read(usuario: UsuarioLike) -> UsuarioRead:
    return UsuarioRead(
        id=usuario.id,
        nome=usuario.nome,
        email=usuario.email,
        data_nascimento=usuario.data_nascimento,
        telefone=usuario.telefone,
        data_criacao=usuario.data_criacao,
        data_atualizacao=usuario.data_atualizacao,
        ativo=usuario.ativo,
    )
