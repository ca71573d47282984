"""Usuario Mapping — tests for explicit payload/entity/read-shape transforms.

Tests cover:
    - create-payload → fields: email lowercased, other fields verbatim, no lifecycle fields
    - update-payload → entity: never touches id, data_criacao, senha
    - entity → read-shape: verbatim copy, senha never released
"""

from dataclasses import dataclass
from datetime import date, datetime, timezone
from uuid import UUID, uuid4

from app.core.map_usuario import (
    apply_update_payload,
    create_payload_to_fields,
    normalize_email,
    to_read,
)
from app.schemas.usuario import UsuarioCreate, UsuarioUpdate


@dataclass
class _Usuario:
    id: UUID
    nome: str
    email: str
    senha: str
    data_nascimento: date
    telefone: str | None
    data_criacao: datetime
    data_atualizacao: datetime | None
    ativo: bool


def _make_usuario() -> _Usuario:
    return _Usuario(
        id=uuid4(),
        nome="João Pereira",
        email="joao@exemplo.com",
        senha="segredo123",
        data_nascimento=date(1985, 3, 2),
        telefone=None,
        data_criacao=datetime(2026, 1, 1, tzinfo=timezone.utc),
        data_atualizacao=None,
        ativo=True,
    )


def test_normalize_email_lowercases():
    assert normalize_email("A@X.com") == "a@x.com"


def test_create_payload_maps_fields_and_lowercases_email():
    payload = UsuarioCreate(
        nome="João Pereira",
        email="Joao.Pereira@Exemplo.COM",
        senha="Segredo123",
        data_nascimento=date(1985, 3, 2),
        telefone="(21) 99876-5432",
    )
    fields = create_payload_to_fields(payload)
    assert fields == {
        "nome": "João Pereira",
        "email": "joao.pereira@exemplo.com",
        "senha": "Segredo123",
        "data_nascimento": date(1985, 3, 2),
        "telefone": "(21) 99876-5432",
    }


def test_create_payload_never_produces_lifecycle_fields():
    payload = UsuarioCreate(nome="Ana", email="a@x.com", senha="123456")
    fields = create_payload_to_fields(payload)
    for lifecycle_field in ("id", "data_criacao", "data_atualizacao", "ativo"):
        assert lifecycle_field not in fields


def test_update_payload_ignores_senha_even_if_sent():
    payload = UsuarioUpdate.model_validate({
        "nome": "João P.",
        "email": "JOAO@EXEMPLO.COM",
        "dataNascimento": "1985-03-02",
        "senha": "outra-senha",
    })
    usuario = _make_usuario()
    original_id = usuario.id
    apply_update_payload(usuario, payload)
    assert usuario.senha == "segredo123"
    assert usuario.id == original_id
    assert usuario.data_criacao == datetime(2026, 1, 1, tzinfo=timezone.utc)
    assert usuario.email == "joao@exemplo.com"
    assert usuario.nome == "João P."


def test_update_payload_does_not_set_data_atualizacao():
    usuario = _make_usuario()
    apply_update_payload(
        usuario,
        UsuarioUpdate(nome="Ana", email="a@x.com", data_nascimento=date(1990, 1, 1)),
    )
    assert usuario.data_atualizacao is None


def test_to_read_copies_public_fields_and_hides_senha():
    usuario = _make_usuario()
    read = to_read(usuario)
    assert read.id == usuario.id
    assert read.email == usuario.email
    assert read.ativo is True
    assert read.data_atualizacao is None
    dumped = read.model_dump(by_alias=True)
    assert "senha" not in dumped
    assert set(dumped) == {
        "id", "nome", "email", "dataNascimento", "telefone",
        "dataCriacao", "dataAtualizacao", "ativo",
    }
