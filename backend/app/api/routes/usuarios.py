"""Usuarios Routes — thin HTTP adapters over UsuarioService.

Invariants:
    - Routes never contain business logic: every decision is made by UsuarioService
    - Domain errors propagate to the global handlers (api/error_handlers.py), which map
      them to 400/404/409/500 — routes never build error bodies
    - POST returns 201 with Location: /usuarios/{id}; DELETE returns 204 with no body
    - A path id that is not a UUID cannot name a record → 404
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import ErrorContext, UsuarioNotFoundError
from app.infrastructure.database import get_db
from app.repositories.usuario_repository import UsuarioRepository
from app.schemas.usuario import UsuarioCreate, UsuarioRead, UsuarioUpdate
from app.services.usuario_service import UsuarioService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/usuarios", tags=["usuarios"])


def get_usuario_service(db: AsyncSession = Depends(get_db)) -> UsuarioService:
    """Request-scoped service over the request's DB session."""
    return UsuarioService(UsuarioRepository(db))


def _parse_id(usuario_id: str, operation: str) -> UUID:
    try:
        return UUID(usuario_id)
    except ValueError:
        raise UsuarioNotFoundError(usuario_id, ErrorContext(operation=operation))


@router.get("", response_model=list[UsuarioRead])
async def listar_usuarios(
    service: UsuarioService = Depends(get_usuario_service),
):
    """Lista todos os usuários ativos."""
    return await service.listar()


@router.get(
    "/{usuario_id}", response_model=UsuarioRead,
    responses={404: {"description": "Usuário não encontrado"}},
)
async def obter_usuario(
    usuario_id: str, service: UsuarioService = Depends(get_usuario_service),
):
    """Busca um usuário ativo por ID."""
    return await service.obter(_parse_id(usuario_id, "obter"))


@router.post(
    "", response_model=UsuarioRead,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Dados inválidos"},
        409: {"description": "Email já cadastrado"},
    },
)
async def criar_usuario(
    body: UsuarioCreate,
    response: Response,
    service: UsuarioService = Depends(get_usuario_service),
):
    """Cria um novo usuário."""
    usuario = await service.criar(body)
    response.headers["Location"] = f"{router.prefix}/{usuario.id}"
    return usuario


@router.put(
    "/{usuario_id}", response_model=UsuarioRead,
    responses={
        400: {"description": "Dados inválidos"},
        404: {"description": "Usuário não encontrado"},
        409: {"description": "Email já cadastrado"},
    },
)
async def atualizar_usuario(
    usuario_id: str,
    body: UsuarioUpdate,
    service: UsuarioService = Depends(get_usuario_service),
):
    """Atualiza um usuário ativo (a senha nunca é alterada)."""
    return await service.atualizar(_parse_id(usuario_id, "atualizar"), body)


@router.delete(
    "/{usuario_id}", status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"description": "Usuário não encontrado"}},
)
async def remover_usuario(
    usuario_id: str, service: UsuarioService = Depends(get_usuario_service),
):
    """Remove um usuário (soft delete)."""
    await service.remover(_parse_id(usuario_id, "remover"))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
