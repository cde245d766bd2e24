"""
User CRUD endpoints, mounted under `/api/users` (see `api/main.py`).
"""

from __future__ import annotations

import logging

import asyncpg
from fastapi import APIRouter, Depends, Path, status
from fastapi.responses import JSONResponse

from core import db

from . import schemas, service

logger = logging.getLogger(__name__)

router = APIRouter()

REQUIRED_FIELDS_MESSAGE = "Nome e email são obrigatórios"
NOT_FOUND_MESSAGE = "Usuário não encontrado"
DELETED_MESSAGE = "Usuário deletado com sucesso"

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": schemas.ErrorResponse, "description": NOT_FOUND_MESSAGE}}
_BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": schemas.ErrorResponse, "description": REQUIRED_FIELDS_MESSAGE}}
_SERVER_ERROR = {status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": schemas.ErrorResponse}}


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _failed(message: str) -> JSONResponse:
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, message)


@router.get(
    "",
    response_model=list[schemas.User],
    summary="Retorna todos os usuários.",
    responses=_SERVER_ERROR,
)
async def list_users(
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> list[schemas.User] | JSONResponse:
    result = await service.list_users(pool)
    if result.failed:
        logger.error("users_list_failed", exc_info=result.error)
        return _failed("Erro ao obter usuários")
    return result.value or []


@router.get(
    "/{user_id}",
    response_model=schemas.User,
    summary="Retorna um usuário pelo ID.",
    responses={**_NOT_FOUND, **_SERVER_ERROR},
)
async def get_user(
    user_id: str = Path(..., description="ID do usuário"),
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> schemas.User | JSONResponse:
    result = await service.get_user(pool, user_id)
    if result.failed:
        logger.error("user_get_failed user_id=%s", user_id, exc_info=result.error)
        return _failed("Erro ao obter usuário")
    if not result.found:
        return _error(status.HTTP_404_NOT_FOUND, NOT_FOUND_MESSAGE)
    return result.value


@router.post(
    "",
    response_model=schemas.User,
    status_code=status.HTTP_201_CREATED,
    summary="Cria um novo usuário.",
    responses={**_BAD_REQUEST, **_SERVER_ERROR},
)
async def create_user(
    payload: schemas.UserPayload | None = None,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> schemas.User | JSONResponse:
    if not service.has_required_fields(payload):
        return _error(status.HTTP_400_BAD_REQUEST, REQUIRED_FIELDS_MESSAGE)

    result = await service.create_user(pool, name=payload.name, email=payload.email)
    if result.failed:
        logger.error("user_create_failed", exc_info=result.error)
        return _failed("Erro ao adicionar usuário")
    return result.value


@router.put(
    "/{user_id}",
    response_model=schemas.User,
    summary="Atualiza um usuário existente.",
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_SERVER_ERROR},
)
async def update_user(
    user_id: str = Path(..., description="ID do usuário"),
    payload: schemas.UserPayload | None = None,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> schemas.User | JSONResponse:
    if not service.has_required_fields(payload):
        return _error(status.HTTP_400_BAD_REQUEST, REQUIRED_FIELDS_MESSAGE)

    result = await service.update_user(pool, user_id, name=payload.name, email=payload.email)
    if result.failed:
        logger.error("user_update_failed user_id=%s", user_id, exc_info=result.error)
        return _failed("Erro ao atualizar usuário")
    if not result.found:
        return _error(status.HTTP_404_NOT_FOUND, NOT_FOUND_MESSAGE)
    return result.value


@router.delete(
    "/{user_id}",
    response_model=schemas.MessageResponse,
    summary="Exclui um usuário pelo ID.",
    responses={**_NOT_FOUND, **_SERVER_ERROR},
)
async def delete_user(
    user_id: str = Path(..., description="ID do usuário"),
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> schemas.MessageResponse | JSONResponse:
    result = await service.delete_user(pool, user_id)
    if result.failed:
        logger.error("user_delete_failed user_id=%s", user_id, exc_info=result.error)
        return _failed("Erro ao deletar usuário")
    if not result.found:
        return _error(status.HTTP_404_NOT_FOUND, NOT_FOUND_MESSAGE)
    return schemas.MessageResponse(message=DELETED_MESSAGE)
