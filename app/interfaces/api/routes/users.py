"""Rutas para administrar los participantes de una sala."""

import logging

from fastapi import APIRouter, Depends, Path, Query, Response, status

from app.application.use_cases.users import (
    create_user as create_user_uc,
    delete_user as delete_user_uc,
    get_user as get_user_uc,
    list_users as list_users_uc,
)
from app.config import Settings, get_settings
from app.infrastructure.repositories import RoomRepository, UserRepository
from app.interfaces.api.dependencies import get_room_repository, get_user_repository
from app.interfaces.api.routes_helpers import (
    error_to_http_exception,
    to_participant_details,
    to_user_read,
)
from app.interfaces.api.schemas import UserCreate, UserRead

router = APIRouter(prefix="/users", tags=["users"])
logger = logging.getLogger(__name__)

USER_CODE_QUERY = Query(
    ..., alias="userCode", min_length=1, description="Código de autorización del participante"
)


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def join_room(
    user_in: UserCreate,
    room_code: str = Query(..., alias="roomCode", min_length=1),
    room_repository: RoomRepository = Depends(get_room_repository),
    user_repository: UserRepository = Depends(get_user_repository),
    settings: Settings = Depends(get_settings),
):
    """Une al participante a la sala identificada por su código de invitación."""

    result = await create_user_uc(
        room_repository=room_repository,
        user_repository=user_repository,
        room_code=room_code,
        details=to_participant_details(user_in),
        max_participants=settings.max_participants,
    )
    if result.is_failure:
        raise error_to_http_exception(result.error)
    return to_user_read(result.value, include_details=True)


@router.get("", response_model=list[UserRead])
async def list_users(
    user_code: str = USER_CODE_QUERY,
    user_repository: UserRepository = Depends(get_user_repository),
):
    """Devuelve los participantes de la sala del solicitante."""

    result = await list_users_uc(user_repository=user_repository, user_code=user_code)
    if result.is_failure:
        raise error_to_http_exception(result.error)

    caller = result.value.caller
    return [
        to_user_read(user, include_details=caller.is_admin or user.id == caller.id)
        for user in result.value.users
    ]


@router.get("/{user_id}", response_model=UserRead)
async def read_user(
    user_id: int = Path(...),
    user_code: str = USER_CODE_QUERY,
    user_repository: UserRepository = Depends(get_user_repository),
):
    """Obtiene al participante identificado por ``user_id``."""

    result = await get_user_uc(
        user_repository=user_repository, user_code=user_code, user_id=user_id
    )
    if result.is_failure:
        raise error_to_http_exception(result.error)
    return to_user_read(result.value.user, include_details=result.value.can_see_details)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: int = Path(...),
    user_code: str = USER_CODE_QUERY,
    room_repository: RoomRepository = Depends(get_room_repository),
    user_repository: UserRepository = Depends(get_user_repository),
):
    """Elimina al participante indicado; solo el administrador puede hacerlo."""

    result = await delete_user_uc(
        user_repository=user_repository,
        room_repository=room_repository,
        user_code=user_code,
        user_id=user_id,
    )
    if result.is_failure:
        logger.info("Delete of user %s rejected: %s", user_id, result.error.message)
        raise error_to_http_exception(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
