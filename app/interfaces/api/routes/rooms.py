"""Rutas para crear, consultar y sortear salas."""

import logging

from fastapi import APIRouter, Depends, Query, status

from app.application.use_cases.rooms import (
    create_room as create_room_uc,
    draw_room as draw_room_uc,
    get_room as get_room_uc,
)
from app.config import Settings, get_settings
from app.infrastructure.repositories import RoomRepository, UserRepository
from app.interfaces.api.dependencies import get_room_repository, get_user_repository
from app.interfaces.api.routes_helpers import (
    error_to_http_exception,
    to_participant_details,
    to_room_read,
)
from app.interfaces.api.schemas import RoomCreationRequest, RoomCreationResponse, RoomRead

router = APIRouter(prefix="/rooms", tags=["rooms"])
logger = logging.getLogger(__name__)


@router.post("", response_model=RoomCreationResponse, status_code=status.HTTP_201_CREATED)
async def create_room(
    room_in: RoomCreationRequest,
    room_repository: RoomRepository = Depends(get_room_repository),
):
    """Crea una sala y devuelve el código de autorización de su administrador."""

    result = await create_room_uc(
        room_repository=room_repository,
        name=room_in.room.name,
        description=room_in.room.description,
        gift_exchange_date=room_in.room.gift_exchange_date,
        gift_maximum_budget=room_in.room.gift_maximum_budget,
        admin=to_participant_details(room_in.admin_user),
    )
    if result.is_failure:
        raise error_to_http_exception(result.error)

    room = result.value
    return RoomCreationResponse(
        room=to_room_read(room), user_code=room.admin.authorization_code
    )


@router.get("", response_model=RoomRead)
async def read_room(
    user_code: str = Query(..., alias="userCode", min_length=1),
    room_repository: RoomRepository = Depends(get_room_repository),
):
    """Devuelve la sala del participante identificado por ``userCode``."""

    result = await get_room_uc(room_repository=room_repository, user_code=user_code)
    if result.is_failure:
        raise error_to_http_exception(result.error)
    return to_room_read(result.value)


@router.post("/draw", response_model=RoomRead)
async def draw_room(
    user_code: str = Query(..., alias="userCode", min_length=1),
    room_repository: RoomRepository = Depends(get_room_repository),
    user_repository: UserRepository = Depends(get_user_repository),
    settings: Settings = Depends(get_settings),
):
    """Sortea los destinatarios de regalos y cierra la sala."""

    result = await draw_room_uc(
        user_repository=user_repository,
        room_repository=room_repository,
        user_code=user_code,
        min_participants=settings.min_participants_for_draw,
    )
    if result.is_failure:
        logger.info("Draw rejected: %s", result.error.message)
        raise error_to_http_exception(result.error)
    return to_room_read(result.value)
