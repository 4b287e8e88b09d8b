"""FastAPI dependency utilities."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.database import get_db
from app.infrastructure.repositories import RoomRepository, UserRepository


def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


def get_room_repository(db: AsyncSession = Depends(get_db)) -> RoomRepository:
    """Return a room repository sharing the request's session."""

    return RoomRepository(db)
