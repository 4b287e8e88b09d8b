"""Use case for reading the room a participant belongs to."""

from app.domain.entities import Room
from app.domain.repositories import RoomRepository
from app.domain.results import DomainError, Result


async def get_room(
    *, room_repository: RoomRepository, user_code: str
) -> Result[Room, DomainError]:
    """Return the room of the participant identified by ``user_code``."""

    return await room_repository.get_by_user_code(user_code)
