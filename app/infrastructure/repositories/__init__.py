"""Repository implementations for infrastructure layer."""

from .room_repository import RoomRepository
from .user_repository import UserRepository

__all__ = [
    "RoomRepository",
    "UserRepository",
]
