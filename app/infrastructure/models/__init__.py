"""ORM models used by the application infrastructure."""

from .room import RoomModel
from .user import UserModel
from .wish import WishModel

__all__ = [
    "RoomModel",
    "UserModel",
    "WishModel",
]
