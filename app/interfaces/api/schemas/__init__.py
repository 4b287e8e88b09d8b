from .room import RoomCreate, RoomCreationRequest, RoomCreationResponse, RoomRead
from .user import UserCreate, UserRead, WishCreate, WishRead

__all__ = [
    "RoomCreate",
    "RoomCreationRequest",
    "RoomCreationResponse",
    "RoomRead",
    "UserCreate",
    "UserRead",
    "WishCreate",
    "WishRead",
]
