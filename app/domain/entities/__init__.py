"""Domain entities exposed by the application."""

from .room import Room
from .user import User
from .wish import Wish

__all__ = [
    "Room",
    "User",
    "Wish",
]
