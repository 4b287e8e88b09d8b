"""Use cases for managing room participants."""

from .create_user import create_user
from .delete_user import delete_user
from .details import ParticipantDetails
from .get_user import UserLookup, get_user
from .list_users import RoomUsers, list_users

__all__ = [
    "ParticipantDetails",
    "RoomUsers",
    "UserLookup",
    "create_user",
    "delete_user",
    "get_user",
    "list_users",
]
