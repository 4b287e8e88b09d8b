"""Aggregate application use cases."""

from .rooms import create_room, draw_room, get_room
from .users import create_user, delete_user, get_user, list_users

__all__ = [
    "create_room",
    "create_user",
    "delete_user",
    "draw_room",
    "get_room",
    "get_user",
    "list_users",
]
