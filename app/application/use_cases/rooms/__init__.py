"""Use cases for the room lifecycle."""

from .create_room import create_room
from .draw_room import assign_gift_recipients, draw_room
from .get_room import get_room

__all__ = [
    "assign_gift_recipients",
    "create_room",
    "draw_room",
    "get_room",
]
