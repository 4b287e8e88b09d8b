"""Domain entity representing a gift wish."""

from dataclasses import dataclass


@dataclass
class Wish:
    """Something a participant would like to receive."""

    id: int | None
    name: str
    info_link: str | None = None


__all__ = ["Wish"]
