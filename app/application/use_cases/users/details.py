"""Personal details supplied when a participant enters a room."""

from __future__ import annotations

from dataclasses import dataclass, field

from app.domain.entities import User, Wish


@dataclass(frozen=True)
class ParticipantDetails:
    first_name: str
    last_name: str
    phone: str
    delivery_info: str
    want_surprise: bool
    email: str | None = None
    interests: str | None = None
    wishes: tuple[Wish, ...] = field(default_factory=tuple)

    def to_user(self, *, room_id: int | None, authorization_code: str, is_admin: bool) -> User:
        """Build a not yet persisted :class:`User` from these details."""

        return User(
            id=None,
            room_id=room_id,
            authorization_code=authorization_code,
            is_admin=is_admin,
            first_name=self.first_name,
            last_name=self.last_name,
            phone=self.phone,
            email=self.email,
            delivery_info=self.delivery_info,
            want_surprise=self.want_surprise,
            # Surprise seekers describe interests; everyone else lists wishes.
            interests=self.interests if self.want_surprise else None,
            gift_recipient_user_id=None,
            created_on=None,
            modified_on=None,
            wishes=[] if self.want_surprise else list(self.wishes),
        )


__all__ = ["ParticipantDetails"]
