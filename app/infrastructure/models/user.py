"""SQLAlchemy model for the user table."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base
from app.utils import utc_now_naive


class UserModel(Base):
    """Database representation of a room participant."""

    __tablename__ = "user"

    id = Column(Integer, primary_key=True, index=True)
    room_id = Column(
        Integer,
        ForeignKey("room.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    authorization_code = Column(String(64), nullable=False, unique=True, index=True)
    is_admin = Column(Boolean, nullable=False, default=False)
    first_name = Column(String(40), nullable=False)
    last_name = Column(String(40), nullable=False)
    phone = Column(String(20), nullable=False)
    email = Column(String(120), nullable=True)
    delivery_info = Column(String(200), nullable=False)
    want_surprise = Column(Boolean, nullable=False, default=False)
    interests = Column(Text, nullable=True)
    gift_recipient_user_id = Column(Integer, nullable=True)
    created_on = Column(DateTime, nullable=False, default=utc_now_naive)
    modified_on = Column(DateTime, nullable=False, default=utc_now_naive, onupdate=utc_now_naive)

    room = relationship("RoomModel", back_populates="users")
    wishes = relationship(
        "WishModel",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="WishModel.id",
    )


__all__ = ["UserModel"]
