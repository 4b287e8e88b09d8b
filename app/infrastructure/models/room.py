"""SQLAlchemy model for the room table."""

from sqlalchemy import Column, Date, DateTime, Integer, String
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base
from app.utils import utc_now_naive


class RoomModel(Base):
    """Database representation of a gift exchange room."""

    __tablename__ = "room"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(40), nullable=False)
    description = Column(String(200), nullable=False)
    invitation_code = Column(String(64), nullable=False, unique=True, index=True)
    gift_exchange_date = Column(Date, nullable=False)
    gift_maximum_budget = Column(Integer, nullable=False, default=0)
    # Plain integer to avoid a room <-> user foreign key cycle.
    admin_id = Column(Integer, nullable=True)
    closed_on = Column(DateTime, nullable=True)
    created_on = Column(DateTime, nullable=False, default=utc_now_naive)
    modified_on = Column(DateTime, nullable=False, default=utc_now_naive, onupdate=utc_now_naive)

    users = relationship(
        "UserModel",
        back_populates="room",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="UserModel.id",
    )


__all__ = ["RoomModel"]
