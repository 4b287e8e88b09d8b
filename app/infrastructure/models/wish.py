"""SQLAlchemy model for participant wishes."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base


class WishModel(Base):
    """Database representation of a gift wish."""

    __tablename__ = "wish"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer,
        ForeignKey("user.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(String(200), nullable=False)
    info_link = Column(String(500), nullable=True)

    user = relationship("UserModel", back_populates="wishes")


__all__ = ["WishModel"]
