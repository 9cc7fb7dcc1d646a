"""Favorite model."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from catbreeds.database import Base
from catbreeds.models.base import utcnow


class Favorite(Base):
    """Favorite marker; a breed is favorited at most once."""

    __tablename__ = "favorites"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    breed_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("breeds.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )

    def __repr__(self) -> str:
        return f"<Favorite(id={self.id}, breed_id={self.breed_id})>"
