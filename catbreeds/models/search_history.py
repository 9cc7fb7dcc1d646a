"""Search history model."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from catbreeds.database import Base
from catbreeds.models.base import utcnow


class SearchHistory(Base):
    """Search history log; newest entries carry the highest id."""

    __tablename__ = "search_history"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    query: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )

    def __repr__(self) -> str:
        return f"<SearchHistory(id={self.id}, query='{self.query}')>"
