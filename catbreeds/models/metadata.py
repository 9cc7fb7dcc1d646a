"""Catalog metadata model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from catbreeds.database import Base
from catbreeds.models.base import TimestampMixin


class CatalogMetadata(Base, TimestampMixin):
    """Key/value pairs describing the stored catalog (e.g. seed version)."""

    __tablename__ = "catalog_metadata"

    key: Mapped[str] = mapped_column(String(50), primary_key=True)
    value: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<CatalogMetadata(key='{self.key}', value='{self.value}')>"
