"""Catalog metadata repository."""

from sqlalchemy.ext.asyncio import AsyncSession

from catbreeds.models import CatalogMetadata
from catbreeds.repositories.base import BaseRepository


class MetadataRepository(BaseRepository[CatalogMetadata]):
    """Repository for CatalogMetadata model."""

    def __init__(self, session: AsyncSession):
        super().__init__(CatalogMetadata, session)

    async def get_value(self, key: str) -> str | None:
        entry = await self.session.get(CatalogMetadata, key)
        return entry.value if entry else None

    async def set_value(self, key: str, value: str) -> CatalogMetadata:
        entry = await self.session.get(CatalogMetadata, key)
        if entry is None:
            return await self.create({"key": key, "value": value})
        entry.value = value
        await self.session.flush()
        return entry
