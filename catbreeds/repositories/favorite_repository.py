"""Favorite repository."""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from catbreeds.models import Breed, Favorite
from catbreeds.repositories.base import BaseRepository


class FavoriteRepository(BaseRepository[Favorite]):
    """Repository for Favorite model."""

    def __init__(self, session: AsyncSession):
        super().__init__(Favorite, session)

    async def exists(self, breed_id: int) -> bool:
        """Check whether a breed is favorited."""
        result = await self.session.execute(
            select(Favorite.id).where(Favorite.breed_id == breed_id)
        )
        return result.scalar_one_or_none() is not None

    async def add(self, breed_id: int) -> bool:
        """Insert a favorite marker; returns False if it was already present."""
        if await self.exists(breed_id):
            return False
        await self.create({"breed_id": breed_id})
        return True

    async def remove(self, breed_id: int) -> bool:
        """Delete a favorite marker; returns False if there was none."""
        result = await self.session.execute(
            delete(Favorite).where(Favorite.breed_id == breed_id)
        )
        return result.rowcount > 0

    async def list_breeds(self) -> list[Breed]:
        """Favorited breeds, most recently favorited first."""
        query = (
            select(Breed)
            .join(Favorite, Favorite.breed_id == Breed.id)
            .options(selectinload(Breed.personality))
            .order_by(Favorite.created_at.desc(), Favorite.id.desc())
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())
