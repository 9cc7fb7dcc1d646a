"""Breed repository."""

from typing import Any

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from catbreeds.models import Breed, BreedPersonality
from catbreeds.repositories.base import BaseRepository

# Categorical columns that can feed filter option sets.
DISTINCT_FIELDS = {
    "origin": Breed.origin,
    "coat_length": Breed.coat_length,
    "activity_level": Breed.activity_level,
    "body_type": Breed.body_type,
    "grooming_needs": Breed.grooming_needs,
}

SEARCH_COLUMNS = (
    Breed.name,
    Breed.origin,
    Breed.temperament,
    Breed.coat_pattern,
    Breed.health_issues,
    Breed.genetic_info,
)


class BreedRepository(BaseRepository[Breed]):
    """Repository for Breed model."""

    def __init__(self, session: AsyncSession):
        super().__init__(Breed, session)

    async def get(self, id: int) -> Breed | None:
        """Get breed with personality scores loaded."""
        result = await self.session.execute(
            select(Breed).options(selectinload(Breed.personality)).where(Breed.id == id)
        )
        return result.scalar_one_or_none()

    async def get_by_code(self, code: str) -> Breed | None:
        """Get breed by registry code."""
        result = await self.session.execute(
            select(Breed)
            .options(selectinload(Breed.personality))
            .where(Breed.code == code)
            .order_by(Breed.id)
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def list_by_name(self, filters: dict[str, Any] | None = None) -> list[Breed]:
        """Breeds ordered by name ascending, optionally filtered by column equality."""
        query = self._apply_filters(
            select(Breed).options(selectinload(Breed.personality)), filters
        ).order_by(Breed.name, Breed.id)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def search(self, text: str) -> list[Breed]:
        """Case-insensitive substring search across the free-text columns."""
        query = (
            select(Breed)
            .options(selectinload(Breed.personality))
            .where(
                or_(
                    *(
                        column.icontains(text, autoescape=True)
                        for column in SEARCH_COLUMNS
                    )
                )
            )
            .order_by(Breed.name, Breed.id)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def distinct_values(self, field: str) -> list[str]:
        """Sorted distinct values of a categorical column."""
        column = DISTINCT_FIELDS[field]
        result = await self.session.execute(
            select(column).where(column.is_not(None)).distinct().order_by(column)
        )
        return list(result.scalars().all())

    async def create_with_personality(
        self, data: dict[str, Any], personality: dict[str, int] | None = None
    ) -> Breed:
        """Create a breed and, when given, its personality row."""
        breed = Breed(**data)
        if personality is not None:
            breed.personality = BreedPersonality(**personality)
        self.session.add(breed)
        await self.session.flush()
        return breed

    async def apply_changes(self, breed: Breed, changes: dict[str, Any]) -> Breed:
        """Write every key of `changes` onto the breed, None included.

        A `personality` key replaces the scores row, or drops it when None.
        """
        changes = dict(changes)
        if "personality" in changes:
            scores = changes.pop("personality")
            if scores is None:
                breed.personality = None
            elif breed.personality is None:
                breed.personality = BreedPersonality(**scores)
            else:
                for key, value in scores.items():
                    setattr(breed.personality, key, value)

        for key, value in changes.items():
            setattr(breed, key, value)

        await self.session.flush()
        return breed
