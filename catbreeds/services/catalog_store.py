"""Catalog store: durable home for breeds, favorites and search history."""

import logging
from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager
from typing import Any

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from catbreeds.config import Settings, get_settings
from catbreeds.exceptions import NotFoundError, StoreError, ValidationError
from catbreeds.repositories import (
    DISTINCT_FIELDS,
    BreedRepository,
    FavoriteRepository,
    MetadataRepository,
    SearchHistoryRepository,
)
from catbreeds.schemas import BreedCreate, BreedResponse, BreedUpdate, check_bounds
from catbreeds.schemas.breed import BOUND_PAIRS, NULLABLE_FIELDS

logger = logging.getLogger(__name__)


def _validation_error(exc: PydanticValidationError) -> ValidationError:
    fields = [".".join(str(p) for p in err["loc"]) or "record" for err in exc.errors()]
    return ValidationError(f"Invalid breed record: {exc.error_count()} error(s)", fields)


class CatalogStore:
    """Record-level CRUD and read projections over the catalog database.

    Every operation runs in its own session, committed on success and rolled
    back on failure. Any SQLAlchemy failure is re-raised as StoreError.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        settings: Settings | None = None,
    ):
        self.session_factory = session_factory
        self.settings = settings or get_settings()

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[AsyncSession]:
        try:
            async with self.session_factory() as session:
                try:
                    yield session
                    await session.commit()
                except Exception:
                    await session.rollback()
                    raise
        except SQLAlchemyError as exc:
            logger.error(f"Catalog store operation failed: {exc}")
            raise StoreError(str(exc)) from exc

    # Breed operations

    async def insert_breed(self, record: BreedCreate | Mapping[str, Any]) -> int:
        """Validate and insert a breed; returns the newly assigned id."""
        if not isinstance(record, BreedCreate):
            try:
                record = BreedCreate.model_validate(dict(record))
            except PydanticValidationError as exc:
                raise _validation_error(exc) from exc

        data = record.model_dump(mode="json", exclude={"personality"})
        personality = record.personality.model_dump() if record.personality else None
        async with self._session() as session:
            breed = await BreedRepository(session).create_with_personality(data, personality)
            return breed.id

    async def get_all_breeds(self) -> list[BreedResponse]:
        """All breeds ordered by name ascending."""
        async with self._session() as session:
            breeds = await BreedRepository(session).list_by_name()
            return [BreedResponse.model_validate(b) for b in breeds]

    async def get_breed_by_id(self, breed_id: int) -> BreedResponse | None:
        """Return the breed, or None when no breed has this id."""
        async with self._session() as session:
            breed = await BreedRepository(session).get(breed_id)
            return BreedResponse.model_validate(breed) if breed else None

    async def get_breed_by_code(self, code: str) -> BreedResponse | None:
        async with self._session() as session:
            breed = await BreedRepository(session).get_by_code(code)
            return BreedResponse.model_validate(breed) if breed else None

    async def _breeds_where(self, **filters: Any) -> list[BreedResponse]:
        # Columns store the enum value strings.
        filters = {key: getattr(value, "value", value) for key, value in filters.items()}
        async with self._session() as session:
            breeds = await BreedRepository(session).list_by_name(filters)
            return [BreedResponse.model_validate(b) for b in breeds]

    async def get_breeds_by_origin(self, origin: str) -> list[BreedResponse]:
        """Breeds from exactly this origin, ordered by name."""
        return await self._breeds_where(origin=origin)

    async def get_breeds_by_activity_level(self, level: str) -> list[BreedResponse]:
        return await self._breeds_where(activity_level=level)

    async def get_breeds_by_coat_length(self, coat_length: str) -> list[BreedResponse]:
        return await self._breeds_where(coat_length=coat_length)

    async def search_breeds(self, query: str) -> list[BreedResponse]:
        """Substring search over name, origin, temperament, pattern and notes.

        A blank query returns the full catalog.
        """
        if not query or not query.strip():
            return await self.get_all_breeds()
        async with self._session() as session:
            breeds = await BreedRepository(session).search(query.strip())
            return [BreedResponse.model_validate(b) for b in breeds]

    async def update_breed(
        self, breed_id: int, changes: BreedUpdate | Mapping[str, Any]
    ) -> BreedResponse | None:
        """Apply the set fields of `changes`; returns None for a missing id.

        Passing None clears an optional field. Personality scores are
        replaced as a whole.
        """
        if not isinstance(changes, BreedUpdate):
            try:
                changes = BreedUpdate.model_validate(dict(changes))
            except PydanticValidationError as exc:
                raise _validation_error(exc) from exc
        data = changes.model_dump(mode="json", exclude_unset=True)
        cleared = sorted(k for k, v in data.items() if v is None and k not in NULLABLE_FIELDS)
        if cleared:
            raise ValidationError(
                f"Required fields cannot be cleared: {', '.join(cleared)}", cleared
            )

        async with self._session() as session:
            repo = BreedRepository(session)
            breed = await repo.get(breed_id)
            if breed is None:
                return None
            merged = {
                key: data.get(key, getattr(breed, key))
                for pair in BOUND_PAIRS
                for key in pair
            }
            inverted = check_bounds(merged)
            if inverted:
                raise ValidationError(f"Inverted bounds: {', '.join(inverted)}", inverted)
            await repo.apply_changes(breed, data)

        return await self.get_breed_by_id(breed_id)

    async def delete_breed(self, breed_id: int) -> bool:
        """Delete a breed and, through the foreign key, its favorite marker."""
        async with self._session() as session:
            return await BreedRepository(session).delete(breed_id)

    async def count_breeds(self) -> int:
        async with self._session() as session:
            return await BreedRepository(session).count()

    async def list_distinct_values(self, field: str) -> list[str]:
        """Sorted distinct values of a categorical field."""
        if field not in DISTINCT_FIELDS:
            raise ValidationError(f"Unsupported field: {field}", [field])
        async with self._session() as session:
            return await BreedRepository(session).distinct_values(field)

    # Favorites operations

    async def add_favorite(self, breed_id: int) -> bool:
        """Mark a breed as favorite; a no-op if it already is.

        Raises NotFoundError if no breed has this id.
        """
        async with self._session() as session:
            if await BreedRepository(session).get(breed_id) is None:
                raise NotFoundError(f"Breed {breed_id} not found")
            return await FavoriteRepository(session).add(breed_id)

    async def remove_favorite(self, breed_id: int) -> bool:
        """Unmark a breed; a no-op if it was not favorited."""
        async with self._session() as session:
            return await FavoriteRepository(session).remove(breed_id)

    async def is_favorite(self, breed_id: int) -> bool:
        async with self._session() as session:
            return await FavoriteRepository(session).exists(breed_id)

    async def list_favorites(self) -> list[BreedResponse]:
        """Favorited breeds, most recently favorited first."""
        async with self._session() as session:
            breeds = await FavoriteRepository(session).list_breeds()
            return [BreedResponse.model_validate(b) for b in breeds]

    # Search history operations

    async def record_search(self, query: str) -> bool:
        """Promote a query to most recent; returns False if it is too short."""
        text = query.strip()
        if len(text) < self.settings.min_search_length:
            return False
        async with self._session() as session:
            repo = SearchHistoryRepository(session)
            await repo.promote(text)
            await repo.prune(self.settings.search_history_cap)
        return True

    async def list_recent_searches(self, limit: int | None = None) -> list[str]:
        """Most recent queries first, at most `limit` (defaults to the cap)."""
        limit = self.settings.search_history_cap if limit is None else limit
        async with self._session() as session:
            return await SearchHistoryRepository(session).recent(limit)

    async def clear_search_history(self) -> None:
        async with self._session() as session:
            await SearchHistoryRepository(session).delete_all()

    # Maintenance

    async def clear_all(self) -> None:
        """Delete every breed, favorite and search-history entry."""
        async with self._session() as session:
            await FavoriteRepository(session).delete_all()
            await SearchHistoryRepository(session).delete_all()
            await BreedRepository(session).delete_all()

    async def get_metadata(self, key: str) -> str | None:
        async with self._session() as session:
            return await MetadataRepository(session).get_value(key)

    async def set_metadata(self, key: str, value: str) -> None:
        async with self._session() as session:
            await MetadataRepository(session).set_value(key, value)

