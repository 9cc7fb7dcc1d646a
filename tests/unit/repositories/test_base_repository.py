"""Tests for base repository."""

import pytest

from catbreeds.models import Breed
from catbreeds.repositories.base import BaseRepository

from tests.fixtures.factories import create_breed_data


def _row(name: str, **kwargs) -> dict:
    data = create_breed_data(name=name, **kwargs)
    data.pop("personality", None)
    return data


class TestBaseRepository:
    """Tests for BaseRepository CRUD operations."""

    @pytest.mark.asyncio
    async def test_get_by_id(self, db_session):
        """Retrieve entity by ID."""
        repo = BaseRepository(Breed, db_session)
        created = await repo.create(_row("Persian"))

        result = await repo.get(created.id)

        assert result is not None
        assert result.id == created.id
        assert result.name == "Persian"

    @pytest.mark.asyncio
    async def test_get_nonexistent_returns_none(self, db_session):
        """Get with non-existent ID should return None."""
        repo = BaseRepository(Breed, db_session)

        result = await repo.get(99999)

        assert result is None

    @pytest.mark.asyncio
    async def test_count_with_filters(self, db_session):
        """Count honours equality filters and ignores None values."""
        repo = BaseRepository(Breed, db_session)
        await repo.create(_row("Siamese", origin="Thailand"))
        await repo.create(_row("Korat", origin="Thailand"))
        await repo.create(_row("Persian", origin="Iran"))

        assert await repo.count(filters={"origin": "Thailand"}) == 2
        assert await repo.count(filters={"origin": None}) == 3
        assert await repo.count() == 3

    @pytest.mark.asyncio
    async def test_delete(self, db_session):
        """Delete removes the record once, then reports False."""
        repo = BaseRepository(Breed, db_session)
        created = await repo.create(_row("Persian"))

        assert await repo.delete(created.id) is True
        assert await repo.get(created.id) is None
        assert await repo.delete(created.id) is False

    @pytest.mark.asyncio
    async def test_delete_all(self, db_session):
        """Delete all returns the number of removed rows."""
        repo = BaseRepository(Breed, db_session)
        for name in ("A", "B", "C"):
            await repo.create(_row(name))

        assert await repo.delete_all() == 3
        assert await repo.count() == 0
