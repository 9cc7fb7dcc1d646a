"""Shared test fixtures."""

from typing import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from catbreeds.config import Settings
from catbreeds.database import create_engine, create_session_factory, init_db
from catbreeds.schemas import BreedResponse
from catbreeds.services import CatalogStore, FavoritesTracker, Seeder

from tests.fixtures.factories import THREE_BREEDS, create_breed_response


@pytest.fixture
def settings() -> Settings:
    """Settings for an in-memory catalog."""
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        debug=False,
        force_reseed=True,
    )


@pytest.fixture
async def db_engine(settings):
    """Create in-memory SQLite engine for tests."""
    engine = create_engine(settings.database_url, echo=False)
    await init_db(engine)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return create_session_factory(db_engine)


@pytest.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create async session with transaction rollback."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def store(session_factory, settings) -> CatalogStore:
    """Fresh catalog store over an empty in-memory database."""
    return CatalogStore(session_factory, settings)


@pytest.fixture
async def seeded_store(store) -> CatalogStore:
    """Store seeded with Siamese, Maine Coon and Persian (ids 1, 2, 3)."""
    await Seeder(store, THREE_BREEDS, version="test-1").seed()
    return store


@pytest.fixture
def tracker(seeded_store) -> FavoritesTracker:
    return FavoritesTracker(seeded_store)


@pytest.fixture
def catalog() -> list[BreedResponse]:
    """In-memory catalog, in insertion order, for pure query tests."""
    return [
        create_breed_response(
            1, "Siamese", origin="Thailand", temperament="Active, vocal, social",
            activity_level="High", body_type="Oriental", lifespan_min=15, lifespan_max=20,
        ),
        create_breed_response(
            2, "Maine Coon", origin="United States", coat_length="Long",
            temperament="Friendly, intelligent, playful", activity_level="Medium-High",
            grooming_needs="Medium", lifespan_min=13, lifespan_max=14,
        ),
        create_breed_response(
            3, "Persian", origin="Iran", coat_length="Long",
            temperament="Calm, gentle, sweet", activity_level="Low",
            grooming_needs="High", lifespan_min=12, lifespan_max=17,
        ),
        create_breed_response(
            4, "Bengal", origin="United States", temperament="Energetic, playful, vocal",
            activity_level="High", body_type="Foreign", lifespan_min=12, lifespan_max=16,
        ),
        create_breed_response(
            5, "Korat", origin="Thailand", temperament="Quiet, gentle, loyal",
            activity_level="Medium", body_type="Semi-cobby", lifespan_min=15, lifespan_max=20,
        ),
        create_breed_response(
            6, "abyssinian", origin="Ethiopia", temperament="Active, curious, playful",
            activity_level="High", body_type="Foreign", lifespan_min=12, lifespan_max=15,
        ),
    ]
