"""Tests for the catalog service facade."""

from unittest.mock import AsyncMock

import pytest

from catbreeds.exceptions import StoreError
from catbreeds.quiz import QuizEngine
from catbreeds.services import BreedQuery, CatalogService, Seeder, SortKey

from tests.fixtures.factories import THREE_BREEDS, create_breed_data


@pytest.fixture
async def service(store, settings) -> CatalogService:
    service = CatalogService(store, seeder=Seeder(store, THREE_BREEDS), settings=settings)
    await service.initialize()
    return service


class TestInitialize:
    @pytest.mark.asyncio
    async def test_loads_catalog(self, service):
        """Initialize seeds and caches the catalog."""
        assert service.error is None
        assert [b.name for b in service.breeds] == ["Maine Coon", "Persian", "Siamese"]
        assert service.seed_report.inserted == 3

    @pytest.mark.asyncio
    async def test_version_stamped_startup(self, store, settings):
        """Without forced reseed a matching version keeps favorites."""
        settings.force_reseed = False
        seeder = Seeder(store, THREE_BREEDS, version="v1")
        service = CatalogService(store, seeder=seeder, settings=settings)
        await service.initialize()
        await service.toggle_favorite(1)

        await service.initialize()

        assert service.seed_report.skipped
        assert service.is_favorite(1)

    @pytest.mark.asyncio
    async def test_seed_failure_sets_error(self, store, settings):
        """A store failure while seeding sets the error message."""
        seeder = Seeder(store, THREE_BREEDS)
        seeder.seed = AsyncMock(side_effect=StoreError("disk unavailable"))
        service = CatalogService(store, seeder=seeder, settings=settings)

        assert await service.initialize() is False
        assert service.error == "Failed to initialize catalog"
        assert service.breeds == []

    @pytest.mark.asyncio
    async def test_reload_failure_keeps_cached_breeds(self, service, store):
        """A failed reload keeps the last loaded breeds."""
        store.get_all_breeds = AsyncMock(side_effect=StoreError("corrupt"))

        assert await service.reload() is False
        assert service.error == "Failed to load breeds"
        assert len(service.breeds) == 3

    @pytest.mark.asyncio
    async def test_create_builds_everything(self, settings, db_engine):
        """Create wires the engine, store and seeded catalog."""
        service = await CatalogService.create(settings, engine=db_engine)

        assert service.error is None
        assert len(service.breeds) > 20


class TestReads:
    @pytest.mark.asyncio
    async def test_query_uses_cache(self, service):
        """Queries run against the cached catalog."""
        result = service.query(BreedQuery(coat_length="Long", sort_by=SortKey.LIFESPAN))

        assert [b.name for b in result] == ["Persian", "Maine Coon"]

    @pytest.mark.asyncio
    async def test_filter_options(self, service):
        """Filter options come from the cached catalog."""
        assert service.filter_options().origins == ["Iran", "Thailand", "United States"]

    @pytest.mark.asyncio
    async def test_search_records_history(self, service):
        """Searching records the query in history."""
        result = await service.search("vocal")

        assert [b.name for b in result] == ["Siamese"]
        assert await service.recent_searches() == ["vocal"]

    @pytest.mark.asyncio
    async def test_get_breed_falls_back_to_cache(self, service, store):
        """Detail lookup falls back to the cache on store failure."""
        store.get_breed_by_id = AsyncMock(side_effect=StoreError("io"))

        breed = await service.get_breed(1)

        assert breed.name == "Siamese"
        assert service.error == "Failed to load breed details"

    @pytest.mark.asyncio
    async def test_get_missing_breed(self, service):
        """Detail lookup for an unknown id returns None."""
        assert await service.get_breed(404) is None


class TestFavorites:
    @pytest.mark.asyncio
    async def test_toggle(self, service):
        """Toggling flips the favorite state."""
        assert await service.toggle_favorite(2) is True
        assert [b.id for b in service.favorites] == [2]

        assert await service.toggle_favorite(2) is False
        assert service.favorites == []

    @pytest.mark.asyncio
    async def test_toggle_unknown_breed(self, service):
        """Toggling an unknown breed leaves favorites unchanged."""
        assert await service.toggle_favorite(999) is False
        assert service.error is None

    @pytest.mark.asyncio
    async def test_toggle_failure_leaves_state(self, service, store):
        """A store failure while toggling sets the error message."""
        store.is_favorite = AsyncMock(side_effect=StoreError("locked"))

        assert await service.toggle_favorite(1) is False
        assert service.error == "Failed to update favorites"


class TestRecommendations:
    @pytest.mark.asyncio
    async def test_recommendations_from_quiz(self, store, settings):
        """Quiz outcomes recommend breeds from the catalog."""
        dataset = THREE_BREEDS + [create_breed_data(name="Bengal", code="BEN")]
        service = CatalogService(store, seeder=Seeder(store, dataset), settings=settings)
        await service.initialize()

        quiz = QuizEngine()
        for option_id in ("q1b", "q2a", "q3c", "q4a", "q5a", "q6b", "q7a", "q8a"):
            quiz.answer_question(option_id)
        outcome = quiz.current_state()

        assert [b.name for b in service.recommendations(outcome)] == [
            "Bengal", "Maine Coon", "Siamese",
        ]
