"""Tests for the seeder."""

import pytest

from catbreeds.data import BREEDS, SEED_VERSION
from catbreeds.services import Seeder
from catbreeds.services.seeder import SEED_VERSION_KEY

from tests.fixtures.factories import THREE_BREEDS, create_breed_data


class TestSeed:
    """Tests for the destructive seed."""

    @pytest.mark.asyncio
    async def test_seed_three_breeds_end_to_end(self, store):
        """Seeding three breeds stores them in name order."""
        report = await Seeder(store, THREE_BREEDS, version="v1").seed()

        assert report.inserted == 3
        assert report.ok
        assert [b.name for b in await store.get_all_breeds()] == [
            "Maine Coon", "Persian", "Siamese",
        ]

        await store.add_favorite(2)
        assert [b.id for b in await store.list_favorites()] == [2]

        await store.remove_favorite(2)
        assert await store.list_favorites() == []

    @pytest.mark.asyncio
    async def test_seed_discards_favorites_and_history(self, seeded_store):
        """A full reseed discards favorites and history."""
        await seeded_store.add_favorite(1)
        await seeded_store.record_search("siamese")

        await Seeder(seeded_store, THREE_BREEDS).seed()

        assert await seeded_store.list_favorites() == []
        assert await seeded_store.list_recent_searches() == []
        assert await seeded_store.count_breeds() == 3

    @pytest.mark.asyncio
    async def test_seed_is_repeatable(self, store):
        """Seeding twice leaves one copy of each breed."""
        seeder = Seeder(store, THREE_BREEDS)

        await seeder.seed()
        first = [(b.name, b.origin) for b in await store.get_all_breeds()]
        await seeder.seed()
        second = [(b.name, b.origin) for b in await store.get_all_breeds()]

        assert first == second

    @pytest.mark.asyncio
    async def test_bad_record_does_not_abort(self, store):
        """A bad record is reported and the rest are inserted."""
        dataset = [
            create_breed_data(name="Good One"),
            create_breed_data(name="Bad One", lifespan_min=20, lifespan_max=10),
            create_breed_data(name="Good Two"),
        ]

        report = await Seeder(store, dataset).seed()

        assert report.inserted == 2
        assert not report.ok
        assert report.failures[0].index == 1
        assert report.failures[0].name == "Bad One"
        assert [b.name for b in await store.get_all_breeds()] == ["Good One", "Good Two"]

    @pytest.mark.asyncio
    async def test_seed_records_version(self, store):
        """Seeding stores the dataset version."""
        await Seeder(store, THREE_BREEDS, version="v7").seed()

        assert await store.get_metadata(SEED_VERSION_KEY) == "v7"

    @pytest.mark.asyncio
    async def test_default_dataset_is_valid(self, store):
        """The bundled dataset seeds without failures."""
        report = await Seeder(store).seed()

        assert report.ok
        assert report.inserted == len(BREEDS)
        assert report.version == SEED_VERSION


class TestEnsureSeeded:
    """Tests for the version-stamped startup path."""

    @pytest.mark.asyncio
    async def test_seeds_empty_store(self, store):
        """ensure_seeded fills an empty store."""
        report = await Seeder(store, THREE_BREEDS, version="v1").ensure_seeded()

        assert not report.skipped
        assert report.inserted == 3

    @pytest.mark.asyncio
    async def test_same_version_is_noop(self, store):
        """ensure_seeded skips a matching version."""
        seeder = Seeder(store, THREE_BREEDS, version="v1")
        await seeder.ensure_seeded()
        await store.add_favorite(1)

        report = await seeder.ensure_seeded()

        assert report.skipped
        assert [b.id for b in await store.list_favorites()] == [1]

    @pytest.mark.asyncio
    async def test_new_version_keeps_favorites_and_history(self, store):
        """A new version reseeds and restores favorites and history."""
        await Seeder(store, THREE_BREEDS, version="v1").ensure_seeded()
        await store.add_favorite(3)  # Persian
        await store.add_favorite(1)  # Siamese
        await store.record_search("bengal")
        await store.record_search("persian")

        updated = [dict(b) for b in THREE_BREEDS if b["name"] != "Siamese"]
        report = await Seeder(store, updated, version="v2").ensure_seeded()

        assert report.restored_favorites == 1
        assert [b.name for b in await store.list_favorites()] == ["Persian"]
        assert await store.list_recent_searches() == ["persian", "bengal"]
        assert await store.get_metadata(SEED_VERSION_KEY) == "v2"

    @pytest.mark.asyncio
    async def test_favorites_matched_by_name_without_code(self, store):
        """Favorites without a code are restored by name."""
        dataset = [create_breed_data(name="Korat", code=None)]
        await Seeder(store, dataset, version="v1").ensure_seeded()
        await store.add_favorite(1)

        await Seeder(store, dataset, version="v2").ensure_seeded()

        assert [b.name for b in await store.list_favorites()] == ["Korat"]
