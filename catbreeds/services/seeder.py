"""Seeder: populate the catalog store from the static dataset."""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from catbreeds.data import BREEDS, SEED_VERSION
from catbreeds.exceptions import NotFoundError, StoreError, ValidationError
from catbreeds.schemas import BreedResponse
from catbreeds.services.catalog_store import CatalogStore

logger = logging.getLogger(__name__)

SEED_VERSION_KEY = "seed_version"


@dataclass
class SeedFailure:
    """One dataset record that could not be inserted."""

    index: int
    name: str | None
    error: str


@dataclass
class SeedReport:
    """Outcome of a seeding run."""

    version: str
    inserted: int = 0
    failures: list[SeedFailure] = field(default_factory=list)
    skipped: bool = False
    restored_favorites: int = 0

    @property
    def ok(self) -> bool:
        return not self.failures


class Seeder:
    """Brings the catalog store to a known state from a fixed dataset."""

    def __init__(
        self,
        store: CatalogStore,
        dataset: Sequence[Mapping[str, Any]] | None = None,
        version: str | None = None,
    ):
        self.store = store
        self.dataset = BREEDS if dataset is None else dataset
        self.version = version or SEED_VERSION

    async def seed(self) -> SeedReport:
        """Clear breeds, favorites and history, then insert every record.

        Insertion is best-effort: a failing record is reported and the
        remaining records are still inserted.
        """
        logger.info(f"Reseeding catalog with {len(self.dataset)} breeds (version {self.version})")
        await self.store.clear_all()

        report = SeedReport(version=self.version)
        for index, record in enumerate(self.dataset):
            name = record.get("name")
            try:
                breed_id = await self.store.insert_breed(record)
            except (ValidationError, StoreError) as exc:
                logger.error(f"Failed to insert breed {name!r}: {exc}")
                report.failures.append(SeedFailure(index=index, name=name, error=str(exc)))
                continue
            report.inserted += 1
            logger.debug(f"Inserted breed {name!r} (id={breed_id})")

        await self.store.set_metadata(SEED_VERSION_KEY, self.version)
        logger.info(
            f"Catalog seeded: {report.inserted} inserted, {len(report.failures)} failed"
        )
        return report

    async def ensure_seeded(self) -> SeedReport:
        """Reseed only when the stored version differs or the catalog is empty.

        Favorites and search history survive the reseed: favorites are matched
        back to the new records by code, falling back to name.
        """
        stored_version = await self.store.get_metadata(SEED_VERSION_KEY)
        if stored_version == self.version and await self.store.count_breeds() > 0:
            logger.info(f"Catalog already at seed version {self.version}")
            return SeedReport(version=self.version, skipped=True)

        favorites = await self.store.list_favorites()
        history = await self.store.list_recent_searches()

        report = await self.seed()
        report.restored_favorites = await self._restore_favorites(favorites)
        # History is newest-first; replay oldest-first to keep the order.
        for query in reversed(history):
            await self.store.record_search(query)
        return report

    async def _restore_favorites(self, favorites: list[BreedResponse]) -> int:
        if not favorites:
            return 0

        breeds = await self.store.get_all_breeds()
        by_code = {b.code: b.id for b in breeds if b.code}
        by_name = {b.name.lower(): b.id for b in breeds}

        restored = 0
        # Oldest first so the most recently favorited stays on top.
        for old in reversed(favorites):
            new_id = by_code.get(old.code) if old.code else None
            if new_id is None:
                new_id = by_name.get(old.name.lower())
            if new_id is None:
                logger.warning(f"Dropping favorite {old.name!r}: breed no longer in catalog")
                continue
            try:
                await self.store.add_favorite(new_id)
            except NotFoundError:
                continue
            restored += 1
        return restored
