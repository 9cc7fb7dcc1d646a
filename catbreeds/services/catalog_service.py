"""Catalog service: cached catalog state consumed by a presentation shell."""

import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from catbreeds.config import Settings, configure_logging, get_settings
from catbreeds.database import create_engine, create_session_factory, init_db
from catbreeds.exceptions import NotFoundError, StoreError
from catbreeds.quiz import QuizOutcome, match_breeds
from catbreeds.schemas import BreedResponse
from catbreeds.services.catalog_store import CatalogStore
from catbreeds.services.favorites import FavoritesSummary, FavoritesTracker
from catbreeds.services.query_engine import BreedQuery, FilterOptions, apply_query, filter_options
from catbreeds.services.seeder import Seeder, SeedReport

logger = logging.getLogger(__name__)


class CatalogService:
    """Seeds the store, caches the catalog and degrades on store failures.

    After a StoreError the last-known data stays available and `error` holds a
    message for the user; `reload()` is the retry path.
    """

    def __init__(
        self,
        store: CatalogStore,
        seeder: Seeder | None = None,
        tracker: FavoritesTracker | None = None,
        settings: Settings | None = None,
    ):
        self.store = store
        self.settings = settings or store.settings
        self.seeder = seeder or Seeder(store)
        self.tracker = tracker or FavoritesTracker(store, self.settings)
        self.breeds: list[BreedResponse] = []
        self.error: str | None = None
        self.seed_report: SeedReport | None = None

    @classmethod
    async def create(
        cls, settings: Settings | None = None, engine: AsyncEngine | None = None
    ) -> "CatalogService":
        """Build the engine, schema and store, then initialize."""
        settings = settings or get_settings()
        configure_logging(settings)
        engine = engine or create_engine(settings.database_url, echo=settings.debug)
        await init_db(engine)
        store = CatalogStore(create_session_factory(engine), settings)
        service = cls(store, settings=settings)
        await service.initialize()
        return service

    async def initialize(self) -> bool:
        """Seed, then load breeds and favorites. Returns False on failure."""
        self.error = None
        try:
            if self.settings.force_reseed:
                self.seed_report = await self.seeder.seed()
            else:
                self.seed_report = await self.seeder.ensure_seeded()
        except StoreError as exc:
            logger.error(f"Failed to initialize catalog: {exc}")
            self.error = "Failed to initialize catalog"
            return False
        return await self.reload()

    async def reload(self) -> bool:
        """Reload breeds and favorites; keeps cached data on failure."""
        try:
            self.breeds = await self.store.get_all_breeds()
            await self.tracker.refresh()
        except StoreError as exc:
            logger.error(f"Failed to load catalog: {exc}")
            self.error = "Failed to load breeds"
            return False
        self.error = None
        return True

    # Reads

    def query(self, query: BreedQuery | None = None) -> list[BreedResponse]:
        return apply_query(self.breeds, query)

    def filter_options(self) -> FilterOptions:
        return filter_options(self.breeds)

    async def get_breed(self, breed_id: int) -> BreedResponse | None:
        """Fresh read from the store, falling back to the cached copy."""
        try:
            return await self.store.get_breed_by_id(breed_id)
        except StoreError as exc:
            logger.error(f"Failed to load breed {breed_id}: {exc}")
            self.error = "Failed to load breed details"
            return next((b for b in self.breeds if b.id == breed_id), None)

    async def search(self, text: str) -> list[BreedResponse]:
        """Run a submitted search over the cache and record it in history."""
        await self.tracker.record_search(text)
        return self.query(BreedQuery(search=text))

    async def recent_searches(self, limit: int | None = None) -> list[str]:
        try:
            return await self.tracker.recent_searches(limit)
        except StoreError as exc:
            logger.warning(f"Failed to load search history: {exc}")
            return []

    # Favorites

    @property
    def favorites(self) -> list[BreedResponse]:
        return self.tracker.favorites

    def is_favorite(self, breed_id: int) -> bool:
        return self.tracker.is_favorite(breed_id)

    async def toggle_favorite(self, breed_id: int) -> bool:
        """Toggle and return the new state; on failure the state is unchanged."""
        try:
            return await self.tracker.toggle_favorite(breed_id)
        except NotFoundError:
            logger.warning(f"Cannot favorite unknown breed {breed_id}")
        except StoreError as exc:
            logger.error(f"Failed to toggle favorite {breed_id}: {exc}")
            self.error = "Failed to update favorites"
        return self.tracker.is_favorite(breed_id)

    def favorites_summary(self) -> FavoritesSummary:
        return self.tracker.summary()

    # Quiz

    def recommendations(self, outcome: QuizOutcome) -> list[BreedResponse]:
        return match_breeds(outcome.profile, self.breeds, self.settings.recommendation_limit)
