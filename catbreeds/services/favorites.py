"""Favorites and search-history tracker."""

import logging
from collections import Counter
from dataclasses import dataclass

from catbreeds.config import Settings
from catbreeds.exceptions import StoreError
from catbreeds.schemas import BreedResponse
from catbreeds.services.catalog_store import CatalogStore

logger = logging.getLogger(__name__)


@dataclass
class FavoritesSummary:
    """Statistics over the current favorites."""

    count: int
    origin_count: int
    most_common_activity: str | None


class FavoritesTracker:
    """Keeps an in-memory favorites cache in step with the store."""

    def __init__(self, store: CatalogStore, settings: Settings | None = None):
        self.store = store
        self.settings = settings or store.settings
        self._favorites: list[BreedResponse] = []
        self._favorite_ids: set[int] = set()

    @property
    def favorites(self) -> list[BreedResponse]:
        """Cached favorites, most recently favorited first."""
        return list(self._favorites)

    async def refresh(self) -> list[BreedResponse]:
        """Reload the favorites cache from the store."""
        favorites = await self.store.list_favorites()
        self._favorites = favorites
        self._favorite_ids = {b.id for b in favorites}
        return self.favorites

    def is_favorite(self, breed_id: int) -> bool:
        return breed_id in self._favorite_ids

    async def add(self, breed_id: int) -> None:
        await self.store.add_favorite(breed_id)
        await self.refresh()

    async def remove(self, breed_id: int) -> None:
        await self.store.remove_favorite(breed_id)
        await self.refresh()

    async def toggle_favorite(self, breed_id: int) -> bool:
        """Flip membership; returns the new state.

        Read-then-branch without a guard: the store has a single writer.
        """
        if await self.store.is_favorite(breed_id):
            await self.remove(breed_id)
        else:
            await self.add(breed_id)
        return self.is_favorite(breed_id)

    def summary(self) -> FavoritesSummary:
        activity = None
        if self._favorites:
            counts = Counter(b.activity_level.value for b in self._favorites)
            top = max(counts.values())
            # Ties go to the most recently favorited breed.
            activity = next(
                b.activity_level.value for b in self._favorites
                if counts[b.activity_level.value] == top
            )
        return FavoritesSummary(
            count=len(self._favorites),
            origin_count=len({b.origin for b in self._favorites}),
            most_common_activity=activity,
        )

    # Search history

    async def record_search(self, query: str) -> bool:
        """Best-effort history write; failures are logged and suppressed."""
        try:
            return await self.store.record_search(query)
        except StoreError as exc:
            logger.warning(f"Failed to save search query {query!r}: {exc}")
            return False

    async def recent_searches(self, limit: int | None = None) -> list[str]:
        """Suggestions, capped independently of the persisted history."""
        limit = self.settings.recent_search_limit if limit is None else limit
        return await self.store.list_recent_searches(limit)
