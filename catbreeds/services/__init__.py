"""Business logic services."""

from catbreeds.services.catalog_service import CatalogService
from catbreeds.services.catalog_store import CatalogStore
from catbreeds.services.favorites import FavoritesSummary, FavoritesTracker
from catbreeds.services.query_engine import (
    BreedQuery,
    FilterOptions,
    SortKey,
    apply_query,
    filter_options,
    sort_breeds,
)
from catbreeds.services.seeder import SeedFailure, Seeder, SeedReport

__all__ = [
    "CatalogStore",
    "CatalogService",
    "Seeder",
    "SeedReport",
    "SeedFailure",
    "FavoritesTracker",
    "FavoritesSummary",
    "BreedQuery",
    "FilterOptions",
    "SortKey",
    "apply_query",
    "filter_options",
    "sort_breeds",
]
