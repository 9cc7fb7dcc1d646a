"""Data access repositories."""

from catbreeds.repositories.base import BaseRepository
from catbreeds.repositories.breed_repository import DISTINCT_FIELDS, BreedRepository
from catbreeds.repositories.favorite_repository import FavoriteRepository
from catbreeds.repositories.metadata_repository import MetadataRepository
from catbreeds.repositories.search_history_repository import SearchHistoryRepository

__all__ = [
    "BaseRepository",
    "BreedRepository",
    "FavoriteRepository",
    "SearchHistoryRepository",
    "MetadataRepository",
    "DISTINCT_FIELDS",
]
