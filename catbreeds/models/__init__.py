"""SQLAlchemy models."""

from catbreeds.models.breed import (
    ActivityLevel,
    BodyType,
    Breed,
    BreedPersonality,
    CoatLength,
    GroomingLevel,
    Level,
)
from catbreeds.models.favorite import Favorite
from catbreeds.models.metadata import CatalogMetadata
from catbreeds.models.search_history import SearchHistory

__all__ = [
    "Breed",
    "BreedPersonality",
    "Favorite",
    "SearchHistory",
    "CatalogMetadata",
    "CoatLength",
    "BodyType",
    "Level",
    "ActivityLevel",
    "GroomingLevel",
]
