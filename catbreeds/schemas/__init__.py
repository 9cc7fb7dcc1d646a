"""Pydantic schemas."""

from catbreeds.schemas.breed import (
    BreedBase,
    BreedCreate,
    BreedResponse,
    BreedUpdate,
    PersonalityScoresSchema,
    check_bounds,
)
from catbreeds.schemas.common import BaseSchema, TimestampSchema

__all__ = [
    "BaseSchema",
    "TimestampSchema",
    "BreedBase",
    "BreedCreate",
    "BreedUpdate",
    "BreedResponse",
    "PersonalityScoresSchema",
    "check_bounds",
]
