"""Static reference data."""

from catbreeds.data.breeds import BREEDS, SEED_VERSION

__all__ = ["BREEDS", "SEED_VERSION"]
