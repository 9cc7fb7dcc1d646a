"""Query engine: search, filters and sorting over an in-memory catalog."""

import enum
import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from catbreeds.models.breed import BodyType, CoatLength, Level
from catbreeds.schemas import BreedResponse

logger = logging.getLogger(__name__)


class SortKey(str, enum.Enum):
    """Sort orders offered to the breed list."""

    NAME = "name"
    ORIGIN = "origin"
    LIFESPAN = "lifespan"
    TEMPERAMENT = "temperament"


@dataclass(frozen=True)
class BreedQuery:
    """Search text, categorical filters and sort key.

    None, empty or unrecognised values impose no constraint.
    """

    search: str | None = None
    origin: str | None = None
    temperament: str | None = None
    coat_length: CoatLength | str | None = None
    body_type: BodyType | str | None = None
    activity_level: Level | str | None = None
    grooming_level: Level | str | None = None
    sort_by: SortKey | str = SortKey.NAME

    @property
    def active_filter_count(self) -> int:
        values = (
            self.search, self.origin, self.temperament, self.coat_length,
            self.body_type, self.activity_level, self.grooming_level,
        )
        return sum(1 for v in values if _clean(v) is not None)


@dataclass
class FilterOptions:
    """Distinct values available for each categorical filter."""

    origins: list[str] = field(default_factory=list)
    coat_lengths: list[str] = field(default_factory=list)
    activity_levels: list[str] = field(default_factory=list)
    body_types: list[str] = field(default_factory=list)
    grooming_levels: list[str] = field(default_factory=list)


def _clean(value) -> str | None:
    if value is None:
        return None
    if isinstance(value, enum.Enum):
        value = value.value
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def _coerce(enum_cls: type[enum.Enum], value) -> enum.Enum | None:
    text = _clean(value)
    if text is None:
        return None
    for member in enum_cls:
        if member.value.lower() == text.lower():
            return member
    logger.debug(f"Ignoring unknown {enum_cls.__name__} filter value {text!r}")
    return None


def matches_search(breed: BreedResponse, text: str) -> bool:
    """Case-insensitive substring match on name, origin or temperament."""
    term = text.lower()
    return (
        term in breed.name.lower()
        or term in breed.origin.lower()
        or term in breed.temperament.lower()
    )


def build_predicates(query: BreedQuery) -> list:
    """One predicate per active constraint; all must hold."""
    predicates = []

    search = _clean(query.search)
    if search:
        predicates.append(lambda b: matches_search(b, search))

    origin = _clean(query.origin)
    if origin:
        predicates.append(lambda b: b.origin == origin)

    trait = _clean(query.temperament)
    if trait:
        trait = trait.lower()
        predicates.append(lambda b: trait in b.temperament.lower())

    coat_length = _coerce(CoatLength, query.coat_length)
    if coat_length:
        predicates.append(lambda b: b.coat_length == coat_length)

    body_type = _coerce(BodyType, query.body_type)
    if body_type:
        predicates.append(lambda b: b.body_type == body_type)

    activity = _coerce(Level, query.activity_level)
    if activity:
        predicates.append(lambda b: b.activity_level == activity)

    grooming = _coerce(Level, query.grooming_level)
    if grooming:
        predicates.append(lambda b: b.grooming_needs == grooming)

    return predicates


def lifespan_upper_bound(breed: BreedResponse) -> int:
    return breed.lifespan_max


def sort_breeds(
    breeds: Iterable[BreedResponse], sort_by: SortKey | str = SortKey.NAME
) -> list[BreedResponse]:
    """Stable sort; equal keys keep their incoming order."""
    try:
        key = SortKey(sort_by)
    except ValueError:
        logger.debug(f"Unknown sort key {sort_by!r}, sorting by name")
        key = SortKey.NAME

    if key == SortKey.ORIGIN:
        return sorted(breeds, key=lambda b: b.origin.casefold())
    if key == SortKey.LIFESPAN:
        return sorted(breeds, key=lifespan_upper_bound, reverse=True)
    if key == SortKey.TEMPERAMENT:
        return sorted(breeds, key=lambda b: b.temperament.casefold())
    return sorted(breeds, key=lambda b: b.name.casefold())


def apply_query(breeds: Sequence[BreedResponse], query: BreedQuery | None = None) -> list[BreedResponse]:
    """
    Compose search, filters and sort into one ordered result.

    Args:
        breeds: The full catalog, in catalog order
        query: Search, filters and sort key; None returns the catalog sorted by name

    Returns:
        Matching breeds in the requested order
    """
    query = query or BreedQuery()
    predicates = build_predicates(query)
    result = [b for b in breeds if all(p(b) for p in predicates)]
    return sort_breeds(result, query.sort_by)


def filter_options(breeds: Iterable[BreedResponse]) -> FilterOptions:
    """Sorted distinct values for each categorical field."""
    breeds = list(breeds)

    def distinct(values: Iterable) -> list[str]:
        return sorted({_clean(v) for v in values} - {None})

    return FilterOptions(
        origins=distinct(b.origin for b in breeds),
        coat_lengths=distinct(b.coat_length for b in breeds),
        activity_levels=distinct(b.activity_level for b in breeds),
        body_types=distinct(b.body_type for b in breeds),
        grooming_levels=distinct(b.grooming_needs for b in breeds),
    )
