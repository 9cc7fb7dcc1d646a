"""Match a personality profile's ideal breeds against the live catalog."""

from collections.abc import Iterable

from catbreeds.quiz.questions import PersonalityProfile
from catbreeds.schemas import BreedResponse


def match_breeds(
    profile: PersonalityProfile,
    breeds: Iterable[BreedResponse],
    limit: int | None = 6,
) -> list[BreedResponse]:
    """Catalog breeds whose name contains any ideal-breed name, in catalog order."""
    ideal = [name.lower() for name in profile.ideal_breeds]
    matches = [b for b in breeds if any(name in b.name.lower() for name in ideal)]
    return matches if limit is None else matches[:limit]
