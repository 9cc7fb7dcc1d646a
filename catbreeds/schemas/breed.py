"""Breed schemas."""

from pydantic import Field, field_validator, model_validator

from catbreeds.models.breed import BodyType, CoatLength, Level
from catbreeds.schemas.common import BaseSchema, TimestampSchema

BOUND_PAIRS = (
    ("lifespan_min", "lifespan_max"),
    ("weight_min_female", "weight_max_female"),
    ("weight_min_male", "weight_max_male"),
)

# Fields an update may clear by passing None.
NULLABLE_FIELDS = frozenset(
    {
        "code",
        "coat_pattern",
        "health_issues",
        "genetic_info",
        "care_requirements",
        "ideal_for",
        "personality",
    }
)


def check_bounds(values: dict) -> list[str]:
    """Return the names of every min/max pair where min exceeds max."""
    inverted = []
    for low, high in BOUND_PAIRS:
        lo, hi = values.get(low), values.get(high)
        if lo is not None and hi is not None and lo > hi:
            inverted.append(f"{low}>{high}")
    return inverted


class PersonalityScoresSchema(BaseSchema):
    """Structured personality sub-scores."""

    energy: int = Field(..., ge=0, le=10)
    friendliness: int = Field(..., ge=0, le=10)
    intelligence: int = Field(..., ge=0, le=10)


class BreedBase(BaseSchema):
    """Base breed schema."""

    code: str | None = Field(None, max_length=10, description="Registry breed code")
    name: str = Field(..., min_length=1, max_length=100)
    origin: str = Field(..., min_length=1, max_length=100)
    coat_length: CoatLength
    coat_pattern: str | None = None
    body_type: BodyType
    temperament: str = Field(..., min_length=1, description="Comma-separated traits")
    activity_level: Level
    grooming_needs: Level
    health_issues: str | None = None
    genetic_info: str | None = None
    lifespan_min: int = Field(..., gt=0, description="Years")
    lifespan_max: int = Field(..., gt=0, description="Years")
    weight_min_female: float = Field(..., gt=0, description="kg")
    weight_max_female: float = Field(..., gt=0, description="kg")
    weight_min_male: float = Field(..., gt=0, description="kg")
    weight_max_male: float = Field(..., gt=0, description="kg")
    description: str = Field(..., min_length=1)
    care_requirements: str | None = None
    ideal_for: str | None = None
    personality: PersonalityScoresSchema | None = None
    image_path: str = Field(..., min_length=1)


class BreedCreate(BreedBase):
    """Schema for inserting a breed."""

    @field_validator("name", "origin", "temperament", "description")
    @classmethod
    def validate_not_whitespace(cls, v: str) -> str:
        """Ensure required text is not whitespace-only."""
        if not v.strip():
            raise ValueError("Field cannot be empty or whitespace-only")
        return v

    @model_validator(mode="after")
    def validate_bounds(self) -> "BreedCreate":
        inverted = check_bounds(self.model_dump())
        if inverted:
            raise ValueError(f"Inverted bounds: {', '.join(inverted)}")
        return self


class BreedUpdate(BaseSchema):
    """Schema for updating a breed.

    Unset fields are left untouched. An explicit None clears one of the
    NULLABLE_FIELDS and is rejected for any other field.
    """

    code: str | None = Field(None, max_length=10)
    name: str | None = Field(None, min_length=1, max_length=100)
    origin: str | None = Field(None, min_length=1, max_length=100)
    coat_length: CoatLength | None = None
    coat_pattern: str | None = None
    body_type: BodyType | None = None
    temperament: str | None = Field(None, min_length=1)
    activity_level: Level | None = None
    grooming_needs: Level | None = None
    health_issues: str | None = None
    genetic_info: str | None = None
    lifespan_min: int | None = Field(None, gt=0)
    lifespan_max: int | None = Field(None, gt=0)
    weight_min_female: float | None = Field(None, gt=0)
    weight_max_female: float | None = Field(None, gt=0)
    weight_min_male: float | None = Field(None, gt=0)
    weight_max_male: float | None = Field(None, gt=0)
    description: str | None = Field(None, min_length=1)
    care_requirements: str | None = None
    ideal_for: str | None = None
    personality: PersonalityScoresSchema | None = None
    image_path: str | None = Field(None, min_length=1)


class BreedResponse(BreedBase, TimestampSchema):
    """Breed read model, detached from any session."""

    id: int

    @property
    def lifespan(self) -> str:
        return f"{self.lifespan_min}-{self.lifespan_max} years"

    def weight_range(self, sex: str | None = None) -> str:
        """Human-readable weight range for one sex, or overall."""
        if sex == "male":
            return f"{self.weight_min_male}-{self.weight_max_male} kg"
        if sex == "female":
            return f"{self.weight_min_female}-{self.weight_max_female} kg"
        return f"{self.weight_min_female}-{self.weight_max_male} kg"

    def temperament_traits(self) -> list[str]:
        return [t.strip() for t in self.temperament.split(",") if t.strip()]
