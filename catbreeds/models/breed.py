"""Breed model."""

import enum

from sqlalchemy import Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catbreeds.database import Base
from catbreeds.models.base import TimestampMixin


class CoatLength(str, enum.Enum):
    """Coat length enum."""

    HAIRLESS = "Hairless"
    SHORT = "Short"
    MEDIUM = "Medium"
    SEMI_LONG = "Semi-long"
    LONG = "Long"


class BodyType(str, enum.Enum):
    """Body type enum."""

    COBBY = "Cobby"  # short, compact, low-legged
    SEMI_COBBY = "Semi-cobby"
    SEMI_FOREIGN = "Semi-foreign"  # medium build
    FOREIGN = "Foreign"  # long, lean, fine-boned
    ORIENTAL = "Oriental"  # extremely long and lean


class Level(str, enum.Enum):
    """Ordered five-step level used for activity and grooming."""

    LOW = "Low"
    LOW_MEDIUM = "Low-Medium"
    MEDIUM = "Medium"
    MEDIUM_HIGH = "Medium-High"
    HIGH = "High"


ActivityLevel = Level
GroomingLevel = Level


class Breed(Base, TimestampMixin):
    """Breed table model."""

    __tablename__ = "breeds"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str | None] = mapped_column(String(10), nullable=True, index=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    origin: Mapped[str] = mapped_column(String(100), nullable=False, index=True)

    # Physical traits
    coat_length: Mapped[str] = mapped_column(String(20), nullable=False)
    coat_pattern: Mapped[str | None] = mapped_column(Text, nullable=True)
    body_type: Mapped[str] = mapped_column(String(20), nullable=False)

    # Behaviour and care
    temperament: Mapped[str] = mapped_column(Text, nullable=False)  # comma-separated traits
    activity_level: Mapped[str] = mapped_column(String(20), nullable=False)
    grooming_needs: Mapped[str] = mapped_column(String(20), nullable=False)
    health_issues: Mapped[str | None] = mapped_column(Text, nullable=True)
    genetic_info: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Bounds (years / kg)
    lifespan_min: Mapped[int] = mapped_column(Integer, nullable=False)
    lifespan_max: Mapped[int] = mapped_column(Integer, nullable=False)
    weight_min_female: Mapped[float] = mapped_column(Float, nullable=False)
    weight_max_female: Mapped[float] = mapped_column(Float, nullable=False)
    weight_min_male: Mapped[float] = mapped_column(Float, nullable=False)
    weight_max_male: Mapped[float] = mapped_column(Float, nullable=False)

    # Prose
    description: Mapped[str] = mapped_column(Text, nullable=False)
    care_requirements: Mapped[str | None] = mapped_column(Text, nullable=True)
    ideal_for: Mapped[str | None] = mapped_column(Text, nullable=True)

    image_path: Mapped[str] = mapped_column(String(255), nullable=False)

    # Relationships
    personality = relationship(
        "BreedPersonality",
        back_populates="breed",
        uselist=False,
        lazy="selectin",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Breed(id={self.id}, name='{self.name}')>"


class BreedPersonality(Base):
    """Structured personality sub-scores (0-10), one row per breed."""

    __tablename__ = "breed_personality_scores"

    breed_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("breeds.id", ondelete="CASCADE"), primary_key=True
    )
    energy: Mapped[int] = mapped_column(Integer, nullable=False)
    friendliness: Mapped[int] = mapped_column(Integer, nullable=False)
    intelligence: Mapped[int] = mapped_column(Integer, nullable=False)

    breed = relationship("Breed", back_populates="personality")

    def __repr__(self) -> str:
        return f"<BreedPersonality(breed_id={self.breed_id})>"
