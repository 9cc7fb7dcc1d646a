"""Quiz question bank and personality profiles."""

import enum
from dataclasses import dataclass, fields

DIMENSIONS = ("energy", "social", "routine", "attention", "playfulness")


@dataclass(frozen=True)
class ScoreVector:
    """Signed score per personality dimension.

    energy: calm (-) to energetic (+)
    social: independent (-) to social (+)
    routine: flexible (-) to routine-loving (+)
    attention: low-maintenance (-) to attention-seeking (+)
    playfulness: serious (-) to playful (+)
    """

    energy: int = 0
    social: int = 0
    routine: int = 0
    attention: int = 0
    playfulness: int = 0

    def __add__(self, other: "ScoreVector") -> "ScoreVector":
        return ScoreVector(*(getattr(self, f.name) + getattr(other, f.name) for f in fields(self)))

    def __sub__(self, other: "ScoreVector") -> "ScoreVector":
        return ScoreVector(*(getattr(self, f.name) - getattr(other, f.name) for f in fields(self)))

    def as_dict(self) -> dict[str, int]:
        return {name: getattr(self, name) for name in DIMENSIONS}


@dataclass(frozen=True)
class QuizOption:
    id: str
    text: str
    scores: ScoreVector


@dataclass(frozen=True)
class QuizQuestion:
    id: str
    question: str
    category: str
    options: tuple[QuizOption, ...]

    def option(self, option_id: str) -> QuizOption | None:
        return next((o for o in self.options if o.id == option_id), None)


class PersonalityType(str, enum.Enum):
    """Personality classifications, in decision-list order."""

    ENERGETIC_SOCIAL = "ENERGETIC_SOCIAL"
    ENERGETIC_INDEPENDENT = "ENERGETIC_INDEPENDENT"
    CALM_SOCIAL = "CALM_SOCIAL"
    CALM_INDEPENDENT = "CALM_INDEPENDENT"
    PLAYFUL_SOCIAL = "PLAYFUL_SOCIAL"
    PLAYFUL_INDEPENDENT = "PLAYFUL_INDEPENDENT"
    GENTLE_SOCIAL = "GENTLE_SOCIAL"
    GENTLE_INDEPENDENT = "GENTLE_INDEPENDENT"


@dataclass(frozen=True)
class PersonalityProfile:
    type: PersonalityType
    name: str
    description: str
    traits: tuple[str, ...]
    ideal_breeds: tuple[str, ...]


def _option(id: str, text: str, energy: int, social: int, routine: int, attention: int, playfulness: int) -> QuizOption:
    return QuizOption(id, text, ScoreVector(energy, social, routine, attention, playfulness))


QUIZ_QUESTIONS: tuple[QuizQuestion, ...] = (
    QuizQuestion("q1", "How do you prefer to spend your free time?", "energy", (
        _option("q1a", "Relaxing with a book or movie", -2, 0, 1, 0, -1),
        _option("q1b", "Going out and being active", 2, 1, -1, 0, 1),
        _option("q1c", "Hanging out with friends", 0, 2, 0, 1, 0),
        _option("q1d", "Working on personal projects", 0, -1, 0, -1, 0),
    )),
    QuizQuestion("q2", "In social situations, you tend to:", "social", (
        _option("q2a", "Be the center of attention", 1, 2, -1, 2, 1),
        _option("q2b", "Enjoy conversations with a few close friends", 0, 1, 1, 0, 0),
        _option("q2c", "Prefer to observe and listen", -1, -1, 1, -1, -1),
        _option("q2d", "Leave early to recharge alone", -1, -2, 0, -2, -1),
    )),
    QuizQuestion("q3", "Your ideal daily routine is:", "routine", (
        _option("q3a", "Highly structured with set times for everything", 0, 0, 2, 0, -1),
        _option("q3b", "Flexible but with some key anchor points", 0, 0, 1, 0, 0),
        _option("q3c", "Spontaneous - go with the flow", 1, 0, -2, 0, 1),
        _option("q3d", "Minimal structure, maximum freedom", 0, -1, -1, -1, 0),
    )),
    QuizQuestion("q4", "When you need comfort, you prefer:", "attention", (
        _option("q4a", "Being surrounded by loved ones", 0, 2, 0, 2, 0),
        _option("q4b", "One-on-one time with someone special", 0, 1, 1, 1, 0),
        _option("q4c", "Being alone to process feelings", -1, -2, 0, -2, -1),
        _option("q4d", "Distracting yourself with activities", 1, 0, -1, 0, 1),
    )),
    QuizQuestion("q5", "Your approach to new experiences is:", "playfulness", (
        _option("q5a", "Dive right in with enthusiasm", 2, 1, -2, 0, 2),
        _option("q5b", "Cautiously optimistic", 0, 0, 0, 0, 0),
        _option("q5c", "Prefer familiar experiences", -1, 0, 2, 0, -1),
        _option("q5d", "Avoid unless necessary", -2, -1, 1, -1, -2),
    )),
    QuizQuestion("q6", "Your ideal living space is:", "energy", (
        _option("q6a", "Cozy and quiet", -2, -1, 1, 0, -1),
        _option("q6b", "Open and social", 0, 2, 0, 1, 0),
        _option("q6c", "Lots of space to move around", 2, 0, -1, 0, 1),
        _option("q6d", "Organized and efficient", 0, 0, 2, 0, 0),
    )),
    QuizQuestion("q7", "How do you handle stress?", "social", (
        _option("q7a", "Talk it out with others", 0, 2, 0, 1, 0),
        _option("q7b", "Physical activity or exercise", 2, 0, -1, 0, 1),
        _option("q7c", "Quiet time alone", -1, -2, 1, -1, -1),
        _option("q7d", "Stick to my usual routine", 0, 0, 2, 0, -1),
    )),
    QuizQuestion("q8", "Your ideal weekend activity is:", "playfulness", (
        _option("q8a", "Trying something new and exciting", 2, 0, -2, 0, 2),
        _option("q8b", "Spending time with family/friends", 0, 2, 0, 1, 0),
        _option("q8c", "Peaceful activities at home", -2, -1, 1, -1, -1),
        _option("q8d", "Organizing and planning", 0, 0, 2, 0, -1),
    )),
)


PERSONALITY_PROFILES: dict[PersonalityType, PersonalityProfile] = {
    PersonalityType.ENERGETIC_SOCIAL: PersonalityProfile(
        PersonalityType.ENERGETIC_SOCIAL,
        "The Social Butterfly",
        "You love being around others and thrive on activity and interaction. "
        "You need a companion who can match your energy and social nature.",
        ("Social", "Energetic", "Playful", "Attention-seeking", "Interactive"),
        ("Bengal", "Siamese", "Maine Coon", "Abyssinian"),
    ),
    PersonalityType.ENERGETIC_INDEPENDENT: PersonalityProfile(
        PersonalityType.ENERGETIC_INDEPENDENT,
        "The Free Spirit",
        "You love adventure and activity but prefer to do things on your own terms. "
        "You need an active but independent companion.",
        ("Independent", "Energetic", "Adventurous", "Self-sufficient", "Active"),
        ("Savannah", "Egyptian Mau", "Ocicat", "Chausie"),
    ),
    PersonalityType.CALM_SOCIAL: PersonalityProfile(
        PersonalityType.CALM_SOCIAL,
        "The Gentle Companion",
        "You enjoy peaceful moments with loved ones and prefer calm, affectionate "
        "interactions. You need a gentle, social companion.",
        ("Calm", "Social", "Affectionate", "Gentle", "Loyal"),
        ("Ragdoll", "Persian", "Birman", "Scottish Fold"),
    ),
    PersonalityType.CALM_INDEPENDENT: PersonalityProfile(
        PersonalityType.CALM_INDEPENDENT,
        "The Peaceful Soul",
        "You value tranquility and independence, preferring quiet moments and "
        "low-maintenance relationships.",
        ("Independent", "Calm", "Low-maintenance", "Peaceful", "Self-reliant"),
        ("Russian Blue", "British Shorthair", "Chartreux", "Norwegian Forest"),
    ),
    PersonalityType.PLAYFUL_SOCIAL: PersonalityProfile(
        PersonalityType.PLAYFUL_SOCIAL,
        "The Entertainer",
        "You love fun, games, and entertaining others. You need a playful, social "
        "companion who can be your entertainment partner.",
        ("Playful", "Social", "Entertaining", "Attention-seeking", "Fun-loving"),
        ("Devon Rex", "Cornish Rex", "Munchkin", "Japanese Bobtail"),
    ),
    PersonalityType.PLAYFUL_INDEPENDENT: PersonalityProfile(
        PersonalityType.PLAYFUL_INDEPENDENT,
        "The Solo Adventurer",
        "You enjoy play and exploration but prefer to do it on your own terms. "
        "You need a playful but self-sufficient companion.",
        ("Independent", "Playful", "Curious", "Self-entertaining", "Adventurous"),
        ("Somali", "Turkish Van", "Singapura", "LaPerm"),
    ),
    PersonalityType.GENTLE_SOCIAL: PersonalityProfile(
        PersonalityType.GENTLE_SOCIAL,
        "The Nurturing Heart",
        "You prefer gentle, predictable interactions with others and value routine "
        "and stability in relationships.",
        ("Gentle", "Social", "Nurturing", "Routine-loving", "Stable"),
        ("Himalayan", "Exotic Shorthair", "Selkirk Rex", "Manx"),
    ),
    PersonalityType.GENTLE_INDEPENDENT: PersonalityProfile(
        PersonalityType.GENTLE_INDEPENDENT,
        "The Quiet Observer",
        "You prefer gentle, independent living with minimal drama and maximum peace. "
        "You value quiet companionship.",
        ("Independent", "Gentle", "Quiet", "Observant", "Peaceful"),
        ("Korat", "Nebelung", "Havana Brown", "Bombay"),
    ),
}
