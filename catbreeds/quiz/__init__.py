"""Personality quiz: question bank, scoring state machine and recommendations."""

from catbreeds.quiz.engine import (
    QuestionState,
    QuizEngine,
    QuizOutcome,
    classify,
    score_labels,
)
from catbreeds.quiz.questions import (
    PERSONALITY_PROFILES,
    QUIZ_QUESTIONS,
    PersonalityProfile,
    PersonalityType,
    QuizOption,
    QuizQuestion,
    ScoreVector,
)
from catbreeds.quiz.recommend import match_breeds

__all__ = [
    "QuizEngine",
    "QuestionState",
    "QuizOutcome",
    "classify",
    "score_labels",
    "match_breeds",
    "QUIZ_QUESTIONS",
    "PERSONALITY_PROFILES",
    "PersonalityProfile",
    "PersonalityType",
    "QuizOption",
    "QuizQuestion",
    "ScoreVector",
]
