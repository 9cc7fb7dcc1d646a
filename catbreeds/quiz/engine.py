"""Quiz scoring state machine and personality classification."""

from collections.abc import Sequence
from dataclasses import dataclass

from catbreeds.exceptions import QuizStateError
from catbreeds.quiz.questions import (
    PERSONALITY_PROFILES,
    QUIZ_QUESTIONS,
    PersonalityProfile,
    PersonalityType,
    QuizOption,
    QuizQuestion,
    ScoreVector,
)

SCORE_LABELS = {
    "energy": ("Energetic", "Calm"),
    "social": ("Social", "Independent"),
    "routine": ("Routine-loving", "Flexible"),
    "attention": ("Attention-seeking", "Low-maintenance"),
    "playfulness": ("Playful", "Serious"),
}


def classify(scores: ScoreVector) -> PersonalityType:
    """
    Map a final score vector to exactly one personality type.

    Conditions overlap; they are tried in order and the first match wins.
    """
    energetic = scores.energy > 0
    social = scores.social > 0
    playful = scores.playfulness > 0
    routine_loving = scores.routine > 0
    attention_seeking = scores.attention > 0

    if energetic and social and playful:
        return PersonalityType.ENERGETIC_SOCIAL
    elif energetic and not social:
        return PersonalityType.ENERGETIC_INDEPENDENT
    elif not energetic and social and not playful:
        return PersonalityType.CALM_SOCIAL
    elif not energetic and not social and not playful:
        return PersonalityType.CALM_INDEPENDENT
    elif playful and social and attention_seeking:
        return PersonalityType.PLAYFUL_SOCIAL
    elif playful and not social:
        return PersonalityType.PLAYFUL_INDEPENDENT
    elif not energetic and social and routine_loving:
        return PersonalityType.GENTLE_SOCIAL
    else:
        return PersonalityType.GENTLE_INDEPENDENT


def score_labels(scores: ScoreVector) -> dict[str, str]:
    """Human-readable label for each dimension's sign."""
    labels = {}
    for dimension, (positive, negative) in SCORE_LABELS.items():
        labels[dimension] = positive if getattr(scores, dimension) > 0 else negative
    return labels


@dataclass(frozen=True)
class QuestionState:
    """Quiz in progress at one question."""

    question_index: int
    question: QuizQuestion
    options: tuple[QuizOption, ...]
    can_go_back: bool
    selected_option_id: str | None
    total_questions: int

    @property
    def progress(self) -> float:
        return (self.question_index + 1) / self.total_questions


@dataclass(frozen=True)
class QuizOutcome:
    """Completed quiz."""

    classification: PersonalityType
    profile: PersonalityProfile
    scores: ScoreVector
    answers: tuple[str, ...]


class QuizEngine:
    """Linear question sequence with a reversible score accumulator."""

    def __init__(self, questions: Sequence[QuizQuestion] = QUIZ_QUESTIONS):
        if not questions:
            raise ValueError("A quiz needs at least one question")
        self.questions = tuple(questions)
        self.reset()

    def reset(self) -> None:
        """Discard all progress and start at the first question."""
        self.question_index = 0
        self.scores = ScoreVector()
        self.answers: list[str] = []
        self.pending: str | None = None
        self.outcome: QuizOutcome | None = None

    @property
    def completed(self) -> bool:
        return self.outcome is not None

    @property
    def current_question(self) -> QuizQuestion:
        self._require_in_progress()
        return self.questions[self.question_index]

    def select_option(self, option_id: str) -> None:
        """Record a pending selection; scores change only on advance()."""
        question = self.current_question
        if question.option(option_id) is None:
            raise QuizStateError(f"Option {option_id!r} does not belong to question {question.id!r}")
        self.pending = option_id

    def advance(self) -> QuestionState | QuizOutcome:
        """Commit the pending selection and move to the next question."""
        question = self.current_question
        if self.pending is None:
            raise QuizStateError("No option selected")

        option = question.option(self.pending)
        self.scores = self.scores + option.scores
        self.answers.append(option.id)
        self.pending = None

        if self.question_index + 1 == len(self.questions):
            classification = classify(self.scores)
            self.outcome = QuizOutcome(
                classification=classification,
                profile=PERSONALITY_PROFILES[classification],
                scores=self.scores,
                answers=tuple(self.answers),
            )
        else:
            self.question_index += 1
        return self.current_state()

    def retreat(self) -> QuestionState:
        """Undo the previous answer and pre-select it on the previous question."""
        self._require_in_progress()
        if self.question_index == 0:
            raise QuizStateError("Already at the first question")

        previous = self.questions[self.question_index - 1]
        answer = self.answers.pop()
        self.scores = self.scores - previous.option(answer).scores
        self.question_index -= 1
        self.pending = answer
        return self.current_state()

    def answer_question(self, option_id: str) -> QuestionState | QuizOutcome:
        """Select and commit an option in one step."""
        self.select_option(option_id)
        return self.advance()

    def previous_question(self) -> QuestionState:
        return self.retreat()

    def current_state(self) -> QuestionState | QuizOutcome:
        if self.outcome is not None:
            return self.outcome
        question = self.questions[self.question_index]
        return QuestionState(
            question_index=self.question_index,
            question=question,
            options=question.options,
            can_go_back=self.question_index > 0,
            selected_option_id=self.pending,
            total_questions=len(self.questions),
        )

    def _require_in_progress(self) -> None:
        if self.outcome is not None:
            raise QuizStateError("Quiz already completed")
