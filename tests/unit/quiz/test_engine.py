"""Tests for the quiz state machine."""

import pytest

from catbreeds.exceptions import QuizStateError
from catbreeds.quiz import (
    QUIZ_QUESTIONS,
    PersonalityType,
    QuestionState,
    QuizEngine,
    QuizOutcome,
    ScoreVector,
)

SOCIAL_BUTTERFLY = ("q1b", "q2a", "q3c", "q4a", "q5a", "q6b", "q7a", "q8a")
QUIET_OBSERVER = ("q1a", "q2d", "q3a", "q4c", "q5d", "q6a", "q7c", "q8c")


class TestForwardProgress:
    """Tests for select/advance."""

    def test_initial_state(self):
        """A fresh quiz sits at the first question with zero scores."""
        quiz = QuizEngine()

        state = quiz.current_state()

        assert isinstance(state, QuestionState)
        assert state.question_index == 0
        assert state.question.id == "q1"
        assert len(state.options) == 4
        assert not state.can_go_back
        assert state.selected_option_id is None
        assert state.progress == pytest.approx(1 / 8)
        assert quiz.scores == ScoreVector()

    def test_select_does_not_score(self):
        """Selecting an option leaves the scores untouched."""
        quiz = QuizEngine()

        quiz.select_option("q1b")

        assert quiz.scores == ScoreVector()
        assert quiz.current_state().selected_option_id == "q1b"

    def test_reselect_replaces_pending(self):
        """A second selection replaces the pending one."""
        quiz = QuizEngine()
        quiz.select_option("q1a")
        quiz.select_option("q1c")

        quiz.advance()

        assert quiz.answers == ["q1c"]
        assert quiz.scores == ScoreVector(0, 2, 0, 1, 0)

    def test_advance_adds_contribution(self):
        """Advancing adds the selected option's scores."""
        quiz = QuizEngine()
        quiz.select_option("q1b")

        state = quiz.advance()

        assert quiz.scores == ScoreVector(2, 1, -1, 0, 1)
        assert quiz.answers == ["q1b"]
        assert state.question_index == 1
        assert state.can_go_back
        assert state.selected_option_id is None

    def test_advance_without_selection(self):
        """Advancing with nothing selected raises QuizStateError."""
        quiz = QuizEngine()

        with pytest.raises(QuizStateError):
            quiz.advance()

    def test_option_from_other_question_rejected(self):
        """An option id from another question is rejected."""
        quiz = QuizEngine()

        with pytest.raises(QuizStateError):
            quiz.select_option("q2a")

    def test_completes_after_last_question(self):
        """Answering the last question yields the outcome."""
        quiz = QuizEngine()

        for option_id in SOCIAL_BUTTERFLY:
            state = quiz.answer_question(option_id)

        assert isinstance(state, QuizOutcome)
        assert quiz.completed
        assert state.classification == PersonalityType.ENERGETIC_SOCIAL
        assert state.profile.name == "The Social Butterfly"
        assert state.scores == ScoreVector(8, 10, -8, 6, 7)
        assert state.answers == SOCIAL_BUTTERFLY

    def test_completed_quiz_rejects_transitions(self):
        """A completed quiz rejects select and retreat."""
        quiz = QuizEngine()
        for option_id in QUIET_OBSERVER:
            quiz.answer_question(option_id)

        with pytest.raises(QuizStateError):
            quiz.select_option("q8a")
        with pytest.raises(QuizStateError):
            quiz.retreat()

    def test_reset(self):
        """Reset returns to the first question with no answers."""
        quiz = QuizEngine()
        for option_id in QUIET_OBSERVER:
            quiz.answer_question(option_id)

        quiz.reset()

        assert not quiz.completed
        assert quiz.answers == []
        assert quiz.scores == ScoreVector()
        assert quiz.current_state().question_index == 0


class TestBackNavigation:
    """Tests for retreat and score reversal."""

    def test_retreat_at_first_question(self):
        """Going back from the first question raises QuizStateError."""
        quiz = QuizEngine()

        with pytest.raises(QuizStateError):
            quiz.retreat()

    def test_retreat_restores_scores_and_preselects(self):
        """Going back subtracts the previous answer and pre-selects it."""
        quiz = QuizEngine()
        quiz.answer_question("q1b")
        quiz.answer_question("q2a")

        state = quiz.previous_question()

        assert state.question_index == 1
        assert state.selected_option_id == "q2a"
        assert quiz.answers == ["q1b"]
        assert quiz.scores == ScoreVector(2, 1, -1, 0, 1)

    def test_preselection_needs_explicit_advance(self):
        """A pre-selected answer is only scored again on advance."""
        quiz = QuizEngine()
        quiz.answer_question("q1b")
        quiz.retreat()

        assert quiz.scores == ScoreVector()

        quiz.advance()

        assert quiz.answers == ["q1b"]
        assert quiz.scores == ScoreVector(2, 1, -1, 0, 1)

    @pytest.mark.parametrize("steps", range(1, len(QUIZ_QUESTIONS)))
    def test_full_reversal_returns_to_zero(self, steps):
        """Rewinding every answer brings the scores back to zero."""
        quiz = QuizEngine()
        for option_id in QUIET_OBSERVER[:steps]:
            quiz.answer_question(option_id)

        for _ in range(steps):
            quiz.retreat()

        assert quiz.scores == ScoreVector()
        assert quiz.answers == []
        assert quiz.question_index == 0

    def test_scores_equal_sum_of_recorded_answers(self):
        """Scores always equal the sum of the recorded answers."""
        quiz = QuizEngine()
        for option_id in ("q1a", "q2b", "q3c", "q4d"):
            quiz.answer_question(option_id)
        quiz.retreat()
        quiz.retreat()
        quiz.answer_question("q3a")
        quiz.answer_question("q4b")
        quiz.retreat()

        expected = ScoreVector()
        for index, option_id in enumerate(quiz.answers):
            expected = expected + QUIZ_QUESTIONS[index].option(option_id).scores

        assert quiz.answers == ["q1a", "q2b", "q3a"]
        assert quiz.scores == expected

    def test_changing_last_answer_keeps_dominant_profile(self):
        """A single changed answer is not enough to leave the social profile."""
        quiz = QuizEngine()
        for option_id in SOCIAL_BUTTERFLY:
            if option_id == "q8a":
                break
            quiz.answer_question(option_id)
        quiz.answer_question("q8b")

        assert quiz.current_state().classification == PersonalityType.ENERGETIC_SOCIAL

    def test_changed_answers_reach_different_profile(self):
        """Rewinding and re-answering yields the new answers' profile."""
        quiet = QuizEngine()
        for option_id in QUIET_OBSERVER:
            quiet.answer_question(option_id)
        quiz = QuizEngine()
        for option_id in QUIET_OBSERVER[:7]:
            quiz.answer_question(option_id)

        for _ in range(7):
            quiz.previous_question()
        for option_id in SOCIAL_BUTTERFLY:
            outcome = quiz.answer_question(option_id)

        assert quiet.outcome.classification != PersonalityType.ENERGETIC_SOCIAL
        assert outcome.classification == PersonalityType.ENERGETIC_SOCIAL
        assert outcome.scores == ScoreVector(8, 10, -8, 6, 7)
