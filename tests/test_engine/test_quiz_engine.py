"""Tests for the quiz engine."""

import pytest

from prepquiz.engine.quiz_engine import QuizEngine, generate_session_id
from prepquiz.errors import (
    InvalidAnswerError,
    InvalidQuestionReferenceError,
    PrepQuizError,
    QuizStateError,
)
from prepquiz.models.quiz import QuizCategory, QuizMode, QuizQuestion, SessionStatus


@pytest.fixture
def engine(sample_questions: list[QuizQuestion], clock) -> QuizEngine:
    return QuizEngine(sample_questions, [QuizCategory.MATH], clock=clock)


@pytest.fixture
def mixed_engine(mixed_questions: list[QuizQuestion], clock) -> QuizEngine:
    return QuizEngine(
        mixed_questions,
        [QuizCategory.MATH, QuizCategory.VERBAL_REASONING, QuizCategory.LOGICAL_REASONING],
        clock=clock,
    )


class TestSessionSetup:
    """Test engine construction."""

    def test_initial_session(self, engine: QuizEngine, clock):
        """Test the fresh session state."""
        session = engine.get_current_session()

        assert session.status == SessionStatus.IN_PROGRESS
        assert session.total_questions == 4
        assert session.answers == []
        assert session.start_time == clock.now
        assert session.mode == QuizMode.PRACTICE

    def test_session_ids_unique(self):
        """Test that generated session ids differ."""
        assert generate_session_id() != generate_session_id()
        assert generate_session_id().startswith("quiz_")


class TestSubmitAnswer:
    """Test answering questions."""

    def test_correct_answer(self, engine: QuizEngine):
        """Test a correct answer increments the category tally."""
        answer = engine.submit_answer("math_1", 1)

        assert answer.is_correct is True
        assert engine.get_current_session().category_scores[QuizCategory.MATH] == 1

    def test_incorrect_answer(self, engine: QuizEngine):
        """Test a wrong answer leaves the tally alone."""
        answer = engine.submit_answer("math_1", 0)

        assert answer.is_correct is False
        assert engine.get_current_session().category_scores[QuizCategory.MATH] == 0

    def test_unknown_question_rejected(self, engine: QuizEngine):
        """Test that an unknown id raises and records nothing."""
        with pytest.raises(InvalidQuestionReferenceError) as exc_info:
            engine.submit_answer("missing", 0)

        assert exc_info.value.question_id == "missing"
        assert engine.get_current_session().answers == []

    @pytest.mark.parametrize("selected", [4, 9, -1])
    def test_out_of_range_answer_rejected(self, engine: QuizEngine, selected: int):
        """Test an index outside the options raises and records nothing."""
        with pytest.raises(InvalidAnswerError) as exc_info:
            engine.submit_answer("math_1", selected)

        assert isinstance(exc_info.value, PrepQuizError)
        assert exc_info.value.selected_answer == selected
        assert engine.get_current_session().answers == []
        assert engine.get_current_session().category_scores[QuizCategory.MATH] == 0

    def test_unknown_question_error_is_lookup_error(self, engine: QuizEngine):
        """Test the error can be caught as a LookupError."""
        with pytest.raises(LookupError):
            engine.submit_answer("missing", 0)

    def test_time_spent_from_start_question(self, engine: QuizEngine, clock):
        """Test per-question timing uses start_question."""
        engine.start_question("math_2")
        clock.advance(12)
        answer = engine.submit_answer("math_2", 1)

        assert answer.time_spent == 12

    def test_time_spent_zero_without_start(self, engine: QuizEngine, clock):
        """Test that an unstarted question records zero seconds."""
        clock.advance(30)

        assert engine.submit_answer("math_3", 1).time_spent == 0

    def test_start_question_unknown_id(self, engine: QuizEngine):
        """Test that starting an unknown question raises."""
        with pytest.raises(InvalidQuestionReferenceError):
            engine.start_question("missing")

    def test_resubmission_replaces_answer(self, engine: QuizEngine):
        """Test that answering twice keeps only the last answer."""
        engine.submit_answer("math_1", 1)
        engine.submit_answer("math_1", 0)
        session = engine.get_current_session()

        assert len(session.answers) == 1
        assert session.answers[0].selected_answer == 0
        assert session.category_scores[QuizCategory.MATH] == 0

    def test_resubmission_wrong_to_right(self, engine: QuizEngine):
        """Test that fixing an answer counts it once."""
        engine.submit_answer("math_1", 0)
        engine.submit_answer("math_1", 1)
        engine.submit_answer("math_1", 1)

        assert engine.get_current_session().category_scores[QuizCategory.MATH] == 1

    def test_answers_rejected_after_completion(self, engine: QuizEngine):
        """Test that a completed session refuses new answers."""
        engine.complete_quiz()

        with pytest.raises(QuizStateError):
            engine.submit_answer("math_1", 1)

    def test_answers_rejected_after_abandon(self, engine: QuizEngine):
        """Test that an abandoned session refuses new answers."""
        engine.abandon_quiz()

        with pytest.raises(QuizStateError):
            engine.submit_answer("math_1", 1)


class TestCompletion:
    """Test finishing a session."""

    def test_complete_sets_score_and_time(self, engine: QuizEngine, clock):
        """Test that completion fills end time, duration and score."""
        engine.submit_answer("math_1", 1)
        engine.submit_answer("math_2", 1)
        engine.submit_answer("math_3", 0)
        clock.advance(95)
        session = engine.complete_quiz()

        assert session.status == SessionStatus.COMPLETED
        assert session.score == 2
        assert session.time_spent == 95
        assert session.end_time == clock.now

    def test_score_matches_category_tallies(self, mixed_engine: QuizEngine):
        """Test that the score equals the sum of category tallies."""
        mixed_engine.submit_answer("math_q", 1)
        mixed_engine.submit_answer("verbal_q", 0)
        mixed_engine.submit_answer("logical_q", 0)
        session = mixed_engine.complete_quiz()

        assert session.score == 2
        assert sum(session.category_scores.values()) == session.score
        assert session.category_scores[QuizCategory.VERBAL_REASONING] == 1
        assert session.category_scores[QuizCategory.LOGICAL_REASONING] == 0

    def test_complete_twice_is_idempotent(self, engine: QuizEngine, clock):
        """Test that completing again changes nothing."""
        first = engine.complete_quiz()
        clock.advance(60)
        second = engine.complete_quiz()

        assert second.end_time == first.end_time
        assert second.time_spent == first.time_spent

    def test_abandon_after_complete_rejected(self, engine: QuizEngine):
        """Test that a completed session cannot become abandoned."""
        engine.complete_quiz()

        with pytest.raises(QuizStateError):
            engine.abandon_quiz()

    def test_abandon_records_partial_score(self, engine: QuizEngine):
        """Test that abandoning keeps answers given so far."""
        engine.submit_answer("math_1", 1)
        session = engine.abandon_quiz()

        assert session.status == SessionStatus.ABANDONED
        assert session.score == 1


class TestAccessors:
    """Test read-only views."""

    def test_current_session_is_a_copy(self, engine: QuizEngine):
        """Test that changing the returned session does not leak back."""
        engine.submit_answer("math_1", 1)
        snapshot = engine.get_current_session()
        snapshot.answers.clear()

        assert len(engine.get_current_session().answers) == 1

    def test_answered_and_unanswered(self, engine: QuizEngine):
        """Test the answered id list and the unanswered questions."""
        engine.submit_answer("math_2", 1)

        assert engine.get_answered_questions() == ["math_2"]
        assert [q.id for q in engine.get_unanswered_questions()] == ["math_1", "math_3", "math_4"]

    def test_get_answer(self, engine: QuizEngine):
        """Test looking up a stored answer."""
        engine.submit_answer("math_4", 2)

        assert engine.get_answer("math_4").selected_answer == 2
        assert engine.get_answer("math_1") is None

    def test_get_question_by_id(self, engine: QuizEngine):
        """Test question lookup."""
        assert engine.get_question_by_id("math_3").question == "What is 3 + 3?"
        assert engine.get_question_by_id("nope") is None

    def test_returned_questions_do_not_leak(self, engine: QuizEngine):
        """Test that editing returned questions leaves the session intact."""
        engine.get_question_by_id("math_1").options[1] = "WRONG"
        engine.get_unanswered_questions()[0].options.append("X")

        assert engine.get_question_by_id("math_1").options == ["1", "2", "3", "4"]
        assert engine.get_current_session().questions[0].options == ["1", "2", "3", "4"]
        assert engine.submit_answer("math_1", 1).is_correct is True

    def test_caller_questions_are_copied(self, sample_questions, clock):
        """Test that the caller's question list is not shared with the session."""
        engine = QuizEngine(sample_questions, [QuizCategory.MATH], clock=clock)
        sample_questions[0].options[1] = "WRONG"

        assert engine.get_question_by_id("math_1").options[1] == "2"

    def test_progress(self, engine: QuizEngine):
        """Test answered-so-far progress."""
        engine.submit_answer("math_1", 1)

        progress = engine.get_progress()
        assert progress.current == 1
        assert progress.total == 4
        assert progress.percentage == 25.0

    def test_category_progress(self, mixed_engine: QuizEngine):
        """Test per-category progress."""
        mixed_engine.submit_answer("math_q", 1)
        mixed_engine.submit_answer("verbal_q", 3)

        progress = mixed_engine.get_category_progress()
        assert progress[QuizCategory.MATH].correct == 1
        assert progress[QuizCategory.VERBAL_REASONING].answered == 1
        assert progress[QuizCategory.VERBAL_REASONING].correct == 0
        assert progress[QuizCategory.LOGICAL_REASONING].answered == 0
        assert progress[QuizCategory.LOGICAL_REASONING].total == 1

    def test_time_remaining(self, engine: QuizEngine, clock):
        """Test the countdown against a time limit."""
        clock.advance(100)

        assert engine.get_time_remaining(900) == 800
        assert engine.is_time_up(900) is False

        clock.advance(1000)
        assert engine.get_time_remaining(900) == 0
        assert engine.is_time_up(900) is True
