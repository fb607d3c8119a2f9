"""End-to-end flow: source questions, take a quiz, score it and keep history."""

import random

from prepquiz.engine.quiz_engine import QuizEngine
from prepquiz.engine.scoring import ScoringEngine
from prepquiz.graph.workflow import source_questions
from prepquiz.history import HistoryStore
from prepquiz.models.quiz import QuizCategory, QuizMode, SessionStatus


class TestFullQuiz:
    """Test a complete practice session."""

    def test_three_of_four_math(self, sample_questions, clock, tmp_path):
        """Test answering 3 of 4 correctly scores 75% and lands in history."""
        engine = QuizEngine(sample_questions, [QuizCategory.MATH], clock=clock)
        for index, question in enumerate(sample_questions):
            engine.start_question(question.id)
            clock.advance(20)
            choice = question.correct_answer if index < 3 else question.correct_answer + 1
            engine.submit_answer(question.id, choice)
        session = engine.complete_quiz()

        score = ScoringEngine.calculate_score(session)
        store = HistoryStore(tmp_path / "history.json")
        store.add_session(session)

        assert session.score == 3
        assert score.percentage == 75.0
        assert score.time_spent == 80
        assert score.average_time_per_question == 20.0
        assert all(answer.time_spent == 20 for answer in session.answers)
        assert store.get_statistics().best_score == 3
        assert store.get_category_statistics(QuizCategory.MATH).total_attempts == 1

    def test_generated_math_quiz(self, offline_settings, clock):
        """Test four generated math questions with one wrong answer score 75%."""
        questions, _ = source_questions(
            [QuizCategory.MATH], 4, offline_settings, rng=random.Random(11)
        )
        engine = QuizEngine(questions, [QuizCategory.MATH], clock=clock)

        for index, question in enumerate(questions):
            wrong = (question.correct_answer + 1) % len(question.options)
            engine.submit_answer(question.id, question.correct_answer if index else wrong)
            assert engine.get_progress().current == index + 1
        session = engine.complete_quiz()
        score = ScoringEngine.calculate_score(session)

        assert len(questions) == 4
        assert all(q.category == QuizCategory.MATH for q in questions)
        assert session.score == 3
        assert score.percentage == 75.0
        assert score.category_scores[QuizCategory.MATH].percentage == 75.0

    def test_generated_exam(self, offline_settings, clock):
        """Test a locally generated exam answered perfectly."""
        categories = [
            QuizCategory.MATH,
            QuizCategory.VERBAL_REASONING,
            QuizCategory.LOGICAL_REASONING,
        ]
        questions, source = source_questions(
            categories, 50, offline_settings, rng=random.Random(99)
        )
        engine = QuizEngine(questions, categories, mode=QuizMode.EXAM, clock=clock)

        for question in questions:
            engine.submit_answer(question.id, question.correct_answer)
            clock.advance(10)
        session = engine.complete_quiz()
        score = ScoringEngine.calculate_score(session)

        assert source == "local"
        assert session.status == SessionStatus.COMPLETED
        assert score.total_score == 50
        assert score.category_scores[QuizCategory.MATH].total == 17
        assert score.category_scores[QuizCategory.LOGICAL_REASONING].total == 16
        assert engine.is_time_up(offline_settings.exam_time_limit) is False
        assert ScoringEngine.get_performance_level(score.percentage).level == "Excellent"
