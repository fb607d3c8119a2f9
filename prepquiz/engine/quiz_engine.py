"""Quiz engine: drives one quiz session from start to a terminal status."""

import logging
import uuid
from collections.abc import Callable, Iterable
from datetime import datetime

from prepquiz.errors import (
    InvalidAnswerError,
    InvalidQuestionReferenceError,
    QuizStateError,
)
from prepquiz.models.quiz import (
    QuizAnswer,
    QuizCategory,
    QuizMode,
    QuizQuestion,
    QuizSession,
    SessionStatus,
)
from prepquiz.models.score import CategoryProgress, QuizProgress

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def generate_session_id() -> str:
    """Unique session id."""
    return f"quiz_{uuid.uuid4().hex[:16]}"


def elapsed_seconds(start: datetime, end: datetime) -> int:
    """Whole seconds between two timestamps, never negative."""
    return max(0, int((end - start).total_seconds()))


class QuizEngine:
    """
    Owns one in-progress quiz session.

    The session is only mutated through :meth:`submit_answer`,
    :meth:`complete_quiz` and :meth:`abandon_quiz`. Every accessor returns a
    copy. A question answered twice keeps only the latest answer.

    Timing is read from ``clock`` at call time; the engine runs no timer of
    its own.
    """

    def __init__(
        self,
        questions: Iterable[QuizQuestion],
        categories: Iterable[QuizCategory],
        mode: QuizMode = QuizMode.PRACTICE,
        clock: Clock | None = None,
        session_id: str | None = None,
    ):
        self._clock = clock or datetime.now
        self.categories = [QuizCategory(category) for category in categories]
        questions = [question.model_copy(deep=True) for question in questions]
        start_time = self._clock()

        self._session = QuizSession(
            id=session_id or generate_session_id(),
            start_time=start_time,
            questions=questions,
            total_questions=len(questions),
            mode=mode,
        )
        self._questions = self._session.question_map()
        self._question_start_times: dict[str, datetime] = {}

    @property
    def session_id(self) -> str:
        return self._session.id

    @property
    def status(self) -> SessionStatus:
        return self._session.status

    def start_question(self, question_id: str) -> None:
        """
        Record when a question was shown. Calling again resets the start time.

        Args:
            question_id: Question being displayed
        """
        self._require_question(question_id)
        self._question_start_times[question_id] = self._clock()

    def submit_answer(self, question_id: str, selected_answer: int) -> QuizAnswer:
        """
        Record an answer.

        Args:
            question_id: Question being answered
            selected_answer: Index of the chosen option

        Returns:
            The stored answer

        Raises:
            InvalidQuestionReferenceError: If the question is not in this session
            InvalidAnswerError: If ``selected_answer`` is not an option index
            QuizStateError: If the session is already completed or abandoned
        """
        question = self._require_question(question_id)
        if self._session.is_terminal:
            raise QuizStateError(
                f"Cannot submit answers to a {self._session.status.value} session"
            )
        if not 0 <= selected_answer < len(question.options):
            raise InvalidAnswerError(question_id, selected_answer, len(question.options))

        started = self._question_start_times.get(question_id)
        time_spent = elapsed_seconds(started, self._clock()) if started else 0

        answer = QuizAnswer(
            question_id=question_id,
            selected_answer=selected_answer,
            is_correct=selected_answer == question.correct_answer,
            time_spent=time_spent,
        )

        answers = self._session.answers
        previous = next(
            (index for index, a in enumerate(answers) if a.question_id == question_id),
            None,
        )
        if previous is None:
            answers.append(answer)
        else:
            logger.debug("Replacing earlier answer for question %s", question_id)
            if answers[previous].is_correct:
                self._session.category_scores[question.category] -= 1
            answers[previous] = answer

        if answer.is_correct:
            self._session.category_scores[question.category] += 1

        return answer.model_copy()

    def complete_quiz(self) -> QuizSession:
        """Finish the session normally."""
        return self._finish(SessionStatus.COMPLETED)

    def abandon_quiz(self) -> QuizSession:
        """Stop the session early."""
        return self._finish(SessionStatus.ABANDONED)

    def _finish(self, status: SessionStatus) -> QuizSession:
        session = self._session
        if session.status == status:
            return self.get_current_session()
        if session.is_terminal:
            raise QuizStateError(
                f"Session already {session.status.value}; cannot mark it {status.value}"
            )

        end_time = self._clock()
        session.end_time = end_time
        session.time_spent = elapsed_seconds(session.start_time, end_time)
        session.score = session.correct_count
        session.status = status
        return self.get_current_session()

    def get_current_session(self) -> QuizSession:
        """Deep copy of the session."""
        return self._session.model_copy(deep=True)

    def get_question_by_id(self, question_id: str) -> QuizQuestion | None:
        question = self._questions.get(question_id)
        return question.model_copy(deep=True) if question is not None else None

    def get_answer(self, question_id: str) -> QuizAnswer | None:
        """The stored answer for a question, if any."""
        for answer in self._session.answers:
            if answer.question_id == question_id:
                return answer.model_copy()
        return None

    def get_answered_questions(self) -> list[str]:
        return [answer.question_id for answer in self._session.answers]

    def get_unanswered_questions(self) -> list[QuizQuestion]:
        answered = set(self.get_answered_questions())
        return [
            q.model_copy(deep=True) for q in self._session.questions if q.id not in answered
        ]

    def get_progress(self) -> QuizProgress:
        """Answered count against the question count."""
        current = len(self._session.answers)
        total = len(self._session.questions)
        percentage = current / total * 100 if total > 0 else 0.0
        return QuizProgress(current=current, total=total, percentage=percentage)

    def get_category_progress(self) -> dict[QuizCategory, CategoryProgress]:
        """Answered, correct and total questions per category."""
        progress = {category: CategoryProgress() for category in QuizCategory}
        for question in self._session.questions:
            progress[question.category].total += 1
        for answer in self._session.answers:
            question = self._questions[answer.question_id]
            progress[question.category].answered += 1
            if answer.is_correct:
                progress[question.category].correct += 1
        return progress

    def get_time_remaining(self, time_limit: int) -> int:
        """Seconds left of ``time_limit`` since the session started."""
        elapsed = elapsed_seconds(self._session.start_time, self._clock())
        return max(0, time_limit - elapsed)

    def is_time_up(self, time_limit: int) -> bool:
        return self.get_time_remaining(time_limit) <= 0

    def _require_question(self, question_id: str) -> QuizQuestion:
        question = self._questions.get(question_id)
        if question is None:
            raise InvalidQuestionReferenceError(question_id)
        return question
