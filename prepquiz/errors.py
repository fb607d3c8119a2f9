"""Exceptions raised by the quiz core."""


class PrepQuizError(Exception):
    """Base class for all quiz core errors."""


class InvalidQuestionReferenceError(PrepQuizError, LookupError):
    """An answer referenced a question id that is not part of the session."""

    def __init__(self, question_id: str):
        self.question_id = question_id
        super().__init__(f"Question with id {question_id} not found")


class QuizStateError(PrepQuizError):
    """An operation is not allowed in the session's current status."""


class InvalidAnswerError(PrepQuizError, ValueError):
    """A submitted answer does not index one of the question's options."""

    def __init__(self, question_id: str, selected_answer: int, option_count: int):
        self.question_id = question_id
        self.selected_answer = selected_answer
        super().__init__(
            f"Answer {selected_answer} is out of range for question {question_id} "
            f"with {option_count} options"
        )


class QuestionValidationError(PrepQuizError, ValueError):
    """Externally supplied question content failed validation."""


class AITimeoutError(PrepQuizError, TimeoutError):
    """The AI provider did not answer within its allotted window."""


class QuestionGenerationError(PrepQuizError):
    """Neither the AI provider nor the local generator produced questions."""


class HistoryStoreError(PrepQuizError):
    """The history file could not be read."""


class AIUnavailableError(PrepQuizError):
    """AI features were requested but no provider is configured."""
