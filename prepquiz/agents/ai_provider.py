"""AI Question Provider - Generates quiz questions with a LangChain chat model."""

import json
import logging
import random
import re
import uuid
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from datetime import datetime

from langchain_anthropic import ChatAnthropic
from langchain_aws import ChatBedrock
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage
from pydantic import BaseModel, Field, ValidationError

from prepquiz.config.settings import Settings
from prepquiz.errors import AITimeoutError, AIUnavailableError, QuestionValidationError
from prepquiz.generators.options import resolve_rng, shuffle
from prepquiz.generators.question_generator import (
    allocate_question_counts,
    generate_category_questions,
)
from prepquiz.generators.vocabulary import VOCABULARY
from prepquiz.models.quiz import AIQuestionPayload, QuizCategory, QuizQuestion

logger = logging.getLogger(__name__)

MAX_PROMPT_VOCABULARY = 6

SYSTEM_PROMPT = (
    "You are an expert at creating CCAT-style cognitive assessment questions. "
    "You must return only valid JSON arrays. Do not include any markdown "
    "formatting, explanations, or additional text."
)

_CODE_FENCE = re.compile(r"^\s*```(?:json)?\s*|\s*```\s*$", re.IGNORECASE)


class AIQuestionResponse(BaseModel):
    """Outcome of one AI generation request."""

    success: bool
    questions: list[QuizQuestion] = Field(default_factory=list)
    error: str | None = None
    filled_locally: int = 0


def build_chat_model(settings: Settings) -> BaseChatModel:
    """
    Create the chat model selected by ``settings.llm_provider``.

    Args:
        settings: Application settings

    Returns:
        ChatAnthropic or ChatBedrock instance
    """
    if settings.llm_provider == "bedrock":
        return ChatBedrock(
            model=settings.model_name,
            temperature=settings.ai_temperature,
            region_name=settings.aws_default_region,
        )

    return ChatAnthropic(
        model=settings.model_name,
        temperature=settings.ai_temperature,
        api_key=settings.anthropic_api_key,
        timeout=settings.ai_timeout_seconds,
        max_retries=1,
    )


def message_text(message: BaseMessage) -> str:
    """Plain text of a chat response, joining content blocks if needed."""
    content = message.content
    if isinstance(content, str):
        return content
    parts = []
    for block in content:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)


def invoke_with_timeout(
    llm: BaseChatModel, messages: list[BaseMessage], timeout: float
) -> BaseMessage:
    """
    Run ``llm.invoke`` in a worker thread and give up after ``timeout`` seconds.

    A request that times out is abandoned, not cancelled.

    Raises:
        AITimeoutError: If no response arrived in time
    """
    executor = ThreadPoolExecutor(max_workers=1)
    future = executor.submit(llm.invoke, messages)
    try:
        return future.result(timeout=timeout)
    except FutureTimeoutError as e:
        raise AITimeoutError(f"AI request timed out after {timeout:g}s") from e
    finally:
        executor.shutdown(wait=False, cancel_futures=True)


def strip_code_fences(content: str) -> str:
    """Remove a surrounding ```json ... ``` block if present."""
    return _CODE_FENCE.sub("", content.strip())


def new_ai_question_id(category: QuizCategory, rng: random.Random) -> str:
    token = uuid.UUID(int=rng.getrandbits(128), version=4).hex[:12]
    return f"ai_{category.value}_{token}"


def parse_ai_questions(
    content: str,
    category: QuizCategory,
    rng: random.Random | None = None,
) -> list[QuizQuestion]:
    """
    Parse and validate the provider's JSON answer.

    The whole array is rejected if any element is malformed.

    Args:
        content: Raw model output
        category: Category the questions belong to
        rng: Source for question ids

    Returns:
        Validated questions

    Raises:
        QuestionValidationError: If the content is not a valid question array
    """
    rng = resolve_rng(rng)
    cleaned = strip_code_fences(content or "")
    if not cleaned:
        raise QuestionValidationError("No content received from the AI provider")

    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise QuestionValidationError(f"AI response is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise QuestionValidationError("AI response is not a JSON array")

    questions = []
    for index, item in enumerate(data):
        try:
            payload = AIQuestionPayload.model_validate(item)
        except ValidationError as e:
            raise QuestionValidationError(f"Invalid question at index {index}: {e}") from e
        questions.append(payload.to_question(category, new_ai_question_id(category, rng)))
    return questions


def validate_questions(questions: Sequence[QuizQuestion]) -> list[QuizQuestion]:
    """
    Re-check question invariants before a session is built from them.

    Raises:
        QuestionValidationError: On an empty or repeated id or an out-of-range answer
    """
    seen: set[str] = set()
    for question in questions:
        if not question.id:
            raise QuestionValidationError("Question id cannot be empty")
        if question.id in seen:
            raise QuestionValidationError(f"Duplicate question id {question.id}")
        if not 0 <= question.correct_answer < len(question.options):
            raise QuestionValidationError(
                f"Question {question.id} has an out-of-range correct answer"
            )
        seen.add(question.id)
    return list(questions)


def build_math_prompt(count: int) -> str:
    return f"""Generate {count} CCAT-style math questions with exactly 4 multiple choice options each.
Include a mix of:
- Basic arithmetic (addition, subtraction, multiplication, division)
- Word problems (speed, percentages, geometry, ratios)
- Simple algebra (solving for x)

Format each question as JSON with this exact structure:
{{"question": "What is 15 + 27?", "options": ["40", "42", "41", "43"], "correctAnswer": 1}}

Return ONLY a valid JSON array of {count} question objects. No additional text."""


def build_verbal_prompt(count: int, rng: random.Random) -> str:
    words = shuffle(VOCABULARY, rng)[: min(count, MAX_PROMPT_VOCABULARY)]
    vocabulary_list = ", ".join(
        f'"{w.word}": "{w.meaning}"' + (f" (antonym: {w.antonym})" if w.antonym else "")
        for w in words
    )
    return f"""Generate {count} CCAT-style verbal reasoning questions using these vocabulary words: {vocabulary_list}

Create questions testing:
- Word meaning and definition
- Context usage and comprehension
- Synonyms and antonyms

Format each question as JSON:
{{"question": "What is the meaning of 'ubiquitous'?", "options": ["Rare", "Present everywhere", "Expensive", "Difficult"], "correctAnswer": 1, "vocabularyWord": "ubiquitous", "context": "Smartphones are ubiquitous in modern society."}}

Return ONLY a valid JSON array of {count} question objects. No additional text."""


def build_logical_prompt(count: int) -> str:
    return f"""Generate {count} CCAT-style logical reasoning questions with exactly 4 multiple choice options each.
Include a mix of:
- Pattern recognition (number sequences, letter sequences)
- Logic puzzles and syllogisms
- Deductive reasoning

Format each question as JSON with this exact structure:
{{"question": "What comes next in the sequence: 2, 4, 8, 16, ?", "options": ["24", "32", "20", "28"], "correctAnswer": 1}}

Return ONLY a valid JSON array of {count} question objects. No additional text."""


class QuizAIProvider:
    """
    Optional AI source of quiz questions.

    Every failure is reported through :class:`AIQuestionResponse` so callers
    can fall back to the local generator.
    """

    def __init__(
        self,
        settings: Settings,
        llm: BaseChatModel | None = None,
        rng: random.Random | None = None,
    ):
        self.settings = settings
        self._llm = llm
        self.rng = resolve_rng(rng)
        self.usage_count = 0
        self.last_used: datetime | None = None

    @property
    def llm(self) -> BaseChatModel:
        if self._llm is None:
            self._llm = build_chat_model(self.settings)
        return self._llm

    @property
    def is_available(self) -> bool:
        """True when AI is switched on and credentials exist (or a model was injected)."""
        if not self.settings.ai_enabled:
            return False
        return self._llm is not None or self.settings.is_ai_configured

    def timeout_for(self, category: QuizCategory) -> float:
        if category == QuizCategory.VERBAL_REASONING:
            return self.settings.ai_verbal_timeout_seconds
        return self.settings.ai_timeout_seconds

    def build_prompt(self, category: QuizCategory, count: int) -> str | None:
        """User prompt for a category, or None if the category is not supported."""
        if category == QuizCategory.MATH:
            return build_math_prompt(count)
        if category == QuizCategory.VERBAL_REASONING:
            return build_verbal_prompt(count, self.rng)
        if category == QuizCategory.LOGICAL_REASONING:
            return build_logical_prompt(count)
        return None

    def generate_category_questions(
        self, category: QuizCategory, count: int
    ) -> list[QuizQuestion]:
        """
        Ask the model for one category's questions.

        Raises:
            AITimeoutError: If the model did not answer in time
            QuestionValidationError: If the answer could not be parsed
        """
        prompt = self.build_prompt(category, count)
        if prompt is None or count <= 0:
            return []

        messages = [
            SystemMessage(content=SYSTEM_PROMPT),
            HumanMessage(content=prompt),
        ]
        response = invoke_with_timeout(self.llm, messages, self.timeout_for(category))
        return parse_ai_questions(message_text(response), category, self.rng)

    def generate_quiz_questions(
        self, categories: Iterable[QuizCategory], total_count: int = 50
    ) -> AIQuestionResponse:
        """
        Generate a full question set for ``(categories, total_count)``.

        Each category gets exactly its allocated count. A category whose
        request fails or comes back short is topped up from the local
        generator; surplus questions are dropped.

        Args:
            categories: Requested categories
            total_count: Total number of questions to ask for

        Returns:
            AIQuestionResponse, successful only if the model supplied at least
            one question
        """
        if not self.settings.ai_enabled:
            return AIQuestionResponse(
                success=False, error="AI question generation is disabled."
            )
        if not self.is_available:
            return AIQuestionResponse(
                success=False, error="AI provider credentials are not configured."
            )

        questions: list[QuizQuestion] = []
        ai_count = 0
        filled = 0
        for category, count in allocate_question_counts(categories, total_count).items():
            try:
                generated = self.generate_category_questions(category, count)[:count]
            except Exception as e:
                logger.warning("AI generation failed for %s: %s", category.value, e)
                generated = []

            ai_count += len(generated)
            missing = count - len(generated)
            if missing > 0:
                logger.info(
                    "Filling %d of %d %s questions locally",
                    missing,
                    count,
                    category.value,
                )
                local = generate_category_questions(category, missing, self.rng)
                filled += len(local)
                generated = [*generated, *local]
            questions.extend(generated)

        if ai_count == 0:
            return AIQuestionResponse(
                success=False, error="No questions were generated from any category"
            )

        try:
            questions = validate_questions(questions)
        except QuestionValidationError as e:
            return AIQuestionResponse(success=False, error=str(e))

        self.usage_count += 1
        self.last_used = datetime.now()
        return AIQuestionResponse(
            success=True, questions=shuffle(questions, self.rng), filled_locally=filled
        )


def require_chat_model(settings: Settings, llm: BaseChatModel | None = None) -> BaseChatModel:
    """Return ``llm`` or build one, failing if AI is not configured."""
    if llm is not None:
        return llm
    if not settings.is_ai_configured:
        raise AIUnavailableError(
            "No AI credentials configured. Set ANTHROPIC_API_KEY or the AWS variables."
        )
    return build_chat_model(settings)
