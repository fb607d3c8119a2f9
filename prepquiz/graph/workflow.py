"""LangGraph workflow that sources quiz questions: AI first, local generator second."""

import logging
import random
from collections.abc import Iterable
from typing import Any, Literal

from langgraph.graph import END, StateGraph

from prepquiz.agents.ai_provider import QuizAIProvider
from prepquiz.config.settings import Settings
from prepquiz.errors import QuestionGenerationError
from prepquiz.generators.options import resolve_rng
from prepquiz.generators.question_generator import generate_quiz_questions
from prepquiz.graph.state import QuestionSource, SourcingState, create_initial_state
from prepquiz.models.quiz import QuizCategory, QuizQuestion

logger = logging.getLogger(__name__)


def make_ai_node(provider: QuizAIProvider | None):
    """Build the node that asks the AI provider for questions."""

    def generate_with_ai(state: SourcingState) -> dict[str, Any]:
        if not state["use_ai"] or provider is None:
            return {"errors": state["errors"]}

        response = provider.generate_quiz_questions(
            state["categories"], state["total_count"]
        )
        if response.success:
            return {"questions": response.questions, "source": "ai"}

        logger.warning("AI question generation failed, using local generator: %s", response.error)
        return {"errors": state["errors"] + [response.error or "AI generation failed"]}

    return generate_with_ai


def make_fallback_node(rng: random.Random):
    """Build the node that runs the local procedural generator."""

    def generate_locally(state: SourcingState) -> dict[str, Any]:
        questions = generate_quiz_questions(
            state["categories"], state["total_count"], rng=rng
        )
        if not questions:
            return {"errors": state["errors"] + ["Local generator produced no questions"]}
        return {"questions": questions, "source": "local"}

    return generate_locally


def should_use_fallback(state: SourcingState) -> Literal["use_questions", "fallback"]:
    """
    Decide whether the AI questions can be used as they are.

    Args:
        state: Current sourcing state

    Returns:
        "use_questions" if the AI produced questions, "fallback" otherwise
    """
    if state.get("questions"):
        return "use_questions"
    return "fallback"


def should_finish(state: SourcingState) -> Literal["finish", "fail"]:
    """Finish if the local generator produced questions."""
    if state.get("questions"):
        return "finish"
    return "fail"


def create_sourcing_workflow(
    provider: QuizAIProvider | None = None, rng: random.Random | None = None
) -> StateGraph:
    """
    Create the LangGraph workflow for question sourcing.

    The workflow follows this structure:
    1. AI generator - Asks the provider when AI is enabled
    2. [Conditional] Use the AI questions or fall back
    3. Fallback - Runs the local generator
    4. [Conditional] Finish or fail

    Args:
        provider: AI provider, or None to skip the AI step
        rng: Random source for the local generator

    Returns:
        Uncompiled StateGraph
    """
    workflow = StateGraph(SourcingState)

    workflow.add_node("ai_generator", make_ai_node(provider))
    workflow.add_node("fallback", make_fallback_node(resolve_rng(rng)))

    workflow.set_entry_point("ai_generator")

    workflow.add_conditional_edges(
        "ai_generator",
        should_use_fallback,
        {
            "use_questions": END,
            "fallback": "fallback",
        },
    )

    workflow.add_conditional_edges(
        "fallback",
        should_finish,
        {
            "finish": END,
            "fail": END,  # caller raises on an empty result
        },
    )

    return workflow


def compile_workflow(
    provider: QuizAIProvider | None = None, rng: random.Random | None = None
):
    """
    Compile the workflow and return it ready for execution.

    Returns:
        Compiled workflow
    """
    workflow = create_sourcing_workflow(provider, rng)
    return workflow.compile()


def source_questions(
    categories: Iterable[QuizCategory],
    total_count: int,
    settings: Settings,
    provider: QuizAIProvider | None = None,
    rng: random.Random | None = None,
) -> tuple[list[QuizQuestion], QuestionSource]:
    """
    Produce the questions for a new quiz session.

    Args:
        categories: Requested categories
        total_count: Total number of questions
        settings: Application settings
        provider: AI provider; built from ``settings`` when AI is enabled
        rng: Random source shared by the provider and the local generator

    Returns:
        Tuple of (questions, source) where source is "ai" or "local"

    Raises:
        QuestionGenerationError: If neither path produced any question
    """
    rng = resolve_rng(rng)
    if provider is None and settings.ai_enabled:
        provider = QuizAIProvider(settings, rng=rng)
    use_ai = provider is not None and provider.is_available

    app = compile_workflow(provider, rng)
    result = app.invoke(create_initial_state(list(categories), total_count, use_ai))

    questions = result.get("questions") or []
    if not questions:
        details = "; ".join(result.get("errors", [])) or "no categories with questions"
        raise QuestionGenerationError(f"Could not generate quiz questions: {details}")
    return questions, result["source"]
