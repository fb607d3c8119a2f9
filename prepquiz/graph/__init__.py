"""LangGraph workflow and state management."""

from prepquiz.graph.state import QuestionSource, SourcingState, create_initial_state
from prepquiz.graph.workflow import compile_workflow, create_sourcing_workflow, source_questions

__all__ = [
    "QuestionSource",
    "SourcingState",
    "create_initial_state",
    "compile_workflow",
    "create_sourcing_workflow",
    "source_questions",
]
