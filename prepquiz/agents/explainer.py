"""Vocabulary explainer - asks the chat model for a plain-language memory tip."""

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage

from prepquiz.agents.ai_provider import (
    invoke_with_timeout,
    message_text,
    require_chat_model,
)
from prepquiz.config.settings import Settings


def explain_word(
    word: str,
    meaning: str,
    settings: Settings,
    llm: BaseChatModel | None = None,
) -> str:
    """
    Explain a vocabulary word with a memory tip.

    Args:
        word: Vocabulary word
        meaning: Its dictionary meaning
        settings: Application settings (model and timeout)
        llm: Optional chat model to use instead of building one

    Returns:
        The model's explanation text

    Raises:
        AIUnavailableError: If no model is configured
        AITimeoutError: If the model did not answer in time
    """
    model = require_chat_model(settings, llm)
    messages = [
        SystemMessage(
            content="You are a vocabulary tutor. Provide clear, concise explanations with memory tips."
        ),
        HumanMessage(
            content=f'Explain the word "{word}" with meaning "{meaning}" in simple terms. Include a memory tip.'
        ),
    ]
    response = invoke_with_timeout(model, messages, settings.ai_timeout_seconds)
    return message_text(response).strip()
