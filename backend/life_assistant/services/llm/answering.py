"""Question answering over the user's notes."""
import logging
from typing import Sequence

from life_assistant.core.errors import ExternalServiceError
from life_assistant.schemas.note_schemas import NoteResponse
from life_assistant.services.llm.prompts import (
    INJECTION_DEFENSE_INSTRUCTION,
    ANSWER_SYSTEM_PROMPT,
    ANSWER_INSTRUCTIONS,
)
from life_assistant.services.llm.validation import check_injection_patterns
from life_assistant.services.llm.schema_builder import build_messages, build_notes_context

logger = logging.getLogger(__name__)


async def answer_question(
    client,
    model: str,
    question: str,
    notes: Sequence[NoteResponse],
    max_tokens: int = 300,
    temperature: float = 0.3,
) -> str:
    """Answer ``question`` with every note as context.

    The whole corpus goes into the prompt as-is; there is no ranking or
    truncation. Raises ExternalServiceError on provider failure or an
    empty reply.
    """
    check_injection_patterns(question, source="question")

    system_content = "\n\n".join([
        INJECTION_DEFENSE_INSTRUCTION,
        ANSWER_SYSTEM_PROMPT,
    ])
    user_content = (
        "Personal recordings:\n"
        "<user_note>\n"
        f"{build_notes_context(notes)}\n"
        "</user_note>\n\n"
        f"User question: {question}\n\n"
        f"{ANSWER_INSTRUCTIONS}"
    )

    try:
        response = client.chat.completions.create(
            model=model,
            max_tokens=max_tokens,
            temperature=temperature,
            messages=build_messages(system_content, user_content),
        )
        answer = (response.choices[0].message.content or "").strip()
    except Exception as e:
        raise ExternalServiceError(service="llm", message=f"Groq LLM request failed: {e}") from e

    if not answer:
        raise ExternalServiceError(service="llm", message="Groq LLM returned an empty answer")

    return answer
