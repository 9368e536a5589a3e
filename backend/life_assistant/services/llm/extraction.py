"""Entity extraction from note text."""
import logging

from life_assistant.core.errors import ExternalServiceError
from life_assistant.schemas.note_schemas import EntitySet
from life_assistant.services.llm.prompts import (
    INJECTION_DEFENSE_INSTRUCTION,
    EXTRACTION_SYSTEM_PROMPT,
    ENTITY_CATEGORY_DEFINITIONS,
    EXTRACTION_EXAMPLE,
    EXTRACTION_OUTPUT_RULES,
)
from life_assistant.services.llm.validation import (
    check_injection_patterns,
    validate_input_length,
    parse_json_response,
    coerce_entity_set,
    wrap_user_content,
)
from life_assistant.services.llm.schema_builder import build_messages

logger = logging.getLogger(__name__)


async def extract_entities(
    client,
    model: str,
    text: str,
    max_tokens: int = 300,
    temperature: float = 0.1,
) -> EntitySet | None:
    """Ask the model for the entity categories present in ``text``.

    Raises ExternalServiceError when the provider call fails and returns
    None when the reply cannot be read as an EntitySet.
    """
    check_injection_patterns(text)
    text = validate_input_length(text)

    system_content = "\n\n".join([
        INJECTION_DEFENSE_INSTRUCTION,
        EXTRACTION_SYSTEM_PROMPT,
    ])
    user_content = "\n\n".join([
        "Extract structured information from this personal recording:",
        wrap_user_content(text),
        ENTITY_CATEGORY_DEFINITIONS,
        EXTRACTION_EXAMPLE,
        EXTRACTION_OUTPUT_RULES,
    ])

    try:
        response = client.chat.completions.create(
            model=model,
            max_tokens=max_tokens,
            temperature=temperature,
            response_format={"type": "json_object"},
            messages=build_messages(system_content, user_content),
        )
        content = response.choices[0].message.content or ""
    except Exception as e:
        raise ExternalServiceError(service="llm", message=f"Groq LLM request failed: {e}") from e

    data = parse_json_response(content)
    if data is None:
        return None

    return coerce_entity_set(data)
