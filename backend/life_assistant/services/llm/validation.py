"""Input validation, injection detection, and parsing of provider output."""
import json
import logging
import re
from typing import Any

from life_assistant.schemas.note_schemas import ENTITY_CATEGORIES, EntitySet
from life_assistant.services.llm.prompts import INJECTION_PATTERNS, MAX_NOTE_LENGTH

logger = logging.getLogger(__name__)


def wrap_user_content(content: str, label: str = "user_note") -> str:
    """Wrap user-provided content in XML boundary tags."""
    return f"<{label}>\n{content}\n</{label}>"


def check_injection_patterns(text: str, source: str = "note") -> None:
    """Log a warning if the text contains common prompt-injection patterns."""
    text_lower = text.lower()
    for pattern in INJECTION_PATTERNS:
        if re.search(pattern, text_lower):
            logger.warning(
                "Potential prompt injection detected in %s: matched pattern %r",
                source,
                pattern,
            )
            break


def validate_input_length(text: str, field_name: str = "note") -> str:
    """Truncate text if it exceeds the maximum allowed length."""
    if len(text) > MAX_NOTE_LENGTH:
        logger.warning(
            "%s exceeds max length (%d > %d), truncating",
            field_name,
            len(text),
            MAX_NOTE_LENGTH,
        )
        return text[:MAX_NOTE_LENGTH]
    return text


def parse_json_response(response_text: str) -> Any:
    """Parse a JSON response, handling optional markdown code-block wrapping."""
    text = response_text.strip()
    if text.startswith("```"):
        text = text.split("```")[1]
        if text.startswith("json"):
            text = text[4:]
        text = text.strip()
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        logger.warning("Failed to parse LLM JSON response")
        return None


def coerce_entity_set(data: Any) -> EntitySet | None:
    """Turn parsed provider output into a sparse EntitySet.

    Returns None on a shape mismatch so the caller can fall back.
    Unknown keys are dropped, a bare string counts as a one-item list,
    blank values are discarded and empty categories are left out.
    """
    if not isinstance(data, dict):
        logger.warning("Entity extraction returned %s, expected an object", type(data).__name__)
        return None

    entities: EntitySet = {}
    for category in ENTITY_CATEGORIES:
        if category not in data or data[category] is None:
            continue

        raw = data[category]
        if isinstance(raw, str):
            raw = [raw]
        if not isinstance(raw, list) or not all(isinstance(v, str) for v in raw):
            logger.warning("Entity category %r has an unexpected shape", category)
            return None

        values = [v.strip() for v in raw if v.strip()]
        if values:
            entities[category] = values

    ignored = set(data) - set(ENTITY_CATEGORIES)
    if ignored:
        logger.debug("Ignoring unknown entity categories: %s", sorted(ignored))

    return entities
