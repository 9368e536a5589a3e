"""LLMService -- the coordinator for extraction and question answering."""
import logging
from typing import Sequence

from life_assistant.config import get_settings
from life_assistant.core.errors import ExternalServiceError
from life_assistant.schemas.note_schemas import EntitySet, NoteResponse
from life_assistant.services.llm import extraction, answering
from life_assistant.services.llm.mocks import mock_entity_extraction, mock_answer

logger = logging.getLogger(__name__)


class LLMService:
    """Service for entity extraction and answers using Groq LLM.

    This class is a thin coordinator that delegates to focused modules.
    Provider failures never escape it: every path ends in the keyword
    fallback from ``mocks`` when Groq is missing or misbehaves.
    """

    def __init__(self, client=None):
        settings = get_settings()
        self.model = settings.llm_model
        self.extraction_max_tokens = settings.extraction_max_tokens
        self.extraction_temperature = settings.extraction_temperature
        self.answer_max_tokens = settings.answer_max_tokens
        self.answer_temperature = settings.answer_temperature
        self.client = client

        if self.client is None and settings.groq_api_key:
            from groq import Groq
            self.client = Groq(api_key=settings.groq_api_key, max_retries=0)

    # -- Extraction --

    async def extract_entities(self, text: str) -> EntitySet:
        if not self.client:
            return mock_entity_extraction(text)

        try:
            entities = await extraction.extract_entities(
                self.client, self.model, text,
                max_tokens=self.extraction_max_tokens,
                temperature=self.extraction_temperature,
            )
        except ExternalServiceError as e:
            logger.warning("Entity extraction error: %s", e.message)
            return mock_entity_extraction(text)

        if entities is None:
            logger.warning("Entity extraction returned unusable output, using keyword fallback")
            return mock_entity_extraction(text)
        return entities

    # -- Answering --

    async def answer_question(self, question: str, notes: Sequence[NoteResponse]) -> str:
        if not self.client:
            return mock_answer(question, notes)

        try:
            return await answering.answer_question(
                self.client, self.model, question, notes,
                max_tokens=self.answer_max_tokens,
                temperature=self.answer_temperature,
            )
        except ExternalServiceError as e:
            logger.warning("Response generation error: %s", e.message)
            return mock_answer(question, notes)
