"""LLM-backed entity extraction and question answering."""
from life_assistant.services.llm.service import LLMService

__all__ = ["LLMService"]
