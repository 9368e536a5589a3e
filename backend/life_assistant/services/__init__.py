"""Service layer for business logic."""
from life_assistant.services.transcription import TranscriptionService
from life_assistant.services.llm import LLMService
from life_assistant.services.notes import NoteService
from life_assistant.services.store import NoteStore, InMemoryNoteStore

__all__ = [
    "TranscriptionService",
    "LLMService",
    "NoteService",
    "NoteStore",
    "InMemoryNoteStore",
]
