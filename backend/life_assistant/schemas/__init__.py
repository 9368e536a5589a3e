"""Pydantic schemas for API request/response validation."""
from life_assistant.schemas.note_schemas import (
    ENTITY_CATEGORIES,
    EntitySet,
    NoteTextCreate,
    NoteProjectUpdate,
    NoteResponse,
    NoteSubmissionResponse,
    NoteMatchesResponse,
)
from life_assistant.schemas.task_schemas import (
    TaskResponse,
    TaskCompleteRequest,
    CompletionDetectionResult,
)
from life_assistant.schemas.project_schemas import (
    ProjectCreate,
    ProjectResponse,
    ProjectDeleteResponse,
)
from life_assistant.schemas.chat_schemas import ChatRequest, ChatResponse

__all__ = [
    "ENTITY_CATEGORIES",
    "EntitySet",
    "NoteTextCreate",
    "NoteProjectUpdate",
    "NoteResponse",
    "NoteSubmissionResponse",
    "NoteMatchesResponse",
    "TaskResponse",
    "TaskCompleteRequest",
    "CompletionDetectionResult",
    "ProjectCreate",
    "ProjectResponse",
    "ProjectDeleteResponse",
    "ChatRequest",
    "ChatResponse",
]
