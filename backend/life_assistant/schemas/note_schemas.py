"""Note Pydantic schemas."""
from datetime import datetime
from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from life_assistant.schemas.task_schemas import CompletionDetectionResult, TaskResponse

# Closed set of categories an EntitySet may carry
ENTITY_CATEGORIES = (
    "people",
    "tasks",
    "events",
    "dates",
    "times",
    "locations",
    "items",
    "topics",
)

# Sparse map: a category is present only when it has at least one value
EntitySet = Dict[str, List[str]]

MAX_NOTE_LENGTH = 50000


class NoteTextCreate(BaseModel):
    """Schema for submitting a typed note."""
    text: str = Field(..., max_length=MAX_NOTE_LENGTH)
    project_id: Optional[int] = None


class NoteProjectUpdate(BaseModel):
    """Schema for moving a note to another project (null = General)."""
    project_id: Optional[int] = None


class NoteResponse(BaseModel):
    """Schema for a stored note."""
    id: int
    timestamp: datetime
    text: str
    entities: EntitySet = Field(default_factory=dict)
    project_id: Optional[int] = None
    completion_detected: bool = False

    model_config = {"from_attributes": True}


class NoteSubmissionResponse(BaseModel):
    """Schema for the result of submitting a note.

    ``completion`` is only set when the note reads like it finishes an
    earlier task; ``candidates`` are the pending tasks it may refer to.
    """
    note: NoteResponse
    completion: Optional[CompletionDetectionResult] = None
    candidates: List[TaskResponse] = []


class NoteMatchesResponse(BaseModel):
    """Schema for re-running task matching against an existing note."""
    completion: CompletionDetectionResult
    candidates: List[TaskResponse] = []
