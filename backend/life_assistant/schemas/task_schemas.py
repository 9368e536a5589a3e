"""Task and completion-detection Pydantic schemas."""
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel

from life_assistant.models.task import TaskStatus


class TaskResponse(BaseModel):
    """Schema for a task extracted from a note."""
    id: int
    description: str
    note_id: int
    note_timestamp: datetime
    status: TaskStatus = TaskStatus.PENDING
    completed_by_note_id: Optional[int] = None
    completed_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class TaskCompleteRequest(BaseModel):
    """Schema for confirming that a note completed a task."""
    completing_note_id: int


class CompletionDetectionResult(BaseModel):
    """Outcome of scanning a note for completion language. Never persisted."""
    has_completion: bool
    keywords: List[str] = []
    note_id: Optional[int] = None
    note_text: str
