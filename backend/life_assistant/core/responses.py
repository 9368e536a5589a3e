"""Response envelopes for errors and plain acknowledgements."""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """The ``error`` member of an error response."""
    code: str = Field(..., description="Machine-readable code, e.g. note_not_found")
    message: str = Field(..., description="Human-readable explanation")
    param: Optional[str] = Field(None, description="Offending field or path parameter")
    details: Optional[List[str]] = Field(None, description="Per-field validation messages")


class ErrorResponse(BaseModel):
    """
    Body of every non-2xx response.

    Example:
        {
            "error": {
                "code": "task_already_completed",
                "message": "Task '3' is already completed",
                "param": "task_id"
            },
            "request_id": "req_4f1c2a9b0d7e6f31",
            "timestamp": "2025-03-14T09:30:00Z"
        }
    """
    error: ErrorDetail
    request_id: str = Field(..., description="Matches the X-Request-ID header")
    timestamp: datetime = Field(default_factory=datetime.utcnow)


class MessageResponse(BaseModel):
    """Acknowledgement with no payload, such as a successful login check."""
    message: str
    request_id: Optional[str] = None

    model_config = {
        "json_schema_extra": {
            "example": {"message": "Authenticated", "request_id": "req_4f1c2a9b0d7e6f31"}
        }
    }
