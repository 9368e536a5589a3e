"""Chat Pydantic schemas."""
from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    """Schema for asking a question about the notes."""
    question: str = Field(..., max_length=2000)


class ChatResponse(BaseModel):
    """Schema for the assistant's answer."""
    response: str
