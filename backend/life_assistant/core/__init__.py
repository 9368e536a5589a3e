"""Error types, response envelopes and request middleware shared by the routers."""
from life_assistant.core.errors import (
    APIError,
    AuthenticationError,
    ConflictError,
    ErrorCode,
    ExternalServiceError,
    InternalError,
    NotFoundError,
    ValidationError,
)
from life_assistant.core.responses import ErrorDetail, ErrorResponse, MessageResponse

__all__ = [
    "APIError",
    "AuthenticationError",
    "ConflictError",
    "ErrorCode",
    "ExternalServiceError",
    "InternalError",
    "NotFoundError",
    "ValidationError",
    "ErrorDetail",
    "ErrorResponse",
    "MessageResponse",
]
