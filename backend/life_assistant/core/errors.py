"""
Error codes and API exceptions.

Handlers in ``main`` render every ``APIError`` as
``{"error": {code, message, param?, details?}, "request_id", "timestamp"}``.
Provider failures are the exception: they are absorbed by the services
that fall back and never reach a response.
"""

from enum import Enum
from typing import Any, Dict, List, Optional
from fastapi import status


class ErrorCode(str, Enum):
    """Machine-readable error codes, grouped by the status they map to."""

    # Bad input (400)
    VALIDATION_FAILED = "validation_failed"
    VALIDATION_MISSING_FIELD = "missing_required_field"
    VALIDATION_INVALID_VALUE = "invalid_value"
    VALIDATION_INVALID_AUDIO_FORMAT = "invalid_audio_format"
    VALIDATION_INVALID_FILE_SIZE = "invalid_file_size"

    # Shared-secret gate (401)
    AUTH_REQUIRED = "authentication_required"
    AUTH_INVALID_SECRET = "invalid_access_key"

    # Missing records (404)
    NOT_FOUND_RESOURCE = "resource_not_found"
    NOT_FOUND_NOTE = "note_not_found"
    NOT_FOUND_TASK = "task_not_found"
    NOT_FOUND_PROJECT = "project_not_found"

    # State conflicts (409)
    CONFLICT_TASK_COMPLETED = "task_already_completed"

    # Providers (502)
    EXTERNAL_SERVICE_ERROR = "external_service_error"
    EXTERNAL_TRANSCRIPTION_FAILED = "transcription_service_failed"
    EXTERNAL_LLM_FAILED = "llm_service_failed"

    # Server side (500)
    INTERNAL_ERROR = "internal_server_error"
    INTERNAL_STORE_ERROR = "store_error"


_STATUS_BY_GROUP: Dict[str, int] = {
    "VALIDATION": status.HTTP_400_BAD_REQUEST,
    "AUTH": status.HTTP_401_UNAUTHORIZED,
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "CONFLICT": status.HTTP_409_CONFLICT,
    "EXTERNAL": status.HTTP_502_BAD_GATEWAY,
    "INTERNAL": status.HTTP_500_INTERNAL_SERVER_ERROR,
}

ERROR_CODE_STATUS_MAP: Dict[ErrorCode, int] = {
    code: next(
        http_status
        for group, http_status in _STATUS_BY_GROUP.items()
        if code.name.startswith(group + "_")
    )
    for code in ErrorCode
}


class APIError(Exception):
    """
    Base class for errors that become a JSON error envelope.

    Example:
        raise APIError(
            code=ErrorCode.VALIDATION_MISSING_FIELD,
            message="Question is required",
            param="question",
        )
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        param: Optional[str] = None,
        details: Optional[List[str]] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        self.code = code
        self.message = message
        self.param = param
        self.details = details or []
        self.headers = headers or {}
        self.status_code = ERROR_CODE_STATUS_MAP[code]
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """The ``error`` member of the response envelope."""
        body: Dict[str, Any] = {"code": self.code.value, "message": self.message}
        if self.param:
            body["param"] = self.param
        if self.details:
            body["details"] = self.details
        return body


class ValidationError(APIError):
    """Bad or missing input, detected before any pipeline work."""

    def __init__(
        self,
        message: str,
        param: Optional[str] = None,
        code: ErrorCode = ErrorCode.VALIDATION_FAILED,
        details: Optional[List[str]] = None,
    ):
        super().__init__(code=code, message=message, param=param, details=details)


_NOT_FOUND_CODES = {
    "note": ErrorCode.NOT_FOUND_NOTE,
    "task": ErrorCode.NOT_FOUND_TASK,
    "project": ErrorCode.NOT_FOUND_PROJECT,
}


class NotFoundError(APIError):
    """A note, task or project id that the store does not know."""

    def __init__(
        self,
        resource: str,
        identifier: Optional[Any] = None,
        code: Optional[ErrorCode] = None,
    ):
        name = resource.lower()
        if identifier is None:
            message = f"{resource.capitalize()} not found"
        else:
            message = f"{resource.capitalize()} with ID '{identifier}' not found"
        super().__init__(
            code=code or _NOT_FOUND_CODES.get(name, ErrorCode.NOT_FOUND_RESOURCE),
            message=message,
            param=f"{name}_id",
        )


class ConflictError(APIError):
    """The request is valid but the record is in the wrong state for it."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFLICT_TASK_COMPLETED,
        param: Optional[str] = None,
    ):
        super().__init__(code=code, message=message, param=param)


class AuthenticationError(APIError):
    """Raised when the shared secret is missing or wrong."""

    def __init__(
        self,
        message: str = "Authentication required",
        code: ErrorCode = ErrorCode.AUTH_REQUIRED,
    ):
        super().__init__(code=code, message=message)


_EXTERNAL_CODES = {
    "transcription": ErrorCode.EXTERNAL_TRANSCRIPTION_FAILED,
    "llm": ErrorCode.EXTERNAL_LLM_FAILED,
}


class ExternalServiceError(APIError):
    """Raised when an external provider fails.

    Provider modules raise this; the coordinating services catch it and
    fall back, so it never reaches an HTTP response.
    """

    def __init__(
        self,
        service: str,
        message: Optional[str] = None,
        code: Optional[ErrorCode] = None,
    ):
        self.service = service
        super().__init__(
            code=code or _EXTERNAL_CODES.get(service.lower(), ErrorCode.EXTERNAL_SERVICE_ERROR),
            message=message or f"{service.capitalize()} service temporarily unavailable",
        )


class InternalError(APIError):
    """Server-side failure. ``log_message`` is for logs only, never the client."""

    def __init__(
        self,
        message: str = "An internal error occurred. Please try again later.",
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        log_message: Optional[str] = None,
    ):
        self.log_message = log_message
        super().__init__(code=code, message=message)
