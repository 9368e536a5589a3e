"""Shared-secret gate and login check."""
import logging
from typing import Optional

from fastapi import APIRouter, Header, Request
from pydantic import BaseModel

from life_assistant.config import get_settings
from life_assistant.core.errors import AuthenticationError, ErrorCode
from life_assistant.core.middleware import get_request_id
from life_assistant.core.responses import MessageResponse
from life_assistant.utils.auth import auth_enabled, verify_access_key

logger = logging.getLogger(__name__)

ACCESS_KEY_HEADER = "X-Access-Key"


class LoginRequest(BaseModel):
    """Login request data."""
    password: str


router = APIRouter()


async def require_access_key(
    x_access_key: Optional[str] = Header(None, alias=ACCESS_KEY_HEADER),
) -> None:
    """Reject the request unless it carries the shared secret (when one is set)."""
    expected = get_settings().auth_password
    if not auth_enabled(expected):
        return
    if not x_access_key:
        raise AuthenticationError(message=f"Missing {ACCESS_KEY_HEADER} header")
    if not verify_access_key(x_access_key, expected):
        raise AuthenticationError(
            message="Invalid access key",
            code=ErrorCode.AUTH_INVALID_SECRET,
        )


@router.post("/login", response_model=MessageResponse)
async def login(payload: LoginRequest, request: Request):
    """Check a password against the shared secret for the login screen."""
    expected = get_settings().auth_password
    if auth_enabled(expected) and not verify_access_key(payload.password, expected):
        logger.warning("[%s] Failed login attempt", get_request_id(request))
        raise AuthenticationError(
            message="Invalid password. Please try again.",
            code=ErrorCode.AUTH_INVALID_SECRET,
        )
    return MessageResponse(message="Authenticated", request_id=get_request_id(request))
