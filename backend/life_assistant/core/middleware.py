"""
Request middleware.

Provides:
- Request ID generation and propagation
- Request timing headers
- One access log line per request
"""

import time
import uuid
import logging
from typing import Callable
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
RESPONSE_TIME_HEADER = "X-Response-Time"


def new_request_id() -> str:
    return f"req_{uuid.uuid4().hex[:16]}"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Tag every request with an ID and report how long it took."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        # Honour a caller-supplied ID so traces line up across services
        request_id = request.headers.get(REQUEST_ID_HEADER) or new_request_id()
        request.state.request_id = request_id

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers[RESPONSE_TIME_HEADER] = f"{elapsed_ms:.2f}ms"

        logger.info(
            "[%s] %s %s - %d (%.2fms)",
            request_id,
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response


def get_request_id(request: Request) -> str:
    """Get request ID from request state."""
    return getattr(request.state, "request_id", None) or new_request_id()
