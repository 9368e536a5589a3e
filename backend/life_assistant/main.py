"""AI Life Assistant API: app factory wiring, error handlers and routers."""
import logging
from datetime import datetime
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from life_assistant.config import get_settings
from life_assistant.routers import auth, notes, chat, tasks, projects
from life_assistant.routers.auth import require_access_key
from life_assistant.core.errors import APIError, ErrorCode
from life_assistant.core.responses import ErrorResponse
from life_assistant.core.middleware import RequestContextMiddleware, get_request_id
from life_assistant.services.seed import seed_demo_notes
from life_assistant.services.store import get_note_store

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    logger.info("Starting AI Life Assistant API...")
    if not settings.groq_api_key:
        logger.warning("GROQ_API_KEY not set, transcription and AI answers use fallbacks")

    store = get_note_store()
    await store.init()
    if settings.seed_demo_notes:
        await seed_demo_notes(store)

    yield

    # Shutdown
    logger.info("Shutting down AI Life Assistant API...")
    await store.close()


app = FastAPI(
    title="AI Life Assistant API",
    description="Capture voice and text notes, extract what matters, and ask about it later",
    version="1.0.0",
    lifespan=lifespan,
)

# Request id and timing; registered first so CORS wraps it
app.add_middleware(RequestContextMiddleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins if not settings.debug else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID", "X-Response-Time"],
)


# =============================================================================
# Exception Handlers - Standardized Error Responses
# =============================================================================

def _error_body(request_id: str, error: dict) -> dict:
    return {
        "error": error,
        "request_id": request_id,
        "timestamp": datetime.utcnow().isoformat() + "Z",
    }


@app.exception_handler(APIError)
async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Render an APIError in the shared envelope (see core.responses.ErrorResponse)."""
    request_id = get_request_id(request)
    logger.warning("[%s] API Error: %s - %s", request_id, exc.code.value, exc.message)

    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(request_id, exc.to_dict()),
        headers=exc.headers,
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Rewrite FastAPI's validation errors into the standard envelope."""
    request_id = get_request_id(request)

    details = []
    param = None
    for error in exc.errors():
        loc = " -> ".join(str(part) for part in error.get("loc", []))
        details.append(f"{loc}: {error.get('msg', 'Invalid value')}")
        if param is None and error.get("loc"):
            param = str(error["loc"][-1])

    logger.warning("[%s] Validation Error: %s", request_id, details)

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=_error_body(request_id, {
            "code": ErrorCode.VALIDATION_FAILED.value,
            "message": "Request validation failed",
            "param": param,
            "details": details,
        }),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort for anything unexpected. Details only leave the process in debug mode."""
    request_id = get_request_id(request)
    logger.exception(
        "[%s] Unhandled Exception: %s: %s", request_id, type(exc).__name__, exc
    )

    error = {
        "code": ErrorCode.INTERNAL_ERROR.value,
        "message": "Failed to process request. Please try again later.",
    }
    if settings.debug:
        error["message"] = f"Internal error: {type(exc).__name__}"
        error["details"] = [str(exc)]

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(request_id, error),
    )


# =============================================================================
# Routers
# =============================================================================

protected = [Depends(require_access_key)]
error_responses = {
    401: {"model": ErrorResponse, "description": "Missing or invalid access key"},
    500: {"model": ErrorResponse, "description": "Store failure"},
}

app.include_router(
    auth.router,
    prefix="/api/v1/auth",
    tags=["Authentication"]
)

app.include_router(
    notes.router,
    prefix="/api/v1/notes",
    tags=["Notes"],
    dependencies=protected,
    responses=error_responses,
)

app.include_router(
    chat.router,
    prefix="/api/v1/chat",
    tags=["Chat"],
    dependencies=protected,
    responses=error_responses,
)

app.include_router(
    tasks.router,
    prefix="/api/v1/tasks",
    tags=["Tasks"],
    dependencies=protected,
    responses=error_responses,
)

app.include_router(
    projects.router,
    prefix="/api/v1/projects",
    tags=["Projects"],
    dependencies=protected,
    responses=error_responses,
)


# =============================================================================
# Health & Status Endpoints
# =============================================================================

@app.get("/")
async def root(request: Request):
    """API root endpoint."""
    return {
        "name": "AI Life Assistant API",
        "version": "1.0.0",
        "status": "running",
        "docs": "/docs",
        "request_id": get_request_id(request),
    }


@app.get("/health")
async def health_check(request: Request):
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "ai_provider": "groq" if get_settings().groq_api_key else "fallback",
        "timestamp": datetime.utcnow().isoformat() + "Z",
        "request_id": get_request_id(request),
    }
