"""Notes router: capture, list, delete and project assignment."""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status

from life_assistant.config import get_settings
from life_assistant.core.errors import ErrorCode, ValidationError
from life_assistant.schemas.note_schemas import (
    MAX_NOTE_LENGTH,
    NoteMatchesResponse,
    NoteProjectUpdate,
    NoteResponse,
    NoteSubmissionResponse,
    NoteTextCreate,
)
from life_assistant.services.notes import NoteService, get_note_service
from life_assistant.utils.audio import is_supported_audio, upload_filename

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[NoteResponse])
async def list_notes(service: NoteService = Depends(get_note_service)):
    """List all notes, newest first."""
    return await service.list_notes()


@router.post("", response_model=NoteSubmissionResponse, status_code=status.HTTP_201_CREATED)
async def submit_note(
    audio: Optional[UploadFile] = File(None),
    text: Optional[str] = Form(None, max_length=MAX_NOTE_LENGTH),
    project_id: Optional[int] = Form(None),
    service: NoteService = Depends(get_note_service),
):
    """
    Capture a note from an uploaded recording or typed text:
    1. Transcribe audio (falls back to a sample phrase without a provider)
    2. Extract people, tasks, dates and other entities
    3. Flag completion language and suggest matching pending tasks
    """
    audio_bytes = None
    filename = "recording.webm"

    if audio is not None:
        if not is_supported_audio(audio.content_type):
            raise ValidationError(
                message="Invalid audio format. Allowed: webm, ogg, wav, mp3, mp4, m4a",
                code=ErrorCode.VALIDATION_INVALID_AUDIO_FORMAT,
                param="audio",
            )
        audio_bytes = await audio.read()
        max_bytes = get_settings().max_audio_bytes
        if len(audio_bytes) > max_bytes:
            raise ValidationError(
                message=f"Audio file exceeds {max_bytes} bytes",
                code=ErrorCode.VALIDATION_INVALID_FILE_SIZE,
                param="audio",
            )
        filename = upload_filename(audio.filename, audio.content_type)

    return await service.submit_note(
        text=text,
        audio=audio_bytes,
        filename=filename,
        project_id=project_id,
    )


@router.post("/text", response_model=NoteSubmissionResponse, status_code=status.HTTP_201_CREATED)
async def submit_text_note(
    payload: NoteTextCreate,
    service: NoteService = Depends(get_note_service),
):
    """Capture a typed note sent as JSON."""
    return await service.submit_note(text=payload.text, project_id=payload.project_id)


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_note(note_id: int, service: NoteService = Depends(get_note_service)):
    """Delete a note. Its pending tasks go with it."""
    await service.delete_note(note_id)


@router.patch("/{note_id}/project", response_model=NoteResponse)
async def assign_note_project(
    note_id: int,
    payload: NoteProjectUpdate,
    service: NoteService = Depends(get_note_service),
):
    """Move a note to a project, or back to General with null."""
    return await service.assign_project(note_id, payload.project_id)


@router.get("/{note_id}/matches", response_model=NoteMatchesResponse)
async def note_task_matches(note_id: int, service: NoteService = Depends(get_note_service)):
    """Pending tasks this note may have completed."""
    return await service.match_for_note(note_id)
