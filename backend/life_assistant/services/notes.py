"""Note pipeline: capture, extraction, completion detection and questions."""
import logging
from typing import List, Optional

from fastapi import Depends

from life_assistant.core.errors import (
    ConflictError,
    ErrorCode,
    NotFoundError,
    ValidationError,
)
from life_assistant.models.task import TaskStatus
from life_assistant.schemas.note_schemas import (
    NoteMatchesResponse,
    NoteResponse,
    NoteSubmissionResponse,
)
from life_assistant.schemas.task_schemas import TaskResponse
from life_assistant.services.completion import detect_completion, match_candidates
from life_assistant.services.llm import LLMService
from life_assistant.services.store import NoteStore, get_note_store
from life_assistant.services.transcription import TranscriptionService

logger = logging.getLogger(__name__)


class NoteService:
    """Runs an incoming note or question through the pipeline.

    Provider trouble is absorbed by the transcription and LLM services;
    only input errors and store errors reach the caller.
    """

    def __init__(
        self,
        store: NoteStore,
        transcription: Optional[TranscriptionService] = None,
        llm: Optional[LLMService] = None,
    ):
        self.store = store
        self.transcription = transcription or TranscriptionService()
        self.llm = llm or LLMService()

    # -- Capture --

    async def submit_note(
        self,
        text: Optional[str] = None,
        audio: Optional[bytes] = None,
        filename: str = "recording.webm",
        project_id: Optional[int] = None,
    ) -> NoteSubmissionResponse:
        """
        Create a note from exactly one of audio or text.

        1. Transcribe audio (if given)
        2. Extract entities
        3. Look for completion language against pending tasks
        4. Store the note and any tasks it mentions
        """
        has_text = bool(text and text.strip())
        has_audio = bool(audio)
        if not has_text and not has_audio:
            raise ValidationError(
                message="No audio file or text provided",
                code=ErrorCode.VALIDATION_MISSING_FIELD,
                param="text",
            )
        if has_text and has_audio:
            raise ValidationError(
                message="Provide either audio or text, not both",
                code=ErrorCode.VALIDATION_INVALID_VALUE,
                param="audio",
            )

        if project_id is not None:
            await self._require_project(project_id)

        if has_audio:
            note_text = await self.transcription.transcribe(audio, filename)
        else:
            note_text = text.strip()

        entities = await self.llm.extract_entities(note_text)

        # Snapshot before this note adds its own tasks
        pending = await self.store.list_tasks(TaskStatus.PENDING)
        detection = detect_completion(note_text)

        note = await self.store.add_note(
            note_text,
            entities,
            project_id=project_id,
            completion_detected=detection.has_completion,
        )
        detection = detection.model_copy(update={"note_id": note.id})

        if entities.get("tasks"):
            await self.store.add_tasks(note, entities["tasks"])

        logger.info(
            "Created note %d (%s, categories=%s, completion=%s)",
            note.id,
            "audio" if has_audio else "text",
            sorted(entities),
            detection.has_completion,
        )

        if not detection.has_completion:
            return NoteSubmissionResponse(note=note)

        return NoteSubmissionResponse(
            note=note,
            completion=detection,
            candidates=match_candidates(detection, pending),
        )

    async def list_notes(self) -> List[NoteResponse]:
        return await self.store.list_notes()

    async def delete_note(self, note_id: int) -> None:
        if not await self.store.delete_note(note_id):
            raise NotFoundError("note", note_id)
        logger.info("Deleted note %d", note_id)

    async def assign_project(self, note_id: int, project_id: Optional[int]) -> NoteResponse:
        """Move a note to a project, or back to General with ``None``."""
        if project_id is not None:
            await self._require_project(project_id)
        note = await self.store.set_note_project(note_id, project_id)
        if note is None:
            raise NotFoundError("note", note_id)
        return note

    # -- Questions --

    async def ask(self, question: str) -> str:
        question = (question or "").strip()
        if not question:
            raise ValidationError(
                message="Question is required",
                code=ErrorCode.VALIDATION_MISSING_FIELD,
                param="question",
            )
        notes = await self.store.list_notes()
        return await self.llm.answer_question(question, notes)

    # -- Tasks --

    async def list_tasks(self, status: Optional[TaskStatus] = None) -> List[TaskResponse]:
        return await self.store.list_tasks(status)

    async def list_pending_tasks(self) -> List[TaskResponse]:
        return await self.store.list_tasks(TaskStatus.PENDING)

    async def match_for_note(self, note_id: int) -> NoteMatchesResponse:
        """Re-run completion matching for a stored note."""
        note = await self.store.get_note(note_id)
        if note is None:
            raise NotFoundError("note", note_id)
        detection = detect_completion(note.text, note_id=note.id)
        pending = [
            task for task in await self.store.list_tasks(TaskStatus.PENDING)
            if task.note_id != note.id
        ]
        return NoteMatchesResponse(
            completion=detection,
            candidates=match_candidates(detection, pending),
        )

    async def complete_task(self, task_id: int, completing_note_id: int) -> TaskResponse:
        """Mark a task completed by ``completing_note_id``. Only explicit calls do this."""
        task = await self.store.get_task(task_id)
        if task is None:
            raise NotFoundError("task", task_id)
        if task.status == TaskStatus.COMPLETED:
            raise ConflictError(
                message=f"Task '{task_id}' is already completed",
                code=ErrorCode.CONFLICT_TASK_COMPLETED,
                param="task_id",
            )
        if await self.store.get_note(completing_note_id) is None:
            raise NotFoundError("note", completing_note_id)

        completed = await self.store.complete_task(task_id, completing_note_id)
        if completed is None:
            # Deleted between the lookup and the update
            raise NotFoundError("task", task_id)
        logger.info("Task %d completed by note %d", task_id, completing_note_id)
        return completed

    async def _require_project(self, project_id: int) -> None:
        if await self.store.get_project(project_id) is None:
            raise NotFoundError("project", project_id)


def get_note_service(store: NoteStore = Depends(get_note_store)) -> NoteService:
    """Dependency building a NoteService over the injected store."""
    return NoteService(store)
