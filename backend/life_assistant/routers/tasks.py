"""Tasks router: pending tasks and explicit completion."""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from life_assistant.models.task import TaskStatus
from life_assistant.schemas.task_schemas import TaskCompleteRequest, TaskResponse
from life_assistant.services.notes import NoteService, get_note_service

router = APIRouter()


@router.get("", response_model=List[TaskResponse])
async def list_tasks(
    status_filter: Optional[TaskStatus] = Query(None, alias="status"),
    service: NoteService = Depends(get_note_service),
):
    """List tasks in creation order, optionally by status."""
    return await service.list_tasks(status_filter)


@router.get("/pending", response_model=List[TaskResponse])
async def list_pending_tasks(service: NoteService = Depends(get_note_service)):
    """List tasks that have not been completed yet."""
    return await service.list_pending_tasks()


@router.post("/{task_id}/complete", response_model=TaskResponse)
async def complete_task(
    task_id: int,
    payload: TaskCompleteRequest,
    service: NoteService = Depends(get_note_service),
):
    """Confirm that a note completed this task."""
    return await service.complete_task(task_id, payload.completing_note_id)
