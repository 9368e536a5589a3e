"""Projects router."""
import logging
from typing import List

from fastapi import APIRouter, Depends, status

from life_assistant.core.errors import NotFoundError
from life_assistant.schemas.note_schemas import NoteResponse
from life_assistant.schemas.project_schemas import (
    ProjectCreate,
    ProjectDeleteResponse,
    ProjectResponse,
)
from life_assistant.services.store import NoteStore, get_note_store

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[ProjectResponse])
async def list_projects(store: NoteStore = Depends(get_note_store)):
    """List projects in creation order."""
    return await store.list_projects()


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(payload: ProjectCreate, store: NoteStore = Depends(get_note_store)):
    """Create a project."""
    project = await store.create_project(
        name=payload.name.strip(),
        description=payload.description,
        color=payload.color,
    )
    logger.info("Created project %d (%s)", project.id, project.name)
    return project


@router.delete("/{project_id}", response_model=ProjectDeleteResponse)
async def delete_project(project_id: int, store: NoteStore = Depends(get_note_store)):
    """Delete a project. Its notes move back to General."""
    moved = await store.delete_project(project_id)
    if moved is None:
        raise NotFoundError("project", project_id)
    logger.info("Deleted project %d, moved %d notes to General", project_id, moved)
    return ProjectDeleteResponse(id=project_id, moved_notes=moved)


@router.get("/{project_id}/notes", response_model=List[NoteResponse])
async def list_project_notes(project_id: int, store: NoteStore = Depends(get_note_store)):
    """List a project's notes, newest first."""
    if await store.get_project(project_id) is None:
        raise NotFoundError("project", project_id)
    return await store.list_project_notes(project_id)
