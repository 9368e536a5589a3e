"""Note store interface and the in-memory implementation.

The pipeline never owns persistence: it talks to whatever ``NoteStore``
is injected. ``get_note_store`` picks the in-memory store when no
database URL is configured and the SQL store otherwise.
"""
import asyncio
import logging
from datetime import datetime
from typing import List, Optional, Protocol

from life_assistant.config import get_settings
from life_assistant.models.task import TaskStatus
from life_assistant.schemas.note_schemas import EntitySet, NoteResponse
from life_assistant.schemas.project_schemas import ProjectResponse
from life_assistant.schemas.task_schemas import TaskResponse

logger = logging.getLogger(__name__)


class NoteStore(Protocol):
    """Append/read/delete access to notes, their tasks and projects."""

    async def init(self) -> None: ...

    async def close(self) -> None: ...

    # -- Notes --

    async def add_note(
        self,
        text: str,
        entities: EntitySet,
        project_id: Optional[int] = None,
        completion_detected: bool = False,
        timestamp: Optional[datetime] = None,
    ) -> NoteResponse: ...

    async def list_notes(self) -> List[NoteResponse]: ...

    async def get_note(self, note_id: int) -> Optional[NoteResponse]: ...

    async def delete_note(self, note_id: int) -> bool: ...

    async def set_note_project(
        self, note_id: int, project_id: Optional[int]
    ) -> Optional[NoteResponse]: ...

    # -- Tasks --

    async def add_tasks(
        self, note: NoteResponse, descriptions: List[str]
    ) -> List[TaskResponse]: ...

    async def list_tasks(
        self, status: Optional[TaskStatus] = None
    ) -> List[TaskResponse]: ...

    async def get_task(self, task_id: int) -> Optional[TaskResponse]: ...

    async def complete_task(
        self, task_id: int, note_id: int
    ) -> Optional[TaskResponse]: ...

    # -- Projects --

    async def create_project(
        self,
        name: str,
        description: Optional[str] = None,
        color: Optional[str] = None,
    ) -> ProjectResponse: ...

    async def list_projects(self) -> List[ProjectResponse]: ...

    async def get_project(self, project_id: int) -> Optional[ProjectResponse]: ...

    async def delete_project(self, project_id: int) -> Optional[int]: ...

    async def list_project_notes(self, project_id: int) -> List[NoteResponse]: ...


def newest_first(notes: List[NoteResponse]) -> List[NoteResponse]:
    """Display order: timestamp descending, later ids first on ties."""
    return sorted(notes, key=lambda n: (n.timestamp, n.id), reverse=True)


class InMemoryNoteStore:
    """Process-local store. Ids come from counters and are never reused."""

    def __init__(self):
        self._notes: dict[int, NoteResponse] = {}
        self._tasks: dict[int, TaskResponse] = {}
        self._projects: dict[int, ProjectResponse] = {}
        self._next_note_id = 1
        self._next_task_id = 1
        self._next_project_id = 1
        # Held for a single operation at a time, never across calls
        self._lock = asyncio.Lock()

    async def init(self) -> None:
        return None

    async def close(self) -> None:
        return None

    # -- Notes --

    async def add_note(
        self,
        text: str,
        entities: EntitySet,
        project_id: Optional[int] = None,
        completion_detected: bool = False,
        timestamp: Optional[datetime] = None,
    ) -> NoteResponse:
        async with self._lock:
            note = NoteResponse(
                id=self._next_note_id,
                timestamp=timestamp or datetime.utcnow(),
                text=text,
                entities={k: list(v) for k, v in entities.items()},
                project_id=project_id,
                completion_detected=completion_detected,
            )
            self._notes[note.id] = note
            self._next_note_id += 1
            return note

    async def list_notes(self) -> List[NoteResponse]:
        return newest_first(list(self._notes.values()))

    async def get_note(self, note_id: int) -> Optional[NoteResponse]:
        return self._notes.get(note_id)

    async def delete_note(self, note_id: int) -> bool:
        async with self._lock:
            if self._notes.pop(note_id, None) is None:
                return False
            # Pending tasks go with their note; completed ones are history
            for task_id, task in list(self._tasks.items()):
                if task.note_id == note_id and task.status == TaskStatus.PENDING:
                    del self._tasks[task_id]
            return True

    async def set_note_project(
        self, note_id: int, project_id: Optional[int]
    ) -> Optional[NoteResponse]:
        async with self._lock:
            note = self._notes.get(note_id)
            if note is None:
                return None
            note = note.model_copy(update={"project_id": project_id})
            self._notes[note_id] = note
            return note

    # -- Tasks --

    async def add_tasks(
        self, note: NoteResponse, descriptions: List[str]
    ) -> List[TaskResponse]:
        async with self._lock:
            created = []
            for description in descriptions:
                task = TaskResponse(
                    id=self._next_task_id,
                    description=description,
                    note_id=note.id,
                    note_timestamp=note.timestamp,
                )
                self._tasks[task.id] = task
                self._next_task_id += 1
                created.append(task)
            return created

    async def list_tasks(
        self, status: Optional[TaskStatus] = None
    ) -> List[TaskResponse]:
        tasks = sorted(self._tasks.values(), key=lambda t: t.id)
        if status is not None:
            tasks = [t for t in tasks if t.status == status]
        return tasks

    async def get_task(self, task_id: int) -> Optional[TaskResponse]:
        return self._tasks.get(task_id)

    async def complete_task(
        self, task_id: int, note_id: int
    ) -> Optional[TaskResponse]:
        async with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                return None
            task = task.model_copy(update={
                "status": TaskStatus.COMPLETED,
                "completed_by_note_id": note_id,
                "completed_at": datetime.utcnow(),
            })
            self._tasks[task_id] = task
            return task

    # -- Projects --

    async def create_project(
        self,
        name: str,
        description: Optional[str] = None,
        color: Optional[str] = None,
    ) -> ProjectResponse:
        async with self._lock:
            project = ProjectResponse(
                id=self._next_project_id,
                name=name,
                description=description,
                color=color,
                created_at=datetime.utcnow(),
            )
            self._projects[project.id] = project
            self._next_project_id += 1
            return project

    async def list_projects(self) -> List[ProjectResponse]:
        return sorted(self._projects.values(), key=lambda p: p.id)

    async def get_project(self, project_id: int) -> Optional[ProjectResponse]:
        return self._projects.get(project_id)

    async def delete_project(self, project_id: int) -> Optional[int]:
        async with self._lock:
            if self._projects.pop(project_id, None) is None:
                return None
            moved = 0
            for note_id, note in list(self._notes.items()):
                if note.project_id == project_id:
                    self._notes[note_id] = note.model_copy(update={"project_id": None})
                    moved += 1
            return moved

    async def list_project_notes(self, project_id: int) -> List[NoteResponse]:
        return newest_first([n for n in self._notes.values() if n.project_id == project_id])


_store: Optional[NoteStore] = None


def create_note_store(database_url: str = "") -> NoteStore:
    """Build the store for ``database_url`` (empty = in-memory)."""
    if not database_url:
        logger.info("No DATABASE_URL configured, using in-memory note store")
        return InMemoryNoteStore()

    from life_assistant.services.sql_store import SqlNoteStore
    return SqlNoteStore(database_url)


def get_note_store() -> NoteStore:
    """Dependency returning the process-wide note store."""
    global _store
    if _store is None:
        _store = create_note_store(get_settings().database_url)
    return _store
