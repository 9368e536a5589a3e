"""SQLAlchemy-backed note store."""
import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncIterator, List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from life_assistant.core.errors import ErrorCode, InternalError
from life_assistant.database import create_engine, create_session_factory, init_db, close_db
from life_assistant.models.note import Note, Project
from life_assistant.models.task import Task, TaskStatus
from life_assistant.schemas.note_schemas import EntitySet, NoteResponse
from life_assistant.schemas.project_schemas import ProjectResponse
from life_assistant.schemas.task_schemas import TaskResponse

logger = logging.getLogger(__name__)


def _to_note(row: Note) -> NoteResponse:
    return NoteResponse(
        id=row.id,
        timestamp=row.created_at,
        text=row.text,
        entities=row.entities or {},
        project_id=row.project_id,
        completion_detected=bool(row.completion_detected),
    )


class SqlNoteStore:
    """Note store over any SQLAlchemy async URL (PostgreSQL, SQLite, ...).

    Every method opens its own session and commits before returning, so no
    transaction spans more than one store operation.
    """

    def __init__(self, database_url: str, echo: bool = False):
        self.engine = create_engine(database_url, echo=echo)
        self.session_factory = create_session_factory(self.engine)

    async def init(self) -> None:
        await init_db(self.engine)
        logger.info("Note store tables ready")

    async def close(self) -> None:
        await close_db(self.engine)

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[AsyncSession]:
        """Session for one operation; database failures surface as store errors."""
        async with self.session_factory() as session:
            try:
                yield session
            except SQLAlchemyError as e:
                logger.error("Note store operation failed: %s", e)
                raise InternalError(
                    message="Failed to access the note store",
                    code=ErrorCode.INTERNAL_STORE_ERROR,
                    log_message=str(e),
                ) from e

    # -- Notes --

    async def add_note(
        self,
        text: str,
        entities: EntitySet,
        project_id: Optional[int] = None,
        completion_detected: bool = False,
        timestamp: Optional[datetime] = None,
    ) -> NoteResponse:
        async with self._session() as session:
            row = Note(
                text=text,
                entities=entities,
                project_id=project_id,
                completion_detected=completion_detected,
                created_at=timestamp or datetime.utcnow(),
            )
            session.add(row)
            await session.commit()
            return _to_note(row)

    async def list_notes(self) -> List[NoteResponse]:
        async with self._session() as session:
            result = await session.execute(
                select(Note).order_by(Note.created_at.desc(), Note.id.desc())
            )
            return [_to_note(row) for row in result.scalars().all()]

    async def get_note(self, note_id: int) -> Optional[NoteResponse]:
        async with self._session() as session:
            row = await session.get(Note, note_id)
            return _to_note(row) if row else None

    async def delete_note(self, note_id: int) -> bool:
        async with self._session() as session:
            result = await session.execute(delete(Note).where(Note.id == note_id))
            if not result.rowcount:
                await session.rollback()
                return False
            await session.execute(
                delete(Task)
                .where(Task.note_id == note_id)
                .where(Task.status == TaskStatus.PENDING)
            )
            await session.commit()
            return True

    async def set_note_project(
        self, note_id: int, project_id: Optional[int]
    ) -> Optional[NoteResponse]:
        async with self._session() as session:
            row = await session.get(Note, note_id)
            if row is None:
                return None
            row.project_id = project_id
            await session.commit()
            return _to_note(row)

    # -- Tasks --

    async def add_tasks(
        self, note: NoteResponse, descriptions: List[str]
    ) -> List[TaskResponse]:
        async with self._session() as session:
            rows = [
                Task(
                    description=description,
                    note_id=note.id,
                    note_timestamp=note.timestamp,
                    status=TaskStatus.PENDING,
                    completed_by_note_id=None,
                    completed_at=None,
                )
                for description in descriptions
            ]
            session.add_all(rows)
            await session.commit()
            return [TaskResponse.model_validate(row) for row in rows]

    async def list_tasks(
        self, status: Optional[TaskStatus] = None
    ) -> List[TaskResponse]:
        async with self._session() as session:
            query = select(Task).order_by(Task.id)
            if status is not None:
                query = query.where(Task.status == status)
            result = await session.execute(query)
            return [TaskResponse.model_validate(row) for row in result.scalars().all()]

    async def get_task(self, task_id: int) -> Optional[TaskResponse]:
        async with self._session() as session:
            row = await session.get(Task, task_id)
            return TaskResponse.model_validate(row) if row else None

    async def complete_task(
        self, task_id: int, note_id: int
    ) -> Optional[TaskResponse]:
        async with self._session() as session:
            row = await session.get(Task, task_id)
            if row is None:
                return None
            row.status = TaskStatus.COMPLETED
            row.completed_by_note_id = note_id
            row.completed_at = datetime.utcnow()
            await session.commit()
            return TaskResponse.model_validate(row)

    # -- Projects --

    async def create_project(
        self,
        name: str,
        description: Optional[str] = None,
        color: Optional[str] = None,
    ) -> ProjectResponse:
        async with self._session() as session:
            row = Project(
                name=name,
                description=description,
                color=color,
                created_at=datetime.utcnow(),
            )
            session.add(row)
            await session.commit()
            return ProjectResponse.model_validate(row)

    async def list_projects(self) -> List[ProjectResponse]:
        async with self._session() as session:
            result = await session.execute(select(Project).order_by(Project.id))
            return [ProjectResponse.model_validate(row) for row in result.scalars().all()]

    async def get_project(self, project_id: int) -> Optional[ProjectResponse]:
        async with self._session() as session:
            row = await session.get(Project, project_id)
            return ProjectResponse.model_validate(row) if row else None

    async def delete_project(self, project_id: int) -> Optional[int]:
        async with self._session() as session:
            row = await session.get(Project, project_id)
            if row is None:
                return None
            # Move notes back to General before the project goes
            result = await session.execute(
                update(Note)
                .where(Note.project_id == project_id)
                .values(project_id=None)
            )
            await session.execute(delete(Project).where(Project.id == project_id))
            await session.commit()
            return result.rowcount or 0

    async def list_project_notes(self, project_id: int) -> List[NoteResponse]:
        async with self._session() as session:
            result = await session.execute(
                select(Note)
                .where(Note.project_id == project_id)
                .order_by(Note.created_at.desc(), Note.id.desc())
            )
            return [_to_note(row) for row in result.scalars().all()]
