"""Task model for to-dos extracted from notes."""
from datetime import datetime
from enum import Enum
from sqlalchemy import Column, String, Integer, DateTime, Enum as SQLEnum

from life_assistant.database import Base


class TaskStatus(str, Enum):
    """Status of a task."""
    PENDING = "pending"
    COMPLETED = "completed"


class Task(Base):
    """A task-shaped fact pulled out of a note."""

    __tablename__ = "tasks"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    description = Column(String(500), nullable=False)

    # Originating note (kept after the note is deleted for completed tasks)
    note_id = Column(Integer, nullable=False, index=True)
    note_timestamp = Column(DateTime, nullable=False)

    status = Column(SQLEnum(TaskStatus), default=TaskStatus.PENDING, index=True)
    completed_by_note_id = Column(Integer, nullable=True)
    completed_at = Column(DateTime, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)

    def __repr__(self):
        return f"<Task {self.status.value}: {self.description[:50]}>"
