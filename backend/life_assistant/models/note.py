"""Note and Project models."""
from datetime import datetime
from sqlalchemy import Column, String, Integer, Boolean, DateTime, Text, ForeignKey, JSON
from sqlalchemy.orm import relationship

from life_assistant.database import Base


class Project(Base):
    """Project model for grouping notes. Notes without one sit in General."""

    __tablename__ = "projects"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    color = Column(String(7), nullable=True)  # Hex color
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    notes = relationship("Note", back_populates="project")

    def __repr__(self):
        return f"<Project {self.name}>"


class Note(Base):
    """Note model for captured voice and text notes."""

    __tablename__ = "notes"
    # Never hand a deleted note's id to a new one
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="SET NULL"), nullable=True, index=True)

    # Content
    text = Column(Text, nullable=False)  # Transcription or typed input
    entities = Column(JSON, default=dict)  # Sparse category -> values map

    completion_detected = Column(Boolean, default=False)

    created_at = Column(DateTime, default=datetime.utcnow, index=True)

    # Relationships
    project = relationship("Project", back_populates="notes")

    def __repr__(self):
        return f"<Note {self.text[:50]}>"
