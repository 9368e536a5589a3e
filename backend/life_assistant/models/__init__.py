"""Database models."""
from life_assistant.models.note import Note, Project
from life_assistant.models.task import Task, TaskStatus

__all__ = ["Note", "Project", "Task", "TaskStatus"]
