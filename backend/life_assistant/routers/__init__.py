"""API Routers."""
from life_assistant.routers import auth, notes, chat, tasks, projects

__all__ = ["auth", "notes", "chat", "tasks", "projects"]
