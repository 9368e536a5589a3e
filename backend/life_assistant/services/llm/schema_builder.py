"""Message and context construction for LLM prompts."""
from datetime import datetime
from typing import Iterable

from life_assistant.schemas.note_schemas import NoteResponse


def build_messages(system_content: str, user_content: str) -> list[dict]:
    """Build the chat messages list with system and user roles."""
    return [
        {"role": "system", "content": system_content},
        {"role": "user", "content": user_content},
    ]


def format_note_date(timestamp: datetime) -> str:
    """Short m/d/YYYY date used to label notes in the answer context."""
    return f"{timestamp.month}/{timestamp.day}/{timestamp.year}"


def build_notes_context(notes: Iterable[NoteResponse]) -> str:
    """One ``[date] text`` line per note, in the order given."""
    return "\n".join(
        f"[{format_note_date(note.timestamp)}] {note.text}" for note in notes
    )
