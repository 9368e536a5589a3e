"""Detect notes that report finishing an earlier task."""
import logging
import re
from typing import Optional, Sequence

from life_assistant.models.task import TaskStatus
from life_assistant.schemas.task_schemas import CompletionDetectionResult, TaskResponse

logger = logging.getLogger(__name__)

COMPLETION_KEYWORDS = [
    "done",
    "finished",
    "completed",
    "complete",
    "took care of",
    "taken care of",
    "handled",
    "wrapped up",
    "checked off",
    "crossed off",
]

MAX_CANDIDATES = 3
MIN_MATCH_WORD_LENGTH = 3

_KEYWORD_PATTERNS = [
    (keyword, re.compile(rf"\b{re.escape(keyword)}\b")) for keyword in COMPLETION_KEYWORDS
]


def detect_completion(note_text: str, note_id: Optional[int] = None) -> CompletionDetectionResult:
    """Scan ``note_text`` for completion language.

    Matching whole words only, so "undone" does not count as "done".
    """
    lowered = note_text.lower()
    keywords = [keyword for keyword, pattern in _KEYWORD_PATTERNS if pattern.search(lowered)]
    if keywords:
        logger.info("Completion language in note %s: %s", note_id, ", ".join(keywords))
    return CompletionDetectionResult(
        has_completion=bool(keywords),
        keywords=keywords,
        note_id=note_id,
        note_text=note_text,
    )


def task_matches_text(task: TaskResponse, lowered_text: str) -> bool:
    """Any description word of 3+ characters appearing anywhere in the text."""
    words = [w for w in task.description.lower().split() if len(w) >= MIN_MATCH_WORD_LENGTH]
    return any(word in lowered_text for word in words)


def match_candidates(
    result: CompletionDetectionResult,
    pending_tasks: Sequence[TaskResponse],
    limit: int = MAX_CANDIDATES,
) -> list[TaskResponse]:
    """Pending tasks the note may have completed, in their existing order.

    Recall over precision: the user confirms the real match.
    """
    if not result.has_completion:
        return []
    lowered = result.note_text.lower()
    return [
        task for task in pending_tasks
        if task.status == TaskStatus.PENDING and task_matches_text(task, lowered)
    ][:limit]
