"""Keyword fallbacks used when no API key is set or the provider fails."""
import string
from typing import Sequence

from life_assistant.schemas.note_schemas import EntitySet, NoteResponse

PEOPLE_KEYWORDS = ["sarah", "bob", "mike", "mom", "dad", "john", "mary"]
TASK_KEYWORDS = ["need", "remember", "call", "buy", "pick up", "schedule"]
DATE_KEYWORDS = [
    "tomorrow", "today",
    "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday",
]

# The keyword path can tell a task is there but not what it is
PLACEHOLDER_TASK = "extracted task from recording"


def _tokenize(text: str) -> list[str]:
    """Lower-case whitespace tokens with surrounding punctuation removed."""
    return [t.strip(string.punctuation) for t in text.lower().split()]


def _contains_phrase(tokens: list[str], phrase: str) -> bool:
    """True if ``phrase`` appears as a run of whole tokens."""
    words = phrase.split()
    size = len(words)
    return any(tokens[i:i + size] == words for i in range(len(tokens) - size + 1))


def mock_entity_extraction(text: str) -> EntitySet:
    """Best-effort EntitySet from fixed keyword lists."""
    lowered = text.lower()
    tokens = _tokenize(text)
    entities: EntitySet = {}

    people = [name for name in PEOPLE_KEYWORDS if name in lowered]
    if people:
        entities["people"] = people

    if any(_contains_phrase(tokens, keyword) for keyword in TASK_KEYWORDS):
        entities["tasks"] = [PLACEHOLDER_TASK]

    dates = [day for day in DATE_KEYWORDS if day in tokens]
    if dates:
        entities["dates"] = dates

    return entities


BOB_PARTY_ANSWER = (
    "Based on your recordings, Bob's birthday party is this Saturday at 7 PM at "
    "123 Oak Street. You mentioned you need to bring a bottle of wine."
)
SARAH_JOB_ANSWER = (
    "You had lunch with Sarah recently. She's looking for a new job in marketing "
    "and asked if you know anyone at tech companies."
)
DENTIST_ANSWER = (
    "You recorded a reminder to call the dentist tomorrow to schedule a cleaning appointment."
)
GROCERIES_ANSWER = "You need to pick up groceries: milk, eggs, and bread."
NO_TASKS_ANSWER = "I don't see any specific tasks in your recordings yet."

# First match wins; a question can hit more than one route
CANNED_ANSWER_ROUTES = [
    (("bob", "party"), BOB_PARTY_ANSWER),
    (("sarah", "job"), SARAH_JOB_ANSWER),
    (("dentist", "appointment"), DENTIST_ANSWER),
    (("groceries", "shopping"), GROCERIES_ANSWER),
]
TASK_QUESTION_KEYWORDS = ("tasks", "todo")


def collect_tasks(notes: Sequence[NoteResponse]) -> list[str]:
    """Every note's task values, in note order."""
    tasks: list[str] = []
    for note in notes:
        tasks.extend(note.entities.get("tasks", []))
    return tasks


def mock_answer(question: str, notes: Sequence[NoteResponse]) -> str:
    """Deterministic keyword-routed answer."""
    lowered = question.lower()

    for keywords, answer in CANNED_ANSWER_ROUTES:
        if any(keyword in lowered for keyword in keywords):
            return answer

    if any(keyword in lowered for keyword in TASK_QUESTION_KEYWORDS):
        tasks = collect_tasks(notes)
        if tasks:
            return f"Here are your tasks: {', '.join(tasks)}"
        return NO_TASKS_ANSWER

    return (
        f"I searched through your {len(notes)} recordings but couldn't find specific "
        f"information about \"{question}\". Try asking about Bob's party, Sarah's job "
        f"search, your dentist appointment, or general tasks."
    )
