"""Demo notes for a fresh store."""
import logging
from datetime import datetime, timedelta

from life_assistant.services.store import NoteStore

logger = logging.getLogger(__name__)

# (hours ago, text, entities)
DEMO_NOTES = [
    (
        1,
        "Reminder: Call the dentist tomorrow to schedule a cleaning appointment. "
        "Also need to pick up groceries - milk, eggs, and bread.",
        {
            "tasks": ["call dentist", "pick up groceries"],
            "items": ["milk", "eggs", "bread"],
            "people": ["dentist"],
            "dates": ["tomorrow"],
        },
    ),
    (
        2,
        "Had lunch with Sarah today. She mentioned she's looking for a new job in "
        "marketing and asked if I know anyone at tech companies.",
        {
            "people": ["Sarah"],
            "topics": ["job search", "marketing", "tech companies"],
            "events": ["lunch"],
        },
    ),
    (
        3,
        "Bob's birthday party is this Saturday at 7 PM. Need to bring a bottle of wine. "
        "His address is 123 Oak Street.",
        {
            "people": ["Bob"],
            "events": ["birthday party"],
            "dates": ["Saturday"],
            "times": ["7 PM"],
            "locations": ["123 Oak Street"],
            "tasks": ["bring wine"],
        },
    ),
]


async def seed_demo_notes(store: NoteStore) -> int:
    """Add the demo notes (oldest first) unless the store already has notes."""
    if await store.list_notes():
        logger.info("Store already has notes, skipping demo seed")
        return 0

    now = datetime.utcnow()
    for hours_ago, text, entities in sorted(DEMO_NOTES, key=lambda n: -n[0]):
        note = await store.add_note(text, entities, timestamp=now - timedelta(hours=hours_ago))
        await store.add_tasks(note, entities.get("tasks", []))

    logger.info("Seeded %d demo notes", len(DEMO_NOTES))
    return len(DEMO_NOTES)
