"""Pytest configuration and fixtures."""
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from life_assistant.config import get_settings
from life_assistant.main import app
from life_assistant.services.sql_store import SqlNoteStore
from life_assistant.services.store import InMemoryNoteStore, get_note_store


@pytest.fixture(autouse=True)
def settings(monkeypatch):
    """Fresh settings with no provider key and an open gate."""
    monkeypatch.delenv("GROQ_API_KEY", raising=False)
    monkeypatch.delenv("AUTH_PASSWORD", raising=False)
    monkeypatch.delenv("DATABASE_URL", raising=False)
    get_settings.cache_clear()
    settings = get_settings()
    settings.groq_api_key = ""
    settings.auth_password = ""
    settings.database_url = ""
    yield settings
    get_settings.cache_clear()


@pytest.fixture
def store():
    """Empty in-memory note store."""
    return InMemoryNoteStore()


@pytest_asyncio.fixture(params=["memory", "sql"])
async def any_store(request, tmp_path):
    """Each store implementation in turn."""
    if request.param == "memory":
        yield InMemoryNoteStore()
        return
    sql = SqlNoteStore(f"sqlite+aiosqlite:///{tmp_path / 'notes.db'}")
    await sql.init()
    yield sql
    await sql.close()


@pytest.fixture
def client(store):
    """Test client wired to the in-memory store, providers disabled."""
    app.dependency_overrides[get_note_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
