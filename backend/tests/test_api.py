"""API tests."""
from fastapi.testclient import TestClient

from life_assistant.main import app
from life_assistant.schemas.note_schemas import MAX_NOTE_LENGTH
from life_assistant.services.llm.mocks import BOB_PARTY_ANSWER, PLACEHOLDER_TASK
from life_assistant.services.store import InMemoryNoteStore, get_note_store
from life_assistant.services.transcription import FALLBACK_TRANSCRIPTIONS

from tests.llm_helpers import NOTE_BOB_PARTY, NOTE_DENTIST, NOTE_GROCERIES_DONE


def test_root(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "AI Life Assistant API"
    assert data["status"] == "running"


def test_health(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["ai_provider"] == "fallback"


def test_request_id_headers(client):
    response = client.get("/health")
    assert response.headers["X-Request-ID"].startswith("req_")
    assert response.headers["X-Response-Time"].endswith("ms")


def test_request_id_passthrough(client):
    response = client.get("/health", headers={"X-Request-ID": "req_from_caller"})
    assert response.headers["X-Request-ID"] == "req_from_caller"
    assert response.json()["request_id"] == "req_from_caller"


# -- Notes --

def test_submit_text_note_json(client):
    response = client.post("/api/v1/notes/text", json={"text": NOTE_DENTIST})
    assert response.status_code == 201
    data = response.json()
    assert data["note"]["id"] == 1
    assert data["note"]["text"] == NOTE_DENTIST
    assert data["note"]["entities"] == {"tasks": [PLACEHOLDER_TASK], "dates": ["tomorrow"]}
    assert data["completion"] is None
    assert data["candidates"] == []


def test_submit_text_note_form(client):
    response = client.post("/api/v1/notes", data={"text": "Call mom on Sunday"})
    assert response.status_code == 201
    entities = response.json()["note"]["entities"]
    assert entities["people"] == ["mom"]
    assert entities["dates"] == ["sunday"]


def test_submit_audio_note(client):
    response = client.post(
        "/api/v1/notes",
        files={"audio": ("memo.webm", b"\x1aE\xdf\xa3audio", "audio/webm;codecs=opus")},
    )
    assert response.status_code == 201
    assert response.json()["note"]["text"] in FALLBACK_TRANSCRIPTIONS


def test_submit_audio_wrong_type(client):
    response = client.post(
        "/api/v1/notes",
        files={"audio": ("notes.txt", b"hello", "text/plain")},
    )
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "invalid_audio_format"


def test_submit_audio_too_large(client, settings):
    settings.max_audio_bytes = 8
    response = client.post(
        "/api/v1/notes",
        files={"audio": ("memo.wav", b"0123456789", "audio/wav")},
    )
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "invalid_file_size"


def test_submit_note_without_input(client):
    response = client.post("/api/v1/notes", data={"text": "   "})
    assert response.status_code == 400
    body = response.json()
    assert body["error"]["code"] == "missing_required_field"
    assert body["error"]["message"] == "No audio file or text provided"
    assert body["request_id"].startswith("req_")
    assert body["timestamp"].endswith("Z")


def test_submit_text_note_missing_field(client):
    response = client.post("/api/v1/notes/text", json={})
    assert response.status_code == 422
    assert response.json()["error"]["code"] == "validation_failed"
    assert response.json()["error"]["param"] == "text"


def test_submit_form_text_too_long(client):
    response = client.post("/api/v1/notes", data={"text": "x" * (MAX_NOTE_LENGTH + 1)})
    assert response.status_code == 422
    assert response.json()["error"]["code"] == "validation_failed"
    assert response.json()["error"]["param"] == "text"
    assert client.get("/api/v1/notes").json() == []


def test_submit_json_text_too_long(client):
    response = client.post("/api/v1/notes/text", json={"text": "x" * (MAX_NOTE_LENGTH + 1)})
    assert response.status_code == 422
    assert response.json()["error"]["param"] == "text"


def test_list_notes_newest_first(client):
    client.post("/api/v1/notes/text", json={"text": "first"})
    client.post("/api/v1/notes/text", json={"text": "second"})

    response = client.get("/api/v1/notes")
    assert response.status_code == 200
    assert [n["text"] for n in response.json()] == ["second", "first"]


def test_delete_note(client):
    note_id = client.post("/api/v1/notes/text", json={"text": NOTE_DENTIST}).json()["note"]["id"]

    assert client.delete(f"/api/v1/notes/{note_id}").status_code == 204
    assert client.get("/api/v1/notes").json() == []
    assert client.get("/api/v1/tasks/pending").json() == []


def test_delete_missing_note(client):
    response = client.delete("/api/v1/notes/404")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "note_not_found"
    assert response.json()["error"]["param"] == "note_id"


# -- Chat --

def test_chat_over_demo_corpus(client):
    client.post("/api/v1/notes/text", json={"text": NOTE_BOB_PARTY})

    response = client.post("/api/v1/chat", json={"question": "When is Bob's party?"})
    assert response.status_code == 200
    answer = response.json()["response"]
    assert answer == BOB_PARTY_ANSWER
    assert "Saturday at 7 PM" in answer


def test_chat_blank_question(client):
    response = client.post("/api/v1/chat", json={"question": "  "})
    assert response.status_code == 400
    assert response.json()["error"]["param"] == "question"


def test_chat_missing_question(client):
    assert client.post("/api/v1/chat", json={}).status_code == 422


def test_chat_empty_corpus(client):
    response = client.post("/api/v1/chat", json={"question": "Anything interesting?"})
    assert response.status_code == 200
    assert "0 recordings" in response.json()["response"]


# -- Tasks --

def test_task_completion_flow(client, store):
    first = client.post("/api/v1/notes/text", json={"text": NOTE_DENTIST}).json()
    pending = client.get("/api/v1/tasks/pending").json()
    assert [t["description"] for t in pending] == [PLACEHOLDER_TASK]
    assert pending[0]["note_id"] == first["note"]["id"]

    closer = client.post(
        "/api/v1/notes/text", json={"text": "Done with the recording task"}
    ).json()
    assert closer["note"]["completion_detected"] is True
    assert closer["completion"]["keywords"] == ["done"]
    assert [t["id"] for t in closer["candidates"]] == [pending[0]["id"]]

    response = client.post(
        f"/api/v1/tasks/{pending[0]['id']}/complete",
        json={"completing_note_id": closer["note"]["id"]},
    )
    assert response.status_code == 200
    assert response.json()["status"] == "completed"
    assert response.json()["completed_by_note_id"] == closer["note"]["id"]

    assert client.get("/api/v1/tasks/pending").json() == []
    completed = client.get("/api/v1/tasks", params={"status": "completed"}).json()
    assert [t["id"] for t in completed] == [pending[0]["id"]]

    again = client.post(
        f"/api/v1/tasks/{pending[0]['id']}/complete",
        json={"completing_note_id": closer["note"]["id"]},
    )
    assert again.status_code == 409
    assert again.json()["error"]["code"] == "task_already_completed"


def test_complete_missing_task(client):
    response = client.post("/api/v1/tasks/77/complete", json={"completing_note_id": 1})
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "task_not_found"


def test_list_tasks_bad_status(client):
    assert client.get("/api/v1/tasks", params={"status": "archived"}).status_code == 422


def test_note_matches(client):
    client.post("/api/v1/notes/text", json={"text": NOTE_DENTIST})
    closer = client.post("/api/v1/notes/text", json={"text": NOTE_GROCERIES_DONE}).json()

    response = client.get(f"/api/v1/notes/{closer['note']['id']}/matches")
    assert response.status_code == 200
    data = response.json()
    assert data["completion"]["has_completion"] is True
    assert data["candidates"] == []


# -- Errors --

class _BrokenStore(InMemoryNoteStore):
    async def list_notes(self):
        raise RuntimeError("disk on fire")


def test_store_failure_is_internal_error():
    app.dependency_overrides[get_note_store] = lambda: _BrokenStore()
    try:
        with TestClient(app, raise_server_exceptions=False) as c:
            response = c.get("/api/v1/notes")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json()["error"]["code"] == "internal_server_error"
