"""Tests for life_assistant.services.llm.service -- LLMService coordinator routing."""
import logging

import pytest

from life_assistant.services.llm.mocks import BOB_PARTY_ANSWER, PLACEHOLDER_TASK
from life_assistant.services.llm.service import LLMService

from tests.llm_helpers import (
    FakeGroqClient,
    FakeErrorClient,
    NOTE_BOB_PARTY,
    NOTE_DENTIST,
    CANNED_ANSWER,
    CANNED_EXTRACTION_RESPONSE,
    make_note,
)

LOGGER = "life_assistant.services.llm.service"


# -- init --

def test_init_no_api_key():
    svc = LLMService()
    assert svc.client is None


def test_init_reads_settings(settings):
    settings.llm_model = "llama-3.1-8b-instant"
    settings.extraction_max_tokens = 123
    svc = LLMService(client=FakeGroqClient())
    assert svc.model == "llama-3.1-8b-instant"
    assert svc.extraction_max_tokens == 123
    assert svc.answer_temperature == 0.3


def test_init_with_key_builds_single_attempt_client(settings):
    settings.groq_api_key = "gsk_test"
    svc = LLMService()
    assert svc.client is not None
    assert svc.client.max_retries == 0


# -- extract_entities --

@pytest.mark.asyncio
async def test_extract_entities_mock():
    svc = LLMService()
    result = await svc.extract_entities(NOTE_DENTIST)
    assert result == {"tasks": [PLACEHOLDER_TASK], "dates": ["tomorrow"]}


@pytest.mark.asyncio
async def test_extract_entities_llm():
    client = FakeGroqClient(CANNED_EXTRACTION_RESPONSE)
    svc = LLMService(client=client)
    result = await svc.extract_entities(NOTE_BOB_PARTY)
    assert result["people"] == ["Bob"]
    assert client.chat.completions.last_kwargs["max_tokens"] == 300
    assert client.chat.completions.last_kwargs["temperature"] == 0.1


@pytest.mark.asyncio
async def test_extract_entities_provider_error_falls_back(caplog):
    client = FakeErrorClient()
    svc = LLMService(client=client)
    with caplog.at_level(logging.WARNING, logger=LOGGER):
        result = await svc.extract_entities(NOTE_DENTIST)
    assert result == {"tasks": [PLACEHOLDER_TASK], "dates": ["tomorrow"]}
    assert "Entity extraction error" in caplog.text
    # One attempt, no retry
    assert client.chat.completions.calls == 1


@pytest.mark.asyncio
async def test_extract_entities_bad_json_falls_back(caplog):
    svc = LLMService(client=FakeGroqClient("not json at all"))
    with caplog.at_level(logging.WARNING, logger=LOGGER):
        result = await svc.extract_entities(NOTE_DENTIST)
    assert result == {"tasks": [PLACEHOLDER_TASK], "dates": ["tomorrow"]}
    assert "keyword fallback" in caplog.text


@pytest.mark.asyncio
async def test_extract_entities_wrong_shape_falls_back():
    svc = LLMService(client=FakeGroqClient('{"people": 42}'))
    result = await svc.extract_entities(NOTE_BOB_PARTY)
    assert result["people"] == ["bob"]


# -- answer_question --

@pytest.mark.asyncio
async def test_answer_question_mock():
    svc = LLMService()
    notes = [make_note(1, NOTE_BOB_PARTY)]
    assert await svc.answer_question("When is Bob's party?", notes) == BOB_PARTY_ANSWER


@pytest.mark.asyncio
async def test_answer_question_llm():
    client = FakeGroqClient(CANNED_ANSWER)
    svc = LLMService(client=client)
    answer = await svc.answer_question("When is Bob's party?", [make_note(1, NOTE_BOB_PARTY)])
    assert answer == CANNED_ANSWER.strip()
    assert client.chat.completions.last_kwargs["temperature"] == 0.3


@pytest.mark.asyncio
async def test_answer_question_provider_error_falls_back(caplog):
    svc = LLMService(client=FakeErrorClient())
    with caplog.at_level(logging.WARNING, logger=LOGGER):
        answer = await svc.answer_question("When is Bob's party?", [])
    assert answer == BOB_PARTY_ANSWER
    assert "Response generation error" in caplog.text


@pytest.mark.asyncio
async def test_answer_question_empty_reply_falls_back():
    svc = LLMService(client=FakeGroqClient(""))
    notes = [make_note(1, "x", {"tasks": ["water plants"]})]
    assert await svc.answer_question("my tasks?", notes) == "Here are your tasks: water plants"
