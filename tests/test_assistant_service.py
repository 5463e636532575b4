"""Tests for per-turn conversation orchestration."""

from __future__ import annotations

import sys
import time
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cvletter.services import assistant_service, composer_service  # noqa: E402
from cvletter.services.assistant_service import ConversationAssistant  # noqa: E402
from cvletter.utils.templates import TEMPLATES  # noqa: E402

SARAH_MESSAGE = (
    "My name is Sarah Connor, email sarah@example.com, I have 5 years experience as a "
    "project manager with skills: leadership, budgeting, scheduling"
)

ENVELOPE_KEYS = {
    "content",
    "language",
    "confidence",
    "conversationStyle",
    "followUpSuggestions",
    "processingTime",
    "intelligenceLevel",
    "sessionId",
    "topic",
    "requestType",
    "canGeneratePDF",
}


@pytest.fixture
def assistant(store, rng) -> ConversationAssistant:
    return ConversationAssistant(store, rng=rng)


def test_envelope_shape_and_new_session(assistant, store):
    envelope = assistant.respond("Can you help me with my CV?")

    assert set(envelope) == ENVELOPE_KEYS
    assert envelope["sessionId"].startswith("session_")
    assert envelope["language"] == "en"
    assert envelope["requestType"] == "cv"
    assert envelope["topic"] == "cv_creation"
    assert envelope["intelligenceLevel"] == assistant_service.LEVEL_ENHANCED
    assert isinstance(envelope["processingTime"], int)
    assert envelope["content"].split("\n\n")[-1] in TEMPLATES["en"]["closing_questions"]

    session = store.get_session(envelope["sessionId"])
    assert [message["role"] for message in session["messages"]] == ["user", "assistant"]
    assert session["messages"][1]["content"] == envelope["content"]


def test_unknown_session_id_is_adopted(assistant, store):
    envelope = assistant.respond("hello there", session_id="client-chosen-id")

    assert envelope["sessionId"] == "client-chosen-id"
    assert store.has_session("client-chosen-id")


def test_turns_accumulate_in_the_same_session(assistant, store):
    first = assistant.respond("Hi, I need help with a cover letter")
    assistant.respond("I'm applying to Initech", session_id=first["sessionId"])

    session = store.get_session(first["sessionId"])
    assert len(session["messages"]) == 4
    assert session["extractedData"]["letter"]["recipientInfo"]["company"] == "Initech"


def test_sarah_scenario_unlocks_cv_generation(assistant, store):
    envelope = assistant.respond(SARAH_MESSAGE)

    assert envelope["canGeneratePDF"]["cv"] is True
    assert envelope["confidence"] > 0.6
    assert "Sarah" in envelope["content"]

    personal = store.get_session(envelope["sessionId"])["extractedData"]["cv"]["personal"]
    assert personal["firstName"] == "Sarah"
    assert personal["email"] == "sarah@example.com"


def test_empty_message_gets_basic_menu_reply(assistant):
    envelope = assistant.respond("")

    assert envelope["intelligenceLevel"] == assistant_service.LEVEL_BASIC
    assert envelope["confidence"] == 0.05
    assert envelope["canGeneratePDF"] == {"cv": False, "letter": False}
    assert TEMPLATES["en"]["menu"] in envelope["content"]


def test_none_message_is_treated_as_empty(assistant):
    envelope = assistant.respond(None)
    assert envelope["intelligenceLevel"] == assistant_service.LEVEL_BASIC


def test_portuguese_turn_uses_portuguese_bundle(assistant):
    envelope = assistant.respond("Olá, meu nome é João e trabalho como desenvolvedor")

    assert envelope["language"] == "pt"
    assert envelope["intelligenceLevel"] == assistant_service.LEVEL_SUPER
    assert envelope["content"].startswith("Olá João")


def test_follow_ups_start_with_first_missing_question(assistant):
    envelope = assistant.respond("Can you help me with my CV?")

    suggestions = envelope["followUpSuggestions"]
    assert suggestions[0] == TEMPLATES["en"]["missing_questions"]["name"]
    assert len(suggestions) <= composer_service.MAX_FOLLOW_UPS


def test_context_window_limits_history(store, rng):
    assistant = ConversationAssistant(store, rng=rng, context_window=2)
    first = assistant.respond(SARAH_MESSAGE)
    session_id = first["sessionId"]
    assistant.respond("thanks", session_id=session_id)
    envelope = assistant.respond("ok cool", session_id=session_id)

    # Sarah's details have scrolled out of the two-message window.
    assert envelope["canGeneratePDF"]["cv"] is False


def test_web_insights_included_when_search_enabled(store, rng):
    calls = []

    def fake_search(query, language):
        calls.append((query, language))
        return [{"title": "t", "snippet": "Salaries rose 12% last year. Offices are quiet.", "url": "", "source": "x"}]

    assistant = ConversationAssistant(store, rng=rng, search_enabled=True, searcher=fake_search)
    envelope = assistant.respond("What are the latest salary trends for data analysts?")

    assert calls and calls[0][1] == "en"
    assert envelope["webInsights"] == ["Salaries rose 12% last year."]
    assert envelope["intelligenceLevel"] == assistant_service.LEVEL_SUPER
    assert "- Salaries rose 12% last year." in envelope["content"]


def test_search_skipped_without_trigger(store, rng):
    def fail_search(query, language):
        raise AssertionError("search should not run")

    assistant = ConversationAssistant(store, rng=rng, search_enabled=True, searcher=fail_search)
    envelope = assistant.respond("Help me write a CV")
    assert "webInsights" not in envelope


def test_composition_failure_returns_fallback(assistant, monkeypatch):
    def broken(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(composer_service, "compose_reply", broken)
    envelope = assistant.respond("Help me with my CV")

    assert envelope["content"] == composer_service.fallback_reply("en")
    assert set(envelope) == ENVELOPE_KEYS


def test_long_unbroken_message_gets_a_prompt_reply(assistant):
    started = time.perf_counter()
    envelope = assistant.respond("é" * 100_000)

    assert time.perf_counter() - started < 2.0
    assert set(envelope) == ENVELOPE_KEYS
    assert envelope["language"] == "en"
