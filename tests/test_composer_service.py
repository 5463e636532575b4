"""Tests for template-driven reply composition."""

from __future__ import annotations

import random
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cvletter.services import composer_service  # noqa: E402
from cvletter.utils.templates import TEMPLATES  # noqa: E402


def _context(**overrides):
    context = {
        "hasContent": True,
        "topic": "general_inquiry",
        "requestType": "general",
        "action": "general",
        "complexity": "mid",
        "industry": None,
        "conversationStyle": "professional",
        "confidence": 0.05,
        "readiness": {"cvReady": False, "letterReady": False},
    }
    context.update(overrides)
    return context


def test_reply_ends_with_a_known_closing_question(rng):
    reply = composer_service.compose_reply(_context(requestType="cv"), {}, "en", rng)
    last_paragraph = reply.split("\n\n")[-1]
    assert last_paragraph in TEMPLATES["en"]["closing_questions"]


def test_closing_question_varies_with_seed():
    picks = {composer_service.pick_closing_question("en", random.Random(seed)) for seed in range(40)}
    assert picks <= set(TEMPLATES["en"]["closing_questions"])
    assert len(picks) > 1


def test_empty_message_gets_greeting_and_menu(rng):
    reply = composer_service.compose_reply(_context(hasContent=False), {}, "en", rng)
    sections = reply.split("\n\n")

    assert sections[0] == TEMPLATES["en"]["greeting"]
    assert sections[1] == TEMPLATES["en"]["menu"]
    assert sections[2] in TEMPLATES["en"]["closing_questions"]


def test_known_name_personalises_greeting(rng):
    extracted = {"cv": {"personal": {"firstName": "Sarah", "lastName": "Connor"}}}
    reply = composer_service.compose_reply(_context(hasContent=False), extracted, "en", rng)
    assert reply.startswith("Hello Sarah,")


def test_portuguese_bundle_is_used(rng):
    reply = composer_service.compose_reply(_context(requestType="cv"), {}, "pt", rng)
    assert reply.startswith(TEMPLATES["pt"]["greeting"])
    assert TEMPLATES["pt"]["cv_help"] in reply
    assert reply.split("\n\n")[-1] in TEMPLATES["pt"]["closing_questions"]


def test_unsupported_language_uses_english_bundle(rng):
    reply = composer_service.compose_reply(_context(), {}, "de", rng)
    assert reply.startswith(TEMPLATES["en"]["greeting"])


def test_letter_reply_uses_placeholders_when_unknown(rng):
    reply = composer_service.compose_reply(_context(requestType="letter", action="create"), {}, "en", rng)
    assert "hiring team at Company for the Position Title role" in reply
    assert TEMPLATES["en"]["letter_guide"] in reply


def test_letter_reply_uses_known_target(rng):
    extracted = {
        "letter": {"recipientInfo": {"company": "Initech"}},
        "preferences": {"position": "backend developer"},
    }
    reply = composer_service.compose_reply(_context(requestType="letter", action="improve"), extracted, "en", rng)
    assert "hiring team at Initech for the backend developer role" in reply
    assert TEMPLATES["en"]["letter_tips"] in reply


def test_cv_guidance_follows_complexity(rng):
    reply = composer_service.compose_reply(
        _context(requestType="cv", complexity="senior", action="review"), {}, "en", rng
    )
    assert TEMPLATES["en"]["cv_guidance"]["senior"] in reply
    assert TEMPLATES["en"]["cv_checklist"] in reply


def test_acknowledges_profile_and_offers_generation(rng):
    extracted = {
        "cv": {
            "personal": {"firstName": "Sarah", "lastName": "Connor", "email": "sarah@example.com"},
            "skills": [{"name": "leadership"}, {"name": "budgeting"}],
        },
        "preferences": {"position": "project manager"},
    }
    context = _context(requestType="cv", readiness={"cvReady": True, "letterReady": True}, industry="finance")
    reply = composer_service.compose_reply(context, extracted, "en", rng)

    assert "name Sarah Connor" in reply
    assert "email sarah@example.com" in reply
    assert "role project manager" in reply
    assert "skills leadership, budgeting" in reply
    assert TEMPLATES["en"]["industry_insights"]["finance"] in reply
    assert TEMPLATES["en"]["ready_both"] in reply


def test_web_insights_are_listed(rng):
    reply = composer_service.compose_reply(_context(), {}, "en", rng, web_insights=["Demand for data roles is growing"])
    assert "Current market notes:\n- Demand for data roles is growing" in reply


def test_follow_up_suggestions_prefer_missing_data():
    suggestions = composer_service.follow_up_suggestions(
        "cv_creation", "en", ["What is your full name?", "What is your highest qualification?"]
    )
    assert suggestions == [
        "What is your full name?",
        "What is your highest qualification?",
        "Tell me about your most recent job",
        "Which skills do you want to highlight?",
    ]


def test_follow_up_suggestions_fall_back_to_general():
    suggestions = composer_service.follow_up_suggestions("unknown_topic", "en")
    assert suggestions == TEMPLATES["en"]["follow_ups"]["general_inquiry"]


def test_offer_message():
    assert composer_service.offer_message({"cvReady": True, "letterReady": False}) == TEMPLATES["en"]["ready_cv"]
    assert composer_service.offer_message({"cvReady": False, "letterReady": True}, "es") == TEMPLATES["es"]["ready_letter"]
    assert composer_service.offer_message({}) is None


def test_fallback_reply_includes_menu():
    reply = composer_service.fallback_reply("pt")
    assert reply == TEMPLATES["pt"]["fallback"] + "\n\n" + TEMPLATES["pt"]["menu"]
