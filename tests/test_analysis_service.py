"""Tests for intent classification, confidence scoring and readiness."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cvletter.services import analysis_service  # noqa: E402
from cvletter.utils import rules  # noqa: E402

SARAH_MESSAGE = (
    "My name is Sarah Connor, email sarah@example.com, I have 5 years experience as a "
    "project manager with skills: leadership, budgeting, scheduling"
)


@pytest.mark.parametrize(
    "text, topic",
    [
        ("Can you help me with my CV?", "cv_creation"),
        ("I need a cover letter", "letter_creation"),
        ("Any career advice for me?", "career_advice"),
        ("Which course should I take to learn SQL", "skill_development"),
        ("How do I negotiate my salary", "salary_negotiation"),
        ("Good morning", "general_inquiry"),
    ],
)
def test_classify_topic(text, topic):
    assert analysis_service.classify_topic(text) == topic


def test_topic_ties_follow_enumeration_order():
    # Mentions both a CV and a salary; the CV category is listed first.
    assert analysis_service.classify_topic("Should my resume mention my salary?") == "cv_creation"


def test_detect_request_type():
    assert analysis_service.detect_request_type("Please review my resume") == "cv"
    assert analysis_service.detect_request_type("Write me a cover letter") == "letter"
    assert analysis_service.detect_request_type("I have an interview tomorrow") == "interview"
    assert analysis_service.detect_request_type("Quero melhorar meu currículo") == "cv"
    assert analysis_service.detect_request_type("hello") == "general"


def test_detect_action():
    assert analysis_service.detect_action("Help me create a CV") == "create"
    assert analysis_service.detect_action("Can you improve my letter") == "improve"
    assert analysis_service.detect_action("Please review this") == "review"
    assert analysis_service.detect_action("Any tips?") == "learn"
    assert analysis_service.detect_action("hello") == "general"


def test_assess_complexity():
    assert analysis_service.assess_complexity("I am an executive director") == "senior"
    assert analysis_service.assess_complexity("recent graduate looking for a first job") == "entry"
    assert analysis_service.assess_complexity("I have some experience") == "mid"


def test_detect_industry_needs_two_hits():
    assert analysis_service.detect_industry("I am a software developer") == "technology"
    assert analysis_service.detect_industry("I like software") is None
    assert analysis_service.detect_industry("hospital nurse with patient care background") == "healthcare"


def test_confidence_floor_for_empty_text():
    assert analysis_service.calculate_confidence("") == rules.CONFIDENCE_FLOOR


def test_confidence_is_capped():
    text = (
        "Email me at a@b.com or call 07700 900123. I'm a senior software engineer with 10 years "
        "experience, skills in Python and SQL, and a computer science degree from a university. "
    ) * 10
    assert analysis_service.calculate_confidence(text) == 1.0


def test_sarah_scenario_is_cv_ready():
    readiness = analysis_service.assess_document_readiness(SARAH_MESSAGE)

    assert readiness["confidence"] > rules.CV_READY_THRESHOLD
    assert readiness["cvReady"] is True
    assert readiness["letterReady"] is True
    assert "name" not in readiness["missingData"]
    assert "contact" not in readiness["missingData"]
    assert "education" in readiness["missingData"]


@pytest.mark.parametrize(
    "text",
    [
        "",
        "hello, can you help me?",
        "My email is someone@example.com and my phone is 07700 900123, skills: teamwork",
        "I have great skills and I am proficient, reach me at x@y.com or +44 20 1234 5678 " * 20,
    ],
)
def test_text_without_role_industry_or_education_is_not_ready(text):
    readiness = analysis_service.assess_document_readiness(text)

    assert readiness["confidence"] < rules.LETTER_READY_THRESHOLD
    assert readiness["cvReady"] is False
    assert readiness["letterReady"] is False


def test_suggested_questions_are_localized_and_limited():
    readiness = analysis_service.assess_document_readiness("oi", language="pt")
    assert readiness["missingData"] == ["name", "contact", "experience", "skills", "education"]
    assert readiness["suggestedQuestions"] == [
        "Qual é o seu nome completo?",
        "Qual email deve aparecer nos seus documentos?",
        "Em qual setor você trabalha e qual foi seu cargo mais recente?",
    ]


def test_missing_data_uses_extracted_fields():
    extracted = {"cv": {"personal": {"firstName": "Ana", "email": "ana@example.com"}, "skills": [{"name": "SQL"}]}}
    missing = analysis_service.identify_missing_data("I studied at university", extracted)
    assert missing == ["experience"]


def test_analyze_conversation_uses_history_for_scoring():
    history = [SARAH_MESSAGE, "Can you make my CV now?"]
    context = analysis_service.analyze_conversation("Can you make my CV now?", history)

    assert context["requestType"] == "cv"
    assert context["action"] == "create"
    assert context["topic"] == "cv_creation"
    assert context["readiness"]["cvReady"] is True
    assert context["confidence"] == context["readiness"]["confidence"]
    assert context["hasContent"] is True


def test_conversation_style():
    assert analysis_service.detect_conversation_style("Dear sir, could you kindly assist") == "formal"
    assert analysis_service.detect_conversation_style("hey, cool, thanks lol") == "casual"
    assert analysis_service.detect_conversation_style("I want to advance my career in this industry") == "professional"
    assert analysis_service.detect_conversation_style("") == "professional"
