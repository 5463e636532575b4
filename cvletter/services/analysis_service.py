"""Keyword-based intent classification and profile confidence scoring."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from cvletter.services.language_service import template_language
from cvletter.utils import rules
from cvletter.utils.templates import TEMPLATES


def classify_topic(text: str) -> str:
    """Return the first topic whose keyword list matches a substring of ``text``."""
    lowered = (text or "").lower()
    for topic, keywords in rules.TOPIC_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return topic
    return rules.DEFAULT_TOPIC


def _best_pattern_match(text: str, table, default: str) -> str:
    best_label = default
    best_count = 0
    for label, pattern in table:
        count = len(pattern.findall(text or ""))
        if count > best_count:
            best_label, best_count = label, count
    return best_label


def detect_request_type(message: str) -> str:
    """Classify a message as cv, letter, interview or general."""
    return _best_pattern_match(message, rules.REQUEST_TYPE_PATTERNS, rules.DEFAULT_REQUEST_TYPE)


def detect_action(message: str) -> str:
    return _best_pattern_match(message, rules.ACTION_PATTERNS, rules.DEFAULT_ACTION)


def assess_complexity(text: str) -> str:
    for level, pattern in rules.COMPLEXITY_PATTERNS:
        if pattern.search(text or ""):
            return level
    return rules.DEFAULT_COMPLEXITY


def detect_industry(text: str) -> Optional[str]:
    """Return the industry with the most keyword hits, if it reaches the minimum."""
    lowered = (text or "").lower()
    best_industry = None
    best_hits = 0
    for industry, keywords in rules.INDUSTRY_KEYWORDS:
        hits = sum(1 for keyword in keywords if keyword in lowered)
        if hits >= rules.MIN_INDUSTRY_HITS and hits > best_hits:
            best_industry, best_hits = industry, hits
    return best_industry


def detect_conversation_style(text: str) -> str:
    return _best_pattern_match(text, rules.STYLE_PATTERNS, rules.DEFAULT_STYLE)


def calculate_confidence(text: str) -> float:
    """Score how much usable profile data ``text`` holds.

    This is an additive heuristic rather than a probability: each detected
    data point adds a fixed weight on top of a small floor, plus a little for
    sheer length, and the total is capped at 1.0.
    """
    text = text or ""
    score = rules.CONFIDENCE_FLOOR
    for _, pattern, weight in rules.CONFIDENCE_WEIGHTS:
        if pattern.search(text):
            score += weight
    if detect_industry(text):
        score += rules.INDUSTRY_CONFIDENCE_WEIGHT
    score += min(len(text) / rules.CONFIDENCE_LENGTH_DIVISOR, rules.CONFIDENCE_LENGTH_CAP)
    return round(min(score, 1.0), 2)


def identify_missing_data(text: str, extracted_data: Optional[Dict[str, Any]] = None) -> List[str]:
    extracted_data = extracted_data or {}
    personal = extracted_data.get("cv", {}).get("personal", {})
    text = text or ""

    missing: List[str] = []
    if not personal.get("firstName") and not rules.NAME_MENTION_PATTERN.search(text):
        missing.append("name")
    if not personal.get("email") and not rules.EMAIL_PATTERN.search(text):
        missing.append("contact")
    if not rules.EXPERIENCE_PATTERN.search(text):
        missing.append("experience")
    if not extracted_data.get("cv", {}).get("skills") and not rules.READINESS_SKILL_PATTERN.search(text):
        missing.append("skills")
    if not rules.EDUCATION_PATTERN.search(text):
        missing.append("education")
    return [key for key in rules.MISSING_DATA_ORDER if key in missing]


def suggested_questions(missing: Iterable[str], language: str = "en") -> List[str]:
    questions = TEMPLATES[template_language(language)]["missing_questions"]
    return [questions[key] for key in missing if key in questions][: rules.MAX_SUGGESTED_QUESTIONS]


def assess_document_readiness(
    text: str,
    extracted_data: Optional[Dict[str, Any]] = None,
    language: str = "en",
) -> Dict[str, Any]:
    """Decide whether enough has been shared to offer CV or letter generation."""
    confidence = calculate_confidence(text)
    has_experience = bool(rules.EXPERIENCE_PATTERN.search(text or ""))
    has_skills = bool(rules.READINESS_SKILL_PATTERN.search(text or ""))
    missing = identify_missing_data(text, extracted_data)

    return {
        "cvReady": confidence > rules.CV_READY_THRESHOLD and has_experience and has_skills,
        "letterReady": confidence > rules.LETTER_READY_THRESHOLD and has_experience,
        "confidence": confidence,
        "missingData": missing,
        "suggestedQuestions": suggested_questions(missing, language),
    }


def analyze_conversation(
    message: str,
    user_messages: Iterable[str],
    extracted_data: Optional[Dict[str, Any]] = None,
    language: str = "en",
) -> Dict[str, Any]:
    """Build the per-turn conversation context.

    The intent fields describe the current message alone; confidence,
    readiness, industry and seniority are computed over the whole window of
    user messages so facts shared earlier keep counting.
    """
    history = "\n".join(part for part in user_messages if part)
    readiness = assess_document_readiness(history, extracted_data, language)

    return {
        "hasContent": bool((message or "").strip()),
        "topic": classify_topic(message),
        "requestType": detect_request_type(message),
        "action": detect_action(message),
        "complexity": assess_complexity(history),
        "industry": detect_industry(history),
        "conversationStyle": detect_conversation_style(message),
        "confidence": readiness["confidence"],
        "readiness": readiness,
    }