"""Keyword-frequency language detection."""

from __future__ import annotations

from typing import Any, Dict

from cvletter.utils.rules import (
    DEFAULT_LANGUAGE,
    LANGUAGE_CONFIDENCE_FLOOR,
    LANGUAGE_INDICATORS,
    LANGUAGE_SCAN_LIMIT,
    SHORT_TEXT_CONFIDENCE,
    TEMPLATE_LANGUAGES,
)

SUPPORTED_LANGUAGES = [language for language, _ in LANGUAGE_INDICATORS]


def score_languages(text: str) -> Dict[str, int]:
    """Count indicator hits per language in declaration order."""
    lowered = (text or "")[:LANGUAGE_SCAN_LIMIT].lower()
    return {
        language: sum(len(pattern.findall(lowered)) for pattern in patterns)
        for language, patterns in LANGUAGE_INDICATORS
    }


def detect_language(text: str) -> Dict[str, Any]:
    """Return the most likely language of ``text`` with a heuristic confidence.

    The language with the most indicator hits wins, earlier table entries
    winning ties. Confidence is the winning score relative to a tenth of the
    word count, capped at 1. Anything at or below the floor falls back to
    English. Only the first LANGUAGE_SCAN_LIMIT characters are considered.
    """
    cleaned = (text or "").strip()[:LANGUAGE_SCAN_LIMIT]
    if len(cleaned) < 3:
        return {"language": DEFAULT_LANGUAGE, "confidence": SHORT_TEXT_CONFIDENCE, "scores": {}}

    scores = score_languages(cleaned)
    best_language = DEFAULT_LANGUAGE
    best_score = 0
    for language, score in scores.items():
        if score > best_score:
            best_language, best_score = language, score

    word_count = max(len(cleaned.split()), 1)
    confidence = min(best_score / (word_count * 0.1), 1.0)
    if confidence <= LANGUAGE_CONFIDENCE_FLOOR:
        return {"language": DEFAULT_LANGUAGE, "confidence": LANGUAGE_CONFIDENCE_FLOOR, "scores": scores}

    return {"language": best_language, "confidence": round(confidence, 2), "scores": scores}


def template_language(language: str) -> str:
    """Map a detected language onto one that has a reply bundle."""
    if language in TEMPLATE_LANGUAGES:
        return language
    return DEFAULT_LANGUAGE
