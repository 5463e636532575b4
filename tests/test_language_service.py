"""Tests for keyword-frequency language detection."""

from __future__ import annotations

import sys
import time
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cvletter.services.language_service import (  # noqa: E402
    SUPPORTED_LANGUAGES,
    detect_language,
    score_languages,
    template_language,
)
from cvletter.utils.rules import LANGUAGE_SCAN_LIMIT  # noqa: E402


def test_portuguese_sentence_beats_english():
    result = detect_language("Olá, meu nome é João e trabalho como desenvolvedor")

    assert result["language"] == "pt"
    assert result["scores"]["pt"] > result["scores"]["en"]
    assert result["confidence"] > 0.3


def test_english_sentence():
    result = detect_language("Hi, I want help with my CV because I have an interview next week")
    assert result["language"] == "en"


def test_spanish_sentence():
    result = detect_language("Hola, me llamo Carlos y necesito ayuda con mi currículum para un puesto")
    assert result["language"] == "es"


def test_german_sentence():
    result = detect_language("Hallo, ich bin Anna und ich brauche Hilfe mit meinem Lebenslauf und der Bewerbung")
    assert result["language"] == "de"


def test_short_text_defaults_to_english():
    assert detect_language("") == {"language": "en", "confidence": 0.5, "scores": {}}
    assert detect_language("ok")["language"] == "en"


def test_low_signal_text_falls_back_to_english():
    result = detect_language("Zxqv blorf quantum flibber wobble snorkel gadget")
    assert result["language"] == "en"
    assert result["confidence"] == 0.3


def test_scores_follow_declaration_order():
    assert list(score_languages("anything")) == ["en", "pt", "es", "de", "fr", "it"]


def test_template_language_aliases():
    assert template_language("pt") == "pt"
    assert template_language("es") == "es"
    assert template_language("de") == "en"
    assert template_language("fr") == "en"
    assert template_language("it") == "en"
    assert template_language("xx") == "en"


def test_long_unbroken_token_is_scanned_quickly():
    for token in ("é" * 100_000, "a" * 100_000, "1" * 100_000, "ção" * 30_000):
        started = time.perf_counter()
        result = detect_language(token)
        assert time.perf_counter() - started < 1.0
        assert result["language"] in SUPPORTED_LANGUAGES


def test_suffix_indicators_still_count():
    assert score_languages("a informação")["pt"] >= 1
    assert score_languages("la información")["es"] >= 1
    assert score_languages("die Bewerbung")["de"] >= 1


def test_only_the_start_of_long_text_is_scanned():
    text = "x" * LANGUAGE_SCAN_LIMIT + " olá meu nome é João e trabalho como desenvolvedor"
    assert set(score_languages(text).values()) == {0}
    assert detect_language(text)["language"] == "en"
