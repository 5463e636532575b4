"""Best-effort web search for current job-market context."""

from __future__ import annotations

import logging
import os
import re
from typing import Any, Dict, List, Optional

import requests

from cvletter.services.language_service import template_language
from cvletter.utils.config import env_float
from cvletter.utils.rules import INSIGHT_TREND_KEYWORDS, MAX_INSIGHTS, SEARCH_TRIGGERS

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_URL = "https://api.duckduckgo.com/"
DEFAULT_TIMEOUT_SECONDS = 3.0
MAX_QUERY_LENGTH = 120
MAX_RESULTS = 5
MAX_INSIGHT_LENGTH = 200

PERCENT_PATTERN = re.compile(r"\d+(?:\.\d+)?\s?%")
SENTENCE_SPLIT_PATTERN = re.compile(r"(?<=[.!?])\s+")

QUERY_SUFFIXES = {
    "en": "job market 2025",
    "pt": "mercado de trabalho 2025",
    "es": "mercado laboral 2025",
}

FALLBACK_RESULTS: Dict[str, List[Dict[str, str]]] = {
    "en": [
        {
            "title": "Job market overview",
            "snippet": (
                "Around 65% of employers now list digital skills as essential for new hires. "
                "Demand for hybrid roles keeps growing across most sectors."
            ),
            "url": "",
            "source": "fallback",
        },
    ],
    "pt": [
        {
            "title": "Panorama do mercado de trabalho",
            "snippet": (
                "Cerca de 65% das empresas exigem habilidades digitais em novas contratações. "
                "A demanda por vagas híbridas segue em crescimento."
            ),
            "url": "",
            "source": "fallback",
        },
    ],
    "es": [
        {
            "title": "Panorama del mercado laboral",
            "snippet": (
                "Cerca del 65% de las empresas exige habilidades digitales en las nuevas contrataciones. "
                "La demanda de puestos híbridos sigue en crecimiento."
            ),
            "url": "",
            "source": "fallback",
        },
    ],
}


def should_search(message: str) -> bool:
    """Return True when the message asks about something time-sensitive."""
    lowered = (message or "").lower()
    return any(trigger in lowered for trigger in SEARCH_TRIGGERS)


def build_query(message: str, language: str = "en") -> str:
    base = " ".join((message or "").split())[:MAX_QUERY_LENGTH]
    suffix = QUERY_SUFFIXES[template_language(language)]
    return f"{base} {suffix}".strip()


def fallback_results(language: str = "en") -> List[Dict[str, str]]:
    return [dict(result) for result in FALLBACK_RESULTS[template_language(language)]]


def _flatten_topics(topics: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    flattened: List[Dict[str, Any]] = []
    for topic in topics or []:
        if "Topics" in topic:
            flattened.extend(_flatten_topics(topic["Topics"]))
        else:
            flattened.append(topic)
    return flattened


def parse_results(payload: Dict[str, Any]) -> List[Dict[str, str]]:
    """Turn a DuckDuckGo instant-answer payload into result records."""
    results: List[Dict[str, str]] = []

    abstract = (payload.get("AbstractText") or "").strip()
    if abstract:
        results.append(
            {
                "title": payload.get("Heading") or "Summary",
                "snippet": abstract,
                "url": payload.get("AbstractURL") or "",
                "source": payload.get("AbstractSource") or "duckduckgo",
            }
        )

    for topic in _flatten_topics(payload.get("RelatedTopics") or []):
        text = (topic.get("Text") or "").strip()
        if not text:
            continue
        results.append(
            {
                "title": text.split(" - ")[0][:80],
                "snippet": text,
                "url": topic.get("FirstURL") or "",
                "source": "duckduckgo",
            }
        )
        if len(results) >= MAX_RESULTS:
            break

    return results


def search_web(query: str, language: str = "en", timeout: Optional[float] = None) -> List[Dict[str, str]]:
    """Query the search endpoint, falling back to fixed results on any failure.

    The call is bounded by a short timeout and never raises.
    """
    url = os.getenv("WEB_SEARCH_URL", DEFAULT_SEARCH_URL)
    if timeout is None:
        timeout = env_float("WEB_SEARCH_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS)

    try:
        response = requests.get(
            url,
            params={"q": query, "format": "json", "no_html": 1, "skip_disambig": 1},
            timeout=timeout,
        )
        response.raise_for_status()
        payload = response.json()
    except requests.exceptions.RequestException:
        logger.warning("Web search request failed for %r; using fallback results", query, exc_info=True)
        return fallback_results(language)
    except ValueError:
        logger.warning("Web search returned invalid JSON for %r; using fallback results", query)
        return fallback_results(language)

    results = parse_results(payload if isinstance(payload, dict) else {})
    if not results:
        logger.info("Web search returned no results for %r; using fallback results", query)
        return fallback_results(language)
    return results


def extract_insights(results: List[Dict[str, str]]) -> List[str]:
    """Pull up to three metric or trend sentences out of search snippets."""
    insights: List[str] = []
    for result in results or []:
        for sentence in SENTENCE_SPLIT_PATTERN.split(result.get("snippet") or ""):
            sentence = sentence.strip()
            if not sentence:
                continue
            lowered = sentence.lower()
            if PERCENT_PATTERN.search(sentence) or any(word in lowered for word in INSIGHT_TREND_KEYWORDS):
                trimmed = sentence[:MAX_INSIGHT_LENGTH]
                if trimmed not in insights:
                    insights.append(trimmed)
            if len(insights) >= MAX_INSIGHTS:
                return insights
    return insights
