"""Per-turn conversation orchestration."""

from __future__ import annotations

import logging
import random
import time
from typing import Any, Callable, Dict, List, Optional

from cvletter.services import analysis_service, composer_service, extraction_service, language_service, search_service
from cvletter.services.session_store import SessionStore

logger = logging.getLogger(__name__)

DEFAULT_CONTEXT_WINDOW = 10
DEFAULT_MAX_MESSAGE_LENGTH = 10_000

LEVEL_BASIC = "basic"
LEVEL_ENHANCED = "enhanced"
LEVEL_SUPER = "super-intelligent"


class ConversationAssistant:
    """Runs one conversational turn against the session store.

    Each call to :meth:`respond` detects the language, records the user
    message, merges any extracted profile fields, analyzes the recent user
    messages, optionally looks up market context, composes a reply and
    records it. The caller always receives a reply envelope.
    """

    def __init__(
        self,
        store: SessionStore,
        rng: Optional[random.Random] = None,
        search_enabled: bool = False,
        context_window: int = DEFAULT_CONTEXT_WINDOW,
        searcher: Optional[Callable[[str, str], List[Dict[str, str]]]] = None,
    ) -> None:
        self.store = store
        self.rng = rng or random.Random()
        self.search_enabled = search_enabled
        self.context_window = context_window
        self._search = searcher or search_service.search_web

    def respond(
        self,
        message: Optional[str],
        session_id: Optional[str] = None,
        owner_id: str = "anonymous",
    ) -> Dict[str, Any]:
        started = time.perf_counter()
        text = (message or "").strip()

        if not self.store.has_session(session_id):
            session_id = self.store.create_session(owner_id, session_id=session_id or None)

        detected = language_service.detect_language(text)
        language = detected["language"]

        self.store.add_message(session_id, "user", text)

        extracted = extraction_service.extract_profile_fields(text)
        if extracted:
            self.store.update_extracted_data(session_id, extracted)

        session = self.store.get_session(session_id) or {}
        extracted_data = session.get("extractedData", {})
        window = self.store.recent_messages(session_id, self.context_window)
        user_messages = [item["content"] for item in window if item["role"] == "user"]

        context = analysis_service.analyze_conversation(text, user_messages, extracted_data, language)

        web_insights: List[str] = []
        if self.search_enabled and text and search_service.should_search(text):
            results = self._search(search_service.build_query(text, language), language)
            web_insights = search_service.extract_insights(results)

        try:
            content = composer_service.compose_reply(context, extracted_data, language, self.rng, web_insights)
        except Exception:
            logger.exception("Failed to compose reply for session %s", session_id)
            content = composer_service.fallback_reply(language)

        self.store.add_message(session_id, "assistant", content)

        readiness = context["readiness"]
        envelope: Dict[str, Any] = {
            "content": content,
            "language": language,
            "confidence": context["confidence"],
            "conversationStyle": context["conversationStyle"],
            "followUpSuggestions": composer_service.follow_up_suggestions(
                context["topic"], language, readiness["suggestedQuestions"][:1]
            ),
            "processingTime": int((time.perf_counter() - started) * 1000),
            "intelligenceLevel": self._intelligence_level(text, language, web_insights),
            "sessionId": session_id,
            "topic": context["topic"],
            "requestType": context["requestType"],
            "canGeneratePDF": {"cv": readiness["cvReady"], "letter": readiness["letterReady"]},
        }
        if web_insights:
            envelope["webInsights"] = web_insights

        logger.debug(
            "Session %s turn: language=%s topic=%s confidence=%.2f",
            session_id,
            language,
            context["topic"],
            context["confidence"],
        )
        return envelope

    @staticmethod
    def _intelligence_level(text: str, language: str, web_insights: List[str]) -> str:
        if not text:
            return LEVEL_BASIC
        if language != "en" or web_insights:
            return LEVEL_SUPER
        return LEVEL_ENHANCED
