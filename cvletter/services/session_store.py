"""In-memory conversation session store."""

from __future__ import annotations

import copy
import logging
import threading
from typing import Any, Callable, Dict, List, Optional

from cvletter.services.extraction_service import merge_profile_data
from cvletter.utils.session import SESSION_TTL_SECONDS, generate_session_id, generate_token, now_millis

logger = logging.getLogger(__name__)

STATUS_ACTIVE = "active"
STATUS_COMPLETED = "completed"
STATUS_PDF_GENERATED = "pdf_generated"

# Statuses only ever move forward through this sequence.
STATUS_ORDER = (STATUS_ACTIVE, STATUS_COMPLETED, STATUS_PDF_GENERATED)

MESSAGE_ROLES = ("user", "assistant")
SUMMARY_PREVIEW_LENGTH = 50


class SessionStore:
    """Thread-safe mapping of session id to conversation state.

    The store lives for the lifetime of the process and is built once by the
    application factory. Sessions idle for longer than ``ttl_seconds`` are
    evicted by :meth:`prune_expired`. Reads return deep copies, so a snapshot
    never changes underneath its caller.

    Writes against an unknown session id are ignored: they return ``False``
    and log a warning instead of creating a session. Callers that want a
    session to exist must call :meth:`create_session` first.

    State is held per process. Running several workers needs a shared
    key-value backend behind the same methods.
    """

    def __init__(
        self,
        ttl_seconds: int = SESSION_TTL_SECONDS,
        clock: Callable[[], int] = now_millis,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._sessions: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.Lock()

    def create_session(self, owner_id: str = "anonymous", session_id: Optional[str] = None) -> str:
        """Create an empty active session and return its id.

        A caller-supplied id is adopted when it is not already taken; an
        existing id is returned untouched.
        """
        with self._lock:
            if session_id and session_id in self._sessions:
                return session_id

            new_id = session_id or generate_session_id()
            while new_id in self._sessions:
                new_id = generate_session_id()

            timestamp = self._clock()
            self._sessions[new_id] = {
                "sessionId": new_id,
                "ownerId": owner_id or "anonymous",
                "messages": [],
                "extractedData": {},
                "status": STATUS_ACTIVE,
                "createdAt": timestamp,
                "lastUpdated": timestamp,
            }

        logger.info("Created conversation session %s", new_id)
        return new_id

    def has_session(self, session_id: Optional[str]) -> bool:
        if not session_id:
            return False
        with self._lock:
            return session_id in self._sessions

    def get_session(self, session_id: Optional[str]) -> Optional[Dict[str, Any]]:
        """Return a deep-copied snapshot of the session, or None when unknown."""
        if not session_id:
            return None
        with self._lock:
            session = self._sessions.get(session_id)
            return copy.deepcopy(session) if session is not None else None

    def add_message(self, session_id: str, role: str, content: str) -> bool:
        """Append a message in arrival order. Returns False for unknown sessions."""
        if role not in MESSAGE_ROLES:
            raise ValueError(f"Unsupported message role: {role!r}")

        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                logger.warning("Dropped %s message for unknown session %s", role, session_id)
                return False

            timestamp = self._clock()
            session["messages"].append(
                {
                    "id": generate_token("msg"),
                    "role": role,
                    "content": content or "",
                    "timestamp": timestamp,
                }
            )
            session["lastUpdated"] = timestamp
        return True

    def update_extracted_data(self, session_id: str, partial: Dict[str, Any]) -> bool:
        """Merge newly extracted fields into the session profile."""
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                logger.warning("Dropped extracted data for unknown session %s", session_id)
                return False

            session["extractedData"] = merge_profile_data(session["extractedData"], partial)
            session["lastUpdated"] = self._clock()
        return True

    def set_status(self, session_id: str, status: str) -> bool:
        """Advance the session status. Backward transitions are ignored."""
        if status not in STATUS_ORDER:
            raise ValueError(f"Unsupported session status: {status!r}")

        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                logger.warning("Cannot set status %s on unknown session %s", status, session_id)
                return False

            if STATUS_ORDER.index(status) < STATUS_ORDER.index(session["status"]):
                logger.info(
                    "Ignoring status change %s -> %s for session %s",
                    session["status"],
                    status,
                    session_id,
                )
                return False

            session["status"] = status
            session["lastUpdated"] = self._clock()
        return True

    def mark_completed(self, session_id: str) -> bool:
        return self.set_status(session_id, STATUS_COMPLETED)

    def mark_pdf_generated(self, session_id: str) -> bool:
        return self.set_status(session_id, STATUS_PDF_GENERATED)

    def recent_messages(self, session_id: str, limit: int) -> List[Dict[str, Any]]:
        """Return copies of the last ``limit`` messages, oldest first."""
        if limit <= 0:
            return []
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return []
            return copy.deepcopy(session["messages"][-limit:])

    def conversation_summary(self, session_id: str) -> str:
        session = self.get_session(session_id)
        if session is None:
            return ""

        messages = session["messages"]
        summary = f"Conversation with {len(messages)} messages."
        if messages:
            preview = messages[-1]["content"][:SUMMARY_PREVIEW_LENGTH]
            summary += f" Last activity: {preview}..."
        return summary

    def session_stats(self, session_id: str) -> Optional[Dict[str, Any]]:
        session = self.get_session(session_id)
        if session is None:
            return None

        messages = session["messages"]
        user_count = sum(1 for message in messages if message["role"] == "user")
        duration = 0
        if messages:
            duration = messages[-1]["timestamp"] - messages[0]["timestamp"]

        return {
            "messageCount": len(messages),
            "userMessages": user_count,
            "assistantMessages": len(messages) - user_count,
            "durationMs": duration,
            "status": session["status"],
            "createdAt": session["createdAt"],
            "lastUpdated": session["lastUpdated"],
        }

    def delete_session(self, session_id: str) -> bool:
        with self._lock:
            removed = self._sessions.pop(session_id, None)
        if removed is not None:
            logger.info("Deleted conversation session %s", session_id)
        return removed is not None

    def prune_expired(self, now: Optional[int] = None) -> int:
        """Evict sessions idle for longer than the TTL and return how many were removed."""
        current = now if now is not None else self._clock()
        cutoff = current - self.ttl_seconds * 1000
        removed = 0

        with self._lock:
            for session_id, session in list(self._sessions.items()):
                if session["lastUpdated"] <= cutoff:
                    self._sessions.pop(session_id, None)
                    removed += 1
        return removed

    def count(self) -> int:
        with self._lock:
            return len(self._sessions)
