"""Identifier, clock and cleanup helpers for conversation sessions."""

from __future__ import annotations

import secrets
import string
import time

from flask import Flask

# Conversation sessions and generated documents expire after a day of inactivity.
SESSION_TTL_SECONDS = 24 * 60 * 60

BASE36_ALPHABET = string.digits + string.ascii_lowercase


def now_millis() -> int:
    """Return the current UNIX timestamp in milliseconds."""
    return int(time.time() * 1000)


def generate_token(prefix: str = "doc") -> str:
    """Return a random token with the given prefix suitable for in-memory keys."""
    return f"{prefix}_{secrets.token_urlsafe(12)}"


def generate_session_id() -> str:
    """Return a conversation id made of the current time and a random base36 suffix."""
    suffix = "".join(secrets.choice(BASE36_ALPHABET) for _ in range(9))
    return f"session_{now_millis()}_{suffix}"


def register_session_cleanup(app: Flask) -> None:
    """Attach a before-request handler that evicts idle sessions and stale documents."""

    @app.before_request  # pragma: no cover - trivial wiring
    def _cleanup_state() -> None:
        removed = app.extensions["session_store"].prune_expired()
        removed_docs = app.extensions["document_store"].prune_expired()
        if removed or removed_docs:
            app.logger.info(
                "Evicted %d idle sessions and %d generated documents", removed, removed_docs
            )
