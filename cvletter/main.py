"""Flask application setup and blueprint wiring."""

from __future__ import annotations

import os
import random
from typing import Any, Dict, Optional

from flask import Flask
from flask_cors import CORS

from cvletter import database
from cvletter.routes import register_error_handlers, register_routes
from cvletter.services import draft_service
from cvletter.services.assistant_service import (
    DEFAULT_CONTEXT_WINDOW,
    DEFAULT_MAX_MESSAGE_LENGTH,
    ConversationAssistant,
)
from cvletter.services.session_store import SessionStore
from cvletter.storage import DocumentStore
from cvletter.utils.config import env_flag, env_int
from cvletter.utils.session import SESSION_TTL_SECONDS, register_session_cleanup

UPLOAD_LIMIT_BYTES = 12 * 1024 * 1024  # 10 MB PDFs plus multipart overhead


def create_app(overrides: Optional[Dict[str, Any]] = None) -> Flask:
    """Configure and return the Flask application instance."""
    app = Flask(__name__)
    CORS(app, resources={r"/api/*": {"origins": "*"}})

    app.config["MAX_CONTENT_LENGTH"] = UPLOAD_LIMIT_BYTES
    app.config["SESSION_TTL_SECONDS"] = env_int("SESSION_TTL_SECONDS", SESSION_TTL_SECONDS)
    app.config["MAX_CONTEXT_MESSAGES"] = env_int("MAX_CONTEXT_MESSAGES", DEFAULT_CONTEXT_WINDOW)
    app.config["MAX_MESSAGE_LENGTH"] = env_int("MAX_MESSAGE_LENGTH", DEFAULT_MAX_MESSAGE_LENGTH)
    app.config["ENABLE_WEB_SEARCH"] = env_flag("ENABLE_WEB_SEARCH")
    app.config["ASSISTANT_RANDOM_SEED"] = os.getenv("ASSISTANT_RANDOM_SEED")
    if overrides:
        app.config.update(overrides)

    seed = app.config["ASSISTANT_RANDOM_SEED"]
    rng = random.Random(seed) if seed not in (None, "") else random.Random()

    store = SessionStore(ttl_seconds=app.config["SESSION_TTL_SECONDS"])
    app.extensions["session_store"] = store
    app.extensions["document_store"] = DocumentStore(ttl_seconds=app.config["SESSION_TTL_SECONDS"])
    app.extensions["assistant"] = ConversationAssistant(
        store,
        rng=rng,
        search_enabled=app.config["ENABLE_WEB_SEARCH"],
        context_window=app.config["MAX_CONTEXT_MESSAGES"],
    )

    register_session_cleanup(app)
    register_error_handlers(app)
    register_routes(app)

    # Initialize MongoDB indexes if enabled
    if database.mongodb_enabled():
        try:
            with app.app_context():
                draft_service.create_indexes()
                app.logger.info("MongoDB indexes created successfully")
        except Exception as e:
            app.logger.warning(f"Failed to create MongoDB indexes: {e}")

    return app


app = create_app()
