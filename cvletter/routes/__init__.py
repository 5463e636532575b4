"""Blueprint registration helper."""

from __future__ import annotations

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from .assistant import bp as assistant_bp
from .documents import bp as documents_bp
from .drafts import bp as drafts_bp


def register_routes(app: Flask) -> None:
    """Register all application blueprints on the provided Flask app."""
    app.register_blueprint(assistant_bp)
    app.register_blueprint(documents_bp)
    app.register_blueprint(drafts_bp)

    @app.get("/")
    def index():
        return jsonify(message="Hello from the CV & Letter assistant API"), 200


def register_error_handlers(app: Flask) -> None:
    """Convert every unhandled error into a JSON response."""

    @app.errorhandler(HTTPException)
    def _http_error(error: HTTPException):
        return jsonify(error=error.description), error.code

    @app.errorhandler(Exception)
    def _unexpected_error(error: Exception):
        app.logger.exception("Unhandled error while processing %s", error)
        return jsonify(error="An unexpected error occurred. Please try again."), 500
