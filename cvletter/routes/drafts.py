"""/api/drafts endpoints for durable CV and cover letter drafts."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from cvletter import database
from cvletter.services import draft_service

bp = Blueprint("drafts", __name__, url_prefix="/api/drafts")


def _mongodb_unavailable():
    if database.mongodb_enabled():
        return None
    return jsonify(error="Draft storage requires MongoDB (set ENABLE_MONGODB=true)."), 503


def _owner_id(payload=None) -> str:
    owner = request.headers.get("X-Owner-Id") or request.args.get("ownerId")
    if not owner and payload:
        owner = payload.get("ownerId")
    return owner.strip() if isinstance(owner, str) else ""


@bp.get("")
def list_drafts():
    error_response = _mongodb_unavailable()
    if error_response is not None:
        return error_response

    owner_id = _owner_id()
    if not owner_id:
        return jsonify(error="An owner id is required."), 400

    draft_type = request.args.get("type")
    return jsonify(drafts=draft_service.list_drafts(owner_id, draft_type)), 200


@bp.post("")
def save_draft():
    error_response = _mongodb_unavailable()
    if error_response is not None:
        return error_response

    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return jsonify(error="Request body must be a JSON object."), 400

    owner_id = _owner_id(payload)
    if not owner_id:
        return jsonify(error="An owner id is required."), 400

    data = payload.get("data")
    if not isinstance(data, dict):
        return jsonify(error="Field 'data' must be an object."), 400

    try:
        draft_id = draft_service.save_draft(
            owner_id,
            payload.get("type", ""),
            data,
            draft_id=payload.get("id"),
            title=payload.get("title"),
        )
    except ValueError as exc:
        return jsonify(error=str(exc)), 400

    return jsonify(draft=draft_service.get_draft(owner_id, draft_id)), 201


@bp.post("/from-session")
def save_draft_from_session():
    """Copy a conversation's extracted data into a durable draft."""
    error_response = _mongodb_unavailable()
    if error_response is not None:
        return error_response

    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return jsonify(error="Request body must be a JSON object."), 400

    owner_id = _owner_id(payload)
    session_id = payload.get("sessionId")
    draft_type = payload.get("type")
    if not owner_id or not isinstance(session_id, str) or not session_id:
        return jsonify(error="Fields 'ownerId' and 'sessionId' are required."), 400
    if draft_type not in draft_service.DRAFT_TYPES:
        return jsonify(error="Field 'type' must be 'cv' or 'letter'."), 400

    session = current_app.extensions["session_store"].get_session(session_id)
    if session is None:
        return jsonify(error="Session not found."), 404

    data = session["extractedData"].get(draft_type, {})
    draft_id = draft_service.save_draft(
        owner_id,
        draft_type,
        data,
        title=payload.get("title"),
        source_session_id=session_id,
    )
    current_app.logger.info("Saved %s draft %s from session %s", draft_type, draft_id, session_id)
    return jsonify(draft=draft_service.get_draft(owner_id, draft_id)), 201


@bp.get("/<draft_id>")
def get_draft(draft_id: str):
    error_response = _mongodb_unavailable()
    if error_response is not None:
        return error_response

    owner_id = _owner_id()
    if not owner_id:
        return jsonify(error="An owner id is required."), 400

    draft = draft_service.get_draft(owner_id, draft_id)
    if draft is None:
        return jsonify(error="Draft not found."), 404
    return jsonify(draft=draft), 200


@bp.delete("/<draft_id>")
def delete_draft(draft_id: str):
    error_response = _mongodb_unavailable()
    if error_response is not None:
        return error_response

    owner_id = _owner_id()
    if not owner_id:
        return jsonify(error="An owner id is required."), 400

    if not draft_service.delete_draft(owner_id, draft_id):
        return jsonify(error="Draft not found."), 404
    return jsonify(success=True), 200
