"""/api/ai endpoints for the conversational CV and cover letter assistant."""

from __future__ import annotations

from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request

from cvletter.services import extraction_service, language_service, pdf_service
from cvletter.services.assistant_service import ConversationAssistant
from cvletter.services.session_store import SessionStore
from cvletter.storage import DocumentStore
from cvletter.utils.text import clean_extracted_text, extract_pdf_text, make_text_excerpt

bp = Blueprint("assistant", __name__, url_prefix="/api/ai")

PDF_UPLOAD_LIMIT_BYTES = 10 * 1024 * 1024
UNREADABLE_PDF_TEXT = (
    "The PDF was received but no text could be extracted. "
    "It may be a scanned image. Please paste the content as text instead."
)


def _store() -> SessionStore:
    return current_app.extensions["session_store"]


def _documents() -> DocumentStore:
    return current_app.extensions["document_store"]


def _assistant() -> ConversationAssistant:
    return current_app.extensions["assistant"]


def _extracted_flags(extracted: Dict[str, Any]) -> Dict[str, bool]:
    cv = extracted.get("cv", {})
    letter = extracted.get("letter", {})
    return {
        "hasPersonalInfo": bool(cv.get("personal")),
        "hasExperience": bool(cv.get("experience")),
        "hasSkills": bool(cv.get("skills")),
        "hasSenderInfo": bool(letter.get("senderInfo")),
        "hasRecipientInfo": bool(letter.get("recipientInfo")),
    }


@bp.post("/chat")
def chat():
    """Run one conversational turn and return the reply envelope."""
    payload = request.get_json(silent=True)
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        return jsonify(error="Request body must be a JSON object."), 400

    message = payload.get("message", "")
    session_id = payload.get("sessionId")
    owner_id = payload.get("ownerId") or "anonymous"

    if message is None:
        message = ""
    if not isinstance(message, str):
        return jsonify(error="Field 'message' must be a string."), 400
    if len(message) > current_app.config["MAX_MESSAGE_LENGTH"]:
        return jsonify(error="Message is too long."), 400
    if session_id is not None and not isinstance(session_id, str):
        return jsonify(error="Field 'sessionId' must be a string."), 400

    result = _assistant().respond(message, session_id=session_id or None, owner_id=str(owner_id))
    return jsonify(result), 200


@bp.get("/sessions/<session_id>")
def get_session(session_id: str):
    store = _store()
    session = store.get_session(session_id)
    if session is None:
        return jsonify(error="Session not found."), 404

    return (
        jsonify(
            session=session,
            summary=store.conversation_summary(session_id),
            stats=store.session_stats(session_id),
        ),
        200,
    )


@bp.delete("/sessions/<session_id>")
def delete_session(session_id: str):
    if not _store().delete_session(session_id):
        return jsonify(error="Session not found."), 404
    return jsonify(success=True), 200


@bp.post("/generate-pdf")
def generate_pdf():
    """Render a CV or cover letter from the session's extracted data."""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return jsonify(error="Request body must be a JSON object."), 400

    session_id = payload.get("sessionId")
    doc_type = payload.get("type")

    if not session_id or not doc_type:
        return jsonify(error="Fields 'sessionId' and 'type' are required."), 400
    if not isinstance(session_id, str):
        return jsonify(error="Field 'sessionId' must be a string."), 400
    if doc_type not in pdf_service.DOCUMENT_TYPES:
        return jsonify(error="Field 'type' must be 'cv' or 'letter'."), 400

    store = _store()
    session = store.get_session(session_id)
    if session is None:
        return jsonify(error="Session not found."), 404

    result = pdf_service.generate_document(session, doc_type, _documents())
    if not result["success"]:
        return jsonify(error=result["error"]), 500

    store.mark_pdf_generated(session_id)
    label = "CV" if doc_type == "cv" else "Cover letter"
    return (
        jsonify(
            success=True,
            downloadUrl=result["downloadUrl"],
            documentId=result["documentId"],
            type=doc_type,
            message=f"{label} PDF generated successfully.",
        ),
        200,
    )


@bp.get("/generate-pdf")
def pdf_status():
    """Report whether the session holds enough data to offer documents."""
    session_id = request.args.get("sessionId")
    if not session_id:
        return jsonify(error="Query parameter 'sessionId' is required."), 400

    store = _store()
    session = store.get_session(session_id)
    if session is None:
        return jsonify(error="Session not found."), 404

    last_user = next(
        (message["content"] for message in reversed(session["messages"]) if message["role"] == "user"),
        "",
    )
    language = language_service.detect_language(last_user)["language"]
    offer = pdf_service.should_offer_pdf_generation(session, language)

    return (
        jsonify(
            canGenerateCV=pdf_service.can_generate_pdf(session, "cv"),
            canGenerateLetter=pdf_service.can_generate_pdf(session, "letter"),
            offer={"cv": offer["cv"], "letter": offer["letter"]},
            message=offer["message"],
            status=session["status"],
            conversationSummary=store.conversation_summary(session_id),
            extractedData=_extracted_flags(session["extractedData"]),
        ),
        200,
    )


@bp.post("/process-pdf")
def process_pdf():
    """Extract text from an uploaded PDF, optionally feeding a session's profile."""
    upload = request.files.get("pdf")
    if upload is None or upload.filename == "":
        return jsonify(error="No PDF file uploaded."), 400

    filename = upload.filename or ""
    if upload.mimetype != "application/pdf" and not filename.lower().endswith(".pdf"):
        return jsonify(error="Only PDF files are supported."), 400

    raw_bytes = upload.read()
    if len(raw_bytes) > PDF_UPLOAD_LIMIT_BYTES:
        return jsonify(error="File too large. Maximum size is 10MB."), 400

    text = clean_extracted_text(extract_pdf_text(raw_bytes))
    response: Dict[str, Any] = {
        "success": True,
        "content": text or UNREADABLE_PDF_TEXT,
        "hasText": bool(text),
        "excerpt": make_text_excerpt(text, limit=300),
        "fileName": filename,
        "fileSize": len(raw_bytes),
    }

    session_id = request.form.get("sessionId")
    if session_id and text:
        fields = extraction_service.extract_profile_fields(text)
        if fields and _store().update_extracted_data(session_id, fields):
            response["extractedFields"] = fields

    current_app.logger.info("Processed PDF upload %s (%d bytes)", filename, len(raw_bytes))
    return jsonify(response), 200


@bp.get("/status")
def status():
    assistant = _assistant()
    return (
        jsonify(
            status="ok",
            activeSessions=_store().count(),
            generatedDocuments=_documents().count(),
            webSearchEnabled=assistant.search_enabled,
            contextWindow=assistant.context_window,
            supportedLanguages=language_service.SUPPORTED_LANGUAGES,
            replyLanguages=list(language_service.TEMPLATE_LANGUAGES),
        ),
        200,
    )
