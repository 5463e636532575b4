"""/api/documents endpoint serving generated PDFs."""

from __future__ import annotations

from io import BytesIO

from flask import Blueprint, current_app, jsonify, send_file

bp = Blueprint("documents", __name__, url_prefix="/api/documents")


@bp.get("/<document_id>")
def download_document(document_id: str):
    """Return a previously generated PDF as a download."""
    record = current_app.extensions["document_store"].get(document_id)
    if not record:
        return jsonify(error="Document not found."), 404

    buffer = BytesIO(record["content"])
    buffer.seek(0)
    return send_file(
        buffer,
        mimetype="application/pdf",
        as_attachment=True,
        download_name=record["filename"],
    )
