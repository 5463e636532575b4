"""Service layer modules for the CV & Letter assistant API."""

from . import (
    analysis_service,
    assistant_service,
    composer_service,
    draft_service,
    extraction_service,
    language_service,
    pdf_service,
    search_service,
    session_store,
)

__all__ = [
    "analysis_service",
    "assistant_service",
    "composer_service",
    "draft_service",
    "extraction_service",
    "language_service",
    "pdf_service",
    "search_service",
    "session_store",
]
