"""Text extraction and normalization utilities."""

from __future__ import annotations

import re
from io import BytesIO
from typing import List

from flask import current_app
from pypdf import PdfReader

MAX_STORED_TEXT_LENGTH = 20_000

_PAGE_NUMBER_LINE = re.compile(r"^\s*(?:page\s+)?\d+(?:\s*(?:/|of)\s*\d+)?\s*$", re.IGNORECASE)


def make_text_excerpt(text: str, limit: int = 1200) -> str:
    """Normalize raw text and clamp it to a preview-friendly length."""
    if not text:
        return ""
    cleaned = " ".join(text.split())
    return cleaned[:limit]


def extract_pdf_text(raw_bytes: bytes) -> str:
    """Extract text from a PDF file while guarding against parser errors."""
    try:
        reader = PdfReader(BytesIO(raw_bytes))
        pages = list(reader.pages)
    except Exception:
        current_app.logger.warning("Unable to initialize PdfReader for uploaded file", exc_info=True)
        return ""

    collected: List[str] = []
    for page in pages:
        try:
            page_text = page.extract_text() or ""
        except Exception:
            current_app.logger.warning("Failed to extract text from a PDF page", exc_info=True)
            page_text = ""

        if page_text:
            collected.append(page_text)

    combined = "\n".join(collected).strip()
    if combined:
        return combined[:MAX_STORED_TEXT_LENGTH]
    return ""


def clean_extracted_text(text: str) -> str:
    """Collapse whitespace and drop page-number lines from extracted PDF text."""
    if not text:
        return ""

    lines: List[str] = []
    for line in text.splitlines():
        stripped = " ".join(line.split())
        if not stripped or _PAGE_NUMBER_LINE.match(stripped):
            continue
        lines.append(stripped)
    return "\n".join(lines)
