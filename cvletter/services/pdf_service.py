"""Build CV and cover letter documents from conversation data and render them with FPDF."""

from __future__ import annotations

import copy
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

import pyphen
from fpdf import FPDF
from fpdf.enums import XPos, YPos

from cvletter.services import composer_service
from cvletter.services.extraction_service import PLACEHOLDER_POSITION
from cvletter.storage import DocumentStore
from cvletter.utils.session import generate_token

logger = logging.getLogger(__name__)

DOCUMENT_TYPES = ("cv", "letter")
MIN_MESSAGES_FOR_OFFER = 4

CORE_FONT_ENCODING = "cp1252"

DEFAULT_PERSONAL = {
    "firstName": "John",
    "lastName": "Doe",
    "email": "john.doe@email.com",
    "phone": "+44 20 1234 5678",
    "location": "London, UK",
}

DEFAULT_SKILLS = ["Communication", "Teamwork", "Problem Solving"]

DEFAULT_RECIPIENT = {
    "name": "Hiring Manager",
    "title": "",
    "company": "Company Name",
    "address": "",
}

_HYPHENATOR = pyphen.Pyphen(lang="en_US")


def _pdf_bytes(pdf: FPDF) -> bytes:
    return bytes(pdf.output())


def _latin1_safe(text: str) -> str:
    """Best-effort conversion ensuring FPDF receives core-font friendly content."""
    if not text:
        return ""
    return text.encode(CORE_FONT_ENCODING, "replace").decode(CORE_FONT_ENCODING)


def _wrap_long_words_for_pdf(text: str, pdf: FPDF) -> str:
    """Insert breaks into tokens wider than the printable area.

    FPDF refuses to render a single word wider than the line, which happens
    with pasted URLs or long email addresses. Words are hyphenated when
    possible and otherwise split into chunks that fit.
    """
    if not text:
        return ""

    max_w = pdf.w - pdf.l_margin - pdf.r_margin
    out_words: List[str] = []

    for word in text.split(" "):
        if pdf.get_string_width(word) <= max_w:
            out_words.append(word)
            continue

        hyphenated = _HYPHENATOR.inserted(word)
        if hyphenated != word and all(pdf.get_string_width(piece) <= max_w for piece in hyphenated.split("-")):
            out_words.append(hyphenated.replace("-", "- "))
            continue

        chunk = ""
        for ch in word:
            if pdf.get_string_width(chunk + ch) <= max_w:
                chunk += ch
            else:
                if chunk:
                    out_words.append(chunk)
                chunk = ch
        if chunk:
            out_words.append(chunk)

    return " ".join(out_words)


def _new_pdf() -> FPDF:
    pdf = FPDF()
    pdf.core_fonts_encoding = CORE_FONT_ENCODING
    pdf.set_left_margin(15)
    pdf.set_right_margin(15)
    pdf.set_auto_page_break(auto=True, margin=20)
    pdf.add_page()
    return pdf


def _write_line(pdf: FPDF, text: str, height: float = 6) -> None:
    safe = _wrap_long_words_for_pdf(_latin1_safe(text), pdf)
    pdf.multi_cell(0, height, safe, align="L", new_x=XPos.LMARGIN, new_y=YPos.NEXT)


def _section_heading(pdf: FPDF, title: str) -> None:
    pdf.ln(2)
    pdf.set_font("Helvetica", "B", 13)
    pdf.set_text_color(34, 197, 94)
    pdf.cell(0, 8, _latin1_safe(title), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
    pdf.set_font("Helvetica", size=11)
    pdf.set_text_color(15, 23, 42)


# ---------------------------------------------------------------------------
# Document assembly
# ---------------------------------------------------------------------------


def _position(extracted_data: Dict[str, Any]) -> Optional[str]:
    position = extracted_data.get("preferences", {}).get("position")
    if position:
        return position
    experience = extracted_data.get("cv", {}).get("experience") or []
    if experience and experience[0].get("position") not in (None, "", PLACEHOLDER_POSITION):
        return experience[0]["position"]
    return None


def build_complete_cv(extracted_data: Dict[str, Any]) -> Dict[str, Any]:
    """Return a full CV record, filling anything the conversation did not cover."""
    cv = copy.deepcopy(extracted_data.get("cv", {}))
    preferences = extracted_data.get("preferences", {})

    personal = dict(DEFAULT_PERSONAL)
    personal.update({key: value for key, value in cv.get("personal", {}).items() if value})

    skills = [skill.get("name") for skill in cv.get("skills") or [] if skill.get("name")]
    if not skills:
        skills = list(DEFAULT_SKILLS)

    position = _position(extracted_data) or "Professional"
    industry = preferences.get("industry")
    summary = f"{position[:1].upper()}{position[1:]} with a track record of delivering results"
    summary += f" in {industry}." if industry else "."
    summary += f" Skilled in {', '.join(skills[:3])}."

    experience = cv.get("experience") or [
        {
            "company": "Company Name",
            "position": position,
            "location": personal["location"],
            "startDate": "",
            "endDate": "",
            "current": True,
            "description": ["Key responsibility or achievement"],
        }
    ]

    return {
        "personal": personal,
        "summary": cv.get("summary") or summary,
        "experience": experience,
        "skills": skills,
        "education": cv.get("education") or [],
    }


def build_complete_letter(extracted_data: Dict[str, Any]) -> Dict[str, Any]:
    """Return a full cover letter record with generated subject and body."""
    letter = extracted_data.get("letter", {})
    personal = extracted_data.get("cv", {}).get("personal", {})
    preferences = extracted_data.get("preferences", {})

    sender_name = letter.get("senderInfo", {}).get("name") or " ".join(
        part for part in (personal.get("firstName"), personal.get("lastName")) if part
    )
    sender = {
        "name": sender_name or f"{DEFAULT_PERSONAL['firstName']} {DEFAULT_PERSONAL['lastName']}",
        "email": letter.get("senderInfo", {}).get("email") or personal.get("email") or DEFAULT_PERSONAL["email"],
        "phone": letter.get("senderInfo", {}).get("phone") or personal.get("phone") or DEFAULT_PERSONAL["phone"],
        "address": letter.get("senderInfo", {}).get("address") or DEFAULT_PERSONAL["location"],
    }

    recipient = dict(DEFAULT_RECIPIENT)
    recipient.update({key: value for key, value in letter.get("recipientInfo", {}).items() if value})

    position = _position(extracted_data)
    role = f"the {position} role" if position else "the advertised position"
    company = recipient["company"]
    skills = [skill.get("name") for skill in extracted_data.get("cv", {}).get("skills") or [] if skill.get("name")]
    experience = extracted_data.get("cv", {}).get("experience") or []

    body = [
        f"I am writing to apply for {role} at {company}. "
        f"The role matches both my experience and the direction I want my career to take.",
    ]
    if experience:
        body.append(
            f"In my time at {experience[0].get('company')}, I have taken ownership of results "
            f"and learned to deliver under pressure."
        )
    if skills:
        body.append(f"I would bring strengths in {', '.join(skills[:3])} to your team.")
    if preferences.get("industry"):
        body.append(f"I am especially motivated to keep growing in {preferences['industry']}.")
    body.append("I would welcome the opportunity to discuss how I can contribute. Thank you for your time.")

    greeting = "Dear Hiring Manager," if recipient["name"] == "Hiring Manager" else f"Dear {recipient['name']},"
    closing = "Yours faithfully," if recipient["name"] == "Hiring Manager" else "Yours sincerely,"

    return {
        "senderInfo": sender,
        "recipientInfo": recipient,
        "date": datetime.now().strftime("%B %d, %Y"),
        "subject": letter.get("subject") or f"Application for {position or 'the advertised position'}",
        "greeting": greeting,
        "body": letter.get("body") or body,
        "closing": closing,
        "signature": sender["name"],
    }


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def render_cv_pdf(cv: Dict[str, Any]) -> bytes:
    """Render a styled CV PDF from a complete CV record."""
    pdf = _new_pdf()
    personal = cv["personal"]

    full_name = f"{personal.get('firstName', '')} {personal.get('lastName', '')}".strip()
    pdf.set_font("Helvetica", "B", 20)
    pdf.set_text_color(59, 130, 246)
    pdf.cell(0, 12, _latin1_safe(full_name), new_x=XPos.LMARGIN, new_y=YPos.NEXT)

    contact = " | ".join(
        value for value in (personal.get("email"), personal.get("phone"), personal.get("location")) if value
    )
    pdf.set_font("Helvetica", size=11)
    pdf.set_text_color(100, 116, 139)
    pdf.cell(0, 6, _latin1_safe(contact), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
    pdf.set_draw_color(59, 130, 246)
    pdf.set_line_width(0.6)
    current_y = pdf.get_y() + 2
    pdf.line(15, current_y, 195, current_y)
    pdf.ln(6)

    _section_heading(pdf, "Professional Summary")
    _write_line(pdf, cv["summary"])

    _section_heading(pdf, "Experience")
    for entry in cv["experience"]:
        pdf.set_font("Helvetica", "B", 11)
        _write_line(pdf, f"{entry.get('position', '')} - {entry.get('company', '')}")
        pdf.set_font("Helvetica", size=11)
        dates = " - ".join(part for part in (entry.get("startDate"), entry.get("endDate")) if part)
        meta = ", ".join(part for part in (entry.get("location"), dates) if part)
        if meta:
            pdf.set_text_color(100, 116, 139)
            _write_line(pdf, meta)
            pdf.set_text_color(15, 23, 42)
        for item in entry.get("description") or []:
            _write_line(pdf, f"- {item}")
        pdf.ln(2)

    _section_heading(pdf, "Skills")
    _write_line(pdf, ", ".join(cv["skills"]))

    if cv.get("education"):
        _section_heading(pdf, "Education")
        for entry in cv["education"]:
            if isinstance(entry, dict):
                line = ", ".join(
                    str(entry[key]) for key in ("degree", "field", "institution", "graduationDate") if entry.get(key)
                )
            else:
                line = str(entry)
            _write_line(pdf, line)

    return _pdf_bytes(pdf)


def render_letter_pdf(letter: Dict[str, Any]) -> bytes:
    """Render a styled cover letter PDF from a complete letter record."""
    pdf = _new_pdf()
    sender = letter["senderInfo"]
    recipient = letter["recipientInfo"]

    pdf.set_font("Helvetica", "B", 20)
    pdf.set_text_color(34, 197, 94)
    pdf.cell(0, 12, _latin1_safe(sender["name"]), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
    pdf.set_font("Helvetica", size=11)
    pdf.set_text_color(100, 116, 139)
    contact = " | ".join(value for value in (sender.get("email"), sender.get("phone"), sender.get("address")) if value)
    pdf.cell(0, 6, _latin1_safe(contact), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
    pdf.set_draw_color(34, 197, 94)
    pdf.set_line_width(0.6)
    current_y = pdf.get_y() + 2
    pdf.line(15, current_y, 195, current_y)
    pdf.ln(8)

    pdf.set_font("Helvetica", "I", 11)
    _write_line(pdf, letter["date"])
    pdf.ln(3)

    pdf.set_font("Helvetica", size=12)
    pdf.set_text_color(15, 23, 42)
    for line in (recipient.get("name"), recipient.get("title"), recipient.get("company"), recipient.get("address")):
        if line:
            _write_line(pdf, line)
    pdf.ln(4)

    pdf.set_font("Helvetica", "B", 12)
    _write_line(pdf, letter["subject"])
    pdf.set_font("Helvetica", size=12)
    pdf.ln(3)

    _write_line(pdf, letter["greeting"])
    pdf.ln(2)
    for paragraph in letter["body"]:
        _write_line(pdf, paragraph)
        pdf.ln(3)

    _write_line(pdf, letter["closing"])
    pdf.ln(6)
    _write_line(pdf, letter["signature"])

    return _pdf_bytes(pdf)


# ---------------------------------------------------------------------------
# Generation gate and entrypoint
# ---------------------------------------------------------------------------


def can_generate_pdf(session: Dict[str, Any], doc_type: str) -> bool:
    """Field-based gate: a CV needs a first name and email, a letter a sender name and email."""
    extracted = session.get("extractedData", {})
    if doc_type == "cv":
        personal = extracted.get("cv", {}).get("personal", {})
        return bool(personal.get("firstName") and personal.get("email"))
    if doc_type == "letter":
        sender = extracted.get("letter", {}).get("senderInfo", {})
        return bool(sender.get("name") and sender.get("email"))
    return False


def should_offer_pdf_generation(session: Dict[str, Any], language: str = "en") -> Dict[str, Any]:
    """Return which documents can be offered and the message announcing them."""
    enough_messages = len(session.get("messages", [])) >= MIN_MESSAGES_FOR_OFFER
    flags = {
        "cvReady": enough_messages and can_generate_pdf(session, "cv"),
        "letterReady": enough_messages and can_generate_pdf(session, "letter"),
    }
    return {
        "cv": flags["cvReady"],
        "letter": flags["letterReady"],
        "message": composer_service.offer_message(flags, language),
    }


def generate_document(session: Dict[str, Any], doc_type: str, documents: DocumentStore) -> Dict[str, Any]:
    """Render the requested document for a session and keep it for download."""
    if doc_type not in DOCUMENT_TYPES:
        raise ValueError(f"Unsupported document type: {doc_type!r}")

    extracted = session.get("extractedData", {})
    try:
        if doc_type == "cv":
            record = build_complete_cv(extracted)
            content = render_cv_pdf(record)
        else:
            record = build_complete_letter(extracted)
            content = render_letter_pdf(record)
    except Exception:
        logger.exception("Failed to render %s PDF for session %s", doc_type, session.get("sessionId"))
        return {"success": False, "error": f"Unable to generate the {doc_type} PDF."}

    document_id = generate_token("doc")
    filename = f"{doc_type}-{session.get('sessionId', document_id)}.pdf"
    documents.put(
        {
            "id": document_id,
            "sessionId": session.get("sessionId"),
            "type": doc_type,
            "filename": filename,
            "content": content,
        }
    )
    logger.info("Generated %s PDF %s for session %s", doc_type, document_id, session.get("sessionId"))

    return {
        "success": True,
        "documentId": document_id,
        "downloadUrl": f"/api/documents/{document_id}",
        "type": doc_type,
        "filename": filename,
    }
