"""Template-driven reply composition."""

from __future__ import annotations

import random
from typing import Any, Dict, List, Optional

from cvletter.services.extraction_service import PLACEHOLDER_POSITION
from cvletter.services.language_service import template_language
from cvletter.utils.templates import TEMPLATES

PLACEHOLDER_COMPANY = "Company"
MAX_ACK_SKILLS = 5
MAX_FOLLOW_UPS = 4


def get_bundle(language: str) -> Dict[str, Any]:
    return TEMPLATES[template_language(language)]


def closing_questions(language: str) -> List[str]:
    """Return the candidate "what's next" questions for a language."""
    return list(get_bundle(language)["closing_questions"])


def pick_closing_question(language: str, rng: random.Random) -> str:
    return rng.choice(closing_questions(language))


def follow_up_suggestions(topic: str, language: str, missing_questions: Optional[List[str]] = None) -> List[str]:
    """Combine questions about missing data with the topic's canned follow-ups."""
    bundle = get_bundle(language)
    candidates = list(missing_questions or [])
    candidates.extend(bundle["follow_ups"].get(topic) or bundle["follow_ups"]["general_inquiry"])

    suggestions: List[str] = []
    for candidate in candidates:
        if candidate not in suggestions:
            suggestions.append(candidate)
        if len(suggestions) >= MAX_FOLLOW_UPS:
            break
    return suggestions


def profile_snapshot(extracted_data: Dict[str, Any]) -> Dict[str, str]:
    """Flatten the fields the composer mentions back to the user."""
    cv = extracted_data.get("cv", {})
    letter = extracted_data.get("letter", {})
    preferences = extracted_data.get("preferences", {})
    personal = cv.get("personal", {})
    experience = cv.get("experience") or []

    snapshot: Dict[str, str] = {}

    name = " ".join(part for part in (personal.get("firstName"), personal.get("lastName")) if part)
    name = name or letter.get("senderInfo", {}).get("name", "")
    if name:
        snapshot["name"] = name
    if personal.get("email"):
        snapshot["email"] = personal["email"]
    if personal.get("phone"):
        snapshot["phone"] = personal["phone"]

    company = experience[0].get("company") if experience else None
    if company:
        snapshot["company"] = company

    position = preferences.get("position")
    if not position and experience and experience[0].get("position") != PLACEHOLDER_POSITION:
        position = experience[0].get("position")
    if position:
        snapshot["position"] = position

    skills = [skill.get("name") for skill in cv.get("skills") or [] if skill.get("name")]
    if skills:
        snapshot["skills"] = ", ".join(skills[:MAX_ACK_SKILLS])

    target = letter.get("recipientInfo", {}).get("company")
    if target:
        snapshot["targetCompany"] = target
    return snapshot


def _acknowledgement(bundle: Dict[str, Any], snapshot: Dict[str, str]) -> Optional[str]:
    fields = bundle["profile_fields"]
    details = [fields[key].format(value=snapshot[key]) for key in fields if snapshot.get(key)]
    if not details:
        return None
    return bundle["profile_ack"].format(details="; ".join(details))


def _body(bundle: Dict[str, Any], context: Dict[str, Any], snapshot: Dict[str, str]) -> List[str]:
    request_type = context.get("requestType")
    action = context.get("action")

    if request_type == "cv":
        guidance = bundle["cv_guidance"].get(context.get("complexity"), bundle["cv_guidance"]["mid"])
        detail = bundle["cv_checklist"] if action in ("improve", "review") else bundle["cv_framework"]
        return [bundle["cv_help"], guidance, detail]

    if request_type == "letter":
        detail = bundle["letter_tips"] if action in ("improve", "review") else bundle["letter_guide"]
        target = bundle["letter_target"].format(
            company=snapshot.get("targetCompany") or snapshot.get("company") or PLACEHOLDER_COMPANY,
            position=snapshot.get("position") or PLACEHOLDER_POSITION,
        )
        return [bundle["letter_help"], detail, target]

    if request_type == "interview":
        return [bundle["interview_help"], bundle["interview_guide"]]

    return [bundle["general_help"], bundle["menu"]]


def _readiness_offer(bundle: Dict[str, Any], readiness: Dict[str, Any]) -> Optional[str]:
    if readiness.get("cvReady") and readiness.get("letterReady"):
        return bundle["ready_both"]
    if readiness.get("cvReady"):
        return bundle["ready_cv"]
    if readiness.get("letterReady"):
        return bundle["ready_letter"]
    return None


def compose_reply(
    context: Dict[str, Any],
    extracted_data: Dict[str, Any],
    language: str,
    rng: random.Random,
    web_insights: Optional[List[str]] = None,
) -> str:
    """Assemble the reply for one turn from the language's template bundle."""
    bundle = get_bundle(language)
    snapshot = profile_snapshot(extracted_data or {})

    first_name = snapshot.get("name", "").split(" ")[0]
    sections: List[str] = []
    sections.append(bundle["greeting_named"].format(name=first_name) if first_name else bundle["greeting"])

    if not context.get("hasContent"):
        sections.append(bundle["menu"])
        sections.append(pick_closing_question(language, rng))
        return "\n\n".join(sections)

    sections.extend(_body(bundle, context, snapshot))

    acknowledgement = _acknowledgement(bundle, snapshot)
    if acknowledgement:
        sections.append(acknowledgement)

    industry = context.get("industry")
    if industry and industry in bundle["industry_insights"]:
        sections.append(bundle["industry_insights"][industry])

    offer = _readiness_offer(bundle, context.get("readiness") or {})
    if offer:
        sections.append(offer)

    if web_insights:
        lines = [bundle["web_heading"]] + [f"- {insight}" for insight in web_insights]
        sections.append("\n".join(lines))

    sections.append(pick_closing_question(language, rng))
    return "\n\n".join(sections)


def fallback_reply(language: str) -> str:
    bundle = get_bundle(language)
    return "\n\n".join([bundle["fallback"], bundle["menu"]])


def offer_message(readiness: Dict[str, Any], language: str = "en") -> Optional[str]:
    return _readiness_offer(get_bundle(language), readiness)
