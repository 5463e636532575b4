"""Regex-driven extraction of profile fields from free-text messages."""

from __future__ import annotations

import copy
import re
from typing import AbstractSet, Any, Dict, List, Optional

from cvletter.utils.rules import COMPLEXITY_PATTERNS, EMAIL_PATTERN

PLACEHOLDER_POSITION = "Position Title"
PLACEHOLDER_LOCATION = "Location"
PLACEHOLDER_ACHIEVEMENT = "Key responsibility or achievement"

MIN_PHONE_DIGITS = 10
MAX_SKILLS = 15
MAX_SKILL_LENGTH = 40

PHONE_CANDIDATE_PATTERN = re.compile(r"\+?\d[\d\s\-()]{8,}\d")

# Trigger phrases are case-insensitive; the captured words must be capitalized.
NAME_PATTERN = re.compile(
    r"(?i:\bmy name is|\bi'm|\bi am|\bcall me|\bmeu nome é|\bme chamo|\bme llamo|\bmi nombre es)\s+"
    r"(?P<name>[A-ZÀ-Ý][\w'-]*(?:\s+[A-ZÀ-Ý][\w'-]*){0,3})"
)

COMPANY_PATTERN = re.compile(
    r"(?i:\b(?:worked|work|working|currently) (?:at|for)|\bjob at|\bposition at|\bemployed by|"
    r"\btrabalho na|\btrabalhei na|\btrabajo en|\btrabajé en)\s+"
    r"(?P<company>[A-Z0-9À-Ý][\w&.'-]*(?:\s+[A-Z0-9À-Ý&][\w&.'-]*){0,4})"
)

APPLICATION_PATTERN = re.compile(
    r"(?i:\bapply(?:ing)? (?:to|at|for a role at|for a job at)|\bapplication (?:to|for)|"
    r"\binterview(?:ing)? (?:at|with)|\bcandidatar(?:-me)? (?:à|a|na)|\baplicar (?:a|en))\s+"
    r"(?P<company>[A-Z0-9À-Ý][\w&.'-]*(?:\s+[A-Z0-9À-Ý&][\w&.'-]*){0,4})"
)

POSITION_PATTERN = re.compile(
    r"(?i:\bas an?|\bposition of|\brole of|\bposition:|\brole:|\btrabalho como|\btrabajo como|\batuo como)\s+"
    r"(?P<position>[^\W\d_][\w\s-]{1,40}?)"
    r"(?=\s+(?:at|for|with|in|and|since|na|no|em|en|con|com)\b|[,.;!?]|$)"
)

SKILLS_PATTERN = re.compile(
    r"(?i:\b(?:skills?|technologies|tech stack|programming languages?|habilidades|competências|competencias))\b"
    r"\s*(?i:include|are|is|in)?\s*[:-]?\s*(?P<skills>[^.;!?\n]+)"
)

SKILL_SPLIT_PATTERN = re.compile(r",|/|\band\b|\be\b|\by\b", re.IGNORECASE)

INDUSTRY_PATTERNS = [
    re.compile(
        r"(?i:\bindustry|\bsector|\bfield|\bsetor|\bárea)\s*(?i:is|:|of|de)\s*"
        r"(?P<industry>[^\W\d_][\w\s&-]{1,40}?)(?=\s+(?:and|with|but|e|y)\b|[,.;!?]|$)"
    ),
    re.compile(
        r"(?i:\bin the|\bin)\s+(?P<industry>[^\W\d_][\w&-]*(?:\s[^\W\d_][\w&-]*)?)\s+(?i:industry|sector)\b"
    ),
]

# Capitalized words that end a name or company capture.
CAPTURE_STOP_WORDS = {"I", "And", "My", "The", "But", "E", "Y", "From", "Since", "In", "At", "For", "As"}

# Capitalized words that follow "I am" or "I'm" without being a name.
NON_NAME_WORDS = {
    "Looking", "Seeking", "Searching", "Applying", "Working", "Trying", "Hoping", "Writing", "Interested",
    "Currently", "Just", "Not", "Very", "Really", "Also", "Still", "Here", "Ready", "Happy", "Excited",
    "Available", "Experienced", "Passionate", "Motivated", "Sorry", "Fine", "Good", "Great", "Unemployed",
    "Graduating", "Studying", "Moving", "Planning", "Thinking", "Preparing", "Struggling", "New", "An", "A",
}


def _trim_capture(value: str, stop_words: AbstractSet[str] = CAPTURE_STOP_WORDS) -> str:
    words: List[str] = []
    for word in value.split():
        if word in stop_words:
            break
        words.append(word)
    return " ".join(words).strip(" .,'-")


def extract_email(message: str) -> Optional[str]:
    match = EMAIL_PATTERN.search(message or "")
    return match.group(0) if match else None


def extract_phone(message: str) -> Optional[str]:
    """Return the first digit run that holds enough digits to pass as a phone number."""
    for match in PHONE_CANDIDATE_PATTERN.finditer(message or ""):
        candidate = match.group(0).strip()
        digits = sum(1 for ch in candidate if ch.isdigit())
        if digits >= MIN_PHONE_DIGITS:
            return candidate
    return None


def extract_name(message: str) -> Optional[Dict[str, str]]:
    for match in NAME_PATTERN.finditer(message or ""):
        full_name = _trim_capture(match.group("name"), CAPTURE_STOP_WORDS | NON_NAME_WORDS)
        if not full_name:
            continue
        parts = full_name.split()
        return {
            "firstName": parts[0],
            "lastName": " ".join(parts[1:]),
            "fullName": full_name,
        }
    return None


def extract_company(message: str) -> Optional[str]:
    match = COMPANY_PATTERN.search(message or "")
    if not match:
        return None
    return _trim_capture(match.group("company")) or None


def extract_target_company(message: str) -> Optional[str]:
    match = APPLICATION_PATTERN.search(message or "")
    if not match:
        return None
    return _trim_capture(match.group("company")) or None


def extract_position(message: str) -> Optional[str]:
    match = POSITION_PATTERN.search(message or "")
    if not match:
        return None
    position = match.group("position").strip()
    return position or None


def extract_skills(message: str) -> List[Dict[str, str]]:
    """Split a "skills: a, b and c" phrase into skill entries."""
    match = SKILLS_PATTERN.search(message or "")
    if not match:
        return []

    skills: List[Dict[str, str]] = []
    seen = set()
    for raw in SKILL_SPLIT_PATTERN.split(match.group("skills")):
        name = raw.strip(" :-'\"")
        if not name or len(name) > MAX_SKILL_LENGTH:
            continue
        key = name.lower()
        if key in seen:
            continue
        seen.add(key)
        skills.append({"name": name, "level": "Intermediate", "category": "Technical"})
        if len(skills) >= MAX_SKILLS:
            break
    return skills


def extract_industry(message: str) -> Optional[str]:
    for pattern in INDUSTRY_PATTERNS:
        match = pattern.search(message or "")
        if match:
            industry = match.group("industry").strip()
            if industry:
                return industry
    return None


def extract_experience_level(message: str) -> Optional[str]:
    for level, pattern in COMPLEXITY_PATTERNS:
        if pattern.search(message or ""):
            return level
    return None


def extract_profile_fields(message: str) -> Dict[str, Any]:
    """Return the partial profile found in a single message.

    Each field is a single-shot match where the first hit wins. Fields with
    no match are omitted entirely, so the result can be merged into an
    existing profile without clearing anything.
    """
    text = message or ""
    personal: Dict[str, Any] = {}
    sender: Dict[str, Any] = {}
    recipient: Dict[str, Any] = {}
    preferences: Dict[str, Any] = {}
    cv: Dict[str, Any] = {}

    email = extract_email(text)
    if email:
        personal["email"] = email
        sender["email"] = email

    phone = extract_phone(text)
    if phone:
        personal["phone"] = phone
        sender["phone"] = phone

    name = extract_name(text)
    if name:
        personal["firstName"] = name["firstName"]
        if name["lastName"]:
            personal["lastName"] = name["lastName"]
        sender["name"] = name["fullName"]

    position = extract_position(text)
    if position:
        preferences["position"] = position

    company = extract_company(text)
    if company:
        cv["experience"] = [
            {
                "company": company,
                "position": position or PLACEHOLDER_POSITION,
                "location": PLACEHOLDER_LOCATION,
                "startDate": "",
                "endDate": "",
                "current": False,
                "description": [PLACEHOLDER_ACHIEVEMENT],
            }
        ]

    target_company = extract_target_company(text)
    if target_company:
        recipient["company"] = target_company

    skills = extract_skills(text)
    if skills:
        cv["skills"] = skills

    industry = extract_industry(text)
    if industry:
        preferences["industry"] = industry

    level = extract_experience_level(text)
    if level:
        preferences["experienceLevel"] = level

    if personal:
        cv["personal"] = personal

    letter: Dict[str, Any] = {}
    if sender:
        letter["senderInfo"] = sender
    if recipient:
        letter["recipientInfo"] = recipient

    result: Dict[str, Any] = {}
    if cv:
        result["cv"] = cv
    if letter:
        result["letter"] = letter
    if preferences:
        result["preferences"] = preferences
    return result


def merge_profile_data(existing: Optional[Dict[str, Any]], partial: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Merge a partial profile into an existing one without mutating either.

    Nested mappings merge key by key, scalars are last-write-wins and lists
    are replaced wholesale. ``None`` values are skipped so a populated field
    is never cleared.
    """
    merged: Dict[str, Any] = copy.deepcopy(existing) if existing else {}
    for key, value in (partial or {}).items():
        if value is None:
            continue
        current = merged.get(key)
        if isinstance(value, dict) and isinstance(current, dict):
            merged[key] = merge_profile_data(current, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged
