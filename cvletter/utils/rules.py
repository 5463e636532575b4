"""Keyword and pattern tables driving message analysis.

Every heuristic the analyzer and extractor apply is declared here as data so
the rule set can be extended or tested without touching control flow. Tables
that are ordered (lists of tuples) are evaluated top to bottom and the first
entry wins ties.
"""

from __future__ import annotations

import re
from typing import List, Pattern, Tuple

# ---------------------------------------------------------------------------
# Topic classification: substring membership, first category with a hit wins.
# ---------------------------------------------------------------------------

DEFAULT_TOPIC = "general_inquiry"

TOPIC_KEYWORDS: List[Tuple[str, List[str]]] = [
    ("cv_creation", ["cv", "resume", "résumé", "curriculum", "currículo", "curriculo", "lebenslauf"]),
    ("letter_creation", ["cover letter", "letter", "carta", "lettre", "anschreiben"]),
    ("career_advice", ["career", "advice", "promotion", "job search", "carreira", "carrera", "conselho"]),
    ("skill_development", ["skill", "learn", "course", "training", "certification", "habilidade", "curso"]),
    ("salary_negotiation", ["salary", "negotiat", "raise", "compensation", "salário", "salario", "sueldo"]),
]

# ---------------------------------------------------------------------------
# Request type (the coarse intent of a single message).
# ---------------------------------------------------------------------------

DEFAULT_REQUEST_TYPE = "general"

REQUEST_TYPE_PATTERNS: List[Tuple[str, Pattern[str]]] = [
    (
        "cv",
        re.compile(
            r"\b(?:cv|cvs|resume|résumé|curriculum|currículo|curriculo|currículum|lebenslauf)\b",
            re.IGNORECASE,
        ),
    ),
    (
        "letter",
        re.compile(
            r"\b(?:cover letter|letter|motivation letter|carta|lettre|anschreiben)\b",
            re.IGNORECASE,
        ),
    ),
    (
        "interview",
        re.compile(r"\b(?:interviews?|entrevistas?|entretien|vorstellungsgespräch)\b", re.IGNORECASE),
    ),
]

DEFAULT_ACTION = "general"

ACTION_PATTERNS: List[Tuple[str, Pattern[str]]] = [
    (
        "create",
        re.compile(
            r"\b(?:create|build|write|make|start|draft|criar|fazer|escrever|crear|hacer|escribir)\b",
            re.IGNORECASE,
        ),
    ),
    (
        "improve",
        re.compile(
            r"\b(?:improve|optimi[sz]e|enhance|better|fix|update|melhorar|otimizar|mejorar)\b",
            re.IGNORECASE,
        ),
    ),
    (
        "review",
        re.compile(r"\b(?:review|check|feedback|look at|revisar|avaliar|corrigir)\b", re.IGNORECASE),
    ),
    (
        "learn",
        re.compile(
            r"\b(?:how do|how can|how to|learn|tips|advice|explain|aprender|dicas|consejos)\b",
            re.IGNORECASE,
        ),
    ),
    (
        "specific",
        re.compile(r"\b(?:specific|specifically|particular|exactly|específico|especifico)\b", re.IGNORECASE),
    ),
]

# ---------------------------------------------------------------------------
# Seniority of the conversation.
# ---------------------------------------------------------------------------

DEFAULT_COMPLEXITY = "mid"

COMPLEXITY_PATTERNS: List[Tuple[str, Pattern[str]]] = [
    (
        "senior",
        re.compile(
            r"\b(?:executive|senior|director|head of|vp|vice president|c-level|ceo|cto|cfo|chief|diretor|director)\b",
            re.IGNORECASE,
        ),
    ),
    (
        "entry",
        re.compile(
            r"\b(?:graduate|entry[- ]level|junior|intern|internship|first job|student|"
            r"estagiário|estágio|recém-formado|primer empleo|primeiro emprego)\b",
            re.IGNORECASE,
        ),
    ),
]

# ---------------------------------------------------------------------------
# Industry detection: a category needs at least MIN_INDUSTRY_HITS keyword hits.
# ---------------------------------------------------------------------------

MIN_INDUSTRY_HITS = 2

INDUSTRY_KEYWORDS: List[Tuple[str, List[str]]] = [
    (
        "technology",
        ["software", "developer", "programming", "tech", "engineer", "data", "cloud", "python",
         "javascript", "desenvolvedor", "desarrollador", "tecnologia", "tecnología"],
    ),
    (
        "finance",
        ["finance", "financial", "bank", "banking", "investment", "accounting", "accountant", "audit",
         "finanças", "finanzas"],
    ),
    (
        "healthcare",
        ["health", "hospital", "medical", "nurse", "patient", "clinical", "saúde", "salud"],
    ),
    (
        "marketing",
        ["marketing", "brand", "campaign", "social media", "seo", "advertising", "publicidade"],
    ),
    (
        "legal",
        ["legal", "lawyer", "attorney", "compliance", "contract", "law firm", "advogado", "abogado"],
    ),
    (
        "education",
        ["teacher", "teaching", "school", "education", "curriculum design", "professor", "educação"],
    ),
]

# ---------------------------------------------------------------------------
# Confidence heuristic. Weights are additive and the total is capped at 1.0.
# ---------------------------------------------------------------------------

CONFIDENCE_FLOOR = 0.05
CONFIDENCE_LENGTH_DIVISOR = 2000
CONFIDENCE_LENGTH_CAP = 0.05

EMAIL_PATTERN = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")

UK_PHONE_PATTERN = re.compile(
    r"(?:\+44\s?\d{2,4}[\s-]?\d{3,4}[\s-]?\d{3,4}|\b\d{4,5}\s?\d{6}\b)"
)

ROLE_PATTERN = re.compile(
    r"\b(?:manager|engineer|developer|designer|analyst|consultant|director|specialist|coordinator|"
    r"officer|lead|administrator|accountant|teacher|nurse|scientist|architect|executive|intern|"
    r"desenvolvedor|gerente|engenheiro|analista|desarrollador|ingeniero)\b"
    r"|\b\d+\+?\s*(?:years?|anos|años)\b",
    re.IGNORECASE,
)

SKILL_PATTERN = re.compile(
    r"\b(?:skills?|proficient|expertise|leadership|communication|teamwork|budgeting|python|javascript|"
    r"java|sql|excel|project management|habilidades|competências|competencias)\b",
    re.IGNORECASE,
)

EDUCATION_PATTERN = re.compile(
    r"\b(?:degree|bachelor'?s?|master'?s?|phd|mba|university|college|graduated|diploma|"
    r"licenciatura|graduação|universidade|universidad|mestrado|máster)\b",
    re.IGNORECASE,
)

CONFIDENCE_WEIGHTS: List[Tuple[str, Pattern[str], float]] = [
    ("email", EMAIL_PATTERN, 0.10),
    ("phone", UK_PHONE_PATTERN, 0.10),
    ("role", ROLE_PATTERN, 0.30),
    ("skills", SKILL_PATTERN, 0.15),
    ("education", EDUCATION_PATTERN, 0.15),
]

INDUSTRY_CONFIDENCE_WEIGHT = 0.10

# ---------------------------------------------------------------------------
# Document readiness.
# ---------------------------------------------------------------------------

CV_READY_THRESHOLD = 0.6
LETTER_READY_THRESHOLD = 0.5

EXPERIENCE_PATTERN = re.compile(
    r"\b(?:work|worked|working|job|role|position|company|employer|experience|years?|"
    r"trabalho|trabalhei|experiência|empresa|trabajo|experiencia)\b",
    re.IGNORECASE,
)

READINESS_SKILL_PATTERN = re.compile(
    r"\b(?:skills?|proficient|expertise|abilities|habilidades|competências|competencias)\b",
    re.IGNORECASE,
)

NAME_MENTION_PATTERN = re.compile(
    r"(?i:\bmy name is|\bname is|\bcall me|\bmeu nome|\bme chamo|\bme llamo|\bmi nombre)"
    r"|\b(?i:i'm|i am)\s+[A-Z]"
)

# Missing-data keys in the order they are asked about.
MISSING_DATA_ORDER = ["name", "contact", "experience", "skills", "education"]

MAX_SUGGESTED_QUESTIONS = 3

# ---------------------------------------------------------------------------
# Conversation style (tone of the user's writing).
# ---------------------------------------------------------------------------

DEFAULT_STYLE = "professional"

STYLE_PATTERNS: List[Tuple[str, Pattern[str]]] = [
    (
        "professional",
        re.compile(
            r"\b(?:career|professional|position|role|experience|industry|carreira|profissional|profesional)\b",
            re.IGNORECASE,
        ),
    ),
    (
        "formal",
        re.compile(
            r"\b(?:dear|sir|madam|kindly|would you|could you|please|regards|prezado|estimado|gostaria|quisiera)\b",
            re.IGNORECASE,
        ),
    ),
    (
        "casual",
        re.compile(
            r"\b(?:hey|hi|yo|cool|awesome|thanks|thx|lol|gonna|wanna|oi|olá|hola|valeu)\b",
            re.IGNORECASE,
        ),
    ),
]

# ---------------------------------------------------------------------------
# Web search triggers.
# ---------------------------------------------------------------------------

SEARCH_TRIGGERS: List[str] = [
    "latest", "current", "trend", "market", "salary", "salaries", "demand", "hiring", "news",
    "2024", "2025", "mercado", "salário", "salario", "tendência", "tendencia", "contratando",
]

INSIGHT_TREND_KEYWORDS: List[str] = [
    "growing", "growth", "increase", "increasing", "demand", "trend", "rising",
    "crescimento", "demanda", "tendência", "crecimiento", "tendencia",
]

MAX_INSIGHTS = 3

# ---------------------------------------------------------------------------
# Language indicators: counted per occurrence, ties resolved in table order.
# ---------------------------------------------------------------------------

LANGUAGE_INDICATORS: List[Tuple[str, List[Pattern[str]]]] = [
    (
        "en",
        [
            re.compile(
                r"\b(?:the|and|is|are|was|were|have|has|with|for|my|your|you|i|i'm|what|how|can|"
                r"would|please|help|want|need|experience|job|this|that)\b"
            ),
        ],
    ),
    (
        "pt",
        [
            re.compile(
                r"\b(?:olá|ola|meu|minha|nome|é|não|você|voce|eu|sou|tenho|trabalho|como|para|com|"
                r"um|uma|currículo|curriculo|emprego|experiência|obrigado|obrigada|quero|preciso|"
                r"e|do|da|em|desenvolvedor|vaga)\b"
            ),
            re.compile(r"\b\w+(?:ção|ções|ão)\b"),
        ],
    ),
    (
        "es",
        [
            re.compile(
                r"\b(?:hola|mi|nombre|es|soy|tengo|trabajo|para|con|un|una|currículum|empleo|"
                r"experiencia|gracias|quiero|necesito|y|el|los|las|me|llamo|puesto)\b"
            ),
            re.compile(r"\b\w+(?:ción|ciones)\b"),
        ],
    ),
    (
        "de",
        [
            re.compile(
                r"\b(?:hallo|ich|bin|mein|meine|ist|und|der|das|nicht|mit|für|lebenslauf|"
                r"anschreiben|arbeit|erfahrung|bitte|danke)\b"
            ),
            re.compile(r"\b\w+(?:ung|heit|keit|schaft)\b"),
        ],
    ),
    (
        "fr",
        [
            re.compile(
                r"\b(?:bonjour|je|suis|mon|ma|nom|est|et|le|les|des|avec|pour|pas|vous|lettre|"
                r"expérience|travail|merci|emploi)\b"
            ),
        ],
    ),
    (
        "it",
        [
            re.compile(
                r"\b(?:ciao|sono|mio|mia|è|il|gli|della|per|non|lettera|esperienza|lavoro|grazie)\b"
            ),
        ],
    ),
]

DEFAULT_LANGUAGE = "en"
LANGUAGE_CONFIDENCE_FLOOR = 0.3
# Characters at the start of a message scanned for language indicators.
LANGUAGE_SCAN_LIMIT = 2000
SHORT_TEXT_CONFIDENCE = 0.5

# Languages with their own reply bundle; the rest reply in English.
TEMPLATE_LANGUAGES = ("en", "pt", "es")
