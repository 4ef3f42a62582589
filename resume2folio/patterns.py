"""
Named pattern sets used by the rule-based résumé parser.

Everything here is data: compiled regular expressions and keyword tuples.
Patterns that must stay on one line use ``[^\\S\\n]`` (whitespace without the
newline) so that a match never runs across two lines of the text buffer.
"""

from __future__ import annotations
import re

_SP = r"[^\S\n]"  # horizontal whitespace
_DASH = r"(?:-|–|—|\bto\b)"
_MONTH = r"\b(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)[a-z]*\.?"

# ───────────────────────────────────────── contact ──
EMAIL = [
    re.compile(r"[\w.-]+@[\w.-]+\.\w+"),
    re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}"),
]

PHONE = [
    # loose digit/punctuation run
    re.compile(rf"\+?(?:[\d().-]|{_SP}){{10,}}"),
    # NANP
    re.compile(r"(?:\+?1[-.\s]?)?\(?[0-9]{3}\)?[-.\s]?[0-9]{3}[-.\s]?[0-9]{4}"),
    # international
    re.compile(r"\+\d{1,3}[\s-]?\d{3,14}"),
]
PHONE_MIN_DIGITS = 7

ADDRESS = [
    re.compile(
        r"\d+ [A-Za-z ]+(?:Street|St|Avenue|Ave|Road|Rd|Boulevard|Blvd|Lane|Ln|Drive|Dr|"
        r"Court|Ct|Circle|Cir|Way|Place|Pl)\.?[, ]+[A-Za-z ]+[, ]+[A-Z]{2}[, ]*\d{5}"
    ),
    re.compile(r"\d+ [A-Za-z ,]+[A-Z]{2} \d{5}"),
]

SOCIAL_LINKS = {
    "linkedin": re.compile(r"(?:https?://)?(?:www\.)?linkedin\.com/in/[\w-]+", re.I),
    "github": re.compile(r"(?:https?://)?(?:www\.)?github\.com/[\w-]+", re.I),
    "twitter": re.compile(r"(?:https?://)?(?:www\.)?twitter\.com/[\w-]+", re.I),
    "behance": re.compile(r"(?:https?://)?(?:www\.)?behance\.net/[\w-]+", re.I),
    "dribbble": re.compile(r"(?:https?://)?(?:www\.)?dribbble\.com/[\w-]+", re.I),
}

# strict forms used by the confidence scorer
STRICT_EMAIL = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
STRICT_PHONE = re.compile(r"^\+?[\d\s()\-.]{10,}$")

# ───────────────────────────────────────── name ──
NAME = [
    re.compile(r"^([A-Z][a-z]+\s+[A-Z][a-z]+(?:\s+[A-Z][a-z]+)?)$"),
    re.compile(r"^([A-Z][A-Z\s]+)$"),  # all caps
    re.compile(r"^([A-Z][a-z]+(?:\s+[A-Z]\.?\s*)*[A-Z][a-z]+)$"),  # middle initials
]
NON_NAME_WORDS = {"RESUME", "RÉSUMÉ", "CV", "CURRICULUM", "VITAE", "PROFILE", "CONTACT", "EDUCATION"}
NAME_SCAN_LINES = 5
NAME_FIRST_LINES = 3
NAME_HEADER_RUNS = 10

# ───────────────────────────────────────── sections ──
SECTION_HEADER_KEYWORDS = ("experience", "education", "skills", "projects", "certifications", "languages")
SECTION_HEADER_MAX_LENGTH = 50

SUMMARY_KEYWORDS = ("summary", "objective", "profile", "about", "overview", "professional summary")
SUMMARY_MAX_LINES = 3

EXPERIENCE_KEYWORDS = ("experience", "employment", "work history", "professional experience")
TITLE_KEYWORDS = (
    "engineer", "developer", "manager", "analyst", "specialist", "coordinator",
    "director", "lead", "senior", "junior", "consultant", "designer", "architect",
    "intern", "scientist",
)
TITLE_MAX_LENGTH = 100
COMPANY_INDICATORS = re.compile(
    r"\b(?:inc|llc|corp|corporation|company|co|ltd|gmbh|technologies|systems|solutions|labs|group)\b\.?",
    re.I,
)
COMPANY_MAX_LENGTH = 60
BULLET_CHARS = ("•", "-", "*", "▪", "◦", "–")

DATE_RANGE = [
    re.compile(rf"\d{{4}}\s*{_DASH}\s*\d{{4}}", re.I),
    re.compile(rf"\d{{4}}\s*{_DASH}\s*(?:present|current|now)", re.I),
    re.compile(rf"{_MONTH}\s+\d{{4}}\s*{_DASH}\s*{_MONTH}\s+\d{{4}}", re.I),
    re.compile(rf"{_MONTH}\s+\d{{4}}\s*{_DASH}\s*(?:present|current|now)", re.I),
]
DATE_RANGE_PARTS = re.compile(
    rf"({_MONTH}\s+\d{{4}}|\d{{4}})\s*{_DASH}\s*({_MONTH}\s+\d{{4}}|\d{{4}}|present|current|now)",
    re.I,
)
YEAR = re.compile(r"\b(?:19|20)\d{2}\b")

# ───────────────────────────────────────── skills ──
SKILL_LABELS = [
    re.compile(rf"(?:Skills|Technologies|Programming Languages|Tools){_SP}*:{_SP}*([^\n]+)", re.I),
    re.compile(rf"(?:Proficient in|Experience with|Knowledge of){_SP}*:{_SP}*([^\n]+)", re.I),
]
SKILL_SEPARATORS = re.compile(r"[,;|]")
SKILL_MAX_LENGTH = 40

SKILL_VOCABULARY = (
    "JavaScript", "TypeScript", "React", "Node.js", "Python",
    "Java", "HTML", "CSS", "SQL", "Git", "AWS", "Docker",
    "MongoDB", "PostgreSQL", "Express", "Angular", "Vue",
    "PHP", "C++", "C#", "Ruby", "Go", "Rust", "Swift",
)


def vocabulary_pattern(term: str) -> re.Pattern:
    """Word-bounded matcher for a vocabulary term; very short terms are case-sensitive."""
    flags = 0 if len(term) <= 2 else re.I
    return re.compile(rf"(?<![\w+#.]){re.escape(term)}(?![\w+#])", flags)


SKILL_VOCABULARY_PATTERNS = [(term, vocabulary_pattern(term)) for term in SKILL_VOCABULARY]

# ───────────────────────────────────────── certifications ──
CERTIFICATIONS = [
    re.compile(r"^[^\n,]*\b(?:Certified|Certification|Certificate)\b[^\n,]*", re.I | re.M),
    re.compile(
        r"\b(?:AWS|Microsoft|Google|Oracle|Cisco|CompTIA)\b[\w ]*?\b(?:Certified|Certificate|Certification)\b[^\n,]*",
        re.I,
    ),
]
CERTIFICATION_LABEL = re.compile(r"^(?:certifications?|certificates?|licenses?)\s*[:\-–]\s*", re.I)
CERTIFICATION_ISSUERS = {
    "aws": "Amazon Web Services",
    "amazon": "Amazon Web Services",
    "microsoft": "Microsoft",
    "azure": "Microsoft",
    "google": "Google",
    "oracle": "Oracle",
    "cisco": "Cisco",
    "comptia": "CompTIA",
    "pmi": "Project Management Institute",
    "pmp": "Project Management Institute",
}
DEFAULT_CERTIFICATION_ISSUER = "Professional Certification Body"

# ───────────────────────────────────────── languages ──
PROFICIENCY_LEVELS = ("Native", "Fluent", "Proficient", "Basic", "Conversational", "Intermediate", "Advanced")
SPOKEN_LANGUAGES = (
    "English", "Spanish", "French", "German", "Italian", "Portuguese", "Dutch",
    "Polish", "Russian", "Ukrainian", "Czech", "Swedish", "Norwegian", "Danish",
    "Finnish", "Greek", "Turkish", "Arabic", "Hebrew", "Hindi", "Bengali", "Urdu",
    "Chinese", "Mandarin", "Cantonese", "Japanese", "Korean", "Vietnamese", "Thai",
    "Indonesian", "Malay", "Tagalog", "Swahili", "Persian", "Romanian", "Hungarian",
)
_LEVELS = "|".join(PROFICIENCY_LEVELS)
_SPOKEN = "|".join(SPOKEN_LANGUAGES)

LANGUAGES = [
    # "Languages: English (Native), Spanish - Fluent"
    re.compile(rf"^{_SP}*(?:Spoken{_SP}+)?Languages{_SP}*:{_SP}*([^\n]+)", re.I | re.M),
    # "Fluent in Spanish", "Native German"
    re.compile(rf"\b({_LEVELS}){_SP}+(?:in{_SP}+)?({_SPOKEN})\b", re.I),
    # "Spanish (Fluent)", "German - Intermediate"
    re.compile(rf"\b({_SPOKEN}){_SP}*[(\-–:]{_SP}*({_LEVELS})\b", re.I),
]
LANGUAGE_ITEM = re.compile(r"^([A-Za-z]+)(?:\s*[(\-–:]\s*([A-Za-z ]+?)\)?)?\s*$")
