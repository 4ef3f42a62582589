"""
Post-hoc confidence scoring for extracted résumé data.

``score`` is a pure function of the data and the raw text it came from, so a
report can be recomputed at any time (for example after the user edits a
field) without keeping state around.
"""

from __future__ import annotations
from typing import Callable, Dict

from resume2folio import patterns as P
from resume2folio import parser_rule as R
from resume2folio.schema_resume import ConfidenceReport, ParsedData

FALLBACK_SCORE = 0.1
SCORED_FIELDS = ("name", "email", "phone", "summary", "experience", "education", "skills")

# Literal sentinel checks, used only for data of unknown provenance.
_SENTINELS: Dict[str, Callable[[ParsedData], bool]] = {
    "name": lambda d: d.name == R.DEFAULT_NAME,
    "email": lambda d: d.email == R.DEFAULT_EMAIL,
    "phone": lambda d: d.phone == R.DEFAULT_PHONE,
    "summary": lambda d: d.summary == R.DEFAULT_SUMMARY,
    "experience": lambda d: len(d.experience) == 1 and d.experience[0].company == R.DEFAULT_COMPANY,
    "education": lambda d: len(d.education) == 1 and d.education[0].school == R.DEFAULT_SCHOOL,
    "skills": lambda d: len(d.skills) == len(R.DEFAULT_SKILLS) and set(d.skills) == set(R.DEFAULT_SKILLS),
}


def is_fallback(field: str, data: ParsedData) -> bool:
    if data.fallback_fields is not None:
        return field in data.fallback_fields
    sentinel = _SENTINELS.get(field)
    return bool(sentinel and sentinel(data))


def score(data: ParsedData, raw_text: str) -> ConfidenceReport:
    fields = {
        field: FALLBACK_SCORE if is_fallback(field, data) else _HEURISTICS[field](data, raw_text)
        for field in SCORED_FIELDS
    }
    overall = sum(fields.values()) / len(fields)
    return ConfidenceReport(overall=_clamp(overall), fields=fields)


# ───────────────────────────────────────── heuristics ──
def _name(d: ParsedData, text: str) -> float:
    if not d.name.strip():
        return 0.0
    return 0.9 if d.name in text else 0.6


def _email(d: ParsedData, text: str) -> float:
    if not d.email.strip():
        return 0.0
    return 0.95 if P.STRICT_EMAIL.match(d.email) else 0.5


def _phone(d: ParsedData, text: str) -> float:
    if not d.phone.strip():
        return 0.0
    return 0.9 if P.STRICT_PHONE.match(d.phone) else 0.6


def _summary(d: ParsedData, text: str) -> float:
    if not d.summary.strip():
        return 0.0
    return 0.8 if len(d.summary) > 50 else 0.4


def _experience(d: ParsedData, text: str) -> float:
    return min(0.9, 0.3 + len(d.experience) * 0.2)


def _education(d: ParsedData, text: str) -> float:
    return min(0.9, 0.4 + len(d.education) * 0.3)


def _skills(d: ParsedData, text: str) -> float:
    if not d.skills:
        return 0.2
    haystack = text.lower()
    found = sum(1 for skill in d.skills if skill.lower() in haystack)
    return min(0.95, 0.2 + (found / len(d.skills)) * 0.7)


_HEURISTICS = {
    "name": _name,
    "email": _email,
    "phone": _phone,
    "summary": _summary,
    "experience": _experience,
    "education": _education,
    "skills": _skills,
}


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))
