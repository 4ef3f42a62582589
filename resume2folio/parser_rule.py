"""
Rule-based résumé field extractors.

Every extractor is a total function: it returns ``Extracted(value, matched)``
and never raises. ``matched`` is False when the value is the extractor's
fallback default, which is what the confidence scorer keys off.
"""

from __future__ import annotations
import functools, logging
from typing import Any, Callable, List, NamedTuple, Optional, Sequence, Tuple

from resume2folio import patterns as P
from resume2folio.cleaner import dedupe, expand_url, new_id, split_list, strip_bullet
from resume2folio.schema_resume import (
    CertificationEntry,
    EducationEntry,
    ExperienceEntry,
    LanguageEntry,
    ProjectEntry,
    TextRun,
)

logger = logging.getLogger(__name__)

DEFAULT_NAME = "John Doe"
DEFAULT_EMAIL = "john.doe@email.com"
DEFAULT_PHONE = "+1 (555) 123-4567"
DEFAULT_SUMMARY = "Experienced professional with expertise in software development and project management."
DEFAULT_SKILLS = ("JavaScript", "TypeScript", "React")
DEFAULT_COMPANY = "Tech Corporation"
DEFAULT_SCHOOL = "University of Technology"


class Extracted(NamedTuple):
    value: Any
    matched: bool


def default_experience() -> List[ExperienceEntry]:
    return [ExperienceEntry(
        id=new_id("exp"),
        title="Senior Software Engineer",
        company=DEFAULT_COMPANY,
        start_date="2021",
        end_date="Present",
        description="Led development of multiple web applications using modern technologies.",
    )]


def default_education() -> List[EducationEntry]:
    return [EducationEntry(
        id=new_id("edu"),
        degree="Bachelor of Computer Science",
        school=DEFAULT_SCHOOL,
        year="2019",
    )]


def default_projects() -> List[ProjectEntry]:
    return [ProjectEntry(
        id=new_id("proj"),
        title="Portfolio Website",
        description="Built a responsive portfolio website using React and TypeScript.",
        technologies=["React", "TypeScript", "Tailwind CSS"],
        github_url="https://github.com/example/portfolio",
        live_url="https://example-portfolio.com",
    )]


def default_certifications() -> List[CertificationEntry]:
    return [CertificationEntry(
        id=new_id("cert"),
        name="AWS Certified Solutions Architect",
        issuer="Amazon Web Services",
        date="2023",
    )]


def default_languages() -> List[LanguageEntry]:
    return [LanguageEntry(language="English", proficiency="Native")]


def total(fallback: Callable[[], Any]):
    """Turn any unexpected failure inside an extractor into its fallback value."""
    def wrap(fn):
        @functools.wraps(fn)
        def inner(*args, **kwargs) -> Extracted:
            try:
                return fn(*args, **kwargs)
            except Exception:
                logger.exception("%s failed; using fallback value", fn.__name__)
                return Extracted(fallback(), False)
        return inner
    return wrap


# ───────────────────────────────────────── shared ──
def is_section_header(line: str) -> bool:
    low = line.lower()
    return len(line) < P.SECTION_HEADER_MAX_LENGTH and any(k in low for k in P.SECTION_HEADER_KEYWORDS)


def is_likely_name(text: str) -> bool:
    words = text.split()
    if not 2 <= len(words) <= 4:
        return False
    if not all(w[0].isupper() for w in words):
        return False
    return not any(w.upper().strip(".,:") in P.NON_NAME_WORDS for w in words)


# ───────────────────────────────────────── name ──
@total(lambda: DEFAULT_NAME)
def extract_name(lines: Sequence[str], runs: Sequence[TextRun] = ()) -> Extracted:
    strategies = (
        lambda: _name_from_header(runs),
        lambda: _name_from_pattern(lines),
        lambda: _name_from_first_lines(lines),
    )
    for strategy in strategies:
        name = strategy()
        if name and len(name) > 2:
            return Extracted(name, True)
    return Extracted(DEFAULT_NAME, False)


def _name_from_header(runs: Sequence[TextRun]) -> Optional[str]:
    """Largest font among the first runs, if it reads like a name."""
    best, best_size = None, 0.0
    for run in runs[:P.NAME_HEADER_RUNS]:
        text = run.text.strip()
        if run.size > best_size and is_likely_name(text):
            best, best_size = text, run.size
    return best


def _name_from_pattern(lines: Sequence[str]) -> Optional[str]:
    for line in lines[:P.NAME_SCAN_LINES]:
        for pattern in P.NAME:
            m = pattern.match(line.strip())
            if m and is_likely_name(m.group(1).strip()):
                return m.group(1).strip()
    return None


def _name_from_first_lines(lines: Sequence[str]) -> Optional[str]:
    for line in lines[:P.NAME_FIRST_LINES]:
        words = line.split()
        if 2 <= len(words) <= 4 and is_likely_name(" ".join(words)):
            return " ".join(words)
    return None


# ───────────────────────────────────────── contact ──
@total(lambda: DEFAULT_EMAIL)
def extract_email(raw_text: str) -> Extracted:
    for pattern in P.EMAIL:
        if m := pattern.search(raw_text):
            return Extracted(m.group(), True)
    return Extracted(DEFAULT_EMAIL, False)


@total(lambda: DEFAULT_PHONE)
def extract_phone(raw_text: str) -> Extracted:
    for pattern in P.PHONE:
        for m in pattern.finditer(raw_text):
            candidate = m.group().strip().rstrip(".-").strip()
            if sum(ch.isdigit() for ch in candidate) < P.PHONE_MIN_DIGITS:
                continue
            if any(d.search(candidate) for d in P.DATE_RANGE):
                continue
            return Extracted(candidate, True)
    return Extracted(DEFAULT_PHONE, False)


@total(lambda: None)
def extract_address(raw_text: str) -> Extracted:
    for pattern in P.ADDRESS:
        if m := pattern.search(raw_text):
            return Extracted(m.group().strip(" ,"), True)
    return Extracted(None, False)


@total(list)
def extract_social_links(raw_text: str) -> Extracted:
    links = dedupe(
        expand_url(m.group())
        for pattern in P.SOCIAL_LINKS.values()
        for m in pattern.finditer(raw_text)
    )
    return Extracted(links, bool(links))


# ───────────────────────────────────────── summary ──
@total(lambda: DEFAULT_SUMMARY)
def extract_summary(lines: Sequence[str]) -> Extracted:
    for i, line in enumerate(lines):
        inline = _inline_summary(line)
        if inline is None and not _is_summary_heading(line):
            continue
        picked = [inline] if inline else []
        for ln in lines[i + 1:]:
            if len(picked) >= P.SUMMARY_MAX_LINES or is_section_header(ln):
                break
            picked.append(ln.strip())
        if picked:
            return Extracted(" ".join(picked), True)
        break
    return Extracted(DEFAULT_SUMMARY, False)


def _inline_summary(line: str) -> Optional[str]:
    """Text after "Summary:"-style labels that share the line with the heading."""
    head, sep, rest = line.partition(":")
    if sep and rest.strip() and head.strip().lower() in P.SUMMARY_KEYWORDS + ("about me",):
        return rest.strip()
    return None


def _is_summary_heading(line: str) -> bool:
    low = line.lower()
    return len(line) < P.SECTION_HEADER_MAX_LENGTH and any(k in low for k in P.SUMMARY_KEYWORDS)


# ───────────────────────────────────────── experience ──
@total(default_experience)
def extract_experience(lines: Sequence[str]) -> Extracted:
    start = next(
        (i for i, ln in enumerate(lines)
         if len(ln) < P.SECTION_HEADER_MAX_LENGTH and any(k in ln.lower() for k in P.EXPERIENCE_KEYWORDS)),
        None,
    )
    if start is None:
        return Extracted(default_experience(), False)

    jobs: List[ExperienceEntry] = []
    current: Optional[ExperienceEntry] = None
    for raw in lines[start + 1:]:
        line = raw.strip()
        if is_section_header(line):
            break
        if is_job_title(line):
            if current:
                jobs.append(current)
            current = ExperienceEntry(id=new_id("exp"), title=line)
            if is_date_range(line):
                current.start_date, current.end_date = parse_date_range(line)
        elif current is None:
            continue
        elif is_date_range(line):
            current.start_date, current.end_date = parse_date_range(line)
            rest = P.DATE_RANGE_PARTS.sub("", line).strip(" |,·•-–—()")
            if rest and not current.company:
                current.company = rest
        elif is_company_name(line) and not current.company:
            current.company = line
        else:
            bit = strip_bullet(line)
            current.description = f"{current.description} {bit}".strip()
    if current:
        jobs.append(current)
    if not jobs:
        return Extracted(default_experience(), False)
    return Extracted(jobs, True)


def is_job_title(line: str) -> bool:
    if line.startswith(P.BULLET_CHARS):
        return False
    low = line.lower()
    return len(line) < P.TITLE_MAX_LENGTH and any(k in low for k in P.TITLE_KEYWORDS)


def is_company_name(line: str) -> bool:
    if P.COMPANY_INDICATORS.search(line):
        return True
    return len(line) < P.COMPANY_MAX_LENGTH and not any(ch in line for ch in P.BULLET_CHARS)


def is_date_range(line: str) -> bool:
    return any(p.search(line) for p in P.DATE_RANGE)


def parse_date_range(line: str) -> Tuple[str, str]:
    m = P.DATE_RANGE_PARTS.search(line)
    if not m:
        return "2020", "Present"
    start, end = m.group(1).strip(), m.group(2).strip()
    if end.lower() in ("present", "current", "now"):
        end = "Present"
    return start, end


# ───────────────────────────────────────── education / projects ──
@total(default_education)
def extract_education(lines: Sequence[str]) -> Extracted:
    return Extracted(default_education(), False)


@total(default_projects)
def extract_projects(lines: Sequence[str]) -> Extracted:
    return Extracted(default_projects(), False)


# ───────────────────────────────────────── skills ──
@total(lambda: list(DEFAULT_SKILLS))
def extract_skills(lines: Sequence[str], raw_text: str) -> Extracted:
    labelled = [
        skill
        for pattern in P.SKILL_LABELS
        for m in pattern.finditer(raw_text)
        for skill in split_list(m.group(1), P.SKILL_SEPARATORS)
        if len(skill) <= P.SKILL_MAX_LENGTH
    ]
    detected = [term for term, pattern in P.SKILL_VOCABULARY_PATTERNS if pattern.search(raw_text)]
    skills = dedupe(labelled + detected)
    if not skills:
        return Extracted(list(DEFAULT_SKILLS), False)
    return Extracted(skills, True)


# ───────────────────────────────────────── certifications ──
@total(default_certifications)
def extract_certifications(raw_text: str) -> Extracted:
    accepted: List[str] = []
    for pattern in P.CERTIFICATIONS:
        for m in pattern.finditer(raw_text):
            name = P.CERTIFICATION_LABEL.sub("", m.group().strip()).strip(" :-–•")
            if not name or is_section_header(name):
                continue
            key = name.casefold()
            if any(key in a.casefold() for a in accepted):
                continue
            accepted = [a for a in accepted if a.casefold() not in key] + [name]
    if not accepted:
        return Extracted(default_certifications(), False)
    certs = [
        CertificationEntry(id=new_id("cert"), name=name, issuer=_issuer(name), date=_year(name))
        for name in accepted
    ]
    return Extracted(certs, True)


def _issuer(name: str) -> str:
    low = name.lower()
    for token, issuer in P.CERTIFICATION_ISSUERS.items():
        if token in low.split() or low.startswith(token):
            return issuer
    return P.DEFAULT_CERTIFICATION_ISSUER


def _year(text: str) -> str:
    m = P.YEAR.search(text)
    return m.group() if m else ""


# ───────────────────────────────────────── languages ──
@total(default_languages)
def extract_languages(raw_text: str) -> Extracted:
    spoken = {lang.casefold() for lang in P.SPOKEN_LANGUAGES}
    found: List[Tuple[str, str]] = []

    listing, level_first, level_last = P.LANGUAGES
    for m in listing.finditer(raw_text):
        for item in split_list(m.group(1), P.SKILL_SEPARATORS):
            im = P.LANGUAGE_ITEM.match(item)
            if im and im.group(1).casefold() in spoken:
                found.append((im.group(1), im.group(2) or ""))
    found += [(m.group(2), m.group(1)) for m in level_first.finditer(raw_text)]
    found += [(m.group(1), m.group(2)) for m in level_last.finditer(raw_text)]

    seen, languages = set(), []
    for language, proficiency in found:
        key = language.casefold()
        if key in seen:
            continue
        seen.add(key)
        languages.append(LanguageEntry(language=language.capitalize(),
                                       proficiency=proficiency.strip().capitalize()))
    if not languages:
        return Extracted(default_languages(), False)
    return Extracted(languages, True)
