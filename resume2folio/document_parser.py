"""
PDF résumé ➜ ParsedData.

• Reads the document page by page with pdfplumber, keeping page order and the
  reconstructed line structure of each page.
• Runs the rule-based field extractors and, for the advanced variant, the
  address / social link / certification / language extractors and the
  confidence scorer.
• Reports progress as ParseProgress records with strictly increasing
  percentages; the last record is always 100.

A ParseJob is iterated by the caller, which gets control back after every
page; ``parse_pdf`` / ``parse_pdf_advanced`` are the blocking wrappers.
"""

from __future__ import annotations
import logging
from contextlib import closing
from typing import Callable, Iterator, List, Optional, Sequence

from resume2folio import parser_rule as R
from resume2folio.cleaner import normalise_text, split_lines
from resume2folio.confidence import score
from resume2folio.extractor import iter_pages, open_pdf
from resume2folio.schema_resume import AdvancedParsedData, ParsedData, ParseProgress, TextRun

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[ParseProgress], None]


def extract_structured_data(
    raw_text: str,
    runs: Sequence[TextRun] = (),
    advanced: bool = False,
) -> ParsedData:
    """Compose every field extractor over one text buffer."""
    text = normalise_text(raw_text)
    lines = split_lines(text)

    results = {
        "name": R.extract_name(lines, runs),
        "email": R.extract_email(text),
        "phone": R.extract_phone(text),
        "summary": R.extract_summary(lines),
        "experience": R.extract_experience(lines),
        "education": R.extract_education(lines),
        "skills": R.extract_skills(lines, text),
        "projects": R.extract_projects(lines),
    }
    if advanced:
        results.update({
            "address": R.extract_address(text),
            "social_links": R.extract_social_links(text),
            "certifications": R.extract_certifications(text),
            "languages": R.extract_languages(text),
        })

    values = {field: res.value for field, res in results.items()}
    fallbacks = {field for field, res in results.items() if not res.matched}
    # address and social links have no fallback value; an empty result is not a stand-in
    fallbacks -= {"address", "social_links"}

    if not advanced:
        return ParsedData(**values, fallback_fields=fallbacks)
    data = AdvancedParsedData(**values, fallback_fields=fallbacks)
    data.confidence = score(data, text)
    return data


class ParseJob:
    """
    One parse of one document, consumed by iteration.

    Iterating yields ParseProgress records. Once exhausted, ``result`` holds
    the parsed data and ``raw_text`` the text buffer it was built from.
    MalformedPDFError propagates out of the iteration and leaves ``result``
    unset.
    """

    def __init__(self, data: bytes, advanced: bool = False):
        self.data = data
        self.advanced = advanced
        self.result: Optional[ParsedData] = None
        self.raw_text: str = ""
        self.page_count: int = 0
        self._last = -1

    def __iter__(self) -> Iterator[ParseProgress]:
        return self._run()

    def _progress(self, step: str, pct: float, confidence: Optional[float] = None) -> Optional[ParseProgress]:
        pct = int(pct)
        if pct <= self._last:
            return None
        self._last = pct
        return ParseProgress(
            step=step,
            progress=pct,
            confidence=confidence if self.advanced else None,
        )

    def _run(self) -> Iterator[ParseProgress]:
        # each iteration is a fresh parse
        self.result = None
        self.raw_text = ""
        self.page_count = 0
        self._last = -1
        with closing(self._steps()) as events:
            for event in events:
                if event is not None:
                    yield event

    def _steps(self) -> Iterator[Optional[ParseProgress]]:
        adv = self.advanced
        logger.info("Parsing PDF (%d bytes, advanced=%s)", len(self.data or b""), adv)
        yield self._progress("Initializing advanced parser" if adv else "Loading PDF file", 5 if adv else 10, 1.0)

        pages: List[str] = []
        runs: List[TextRun] = []
        with open_pdf(self.data) as pdf:
            yield self._progress("Extracting text content", 20, 0.9)

            for i, total, text, page_runs in iter_pages(pdf):
                self.page_count = total
                pages.append(text)
                runs.extend(page_runs)
                logger.debug("Page %d/%d: %d lines", i, total, len(page_runs))
                yield self._progress(f"Processing page {i}/{total}", 20 + (i / total) * 30, 0.8)

        self.raw_text = "".join(page + "\n" for page in pages)

        yield self._progress("Analyzing resume structure", 60, 0.9)
        yield self._progress("Extracting fields", 70, 0.9)
        data = extract_structured_data(self.raw_text, runs, advanced=adv)

        final_confidence = None
        if adv:
            yield self._progress("Calculating confidence scores", 80, 0.95)
            final_confidence = data.confidence.overall

        yield self._progress("Finalizing data extraction", 95, 1.0)
        self.result = data
        logger.info(
            "Parsed %d page(s); fallback fields: %s%s",
            self.page_count,
            ", ".join(sorted(data.fallback_fields or ())) or "none",
            f"; confidence {final_confidence:.2f}" if final_confidence is not None else "",
        )
        yield self._progress("Complete", 100, final_confidence if adv else 1.0)


def _drive(job: ParseJob, on_progress: Optional[ProgressCallback]) -> ParsedData:
    for event in job:
        if on_progress:
            on_progress(event)
    return job.result


def parse_pdf(data: bytes, on_progress: Optional[ProgressCallback] = None) -> ParsedData:
    return _drive(ParseJob(data), on_progress)


def parse_pdf_advanced(data: bytes, on_progress: Optional[ProgressCallback] = None) -> AdvancedParsedData:
    return _drive(ParseJob(data, advanced=True), on_progress)
