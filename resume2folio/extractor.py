"""
PDF ➜ raw text + layout runs
– strips `(cid:N)` glyph artefacts
– suppresses verbose CropBox warnings from pdfplumber/pdfminer
– rejects uploads that are not small PDFs before any parsing happens
"""
from __future__ import annotations
from io import BytesIO
from pathlib import Path
from typing import Iterator, List, Tuple
import logging, warnings, pdfplumber

from resume2folio import config
from resume2folio.cleaner import normalise_text
from resume2folio.errors import MalformedPDFError, UploadRejected
from resume2folio.schema_resume import TextRun

# silence noisy PDF logging
logging.getLogger("pdfplumber").setLevel(logging.ERROR)
logging.getLogger("pdfminer").setLevel(logging.ERROR)
warnings.filterwarnings("ignore", category=UserWarning, module="pdfminer")

logger = logging.getLogger(__name__)

_LINE_TOLERANCE = 2.0  # points between word tops that still count as one line


def check_upload(size: int, content_type: str | None) -> None:
    """Upload gate: PDF MIME type only, at most ``config.MAX_UPLOAD_BYTES``."""
    if content_type not in config.ACCEPTED_MIME_TYPES:
        raise UploadRejected("Invalid file type", "Please upload a PDF file only.")
    if size > config.MAX_UPLOAD_BYTES:
        raise UploadRejected(
            "File too large", f"Please upload a file smaller than {config.MAX_UPLOAD_MB:g}MB."
        )


def open_pdf(source: bytes | str | Path) -> "pdfplumber.PDF":
    """Open a PDF from bytes or a path; any decoder failure becomes MalformedPDFError."""
    if isinstance(source, (bytes, bytearray)):
        if not source:
            raise MalformedPDFError(cause="empty input")
        source = BytesIO(bytes(source))
    try:
        return pdfplumber.open(source)
    except Exception as exc:
        logger.warning("PDF could not be opened: %s", exc)
        raise MalformedPDFError(cause=type(exc).__name__) from exc


def extract_page(page, page_number: int) -> Tuple[str, List[TextRun]]:
    """Text of one page plus its lines annotated with font size and position."""
    text = normalise_text(page.extract_text() or "")
    words = page.extract_words(extra_attrs=["size"], keep_blank_chars=False)
    return text, _group_runs(words, page_number)


def _group_runs(words: List[dict], page_number: int) -> List[TextRun]:
    runs: List[TextRun] = []
    current: List[dict] = []
    current_top = None
    for w in sorted(words, key=lambda w: (round(w["top"], 1), w["x0"])):
        top = round(w["top"], 1)
        if current_top is not None and abs(top - current_top) > _LINE_TOLERANCE:
            runs.append(_to_run(current, current_top, page_number))
            current = []
        if not current:
            current_top = top
        current.append(w)
    if current:
        runs.append(_to_run(current, current_top, page_number))
    return [r for r in runs if r.text]


def _to_run(words: List[dict], top: float, page_number: int) -> TextRun:
    words = sorted(words, key=lambda w: w["x0"])  # line order, whatever the word tops
    text = normalise_text(" ".join(w["text"] for w in words))
    size = max(float(w.get("size") or 0.0) for w in words)
    return TextRun(text=text, size=size, top=top, page=page_number)


def iter_pages(pdf: "pdfplumber.PDF") -> Iterator[Tuple[int, int, str, List[TextRun]]]:
    """
    Yield ``(page_number, page_count, text, runs)`` for every page in order.
    A page pdfminer cannot decode raises MalformedPDFError.
    """
    try:
        pages = pdf.pages
    except Exception as exc:
        raise MalformedPDFError(cause=type(exc).__name__) from exc
    total = len(pages)
    for i, page in enumerate(pages, start=1):
        try:
            text, runs = extract_page(page, i)
        except Exception as exc:
            raise MalformedPDFError(cause=type(exc).__name__) from exc
        yield i, total, text, runs
