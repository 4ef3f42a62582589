"""
Shared text clean-ups used by the extractor and the field parsers.
"""
from __future__ import annotations
import itertools, re, time, unicodedata
from typing import Iterable, List

_CID    = re.compile(r"\(cid:\d+\)")
_SPACES = re.compile(r"[^\S\n]+")
_SLUG   = re.compile(r"[^a-z0-9]+")
_BULLET = re.compile(r"^[•▪◦*\-–]\s*")

_id_counter = itertools.count(1)

# ───────────────────────────────────────── helpers ──
def normalise_text(text: str) -> str:
    """NFKC-normalise, drop `(cid:N)` glyph artefacts, collapse runs of spaces."""
    text = unicodedata.normalize("NFKC", text or "")
    text = _CID.sub("", text)
    return "\n".join(_SPACES.sub(" ", ln).strip() for ln in text.splitlines())

def split_lines(text: str) -> List[str]:
    """Non-empty, stripped lines of a text buffer."""
    return [ln.strip() for ln in (text or "").splitlines() if ln.strip()]

def strip_bullet(line: str) -> str:
    return _BULLET.sub("", line.strip())

def split_list(text: str, separators: re.Pattern) -> List[str]:
    return [bit.strip().rstrip(".").strip() for bit in separators.split(text or "") if bit.strip()]

def dedupe(items: Iterable[str]) -> List[str]:
    """Case-insensitive de-duplication that keeps the first spelling and order."""
    seen, out = set(), []
    for item in items:
        key = item.casefold()
        if item and key not in seen:
            seen.add(key)
            out.append(item)
    return out

def expand_url(token: str) -> str:
    token = token.strip().rstrip("/")
    if token.lower().startswith("http"):
        return token
    return f"https://{token}" if token else ""

def slugify(text: str) -> str:
    return _SLUG.sub("-", (text or "").lower()).strip("-")

def new_id(prefix: str) -> str:
    """Timestamp-based id; the counter keeps ids unique within one millisecond."""
    return f"{prefix}-{int(time.time() * 1000)}-{next(_id_counter)}"
