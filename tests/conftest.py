"""
Shared fixtures: small résumé data objects and PDFs built in memory.

The PDF builder writes just enough of the format for pdfplumber to read it:
one Helvetica font, one content stream per page, and a byte-exact xref table.
"""

import pytest

from resume2folio.schema_resume import EducationEntry, ExperienceEntry, ParsedData, ProjectEntry

RESUME_LINES = [
    ("Jane Smith", 24),
    ("jane.smith@example.com", 11),
    ("+1 555-222-3333", 11),
    ("github.com/janesmith", 11),
    ("Summary", 14),
    ("Backend engineer with eight years of experience building APIs.", 11),
    ("Experience", 14),
    ("Senior Software Engineer", 11),
    ("Acme Corp", 11),
    ("2019 - Present", 11),
    ("- Built payment services in Python and Go.", 11),
    ("Skills: Python, Docker, PostgreSQL", 11),
    ("Education", 14),
    ("BSc Computer Science, State University, 2015", 11),
]


def _escape(text):
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def _content_stream(lines):
    y = 740.0
    ops = []
    for line in lines:
        # a line is (text, size) or a list of (text, size, x) pieces on one baseline
        segments = line if isinstance(line, list) else [(line[0], line[1], 72)]
        for text, size, x in segments:
            ops.append("BT /F1 %g Tf 1 0 0 1 %g %.1f Tm (%s) Tj ET" % (size, x, y, _escape(text)))
        y -= max(size for _, size, _ in segments) * 1.5 + 4
    return "\n".join(ops).encode("latin-1")


def build_pdf(pages):
    """
    ``pages`` is a list of pages, each a list of ``(text, font_size)`` lines.
    A line may also be a list of ``(text, font_size, x)`` pieces set on one baseline.
    """
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        None,  # page tree, filled in once the kids are known
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica /Encoding /WinAnsiEncoding >>",
    ]
    kids = []
    for lines in pages:
        content = _content_stream(lines)
        objects.append(b"<< /Length %d >>\nstream\n" % len(content) + content + b"\nendstream")
        content_ref = len(objects)
        objects.append((
            "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
            "/Resources << /Font << /F1 3 0 R >> >> /Contents %d 0 R >>" % content_ref
        ).encode())
        kids.append("%d 0 R" % len(objects))
    objects[1] = ("<< /Type /Pages /Kids [%s] /Count %d >>" % (" ".join(kids), len(kids))).encode()

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"
    xref_at = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (len(objects) + 1, xref_at)
    return bytes(out)


@pytest.fixture
def make_pdf():
    return build_pdf


@pytest.fixture
def resume_pdf():
    return build_pdf([RESUME_LINES])


@pytest.fixture
def sample_data():
    return ParsedData(
        name="Jane Smith",
        email="jane.smith@example.com",
        phone="+1 555-222-3333",
        summary="Backend engineer who likes building reliable APIs.",
        experience=[ExperienceEntry(
            id="exp-1", title="Senior Software Engineer", company="Acme Corp",
            start_date="2019", end_date="Present", description="Built payment services.",
        )],
        education=[EducationEntry(id="edu-1", degree="BSc Computer Science", school="State University", year="2015")],
        skills=["Python", "Docker", "PostgreSQL"],
        projects=[ProjectEntry(
            id="proj-1", title="Ledger", description="Double-entry bookkeeping service.",
            technologies=["Python", "PostgreSQL"], github_url="https://github.com/janesmith/ledger",
        )],
        fallback_fields=set(),
    )
