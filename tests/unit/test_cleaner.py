"""Unit tests for text clean-up helpers."""

import re

import pytest

from resume2folio.cleaner import dedupe, expand_url, new_id, normalise_text, slugify, split_list, strip_bullet


@pytest.mark.unit
def test_normalise_text():
    raw = "Jane(cid:3)  Smith\n\n  Python  Go  "
    assert normalise_text(raw) == "Jane Smith\n\nPython Go"


@pytest.mark.unit
def test_strip_bullet():
    assert strip_bullet("• Built things") == "Built things"
    assert strip_bullet("- Led a team") == "Led a team"
    assert strip_bullet("Plain line") == "Plain line"


@pytest.mark.unit
def test_split_list():
    assert split_list("Python, Go; Rust | SQL.", re.compile(r"[,;|]")) == ["Python", "Go", "Rust", "SQL"]


@pytest.mark.unit
def test_dedupe_keeps_first_spelling():
    assert dedupe(["Python", "python", "Go", "PYTHON"]) == ["Python", "Go"]


@pytest.mark.unit
def test_expand_url():
    assert expand_url("github.com/jane/") == "https://github.com/jane"
    assert expand_url("http://example.com") == "http://example.com"


@pytest.mark.unit
def test_slugify():
    assert slugify("Modern Developer") == "modern-developer"


@pytest.mark.unit
def test_new_id_is_unique():
    ids = {new_id("exp") for _ in range(50)}
    assert len(ids) == 50
    assert all(i.startswith("exp-") for i in ids)
