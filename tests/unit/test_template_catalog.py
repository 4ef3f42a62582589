"""Unit tests for the template catalog."""

import pytest

from resume2folio.errors import TemplateNotFound
from resume2folio.template_catalog import (
    categories,
    get_template,
    get_templates,
    require_template,
    templates_by_category,
)


@pytest.mark.unit
def test_catalog_contents():
    templates = get_templates()

    assert [t.id for t in templates] == [
        "modern-dev",
        "creative-designer",
        "minimal-business",
        "academic-researcher",
    ]
    assert all(t.features for t in templates)


@pytest.mark.unit
def test_get_templates_returns_a_copy():
    templates = get_templates()
    templates.clear()
    assert len(get_templates()) == 4


@pytest.mark.unit
def test_lookup():
    assert get_template("minimal-business").layout == "single"
    assert get_template("missing") is None


@pytest.mark.unit
def test_require_template_not_found():
    with pytest.raises(TemplateNotFound) as exc_info:
        require_template("missing")

    assert exc_info.value.template_id == "missing"
    assert isinstance(exc_info.value, LookupError)


@pytest.mark.unit
def test_categories():
    assert categories() == ["Developer", "Designer", "Business", "Academic"]
    grouped = templates_by_category()
    assert [t.id for t in grouped["Developer"]] == ["modern-dev"]
