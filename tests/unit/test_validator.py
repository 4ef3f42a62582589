"""Unit tests for HTML/CSS validation of generated portfolios."""

import pytest

from resume2folio.generator_rule import generate
from resume2folio.schema_resume import ThemeSettings
from resume2folio.template_catalog import get_templates
from resume2folio.validator import validate_css, validate_html, validate_portfolio


@pytest.mark.unit
def test_invalid_html_is_reported():
    errors = validate_html("<p>no doctype")

    assert len(errors) == 1
    assert errors[0].startswith("HTML ParseError")


@pytest.mark.unit
def test_valid_css():
    assert validate_css("body { color: red; margin: 0; }") == []


@pytest.mark.unit
def test_invalid_css_value_is_reported():
    errors = validate_css("body { color: 12px; }")

    assert len(errors) == 1
    assert errors[0].startswith("CSS Error: ")
    assert "color" in errors[0]


@pytest.mark.unit
def test_unknown_property_is_reported():
    errors = validate_css("body { colr: red; }")

    assert errors and "Unknown Property name" in errors[0]


@pytest.mark.unit
def test_layout_and_custom_properties_are_accepted():
    css = """
    :root { --accent: #10B981; --font-family: 'Inter', sans-serif; }
    .grid {
        display: grid;
        grid-template-columns: repeat(auto-fit, minmax(300px, 1fr));
        gap: 2rem;
        color: var(--accent);
        font-family: var(--font-family);
    }
    .row { display: flex; flex-wrap: wrap; justify-content: space-between; align-items: center; }
    .card:hover { transform: translateY(-4px); box-shadow: 0 8px 25px rgba(0, 0, 0, 0.1); }
    """
    assert validate_css(css) == []


@pytest.mark.unit
@pytest.mark.parametrize("template_id", [t.id for t in get_templates()])
@pytest.mark.parametrize("color", ["purple", "green"])
def test_generated_portfolio_validates_cleanly(sample_data, template_id, color):
    portfolio = generate(sample_data, ThemeSettings(color=color), template_id)

    assert validate_portfolio(portfolio) == []
