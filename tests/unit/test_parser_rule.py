"""Unit tests for the rule-based field extractors."""

import pytest

from resume2folio import parser_rule as R
from resume2folio.cleaner import split_lines
from resume2folio.schema_resume import TextRun

SCENARIO_TEXT = "Jane Smith\njane.smith@example.com\n+1 555-222-3333\nSummary\nPassionate engineer.\n"


@pytest.mark.unit
def test_contact_block_is_extracted():
    lines = split_lines(SCENARIO_TEXT)

    assert R.extract_name(lines) == ("Jane Smith", True)
    assert R.extract_email(SCENARIO_TEXT) == ("jane.smith@example.com", True)
    assert R.extract_phone(SCENARIO_TEXT) == ("+1 555-222-3333", True)
    assert R.extract_summary(lines) == ("Passionate engineer.", True)


@pytest.mark.unit
def test_missing_email_falls_back_to_placeholder():
    result = R.extract_email("Jane Smith\nno contact details here\n")

    assert result.value == "john.doe@email.com"
    assert result.matched is False


@pytest.mark.unit
def test_name_prefers_largest_header_font():
    runs = [
        TextRun(text="Curriculum Vitae", size=30),
        TextRun(text="Jane Smith", size=20),
        TextRun(text="Senior Developer", size=12),
    ]
    assert R.extract_name(["Curriculum Vitae", "Jane Smith"], runs).value == "Jane Smith"


@pytest.mark.unit
def test_name_skips_resume_heading_and_accepts_all_caps():
    assert R.extract_name(["RESUME", "Jane Smith"]).value == "Jane Smith"
    assert R.extract_name(["JANE SMITH", "Engineer"]).value == "JANE SMITH"


@pytest.mark.unit
def test_name_fallback():
    assert R.extract_name(["jane.smith@example.com"]) == ("John Doe", False)


@pytest.mark.unit
def test_phone_ignores_date_ranges():
    result = R.extract_phone("Engineer\n2015 - 2019\n")

    assert result.value == R.DEFAULT_PHONE
    assert result.matched is False


@pytest.mark.unit
def test_summary_accepts_inline_label():
    lines = ["Jane Smith", "Summary: Builds data pipelines.", "Skills"]
    assert R.extract_summary(lines).value == "Builds data pipelines."


@pytest.mark.unit
def test_summary_stops_at_next_section():
    lines = ["Profile", "First line.", "Second line.", "Experience", "Engineer"]
    assert R.extract_summary(lines).value == "First line. Second line."


@pytest.mark.unit
def test_experience_entry_fields():
    lines = [
        "Work Experience",
        "Software Engineer",
        "Globex Inc",
        "Jan 2020 - Present",
        "• Built things",
        "Education",
        "BSc",
    ]
    result = R.extract_experience(lines)

    assert result.matched is True
    assert len(result.value) == 1
    job = result.value[0]
    assert job.title == "Software Engineer"
    assert job.company == "Globex Inc"
    assert (job.start_date, job.end_date) == ("Jan 2020", "Present")
    assert job.description == "Built things"


@pytest.mark.unit
def test_experience_splits_multiple_jobs():
    lines = [
        "Experience",
        "Lead Developer 2018 - 2020",
        "Initech LLC",
        "Junior Analyst",
        "Umbrella Group",
        "2016 - 2018",
    ]
    jobs = R.extract_experience(lines).value

    assert [j.title for j in jobs] == ["Lead Developer 2018 - 2020", "Junior Analyst"]
    assert (jobs[0].start_date, jobs[0].end_date) == ("2018", "2020")
    assert jobs[1].company == "Umbrella Group"


@pytest.mark.unit
def test_experience_without_heading_uses_placeholder():
    result = R.extract_experience(["Jane Smith", "Engineer"])

    assert result.matched is False
    assert result.value[0].company == R.DEFAULT_COMPANY


@pytest.mark.unit
def test_parse_date_range_normalises_open_end():
    assert R.parse_date_range("2019 to current") == ("2019", "Present")
    assert R.parse_date_range("no dates") == ("2020", "Present")


@pytest.mark.unit
def test_skills_from_labels_and_vocabulary():
    text = "Skills: Python; Docker | Kubernetes\nShipped services in Go.\n"
    result = R.extract_skills(split_lines(text), text)

    assert result.matched is True
    assert result.value == ["Python", "Docker", "Kubernetes", "Go"]


@pytest.mark.unit
def test_short_skill_terms_need_word_boundaries():
    text = "Good communication and teamwork"
    result = R.extract_skills(split_lines(text), text)

    assert result.matched is False
    assert result.value == list(R.DEFAULT_SKILLS)


@pytest.mark.unit
def test_education_and_projects_are_placeholders():
    assert R.extract_education([]).matched is False
    assert R.extract_projects([]).value[0].title == "Portfolio Website"


@pytest.mark.unit
def test_certifications():
    text = "Certifications\nAWS Certified Solutions Architect - 2022\n"
    result = R.extract_certifications(text)

    assert result.matched is True
    assert len(result.value) == 1
    cert = result.value[0]
    assert cert.name == "AWS Certified Solutions Architect - 2022"
    assert cert.issuer == "Amazon Web Services"
    assert cert.date == "2022"


@pytest.mark.unit
def test_languages_listing():
    result = R.extract_languages("Languages: English (Native), Spanish - Fluent\n")

    assert [(l.language, l.proficiency) for l in result.value] == [
        ("English", "Native"),
        ("Spanish", "Fluent"),
    ]


@pytest.mark.unit
def test_languages_fallback():
    result = R.extract_languages("Programming Languages: Python, Go\n")

    assert result.matched is False
    assert result.value[0].language == "English"


@pytest.mark.unit
def test_social_links_are_expanded_and_deduplicated():
    text = "linkedin.com/in/jane-smith https://github.com/jane github.com/jane"
    assert R.extract_social_links(text).value == [
        "https://linkedin.com/in/jane-smith",
        "https://github.com/jane",
    ]


@pytest.mark.unit
def test_address():
    assert R.extract_address("123 Main Street, Springfield, IL 62704").value == (
        "123 Main Street, Springfield, IL 62704"
    )
    assert R.extract_address("no address") == (None, False)


@pytest.mark.unit
def test_total_turns_errors_into_fallback():
    @R.total(lambda: "fallback")
    def broken(text):
        raise RuntimeError("boom")

    assert broken("x") == ("fallback", False)
