import streamlit as st

# MUST be the first Streamlit command
st.set_page_config(layout="wide", page_title="Résumé-to-Portfolio")

import json
import logging

from resume2folio import config
from resume2folio.document_parser import ParseJob
from resume2folio.errors import MalformedPDFError, TemplateNotFound, UploadRejected
from resume2folio.extractor import check_upload
from resume2folio.generator_rule import PALETTES, export_filename, generate
from resume2folio.schema_resume import ThemeSettings
from resume2folio.session import (
    AppState,
    ResetState,
    SetGeneratedPortfolio,
    SetLoading,
    SetParsedData,
    SetThemeSettings,
    UpdateResumeData,
    reduce,
)
from resume2folio.template_catalog import get_templates, require_template
from resume2folio.validator import validate_portfolio

config.configure_logging()
logger = logging.getLogger(__name__)

FONTS = ["Inter", "Roboto", "Open Sans", "Lato", "Merriweather", "Playfair Display"]

# Initialize session state variables
if "app" not in st.session_state:
    st.session_state.app = AppState()
if "processed_pdf_name" not in st.session_state:
    st.session_state.processed_pdf_name = None


def dispatch(action) -> AppState:
    st.session_state.app = reduce(st.session_state.app, action)
    return st.session_state.app


# --- Parsing ---
def run_parse(uploaded) -> None:
    """Drive a ParseJob, mirroring each progress record into the UI."""
    dispatch(SetLoading(loading=True))
    job = ParseJob(uploaded.getvalue(), advanced=True)
    bar = st.progress(0, text="Starting…")
    try:
        for event in job:
            label = event.step
            if event.confidence is not None:
                label = f"{label} (confidence {event.confidence:.0%})"
            bar.progress(event.progress, text=label)
    except MalformedPDFError as e:
        st.error(e.message)
        logger.warning("Parse failed for %s: %s", uploaded.name, e)
        return
    finally:
        dispatch(SetLoading(loading=False))

    dispatch(SetParsedData(data=job.result, raw_text=job.raw_text))
    st.session_state.processed_pdf_name = uploaded.name
    st.success(f"✅ Parsed {job.page_count} page(s).")


def show_confidence(data) -> None:
    report = getattr(data, "confidence", None)
    if report is None:
        return
    st.metric("Overall confidence", f"{report.overall:.0%}")
    st.table({"field": list(report.fields), "confidence": [f"{v:.0%}" for v in report.fields.values()]})
    fallbacks = sorted(data.fallback_fields or ())
    if fallbacks:
        st.warning("Placeholder values used for: " + ", ".join(fallbacks) + ". Please review them below.")


# --- Editing ---
def edit_form(data) -> None:
    with st.form("resume_editor"):
        name = st.text_input("Name", data.name)
        email = st.text_input("Email", data.email)
        phone = st.text_input("Phone", data.phone)
        summary = st.text_area("Summary", data.summary)
        skills = st.text_input("Skills (comma separated)", ", ".join(data.skills))
        with st.expander("Experience, education and projects (JSON)"):
            lists_json = st.text_area(
                "Entries",
                json.dumps({
                    "experience": [e.model_dump() for e in data.experience],
                    "education": [e.model_dump() for e in data.education],
                    "projects": [p.model_dump() for p in data.projects],
                }, indent=2),
                height=300,
            )
        if not st.form_submit_button("Save changes"):
            return

    changes = {}
    for field, value in (("name", name), ("email", email), ("phone", phone), ("summary", summary)):
        if value != getattr(data, field):
            changes[field] = value
    new_skills = [s.strip() for s in skills.split(",") if s.strip()]
    if new_skills != data.skills:
        changes["skills"] = new_skills
    try:
        lists = json.loads(lists_json)
    except json.JSONDecodeError as e:
        st.error(f"Entries are not valid JSON: {e}")
        return
    for field in ("experience", "education", "projects"):
        if lists.get(field) != [e.model_dump() for e in getattr(data, field)]:
            changes[field] = lists.get(field, [])
    if not changes:
        st.info("Nothing changed.")
        return
    try:
        dispatch(UpdateResumeData(changes=changes))
    except ValueError as e:
        st.error(f"Could not apply changes: {e}")
        return
    st.success("Changes saved.")


# --- Theme ---
def theme_picker(theme: ThemeSettings) -> ThemeSettings:
    templates = get_templates()
    ids = [t.id for t in templates]
    current = theme.template if theme.template in ids else config.DEFAULT_TEMPLATE
    template_id = st.selectbox(
        "Template",
        ids,
        index=ids.index(current) if current in ids else 0,
        format_func=lambda i: f"{require_template(i).name} ({require_template(i).category})",
    )
    st.caption(require_template(template_id).description)
    colors = list(PALETTES)
    color = st.radio("Color", colors, index=colors.index(theme.color) if theme.color in colors else 0,
                     horizontal=True)
    font = st.selectbox("Font", FONTS, index=FONTS.index(theme.font) if theme.font in FONTS else 0)
    image = st.text_input("Profile image URL", theme.image or "") or None
    return ThemeSettings(color=color, font=font, image=image, template=template_id)


# --- Page ---
st.title("📄 ➜ 🌐 Résumé to Portfolio")

uploaded_pdf_file_widget = st.file_uploader("Upload PDF résumé", type="pdf")
if uploaded_pdf_file_widget is not None:
    if uploaded_pdf_file_widget.name != st.session_state.processed_pdf_name:
        try:
            check_upload(uploaded_pdf_file_widget.size, uploaded_pdf_file_widget.type)
        except UploadRejected as e:
            st.error(f"**{e.title}**: {e.description}")
        else:
            run_parse(uploaded_pdf_file_widget)
elif st.session_state.processed_pdf_name:
    # PDF was cleared from the uploader
    dispatch(ResetState())
    st.session_state.processed_pdf_name = None

app: AppState = st.session_state.app

if app.resume_data is not None:
    col_data, col_theme = st.columns([3, 2])
    with col_data:
        st.subheader("📝 Résumé data")
        show_confidence(app.resume_data)
        edit_form(app.resume_data)
    with col_theme:
        st.subheader("🎨 Theme")
        theme = theme_picker(app.theme)
        if theme != app.theme:
            app = dispatch(SetThemeSettings(theme=theme))
        if st.button("🏗️ Generate portfolio", use_container_width=True):
            try:
                portfolio = generate(app.resume_data, app.theme, app.theme.template or config.DEFAULT_TEMPLATE)
            except TemplateNotFound as e:
                st.error(str(e))
            else:
                app = dispatch(SetGeneratedPortfolio(portfolio=portfolio))

app = st.session_state.app
if app.generated is not None:
    portfolio = app.generated
    st.divider()
    st.subheader("🎯 Your Portfolio")

    col1, col2 = st.columns(2)
    with col1:
        st.code(portfolio.url, language=None)
    with col2:
        st.download_button(
            label="📥 Download",
            data=portfolio.html,
            file_name=export_filename(portfolio),
            mime="text/html",
            help="Download the portfolio as a standalone HTML file",
            use_container_width=True,
        )

    col_main, col_info = st.columns([3, 1])
    with col_main:
        st.components.v1.html(portfolio.html, height=600, scrolling=True)
    with col_info:
        st.markdown("**📊 Portfolio Statistics**")
        st.metric("💾 Size", f"{len(portfolio.html) / 1024:.1f} KB")
        st.metric("🧩 Template", portfolio.template.name)
        problems = validate_portfolio(portfolio)
        if problems:
            with st.expander(f"⚠️ {len(problems)} validation message(s)"):
                for msg in problems:
                    st.write(msg)
        else:
            st.success("HTML and CSS look valid.")
