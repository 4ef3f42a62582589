"""Static registry of portfolio templates."""

from __future__ import annotations
from typing import Dict, List, Optional

from resume2folio.errors import TemplateNotFound
from resume2folio.schema_resume import PortfolioTemplate

TEMPLATES: tuple[PortfolioTemplate, ...] = (
    PortfolioTemplate(
        id="modern-dev",
        name="Modern Developer",
        description="Clean, professional design perfect for software developers",
        category="Developer",
        preview="/templates/modern-dev.jpg",
        layout="two-column",
        features=["Dark/Light Mode", "GitHub Integration", "Project Showcase"],
    ),
    PortfolioTemplate(
        id="creative-designer",
        name="Creative Designer",
        description="Bold, visual design ideal for creative professionals",
        category="Designer",
        preview="/templates/creative-designer.jpg",
        layout="creative",
        features=["Portfolio Gallery", "Animation Effects", "Visual Timeline"],
    ),
    PortfolioTemplate(
        id="minimal-business",
        name="Minimal Business",
        description="Clean, corporate design for business professionals",
        category="Business",
        preview="/templates/minimal-business.jpg",
        layout="single",
        features=["Professional Layout", "Contact Form", "Achievement Highlights"],
    ),
    PortfolioTemplate(
        id="academic-researcher",
        name="Academic Researcher",
        description="Scholarly design for academics and researchers",
        category="Academic",
        preview="/templates/academic-researcher.jpg",
        layout="single",
        features=["Publication List", "Research Timeline", "Citation Ready"],
    ),
)

_BY_ID: Dict[str, PortfolioTemplate] = {t.id: t for t in TEMPLATES}


def get_templates() -> List[PortfolioTemplate]:
    return list(TEMPLATES)


def get_template(template_id: str) -> Optional[PortfolioTemplate]:
    return _BY_ID.get(template_id)


def require_template(template_id: str) -> PortfolioTemplate:
    template = _BY_ID.get(template_id)
    if template is None:
        raise TemplateNotFound(template_id)
    return template


def categories() -> List[str]:
    """Template categories in catalog order, without repeats."""
    return list(dict.fromkeys(t.category for t in TEMPLATES))


def templates_by_category() -> Dict[str, List[PortfolioTemplate]]:
    return {cat: [t for t in TEMPLATES if t.category == cat] for cat in categories()}
