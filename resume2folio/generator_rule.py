"""
Résumé data + theme + template ➜ standalone portfolio HTML/CSS.

Rendering is deterministic: identical inputs give byte-identical html/css.
Only the share URL differs between calls, since it carries a fresh random id.
"""

from __future__ import annotations
import logging, re, secrets, string
from pathlib import Path
from typing import Dict, Optional
from urllib.parse import quote_plus, urlparse

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from markupsafe import Markup

from resume2folio import config
from resume2folio.cleaner import slugify
from resume2folio.schema_resume import GeneratedPortfolio, ParsedData, PortfolioTemplate, ThemeSettings
from resume2folio.template_catalog import require_template

logger = logging.getLogger(__name__)

_TEMPLATE_DIR = Path(__file__).parent / "templates"
env = Environment(loader=FileSystemLoader(_TEMPLATE_DIR),
                  autoescape=select_autoescape(enabled_extensions=("html",), default=False),
                  undefined=StrictUndefined,
                  trim_blocks=True, lstrip_blocks=True)

_SHARED = {"text": "#1F2937", "text_muted": "#6B7280", "bg": "#FFFFFF",
           "bg_secondary": "#F9FAFB", "border": "#E5E7EB"}
PALETTES: Dict[str, Dict[str, str]] = {
    "purple": {"primary": "#8B5CF6", **_SHARED},
    "blue":   {"primary": "#3B82F6", **_SHARED},
    "green":  {"primary": "#10B981", **_SHARED},
    "pink":   {"primary": "#EC4899", **_SHARED},
}
DEFAULT_PALETTE = "purple"

_FONT_UNSAFE = re.compile(r"[^A-Za-z0-9 \-]")
_TEL_UNSAFE = re.compile(r"[^\d+]")
_ID_ALPHABET = string.ascii_lowercase + string.digits
_ID_LENGTH = 9


def _safe_url(url: Optional[str]) -> str:
    """Only http(s) and mailto links make it into the page."""
    if not url:
        return ""
    scheme = urlparse(url.strip()).scheme.lower()
    return url.strip() if scheme in ("http", "https", "mailto") else ""


def _text(value) -> Markup:
    """
    Escape for an HTML text node. Only `&`, `<` and `>` are replaced, so quotes
    and apostrophes in names and summaries appear verbatim. Attribute values
    keep Jinja's full autoescape.
    """
    if isinstance(value, Markup):
        value = value.unescape()
    value = "" if value is None else str(value)
    return Markup(value.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;"))


def _tel(phone: Optional[str]) -> str:
    return _TEL_UNSAFE.sub("", phone or "")


env.filters["safe_url"] = _safe_url
env.filters["text"] = _text
env.filters["tel"] = _tel


def palette(color: str) -> Dict[str, str]:
    return PALETTES.get((color or "").lower(), PALETTES[DEFAULT_PALETTE])


def font_family(theme: ThemeSettings) -> str:
    return _FONT_UNSAFE.sub("", theme.font or "").strip() or config.DEFAULT_FONT


def font_stylesheet_url(font: str) -> str:
    return (f"https://fonts.googleapis.com/css2?family={quote_plus(font)}"
            ":wght@300;400;500;600;700&display=swap")


def render_css(theme: ThemeSettings, template: PortfolioTemplate) -> str:
    return env.get_template("portfolio.css").render(
        colors=palette(theme.color), font=font_family(theme), layout=template.layout,
    ).strip() + "\n"


def render_html(data: ParsedData, theme: ThemeSettings, template: PortfolioTemplate, css: str) -> str:
    font = font_family(theme)
    return env.get_template("portfolio.html").render(
        data=data,
        theme=theme,
        template=template,
        css=css,
        font_url=font_stylesheet_url(font),
        image=_safe_url(theme.image),
        social_links=[u for u in map(_safe_url, getattr(data, "social_links", None) or []) if u],
        address=getattr(data, "address", None) or "",
        certifications=getattr(data, "certifications", None) or [],
        languages=getattr(data, "languages", None) or [],
    ).strip() + "\n"


def shareable_url(origin: Optional[str] = None) -> str:
    """`<origin>/portfolio/<id>`; the id is random and never checked for collisions."""
    portfolio_id = "".join(secrets.choice(_ID_ALPHABET) for _ in range(_ID_LENGTH))
    return f"{(origin or config.PORTFOLIO_ORIGIN).rstrip('/')}/portfolio/{portfolio_id}"


def generate(
    data: ParsedData,
    theme: Optional[ThemeSettings],
    template_id: str,
    origin: Optional[str] = None,
) -> GeneratedPortfolio:
    """Render a portfolio; raises TemplateNotFound for an id outside the catalog."""
    template = require_template(template_id)
    theme = theme or ThemeSettings()

    css = render_css(theme, template)
    html = render_html(data, theme, template, css)
    assets = [theme.image] if theme.image else []
    url = shareable_url(origin)

    logger.info("Generated %s portfolio for %r (%d bytes html)", template.id, data.name, len(html))
    return GeneratedPortfolio(html=html, css=css, assets=assets, url=url, template=template)


def export_filename(portfolio: GeneratedPortfolio) -> str:
    return f"{slugify(portfolio.template.name)}-portfolio.html"


def write_portfolio(portfolio: GeneratedPortfolio, target: str | Path) -> Path:
    """Write the standalone HTML; a directory target gets the default file name."""
    path = Path(target)
    if path.is_dir():
        path = path / export_filename(portfolio)
    path.write_text(portfolio.html, encoding="utf-8")
    return path
