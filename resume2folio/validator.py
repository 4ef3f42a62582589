"""
Basic HTML and CSS validation for exported portfolios.

Validation never raises: it returns human-readable messages, and an empty list
means the document passed. html5lib in strict mode stops at the first HTML
parse error; cssutils reports through its logger, which is captured here.
"""

from __future__ import annotations
import logging
import re
from typing import List

import cssutils
import html5lib
from bs4 import BeautifulSoup

from resume2folio.schema_resume import GeneratedPortfolio

# Configure cssutils logging to be less verbose for common errors
cssutils.log.setLevel(logging.CRITICAL)

logger = logging.getLogger(__name__)

# cssutils only knows CSS 2.1 and a few CSS3 modules. The generated stylesheet
# also uses flexbox, grid, transforms and var() references, registered here so
# they validate like any other property.
LAYOUT_PROFILE = "CSS Flexbox, Grid and Custom Properties"

_LAYOUT_MACROS = {
    "grid-track": r"auto|min-content|max-content|{length}|{percentage}|{num}fr"
                  r"|minmax\(.+\)|repeat\(.+\)",
    "grid-line": r"auto|{int}|span{w}{int}",
    "single-transition": r"[a-z-]+({w}{time}){0,2}({w}[a-z-]+)?",
    "drop-shadow": r"(inset{w})?{length}{w}{length}({w}{length}){0,2}"
                   r"({w}({color}|rgba?\([^)]*\)))?",
}

_LAYOUT_PROPERTIES = {
    "display": r"flex|inline-flex|grid|inline-grid",
    "flex-direction": r"row|row-reverse|column|column-reverse",
    "flex-wrap": r"nowrap|wrap|wrap-reverse",
    "align-items": r"normal|stretch|center|start|end|flex-start|flex-end|baseline",
    "justify-content": r"normal|center|start|end|flex-start|flex-end|left|right"
                       r"|space-between|space-around|space-evenly|stretch",
    "gap": r"normal|{length}({w}{length})?",
    "column-gap": r"normal|{length}",
    "row-gap": r"normal|{length}",
    "object-fit": r"fill|contain|cover|none|scale-down",
    "grid-template-columns": r"none|{grid-track}({w}{grid-track})*",
    "grid-auto-flow": r"row|column|dense|row{w}dense|column{w}dense",
    "grid-column": r"{grid-line}({w}/{w}{grid-line})?",
    "transition": r"none|{single-transition}({w},{w}{single-transition})*",
    "transform": r"none|([a-z3]+\([^)]*\){w})+",
    "box-shadow": r"none|{drop-shadow}({w},{w}{drop-shadow})*",
}

_CUSTOM_PROPERTY_WARNING = re.compile(r"Unknown Property name\. \[\d+:\d+: --")


def _uses_variable(value: str) -> bool:
    return "var(" in value.lower()


def _register_layout_profile() -> None:
    if LAYOUT_PROFILE in cssutils.profile.profiles:
        return
    properties = {name: _uses_variable for name in cssutils.profile.knownNames}
    properties.update(_LAYOUT_PROPERTIES)
    cssutils.profile.addProfile(LAYOUT_PROFILE, properties, _LAYOUT_MACROS)


_register_layout_profile()


class _CaptureHandler(logging.Handler):
    def __init__(self, sink: List[str], prefix: str):
        super().__init__(level=logging.WARNING)
        self.sink = sink
        self.prefix = prefix

    def emit(self, record: logging.LogRecord) -> None:
        message = record.getMessage()
        # custom property declarations (--name: value) are not in any profile
        if _CUSTOM_PROPERTY_WARNING.search(message):
            return
        self.sink.append(f"{self.prefix}{message}")


def validate_html(html_content: str) -> List[str]:
    """Strict html5lib parse; returns at most one message (the first parse error)."""
    try:
        html5lib.HTMLParser(strict=True).parse(html_content)
    except html5lib.html5parser.ParseError as e:
        return [f"HTML ParseError: {e}"]
    return []


def validate_css(css_text: str, prefix: str = "CSS Error: ") -> List[str]:
    errors: List[str] = []
    css_logger = logging.getLogger("CSSUTILS")  # logger behind cssutils.log
    handler = _CaptureHandler(errors, prefix)

    original_level = css_logger.level
    css_logger.addHandler(handler)
    css_logger.setLevel(logging.WARNING)
    try:
        parser = cssutils.CSSParser(validate=True, raiseExceptions=False)
        parser.parseString(css_text)
    finally:
        css_logger.removeHandler(handler)
        css_logger.setLevel(original_level)
    return errors


def validate_portfolio(portfolio: GeneratedPortfolio) -> List[str]:
    """HTML structure plus every inline <style> block of the generated page."""
    errors = validate_html(portfolio.html)
    soup = BeautifulSoup(portfolio.html, "html.parser")
    for style_tag in soup.find_all("style"):
        if style_tag.string:
            errors.extend(validate_css(style_tag.string, prefix="CSS Error in <style> tag: "))
    if errors:
        logger.info("Portfolio %s has %d validation message(s)", portfolio.template.id, len(errors))
    return errors
