"""
Configuration settings for the resume2folio application.

Values come from the environment (or a local .env file) so the share origin,
theme defaults and upload limit can be changed without touching the code.
"""

from dotenv import load_dotenv
load_dotenv()          # ← must be before os.getenv(...)
import logging
import os

# Origin used when building shareable portfolio URLs
PORTFOLIO_ORIGIN = os.getenv("PORTFOLIO_ORIGIN", "http://localhost:8501").rstrip("/")

# Theme defaults applied to a fresh session
DEFAULT_TEMPLATE = os.getenv("DEFAULT_TEMPLATE", "modern-dev")
DEFAULT_COLOR = os.getenv("DEFAULT_COLOR", "purple")
DEFAULT_FONT = os.getenv("DEFAULT_FONT", "Inter")

# Upload constraints
MAX_UPLOAD_MB = float(os.getenv("MAX_UPLOAD_MB", "5"))
MAX_UPLOAD_BYTES = int(MAX_UPLOAD_MB * 1024 * 1024)
ACCEPTED_MIME_TYPES = ("application/pdf",)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def configure_logging(level: str | None = None) -> None:
    """Basic console logging for the front end and ad-hoc scripts."""
    logging.basicConfig(
        level=level or LOG_LEVEL,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )
