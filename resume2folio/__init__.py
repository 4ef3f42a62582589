"""Résumé PDF ➜ structured data ➜ themed, standalone portfolio page."""

__version__ = "0.1.0"
