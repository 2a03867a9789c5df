"""App constants and utilities."""

from .constants import (
    APP_NAME,
    APP_ORG,
    CSS_PREVIEW,
    HTML_TEMPLATE,
    MAX_RECENTS,
    SETTINGS_GEOMETRY,
    SETTINGS_RAW_MARKDOWN,
    SETTINGS_RECENTS,
    SETTINGS_THEME,
)
from .logging_setup import setup_logging

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "CSS_PREVIEW",
    "HTML_TEMPLATE",
    "SETTINGS_GEOMETRY",
    "SETTINGS_RECENTS",
    "SETTINGS_THEME",
    "SETTINGS_RAW_MARKDOWN",
    "MAX_RECENTS",
    "setup_logging",
]
