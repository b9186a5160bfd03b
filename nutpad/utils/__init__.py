"""App constants and utilities."""

from .constants import (
    APP_NAME,
    APP_ORG,
    DEFAULT_ENCODING,
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE,
    FILE_FILTER,
    SETTINGS_GEOMETRY,
    SETTINGS_LAST_DIR,
    SPELLING_MARKER,
)
from .logging_setup import configure_logging

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "DEFAULT_ENCODING",
    "DEFAULT_FONT_FAMILY",
    "DEFAULT_FONT_SIZE",
    "FILE_FILTER",
    "SETTINGS_GEOMETRY",
    "SETTINGS_LAST_DIR",
    "SPELLING_MARKER",
    "configure_logging",
]
