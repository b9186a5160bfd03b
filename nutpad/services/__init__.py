"""Concrete service implementations."""

from .file_service import FileService
from .settings_service import SettingsService
from .spelling import SpellChecker, WordList

__all__ = ["FileService", "SettingsService", "SpellChecker", "WordList"]
