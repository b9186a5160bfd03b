"""Domain layer: interfaces, errors and simple models (dataclasses)."""

from .errors import NutPadError, WordListError
from .interfaces import IAppConfig, IConfigService, IFileService, ISettingsService, ISpellChecker
from .models import Document, SpellReport, WordCheck

__all__ = [
    "IAppConfig",
    "IConfigService",
    "IFileService",
    "ISettingsService",
    "ISpellChecker",
    "NutPadError",
    "WordListError",
    "Document",
    "SpellReport",
    "WordCheck",
]
