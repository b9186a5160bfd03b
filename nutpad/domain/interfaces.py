from __future__ import annotations
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

from nutpad.domain.models import SpellReport


class IFileService(Protocol):
    """Read/write whole text files. Writes should be atomic when possible."""

    def read_text(self, path: Path) -> str: ...
    def write_text_atomic(self, path: Path, text: str) -> None: ...


class ISettingsService(Protocol):
    """Persist and retrieve lightweight UI state."""

    def get_geometry(self) -> bytes | None: ...
    def set_geometry(self, blob: bytes) -> None: ...
    def get_last_dir(self) -> str | None: ...
    def set_last_dir(self, directory: str) -> None: ...


class ISpellChecker(Protocol):
    """Check whitespace-delimited words against a word list."""

    def tokenize(self, text: str) -> list[str]: ...
    def check(self, text: str) -> SpellReport: ...
    def mark_up(self, report: SpellReport) -> str: ...


class IConfigService(Protocol):
    """Read-only access to INI-style configuration."""

    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_int(self, section: str, key: str, default: int | None = None) -> int | None: ...
    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None: ...
    def as_dict(self) -> Mapping[str, Mapping[str, str]]: ...


class IAppConfig(IConfigService, Protocol):
    """Typed accessors for the settings the editor actually reads."""

    def encoding(self) -> str: ...
    def font_family(self) -> str: ...
    def font_size(self) -> int: ...
    def word_list_path(self) -> Path | None: ...
    def spelling_marker(self) -> str: ...
    def log_level(self) -> str: ...
