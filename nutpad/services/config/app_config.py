from __future__ import annotations

import sys
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from nutpad.domain.interfaces import IAppConfig
from nutpad.services.config.ini_config_service import IniConfigService
from nutpad.utils.constants import (
    DEFAULT_ENCODING,
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE,
    SPELLING_MARKER,
)


def _project_root_fallback() -> Path:
    """
    Best-effort project root resolution that also works in PyInstaller:
      - PyInstaller onefile/onedir uses sys._MEIPASS as bundle root
      - dev mode uses this file location to walk upward
    """
    meipass = getattr(sys, "_MEIPASS", None)  # type: ignore[attr-defined]
    if meipass:
        return Path(meipass)

    # nutpad/services/config/app_config.py -> parents[3] is the repository root
    return Path(__file__).resolve().parents[3]


@dataclass(frozen=True)
class AppConfig(IAppConfig):
    """
    Typed view over IniConfigService.

    Recognised keys:
      [editor]   encoding, font_family, font_size
      [spelling] word_list, marker
      [logging]  level
    Anything missing or unusable falls back to the built-in default.
    """

    ini: IniConfigService
    project_root: Path

    def encoding(self) -> str:
        return (self.ini.get("editor", "encoding") or "").strip() or DEFAULT_ENCODING

    def font_family(self) -> str:
        return (self.ini.get("editor", "font_family") or "").strip() or DEFAULT_FONT_FAMILY

    def font_size(self) -> int:
        size = self.ini.get_int("editor", "font_size", DEFAULT_FONT_SIZE)
        return size if size and size > 0 else DEFAULT_FONT_SIZE

    def word_list_path(self) -> Path | None:
        """Configured word list; relative paths resolve against the project root."""
        raw = (self.ini.get("spelling", "word_list") or "").strip()
        if not raw:
            return None
        p = Path(raw).expanduser()
        return p if p.is_absolute() else self.project_root / p

    def spelling_marker(self) -> str:
        # not stripped: whitespace would make the marker invisible
        return self.ini.get("spelling", "marker") or SPELLING_MARKER

    def log_level(self) -> str:
        return (self.ini.get("logging", "level") or "").strip().upper() or "INFO"

    # ---- delegate IniConfigService methods (full surface) ----

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        return self.ini.get(section, key, default)

    def get_int(self, section: str, key: str, default: int | None = None) -> int | None:
        return self.ini.get_int(section, key, default)

    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None:
        return self.ini.get_bool(section, key, default)

    def as_dict(self) -> Mapping[str, Mapping[str, str]]:
        return self.ini.as_dict()

    @property
    def loaded_from(self) -> Path | None:
        return self.ini.loaded_from


def build_app_config(
    *, explicit_ini: Path | None = None, project_root: Path | None = None
) -> AppConfig:
    root = project_root or _project_root_fallback()
    ini = IniConfigService(explicit_path=explicit_ini, project_root=root)
    return AppConfig(ini=ini, project_root=root)
