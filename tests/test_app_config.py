# tests/test_app_config.py
from __future__ import annotations

from pathlib import Path

import pytest

from nutpad.services.config.app_config import AppConfig, build_app_config


# ------------------------------
# Helpers
# ------------------------------
def _write(p: Path, text: str) -> None:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")


class FakeIni:
    """
    Minimal IniConfigService-like fake backed by a nested dict.
    We only implement what AppConfig calls.
    """

    def __init__(self, data: dict[str, dict[str, str]] | None = None, *, loaded_from: Path | None = None) -> None:
        self._data = data or {}
        self._loaded_from = loaded_from

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        return self._data.get(section, {}).get(key, default)

    def get_int(self, section: str, key: str, default: int | None = None) -> int | None:
        raw = self.get(section, key)
        try:
            return int(raw) if raw is not None else default
        except ValueError:
            return default

    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None:
        return default

    def as_dict(self) -> dict[str, dict[str, str]]:
        return self._data

    @property
    def loaded_from(self) -> Path | None:
        return self._loaded_from


# ------------------------------
# Defaults
# ------------------------------
def test_defaults_when_nothing_configured(tmp_path: Path):
    cfg = AppConfig(ini=FakeIni(), project_root=tmp_path)

    assert cfg.encoding() == "utf-8"
    assert cfg.font_family() == "monospace"
    assert cfg.font_size() == 14
    assert cfg.word_list_path() is None
    assert cfg.spelling_marker() == "*"
    assert cfg.log_level() == "INFO"


def test_configured_values_are_used(tmp_path: Path):
    ini = FakeIni(
        {
            "editor": {"encoding": "latin-1", "font_family": "Courier", "font_size": "11"},
            "spelling": {"word_list": "/opt/words.txt", "marker": "_"},
            "logging": {"level": "debug"},
        }
    )
    cfg = AppConfig(ini=ini, project_root=tmp_path)

    assert cfg.encoding() == "latin-1"
    assert cfg.font_family() == "Courier"
    assert cfg.font_size() == 11
    assert cfg.word_list_path() == Path("/opt/words.txt")
    assert cfg.spelling_marker() == "_"
    assert cfg.log_level() == "DEBUG"


@pytest.mark.parametrize("raw", ["0", "-3", "big", ""])
def test_bad_font_size_falls_back(tmp_path: Path, raw: str):
    cfg = AppConfig(ini=FakeIni({"editor": {"font_size": raw}}), project_root=tmp_path)
    assert cfg.font_size() == 14


def test_relative_word_list_resolves_against_project_root(tmp_path: Path):
    cfg = AppConfig(ini=FakeIni({"spelling": {"word_list": "dict/words.txt"}}), project_root=tmp_path)
    assert cfg.word_list_path() == tmp_path / "dict" / "words.txt"


def test_blank_word_list_means_system_dictionary(tmp_path: Path):
    cfg = AppConfig(ini=FakeIni({"spelling": {"word_list": "   "}}), project_root=tmp_path)
    assert cfg.word_list_path() is None


# ------------------------------
# Delegation / passthrough
# ------------------------------
def test_loaded_from_delegates_to_ini(tmp_path: Path):
    ini_path = tmp_path / "settings.ini"
    cfg = AppConfig(ini=FakeIni(loaded_from=ini_path), project_root=tmp_path)
    assert cfg.loaded_from == ini_path


def test_as_dict_and_get_delegate_to_ini(tmp_path: Path):
    cfg = AppConfig(ini=FakeIni({"editor": {"encoding": "utf-16"}}), project_root=tmp_path)
    assert cfg.as_dict()["editor"]["encoding"] == "utf-16"
    assert cfg.get("editor", "encoding") == "utf-16"
    assert cfg.get("missing", "key", "x") == "x"


# ------------------------------
# build_app_config(): integration-ish checks
# ------------------------------
def test_build_app_config_reads_project_default(tmp_path: Path):
    root = tmp_path / "repo"
    _write(root / "config" / "config.ini", "[editor]\nfont_size = 18\n")

    cfg = build_app_config(project_root=root)
    assert cfg.project_root == root
    assert cfg.loaded_from == root / "config" / "config.ini"
    assert cfg.font_size() == 18


def test_build_app_config_passes_explicit_ini_path(tmp_path: Path):
    root = tmp_path / "repo"
    _write(root / "config" / "config.ini", "[spelling]\nmarker = #\n")

    explicit_ini = tmp_path / "explicit.ini"
    _write(explicit_ini, "[spelling]\nmarker = ~\n")

    cfg = build_app_config(explicit_ini=explicit_ini, project_root=root)

    assert cfg.loaded_from == explicit_ini
    assert cfg.spelling_marker() == "~"
