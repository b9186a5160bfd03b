from __future__ import annotations

import os
from pathlib import Path

import pytest
from PyQt6.QtCore import QSettings
from PyQt6.QtWidgets import QApplication

from nutpad.services.file_service import FileService
from nutpad.services.settings_service import SettingsService
from nutpad.services.spelling import SpellChecker, WordList

# headless CI has no display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


# --- Fallback QApplication fixture (works with or without pytest-qt) ---
@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        # Don't forcibly quit a shared app; only close if we created it here.
        if created:
            app.quit()


@pytest.fixture(autouse=True)
def isolated_user_config(monkeypatch, tmp_path: Path) -> Path:
    """Point platformdirs at an empty per-test directory so a developer's config never leaks in."""
    cfg_dir = tmp_path / "usercfg"
    monkeypatch.setattr(
        "nutpad.services.config.ini_config_service.user_config_dir",
        lambda appname: str(cfg_dir),
    )
    return cfg_dir


# --- Other common fixtures ---


@pytest.fixture()
def tmp_settings_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.ini"


@pytest.fixture()
def qsettings(tmp_settings_path: Path) -> QSettings:
    # Use an INI file so we don't touch system registry / platform stores
    s = QSettings(str(tmp_settings_path), QSettings.Format.IniFormat)
    s.clear()
    return s


@pytest.fixture()
def settings_service(qsettings: QSettings) -> SettingsService:
    return SettingsService(qsettings)


@pytest.fixture()
def file_service() -> FileService:
    return FileService()


@pytest.fixture()
def word_list() -> WordList:
    return WordList(["the", "cat", "sat", "on", "mat"])


@pytest.fixture()
def spell_checker(word_list: WordList) -> SpellChecker:
    return SpellChecker(word_list)
