from __future__ import annotations

from functools import partial
from pathlib import Path

from PyQt6.QtCore import QSettings

from nutpad.domain.interfaces import IAppConfig, IFileService, ISettingsService, ISpellChecker
from nutpad.services.config.app_config import build_app_config
from nutpad.services.file_service import FileService
from nutpad.services.settings_service import SettingsService
from nutpad.services.spelling import SpellChecker, WordList
from nutpad.services.ui.adapters import QtFileDialogService, QtMessageService
from nutpad.services.ui.main_window import MainWindow
from nutpad.services.ui.ports import IFileDialogService, IMessageService
from nutpad.utils.constants import APP_NAME, APP_ORG


class Container:
    """
    Lightweight DI container:
      - Wires default services from config if not provided
      - Builds a fully wired MainWindow
    """

    def __init__(
        self,
        config: IAppConfig | None = None,
        files: IFileService | None = None,
        settings: ISettingsService | None = None,
        qsettings: QSettings | None = None,
        spell_checker: ISpellChecker | None = None,
        dialogs: IFileDialogService | None = None,
        messages: IMessageService | None = None,
    ) -> None:
        self.config: IAppConfig = config or build_app_config()
        self.file_service: IFileService = files or FileService(encoding=self.config.encoding())
        self.settings_service: ISettingsService = settings or SettingsService(
            qsettings or QSettings()
        )
        # word list is read on the first spelling check, not at startup
        self.spell_checker: ISpellChecker = spell_checker or SpellChecker(
            partial(
                WordList.load,
                self.config.word_list_path(),
                encoding=self.config.encoding(),
            ),
            marker=self.config.spelling_marker(),
        )
        self.dialogs: IFileDialogService = dialogs or QtFileDialogService()
        self.messages: IMessageService = messages or QtMessageService()

    @staticmethod
    def default(
        qsettings: QSettings | None = None,
        *,
        config: IAppConfig | None = None,
        organization: str = APP_ORG,
        application: str = APP_NAME,
    ) -> Container:
        if qsettings is None:
            qsettings = QSettings(organization, application)
        return Container(config=config, qsettings=qsettings)

    # ---------- UI factories ----------

    def build_main_window(
        self,
        *,
        start_path: Path | None = None,
        app_title: str = APP_NAME,
    ) -> MainWindow:
        return MainWindow(
            file_service=self.file_service,
            settings=self.settings_service,
            spell_checker=self.spell_checker,
            dialogs=self.dialogs,
            messages=self.messages,
            start_path=start_path,
            app_title=app_title,
            font_family=self.config.font_family(),
            font_size=self.config.font_size(),
        )
