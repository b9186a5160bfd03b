from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QByteArray
from PyQt6.QtGui import QAction, QFont, QKeySequence
from PyQt6.QtWidgets import QApplication, QMainWindow, QPlainTextEdit, QStatusBar

from nutpad.domain.interfaces import IFileService, ISettingsService, ISpellChecker
from nutpad.domain.models import Document
from nutpad.services.ui.commands import (
    CheckSpelling,
    CommandResult,
    CommandStatus,
    ExitApp,
    ICommand,
    OpenFile,
    SaveFile,
)
from nutpad.services.ui.ports import IFileDialogService, IMessageService
from nutpad.utils.constants import (
    APP_NAME,
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE,
    EDITOR_COLUMNS,
    EDITOR_ROWS,
)



class MainWindow(QMainWindow):
    """Thin PyQt window; menu entries delegate to command objects."""

    def __init__(
        self,
        file_service: IFileService,
        settings: ISettingsService,
        spell_checker: ISpellChecker,
        dialogs: IFileDialogService,
        messages: IMessageService,
        *,
        start_path: Path | None = None,
        app_title: str = APP_NAME,
        font_family: str = DEFAULT_FONT_FAMILY,
        font_size: int = DEFAULT_FONT_SIZE,
    ) -> None:
        super().__init__()
        self.app_title = app_title
        self.file_service = file_service
        self.settings = settings
        self.spell_checker = spell_checker
        self.dialogs = dialogs
        self.messages = messages

        self.doc = Document(path=None, text="", modified=False)

        # Widgets
        self.editor = QPlainTextEdit(self)
        font = QFont(font_family, font_size)
        font.setStyleHint(QFont.StyleHint.Monospace)
        self.editor.setFont(font)
        self.editor.document().setDocumentMargin(6)
        self.setCentralWidget(self.editor)

        self.editor.textChanged.connect(self._on_text_changed)

        # Commands
        self.open_cmd = OpenFile(self, file_service, dialogs, messages)
        self.save_cmd = SaveFile(self, file_service, dialogs, messages)
        self.spell_cmd = CheckSpelling(self, spell_checker, messages)
        self.exit_cmd = ExitApp(self._quit)

        # UI
        self._build_actions()
        self._build_menu()
        self.setStatusBar(QStatusBar(self))
        self._update_title()

        # Restore UI state, else size to rows x columns of the editor font
        geo = self.settings.get_geometry()
        if isinstance(geo, (bytes, bytearray)):
            self.restoreGeometry(QByteArray(geo))
        else:
            fm = self.editor.fontMetrics()
            self.resize(
                fm.horizontalAdvance("M") * EDITOR_COLUMNS + 40,
                fm.lineSpacing() * EDITOR_ROWS + 80,
            )

        if start_path:
            self.open_path(start_path)

    # ---------- UI creation ----------
    def _build_actions(self):
        self.act_open = QAction(
            "&Open…",
            self,
            shortcut=QKeySequence.StandardKey.Open,
            triggered=lambda: self._run(self.open_cmd),
        )
        self.act_save = QAction(
            "&Save…",
            self,
            shortcut=QKeySequence.StandardKey.Save,
            triggered=lambda: self._run(self.save_cmd),
        )
        self.act_spell = QAction(
            "&Check Spelling",
            self,
            shortcut="F7",
            triggered=lambda: self._run(self.spell_cmd),
        )
        self.act_exit = QAction(
            "E&xit",
            self,
            shortcut=QKeySequence.StandardKey.Quit,
            triggered=lambda: self._run(self.exit_cmd),
        )
        self.act_exit.setStatusTip("Exit application")

    def _build_menu(self):
        m = self.menuBar()
        filem = m.addMenu("&File")
        filem.addAction(self.act_open)
        filem.addAction(self.act_save)
        filem.addSeparator()
        filem.addAction(self.act_spell)
        filem.addSeparator()
        filem.addAction(self.act_exit)

    # ---------- Actions ----------
    def _run(self, command: ICommand) -> CommandResult:
        result = command.execute()
        if result.status is CommandStatus.COMPLETED and result.message:
            self.show_status(result.message)
        return result

    def open_path(self, path: Path) -> CommandResult:
        result = self.open_cmd.load(path)
        if result.ok:
            self.show_status(result.message)
        return result

    def _quit(self) -> None:
        self.close()
        app = QApplication.instance()
        if app is not None:
            app.quit()

    # ---------- IEditorView ----------
    def get_editor_text(self) -> str:
        return self.editor.toPlainText()

    def set_editor_text(self, text: str) -> None:
        self.editor.setPlainText(text)

    def set_modified(self, modified: bool) -> None:
        self.doc.modified = modified
        self._update_title()

    def show_status(self, text: str, msec: int = 3000) -> None:
        self.statusBar().showMessage(text, msec)

    def remember_dir(self, directory: str) -> None:
        self.settings.set_last_dir(directory)

    def last_dir(self) -> str | None:
        return self.settings.get_last_dir()

    # ---------- Helpers ----------
    def _on_text_changed(self):
        self.doc.text = self.editor.toPlainText()
        if not self.doc.modified:
            self.set_modified(True)

    def _update_title(self):
        name = self.doc.path.name if self.doc.path else "Untitled"
        star = " •" if self.doc.modified else ""
        self.setWindowTitle(f"{name}{star} - {self.app_title}")

    # ---------- Close ----------
    def closeEvent(self, event):
        # closing discards unsaved text, same as Exit
        self.settings.set_geometry(bytes(self.saveGeometry()))
        super().closeEvent(event)
