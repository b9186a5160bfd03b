from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from nutpad.domain.interfaces import IFileService
from nutpad.domain.models import Document
from nutpad.services.ui.commands.base import CommandResult
from nutpad.services.ui.ports import IEditorView, IFileDialogService, IMessageService
from nutpad.utils.constants import FILE_FILTER

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OpenFile:
    """
    Command: pick a file and replace the document with its contents.

    Cancelling the dialog or failing to read leaves the current document as is.
    """

    view: IEditorView
    files: IFileService
    dialogs: IFileDialogService
    messages: IMessageService

    def execute(self) -> CommandResult:
        path = self.dialogs.get_open_file(self.view, "Open", self.view.last_dir(), FILE_FILTER)
        if path is None:
            return CommandResult.cancelled()
        return self.load(path)

    def load(self, path: Path) -> CommandResult:
        """Read ``path`` into the document without asking for it."""
        try:
            text = self.files.read_text(path)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Open failed for %s: %s", path, e)
            msg = f"Failed to open file:\n{e}"
            self.messages.error(self.view, "Open Error", msg)
            return CommandResult.failed(msg)

        self.view.doc = Document(path=path, text=text, modified=False)
        self.view.set_editor_text(text)
        self.view.set_modified(False)
        self.view.remember_dir(str(path.parent))
        logger.info("Opened %s", path)
        return CommandResult.completed(f"Opened: {path}")


@dataclass(frozen=True)
class SaveFile:
    """
    Command: pick a destination and write the editor text there.

    The target is overwritten without further confirmation.
    """

    view: IEditorView
    files: IFileService
    dialogs: IFileDialogService
    messages: IMessageService

    def execute(self) -> CommandResult:
        doc = self.view.doc
        start = str(doc.path) if doc.path else self.view.last_dir()
        path = self.dialogs.get_save_file(self.view, "Save", start, FILE_FILTER)
        if path is None:
            return CommandResult.cancelled()

        text = self.view.get_editor_text()
        try:
            self.files.write_text_atomic(path, text)
        except OSError as e:
            logger.warning("Save failed for %s: %s", path, e)
            msg = f"Failed to save file:\n{e}"
            self.messages.error(self.view, "Save Error", msg)
            return CommandResult.failed(msg)

        doc.path = path
        doc.text = text
        self.view.set_modified(False)
        self.view.remember_dir(str(path.parent))
        logger.info("Saved %s", path)
        return CommandResult.completed(f"Saved: {path}")
