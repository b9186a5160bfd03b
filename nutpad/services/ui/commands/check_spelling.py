from __future__ import annotations

import logging
from dataclasses import dataclass

from nutpad.domain.errors import WordListError
from nutpad.domain.interfaces import ISpellChecker
from nutpad.services.ui.commands.base import CommandResult
from nutpad.services.ui.ports import IEditorView, IMessageService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckSpelling:
    """
    Command: mark unknown words in the editor and summarise them once.

    The editor text is replaced by the checker's marked-up output, so the
    original spacing and line breaks are not preserved.
    """

    view: IEditorView
    checker: ISpellChecker
    messages: IMessageService

    def execute(self) -> CommandResult:
        text = self.view.get_editor_text()
        if not self.checker.tokenize(text):
            return CommandResult.completed("No words to check")

        try:
            report = self.checker.check(text)
        except WordListError as e:
            logger.warning("Spelling check unavailable: %s", e)
            msg = str(e)
            self.messages.error(self.view, "Spelling", msg)
            return CommandResult.failed(msg)

        self.view.set_editor_text(self.checker.mark_up(report))

        unknown = report.unknown
        total = len(report.checks)
        logger.info("Checked %d words, %d unknown", total, len(unknown))
        if report.is_clean:
            msg = f"No spelling problems in {total} words."
            self.messages.info(self.view, "Spelling", msg)
        else:
            msg = f"{len(unknown)} of {total} words not found in the word list."
            self.messages.info(self.view, "Spelling", msg, details="\n".join(unknown))
        return CommandResult.completed(msg)
