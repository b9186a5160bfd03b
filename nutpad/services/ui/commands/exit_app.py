from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from nutpad.services.ui.commands.base import CommandResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExitApp:
    """
    Command: quit the application.

    Unsaved changes are discarded without a prompt.
    """

    quit: Callable[[], None]

    def execute(self) -> CommandResult:
        logger.info("Exit requested")
        self.quit()
        return CommandResult.completed()
