from __future__ import annotations

from .base import CommandResult, CommandStatus, ICommand
from .check_spelling import CheckSpelling
from .exit_app import ExitApp
from .file_commands import OpenFile, SaveFile

__all__ = [
    "CheckSpelling",
    "CommandResult",
    "CommandStatus",
    "ExitApp",
    "ICommand",
    "OpenFile",
    "SaveFile",
]
