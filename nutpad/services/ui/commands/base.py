from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Protocol, runtime_checkable


class CommandStatus(Enum):
    COMPLETED = auto()
    CANCELLED = auto()
    FAILED = auto()


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a command; failures carry the message already shown to the user."""

    status: CommandStatus
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status is CommandStatus.COMPLETED

    @classmethod
    def completed(cls, message: str = "") -> CommandResult:
        return cls(CommandStatus.COMPLETED, message)

    @classmethod
    def cancelled(cls) -> CommandResult:
        return cls(CommandStatus.CANCELLED)

    @classmethod
    def failed(cls, message: str) -> CommandResult:
        return cls(CommandStatus.FAILED, message)


@runtime_checkable
class ICommand(Protocol):
    """A menu-triggerable operation."""

    def execute(self) -> CommandResult: ...
