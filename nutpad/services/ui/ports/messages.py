from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IMessageService(Protocol):
    """
    Abstract UI port for showing messages. Decouples commands from Qt widgets.

    ``details`` is optional long-form text (e.g. a word list) that the
    implementation may tuck behind a "Show Details" button.
    """

    def info(self, parent: Any | None, title: str, text: str, details: str | None = None) -> None: ...
    def error(self, parent: Any | None, title: str, text: str) -> None: ...
