from __future__ import annotations

from typing import Protocol, runtime_checkable

from nutpad.domain.models import Document


@runtime_checkable
class IEditorView(Protocol):
    """The slice of the main window that commands are allowed to touch."""

    doc: Document

    def get_editor_text(self) -> str: ...
    def set_editor_text(self, text: str) -> None: ...
    def set_modified(self, modified: bool) -> None: ...
    def remember_dir(self, directory: str) -> None: ...
    def last_dir(self) -> str | None: ...
