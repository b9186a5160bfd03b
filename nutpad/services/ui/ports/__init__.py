from __future__ import annotations

from .dialogs import IFileDialogService
from .editor import IEditorView
from .messages import IMessageService

__all__ = [
    "IEditorView",
    "IFileDialogService",
    "IMessageService",
]
