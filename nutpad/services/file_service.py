from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QIODevice, QSaveFile

from nutpad.domain.interfaces import IFileService
from nutpad.utils.constants import DEFAULT_ENCODING

logger = logging.getLogger(__name__)


class FileService(IFileService):
    """
    Whole-file reads and atomic whole-file writes for plain text.

    Every failure surfaces as ``OSError``, including text the configured
    encoding cannot represent and an unknown encoding name.
    """

    def __init__(self, encoding: str = DEFAULT_ENCODING) -> None:
        self.encoding = encoding

    def read_text(self, path: Path) -> str:
        try:
            text = path.read_text(encoding=self.encoding)
        except LookupError as e:
            raise OSError(f"Unknown encoding '{self.encoding}': {e}") from e
        except UnicodeDecodeError as e:
            raise OSError(f"{path} is not valid {self.encoding} text: {e}") from e
        logger.debug("Read %d chars from %s", len(text), path)
        return text

    def write_text_atomic(self, path: Path, text: str) -> None:
        # encode first so a bad encoding never touches the target
        try:
            data = text.encode(self.encoding)
        except LookupError as e:
            raise OSError(f"Unknown encoding '{self.encoding}': {e}") from e
        except UnicodeEncodeError as e:
            raise OSError(f"Text cannot be saved as {self.encoding}: {e}") from e

        sf = QSaveFile(str(path))
        if not sf.open(QIODevice.OpenModeFlag.WriteOnly):
            raise OSError(f"Cannot open for write: {path}")
        sf.write(data)
        if not sf.commit():
            raise OSError(f"Commit failed for: {path}")
        logger.debug("Wrote %d chars to %s", len(text), path)
