from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

from nutpad.domain.errors import WordListError
from nutpad.utils.constants import DEFAULT_ENCODING, SYSTEM_WORD_LISTS

logger = logging.getLogger(__name__)


class WordList:
    """
    Read-only set of known-correct words.

    Source format is one word per line; blank lines and lines starting with
    ``#`` are ignored. Words are stored exactly as written (no case folding).
    """

    def __init__(self, words: Iterable[str], *, source: Path | None = None) -> None:
        self._words: frozenset[str] = frozenset(words)
        self.source = source

    # ---------- Construction ----------

    @classmethod
    def from_file(cls, path: Path, *, encoding: str = DEFAULT_ENCODING) -> WordList:
        try:
            with path.open("r", encoding=encoding, errors="replace") as fh:
                words = [w for w in (line.strip() for line in fh) if w and not w.startswith("#")]
        except OSError as e:
            raise WordListError(f"Cannot read word list {path}: {e}") from e
        wl = cls(words, source=path)
        logger.info("Loaded %d words from %s", len(wl), path)
        return wl

    @classmethod
    def load(
        cls,
        configured: Path | None = None,
        *,
        fallbacks: Sequence[str] = SYSTEM_WORD_LISTS,
        encoding: str = DEFAULT_ENCODING,
    ) -> WordList:
        """
        Resolve and load the word list.

        An explicitly configured path must exist; otherwise the first existing
        system dictionary is used.
        """
        if configured is not None:
            if not configured.is_file():
                raise WordListError(f"Configured word list not found: {configured}")
            return cls.from_file(configured, encoding=encoding)

        for candidate in map(Path, fallbacks):
            if candidate.is_file():
                return cls.from_file(candidate, encoding=encoding)

        raise WordListError(
            "No word list available. Set [spelling] word_list in config.ini "
            f"(looked in: {', '.join(fallbacks)})"
        )

    # ---------- Set protocol ----------

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)
