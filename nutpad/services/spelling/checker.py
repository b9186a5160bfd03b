from __future__ import annotations

from typing import Callable

from nutpad.domain.interfaces import ISpellChecker
from nutpad.domain.models import SpellReport, WordCheck
from nutpad.services.spelling.word_list import WordList
from nutpad.utils.constants import SPELLING_MARKER


class SpellChecker(ISpellChecker):
    """
    Exact-match spelling check over whitespace-delimited tokens.

    No punctuation stripping or case folding is done: "The" and "cat." are
    unknown unless the word list holds exactly those strings. The word list is
    loaded on first use and kept for the lifetime of the checker.
    """

    def __init__(
        self,
        word_list: WordList | Callable[[], WordList],
        *,
        marker: str = SPELLING_MARKER,
    ) -> None:
        if isinstance(word_list, WordList):
            self._words: WordList | None = word_list
            self._loader: Callable[[], WordList] = lambda: word_list
        else:
            self._words = None
            self._loader = word_list
        self.marker = marker

    @property
    def words(self) -> WordList:
        """The word list, loading it now if needed (raises WordListError)."""
        if self._words is None:
            self._words = self._loader()
        return self._words

    def tokenize(self, text: str) -> list[str]:
        return text.split()

    def check(self, text: str) -> SpellReport:
        tokens = self.tokenize(text)
        if not tokens:
            return SpellReport()
        words = self.words
        return SpellReport(tuple(WordCheck(t, t in words) for t in tokens))

    def mark_up(self, report: SpellReport) -> str:
        m = self.marker
        return " ".join(c.word if c.correct else f"{m}{c.word}{m}" for c in report.checks)
