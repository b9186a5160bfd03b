from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path


@dataclass
class Document:
    path: Path | None
    text: str
    modified: bool = False


@dataclass(frozen=True)
class WordCheck:
    word: str
    correct: bool


@dataclass(frozen=True)
class SpellReport:
    """Per-token results of one spelling pass, in document order."""

    checks: tuple[WordCheck, ...] = ()

    @property
    def words(self) -> list[str]:
        return [c.word for c in self.checks]

    @property
    def unknown(self) -> list[str]:
        return [c.word for c in self.checks if not c.correct]

    @property
    def is_clean(self) -> bool:
        return all(c.correct for c in self.checks)
