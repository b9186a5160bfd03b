from __future__ import annotations

from .checker import SpellChecker
from .word_list import WordList

__all__ = [
    "SpellChecker",
    "WordList",
]
