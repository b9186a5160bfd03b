from __future__ import annotations


class NutPadError(Exception):
    """Base class for application errors that are reported to the user."""


class WordListError(NutPadError):
    """The spelling word list could not be located or read."""
