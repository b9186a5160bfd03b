from __future__ import annotations

from pathlib import Path

import pytest

from nutpad.domain.errors import NutPadError, WordListError
from nutpad.services.spelling import WordList


def _write(p: Path, text: str) -> Path:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")
    return p


def test_in_memory_word_list_membership():
    wl = WordList(["the", "cat", "the"])
    assert "the" in wl
    assert "cat" in wl
    assert "dog" not in wl
    assert len(wl) == 2
    assert sorted(wl) == ["cat", "the"]


def test_membership_is_case_sensitive():
    wl = WordList(["the"])
    assert "The" not in wl
    assert "THE" not in wl


def test_from_file_skips_blanks_comments_and_whitespace(tmp_path: Path):
    p = _write(tmp_path / "words", "# header\nthe\n\n  cat  \n\t\nsat\n")
    wl = WordList.from_file(p)
    assert sorted(wl) == ["cat", "sat", "the"]
    assert wl.source == p


def test_from_file_unreadable_raises_word_list_error(tmp_path: Path):
    with pytest.raises(WordListError):
        WordList.from_file(tmp_path / "nope")


def test_load_prefers_configured_path(tmp_path: Path):
    configured = _write(tmp_path / "mine.txt", "alpha\n")
    system = _write(tmp_path / "system", "beta\n")
    wl = WordList.load(configured, fallbacks=[str(system)])
    assert "alpha" in wl
    assert "beta" not in wl


def test_load_missing_configured_path_does_not_fall_back(tmp_path: Path):
    system = _write(tmp_path / "system", "beta\n")
    with pytest.raises(WordListError, match="not found"):
        WordList.load(tmp_path / "missing.txt", fallbacks=[str(system)])


def test_load_uses_first_existing_fallback(tmp_path: Path):
    second = _write(tmp_path / "b", "beta\n")
    third = _write(tmp_path / "c", "gamma\n")
    wl = WordList.load(None, fallbacks=[str(tmp_path / "a"), str(second), str(third)])
    assert wl.source == second
    assert "beta" in wl


def test_load_without_any_source_raises(tmp_path: Path):
    with pytest.raises(WordListError) as ei:
        WordList.load(None, fallbacks=[str(tmp_path / "none")])
    assert isinstance(ei.value, NutPadError)
    assert "word_list" in str(ei.value)
