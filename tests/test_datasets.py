from pathlib import Path

import pytest
from evilhangman.datasets import (Language, alphabet_for, get_language, get_language_codes, write_words,
                                  load_words, pretty_summary, resource_path, validate_wordlist)


def _write(p: Path, text: str):
    p.write_text(text, encoding="utf-8")


@pytest.mark.parametrize("code", ["en", "de", "es", "fr"])
def test_bundled_lists_pass(code):
    rep = validate_wordlist(resource_path(code), code)
    assert rep["passed"] is True, rep["issues"]
    assert rep["count"] == len(load_words(code)) > 0


def test_validate_flags_alphabet_and_duplicates(tmp_path: Path):
    p = tmp_path / "words_en.txt"
    _write(p, "apple Hello wörld apple\nbe\n")
    rep = validate_wordlist(p, "en")
    assert rep["passed"] is False
    assert rep["invalid_count"] == 2 and set(rep["invalid"]) == {"Hello", "wörld"}
    assert rep["duplicates"] == ["apple"]
    assert rep["min_length"] == 2 and rep["max_length"] == 5


def test_validate_accepts_language_letters(tmp_path: Path):
    p = tmp_path / "words_de.txt"
    _write(p, "straße größe\n")
    assert validate_wordlist(p, "de")["passed"] is True
    assert validate_wordlist(p, "en")["passed"] is False


def test_validate_missing_file(tmp_path: Path):
    rep = validate_wordlist(tmp_path / "nope.txt", "en")
    assert rep["exists"] is False and rep["passed"] is False
    assert any("not found" in msg for msg in rep["issues"])


def test_pretty_summary(tmp_path: Path):
    p = tmp_path / "w.txt"
    _write(p, "cat dog\n")
    s = pretty_summary(validate_wordlist(p, "en"))
    assert "lang=en" in s and "words=2" in s and s.endswith("OK")


def test_load_words_from_path(tmp_path: Path):
    p = tmp_path / "w.txt"
    _write(p, "  cat\n\tdog  Bird\n")
    assert load_words(path=p) == ["cat", "dog", "Bird"]


def test_load_words_errors(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_words(path=tmp_path / "missing.txt")
    empty = tmp_path / "empty.txt"
    _write(empty, "\n  \n")
    with pytest.raises(ValueError):
        load_words(path=empty)
    with pytest.raises(ValueError):
        load_words()


def test_languages():
    assert get_language("DE") is Language.DE
    assert get_language(Language.FR) is Language.FR
    assert get_language_codes() == ["en", "de", "es", "fr"]
    assert alphabet_for("en") == list("abcdefghijklmnopqrstuvwxyz")
    assert alphabet_for("es")[26:] == ["á", "é", "í", "ñ", "ó", "ú", "ü"]
    with pytest.raises(ValueError, match="Available"):
        get_language("xx")


def test_write_words_then_load(tmp_path: Path):
    p = tmp_path / "sub" / "words_de.txt"
    assert write_words(["straße", "bär"], p) == str(p)
    assert p.read_text(encoding="utf-8") == "straße\nbär\n"
    assert load_words(path=p) == ["straße", "bär"]
