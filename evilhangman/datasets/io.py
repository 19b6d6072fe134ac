from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from .languages import LANGUAGES, Language, get_language

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"


def write_words(words: Iterable[str], p: Path | str) -> str:
    """
    Write a word list one token per line (UTF-8, trailing newline), creating
    parent dirs. Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(words) + "\n", encoding="utf-8")
    return str(p)


def split_words(blob: str) -> List[str]:
    """Whitespace-delimited tokens, verbatim."""
    return blob.split()


def read_word_blob(p: Path | str) -> str:
    """Raw text of a word-list file. Raises FileNotFoundError if missing."""
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return p.read_text(encoding="utf-8")


def resource_path(language: str | Language) -> Path:
    """Path of the bundled word list for `language`."""
    return DATA_DIR / LANGUAGES[get_language(language)].resource


def load_words(language: str | Language | None = None, path: Path | str | None = None) -> List[str]:
    """
    Load a word list as tokens, either from an explicit `path` or from the
    bundled resource of `language`.

    Raises:
      FileNotFoundError : the file does not exist
      ValueError        : the file holds no tokens (the game needs at least one word)
    """
    if path is None:
        if language is None:
            raise ValueError("load_words needs a language or a path")
        path = resource_path(language)
    words = split_words(read_word_blob(path))
    if not words:
        raise ValueError(f"word list is empty: {path}")
    logger.info("Loaded %s words from %s", len(words), path)
    return words
