"""
Derived view of a game: the public mask and the win/loss predicates.

Everything here is recomputed from (first pool word, guessed letters); nothing
is cached. The "answer" shown to the player is always the first pool word.

Mask convention:
  - guessed letter  -> the letter itself
  - anything else   -> '_'
  each followed by a single space, e.g. "_ a _ " for "cat" after guessing 'a'.
"""

from __future__ import annotations

from typing import Collection

# Wrong guesses allowed before the game is lost.
MAX_WRONG_GUESSES = 10

BLANK = "_"
SEPARATOR = " "


def mask_word(word: str, guessed: Collection[str]) -> str:
    """Render `word` with unguessed characters blanked out."""
    return "".join((ch if ch in guessed else BLANK) + SEPARATOR for ch in word)


def compact_mask(word: str, guessed: Collection[str]) -> str:
    """Same as mask_word but without separators ("_a_"); handy for guessers."""
    return "".join(ch if ch in guessed else BLANK for ch in word)


def wrong_guesses(word: str, guessed: Collection[str]) -> int:
    """Number of guessed letters that do not occur in `word`."""
    return sum(1 for c in guessed if c not in word)


def is_lost(word: str, guessed: Collection[str]) -> bool:
    return wrong_guesses(word, guessed) >= MAX_WRONG_GUESSES


def is_won(word: str, guessed: Collection[str]) -> bool:
    """
    All distinct letters of `word` have been guessed. A lost game is never
    reported as won.
    """
    if is_lost(word, guessed):
        return False
    return all(ch in guessed for ch in word)
