"""
Mask-Match guesser.

Idea:
  - Keep only dictionary words that could still be the answer given what the
    player can see: same length as the pattern, revealed letters in place,
    blanks never holding an already guessed letter.
  - Count distinct-letter frequencies over those words; guess the top
    remaining letter.
  - If nothing matches (the player's dictionary differs from the game's),
    fall back to whole-dictionary frequencies.

Note the displayed word can change length between turns (the adversary
follows the first word of its pool), so matching is redone every turn.
"""

from __future__ import annotations
from typing import List, Set
from .base import BaseGuesser, register
from .letter_freq import best_letters, distinct_letter_counts
from evilhangman.engine.view import BLANK


def matches(word: str, pattern: str, guessed: Set[str]) -> bool:
    """True if `word` fits the compact `pattern` ("_a_") under `guessed`."""
    if len(word) != len(pattern):
        return False
    for ch, p in zip(word, pattern):
        if p == BLANK:
            if ch in guessed:
                return False
        elif ch != p:
            return False
    return True


@register
class MaskMatchGuesser(BaseGuesser):
    id = "mask_match"
    name = "Mask Match"
    version = "1.0.0"

    def next_letter(self, state: dict) -> str:
        pattern: str = state["pattern"]
        guessed: Set[str] = set(state["guessed"])
        remaining: List[str] = state["remaining"]

        pool = [w for w in self.dictionary if matches(w, pattern, guessed)]
        counts = distinct_letter_counts(pool or self.dictionary)
        return self._pick(best_letters(counts, remaining))
