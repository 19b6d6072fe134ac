"""
Letter-Frequency guesser (whole dictionary).

Idea:
  - Count, over the WHOLE dictionary, how many words contain each letter
    (each word counts a letter once). Guess the most common letter that is
    still available. Ties break with the seeded RNG.

Ignores the mask entirely, so it plays the same opening against every
dictionary of the same language.
"""

from __future__ import annotations
from collections import Counter
from typing import Iterable, List
from .base import BaseGuesser, register


def distinct_letter_counts(words: Iterable[str]) -> Counter[str]:
    """Number of words containing each letter."""
    counts: Counter[str] = Counter()
    for w in words:
        counts.update(set(w))
    return counts


def best_letters(counts: Counter[str], remaining: List[str]) -> List[str]:
    """All remaining letters sharing the top count (in `remaining` order)."""
    best_score = None
    best: List[str] = []
    for ch in remaining:
        s = counts[ch]
        if best_score is None or s > best_score:
            best_score, best = s, [ch]
        elif s == best_score:
            best.append(ch)
    return best


@register
class LetterFreqGuesser(BaseGuesser):
    id = "letter_freq"
    name = "Letter Frequency (dictionary)"
    version = "1.0.0"

    def __init__(self):
        super().__init__()
        self._counts: Counter[str] = Counter()

    def reset(self, *, dictionary: List[str], seed: int | None = None) -> None:
        super().reset(dictionary=dictionary, seed=seed)
        self._counts = distinct_letter_counts(self.dictionary)

    def next_letter(self, state: dict) -> str:
        remaining: List[str] = state["remaining"]
        return self._pick(best_letters(self._counts, remaining))
