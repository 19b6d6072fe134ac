"""
Pool ranking (initial candidate ordering).

Given:
  - a list of raw word tokens (one language resource, split on whitespace)

Return:
  - the same words wrapped as CandidateWord, ordered by descending
    "frequency score".

Score of a word = sum, over its DISTINCT letters, of how often that letter
occurs across the WHOLE pool (repeats inside the pool count, repeats inside
the word being scored do not). Words built from common letters float to the
top, so the adversary's displayed word tends to be a "hard" one.

Scores are computed once per pool initialization and never refreshed while
the pool shrinks; they only drive the initial order.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List


@dataclass
class CandidateWord:
    """One dictionary entry still consistent with every guess so far."""
    word: str
    char_count: Dict[str, int] = field(default_factory=dict)
    score: int = 0
    scale: float = 1.0   # display-only; carried so saved games round-trip

    @classmethod
    def from_text(cls, word: str) -> "CandidateWord":
        return cls(word=word, char_count=dict(Counter(word)))


def letter_frequency(words: Iterable[CandidateWord]) -> Counter[str]:
    """
    Global letter table: per-character counts summed across every word.
    """
    freq: Counter[str] = Counter()
    for w in words:
        freq.update(w.char_count)
    return freq


def score_word(word: str, freq: Dict[str, int]) -> int:
    """
    Sum letter frequencies but count each letter at most once per word
    ('sleet' gets no bonus for its second 'e').
    """
    return sum(freq.get(ch, 0) for ch in set(word))


def rank(word_list: Iterable[str]) -> List[CandidateWord]:
    """
    Build the ordered candidate pool from raw tokens.

    Tokens are used verbatim (no dedupe, no alphabet check). The sort is
    stable, so equal scores keep input order.
    """
    pool = [CandidateWord.from_text(w) for w in word_list]
    freq = letter_frequency(pool)
    for w in pool:
        w.score = score_word(w.word, freq)
    return sorted(pool, key=lambda w: w.score, reverse=True)
