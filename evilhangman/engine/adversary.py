"""
Adversarial filter: shrink the candidate pool after one letter guess.

The secret word is never fixed. After each guess the engine keeps whichever
group of candidates is worst for the guesser while staying consistent with
everything revealed so far:

  1) If ANY candidate lacks the letter, keep exactly the candidates that lack
     it (deny the letter outright, regardless of group sizes).
  2) Otherwise every candidate contains the letter. Bucket candidates by the
     positions the letter occupies (pattern: the letter kept, everything else
     '.'), and keep the biggest bucket.

Tie-break for equal buckets: the bucket whose first member comes earliest in
the current pool order. Buckets are built in pool order, so a plain max() over
insertion-ordered dict values gives exactly that.

This is a greedy one-step heuristic, not a search over future guesses.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence

from .ranking import CandidateWord
from .view import mask_word

logger = logging.getLogger(__name__)

PLACEHOLDER = "."


@dataclass
class GuessResult:
    """Outcome of one guess; lists are fresh copies, inputs are untouched."""
    pool: List[CandidateWord]
    remaining: List[str]
    guessed: List[str]
    mask: str
    accepted: bool   # False when the letter was not available (no-op)
    revealed: bool   # True when the letter now shows up in the pool's words


def pattern_of(word: str, letter: str) -> str:
    """
    Signature of `word` for `letter`: e.g. pattern_of("banana", "a") -> ".a.a.a".
    """
    return "".join(ch if ch == letter else PLACEHOLDER for ch in word)


def partition(pool: Sequence[CandidateWord], letter: str) -> Dict[str, List[CandidateWord]]:
    """
    Group words by pattern_of(word, letter). Keys are inserted in order of
    first appearance in `pool`; members keep pool order.
    """
    classes: Dict[str, List[CandidateWord]] = {}
    for w in pool:
        classes.setdefault(pattern_of(w.word, letter), []).append(w)
    return classes


def select_class(classes: Dict[str, List[CandidateWord]]) -> List[CandidateWord]:
    """Largest class; on equal size, the one created first."""
    return max(classes.values(), key=len)


def filter_pool(pool: Sequence[CandidateWord], letter: str) -> List[CandidateWord]:
    """
    Return the adversary's surviving subset of `pool` for `letter`.
    Never empty for a non-empty pool.
    """
    without = [w for w in pool if letter not in w.word]
    if without:
        logger.debug("deny %r: %d -> %d candidates", letter, len(pool), len(without))
        return without

    kept = select_class(partition(pool, letter))
    logger.debug("reveal %r: %d -> %d candidates", letter, len(pool), len(kept))
    return kept


def guess(
        pool: Sequence[CandidateWord],
        remaining: Sequence[str],
        guessed: Sequence[str],
        letter: str,
) -> GuessResult:
    """
    Apply one letter guess.

    Args:
      pool      : current ordered candidate pool (non-empty)
      remaining : letters not guessed yet
      guessed   : letters already guessed, in guess order
      letter    : single character

    Returns:
      GuessResult. If `letter` is not in `remaining` (already guessed, or not
      part of the alphabet) the result carries the inputs unchanged with
      accepted=False.
    """
    if not pool:
        raise ValueError("guess() needs a non-empty pool")
    if len(letter) != 1:
        raise ValueError(f"letter must be a single character; got {letter!r}")

    if letter not in remaining:
        return GuessResult(
            pool=list(pool), remaining=list(remaining), guessed=list(guessed),
            mask=mask_word(pool[0].word, guessed), accepted=False, revealed=False,
        )

    new_remaining = [c for c in remaining if c != letter]
    new_guessed = list(guessed) + [letter]
    new_pool = filter_pool(pool, letter)

    return GuessResult(
        pool=new_pool,
        remaining=new_remaining,
        guessed=new_guessed,
        mask=mask_word(new_pool[0].word, new_guessed),
        accepted=True,
        revealed=letter in new_pool[0].word,
    )
