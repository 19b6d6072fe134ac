"""
Game session: the single owner of pool, alphabet state and cached mask.

Entry points used by a presentation layer:
  - initialize_or_reset(word_blob, extra_letters) : fresh session from raw text
  - new_game(language)                             : same, from a bundled list
  - GameSession.submit_guess(letter)               : the only mutating call in play
  - GameSession.current_view()                     : read-only projection
  - GameSession.reset() / change_language(code)    : rebuild everything at once

Every change swaps all fields in one assignment step, so a caller never sees
a pool from one game next to an alphabet from another.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

from evilhangman.datasets import (BASE_ALPHABET, DEFAULT_LANGUAGE, LANGUAGES, Language,
                                  get_language, load_words, split_words)
from evilhangman.engine import (CandidateWord, MAX_WRONG_GUESSES, guess, is_lost, is_won,
                                mask_word, rank, wrong_guesses)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameView:
    """What the player gets to see."""
    masked_word: str
    wrong_guess_count: int
    max_wrong_guesses: int
    is_won: bool
    is_lost: bool
    revealed_answer: str          # empty until the game is over
    guessed_letters: tuple
    remaining_letters: tuple

    @property
    def is_over(self) -> bool:
        return self.is_won or self.is_lost


@dataclass
class GameSession:
    words: List[CandidateWord] = field(default_factory=list)
    remaining_letters: List[str] = field(default_factory=list)
    guessed_letters: List[str] = field(default_factory=list)
    current_word: str = ""
    language: Language = DEFAULT_LANGUAGE

    # ---- play ----
    def submit_guess(self, letter: str) -> bool:
        """
        Apply one letter. Returns True if the guess was accepted; letters that
        are already guessed or not in the alphabet are a silent no-op.
        """
        res = guess(self.words, self.remaining_letters, self.guessed_letters, letter)
        if not res.accepted:
            logger.debug("ignored guess %r", letter)
            return False

        self.words, self.remaining_letters, self.guessed_letters, self.current_word = (
            res.pool, res.remaining, res.guessed, res.mask)
        logger.debug("guess %r accepted (%s); %d candidates left",
                     letter, "revealed" if res.revealed else "denied", len(self.words))
        return True

    @property
    def answer(self) -> str:
        """The word currently shown to the player (first pool word)."""
        return self.words[0].word

    def current_view(self) -> GameView:
        word = self.answer
        won = is_won(word, self.guessed_letters)
        lost = is_lost(word, self.guessed_letters)
        return GameView(
            masked_word=self.current_word,
            wrong_guess_count=wrong_guesses(word, self.guessed_letters),
            max_wrong_guesses=MAX_WRONG_GUESSES,
            is_won=won,
            is_lost=lost,
            revealed_answer=word if (won or lost) else "",
            guessed_letters=tuple(self.guessed_letters),
            remaining_letters=tuple(self.remaining_letters),
        )

    # ---- rebuild ----
    def _replace_with(self, other: "GameSession") -> None:
        self.words, self.remaining_letters, self.guessed_letters, self.current_word, self.language = (
            other.words, other.remaining_letters, other.guessed_letters,
            other.current_word, other.language)

    def reset(self) -> None:
        """Start over with the current language's bundled list."""
        self._replace_with(new_game(self.language))

    def change_language(self, code: str | Language) -> None:
        """Switch language; nothing from the old game carries over."""
        self._replace_with(new_game(code))


def initialize_or_reset(
        word_blob: str | Sequence[str],
        extra_alphabet_chars: Iterable[str] = (),
        language: str | Language = DEFAULT_LANGUAGE,
) -> GameSession:
    """
    Build a fresh session.

    Args:
      word_blob            : whitespace-delimited words, or an already split list
      extra_alphabet_chars : letters added after a–z (diacritics)
      language             : recorded on the session for reset/persistence

    Raises:
      ValueError if there are no words (a game needs a non-empty pool).
    """
    tokens = split_words(word_blob) if isinstance(word_blob, str) else list(word_blob)
    if not tokens:
        raise ValueError("cannot start a game with an empty word list")

    pool = rank(tokens)
    return GameSession(
        words=pool,
        remaining_letters=list(BASE_ALPHABET) + list(extra_alphabet_chars),
        guessed_letters=[],
        current_word=mask_word(pool[0].word, ()),
        language=get_language(language),
    )


def new_game(language: str | Language = DEFAULT_LANGUAGE) -> GameSession:
    """Fresh session from the bundled word list of `language`."""
    lang = get_language(language)
    cfg = LANGUAGES[lang]
    return initialize_or_reset(load_words(lang), cfg.extra_letters, lang)
