from .ranking import CandidateWord, letter_frequency, score_word, rank
from .adversary import GuessResult, pattern_of, partition, filter_pool, guess
from .view import (MAX_WRONG_GUESSES, mask_word, compact_mask, wrong_guesses,
                   is_won, is_lost)

__all__ = [
    "CandidateWord", "letter_frequency", "score_word", "rank",
    "GuessResult", "pattern_of", "partition", "filter_pool", "guess",
    "MAX_WRONG_GUESSES", "mask_word", "compact_mask", "wrong_guesses",
    "is_won", "is_lost",
]
