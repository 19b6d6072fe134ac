"""
Experiment harness core primitives.

- run_game:  one adversarial game with a given guesser, until win or loss.
- run_batch: many games in sequence (per-game seeds derived from a base seed).
- summarize: numpy aggregates over a batch (win rate, guess counts).

The adversary is deterministic for a fixed pool; only guesser tie-breaks
vary with the seed. These functions are UI-agnostic so they can be reused by
the CLI, a notebook, or tests.
"""

from __future__ import annotations
import time
from typing import Dict, Iterable, List, Sequence

import numpy as np

from evilhangman.engine import compact_mask
from evilhangman.session import initialize_or_reset


def run_game(
        guesser,
        words: Sequence[str],
        *,
        extra_alphabet_chars: Iterable[str] = (),
        seed: int | None = None,
) -> Dict:
    """
    Play one game to completion.

    Args:
        guesser:              an object implementing BaseGuesser.next_letter(state)
        words:                word tokens (also given to the guesser as its dictionary)
        extra_alphabet_chars: language letters beyond a–z
        seed:                 RNG seed so guesser tie-breaks are reproducible

    Returns:
        dict with keys:
            won, lost (bool), guesses, wrong_guesses (int), letters (list[str]),
            pool_sizes (list[int], after each guess), answer (str), time_ms (float)
    """
    session = initialize_or_reset(words, extra_alphabet_chars)
    guesser.reset(dictionary=words, seed=seed)

    letters: List[str] = []
    pool_sizes: List[int] = []
    view = session.current_view()

    t0 = time.perf_counter_ns()
    while not view.is_over and session.remaining_letters:
        state = {
            "turn": len(letters) + 1,
            "pattern": compact_mask(session.answer, session.guessed_letters),
            "guessed": list(session.guessed_letters),
            "remaining": list(session.remaining_letters),
            "wrong_guesses": view.wrong_guess_count,
            "max_wrong_guesses": view.max_wrong_guesses,
        }
        letter = guesser.next_letter(state)
        if not session.submit_guess(letter):
            raise ValueError(f"{guesser.id} proposed an unavailable letter: {letter!r}")

        letters.append(letter)
        pool_sizes.append(len(session.words))
        view = session.current_view()

    dt = (time.perf_counter_ns() - t0) / 1_000_000.0
    return {
        "won": view.is_won,
        "lost": view.is_lost,
        "guesses": len(letters),
        "wrong_guesses": view.wrong_guess_count,
        "letters": letters,
        "pool_sizes": pool_sizes,
        "answer": session.answer,
        "time_ms": dt,
    }


def run_batch(
        guesser,
        words: Sequence[str],
        *,
        games: int,
        extra_alphabet_chars: Iterable[str] = (),
        seed: int | None = None,
) -> List[Dict]:
    """
    Run `games` games back-to-back. Each game's seed is derived from the base
    seed (seed + index) so runs are reproducible but not identical.
    """
    extra = list(extra_alphabet_chars)
    out: List[Dict] = []
    for idx in range(1, games + 1):
        game_seed = None if seed is None else (seed + idx)
        out.append(run_game(guesser, words, extra_alphabet_chars=extra, seed=game_seed))
    return out


def summarize(results: List[Dict]) -> Dict:
    """
    Aggregate a batch. Empty input gives zeros.
    """
    if not results:
        return {"games": 0, "win_rate": 0.0, "mean_guesses": 0.0, "p90_guesses": 0.0,
                "mean_wrong": 0.0, "mean_time_ms": 0.0}

    won = np.array([r["won"] for r in results], dtype=float)
    guesses = np.array([r["guesses"] for r in results], dtype=float)
    wrong = np.array([r["wrong_guesses"] for r in results], dtype=float)
    times = np.array([r["time_ms"] for r in results], dtype=float)
    return {
        "games": len(results),
        "win_rate": float(won.mean()),
        "mean_guesses": float(guesses.mean()),
        "p90_guesses": float(np.percentile(guesses, 90)),
        "mean_wrong": float(wrong.mean()),
        "mean_time_ms": float(times.mean()),
    }
