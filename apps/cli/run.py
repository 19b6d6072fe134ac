# apps/cli/run.py
"""
CLI entry point for benchmarking guessers against the adversary.

This script:
  1) Validates the word list (prints counts + SHA, flags letters outside the alphabet).
  2) Loads the list and instantiates each requested guesser.
  3) Runs a batch of games per guesser with a live progress indicator and writes:
       - CSV:  per-game results under <outdir>/<guesser_id>/
       - JSON: manifest with config, word-list report, numpy summary, git commit
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Dict, List

from tqdm import tqdm

from evilhangman.datasets import (LANGUAGES, get_language, get_language_codes, load_words,
                                  pretty_summary, resource_path, validate_wordlist)
from evilhangman.guessers import create_guesser, get_guesser_ids
from evilhangman.harness import run_game, summarize
from evilhangman.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown


def _progress_mode(mode: str) -> str:
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return mode


def _run_one_guesser(guesser_id: str, words: List[str], *, extra: List[str], games: int,
                     base_seed: int, progress: str) -> List[Dict]:
    guesser = create_guesser(guesser_id)
    mode = _progress_mode(progress)
    cases = range(1, games + 1)
    iterator = tqdm(cases, ncols=80, desc=guesser_id, unit="game") if mode == "bar" else cases

    results = []
    start = time.time()
    last_print = 0.0
    for idx in iterator:
        # Derive a per-game seed so runs are reproducible and independent
        per_seed = base_seed + idx * 1013904223
        r = run_game(guesser, words, extra_alphabet_chars=extra, seed=per_seed)
        r["guesser_id"] = guesser.id  # stamp id for downstream tools
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == games):
                elapsed = now - start
                pct = 100.0 * idx / max(1, games)
                sys.stderr.write(f"\r[{guesser_id}] {idx}/{games} {pct:5.1f}% | elapsed {elapsed:6.1f}s")
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()
    return results


def main():
    """
    Parse CLI args, validate the word list, run each guesser, and write outputs.
    """
    registered = get_guesser_ids()

    ap = argparse.ArgumentParser(description="evilhangman: benchmark guessers against the adversary")
    ap.add_argument("--guessers", nargs="+", default=["letter_freq"],
                    help=f"guesser ids or 'ALL'. Registered: {', '.join(registered)}")
    ap.add_argument("--language", default="en", choices=get_language_codes(),
                    help="language (alphabet + default word list)")
    ap.add_argument("--wordlist", help="word list file (default: bundled list for --language)")
    ap.add_argument("--games", type=int, default=20, help="games per guesser")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["auto", "bar", "plain", "off"], default="auto",
                    help="Show run progress (auto=bar on a terminal, else plain text).")
    ap.add_argument("--verbose", action="store_true", help="debug logging")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="[%(levelname)s] %(name)s: %(message)s")

    lang = get_language(args.language)
    wordlist = args.wordlist or str(resource_path(lang))

    # 1) Validate the word list and print a one-liner summary
    rep = validate_wordlist(wordlist, lang.value)
    print(pretty_summary(rep))

    # 2) Load tokens (verbatim) and the language's extra letters
    words = load_words(path=wordlist)
    extra = list(LANGUAGES[lang].extra_letters)

    # 3) Expand guessers
    if len(args.guessers) == 1 and args.guessers[0].lower() == "all":
        todo = registered
    else:
        todo = args.guessers
        missing = [g for g in todo if g not in registered]
        if missing:
            raise SystemExit(f"Unknown guesser ids: {missing}. Registered: {registered}")

    outdir = Path(args.outdir)
    run_id = timestamp_id()

    # 4) Run each guesser and write outputs under <outdir>/<guesser_id>/
    for gid in todo:
        if args.progress != "off":
            print(f"\n=== Running {gid}: {args.games} games ({lang.value}) ===")
        results = _run_one_guesser(gid, words, extra=extra, games=args.games,
                                   base_seed=args.seed, progress=args.progress)
        summary = summarize(results)

        gdir = outdir / gid
        csv_path = write_csv(results, str(gdir / f"run_{run_id}.csv"), language=lang.value)
        manifest = {
            "run_id": run_id,
            "git_commit": git_commit_or_unknown(),
            "config": vars(args),
            "wordlist": rep,
            "guesser_id": gid,
            "summary": summary,
        }
        manifest_path = write_manifest(manifest, str(gdir / f"run_{run_id}_manifest.json"))

        print(f"win_rate={summary['win_rate']:.3f} | mean_guesses={summary['mean_guesses']:.2f} "
              f"| mean_wrong={summary['mean_wrong']:.2f}")
        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
