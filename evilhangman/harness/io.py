"""
I/O utilities for experiment runs.

Responsibilities:
- write_csv:      flatten per-game results into a tidy CSV (one row per game).
- write_manifest: dump a JSON manifest with config, summary and metadata.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

FIELDS = ["guesser", "language", "answer", "won", "guesses", "wrong_guesses", "time_ms",
          "letters", "pool_sizes"]


def write_csv(results: List[Dict], path: str, language: str) -> str:
    """
    Serialize a batch of game results to CSV.

    Schema (columns):
      guesser, language, answer, won, guesses, wrong_guesses, time_ms,
      letters (concatenated in guess order), pool_sizes (space separated)

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()

        for r in results:
            w.writerow({
                "guesser": r.get("guesser_id", "?"),
                "language": language,
                "answer": r["answer"],
                "won": r["won"],
                "guesses": r["guesses"],
                "wrong_guesses": r["wrong_guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
                "letters": "".join(r.get("letters", [])),
                "pool_sizes": " ".join(str(n) for n in r.get("pool_sizes", [])),
            })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Dump one guesser's run manifest (config, word-list report, summary) as
    indented UTF-8 JSON. Returns the path written.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, ensure_ascii=False)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
