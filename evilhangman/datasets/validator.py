"""
Word-list validator for evilhangman.

The game itself treats word lists as opaque (tokens are used verbatim). This
module is the offline check you run before bundling a list:

- Load a whitespace-delimited word list for one language.
- Flag tokens that are not lowercase or use letters outside the language's
  alphabet (the player could never guess them).
- Detect duplicates; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Typical use:
    from evilhangman.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("evilhangman/datasets/data/words_de.txt", "de")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List
import hashlib

from .io import split_words
from .languages import alphabet_for, get_language

# Show at most this many offending tokens per issue.
MAX_EXAMPLES = 5


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class ValidationReport:
    """Validation result for one language word list."""
    language: str
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of tokens
    unique_count: int    # distinct tokens
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    invalid: List[str]   # tokens with characters outside the alphabet (examples)
    invalid_count: int
    duplicates: List[str]  # repeated tokens (examples)
    min_length: int
    max_length: int
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _is_valid_token(token: str, alphabet: set) -> bool:
    return bool(token) and all(ch in alphabet for ch in token)


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(path: str | Path, language: str) -> Dict:
    """
    Validate a word list against a language alphabet.

    Parameters
    ----------
    path : str | Path
        Word-list file (whitespace-delimited tokens).
    language : str
        Language code, e.g. "en" or "de".

    Returns
    -------
    Dict
        JSON-serializable dict (see ValidationReport). `passed` is strict:
        non-empty, no invalid tokens, no duplicates.
    """
    lang = get_language(language)
    p = Path(path)
    issues: List[str] = []

    if not p.exists():
        issues.append(f"word list not found: {path}")
        rep = ValidationReport(
            language=lang.value, path=str(path), exists=False, count=0, unique_count=0,
            sha256="", invalid=[], invalid_count=0, duplicates=[],
            min_length=0, max_length=0, passed=False, issues=issues,
        )
        return asdict(rep)

    tokens = split_words(p.read_text(encoding="utf-8"))
    alphabet = set(alphabet_for(lang))

    invalid = [t for t in tokens if not _is_valid_token(t, alphabet)]
    counts = Counter(tokens)
    dupes = [t for t, c in counts.items() if c > 1]
    lengths = [len(t) for t in tokens]

    if not tokens:
        issues.append("word list contains 0 tokens")
    if invalid:
        issues.append(f"{len(invalid)} token(s) outside the {lang.value} alphabet "
                      f"(e.g., {invalid[:MAX_EXAMPLES]})")
    if dupes:
        issues.append(f"{len(dupes)} duplicate token(s) (e.g., {dupes[:MAX_EXAMPLES]})")

    rep = ValidationReport(
        language=lang.value,
        path=str(p),
        exists=True,
        count=len(tokens),
        unique_count=len(counts),
        sha256=_sha256_file(p),
        invalid=invalid[:MAX_EXAMPLES],
        invalid_count=len(invalid),
        duplicates=dupes[:MAX_EXAMPLES],
        min_length=min(lengths, default=0),
        max_length=max(lengths, default=0),
        passed=bool(tokens) and not invalid and not dupes,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        lang=en | words=212 (uniq=212, len 3-9, sha=abc123...) | invalid=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"lang={report['language']} | words={report['count']} "
        f"(uniq={report['unique_count']}, len {report['min_length']}-{report['max_length']}, sha={sha}) "
        f"| invalid={report['invalid_count']} | {status}"
    )
