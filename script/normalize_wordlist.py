"""
Clean a word list file for bundling.

Features:
- Lowercases every token and splits on any whitespace (one word per output line).
- Drops tokens with letters outside the language alphabet (a–z + extras).
- Removes duplicates, preserving original order by default (stable dedupe).
- Optional sorting AFTER dedupe; otherwise keep input order.
- Overwrite in place by default, or write to a separate --out path.

Usage:
    python -m script.normalize_wordlist --in evilhangman/datasets/data/words_de.txt --language de
"""

import argparse
from pathlib import Path

from evilhangman.datasets import alphabet_for, get_language_codes, split_words, write_words
from evilhangman.datasets.io import read_word_blob


def unique_preserve_order(words: list[str]) -> list[str]:
    seen, out = set(), []
    for s in words:
        if s not in seen:
            seen.add(s)
            out.append(s)
    return out


def normalize(tokens: list[str], language: str, *, min_len: int = 1) -> list[str]:
    """Lowercase, alphabet-filter, dedupe (order kept)."""
    alphabet = set(alphabet_for(language))
    words = [t.lower() for t in tokens]
    words = [w for w in words if len(w) >= min_len and all(ch in alphabet for ch in w)]
    return unique_preserve_order(words)


def main():
    ap = argparse.ArgumentParser(description="Normalize a word list for a language.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--language", default="en", choices=get_language_codes())
    ap.add_argument("--min-len", type=int, default=1, help="drop words shorter than this")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe (otherwise keep original order)")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp
    tokens = split_words(read_word_blob(inp))
    out = normalize(tokens, args.language, min_len=args.min_len)
    if args.sort:
        out = sorted(out)

    write_words(out, outp)
    print(f"Input: {inp} ({len(tokens)} tokens) -> Output: {outp} ({len(out)} words)")


if __name__ == "__main__":
    main()
