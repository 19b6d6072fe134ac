"""
Scrape words from a web page and write a clean word list for one language.

What it does:
- Downloads the page (any HTML vocabulary list works).
- Parses visible text with BeautifulSoup and extracts alphabetic tokens.
- Keeps tokens made only of the language's letters, lowercased, de-duplicated
  in page order; optional length bounds.

Usage:
    python -m script.fetch_wordlist --url https://example.org/common-words \
        --language en --out evilhangman/datasets/data/words_en.txt
"""

import re
import argparse

import requests
from bs4 import BeautifulSoup

from script.normalize_wordlist import normalize
from evilhangman.datasets import get_language_codes, write_words

TOKEN_RE = re.compile(r"[^\W\d_]+")


def extract_words(html: str) -> list[str]:
    """All alphabetic runs in the page's visible text, in order."""
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(["script", "style"]):
        tag.decompose()
    text = soup.get_text("\n", strip=True)
    return TOKEN_RE.findall(text)


def fetch_words(url: str, language: str, *, min_len: int = 3, max_len: int = 12) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    words = normalize(extract_words(r.text), language, min_len=min_len)
    return [w for w in words if len(w) <= max_len]


def main():
    ap = argparse.ArgumentParser(description="Fetch a word list from a web page")
    ap.add_argument("--url", required=True)
    ap.add_argument("--language", default="en", choices=get_language_codes())
    ap.add_argument("--out", required=True)
    ap.add_argument("--min-len", type=int, default=3)
    ap.add_argument("--max-len", type=int, default=12)
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping page order")
    args = ap.parse_args()

    words = fetch_words(args.url, args.language, min_len=args.min_len, max_len=args.max_len)
    if args.sort:
        words = sorted(words)

    write_words(words, args.out)
    print(f"Wrote {len(words)} words -> {args.out}")


if __name__ == "__main__":
    main()
