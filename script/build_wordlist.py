"""
Build a clean N-letter word list for wordstar.

What it does:
- Reads words from a local file (--in) or downloads them (--url). Plain-text
  responses are split into lines; HTML pages are reduced to visible text with
  BeautifulSoup first.
- Keeps lowercase alphabetic tokens of exactly N letters.
- De-duplicates while preserving source order (or sorts with --sort).
- Writes one word per line.

Usage:
    python -m script.build_wordlist --in raw_words.txt --N 5 \
        --out wordstar/datasets/data/words_5.txt
    python -m script.build_wordlist --url https://example.org/words.txt --N 6 --sort \
        --out words_6.txt
"""

import argparse
import re
from pathlib import Path

import requests
from bs4 import BeautifulSoup  # pip install beautifulsoup4 requests

from wordstar.datasets.io import read_lines, write_lines

TOKEN_RE = re.compile(r"[^\W\d_]+")  # runs of letters, any alphabet


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def fetch_text(url: str) -> str:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    if "html" in r.headers.get("Content-Type", ""):
        return BeautifulSoup(r.text, "html.parser").get_text("\n", strip=True)
    return r.text


def extract_words(lines, N: int) -> list[str]:
    """Lowercased N-letter tokens, in order of first appearance."""
    words = []
    for line in lines:
        for tok in TOKEN_RE.findall(line):
            w = tok.lower()
            if len(w) == N:
                words.append(w)
    return unique_preserve_order(words)


def main():
    ap = argparse.ArgumentParser(description="Build an N-letter word list")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--in", dest="inp", help="local text file")
    src.add_argument("--url", help="download from this URL")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--out", required=True, help="output file")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "source order")
    args = ap.parse_args()

    if args.inp:
        lines = read_lines(Path(args.inp))
    else:
        lines = fetch_text(args.url).splitlines()

    words = extract_words(lines, args.N)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} unique {args.N}-letter words -> {args.out}")


if __name__ == "__main__":
    main()
