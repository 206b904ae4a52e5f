"""
Build a clean word list for webster.

Sources (any mix):
- --url:  a page of past Wordle answers (rows like "YYYY-MM-DD (Day) <num> <ANSWER>")
- --in:   local text files, one word per line

Every word is lowercased, kept only if it is alphabetic with length N, and
de-duplicated while preserving first-seen order (optionally sorted).

Usage:
    python -m script.build_wordlist --url --out webster/datasets/data/words_5.txt
    python -m script.build_wordlist --in extra.txt --in more.txt --sort \
        --out webster/datasets/data/words_5.txt
"""

import re
import argparse
from typing import List

import requests
from bs4 import BeautifulSoup

from webster.datasets import normalize_words, read_lines, write_lines

URL = "https://wordlehints.co.uk/wordle-past-answers/"
ROW_RE = re.compile(r"(\d{4}-\d{2}-\d{2})\s*\([A-Za-z]+\)\s*\d+\s+([A-Z]+)\b")


def extract_answers(html: str) -> List[str]:
    """Pull the answer column out of the page's visible text."""
    text = BeautifulSoup(html, "html.parser").get_text("\n", strip=True)
    return [m.group(2).lower() for m in ROW_RE.finditer(text)]


def fetch_answers(url: str = URL) -> List[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return extract_answers(r.text)


def main():
    ap = argparse.ArgumentParser(description="Build a clean N-letter word list")
    ap.add_argument("--url", nargs="?", const=URL,
                    help=f"scrape past answers (default page: {URL})")
    ap.add_argument("--in", dest="inputs", action="append", default=[],
                    help="local word file (repeatable)")
    ap.add_argument("--length", type=int, default=5, help="word length to keep")
    ap.add_argument("--sort", action="store_true",
                    help="sort alphabetically instead of keeping input order")
    ap.add_argument("--out", default="webster/datasets/data/words_5.txt")
    args = ap.parse_args()

    if not args.url and not args.inputs:
        ap.error("give --url and/or at least one --in file")

    raw: List[str] = []
    if args.url:
        raw += fetch_answers(args.url)
    for path in args.inputs:
        raw += read_lines(path)

    words = normalize_words(raw, args.length)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Read {len(raw)} entries -> wrote {len(words)} unique words to {args.out}")


if __name__ == "__main__":
    main()
