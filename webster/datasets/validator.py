"""
Word-list validator.

What this module does:
- Validate a word list file (one word per line) for a given length N.
- Enforce formatting rules (lowercase, a-z only, exact length N).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Typical use:
    from webster.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist(5, "webster/datasets/data/words_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


@dataclass
class WordlistReport:
    N: int
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words
    unique_count: int    # unique valid words
    invalid_lines: int   # lines that are not a clean N-letter lowercase word
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Returns (valid_words, invalid_count). Blank lines count as invalid;
    uppercase words are invalid even if they would be fine lowercased.
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w == w.lower() and w.isalpha() and len(w) == N:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def validate_wordlist(N: int, path: str) -> Dict:
    """
    Validate a word list for length N.

    Returns a JSON-serializable dict (see WordlistReport). `passed` is strict:
    the file exists, holds at least one word, and has no invalid or
    duplicate lines.
    """
    p = Path(path)
    if not p.exists():
        rep = WordlistReport(N, str(path), False, 0, 0, 0, "", False,
                             [f"word list not found: {path}"])
        return asdict(rep)

    words, invalid = _load_and_check(p, N)
    unique = len(set(words))

    issues: List[str] = []
    if not words:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if unique != len(words):
        issues.append("word list contains duplicate lines")

    rep = WordlistReport(
        N=N,
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=unique,
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        passed=not issues,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Example:
        N=5 | words=2315 (uniq=2315, invalid=0, sha=abc123def456) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) | {status}"
    )
