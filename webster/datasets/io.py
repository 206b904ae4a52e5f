from __future__ import annotations
from pathlib import Path
from typing import Iterable, List

DATA_DIR = Path(__file__).resolve().parent / "data"


def default_wordlist_path(N: int = 5) -> Path:
    """Path of the bundled word list for length N (words_N.txt)."""
    return DATA_DIR / f"words_{N}.txt"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def normalize_words(lines: Iterable[str], N: int) -> List[str]:
    """
    Lowercase and strip each entry, keep only alphabetic words of length N,
    and drop repeats while keeping first-seen order.
    """
    seen = set()
    out: List[str] = []
    for ln in lines:
        w = ln.strip().lower()
        if len(w) != N or not w.isalpha() or w in seen:
            continue
        seen.add(w)
        out.append(w)
    return out


def load_words(p: Path | str, N: int = 5) -> List[str]:
    """Read a word list file and return its clean length-N words."""
    return normalize_words(read_lines(p), N)
