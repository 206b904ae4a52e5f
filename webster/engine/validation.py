"""
Input checks at the edge of the engine.

Feedback typed by a person (or read from a file) is turned into Hint values
here, once. Anything malformed is rejected with HintFormatError so the caller
can ask again; the filtering code only ever sees well-formed tuples.
"""

from typing import Iterable, Set, Tuple

from .hints import Hint

# Accepted characters -> Hint. '-' lets 'G/Y/-' style patterns through too.
_SYMBOLS = {
    "G": Hint.CORRECT,
    "Y": Hint.PRESENT,
    "B": Hint.ABSENT,
    "-": Hint.ABSENT,
}


class HintFormatError(ValueError):
    """Raised when a feedback string cannot be turned into hints."""


def parse_hints(text: str, N: int) -> Tuple[Hint, ...]:
    """
    Convert a feedback string such as "bbygb" into a tuple of Hint.

    Raises:
      HintFormatError if the string does not have exactly N symbols or uses
      anything other than B, Y and G.
    """
    s = text.strip().upper()

    if len(s) != N:
        raise HintFormatError(f"hints must contain {N} characters")

    if any(ch not in _SYMBOLS for ch in s):
        raise HintFormatError("only letters in hints are B, Y, and G")

    return tuple(_SYMBOLS[ch] for ch in s)


def validate_guess(word: str, allowed: Iterable[str], N: int) -> bool:
    """
    Return True if `word` is alphabetic, has length N and is in `allowed`.
    """
    if not isinstance(word, str):
        return False

    w = word.strip().lower()
    if len(w) != N or not w.isalpha():
        return False

    allowed_set: Set[str] = {a.strip().lower() for a in allowed}
    return w in allowed_set
