"""
Per-letter occurrence bounds inferred from one round of feedback.

Feedback is given per *tile*, so a letter guessed twice earns two hints. They
are folded together, in guess order, into a LetterBound: the inclusive range
of how many times the letter can appear in the secret.

  - first hint seeds the bound:  ABSENT -> (0, 0), PRESENT/CORRECT -> (1, L)
  - later hints update it:       ABSENT -> high = low
                                 PRESENT/CORRECT -> low += 1, high = max(low, high)

An ABSENT next to a PRESENT/CORRECT of the same letter therefore means "no
more than the confirmed ones", not "not in the word".

Once every tile is folded in, each confirmed letter's upper bound is capped by
what the other letters leave over: L minus the sum of their lower bounds.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Sequence

from .hints import Hint


@dataclass
class LetterBound:
    low: int
    high: int

    @classmethod
    def seed(cls, hint: Hint, N: int) -> "LetterBound":
        if hint is Hint.ABSENT:
            return cls(0, 0)
        return cls(1, N)

    def update(self, hint: Hint) -> None:
        if hint is Hint.ABSENT:
            self.high = self.low
        elif hint is Hint.PRESENT or hint is Hint.CORRECT:
            self.low += 1
            self.high = max(self.low, self.high)

    def allows(self, count: int) -> bool:
        return self.low <= count <= self.high

    def as_tuple(self):
        return self.low, self.high


def fold_hints(hints: Sequence[Hint], N: int) -> LetterBound:
    """Bound for a single letter given its hints in guess order."""
    bound = LetterBound.seed(hints[0], N)
    for hint in hints[1:]:
        bound.update(hint)
    return bound


def build_bounds(guess: str, hints: Sequence[Hint], N: int | None = None) -> Dict[str, LetterBound]:
    """
    Build the letter -> LetterBound table for one (guess, hints) pair.

    Example (N=5):
      build_bounds("aacbd", Y Y B Y B) -> {a: (2, 4), c: (0, 0), b: (1, 3), d: (0, 0)}
    """
    if N is None:
        N = len(guess)

    table: Dict[str, LetterBound] = {}
    for ch, hint in zip(guess, hints):
        if ch in table:
            table[ch].update(hint)
        else:
            table[ch] = LetterBound.seed(hint, N)

    # Total letters in the secret is N, so the confirmed occurrences of the
    # other letters shrink each letter's maximum.
    confirmed = {ch: b.low for ch, b in table.items() if b.low > 0}
    for ch in confirmed:
        others = sum(n for other, n in confirmed.items() if other != ch)
        table[ch].high = min(table[ch].high, N - others)

    return table
