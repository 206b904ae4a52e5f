"""
Candidate filtering for one round of feedback.

Given:
  - the current candidate vocabulary
  - a guess and its per-position hints
  - the PositionIndex / FrequencyIndex built from the full word list

Return:
  - a narrower vocabulary that keeps every word consistent with the hints.

Two phases, always in this order:

  1) Positional. CORRECT keeps words with the letter at that position.
     PRESENT keeps words with the letter somewhere else and drops words with
     it at that position. ABSENT does nothing here.
  2) Frequency. The hints are folded into per-letter bounds (see bounds.py).
     Words whose count of a letter falls outside its bound are dropped; the
     in-range buckets of all letters are unioned into a scratch set that the
     vocabulary is then intersected with.

Phase 2 only sees aggregated counts, so running it first would lose the
"not at this position" information that phase 1 applies.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from .bounds import build_bounds
from .hints import Hint
from .tables import FrequencyIndex, PositionIndex
from .vocabulary import Vocabulary


class ConstraintEngine:
    """
    Holds the two read-only indices and applies rounds of feedback.

    The engine keeps no per-game state, so one instance can serve several
    games at once; each game owns its own Vocabulary.
    """

    def __init__(self, positions: PositionIndex, frequencies: FrequencyIndex):
        self.positions = positions
        self.frequencies = frequencies
        self.N = positions.length

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "ConstraintEngine":
        words = list(words)
        return cls(PositionIndex(words), FrequencyIndex(words))

    def filter_positions(self, vocab: Vocabulary, guess: str, hints: Sequence[Hint]) -> None:
        """Phase 1: apply CORRECT / PRESENT tiles to `vocab` in place."""
        for pos, (ch, hint) in enumerate(zip(guess, hints)):
            if hint is Hint.ABSENT:
                continue

            here = self.positions.get(pos, ch)

            if hint is Hint.CORRECT:
                vocab.preserve(here)
            elif hint is Hint.PRESENT:
                # Words with the letter in any *other* position.
                elsewhere = Vocabulary()
                for other in range(self.N):
                    if other != pos:
                        elsewhere.union(self.positions.get(other, ch))

                if elsewhere.total() > 0:
                    vocab.preserve(elsewhere)

                vocab.remove(here)

    def filter_frequencies(self, vocab: Vocabulary, guess: str, hints: Sequence[Hint]) -> None:
        """Phase 2: enforce per-letter occurrence bounds on `vocab` in place."""
        bounds = build_bounds(guess, hints, self.N)
        keep = Vocabulary()

        for ch, bound in bounds.items():
            for n in range(1, self.N + 1):
                bucket = self.frequencies.get(n, ch)
                if bound.allows(n):
                    keep.union(bucket)
                else:
                    vocab.remove(bucket)

        if keep.total() > 0:
            vocab.preserve(keep)

    def apply(self, vocab: Vocabulary, guess: str, hints: Sequence[Hint]) -> Vocabulary:
        """
        Return a new vocabulary narrowed by one (guess, hints) round.

        `vocab` itself is left untouched.
        """
        guess = guess.strip().lower()
        out = vocab.copy()
        self.filter_positions(out, guess, hints)
        self.filter_frequencies(out, guess, hints)
        return out
