"""
The candidate vocabulary: words still consistent with all feedback so far.

A Vocabulary only ever shrinks during a game. `preserve` keeps words that have
some property, `remove` drops words that have it. `union` exists so a filter
can collect several "acceptable" buckets in a scratch set and then apply them
with a single `preserve`.

Every operation accepts another Vocabulary or any plain set of words (the
index buckets are frozensets), and all of them are fine on empty sets.
"""

from __future__ import annotations

import random
from typing import AbstractSet, Iterable, Iterator, List, Union

WordSet = Union["Vocabulary", AbstractSet[str]]


def _words_of(other: WordSet) -> AbstractSet[str]:
    return other._words if isinstance(other, Vocabulary) else other


class Vocabulary:
    """A mutable set of equal-length lowercase words."""

    def __init__(self, words: Iterable[str] = ()):
        self._words = set(words)

    # ---- set algebra (in place) ----

    def preserve(self, other: WordSet) -> None:
        """Keep only words that are also in `other` (intersection)."""
        self._words &= _words_of(other)

    def remove(self, other: WordSet) -> None:
        """Drop every word that is in `other` (difference)."""
        self._words -= _words_of(other)

    def union(self, other: WordSet) -> None:
        """Add the words of `other`. Only used on scratch sets."""
        self._words |= _words_of(other)

    # ---- queries ----

    def total(self) -> int:
        return len(self._words)

    def sorted(self) -> List[str]:
        return sorted(self._words)

    def pick_one(self, rng: random.Random | None = None) -> str:
        """
        Return one candidate.

        Words are sorted before choosing so the result depends only on the
        contents and on `rng`'s state, never on set iteration order. Without
        an rng the alphabetically first word is returned.
        """
        if not self._words:
            raise ValueError("cannot pick a word from an empty vocabulary")
        pool = self.sorted()
        if rng is None:
            return pool[0]
        return pool[rng.randrange(len(pool))]

    def copy(self) -> "Vocabulary":
        return Vocabulary(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Vocabulary):
            return self._words == other._words
        if isinstance(other, (set, frozenset)):
            return self._words == other
        return NotImplemented

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Vocabulary({self.sorted()!r})"
