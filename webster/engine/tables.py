"""
Lookup tables built once from the full word list.

PositionIndex   : (position, letter) -> words with that letter at that position
FrequencyIndex  : (count, letter)    -> words containing the letter exactly
                  `count` times (count >= 1; absent letters get no entry)

Both are read-only after construction, so one pair of tables can be shared by
any number of games. A missing key is not an error: it just means no word in
the list has that configuration, and `get` returns an empty set.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from typing import Dict, FrozenSet, Iterable, Tuple

EMPTY: FrozenSet[str] = frozenset()


def _word_length(words: Iterable[str]) -> int:
    for w in words:
        return len(w)
    return 0


class PositionIndex:
    def __init__(self, words: Iterable[str]):
        words = list(words)
        buckets: Dict[Tuple[int, str], set] = defaultdict(set)
        for w in words:
            for pos, ch in enumerate(w):
                buckets[(pos, ch)].add(w)

        self.length = _word_length(words)
        self._buckets: Dict[Tuple[int, str], FrozenSet[str]] = {
            k: frozenset(v) for k, v in buckets.items()
        }

    def get(self, pos: int, letter: str) -> FrozenSet[str]:
        return self._buckets.get((pos, letter), EMPTY)

    def __len__(self) -> int:
        return len(self._buckets)


class FrequencyIndex:
    def __init__(self, words: Iterable[str]):
        words = list(words)
        buckets: Dict[Tuple[int, str], set] = defaultdict(set)
        for w in words:
            for ch, n in Counter(w).items():
                buckets[(n, ch)].add(w)

        self.length = _word_length(words)
        self._buckets: Dict[Tuple[int, str], FrozenSet[str]] = {
            k: frozenset(v) for k, v in buckets.items()
        }

    def get(self, count: int, letter: str) -> FrozenSet[str]:
        return self._buckets.get((count, letter), EMPTY)

    def __len__(self) -> int:
        return len(self._buckets)
