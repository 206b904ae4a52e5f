"""
Alphabetical solver: always guesses the first remaining candidate.

Useful for tests and for reproducing a game by hand, since it ignores the RNG.
"""

from __future__ import annotations

from webster.engine import Vocabulary
from .base import BaseSolver, register


@register
class FirstAlphaSolver(BaseSolver):
    id = "first_alpha"
    name = "First Alphabetical"
    version = "1.0.0"

    def next_guess(self, vocab: Vocabulary) -> str:
        return vocab.pick_one()
