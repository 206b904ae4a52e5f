"""
Random Consistent solver.

Strategy:
  - Choose uniformly at random from the CURRENT candidate vocabulary.

Notes:
  - Deterministic across runs with the same seed (via BaseSolver.rng);
    Vocabulary.pick_one sorts before drawing.
"""

from __future__ import annotations

from webster.engine import Vocabulary
from .base import BaseSolver, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def next_guess(self, vocab: Vocabulary) -> str:
        return vocab.pick_one(self.rng)
