from __future__ import annotations
import random
from typing import Dict, Type

from webster.engine import Vocabulary

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    """
    Chooses the next guess from the current candidates.

    Solvers only pick; they never filter. Seeding goes through `reset` so a
    game can be replayed word for word.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.rng = random.Random()

    def reset(self, *, seed: int | None = None) -> None:
        if seed is not None:
            self.rng.seed(seed)

    def next_guess(self, vocab: Vocabulary) -> str:
        raise NotImplementedError("Override in subclass")
