"""
Game sessions and simulated play.

- Session:   one game's state machine (SEARCHING -> SOLVED | EXHAUSTED).
- run_case:  play one simulated game against a known secret.
- run_batch: run many simulated games in sequence (optionally a sample prefix).

A Session owns its Vocabulary; the ConstraintEngine (and its indices) can be
shared between sessions because nothing mutates it after construction.
EXHAUSTED is a normal outcome: it means the feedback fed in so far is
contradictory, most likely a mistyped hint.
"""

from __future__ import annotations

import time
from enum import Enum
from typing import Dict, Iterable, List, Sequence, Tuple

from webster.engine import ConstraintEngine, Hint, Vocabulary, is_solved, score


class SessionState(Enum):
    SEARCHING = "searching"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


class Session:
    def __init__(self, engine: ConstraintEngine, words: Iterable[str]):
        self.engine = engine
        self.vocab = Vocabulary(words)
        self.history: List[Tuple[str, Tuple[Hint, ...]]] = []
        self.state = SessionState.SEARCHING if self.vocab.total() else SessionState.EXHAUSTED

    @property
    def rounds(self) -> int:
        return len(self.history)

    @property
    def done(self) -> bool:
        return self.state is not SessionState.SEARCHING

    def guess(self, solver) -> str:
        """Ask `solver` for the next guess from the current candidates."""
        if self.done:
            raise RuntimeError(f"session is already {self.state.value}")
        return solver.next_guess(self.vocab)

    def feedback(self, guess: str, hints: Sequence[Hint]) -> SessionState:
        """
        Record one round of feedback and narrow the candidates.

        All-CORRECT hints end the game without filtering; otherwise the
        engine runs and an empty result ends it as EXHAUSTED.
        """
        if self.done:
            raise RuntimeError(f"session is already {self.state.value}")

        hints = tuple(hints)
        self.history.append((guess, hints))

        if is_solved(hints):
            self.state = SessionState.SOLVED
            return self.state

        self.vocab = self.engine.apply(self.vocab, guess, hints)
        if self.vocab.total() == 0:
            self.state = SessionState.EXHAUSTED
        return self.state


def run_case(
        engine: ConstraintEngine,
        words: Iterable[str],
        secret: str,
        solver,
        *,
        seed: int | None = None,
        max_turns: int | None = None,
) -> Dict:
    """
    Play one game against `secret` using honest feedback.

    Args:
        engine:    shared ConstraintEngine built from the full word list
        words:     starting candidates (normally the same full list)
        secret:    the hidden word for this case
        solver:    an object implementing BaseSolver
        seed:      RNG seed to make solver choices reproducible
        max_turns: stop after this many rounds (None = play until the game ends)

    Returns:
        dict with keys:
            answer, success, state, guesses, time_ms, history
        where history is a list of (guess, "GYB" string) pairs.
    """
    solver.reset(seed=seed)
    session = Session(engine, words)

    t0 = time.perf_counter()
    while not session.done:
        if max_turns is not None and session.rounds >= max_turns:
            break
        guess = session.guess(solver)
        session.feedback(guess, score(guess, secret))
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "answer": secret,
        "success": session.state is SessionState.SOLVED,
        "state": session.state.value,
        "guesses": session.rounds,
        "time_ms": dt,
        "history": [(g, "".join(h.value for h in hints)) for g, hints in session.history],
    }


def run_batch(
        engine: ConstraintEngine,
        words: List[str],
        solver,
        *,
        secrets: List[str] | None = None,
        seed: int | None = None,
        sample: int | None = None,
        max_turns: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. Secrets default to the whole word list; if
    'sample' is provided only the first K are used.

    Each case's seed is derived from the base seed (seed + index) so runs are
    reproducible but not identical across cases.
    """
    pool = list(words if secrets is None else secrets)
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx, secret in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        r = run_case(engine, words, secret, solver, seed=case_seed, max_turns=max_turns)
        r["solver_id"] = solver.id
        out.append(r)
    return out
