"""
Honest feedback for a (guess, secret) pair.

The filtering engine never needs this: in a real game the feedback comes from
the person playing. It is used to simulate games and to check that filtering
never throws away the real secret.

Algorithm (two-pass, duplicate-safe):
  1) Mark CORRECT positions and count the secret's unmatched letters.
  2) Mark PRESENT only while the letter still has unmatched occurrences;
     everything else stays ABSENT.
"""

from collections import Counter
from typing import Tuple

from .hints import Hint


def score(guess: str, secret: str) -> Tuple[Hint, ...]:
    """
    Compute the feedback `guess` earns against `secret`.

    Examples:
      score("belle", "level") -> B G Y Y Y
      score("lemon", "level") -> G G B B B
    """
    guess = guess.strip().lower()
    secret = secret.strip().lower()
    if len(guess) != len(secret):
        raise ValueError(
            f"guess length ({len(guess)}) != secret length ({len(secret)})")

    hints = [Hint.ABSENT] * len(guess)

    remaining = Counter()
    for i, (g, s) in enumerate(zip(guess, secret)):
        if g == s:
            hints[i] = Hint.CORRECT
        else:
            remaining[s] += 1

    for i, g in enumerate(guess):
        if hints[i] is Hint.CORRECT:
            continue
        if remaining[g] > 0:
            hints[i] = Hint.PRESENT
            remaining[g] -= 1

    return tuple(hints)
