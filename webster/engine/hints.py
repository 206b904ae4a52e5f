"""
Feedback symbols and how they are drawn.

Conventions:
  - Hint.CORRECT : green  = letter is in the secret at this exact position
  - Hint.PRESENT : yellow = letter is in the secret, but not here
  - Hint.ABSENT  : black  = no further (unconfirmed) occurrences of the letter

Text form is one character per position ('G', 'Y', 'B'). The glyph form is
what gets pasted into a chat after a game, like the official app does.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Sequence, Tuple


class Hint(Enum):
    CORRECT = "G"
    PRESENT = "Y"
    ABSENT = "B"


class Theme(Enum):
    NORMAL = "normal"
    HIGH_CONTRAST = "high-contrast"


# (theme, hint) -> glyph. Black squares look the same in every theme.
_GLYPHS = {
    (Theme.NORMAL, Hint.ABSENT): "⬛",
    (Theme.NORMAL, Hint.PRESENT): "\U0001f7e8",
    (Theme.NORMAL, Hint.CORRECT): "\U0001f7e9",
    (Theme.HIGH_CONTRAST, Hint.ABSENT): "⬛",
    (Theme.HIGH_CONTRAST, Hint.PRESENT): "\U0001f7e6",
    (Theme.HIGH_CONTRAST, Hint.CORRECT): "\U0001f7e7",
}

# Rounds shown in the share line ("Webster 4/6"), same as the official game.
SHARE_TURNS = 6


def hints_to_str(hints: Iterable[Hint]) -> str:
    """Compact text form, e.g. (CORRECT, ABSENT, PRESENT) -> "GBY"."""
    return "".join(h.value for h in hints)


def is_solved(hints: Sequence[Hint]) -> bool:
    return len(hints) > 0 and all(h is Hint.CORRECT for h in hints)


def to_glyphs(hints: Iterable[Hint], theme: Theme = Theme.NORMAL) -> str:
    return "".join(_GLYPHS[(theme, h)] for h in hints)


def share_summary(history: Sequence[Tuple[str, Sequence[Hint]]],
                  theme: Theme = Theme.NORMAL) -> str:
    """
    Render the end-of-game summary: a title line and one glyph row per round.

    Example (two rounds, normal theme):
        Webster 2/6

        ⬛🟨⬛⬛🟩
        🟩🟩🟩🟩🟩
    """
    lines: List[str] = [f"Webster {len(history)}/{SHARE_TURNS}", ""]
    lines += [to_glyphs(hints, theme) for _, hints in history]
    return "\n".join(lines)
