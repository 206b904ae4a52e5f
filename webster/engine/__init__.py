from .hints import Hint, Theme, hints_to_str, is_solved, to_glyphs, share_summary
from .validation import HintFormatError, parse_hints, validate_guess
from .scoring import score
from .vocabulary import Vocabulary
from .tables import PositionIndex, FrequencyIndex
from .bounds import LetterBound, build_bounds
from .constraints import ConstraintEngine

__all__ = [
    "Hint", "Theme", "hints_to_str", "is_solved", "to_glyphs", "share_summary",
    "HintFormatError", "parse_hints", "validate_guess",
    "score",
    "Vocabulary",
    "PositionIndex", "FrequencyIndex",
    "LetterBound", "build_bounds",
    "ConstraintEngine",
]
