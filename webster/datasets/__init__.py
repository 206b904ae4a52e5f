from .validator import validate_wordlist, pretty_summary
from .io import read_lines, write_lines, normalize_words, load_words, default_wordlist_path

__all__ = [
    "validate_wordlist", "pretty_summary",
    "read_lines", "write_lines", "normalize_words", "load_words", "default_wordlist_path",
]
