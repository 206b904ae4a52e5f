"""webster: narrows a word list from Wordle-style colored feedback."""

__version__ = "0.3.0"
