# apps/cli/play.py
"""
Interactive solver: the program guesses, you type the colors.

Each round:
  1) Picks a word from the remaining vocabulary and prints it.
  2) Reads the hints for that guess as B/Y/G (black, yellow, green),
     asking again if the line is malformed.
  3) Narrows the vocabulary with the hints.

The game ends when every hint is green (a share summary is printed) or when
no word fits the hints any more, which usually means a hint was mistyped.

Usage:
    python -m apps.cli.play --verbose
    python -m apps.cli.play --theme high-contrast --seed 7
"""

from __future__ import annotations

import argparse
from typing import Callable, Tuple

from webster import __version__
from webster.datasets import default_wordlist_path, load_words, pretty_summary, validate_wordlist
from webster.engine import ConstraintEngine, Hint, HintFormatError, Theme, parse_hints, share_summary
from webster.harness import Session, SessionState
from webster.solvers import create_solver, get_solver_ids

PROMPT = "   Hints> "


def read_hints(N: int, read: Callable[[str], str] = input,
               write: Callable[[str], None] = print) -> Tuple[Hint, ...]:
    """Prompt until a well-formed hint string is entered."""
    while True:
        try:
            return parse_hints(read(PROMPT), N)
        except HintFormatError as e:
            write(f"ERROR: {e}")


def report_vocab(session: Session, limit: int, write: Callable[[str], None] = print) -> None:
    """Print the remaining words when there are few of them, else just the count."""
    if session.vocab.total() < limit:
        write(f"(vocab: {', '.join(session.vocab.sorted())})")
    else:
        write(f"(vocabulary: {session.vocab.total()} words)")


def play(
        session: Session,
        solver,
        *,
        theme: Theme = Theme.NORMAL,
        verbose: bool = False,
        limit: int = 20,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
) -> SessionState:
    """Run the prompt loop until the session ends; returns the final state."""
    N = session.engine.N

    while not session.done:
        guess = session.guess(solver)

        if verbose:
            report_vocab(session, limit, write)

        write(f"My guess: {guess.upper()}")
        hints = read_hints(N, read, write)
        session.feedback(guess, hints)

    if session.state is SessionState.SOLVED:
        write(share_summary(session.history, theme) + "\n")
    else:
        write("I'm out of words. Did you make a mistake with a clue?")
    return session.state


def main():
    ap = argparse.ArgumentParser(prog="webster", description="Guesses a word by using Wordle clues")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    ap.add_argument("-t", "--theme", choices=[t.value for t in Theme], default=Theme.NORMAL.value,
                    help="colors used in the end-of-game summary")
    ap.add_argument("-v", "--verbose", action="store_true",
                    help="report vocabulary before each guess")
    ap.add_argument("--limit", type=int, default=20,
                    help="below this many words, --verbose lists them instead of counting")
    ap.add_argument("--words", help="word list to use (default: bundled list for --length)")
    ap.add_argument("--length", type=int, default=5, help="word length")
    ap.add_argument("--solver", default="random_consistent",
                    help=f"how to pick guesses (one of: {', '.join(get_solver_ids())})")
    ap.add_argument("--seed", type=int, help="RNG seed for reproducible guesses")
    args = ap.parse_args()

    path = args.words or str(default_wordlist_path(args.length))
    if args.verbose:
        print(pretty_summary(validate_wordlist(args.length, path)))

    words = load_words(path, args.length)
    if not words:
        raise SystemExit(f"No {args.length}-letter words in {path}")

    try:
        solver = create_solver(args.solver)
    except ValueError as e:
        raise SystemExit(str(e))
    solver.reset(seed=args.seed)

    engine = ConstraintEngine.from_words(words)
    session = Session(engine, words)

    try:
        play(session, solver, theme=Theme(args.theme), verbose=args.verbose, limit=args.limit)
    except (EOFError, KeyboardInterrupt):
        print()


if __name__ == "__main__":
    main()
