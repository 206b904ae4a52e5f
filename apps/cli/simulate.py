# apps/cli/simulate.py
"""
Self-play: run the solver against every word of a list as the secret.

This script:
  1) Validates the word list (prints counts + SHA).
  2) Builds the indices once and plays each secret with honest feedback.
  3) Writes:
       - CSV:  per-case results + guess/hints history columns
       - JSON: manifest with config, word list report, git commit, summary
  4) Prints a one-line summary of the guess-count distribution.
"""

from __future__ import annotations

import argparse
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from webster.datasets import default_wordlist_path, load_words, pretty_summary, validate_wordlist
from webster.engine import ConstraintEngine
from webster.harness import run_case, summarize, pretty_stats
from webster.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from webster.solvers import create_solver, get_solver_ids


def main():
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="webster: simulate games against a word list")
    ap.add_argument("--solver", default="random_consistent",
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--length", type=int, default=5, help="word length")
    ap.add_argument("--words", help="path to word list (default: bundled list for --length)")
    ap.add_argument("--sample", type=int,
                    help="play only a subset of secrets (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--max-turns", type=int,
                    help="give up after this many guesses (default: play to the end)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    args = ap.parse_args()

    path = args.words or str(default_wordlist_path(args.length))

    # 1) Validate and load
    rep = validate_wordlist(args.length, path)
    print(pretty_summary(rep))

    words = load_words(path, args.length)
    if not words:
        raise SystemExit(f"No {args.length}-letter words in {path}")

    try:
        solver = create_solver(args.solver)
    except ValueError as e:
        raise SystemExit(str(e))

    engine = ConstraintEngine.from_words(words)

    # 2) Choose cases (deterministic sample by seed)
    rng = random.Random(args.seed)
    if args.sample and args.sample < len(words):
        pool = list(words)
        rng.shuffle(pool)
        cases = pool[: args.sample]
    else:
        cases = list(words)

    total = len(cases)

    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    results = []
    start = time.time()
    last_print = 0.0

    iterator = tqdm(cases, ncols=80, desc="Simulating", unit="game") if mode == "bar" else cases

    # 3) Play every case
    for idx, secret in enumerate(iterator, 1):
        per_seed = args.seed + idx * 1013904223
        r = run_case(engine, words, secret, solver, seed=per_seed, max_turns=args.max_turns)
        r["solver_id"] = solver.id
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    # 4) Outputs
    summary = summarize(results)
    print(pretty_stats(summary))

    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"sim_{run_id}.csv"
    manifest_path = outdir / f"sim_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=args.max_turns)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "num_cases": len(results),
        "solver_id": solver.id,
        "summary": summary,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
