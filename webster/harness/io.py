"""
I/O utilities for simulation runs.

Responsibilities:
- write_csv:      flatten per-game results into a tidy CSV (one row per game).
- write_manifest: dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Hint strings are prefixed with an apostrophe so spreadsheet apps keep
  them as text.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt


def _excel_safe(hints: str) -> str:
    return "'" + hints if hints else hints


def write_csv(results: List[Dict], path: str, max_turns: int | None = None) -> str:
    """
    Serialize a batch of game results to CSV.

    Columns:
      solver, answer, state, success, guesses, time_ms,
      guess_1, hints_1, ..., guess_K, hints_K

    K is `max_turns` when given, otherwise the longest game in the batch.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    if max_turns is None:
        max_turns = max((len(r.get("history", [])) for r in results), default=0)

    fields = ["solver", "answer", "state", "success", "guesses", "time_ms"]
    for i in range(1, max_turns + 1):
        fields += [f"guess_{i}", f"hints_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "solver": r.get("solver_id", "?"),
                "answer": r["answer"],
                "state": r.get("state", ""),
                "success": r["success"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
            }

            hist = r.get("history", [])
            for i in range(1, max_turns + 1):
                if i <= len(hist):
                    g, hints = hist[i - 1]
                    row[f"guess_{i}"] = g
                    row[f"hints_{i}"] = _excel_safe(hints)
                else:
                    row[f"guess_{i}"] = ""
                    row[f"hints_{i}"] = ""

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest (run_id, git_commit, config, wordlist report,
    summary statistics).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Short git hash of the current checkout, or 'unknown' when git is missing
    or this is not a repository.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
