"""
Summary statistics over a batch of simulated games.
"""

from __future__ import annotations

from typing import Dict, List

import numpy as np


def summarize(results: List[Dict]) -> Dict:
    """
    Reduce per-game results to a JSON-friendly summary.

    Guess statistics are computed over solved games only. `histogram[k]` is
    the number of games solved in exactly k guesses (index 0 is always 0).
    """
    states = [r.get("state") for r in results]
    solved = np.array([r["guesses"] for r in results if r["success"]], dtype=int)

    out = {
        "cases": len(results),
        "solved": int(solved.size),
        "exhausted": sum(1 for s in states if s == "exhausted"),
        "mean_guesses": None,
        "median_guesses": None,
        "p90_guesses": None,
        "max_guesses": None,
        "histogram": [],
    }
    if solved.size:
        out["mean_guesses"] = round(float(solved.mean()), 4)
        out["median_guesses"] = float(np.median(solved))
        out["p90_guesses"] = float(np.percentile(solved, 90))
        out["max_guesses"] = int(solved.max())
        out["histogram"] = np.bincount(solved).tolist()
    return out


def pretty_stats(summary: Dict) -> str:
    """One-line console form of `summarize` output."""
    if not summary["solved"]:
        return f"cases={summary['cases']} | solved=0 | exhausted={summary['exhausted']}"
    return (
        f"cases={summary['cases']} | solved={summary['solved']} "
        f"| exhausted={summary['exhausted']} | mean={summary['mean_guesses']:.3f} "
        f"| median={summary['median_guesses']:g} | p90={summary['p90_guesses']:g} "
        f"| max={summary['max_guesses']}"
    )
