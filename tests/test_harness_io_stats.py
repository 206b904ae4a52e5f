import csv
import json
from pathlib import Path

import pytest
from webster.harness import pretty_stats, summarize, write_csv, write_manifest


def _result(answer, guesses, state="solved"):
    hist = [("crane", "BYBBG")] * (guesses - 1) + [(answer, "GGGGG")]
    return {"answer": answer, "success": state == "solved", "state": state,
            "guesses": guesses, "time_ms": 1.23456, "history": hist,
            "solver_id": "random_consistent"}


RESULTS = [
    _result("stare", 3), _result("trace", 4), _result("cared", 4), _result("racer", 5),
    _result("raise", 2, state="exhausted"),
]


def test_summarize():
    s = summarize(RESULTS)
    assert s["cases"] == 5
    assert s["solved"] == 4
    assert s["exhausted"] == 1
    assert s["mean_guesses"] == 4.0
    assert s["median_guesses"] == 4.0
    assert s["p90_guesses"] == pytest.approx(4.7)
    assert s["max_guesses"] == 5
    assert s["histogram"] == [0, 0, 0, 1, 2, 1]
    json.dumps(s)  # must be serializable
    assert "solved=4" in pretty_stats(s)


def test_summarize_nothing_solved():
    s = summarize([_result("raise", 2, state="exhausted")])
    assert s["solved"] == 0 and s["mean_guesses"] is None
    assert pretty_stats(s) == "cases=1 | solved=0 | exhausted=1"


def test_write_csv(tmp_path: Path):
    path = write_csv(RESULTS, str(tmp_path / "out" / "run.csv"))
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 5
    # widest game has 5 rounds
    assert "hints_5" in rows[0] and "hints_6" not in rows[0]
    assert rows[0]["hints_3"] == "'GGGGG"
    assert rows[0]["guess_4"] == ""
    assert rows[0]["time_ms"] == "1.235"


def test_write_manifest(tmp_path: Path):
    path = write_manifest({"run_id": "x", "num_cases": 5}, str(tmp_path / "m.json"))
    assert json.loads(Path(path).read_text(encoding="utf-8"))["num_cases"] == 5
