import pytest
from webster.datasets import default_wordlist_path, load_words
from webster.engine import ConstraintEngine, Hint
from webster.harness import Session, SessionState, run_batch, run_case
from webster.solvers import create_solver

G, Y, B = Hint.CORRECT, Hint.PRESENT, Hint.ABSENT

WORDS = ["crane", "raise", "stare", "trace", "cared", "racer"]


def test_session_solves_on_all_correct():
    engine = ConstraintEngine.from_words(WORDS)
    s = Session(engine, WORDS)
    assert s.state is SessionState.SEARCHING
    assert s.feedback("crane", [G] * 5) is SessionState.SOLVED
    assert s.rounds == 1 and s.done
    # the winning round does not filter
    assert s.vocab.total() == len(WORDS)


def test_session_exhausts_on_contradictory_feedback():
    words = ["aaaaa", "aacab", "bbbba", "cccac"]
    s = Session(ConstraintEngine.from_words(words), words)
    assert s.feedback("aaaac", [B, B, B, G, Y]) is SessionState.EXHAUSTED
    assert s.vocab.total() == 0


def test_session_rejects_input_after_it_ends():
    s = Session(ConstraintEngine.from_words(WORDS), WORDS)
    s.feedback("crane", [G] * 5)
    with pytest.raises(RuntimeError):
        s.feedback("crane", [G] * 5)
    with pytest.raises(RuntimeError):
        s.guess(create_solver("first_alpha"))


def test_session_with_no_words_starts_exhausted():
    s = Session(ConstraintEngine.from_words(WORDS), [])
    assert s.state is SessionState.EXHAUSTED


def test_run_case_smoke():
    engine = ConstraintEngine.from_words(WORDS)
    r = run_case(engine, WORDS, "crane", create_solver("random_consistent"), seed=42)
    assert r["success"] is True and r["state"] == "solved"
    assert r["history"][-1] == ("crane", "GGGGG")
    assert r["guesses"] == len(r["history"])


def test_run_case_max_turns_stops_early():
    engine = ConstraintEngine.from_words(WORDS)
    r = run_case(engine, WORDS, "trace", create_solver("first_alpha"), max_turns=1)
    # first_alpha opens with 'cared'
    assert r["history"][0][0] == "cared"
    assert r["success"] is False and r["state"] == "searching"
    assert r["guesses"] == 1


def test_solved_within_length_plus_one_rounds():
    engine = ConstraintEngine.from_words(WORDS)
    solver = create_solver("random_consistent")
    for secret in WORDS:
        for seed in range(5):
            r = run_case(engine, WORDS, secret, solver, seed=seed)
            assert r["success"] is True
            assert r["guesses"] <= 5 + 1


def test_run_batch_reproducible():
    engine = ConstraintEngine.from_words(WORDS)
    solver = create_solver("random_consistent")
    a = run_batch(engine, WORDS, solver, seed=7)
    b = run_batch(engine, WORDS, solver, seed=7)
    assert [r["history"] for r in a] == [r["history"] for r in b]
    assert len(a) == len(WORDS)
    assert all(r["solver_id"] == "random_consistent" for r in a)


def test_bundled_list_never_loses_the_secret():
    words = load_words(default_wordlist_path(5), 5)
    engine = ConstraintEngine.from_words(words)
    results = run_batch(engine, words, create_solver("random_consistent"), seed=1, sample=25)
    assert len(results) == 25
    assert all(r["state"] == "solved" for r in results)
