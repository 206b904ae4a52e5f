import random

import pytest
from webster.engine import ConstraintEngine, Hint, Vocabulary, score

G, Y, B = Hint.CORRECT, Hint.PRESENT, Hint.ABSENT

SMALL = ["aaaaa", "bbbba", "cccac"]
SMALL4 = ["aaaaa", "aacab", "bbbba", "cccac"]

# Lots of repeated letters (3+ of a kind in several) to stress the bounds.
REPEATS = [
    "eerie", "geese", "mamma", "llama", "sassy", "fluff", "kayak", "puppy",
    "level", "belle", "error", "vivid", "array", "melee", "otter", "taste",
    "crane", "stare", "trace", "aaaaa", "aacab", "bbbba", "cccac", "abbba", "ababa",
]


# --- positional phase on its own ---
@pytest.mark.parametrize("words,guess,hints,expected", [
    (SMALL, "aaaaa", [B, B, B, B, G], {"aaaaa", "bbbba"}),
    (SMALL, "aaaaa", [B, B, B, B, Y], {"cccac"}),
    (SMALL4, "aaaac", [B, B, B, G, Y], {"aacab"}),
])
def test_filter_positions(words, guess, hints, expected):
    engine = ConstraintEngine.from_words(words)
    vocab = Vocabulary(words)
    engine.filter_positions(vocab, guess, hints)
    assert vocab == expected


def test_present_with_no_other_position_still_excludes_here():
    # no word has 'z' anywhere, so the "elsewhere" set is empty and skipped
    engine = ConstraintEngine.from_words(SMALL)
    vocab = Vocabulary(SMALL)
    engine.filter_positions(vocab, "zzzzz", [Y, B, B, B, B])
    assert vocab == set(SMALL)


# --- both phases ---
def test_apply_uses_counts_after_positions():
    engine = ConstraintEngine.from_words(SMALL)
    # exactly one 'a', and it is last
    assert engine.apply(Vocabulary(SMALL), "aaaaa", [B, B, B, B, G]) == {"bbbba"}
    assert engine.apply(Vocabulary(SMALL), "aaaaa", [B, B, B, B, Y]) == {"cccac"}


def test_apply_contradictory_feedback_exhausts():
    engine = ConstraintEngine.from_words(SMALL4)
    # 'aacab' survives the positional phase but has three a's
    assert engine.apply(Vocabulary(SMALL4), "aaaac", [B, B, B, G, Y]).total() == 0


def test_apply_all_absent_drops_every_word_with_those_letters():
    engine = ConstraintEngine.from_words(REPEATS)
    out = engine.apply(Vocabulary(REPEATS), "sassy", [B, B, B, B, B])
    assert out.total() > 0
    assert all("s" not in w and "a" not in w and "y" not in w for w in out)


def test_apply_leaves_input_untouched():
    engine = ConstraintEngine.from_words(SMALL)
    vocab = Vocabulary(SMALL)
    engine.apply(vocab, "aaaaa", [B, B, B, B, G])
    assert vocab == set(SMALL)


def test_apply_n6():
    words = ["letter", "settle", "little", "tattle", "better"]
    engine = ConstraintEngine.from_words(words)
    assert engine.N == 6
    out = engine.apply(Vocabulary(words), "settle", score("settle", "letter"))
    assert "letter" in out and "better" not in out and "settle" not in out


# --- properties ---
def test_soundness_secret_always_survives():
    engine = ConstraintEngine.from_words(REPEATS)
    full = Vocabulary(REPEATS)
    for secret in REPEATS:
        for guess in REPEATS:
            out = engine.apply(full, guess, score(guess, secret))
            assert secret in out, (guess, secret)


def test_wrong_guess_is_always_eliminated():
    engine = ConstraintEngine.from_words(REPEATS)
    full = Vocabulary(REPEATS)
    for secret in REPEATS:
        for guess in REPEATS:
            if guess != secret:
                assert guess not in engine.apply(full, guess, score(guess, secret))


def test_idempotent():
    engine = ConstraintEngine.from_words(REPEATS)
    full = Vocabulary(REPEATS)
    for secret, guess in [("eerie", "geese"), ("mamma", "llama"), ("kayak", "array"),
                          ("ababa", "abbba"), ("level", "belle")]:
        hints = score(guess, secret)
        once = engine.apply(full, guess, hints)
        twice = engine.apply(once, guess, hints)
        assert once == twice


def test_monotonic_narrowing_over_rounds():
    engine = ConstraintEngine.from_words(REPEATS)
    rng = random.Random(2024)
    for secret in REPEATS:
        vocab = Vocabulary(REPEATS)
        while True:
            guess = vocab.pick_one(rng)
            hints = score(guess, secret)
            if guess == secret:
                break
            before = vocab.total()
            vocab = engine.apply(vocab, guess, hints)
            assert vocab.total() < before
            assert secret in vocab
