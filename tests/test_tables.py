from webster.engine import FrequencyIndex, PositionIndex

WORDS = ["aaaaa", "aacab", "bbbba", "cccac"]


def test_position_index_buckets():
    gt = PositionIndex(WORDS)
    assert gt.length == 5
    assert gt.get(4, "a") == {"aaaaa", "bbbba"}
    assert gt.get(3, "a") == {"aaaaa", "aacab", "cccac"}
    assert gt.get(2, "c") == {"aacab", "cccac"}


def test_position_index_miss_is_empty():
    gt = PositionIndex(WORDS)
    assert gt.get(0, "z") == frozenset()
    assert gt.get(9, "a") == frozenset()


def test_frequency_index_exact_counts():
    ft = FrequencyIndex(WORDS)
    assert ft.get(5, "a") == {"aaaaa"}
    assert ft.get(3, "a") == {"aacab"}
    assert ft.get(1, "a") == {"bbbba", "cccac"}
    assert ft.get(4, "b") == {"bbbba"}
    assert ft.get(1, "b") == {"aacab"}
    assert ft.get(4, "c") == {"cccac"}


def test_frequency_index_has_no_zero_counts():
    ft = FrequencyIndex(WORDS)
    assert ft.get(0, "a") == frozenset()
    assert ft.get(0, "z") == frozenset()
    # 'b' never appears in 'cccac', so that word is in no 'b' bucket
    assert all("cccac" not in ft.get(n, "b") for n in range(1, 6))


def test_tables_are_shared_safely():
    gt = PositionIndex(WORDS)
    bucket = gt.get(4, "a")
    assert isinstance(bucket, frozenset)
