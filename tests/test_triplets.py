"""
Triplet primitives: tokenizer, sliding-window extraction, frequency tables, ranking.
"""

import sys
import threading
from collections import Counter
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from triplets import (
    SharedFrequencyTable,
    count_triplets,
    extract_triplets,
    increment,
    merge,
    merge_all,
    new_table,
    split_into_words,
    top_k,
)


def test_unfiltered_extraction_length():
    for text in ["", "a", "ab", "abc", "a1b2c3", "hello world", "…«»"]:
        assert len(list(extract_triplets(text, filter_alphabetic=False))) == max(0, len(text) - 2)


def test_unfiltered_windows_are_exact():
    assert list(extract_triplets("abcd", filter_alphabetic=False)) == ["abc", "bcd"]
    assert list(extract_triplets("a b", filter_alphabetic=False)) == ["a b"]


def test_extraction_is_restartable():
    text = "restartable"
    assert list(extract_triplets(text)) == list(extract_triplets(text))


def test_filtered_extraction_accepts_non_ascii_letters():
    assert list(extract_triplets("мир")) == ["мир"]
    assert list(extract_triplets("straße")) == ["str", "tra", "raß", "aße"]


def test_single_triplet():
    assert count_triplets("aaa") == {"aaa": 1}


def test_repeated_pattern():
    assert list(extract_triplets("ababab")) == ["aba", "bab", "aba", "bab"]
    assert count_triplets("ababab") == {"aba": 2, "bab": 2}


def test_digits_and_punctuation_break_triplets():
    assert count_triplets("a1b cd!") == Counter()
    assert split_into_words("a1b cd!") == ["a1b", "cd"]
    assert count_triplets("cd") == Counter()


def test_split_into_words_separators():
    text = "Hello, world... «Привет» – it's\tok\r\n(yes)*; \"quoted\": done?!"
    assert split_into_words(text) == [
        "Hello", "world", "Привет", "it", "s", "ok", "yes", "quoted", "done",
    ]


def test_split_into_words_empty():
    assert split_into_words("") == []
    assert split_into_words(" ,.;\n") == []


def test_split_into_words_keeps_case():
    assert split_into_words("Mixed CASE") == ["Mixed", "CASE"]


def test_words_cover_the_same_triplets_as_the_whole_text():
    text = "The cat sat; on the mat!\nThe end... abc1def, r2d2 «quoted» – straße"
    per_word = merge_all(count_triplets(w) for w in split_into_words(text))
    assert per_word == count_triplets(text)


def test_increment_inserts_then_counts():
    table = new_table()
    increment(table, "abc")
    assert table == {"abc": 1}
    increment(table, "abc")
    increment(table, "xyz")
    assert table == {"abc": 2, "xyz": 1}


def test_merge_sums_and_leaves_inputs_untouched():
    a = Counter({"abc": 2, "bcd": 1})
    b = Counter({"abc": 3, "xyz": 4})
    merged = merge(a, b)
    assert merged == {"abc": 5, "bcd": 1, "xyz": 4}
    assert a == {"abc": 2, "bcd": 1}
    assert b == {"abc": 3, "xyz": 4}


def test_merge_commutative_and_associative():
    a = Counter({"abc": 2, "bcd": 1})
    b = Counter({"abc": 3, "xyz": 4})
    c = Counter({"xyz": 1, "qrs": 7})
    assert merge(a, b) == merge(b, a)
    assert merge(a, merge(b, c)) == merge(merge(a, b), c)
    assert merge_all([a, b, c]) == merge(merge(a, b), c)


def test_merge_keeps_zero_counts():
    assert "abc" in merge(Counter({"abc": 0}), Counter())


def test_shared_table_concurrent_increments():
    shared = SharedFrequencyTable()

    def produce():
        for _ in range(1000):
            shared.increment("abc")
        shared.merge_from(Counter({"xyz": 10}))

    threads = [threading.Thread(target=produce) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert shared.snapshot() == {"abc": 8000, "xyz": 80}
    assert len(shared) == 2


def test_shared_snapshot_is_a_copy():
    shared = SharedFrequencyTable()
    shared.increment("abc")
    snap = shared.snapshot()
    snap["abc"] += 5
    assert shared.snapshot() == {"abc": 1}


def test_top_k_tie_break_is_lexicographic():
    table = {"xyz": 5, "abc": 5, "qrs": 3}
    assert top_k(table, 2) == [("abc", 5), ("xyz", 5)]


def test_top_k_limits():
    table = {"xyz": 5, "abc": 5, "qrs": 3}
    assert top_k(table) == [("abc", 5), ("xyz", 5), ("qrs", 3)]
    assert top_k(table, 10) == [("abc", 5), ("xyz", 5), ("qrs", 3)]
    assert top_k(table, 0) == []
    assert top_k({}, 5) == []


def test_top_k_negative():
    with pytest.raises(ValueError):
        top_k({"abc": 1}, -1)
