import itertools

import pytest

from t9words.errors import SearchLimitExceeded
from t9words.keypad import DEFAULT_KEYPAD, Keypad
from t9words.search import decompose, solve
from t9words.trie import Trie


def test_single_word():
    assert solve("222", Trie.from_words(["cab"])) == {"cab"}


def test_single_word_go():
    assert solve("46", Trie.from_words(["go"])) == {"go"}


def test_two_words():
    trie = Trie.from_words(["an", "go"])
    assert "an go" in solve("2646", trie)
    # One digit too many: no spelling
    assert "an go" not in solve("26466", trie)
    assert solve("26466", trie) == set()


def test_word_and_phrase_both_found():
    # "ago" = 246, "a" + "go" = 2 46
    trie = Trie.from_words(["ago", "a", "go"])
    assert solve("246", trie) == {"ago", "a go"}


def test_continue_and_new_word_on_same_letter():
    # After "a" both continuing to "ab" and starting "b" are legal
    trie = Trie.from_words(["a", "ab", "b"])
    assert solve("22", trie) == {"ab", "a a", "a b", "b a", "b b"}


def test_all_letters_of_a_digit_are_tried():
    trie = Trie.from_words(["pa", "qa", "ra", "sa", "ta"])
    assert solve("72", trie) == {"pa", "qa", "ra", "sa"}


def test_no_decomposition_is_empty_not_error():
    trie = Trie.from_words(["cat", "dog"])
    assert solve("999", trie) == set()
    assert list(decompose("999", trie)) == []


def test_zero_and_one_dead_end():
    trie = Trie.from_words(["go", "an"])
    assert solve("460", trie) == set()
    assert solve("1", trie) == set()
    assert solve("26146", trie) == set()


def test_empty_digits():
    assert solve("", Trie.from_words(["go"])) == set()
    assert solve("", Trie.from_words(["", "go"])) == {""}


def test_empty_word_does_not_leak_into_results():
    trie = Trie.from_words(["", "go", "in"])
    assert solve("4646", trie) == {"go go", "go in", "in go", "in in"}


def test_results_round_trip_to_digits():
    words = ["a", "an", "am", "go", "in", "me", "of", "gone", "good", "home", "ago", "bog", "coin"]
    trie = Trie.from_words(words)
    for digits in ("2646", "4663", "246", "2464663", "26463"):
        results = solve(digits, trie)
        assert results
        for r in results:
            assert DEFAULT_KEYPAD.to_digits(r) == digits
            assert all(w in trie for w in r.split(" "))
            assert "  " not in r and not r.startswith(" ") and not r.endswith(" ")


def test_every_split_is_found():
    trie = Trie.from_words(["ab", "a", "b"])
    # Each 2 may be "a" or "b" alone; pairs may also read as "ab"
    expected = set()
    for n_words in range(1, 5):
        for split in itertools.product(["a", "b", "ab"], repeat=n_words):
            if DEFAULT_KEYPAD.to_digits("".join(split)) == "2222":
                expected.add(" ".join(split))
    assert solve("2222", trie) == expected


def test_results_are_unique():
    trie = Trie.from_words(["a", "aa", "aaa"])
    results = list(decompose("2222", trie))
    # Splits of four digits into parts of one to three letters
    assert len(results) == 7
    assert len(results) == len(set(results))


def test_repeated_letter_in_layout_is_not_doubled():
    pad = Keypad({"2": "aab"})
    trie = Trie.from_words(["a", "aa"])
    results = list(decompose("22", trie, pad))
    assert sorted(results) == ["a a", "aa"]


def test_decompose_is_lazy():
    trie = Trie.from_words(["a", "b", "c"])
    gen = decompose("2" * 40, trie)
    first = next(gen)
    assert len(first.split(" ")) == 40
    gen.close()


def test_long_input_does_not_recurse():
    # Deep enough to break a recursive implementation
    word = "a" * 5000
    trie = Trie.from_words([word])
    assert solve("2" * 5000, trie) == {word}


def test_custom_keypad():
    pad = Keypad({"1": "ab", "2": "cd"})
    trie = Trie.from_words(["ac", "bd", "ca"])
    assert solve("12", trie, pad) == {"ac", "bd"}
    assert solve("21", trie, pad) == {"ca"}
    # Default layout gives nothing for the same digits
    assert solve("12", trie) == set()


def test_max_frames_stops_search():
    trie = Trie.from_words(["a", "b", "c", "aa", "ab"])
    with pytest.raises(SearchLimitExceeded) as exc:
        solve("2" * 20, trie, max_frames=50)
    assert exc.value.max_frames == 50


def test_max_frames_large_enough_is_harmless():
    trie = Trie.from_words(["cab"])
    assert solve("222", trie, max_frames=1000) == {"cab"}

