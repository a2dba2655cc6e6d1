import pytest

from rankcore.dfa import LevenshteinDfa, build_dfa, build_prefix_dfa, max_typos


@pytest.mark.parametrize(
    "query, expected",
    [("", 0), ("abcd", 0), ("abcde", 1), ("abcdefgh", 1), ("abcdefghi", 2)],
)
def test_max_typos_thresholds(query, expected):
    assert max_typos(query) == expected


def test_max_typos_counts_bytes():
    assert max_typos("éééé") == max_typos("abcdefgh")


def test_short_query_requires_exact_word():
    dfa = build_dfa("abc")
    assert dfa.is_match("abc")
    assert not dfa.is_match("abd")
    assert not dfa.is_match("abcd")


def test_medium_query_allows_one_typo():
    dfa = build_dfa("hello")
    assert dfa.is_match("helo")
    assert dfa.is_match("hellp")
    assert not dfa.is_match("hep")


def test_transposition_counts_as_one_edit():
    dfa = build_dfa("hello")
    assert dfa.is_match("hlelo")
    assert dfa.distance("hlelo") == dfa.distance("hellp")


def test_exact_word_has_zero_distance():
    assert build_dfa("kevin").distance("kevin") == 0
    assert build_prefix_dfa("kevin").distance("kevin") == 0


def test_prefix_matcher_accepts_longer_words():
    assert build_prefix_dfa("hel").is_match("hello")
    assert not build_dfa("hel").is_match("hello")


def test_prefix_matcher_with_typo():
    dfa = build_prefix_dfa("marvn")
    assert dfa.is_match("marvin the robot")
    assert not dfa.is_match("kevin")


def test_distance_is_capped():
    dfa = LevenshteinDfa("abc", 1)
    assert dfa.distance("xyzxyz") == dfa.max_distance + 1
    assert not dfa.is_match("xyzxyz")


def test_builders_set_prefix_flag():
    assert build_prefix_dfa("word").prefix
    assert not build_dfa("word").prefix