import pytest

from seqfuzz.fuzz_ratio import ratio
from seqfuzz.fuzz_token import (
    CachedTokenRatio,
    CachedTokenSetRatio,
    CachedTokenSortRatio,
    CachedWRatio,
    partial_token_ratio,
    partial_token_set_ratio,
    partial_token_sort_ratio,
    token_ratio,
    token_set_ratio,
    token_sort_ratio,
    wratio,
)

PAIRS = [
    ("fuzzy wuzzy was a bear", "wuzzy fuzzy was a bear"),
    ("new york mets", "new york meats"),
    ("new york mets vs atlanta braves", "atlanta braves vs new york mets"),
    ("this is a test", "this is a test!"),
    ("apple", "a completely different sentence about apples"),
    ("hello world", "goodbye moon"),
    ("short", "a much much much much much longer sentence here"),
    ("", "something"),
    ("same", "same"),
]


def test_cutoff_above_100_gives_zero():
    assert token_sort_ratio("same words", "same words", 101) == 0
    assert partial_token_sort_ratio("same words", "same words", 101) == 0
    assert token_set_ratio("same words", "same words", 101) == 0
    assert partial_token_set_ratio("same words", "same words", 101) == 0
    assert token_ratio("same words", "same words", 101) == 0
    assert partial_token_ratio("same words", "same words", 101) == 0
    assert wratio("same words", "same words", 101) == 0


@pytest.mark.parametrize("s1,s2", PAIRS)
def test_scores_in_range(s1, s2):
    scores = [
        token_sort_ratio(s1, s2),
        partial_token_sort_ratio(s1, s2),
        token_set_ratio(s1, s2),
        partial_token_set_ratio(s1, s2),
        token_ratio(s1, s2),
        partial_token_ratio(s1, s2),
        wratio(s1, s2),
    ]
    for score in scores:
        assert 0.0 <= score <= 100.0


def test_token_sort_ignores_word_order():
    assert token_sort_ratio("fuzzy wuzzy was a bear", "wuzzy fuzzy was a bear") == 100


def test_token_sort_ratio_bytes():
    assert token_sort_ratio(b"b a", b"a b") == 100


@pytest.mark.parametrize("s1,s2", PAIRS)
def test_token_sort_symmetric(s1, s2):
    assert token_sort_ratio(s1, s2) == pytest.approx(token_sort_ratio(s2, s1))


def test_token_set_subset_is_100():
    assert token_set_ratio("fuzzy was a bear", "fuzzy fuzzy was a bear") == 100


def test_token_set_empty_is_zero():
    assert token_set_ratio("", "some words") == 0
    assert partial_token_set_ratio("words", "   ") == 0


def test_partial_token_set_common_word_is_100():
    assert partial_token_set_ratio("alpha beta", "beta gamma delta") == 100


def test_partial_token_ratio_common_word_is_100():
    assert partial_token_ratio("alpha beta", "gamma beta") == 100


@pytest.mark.parametrize("s1,s2", [p for p in PAIRS if p[0] and p[1]])
def test_token_ratio_is_max_of_sort_and_set(s1, s2):
    expected = max(token_sort_ratio(s1, s2), token_set_ratio(s1, s2))
    assert token_ratio(s1, s2) == pytest.approx(expected)


@pytest.mark.parametrize("s1,s2", PAIRS)
def test_partial_token_ratio_at_least_partial_sort(s1, s2):
    assert partial_token_ratio(s1, s2) >= partial_token_sort_ratio(s1, s2) - 1e-9


@pytest.mark.parametrize("s1,s2", [p for p in PAIRS if p[0] and p[1]])
def test_wratio_at_least_ratio(s1, s2):
    assert wratio(s1, s2) >= ratio(s1, s2) - 1e-9


def test_wratio_empty_is_zero():
    assert wratio("", "abc") == 0
    assert wratio("abc", "") == 0


def test_wratio_identical_is_100():
    assert wratio("identical text", "identical text") == 100


def test_wratio_reordered_words_scaled():
    assert wratio("new york mets", "mets new york") == pytest.approx(95.0)


@pytest.mark.parametrize("s1,s2", PAIRS)
def test_cached_token_sort_matches(s1, s2):
    assert CachedTokenSortRatio(s1).similarity(s2) == pytest.approx(token_sort_ratio(s1, s2))


@pytest.mark.parametrize("s1,s2", PAIRS)
def test_cached_token_set_matches(s1, s2):
    assert CachedTokenSetRatio(s1).similarity(s2) == pytest.approx(token_set_ratio(s1, s2))


@pytest.mark.parametrize("s1,s2", PAIRS)
def test_cached_token_ratio_matches(s1, s2):
    assert CachedTokenRatio(s1).similarity(s2) == pytest.approx(token_ratio(s1, s2))


@pytest.mark.parametrize("s1,s2", PAIRS)
def test_cached_wratio_matches(s1, s2):
    assert CachedWRatio(s1).similarity(s2) == pytest.approx(wratio(s1, s2))


@pytest.mark.parametrize("cutoff", [0, 50, 80, 99])
@pytest.mark.parametrize("s1,s2", PAIRS)
def test_cutoff_returns_score_or_zero(cutoff, s1, s2):
    full = token_ratio(s1, s2)
    cut = token_ratio(s1, s2, cutoff)
    if full >= cutoff:
        assert cut == pytest.approx(full)
    else:
        assert cut == 0


def test_cached_cutoff_above_100():
    assert CachedTokenSortRatio("a b").similarity("a b", 101) == 0
    assert CachedTokenSetRatio("a b").similarity("a b", 101) == 0
    assert CachedTokenRatio("a b").similarity("a b", 101) == 0
    assert CachedWRatio("a b").similarity("a b", 101) == 0