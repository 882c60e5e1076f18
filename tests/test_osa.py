import pytest

from seqfuzz.osa import (
    CachedOSA,
    osa_distance,
    osa_normalized_distance,
    osa_normalized_similarity,
    osa_similarity,
)


def _osa(s1, s2, max_dist=None):
    res = osa_distance(s1, s2, max_dist)
    scorer = CachedOSA(s1)
    assert scorer.distance(s2, max_dist) == res
    assert osa_distance(list(s1), list(s2), max_dist) == res
    assert CachedOSA(list(s1)).distance(list(s2), max_dist) == res
    return res


def test_empty():
    assert _osa("", "") == 0


def test_one_side_empty():
    s1, s2 = "aaaa", ""
    assert _osa(s1, s2) == 4
    assert _osa(s2, s1) == 4
    assert _osa(s1, s2, 1) == 2
    assert _osa(s2, s1, 1) == 2


def test_no_transposition_across_insert():
    assert _osa("CA", "ABC") == 3


def test_adjacent_transposition():
    assert _osa("CA", "AC") == 1


def test_long_strings():
    filler = "a" * 64
    s1 = "a" + filler + "CA" + filler + "a"
    s2 = "b" + filler + "AC" + filler + "b"
    assert _osa(s1, s2) == 3
    assert _osa(s2, s1) == 3


@pytest.mark.parametrize(
    "s1, s2",
    [("kitten", "sitting"), ("CA", "ABC"), ("abcdef", "badcfe"), ("x" * 80, "y" * 70)],
)
def test_similarity_relation(s1, s2):
    maximum = max(len(s1), len(s2))
    dist = osa_distance(s1, s2)
    assert osa_similarity(s1, s2) == maximum - dist
    assert osa_similarity(s1, s2, maximum - dist + 1) == 0
    assert CachedOSA(s1).similarity(s2) == maximum - dist


@pytest.mark.parametrize(
    "s1, s2",
    [("kitten", "sitting"), ("CA", "AC"), ("", ""), ("abcdef", "badcfe")],
)
def test_normalized_relation(s1, s2):
    norm_dist = osa_normalized_distance(s1, s2)
    norm_sim = osa_normalized_similarity(s1, s2)
    assert norm_dist + norm_sim == pytest.approx(1.0)
    scorer = CachedOSA(s1)
    assert scorer.normalized_distance(s2) == pytest.approx(norm_dist)
    assert scorer.normalized_similarity(s2) == pytest.approx(norm_sim)


def test_normalized_cutoffs():
    assert osa_normalized_distance("aaaa", "") == 1.0
    norm_dist = osa_normalized_distance("kitten", "sitting")
    assert osa_normalized_distance("kitten", "sitting", norm_dist / 2) == 1.0
    norm_sim = osa_normalized_similarity("kitten", "sitting")
    assert osa_normalized_similarity("kitten", "sitting", norm_sim + 0.01) == 0.0


def test_symmetry():
    assert osa_distance("abcdef", "badcfe") == osa_distance("badcfe", "abcdef")