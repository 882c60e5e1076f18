import pytest

from seqfuzz.editops import EditType, editops_apply
from seqfuzz.indel import (
    CachedIndel,
    indel_distance,
    indel_editops,
    indel_normalized_distance,
    indel_normalized_similarity,
    indel_similarity,
    lcs_seq_similarity,
)

PAIRS = [
    ("", ""),
    ("", "abc"),
    ("abc", ""),
    ("lewenstein", "levenshtein"),
    ("kitten", "sitting"),
    ("abcd", "acbd"),
    ("ab" * 50, "ba" * 50),
    ("a" * 70 + "xyz", "xyz" + "a" * 70),
]


def test_documented_example():
    assert indel_distance("lewenstein", "levenshtein") == 3
    assert indel_normalized_similarity("lewenstein", "levenshtein") == pytest.approx(
        0.8571428571428571
    )


@pytest.mark.parametrize("s1, s2", PAIRS)
def test_distance_matches_lcs(s1, s2):
    lcs = lcs_seq_similarity(s1, s2)
    assert indel_distance(s1, s2) == len(s1) + len(s2) - 2 * lcs


@pytest.mark.parametrize("s1, s2", PAIRS)
def test_symmetry(s1, s2):
    assert indel_distance(s1, s2) == indel_distance(s2, s1)
    assert lcs_seq_similarity(s1, s2) == lcs_seq_similarity(s2, s1)


def test_identical_and_empty():
    assert indel_distance("hello", "hello") == 0
    assert indel_distance("", "hello") == len("hello")
    assert indel_similarity("hello", "hello") == 2 * len("hello")
    assert lcs_seq_similarity("abc", "abc") == 3


def test_distance_cutoff():
    dist = indel_distance("kitten", "sitting")
    assert indel_distance("kitten", "sitting", dist) == dist
    assert indel_distance("kitten", "sitting", dist - 1) == dist
    assert indel_distance("kitten", "sitting", 0) == 1


def test_lcs_cutoff():
    lcs = lcs_seq_similarity("kitten", "sitting")
    assert lcs_seq_similarity("kitten", "sitting", lcs) == lcs
    assert lcs_seq_similarity("kitten", "sitting", lcs + 1) == 0


@pytest.mark.parametrize("s1, s2", PAIRS)
def test_similarity_relation(s1, s2):
    maximum = len(s1) + len(s2)
    sim = indel_similarity(s1, s2)
    assert sim == maximum - indel_distance(s1, s2)
    assert indel_similarity(s1, s2, sim + 1) == 0
    assert indel_similarity(s1, s2, maximum + 1) == 0


@pytest.mark.parametrize("s1, s2", PAIRS)
def test_normalized_relation(s1, s2):
    norm_dist = indel_normalized_distance(s1, s2)
    norm_sim = indel_normalized_similarity(s1, s2)
    assert 0.0 <= norm_dist <= 1.0
    assert norm_dist + norm_sim == pytest.approx(1.0)


def test_normalized_cutoffs():
    norm_dist = indel_normalized_distance("kitten", "sitting")
    assert indel_normalized_distance("kitten", "sitting", norm_dist / 2) == 1.0
    norm_sim = indel_normalized_similarity("kitten", "sitting")
    assert indel_normalized_similarity("kitten", "sitting", norm_sim + 0.01) == 0.0
    assert indel_normalized_similarity("kitten", "sitting", norm_sim - 0.01) == pytest.approx(
        norm_sim
    )


@pytest.mark.parametrize("s1, s2", PAIRS)
def test_cached_matches_functions(s1, s2):
    scorer = CachedIndel(s1)
    assert scorer.distance(s2) == indel_distance(s1, s2)
    assert scorer.similarity(s2) == indel_similarity(s1, s2)
    assert scorer.normalized_distance(s2) == pytest.approx(indel_normalized_distance(s1, s2))
    assert scorer.normalized_similarity(s2) == pytest.approx(
        indel_normalized_similarity(s1, s2)
    )


@pytest.mark.parametrize("s1, s2", PAIRS)
def test_editops_round_trip(s1, s2):
    ops = indel_editops(s1, s2)
    assert editops_apply(ops, s1, s2) == s2
    assert len(ops) == indel_distance(s1, s2)
    assert ops.src_len == len(s1)
    assert ops.dest_len == len(s2)
    assert all(op.type in (EditType.INSERT, EditType.DELETE) for op in ops)


def test_editops_on_bytes_and_lists():
    a, b = b"\x01\x02\x03\x04", b"\x02\x04\x05"
    ops = indel_editops(a, b)
    assert editops_apply(ops, a, b) == b
    la, lb = [1, 2, 3, 4], [2, 4, 5]
    assert editops_apply(indel_editops(la, lb), la, lb) == lb
    assert indel_distance(la, lb) == len(ops)