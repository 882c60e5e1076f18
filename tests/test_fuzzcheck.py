import struct

import pytest

from seqfuzz.fuzzcheck import (
    CheckFailure,
    check_all,
    check_indel_distance,
    check_indel_editops,
    check_jaro_similarity,
    check_lcs_similarity,
    check_levenshtein_distance,
    check_levenshtein_editops,
    check_osa_distance,
    check_partial_ratio,
    extract_strings,
    main,
    vec_multiply,
)


def _blob(s1: bytes, s2: bytes) -> bytes:
    return struct.pack("<I", len(s1)) + s1 + s2


def test_extract_strings_splits_after_header():
    assert extract_strings(_blob(b"abc", b"de")) == (b"abc", b"de")


def test_extract_strings_rejects_header_only():
    assert extract_strings(struct.pack("<I", 0)) is None


def test_extract_strings_rejects_too_long_first_length():
    assert extract_strings(struct.pack("<I", 10) + b"abc") is None


def test_extract_strings_first_takes_everything():
    assert extract_strings(_blob(b"abc", b"")) == (b"abc", b"")


def test_vec_multiply():
    assert vec_multiply(b"ab", 3) == b"ababab"
    assert vec_multiply(b"ab", 0) == b""
    assert vec_multiply([1, 2], 2) == [1, 2, 1, 2]


def test_check_levenshtein_distance_documented_example():
    assert check_levenshtein_distance(b"lewenstein", b"levenshtein") == 2
    assert check_levenshtein_distance("lewenstein", "levenshtein") == 2


@pytest.mark.parametrize(
    "s1, s2, expected",
    [(b"CA", b"AC", 1), (b"CA", b"ABC", 3), (b"aaaa", b"", 4), (b"", b"aaaa", 4), (b"", b"", 0)],
)
def test_check_osa_distance(s1, s2, expected):
    assert check_osa_distance(s1, s2) == expected


def test_check_indel_distance_against_empty():
    assert check_indel_distance(b"abc", b"") == len(b"abc")
    assert check_indel_distance(b"abc", b"abc") == 0


@pytest.mark.parametrize("s1, s2", [(b"kitten", b"sitting"), (b"", b"ab"), (b"abc", b"cab")])
def test_check_indel_editops_matches_distance(s1, s2):
    assert check_indel_editops(s1, s2) == check_indel_distance(s1, s2)


def test_check_lcs_similarity_empty_first():
    assert check_lcs_similarity(b"", b"abc") == 0


def test_check_lcs_similarity_identical_long():
    seq = bytes(range(100))
    assert check_lcs_similarity(seq, seq) == len(seq)


def test_check_lcs_similarity_bounded_by_shorter():
    result = check_lcs_similarity(b"abcdefgh" * 3, b"hgfedcba")
    assert 0 < result <= len(b"hgfedcba")


def test_check_levenshtein_editops_matches_distance():
    assert check_levenshtein_editops(b"a", b"b") == check_levenshtein_distance(b"a", b"b")


def test_check_levenshtein_editops_empty_first():
    assert check_levenshtein_editops(b"", b"ab") == len(b"ab")


def test_check_jaro_similarity_identical_and_disjoint():
    assert check_jaro_similarity(b"ab", b"ab") == 1.0
    assert check_jaro_similarity(b"", b"ab") == 0.0
    assert check_jaro_similarity(b"", b"") == 1.0


def test_check_jaro_similarity_symmetric():
    forward = check_jaro_similarity(b"ab", b"ba")
    backward = check_jaro_similarity(b"ba", b"ab")
    assert 0.0 <= forward <= 1.0
    assert forward == pytest.approx(backward)


def test_check_partial_ratio_contained():
    assert check_partial_ratio(b"ab", b"b") == 100.0


def test_check_partial_ratio_empty_cases():
    assert check_partial_ratio(b"", b"") == 100.0
    assert check_partial_ratio(b"", b"a") == 0.0


def test_check_all_malformed_and_valid():
    assert check_all(b"\x01") is False
    assert check_all(_blob(b"a", b"a")) is True


def test_check_failure_describes_sequences():
    failure = CheckFailure("osa distance failed", b"ab", b"")
    text = str(failure)
    assert text.startswith("osa distance failed")
    assert "s1 len: 2 content: 97 98" in text
    assert "s2 len: 0 content:" in text
    assert failure.s1 == b"ab"


def test_main_checks_files(tmp_path):
    good = tmp_path / "good.bin"
    good.write_bytes(_blob(b"ab", b"ab"))
    short = tmp_path / "short.bin"
    short.write_bytes(b"\x00")
    assert main([str(good), str(short)]) == 0
    assert check_all(short.read_bytes()) is False