"""Cross-check the fast metrics against simple reference implementations.

Each input blob starts with a little-endian 32 bit length of the first
sequence, followed by the bytes of the first and then the second sequence.
"""

from __future__ import annotations

import argparse
import math
import sys
from pathlib import Path
from typing import Iterator, Sequence

from seqfuzz.editops import editops_apply
from seqfuzz.fuzz_ratio import CachedRatio, partial_ratio
from seqfuzz.indel import indel_distance, indel_editops, lcs_seq_similarity
from seqfuzz.jaro_winkler import jaro_similarity
from seqfuzz.levenshtein import CachedLevenshtein, levenshtein_distance, levenshtein_editops
from seqfuzz.osa import osa_distance

_HEADER_SIZE = 4
_LONG_LIMIT = 10000
_CHUNK_SIZES = (8, 16, 32, 64)
_REL_TOLERANCE = 0.0001


def _code(ch) -> int:
    return ord(ch) if isinstance(ch, str) else int(ch)


def _describe(name: str, seq: Sequence) -> str:
    content = " ".join(str(_code(ch)) for ch in seq)
    return f"{name} len: {len(seq)} content: {content}".rstrip()


class CheckFailure(Exception):
    """A fast implementation disagreed with the reference result."""

    def __init__(self, message: str, s1: Sequence, s2: Sequence) -> None:
        super().__init__(f"{message}\n{_describe('s1', s1)}\n{_describe('s2', s2)}")
        self.s1 = s1
        self.s2 = s2


def extract_strings(data: bytes) -> tuple[bytes, bytes] | None:
    """Split an input blob into two sequences, or ``None`` if it is malformed."""
    if len(data) <= _HEADER_SIZE:
        return None
    len1 = int.from_bytes(data[:_HEADER_SIZE], "little")
    body = data[_HEADER_SIZE:]
    if len1 > len(body):
        return None
    return bytes(body[:len1]), bytes(body[len1:])


def vec_multiply(seq: Sequence, count: int) -> Sequence:
    """The sequence repeated ``count`` times."""
    return seq * count


def _long_variants(s1: Sequence, s2: Sequence) -> Iterator[tuple[Sequence, Sequence]]:
    for exponent in range(2, 9):
        factor = 2**exponent
        long1, long2 = vec_multiply(s1, factor), vec_multiply(s2, factor)
        if len(long1) > _LONG_LIMIT or len(long2) > _LONG_LIMIT:
            return
        yield long1, long2


def _chunks(seq: Sequence, size: int) -> list:
    return [seq[start : start + size] for start in range(0, len(seq), size)]


def _is_close(a: float, b: float) -> bool:
    return math.isclose(a, b, rel_tol=_REL_TOLERANCE, abs_tol=0.0)


def _with_cutoff(dist: int, score_cutoff: int | None) -> int:
    if score_cutoff is None or dist <= score_cutoff:
        return dist
    return score_cutoff + 1


# reference implementations


def _ref_lcs(s1: Sequence, s2: Sequence) -> int:
    row = [0] * (len(s2) + 1)
    for a in s1:
        diag = 0
        for j, b in enumerate(s2, start=1):
            above = row[j]
            row[j] = diag + 1 if a == b else max(row[j], row[j - 1])
            diag = above
    return row[-1]


def _ref_indel(s1: Sequence, s2: Sequence, score_cutoff: int | None = None) -> int:
    return _with_cutoff(len(s1) + len(s2) - 2 * _ref_lcs(s1, s2), score_cutoff)


def _ref_levenshtein(s1: Sequence, s2: Sequence) -> int:
    row = list(range(len(s2) + 1))
    for i, a in enumerate(s1, start=1):
        diag, row[0] = row[0], i
        for j, b in enumerate(s2, start=1):
            above = row[j]
            row[j] = min(above + 1, row[j - 1] + 1, diag + (a != b))
            diag = above
    return row[-1]


def _ref_osa(s1: Sequence, s2: Sequence) -> int:
    before: list[int] = []
    prev = list(range(len(s2) + 1))
    for i, a in enumerate(s1, start=1):
        cur = [i] + [0] * len(s2)
        for j, b in enumerate(s2, start=1):
            value = min(prev[j] + 1, cur[j - 1] + 1, prev[j - 1] + (a != b))
            if i > 1 and j > 1 and a == s2[j - 2] and s1[i - 2] == b:
                value = min(value, before[j - 2] + 1)
            cur[j] = value
        before, prev = prev, cur
    return prev[-1]


def _ref_jaro(s1: Sequence, s2: Sequence) -> float:
    len1, len2 = len(s1), len(s2)
    if not len1 and not len2:
        return 1.0
    if not len1 or not len2:
        return 0.0
    bound = max(max(len1, len2) // 2 - 1, 0)
    flags1 = [False] * len1
    flags2 = [False] * len2
    for i, a in enumerate(s1):
        for j in range(max(0, i - bound), min(len2, i + bound + 1)):
            if not flags2[j] and s2[j] == a:
                flags1[i] = flags2[j] = True
                break
    matches = sum(flags1)
    if not matches:
        return 0.0
    matched1 = [ch for ch, flag in zip(s1, flags1) if flag]
    matched2 = [ch for ch, flag in zip(s2, flags2) if flag]
    transpositions = sum(a != b for a, b in zip(matched1, matched2)) // 2
    return (matches / len1 + matches / len2 + (matches - transpositions) / matches) / 3


def _best_window(needle: Sequence, haystack: Sequence) -> float:
    scorer = CachedRatio(needle)
    size = len(needle)
    return max(
        scorer.similarity(haystack[max(0, start) : start + size])
        for start in range(1 - size, len(haystack))
    )


def _ref_partial_ratio(s1: Sequence, s2: Sequence) -> float:
    if len(s1) > len(s2):
        s1, s2 = s2, s1
    if not s1:
        return 100.0 if not s2 else 0.0
    best = _best_window(s1, s2)
    if len(s1) == len(s2):
        best = max(best, _best_window(s2, s1))
    return best


# checks


def check_indel_distance(s1: Sequence, s2: Sequence) -> int:
    """Compare the indel distance under several cutoffs; return the reference distance."""
    cutoffs = [0, 1, 2, 3, 4, len(s1) // 2, len(s2) // 2, None]
    for score_cutoff in cutoffs:
        dist = indel_distance(s1, s2, score_cutoff)
        reference = _ref_indel(s1, s2, score_cutoff)
        if dist != reference:
            raise CheckFailure(
                f"indel distance failed (score_cutoff = {score_cutoff}, "
                f"reference_score = {reference}, score = {dist})",
                s1,
                s2,
            )
    return _ref_indel(s1, s2)


def check_indel_editops(s1: Sequence, s2: Sequence) -> int:
    """Check that indel edit operations rebuild ``s2``; return their count."""
    score = _ref_indel(s1, s2)
    ops = indel_editops(s1, s2)
    if len(ops) == score and editops_apply(ops, s1, s2) != s2:
        raise CheckFailure("indel_editops failed", s1, s2)
    return len(ops)


def check_lcs_similarity(s1: Sequence, s2: Sequence) -> int:
    """Compare the LCS of fixed-size pieces of ``s1`` with ``s2``; return the full LCS."""
    if not s1:
        return 0
    for size in _CHUNK_SIZES:
        for piece in _chunks(s1, size):
            reference = _ref_lcs(piece, s2)
            score = lcs_seq_similarity(piece, s2)
            if score != reference:
                raise CheckFailure(
                    f"lcs similarity failed (chunk size = {size}, "
                    f"reference_score = {reference}, score = {score})",
                    piece,
                    s2,
                )
    return _ref_lcs(s1, s2)


def _check_levenshtein_pieces(s1: Sequence, s2: Sequence) -> None:
    for size in _CHUNK_SIZES:
        for index, piece in enumerate(_chunks(s1, size)):
            reference = _ref_levenshtein(piece, s2)
            score = CachedLevenshtein(piece).distance(s2)
            if score != reference:
                raise CheckFailure(
                    f"levenshtein distance of piece failed (reference_score = {reference}, "
                    f"score = {score}, i = {index})",
                    piece,
                    s2,
                )


def check_levenshtein_distance(s1: Sequence, s2: Sequence) -> int:
    """Compare the Levenshtein distance under many cutoffs; return the reference."""
    reference = _ref_levenshtein(s1, s2)
    cutoffs = [*range(32), None, len(s1) // 2, len(s2) // 2]
    for score_cutoff in cutoffs:
        expected = _with_cutoff(reference, score_cutoff)
        dist = levenshtein_distance(s1, s2, None, score_cutoff)
        if dist != expected:
            raise CheckFailure(
                f"levenshtein distance failed (score_cutoff = {score_cutoff}, "
                f"reference_score = {expected}, score = {dist})",
                s1,
                s2,
            )
        _check_levenshtein_pieces(s1, s2)
    return reference


def _validate_levenshtein_editops(
    s1: Sequence, s2: Sequence, score: int, score_hint: int | None
) -> None:
    ops = levenshtein_editops(s1, s2, score_hint)
    if len(ops) == score and editops_apply(ops, s1, s2) != s2:
        raise CheckFailure(f"levenshtein_editops failed (score_hint = {score_hint})", s1, s2)


def check_levenshtein_editops(s1: Sequence, s2: Sequence) -> int:
    """Check Levenshtein edit operations on ever longer copies; return the first distance."""
    first_score: int | None = None
    for _ in range(10):
        score = _ref_levenshtein(s1, s2)
        if first_score is None:
            first_score = score
        for score_hint in (None, 64, max(score - 1, 0), score):
            _validate_levenshtein_editops(s1, s2, score, score_hint)
        s1 = vec_multiply(s1, 2)
        s2 = vec_multiply(s2, 2)
    return first_score


def _validate_osa(
    reference: int, s1: Sequence, s2: Sequence, score_cutoff: int | None
) -> None:
    expected = _with_cutoff(reference, score_cutoff)
    dist = osa_distance(s1, s2, score_cutoff)
    if dist != expected:
        raise CheckFailure(
            f"osa distance failed (score_cutoff = {score_cutoff}, "
            f"reference_score = {expected}, score = {dist})",
            s1,
            s2,
        )


def check_osa_distance(s1: Sequence, s2: Sequence) -> int:
    """Compare the OSA distance under cutoffs and on long copies; return the reference."""
    reference = _ref_osa(s1, s2)
    for score_cutoff in range(4, 32):
        _validate_osa(reference, s1, s2, score_cutoff)
    _validate_osa(reference, s1, s2, None)
    for long1, long2 in _long_variants(s1, s2):
        _validate_osa(_ref_osa(long1, long2), long1, long2, None)
    return reference


def _validate_jaro(s1: Sequence, s2: Sequence) -> None:
    reference = _ref_jaro(s1, s2)
    sim = jaro_similarity(s1, s2)
    if not _is_close(sim, reference):
        raise CheckFailure(
            f"jaro similarity failed (reference_score = {reference}, score = {sim})", s1, s2
        )
    for size in _CHUNK_SIZES:
        for index, piece in enumerate(_chunks(s1, size)):
            piece_reference = _ref_jaro(piece, s2)
            piece_sim = jaro_similarity(piece, s2)
            if not _is_close(piece_sim, piece_reference):
                raise CheckFailure(
                    f"jaro similarity of piece failed (reference_score = {piece_reference}, "
                    f"score = {piece_sim}, i = {index})",
                    piece,
                    s2,
                )


def check_jaro_similarity(s1: Sequence, s2: Sequence) -> float:
    """Compare the Jaro similarity, also on long copies; return the reference."""
    _validate_jaro(s1, s2)
    for long1, long2 in _long_variants(s1, s2):
        _validate_jaro(long1, long2)
    return _ref_jaro(s1, s2)


def _validate_partial_ratio(s1: Sequence, s2: Sequence) -> None:
    sim = partial_ratio(s1, s2)
    reference = _ref_partial_ratio(s1, s2)
    if not _is_close(sim, reference):
        raise CheckFailure(
            f"partial_ratio failed (reference_score = {reference}, score = {sim})", s1, s2
        )


def check_partial_ratio(s1: Sequence, s2: Sequence) -> float:
    """Compare the partial ratio in both orders and on long copies; return the reference."""
    _validate_partial_ratio(s1, s2)
    _validate_partial_ratio(s2, s1)
    for long1, long2 in _long_variants(s1, s2):
        for a, b in (
            (long1, long2),
            (long2, long1),
            (s1, long2),
            (long2, s1),
            (long1, s2),
            (s2, long1),
        ):
            _validate_partial_ratio(a, b)
    return _ref_partial_ratio(s1, s2)


def check_all(data: bytes) -> bool:
    """Run every check on one input blob; ``False`` when the blob is malformed."""
    strings = extract_strings(data)
    if strings is None:
        return False
    s1, s2 = strings
    check_indel_distance(s1, s2)
    check_indel_editops(s1, s2)
    check_lcs_similarity(s1, s2)
    check_levenshtein_distance(s1, s2)
    check_levenshtein_editops(s1, s2)
    check_osa_distance(s1, s2)
    check_jaro_similarity(s1, s2)
    check_partial_ratio(s1, s2)
    return True


def main(argv: Sequence[str] | None = None) -> int:
    """Check each input file (or standard input); exit status 1 on a mismatch."""
    parser = argparse.ArgumentParser(
        prog="seqfuzz-check",
        description="Cross-check the metrics against reference implementations.",
    )
    parser.add_argument("inputs", nargs="*", type=Path, help="input blobs to check")
    args = parser.parse_args(argv)

    if args.inputs:
        blobs = [(str(path), path.read_bytes()) for path in args.inputs]
    else:
        blobs = [("<stdin>", sys.stdin.buffer.read())]

    for name, data in blobs:
        try:
            check_all(data)
        except CheckFailure as exc:
            print(f"{name}: {exc}", file=sys.stderr)
            return 1
    return 0