"""Indel distance: edit distance that allows only insertions and deletions."""

from __future__ import annotations

import math
from typing import Callable, Iterator, Mapping, Sequence

from seqfuzz.common import norm_sim_to_norm_dist, pattern_match_vector
from seqfuzz.editops import EditOp, Editops, EditType


def _lcs_rows(pm: Mapping, len1: int, s2: Sequence) -> Iterator[int]:
    """Yield the bit vector after each element of ``s2``.

    A zero bit at position ``i`` marks that the LCS grows by one at ``s1[i]``.
    """
    mask = (1 << len1) - 1
    state = mask
    for ch in s2:
        matches = state & pm.get(ch, 0)
        state = ((state + matches) | (state - matches)) & mask
        yield state


def _lcs_length(pm: Mapping, len1: int, s2: Sequence) -> int:
    state = (1 << len1) - 1
    for state in _lcs_rows(pm, len1, s2):
        pass
    return len1 - state.bit_count()


def _apply_cutoff(dist: int, score_cutoff: int | None) -> int:
    if score_cutoff is None or dist <= score_cutoff:
        return dist
    return score_cutoff + 1


def _similarity(maximum: int, distance: Callable[[int], int], score_cutoff: int) -> int:
    if score_cutoff > maximum:
        return 0
    sim = maximum - distance(maximum - score_cutoff)
    return sim if sim >= score_cutoff else 0


def _normalized_distance(
    maximum: int, distance: Callable[[int], int], score_cutoff: float
) -> float:
    dist = distance(math.ceil(maximum * score_cutoff))
    norm_dist = dist / maximum if maximum else 0.0
    return norm_dist if norm_dist <= score_cutoff else 1.0


def _normalized_similarity(
    maximum: int, distance: Callable[[int], int], score_cutoff: float
) -> float:
    cutoff_score = norm_sim_to_norm_dist(score_cutoff)
    norm_sim = 1.0 - _normalized_distance(maximum, distance, cutoff_score)
    return norm_sim if norm_sim >= score_cutoff else 0.0


class CachedIndel:
    """Indel scorer that preprocesses ``s1`` once for many comparisons."""

    def __init__(self, s1: Sequence) -> None:
        self.s1 = s1
        self._pm = pattern_match_vector(s1)

    def _maximum(self, s2: Sequence) -> int:
        return len(self.s1) + len(s2)

    def _lcs(self, s2: Sequence) -> int:
        return _lcs_length(self._pm, len(self.s1), s2)

    def distance(self, s2: Sequence, score_cutoff: int | None = None) -> int:
        """Indel distance to ``s2``; ``score_cutoff + 1`` when it is exceeded."""
        return _apply_cutoff(self._maximum(s2) - 2 * self._lcs(s2), score_cutoff)

    def similarity(self, s2: Sequence, score_cutoff: int = 0) -> int:
        """Total length minus the distance, or 0 below ``score_cutoff``."""
        return _similarity(
            self._maximum(s2), lambda cutoff: self.distance(s2, cutoff), score_cutoff
        )

    def normalized_distance(self, s2: Sequence, score_cutoff: float = 1.0) -> float:
        """Distance divided by the total length, or 1.0 above ``score_cutoff``."""
        return _normalized_distance(
            self._maximum(s2), lambda cutoff: self.distance(s2, cutoff), score_cutoff
        )

    def normalized_similarity(self, s2: Sequence, score_cutoff: float = 0.0) -> float:
        """One minus the normalized distance, or 0.0 below ``score_cutoff``."""
        return _normalized_similarity(
            self._maximum(s2), lambda cutoff: self.distance(s2, cutoff), score_cutoff
        )


def lcs_seq_similarity(s1: Sequence, s2: Sequence, score_cutoff: int = 0) -> int:
    """Length of the longest common subsequence, or 0 below ``score_cutoff``."""
    sim = _lcs_length(pattern_match_vector(s1), len(s1), s2)
    return sim if sim >= score_cutoff else 0


def indel_distance(s1: Sequence, s2: Sequence, score_cutoff: int | None = None) -> int:
    """Minimum number of insertions and deletions turning ``s1`` into ``s2``."""
    return CachedIndel(s1).distance(s2, score_cutoff)


def indel_similarity(s1: Sequence, s2: Sequence, score_cutoff: int = 0) -> int:
    """Total length minus the indel distance, or 0 below ``score_cutoff``."""
    return CachedIndel(s1).similarity(s2, score_cutoff)


def indel_normalized_distance(s1: Sequence, s2: Sequence, score_cutoff: float = 1.0) -> float:
    """Indel distance divided by the total length of both sequences."""
    return CachedIndel(s1).normalized_distance(s2, score_cutoff)


def indel_normalized_similarity(
    s1: Sequence, s2: Sequence, score_cutoff: float = 0.0
) -> float:
    """One minus the normalized indel distance."""
    return CachedIndel(s1).normalized_similarity(s2, score_cutoff)


def indel_editops(s1: Sequence, s2: Sequence) -> Editops:
    """Insertions and deletions that turn ``s1`` into ``s2``."""
    len1, len2 = len(s1), len(s2)
    rows = [(1 << len1) - 1, *_lcs_rows(pattern_match_vector(s1), len1, s2)]

    def lcs_at(row: int, col: int) -> int:
        return col - (rows[row] & ((1 << col) - 1)).bit_count()

    reversed_ops: list[EditOp] = []
    i, j = len1, len2
    while i and j:
        if rows[j] >> (i - 1) & 1:
            i -= 1
            reversed_ops.append(EditOp(EditType.DELETE, i, j))
        elif lcs_at(j - 1, i) == lcs_at(j, i):
            j -= 1
            reversed_ops.append(EditOp(EditType.INSERT, i, j))
        else:
            i -= 1
            j -= 1
    while i:
        i -= 1
        reversed_ops.append(EditOp(EditType.DELETE, i, j))
    while j:
        j -= 1
        reversed_ops.append(EditOp(EditType.INSERT, i, j))

    reversed_ops.reverse()
    return Editops(reversed_ops, src_len=len1, dest_len=len2)