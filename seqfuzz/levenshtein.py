"""Levenshtein distance with optional weights for each kind of edit."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping, Sequence, Union

from seqfuzz.common import norm_sim_to_norm_dist, pattern_match_vector, remove_common_affix
from seqfuzz.editops import EditOp, Editops, EditType
from seqfuzz.indel import CachedIndel


@dataclass(frozen=True)
class LevenshteinWeights:
    """Costs of an insertion, a deletion and a substitution."""

    insert_cost: int = 1
    delete_cost: int = 1
    replace_cost: int = 1


WeightsLike = Union[LevenshteinWeights, tuple, None]


def _weights(weights: WeightsLike) -> LevenshteinWeights:
    if weights is None:
        return LevenshteinWeights()
    if isinstance(weights, LevenshteinWeights):
        return weights
    return LevenshteinWeights(*weights)


def levenshtein_maximum(len1: int, len2: int, weights: WeightsLike = None) -> int:
    """Largest possible weighted distance between sequences of these lengths."""
    w = _weights(weights)
    max_dist = len1 * w.delete_cost + len2 * w.insert_cost
    if len1 >= len2:
        return min(max_dist, len2 * w.replace_cost + (len1 - len2) * w.delete_cost)
    return min(max_dist, len1 * w.replace_cost + (len2 - len1) * w.insert_cost)


def _myers(pm: Mapping, len1: int, s2: Sequence) -> int:
    """Bit-parallel uniform Levenshtein distance of a preprocessed ``s1`` and ``s2``."""
    if not len1:
        return len(s2)
    mask = (1 << len1) - 1
    last = 1 << (len1 - 1)
    vp, vn = mask, 0
    dist = len1

    for ch in s2:
        x = pm.get(ch, 0) | vn
        d0 = ((((x & vp) + vp) ^ vp) | x) & mask
        hp = (vn | ~(d0 | vp)) & mask
        hn = d0 & vp

        dist += bool(hp & last) - bool(hn & last)

        hp = ((hp << 1) | 1) & mask
        hn = (hn << 1) & mask
        vp = (hn | ~(d0 | hp)) & mask
        vn = hp & d0

    return dist


def _uniform_distance(s1: Sequence, s2: Sequence) -> int:
    s1, s2, _ = remove_common_affix(s1, s2)
    if len(s1) > len(s2):
        s1, s2 = s2, s1
    return _myers(pattern_match_vector(s1), len(s1), s2)


def _generalized_distance(s1: Sequence, s2: Sequence, w: LevenshteinWeights) -> int:
    """Wagner-Fischer with arbitrary costs, keeping a single row."""
    s1, s2, _ = remove_common_affix(s1, s2)
    row = [i * w.delete_cost for i in range(len(s1) + 1)]
    for ch2 in s2:
        diag = row[0]
        row[0] += w.insert_cost
        for i, ch1 in enumerate(s1, start=1):
            above = row[i]
            if ch1 == ch2:
                row[i] = diag
            else:
                row[i] = min(
                    row[i - 1] + w.delete_cost,
                    above + w.insert_cost,
                    diag + w.replace_cost,
                )
            diag = above
    return row[-1]


def _apply_cutoff(dist: int, score_cutoff: int | None) -> int:
    if score_cutoff is None or dist <= score_cutoff:
        return dist
    return score_cutoff + 1


def _raw_distance(s1: Sequence, s2: Sequence, w: LevenshteinWeights) -> int:
    if w.insert_cost == w.delete_cost:
        if w.insert_cost == 0:
            return 0
        if w.insert_cost == w.replace_cost:
            return _uniform_distance(s1, s2) * w.insert_cost
        if w.replace_cost >= w.insert_cost + w.delete_cost:
            return CachedIndel(s1).distance(s2) * w.insert_cost
    return _generalized_distance(s1, s2, w)


def _similarity(maximum: int, dist: int, score_cutoff: int) -> int:
    if score_cutoff > maximum:
        return 0
    sim = maximum - dist
    return sim if sim >= score_cutoff else 0


def _normalized_distance(maximum: int, dist: int, score_cutoff: float) -> float:
    norm_dist = dist / maximum if maximum else 0.0
    return norm_dist if norm_dist <= score_cutoff else 1.0


def _normalized_similarity(maximum: int, dist: int, score_cutoff: float) -> float:
    cutoff_score = norm_sim_to_norm_dist(score_cutoff)
    norm_sim = 1.0 - _normalized_distance(maximum, dist, cutoff_score)
    return norm_sim if norm_sim >= score_cutoff else 0.0


def levenshtein_distance(
    s1: Sequence,
    s2: Sequence,
    weights: WeightsLike = None,
    score_cutoff: int | None = None,
    score_hint: int | None = None,
) -> int:
    """Weighted edit distance; ``score_cutoff + 1`` when it exceeds the cutoff.

    ``score_hint`` is accepted for interface compatibility and does not change
    the result.
    """
    return _apply_cutoff(_raw_distance(s1, s2, _weights(weights)), score_cutoff)


def levenshtein_similarity(
    s1: Sequence,
    s2: Sequence,
    weights: WeightsLike = None,
    score_cutoff: int = 0,
    score_hint: int = 0,
) -> int:
    """Maximum possible distance minus the distance, or 0 below ``score_cutoff``."""
    w = _weights(weights)
    maximum = levenshtein_maximum(len(s1), len(s2), w)
    return _similarity(maximum, _raw_distance(s1, s2, w), score_cutoff)


def levenshtein_normalized_distance(
    s1: Sequence,
    s2: Sequence,
    weights: WeightsLike = None,
    score_cutoff: float = 1.0,
    score_hint: float = 1.0,
) -> float:
    """Distance divided by the maximum, or 1.0 above ``score_cutoff``."""
    w = _weights(weights)
    maximum = levenshtein_maximum(len(s1), len(s2), w)
    dist = levenshtein_distance(s1, s2, w, math.ceil(maximum * score_cutoff))
    return _normalized_distance(maximum, dist, score_cutoff)


def levenshtein_normalized_similarity(
    s1: Sequence,
    s2: Sequence,
    weights: WeightsLike = None,
    score_cutoff: float = 0.0,
    score_hint: float = 0.0,
) -> float:
    """One minus the normalized distance, or 0.0 below ``score_cutoff``."""
    w = _weights(weights)
    maximum = levenshtein_maximum(len(s1), len(s2), w)
    return _normalized_similarity(maximum, _raw_distance(s1, s2, w), score_cutoff)


def levenshtein_editops(
    s1: Sequence, s2: Sequence, score_hint: int | None = None
) -> Editops:
    """Uniform-cost edit operations that turn ``s1`` into ``s2``.

    Matches are not recorded. ``score_hint`` does not change the result.
    """
    len1, len2 = len(s1), len(s2)
    core1, core2, affix = remove_common_affix(s1, s2)
    prefix = affix.prefix_len
    n, m = len(core1), len(core2)

    matrix = [list(range(n + 1))]
    for j, ch2 in enumerate(core2, start=1):
        prev = matrix[-1]
        row = [j]
        for i, ch1 in enumerate(core1, start=1):
            row.append(min(prev[i] + 1, row[i - 1] + 1, prev[i - 1] + (ch1 != ch2)))
        matrix.append(row)

    reversed_ops: list[EditOp] = []
    i, j = n, m
    while i and j:
        current = matrix[j][i]
        if current == matrix[j][i - 1] + 1:
            i -= 1
            reversed_ops.append(EditOp(EditType.DELETE, i + prefix, j + prefix))
        elif current == matrix[j - 1][i] + 1:
            j -= 1
            reversed_ops.append(EditOp(EditType.INSERT, i + prefix, j + prefix))
        else:
            i -= 1
            j -= 1
            if core1[i] != core2[j]:
                reversed_ops.append(EditOp(EditType.REPLACE, i + prefix, j + prefix))
    while i:
        i -= 1
        reversed_ops.append(EditOp(EditType.DELETE, i + prefix, j + prefix))
    while j:
        j -= 1
        reversed_ops.append(EditOp(EditType.INSERT, i + prefix, j + prefix))

    reversed_ops.reverse()
    return Editops(reversed_ops, src_len=len1, dest_len=len2)


class CachedLevenshtein:
    """Levenshtein scorer that preprocesses ``s1`` once for many comparisons."""

    def __init__(self, s1: Sequence, weights: WeightsLike = None) -> None:
        self.s1 = s1
        self.weights = _weights(weights)
        self._pm = pattern_match_vector(s1)
        self._indel = CachedIndel(s1)

    def _raw(self, s2: Sequence) -> int:
        w = self.weights
        if w.insert_cost == w.delete_cost:
            if w.insert_cost == 0:
                return 0
            if w.insert_cost == w.replace_cost:
                return _myers(self._pm, len(self.s1), s2) * w.insert_cost
            if w.replace_cost >= w.insert_cost + w.delete_cost:
                return self._indel.distance(s2) * w.insert_cost
        return _generalized_distance(self.s1, s2, w)

    def _maximum(self, s2: Sequence) -> int:
        return levenshtein_maximum(len(self.s1), len(s2), self.weights)

    def distance(
        self, s2: Sequence, score_cutoff: int | None = None, score_hint: int | None = None
    ) -> int:
        """Distance to ``s2``; ``score_cutoff + 1`` when it is exceeded."""
        return _apply_cutoff(self._raw(s2), score_cutoff)

    def similarity(self, s2: Sequence, score_cutoff: int = 0, score_hint: int = 0) -> int:
        """Maximum minus the distance, or 0 below ``score_cutoff``."""
        return _similarity(self._maximum(s2), self._raw(s2), score_cutoff)

    def normalized_distance(
        self, s2: Sequence, score_cutoff: float = 1.0, score_hint: float = 1.0
    ) -> float:
        """Distance divided by the maximum, or 1.0 above ``score_cutoff``."""
        return _normalized_distance(self._maximum(s2), self._raw(s2), score_cutoff)

    def normalized_similarity(
        self, s2: Sequence, score_cutoff: float = 0.0, score_hint: float = 0.0
    ) -> float:
        """One minus the normalized distance, or 0.0 below ``score_cutoff``."""
        return _normalized_similarity(self._maximum(s2), self._raw(s2), score_cutoff)