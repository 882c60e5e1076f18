"""Optimal string alignment distance (restricted Damerau-Levenshtein)."""

from __future__ import annotations

import math
from typing import Mapping, Sequence

from seqfuzz.common import norm_sim_to_norm_dist, pattern_match_vector, remove_common_affix


def _osa_hyrroe(pm: Mapping, len1: int, s2: Sequence) -> int:
    """Bit-parallel OSA distance between a preprocessed ``s1`` and ``s2``."""
    if not len1:
        return len(s2)
    mask = (1 << len1) - 1
    last = 1 << (len1 - 1)
    vp, vn, d0, pm_old = mask, 0, 0, 0
    dist = len1

    for ch in s2:
        pm_j = pm.get(ch, 0)
        tr = ((~d0 & pm_j) << 1) & pm_old
        d0 = ((((pm_j & vp) + vp) ^ vp) | pm_j | vn | tr) & mask

        hp = (vn | ~(d0 | vp)) & mask
        hn = d0 & vp

        dist += bool(hp & last) - bool(hn & last)

        hp = ((hp << 1) | 1) & mask
        hn = (hn << 1) & mask

        vp = (hn | ~(d0 | hp)) & mask
        vn = hp & d0
        pm_old = pm_j

    return dist


def _apply_cutoff(dist: int, score_cutoff: int | None) -> int:
    if score_cutoff is None or dist <= score_cutoff:
        return dist
    return score_cutoff + 1


def _osa_distance(s1: Sequence, s2: Sequence) -> int:
    if len(s2) < len(s1):
        s1, s2 = s2, s1
    s1, s2, _ = remove_common_affix(s1, s2)
    return _osa_hyrroe(pattern_match_vector(s1), len(s1), s2)


def _similarity(maximum: int, dist: int, score_cutoff: int) -> int:
    if score_cutoff > maximum:
        return 0
    sim = maximum - dist
    return sim if sim >= score_cutoff else 0


def _normalized_distance(maximum: int, dist: int, score_cutoff: float) -> float:
    norm_dist = dist / maximum if maximum else 0.0
    return norm_dist if norm_dist <= score_cutoff else 1.0


def _normalized_similarity(maximum: int, dist: int, score_cutoff: float) -> float:
    norm_sim = 1.0 - _normalized_distance(maximum, dist, norm_sim_to_norm_dist(score_cutoff))
    return norm_sim if norm_sim >= score_cutoff else 0.0


def osa_distance(s1: Sequence, s2: Sequence, score_cutoff: int | None = None) -> int:
    """OSA distance; ``score_cutoff + 1`` when the distance exceeds the cutoff."""
    return _apply_cutoff(_osa_distance(s1, s2), score_cutoff)


def osa_similarity(s1: Sequence, s2: Sequence, score_cutoff: int = 0) -> int:
    """Longer length minus the OSA distance, or 0 below ``score_cutoff``."""
    return _similarity(max(len(s1), len(s2)), _osa_distance(s1, s2), score_cutoff)


def osa_normalized_distance(s1: Sequence, s2: Sequence, score_cutoff: float = 1.0) -> float:
    """OSA distance divided by the longer length, or 1.0 above ``score_cutoff``."""
    maximum = max(len(s1), len(s2))
    dist = osa_distance(s1, s2, math.ceil(maximum * score_cutoff))
    return _normalized_distance(maximum, dist, score_cutoff)


def osa_normalized_similarity(s1: Sequence, s2: Sequence, score_cutoff: float = 0.0) -> float:
    """One minus the normalized OSA distance, or 0.0 below ``score_cutoff``."""
    return _normalized_similarity(max(len(s1), len(s2)), _osa_distance(s1, s2), score_cutoff)


class CachedOSA:
    """OSA scorer that preprocesses ``s1`` once for many comparisons."""

    def __init__(self, s1: Sequence) -> None:
        self.s1 = s1
        self._pm = pattern_match_vector(s1)

    def _raw(self, s2: Sequence) -> int:
        return _osa_hyrroe(self._pm, len(self.s1), s2)

    def _maximum(self, s2: Sequence) -> int:
        return max(len(self.s1), len(s2))

    def distance(self, s2: Sequence, score_cutoff: int | None = None) -> int:
        """OSA distance to ``s2``; ``score_cutoff + 1`` when it is exceeded."""
        return _apply_cutoff(self._raw(s2), score_cutoff)

    def similarity(self, s2: Sequence, score_cutoff: int = 0) -> int:
        """Longer length minus the distance, or 0 below ``score_cutoff``."""
        return _similarity(self._maximum(s2), self._raw(s2), score_cutoff)

    def normalized_distance(self, s2: Sequence, score_cutoff: float = 1.0) -> float:
        """Distance divided by the longer length, or 1.0 above ``score_cutoff``."""
        return _normalized_distance(self._maximum(s2), self._raw(s2), score_cutoff)

    def normalized_similarity(self, s2: Sequence, score_cutoff: float = 0.0) -> float:
        """One minus the normalized distance, or 0.0 below ``score_cutoff``."""
        return _normalized_similarity(self._maximum(s2), self._raw(s2), score_cutoff)