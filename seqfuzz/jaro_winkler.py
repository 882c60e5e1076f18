"""Jaro and Jaro-Winkler similarity."""

from __future__ import annotations

from typing import Sequence


def _jaro(s1: Sequence, s2: Sequence) -> float:
    len1, len2 = len(s1), len(s2)
    if not len1 and not len2:
        return 1.0
    if not len1 or not len2:
        return 0.0

    bound = max(len1, len2) // 2
    if bound:
        bound -= 1

    flagged2 = [False] * len2
    matched1 = []
    for i, ch in enumerate(s1):
        for j in range(max(0, i - bound), min(len2, i + bound + 1)):
            if not flagged2[j] and s2[j] == ch:
                flagged2[j] = True
                matched1.append(ch)
                break

    common = len(matched1)
    if not common:
        return 0.0

    matched2 = [ch for ch, flagged in zip(s2, flagged2) if flagged]
    transpositions = sum(a != b for a, b in zip(matched1, matched2)) // 2
    return (common / len1 + common / len2 + (common - transpositions) / common) / 3


def _common_prefix(s1: Sequence, s2: Sequence) -> int:
    prefix = 0
    for a, b in zip(s1[:4], s2[:4]):
        if a != b:
            break
        prefix += 1
    return prefix


def _jaro_winkler(s1: Sequence, s2: Sequence, prefix_weight: float) -> float:
    sim = _jaro(s1, s2)
    if sim > 0.7:
        sim += _common_prefix(s1, s2) * prefix_weight * (1.0 - sim)
        sim = min(sim, 1.0)
    return sim


def _cut_similarity(sim: float, score_cutoff: float) -> float:
    return sim if sim >= score_cutoff else 0.0


def _cut_distance(sim: float, score_cutoff: float) -> float:
    dist = 1.0 - sim
    return dist if dist <= score_cutoff else 1.0


def jaro_similarity(s1: Sequence, s2: Sequence, score_cutoff: float = 0.0) -> float:
    """Jaro similarity in [0, 1], or 0.0 below ``score_cutoff``."""
    return _cut_similarity(_jaro(s1, s2), score_cutoff)


def jaro_winkler_similarity(
    s1: Sequence, s2: Sequence, prefix_weight: float = 0.1, score_cutoff: float = 0.0
) -> float:
    """Jaro similarity boosted by a common prefix of up to four elements."""
    return _cut_similarity(_jaro_winkler(s1, s2, prefix_weight), score_cutoff)


def jaro_winkler_distance(
    s1: Sequence, s2: Sequence, prefix_weight: float = 0.1, score_cutoff: float = 1.0
) -> float:
    """One minus the Jaro-Winkler similarity, or 1.0 above ``score_cutoff``."""
    return _cut_distance(_jaro_winkler(s1, s2, prefix_weight), score_cutoff)


def jaro_winkler_normalized_similarity(
    s1: Sequence, s2: Sequence, prefix_weight: float = 0.1, score_cutoff: float = 0.0
) -> float:
    """Same as the similarity, which is already normalized."""
    return jaro_winkler_similarity(s1, s2, prefix_weight, score_cutoff)


def jaro_winkler_normalized_distance(
    s1: Sequence, s2: Sequence, prefix_weight: float = 0.1, score_cutoff: float = 1.0
) -> float:
    """Same as the distance, which is already normalized."""
    return jaro_winkler_distance(s1, s2, prefix_weight, score_cutoff)


class CachedJaroWinkler:
    """Jaro-Winkler scorer bound to a fixed first sequence."""

    def __init__(self, s1: Sequence, prefix_weight: float = 0.1) -> None:
        self.s1 = s1
        self.prefix_weight = prefix_weight

    def _raw(self, s2: Sequence) -> float:
        return _jaro_winkler(self.s1, s2, self.prefix_weight)

    def similarity(self, s2: Sequence, score_cutoff: float = 0.0) -> float:
        """Jaro-Winkler similarity to ``s2``, or 0.0 below ``score_cutoff``."""
        return _cut_similarity(self._raw(s2), score_cutoff)

    def distance(self, s2: Sequence, score_cutoff: float = 1.0) -> float:
        """Jaro-Winkler distance to ``s2``, or 1.0 above ``score_cutoff``."""
        return _cut_distance(self._raw(s2), score_cutoff)

    def normalized_similarity(self, s2: Sequence, score_cutoff: float = 0.0) -> float:
        """Same as :meth:`similarity`."""
        return self.similarity(s2, score_cutoff)

    def normalized_distance(self, s2: Sequence, score_cutoff: float = 1.0) -> float:
        """Same as :meth:`distance`."""
        return self.distance(s2, score_cutoff)