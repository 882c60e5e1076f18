"""Simple and partial fuzzy ratios on a scale from 0 to 100."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Sequence

from seqfuzz.common import norm_sim_to_norm_dist
from seqfuzz.indel import CachedIndel, indel_normalized_similarity


@dataclass
class ScoreAlignment:
    """A score together with the slices of both sequences that produced it."""

    score: float = 0.0
    src_start: int = 0
    src_end: int = 0
    dest_start: int = 0
    dest_end: int = 0

    def swapped(self) -> ScoreAlignment:
        """The same alignment with source and destination exchanged."""
        return replace(
            self,
            src_start=self.dest_start,
            src_end=self.dest_end,
            dest_start=self.src_start,
            dest_end=self.src_end,
        )


def ratio(s1: Sequence, s2: Sequence, score_cutoff: float = 0.0) -> float:
    """Normalized indel similarity scaled to 0..100, or 0 below ``score_cutoff``."""
    return indel_normalized_similarity(s1, s2, score_cutoff / 100) * 100


class CachedRatio:
    """Ratio scorer that preprocesses ``s1`` once for many comparisons."""

    def __init__(self, s1: Sequence) -> None:
        self.s1 = s1
        self.cached_indel = CachedIndel(s1)

    def similarity(self, s2: Sequence, score_cutoff: float = 0.0) -> float:
        """Ratio between the cached sequence and ``s2``."""
        return self.cached_indel.normalized_similarity(s2, score_cutoff / 100) * 100


def _partial_ratio_impl(
    s1: Sequence,
    s2: Sequence,
    cached_ratio: CachedRatio,
    s1_char_set: frozenset,
    score_cutoff: float,
) -> ScoreAlignment:
    """Best alignment of ``s1`` against windows of ``s2``; ``len(s1) <= len(s2)``."""
    len1, len2 = len(s1), len(s2)
    res = ScoreAlignment(0.0, 0, len1, 0, len1)

    if len2 > len1:
        maximum = len1 * 2
        norm_cutoff_dist = norm_sim_to_norm_dist(score_cutoff / 100)
        cutoff_dist: float = math.ceil(maximum * norm_cutoff_dist)
        best_dist: float = math.inf
        scores: list[int | None] = [None] * (len2 - len1)
        windows = [(0, len2 - len1 - 1)]

        while windows:
            new_windows = []
            for first, last in windows:
                for pos in (first, last):
                    if scores[pos] is not None:
                        continue
                    dist = cached_ratio.cached_indel.distance(s2[pos : pos + len1])
                    scores[pos] = dist
                    if dist < cutoff_dist:
                        cutoff_dist = best_dist = dist
                        res.dest_start = pos
                        res.dest_end = pos + len1
                        if best_dist == 0:
                            res.score = 100.0
                            return res

                cell_diff = last - first
                if cell_diff == 1:
                    continue

                score_first, score_last = scores[first], scores[last]
                known_edits = abs(score_first - score_last)
                max_score_improvement = (cell_diff - known_edits // 2) // 2 * 2
                min_score = min(score_first, score_last) - max_score_improvement
                if min_score < cutoff_dist:
                    center = cell_diff // 2
                    new_windows.append((first, first + center))
                    new_windows.append((first + center, last))
            windows = new_windows

        score = (1.0 - best_dist / maximum) * 100
        if score >= score_cutoff:
            score_cutoff = res.score = score

    for i in range(1, len1):
        subseq = s2[:i]
        if subseq[-1] not in s1_char_set:
            continue
        ls_ratio = cached_ratio.similarity(subseq, score_cutoff)
        if ls_ratio > res.score:
            score_cutoff = res.score = ls_ratio
            res.dest_start = 0
            res.dest_end = i
            if res.score == 100.0:
                return res

    for i in range(len2 - len1, len2):
        subseq = s2[i:]
        if subseq[0] not in s1_char_set:
            continue
        ls_ratio = cached_ratio.similarity(subseq, score_cutoff)
        if ls_ratio > res.score:
            score_cutoff = res.score = ls_ratio
            res.dest_start = i
            res.dest_end = len2
            if res.score == 100.0:
                return res

    return res


def _partial_ratio_fresh(s1: Sequence, s2: Sequence, score_cutoff: float) -> ScoreAlignment:
    return _partial_ratio_impl(s1, s2, CachedRatio(s1), frozenset(s1), score_cutoff)


def partial_ratio_alignment(
    s1: Sequence, s2: Sequence, score_cutoff: float = 0.0
) -> ScoreAlignment:
    """Best ratio of the shorter sequence against any part of the longer one."""
    len1, len2 = len(s1), len(s2)

    if len1 > len2:
        return partial_ratio_alignment(s2, s1, score_cutoff).swapped()

    if score_cutoff > 100:
        return ScoreAlignment(0.0, 0, len1, 0, len1)

    if not len1 or not len2:
        return ScoreAlignment(100.0 if len1 == len2 else 0.0, 0, len1, 0, len1)

    alignment = _partial_ratio_fresh(s1, s2, score_cutoff)
    if alignment.score != 100 and len1 == len2:
        score_cutoff = max(score_cutoff, alignment.score)
        alignment2 = _partial_ratio_fresh(s2, s1, score_cutoff)
        if alignment2.score > alignment.score:
            return alignment2.swapped()

    return alignment


def partial_ratio(s1: Sequence, s2: Sequence, score_cutoff: float = 0.0) -> float:
    """Score of :func:`partial_ratio_alignment`."""
    return partial_ratio_alignment(s1, s2, score_cutoff).score


class CachedPartialRatio:
    """Partial ratio scorer that preprocesses ``s1`` once for many comparisons."""

    def __init__(self, s1: Sequence) -> None:
        self.s1 = s1
        self.cached_ratio = CachedRatio(s1)
        self.s1_char_set = frozenset(s1)

    def similarity(self, s2: Sequence, score_cutoff: float = 0.0) -> float:
        """Partial ratio between the cached sequence and ``s2``."""
        len1, len2 = len(self.s1), len(s2)

        if len1 > len2:
            return partial_ratio(self.s1, s2, score_cutoff)

        if score_cutoff > 100:
            return 0.0

        if not len1 or not len2:
            return 100.0 if len1 == len2 else 0.0

        score = _partial_ratio_impl(
            self.s1, s2, self.cached_ratio, self.s1_char_set, score_cutoff
        ).score
        if score != 100 and len1 == len2:
            score_cutoff = max(score_cutoff, score)
            score2 = _partial_ratio_fresh(s2, self.s1, score_cutoff).score
            if score2 > score:
                return score2

        return score


def qratio(s1: Sequence, s2: Sequence, score_cutoff: float = 0.0) -> float:
    """Like :func:`ratio`, but 0 when either sequence is empty."""
    if not len(s1) or not len(s2):
        return 0.0
    return ratio(s1, s2, score_cutoff)


class CachedQRatio:
    """QRatio scorer bound to a fixed first sequence."""

    def __init__(self, s1: Sequence) -> None:
        self.s1 = s1
        self.cached_ratio = CachedRatio(s1)

    def similarity(self, s2: Sequence, score_cutoff: float = 0.0) -> float:
        """QRatio between the cached sequence and ``s2``."""
        if not len(self.s1) or not len(s2):
            return 0.0
        return self.cached_ratio.similarity(s2, score_cutoff)