"""Token based fuzzy ratios on a scale from 0 to 100."""

from __future__ import annotations

import math
from typing import Callable, Sequence

from seqfuzz.common import join_tokens, set_decomposition, sorted_split
from seqfuzz.fuzz_ratio import CachedPartialRatio, CachedRatio, partial_ratio, ratio
from seqfuzz.indel import indel_distance

_UNBASE_SCALE = 0.95


def _norm_distance(dist: int, lensum: int, score_cutoff: float = 0.0) -> float:
    score = 100.0 - 100.0 * dist / lensum if lensum > 0 else 100.0
    return score if score >= score_cutoff else 0.0


def _score_cutoff_to_distance(score_cutoff: float, lensum: int) -> int:
    return math.ceil(lensum * (1.0 - score_cutoff / 100))


def _set_based_scores(decomposition, score_cutoff: float) -> tuple[float, float, float, bool]:
    """Scores built from the set decomposition of two token lists.

    Returns the ratio of both differences, the ratios of intersection+difference
    against the intersection, and whether the intersection is non-empty.
    """
    diff_ab_joined = join_tokens(decomposition.difference_ab)
    diff_ba_joined = join_tokens(decomposition.difference_ba)

    ab_len = len(diff_ab_joined)
    ba_len = len(diff_ba_joined)
    sect_len = len(join_tokens(decomposition.intersection))
    has_sect = int(bool(sect_len))

    sect_ab_len = sect_len + has_sect + ab_len
    sect_ba_len = sect_len + has_sect + ba_len

    result = 0.0
    cutoff_distance = _score_cutoff_to_distance(score_cutoff, sect_ab_len + sect_ba_len)
    dist = indel_distance(diff_ab_joined, diff_ba_joined, cutoff_distance)
    if dist <= cutoff_distance:
        result = _norm_distance(dist, sect_ab_len + sect_ba_len, score_cutoff)

    if not sect_len:
        return result, 0.0, 0.0, False

    sect_ab_ratio = _norm_distance(has_sect + ab_len, sect_len + sect_ab_len, score_cutoff)
    sect_ba_ratio = _norm_distance(has_sect + ba_len, sect_len + sect_ba_len, score_cutoff)
    return result, sect_ab_ratio, sect_ba_ratio, True


def token_sort_ratio(s1: Sequence, s2: Sequence, score_cutoff: float = 0.0) -> float:
    """Ratio of both sentences after sorting their words."""
    if score_cutoff > 100:
        return 0.0
    return ratio(join_tokens(sorted_split(s1)), join_tokens(sorted_split(s2)), score_cutoff)


class CachedTokenSortRatio:
    """Token sort ratio scorer bound to a fixed first sentence."""

    def __init__(self, s1: Sequence) -> None:
        self.s1 = s1
        self.cached_ratio = CachedRatio(join_tokens(sorted_split(s1)))

    def similarity(self, s2: Sequence, score_cutoff: float = 0.0) -> float:
        """Token sort ratio between the cached sentence and ``s2``."""
        if score_cutoff > 100:
            return 0.0
        return self.cached_ratio.similarity(join_tokens(sorted_split(s2)), score_cutoff)


def partial_token_sort_ratio(s1: Sequence, s2: Sequence, score_cutoff: float = 0.0) -> float:
    """Partial ratio of both sentences after sorting their words."""
    if score_cutoff > 100:
        return 0.0
    return partial_ratio(
        join_tokens(sorted_split(s1)), join_tokens(sorted_split(s2)), score_cutoff
    )


def _token_set_ratio(tokens_a: list, tokens_b: list, score_cutoff: float) -> float:
    if not tokens_a or not tokens_b:
        return 0.0

    decomposition = set_decomposition(tokens_a, tokens_b)
    if decomposition.intersection and (
        not decomposition.difference_ab or not decomposition.difference_ba
    ):
        return 100.0

    result, sect_ab_ratio, sect_ba_ratio, has_sect = _set_based_scores(
        decomposition, score_cutoff
    )
    if not has_sect:
        return result
    return max(result, sect_ab_ratio, sect_ba_ratio)


def token_set_ratio(s1: Sequence, s2: Sequence, score_cutoff: float = 0.0) -> float:
    """Ratio built from the common and the differing words of both sentences."""
    if score_cutoff > 100:
        return 0.0
    return _token_set_ratio(sorted_split(s1), sorted_split(s2), score_cutoff)


class CachedTokenSetRatio:
    """Token set ratio scorer bound to a fixed first sentence."""

    def __init__(self, s1: Sequence) -> None:
        self.s1 = s1
        self.tokens_s1 = sorted_split(s1)

    def similarity(self, s2: Sequence, score_cutoff: float = 0.0) -> float:
        """Token set ratio between the cached sentence and ``s2``."""
        if score_cutoff > 100:
            return 0.0
        return _token_set_ratio(self.tokens_s1, sorted_split(s2), score_cutoff)


def _partial_token_set_ratio(tokens_a: list, tokens_b: list, score_cutoff: float) -> float:
    if not tokens_a or not tokens_b:
        return 0.0

    decomposition = set_decomposition(tokens_a, tokens_b)
    if decomposition.intersection:
        return 100.0

    return partial_ratio(
        join_tokens(decomposition.difference_ab),
        join_tokens(decomposition.difference_ba),
        score_cutoff,
    )


def partial_token_set_ratio(s1: Sequence, s2: Sequence, score_cutoff: float = 0.0) -> float:
    """Partial ratio of the words found in only one of the sentences."""
    if score_cutoff > 100:
        return 0.0
    return _partial_token_set_ratio(sorted_split(s1), sorted_split(s2), score_cutoff)


def _token_ratio(
    tokens_a: list,
    tokens_b: list,
    sorted_ratio: Callable[[Sequence, float], float],
    score_cutoff: float,
) -> float:
    """Maximum of the token sort ratio and the token set ratio.

    ``sorted_ratio`` scores the joined ``tokens_b`` against the joined ``tokens_a``.
    """
    if score_cutoff > 100:
        return 0.0

    decomposition = set_decomposition(tokens_a, tokens_b)
    if decomposition.intersection and (
        not decomposition.difference_ab or not decomposition.difference_ba
    ):
        return 100.0

    result = sorted_ratio(join_tokens(tokens_b), score_cutoff)
    set_result, sect_ab_ratio, sect_ba_ratio, has_sect = _set_based_scores(
        decomposition, score_cutoff
    )
    result = max(result, set_result)
    if not has_sect:
        return result
    return max(result, sect_ab_ratio, sect_ba_ratio)


def token_ratio(s1: Sequence, s2: Sequence, score_cutoff: float = 0.0) -> float:
    """The better of :func:`token_sort_ratio` and :func:`token_set_ratio`."""
    if score_cutoff > 100:
        return 0.0
    tokens_a = sorted_split(s1)
    s1_sorted = join_tokens(tokens_a)
    return _token_ratio(
        tokens_a,
        sorted_split(s2),
        lambda s2_sorted, cutoff: ratio(s1_sorted, s2_sorted, cutoff),
        score_cutoff,
    )


class CachedTokenRatio:
    """Token ratio scorer bound to a fixed first sentence."""

    def __init__(self, s1: Sequence) -> None:
        self.s1 = s1
        self.s1_tokens = sorted_split(s1)
        self.cached_ratio_s1_sorted = CachedRatio(join_tokens(self.s1_tokens))

    def similarity(self, s2: Sequence, score_cutoff: float = 0.0) -> float:
        """Token ratio between the cached sentence and ``s2``."""
        return _token_ratio(
            self.s1_tokens,
            sorted_split(s2),
            self.cached_ratio_s1_sorted.similarity,
            score_cutoff,
        )


def _partial_token_ratio(
    s1_sorted: Sequence, tokens_s1: list, tokens_b: list, score_cutoff: float
) -> float:
    if score_cutoff > 100:
        return 0.0

    decomposition = set_decomposition(tokens_s1, tokens_b)
    if decomposition.intersection:
        return 100.0

    diff_ab = decomposition.difference_ab
    diff_ba = decomposition.difference_ba

    result = partial_ratio(s1_sorted, join_tokens(tokens_b), score_cutoff)

    # the differences are the full token lists, so the score would repeat
    if len(tokens_s1) == len(diff_ab) and len(tokens_b) == len(diff_ba):
        return result

    score_cutoff = max(score_cutoff, result)
    return max(result, partial_ratio(join_tokens(diff_ab), join_tokens(diff_ba), score_cutoff))


def partial_token_ratio(s1: Sequence, s2: Sequence, score_cutoff: float = 0.0) -> float:
    """The better of the partial token sort and partial token set ratios."""
    if score_cutoff > 100:
        return 0.0
    tokens_a = sorted_split(s1)
    return _partial_token_ratio(join_tokens(tokens_a), tokens_a, sorted_split(s2), score_cutoff)


def wratio(s1: Sequence, s2: Sequence, score_cutoff: float = 0.0) -> float:
    """Weighted combination of several ratios depending on the length ratio."""
    if score_cutoff > 100:
        return 0.0

    len1, len2 = len(s1), len(s2)
    if not len1 or not len2:
        return 0.0

    len_ratio = len1 / len2 if len1 > len2 else len2 / len1
    end_ratio = ratio(s1, s2, score_cutoff)

    if len_ratio < 1.5:
        score_cutoff = max(score_cutoff, end_ratio) / _UNBASE_SCALE
        return max(end_ratio, token_ratio(s1, s2, score_cutoff) * _UNBASE_SCALE)

    partial_scale = 0.9 if len_ratio < 8.0 else 0.6

    score_cutoff = max(score_cutoff, end_ratio) / partial_scale
    end_ratio = max(end_ratio, partial_ratio(s1, s2, score_cutoff) * partial_scale)

    score_cutoff = max(score_cutoff, end_ratio) / _UNBASE_SCALE
    return max(
        end_ratio,
        partial_token_ratio(s1, s2, score_cutoff) * _UNBASE_SCALE * partial_scale,
    )


class CachedWRatio:
    """WRatio scorer bound to a fixed first sentence."""

    def __init__(self, s1: Sequence) -> None:
        self.s1 = s1
        self.cached_partial_ratio = CachedPartialRatio(s1)
        self.tokens_s1 = sorted_split(s1)
        self.s1_sorted = join_tokens(self.tokens_s1)
        self._cached_sorted_ratio = CachedRatio(self.s1_sorted)

    def similarity(self, s2: Sequence, score_cutoff: float = 0.0) -> float:
        """WRatio between the cached sentence and ``s2``."""
        if score_cutoff > 100:
            return 0.0

        len1, len2 = len(self.s1), len(s2)
        if not len1 or not len2:
            return 0.0

        len_ratio = len1 / len2 if len1 > len2 else len2 / len1
        end_ratio = self.cached_partial_ratio.cached_ratio.similarity(s2, score_cutoff)

        if len_ratio < 1.5:
            score_cutoff = max(score_cutoff, end_ratio) / _UNBASE_SCALE
            r = _token_ratio(
                self.tokens_s1,
                sorted_split(s2),
                self._cached_sorted_ratio.similarity,
                score_cutoff,
            )
            return max(end_ratio, r * _UNBASE_SCALE)

        partial_scale = 0.9 if len_ratio < 8.0 else 0.6

        score_cutoff = max(score_cutoff, end_ratio) / partial_scale
        end_ratio = max(
            end_ratio, self.cached_partial_ratio.similarity(s2, score_cutoff) * partial_scale
        )

        score_cutoff = max(score_cutoff, end_ratio) / _UNBASE_SCALE
        r = _partial_token_ratio(self.s1_sorted, self.tokens_s1, sorted_split(s2), score_cutoff)
        return max(end_ratio, r * _UNBASE_SCALE * partial_scale)