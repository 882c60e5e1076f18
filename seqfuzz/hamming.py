"""Hamming distance between two sequences."""

from __future__ import annotations

import math
from typing import Sequence

from seqfuzz.common import norm_sim_to_norm_dist
from seqfuzz.editops import EditOp, Editops, EditType


def _check_lengths(s1: Sequence, s2: Sequence, pad: bool) -> None:
    if not pad and len(s1) != len(s2):
        raise ValueError("Sequences are not the same length.")


def _maximum(s1: Sequence, s2: Sequence) -> int:
    return max(len(s1), len(s2))


def hamming_distance(
    s1: Sequence, s2: Sequence, pad: bool = True, score_cutoff: int | None = None
) -> int:
    """Count the positions that differ; with ``pad`` the length difference counts too."""
    _check_lengths(s1, s2, pad)
    dist = _maximum(s1, s2) - sum(a == b for a, b in zip(s1, s2))
    if score_cutoff is None or dist <= score_cutoff:
        return dist
    return score_cutoff + 1


def hamming_similarity(
    s1: Sequence, s2: Sequence, pad: bool = True, score_cutoff: int = 0
) -> int:
    """Number of matching positions, or 0 when below ``score_cutoff``."""
    _check_lengths(s1, s2, pad)
    maximum = _maximum(s1, s2)
    if score_cutoff > maximum:
        return 0
    dist = hamming_distance(s1, s2, pad, maximum - score_cutoff)
    sim = maximum - dist
    return sim if sim >= score_cutoff else 0


def hamming_normalized_distance(
    s1: Sequence, s2: Sequence, pad: bool = True, score_cutoff: float = 1.0
) -> float:
    """Distance divided by the longer length, or 1.0 above ``score_cutoff``."""
    maximum = _maximum(s1, s2)
    cutoff_distance = math.ceil(maximum * score_cutoff)
    dist = hamming_distance(s1, s2, pad, cutoff_distance)
    norm_dist = dist / maximum if maximum else 0.0
    return norm_dist if norm_dist <= score_cutoff else 1.0


def hamming_normalized_similarity(
    s1: Sequence, s2: Sequence, pad: bool = True, score_cutoff: float = 0.0
) -> float:
    """One minus the normalized distance, or 0.0 below ``score_cutoff``."""
    cutoff_score = norm_sim_to_norm_dist(score_cutoff)
    norm_sim = 1.0 - hamming_normalized_distance(s1, s2, pad, cutoff_score)
    return norm_sim if norm_sim >= score_cutoff else 0.0


def hamming_editops(s1: Sequence, s2: Sequence, pad: bool = True) -> Editops:
    """Edit operations that turn ``s1`` into ``s2`` position by position."""
    _check_lengths(s1, s2, pad)
    len1, len2 = len(s1), len(s2)
    min_len = min(len1, len2)
    ops = Editops(src_len=len1, dest_len=len2)
    for pos, (a, b) in enumerate(zip(s1, s2)):
        if a != b:
            ops.append(EditOp(EditType.REPLACE, pos, pos))
    for pos in range(min_len, len1):
        ops.append(EditOp(EditType.DELETE, pos, len2))
    for pos in range(min_len, len2):
        ops.append(EditOp(EditType.INSERT, len1, pos))
    return ops