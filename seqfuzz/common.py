"""Helpers shared by the distance metrics and the fuzzy ratios."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import groupby
from typing import Any, Hashable, Sequence

_SPACE_CODES = frozenset(
    [*range(0x0009, 0x000E), *range(0x001C, 0x0020), 0x0020, 0x0085, 0x00A0, 0x1680]
    + [*range(0x2000, 0x200B), 0x2028, 0x2029, 0x202F, 0x205F, 0x3000]
)


@dataclass(frozen=True)
class StringAffix:
    """Lengths of the prefix and suffix shared by two sequences."""

    prefix_len: int
    suffix_len: int


@dataclass
class DecomposedSet:
    """Tokens only in the first sentence, only in the second, and in both."""

    difference_ab: list = field(default_factory=list)
    difference_ba: list = field(default_factory=list)
    intersection: list = field(default_factory=list)


def remove_common_prefix(s1: Sequence, s2: Sequence) -> tuple[Sequence, Sequence, int]:
    """Strip the common prefix; return both remainders and the prefix length."""
    length = 0
    for a, b in zip(s1, s2):
        if a != b:
            break
        length += 1
    return s1[length:], s2[length:], length


def remove_common_suffix(s1: Sequence, s2: Sequence) -> tuple[Sequence, Sequence, int]:
    """Strip the common suffix; return both remainders and the suffix length."""
    length = 0
    for a, b in zip(reversed(s1), reversed(s2)):
        if a != b:
            break
        length += 1
    return s1[: len(s1) - length], s2[: len(s2) - length], length


def remove_common_affix(s1: Sequence, s2: Sequence) -> tuple[Sequence, Sequence, StringAffix]:
    """Strip both the common prefix and the common suffix."""
    s1, s2, prefix_len = remove_common_prefix(s1, s2)
    s1, s2, suffix_len = remove_common_suffix(s1, s2)
    return s1, s2, StringAffix(prefix_len, suffix_len)


def norm_sim_to_norm_dist(score_cutoff: float, imprecision: float = 0.00001) -> float:
    """Turn a normalized similarity cutoff into a normalized distance cutoff."""
    return min(1.0, 1.0 - score_cutoff + imprecision)


def _is_space(ch: Any) -> bool:
    if isinstance(ch, str):
        return len(ch) == 1 and ord(ch) in _SPACE_CODES
    if isinstance(ch, int):
        return ch in _SPACE_CODES
    return False


def sorted_split(sentence: Sequence) -> list:
    """Split a sentence on whitespace and return its tokens sorted."""
    tokens = []
    for is_space, group in groupby(enumerate(sentence), key=lambda item: _is_space(item[1])):
        if is_space:
            continue
        positions = [pos for pos, _ in group]
        tokens.append(sentence[positions[0] : positions[-1] + 1])
    tokens.sort()
    return tokens


def join_tokens(tokens: Sequence[Sequence]) -> Sequence:
    """Join tokens with a single space between each pair."""
    if not tokens:
        return ""
    first = tokens[0]
    if isinstance(first, str):
        return " ".join(tokens)
    if isinstance(first, (bytes, bytearray)):
        return b" ".join(tokens)
    sep: Any = " " if any(isinstance(ch, str) for tok in tokens for ch in tok) else 0x20
    joined: list = []
    for index, token in enumerate(tokens):
        if index:
            joined.append(sep)
        joined.extend(token)
    return joined


def _dedupe(tokens: Sequence) -> list:
    return [token for token, _ in groupby(tokens)]


def set_decomposition(a: Sequence, b: Sequence) -> DecomposedSet:
    """Split two sorted token lists into their differences and intersection."""
    difference_ba = _dedupe(b)
    difference_ab = []
    intersection = []
    for token in _dedupe(a):
        if token in difference_ba:
            difference_ba.remove(token)
            intersection.append(token)
        else:
            difference_ab.append(token)
    return DecomposedSet(difference_ab, difference_ba, intersection)


def pattern_match_vector(s1: Sequence[Hashable]) -> dict:
    """Map every element of ``s1`` to a bit mask of the positions it occurs at."""
    masks: dict = {}
    for pos, ch in enumerate(s1):
        masks[ch] = masks.get(ch, 0) | (1 << pos)
    return masks