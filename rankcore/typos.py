"""Criterion favouring documents whose matches carry fewer typos."""

from __future__ import annotations

import struct
from collections.abc import Sequence

from rankcore.criterion import Criterion, RankedDocument, compare, group_lengths

_LOG10 = {0: 0.0, 1: 0.30102, 2: 0.47712, 3: 0.60205}


def _f32(value: float) -> float:
    """Round to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def custom_log10(n: int) -> float:
    """Approximate ``log10(n + 1)`` for a number of typos between 0 and 3."""
    try:
        return _f32(_LOG10[n])
    except KeyError:
        raise ValueError("invalid number") from None


def sum_matches_typos(query_index: Sequence[int], distance: Sequence[int]) -> int:
    """Score the typos of the first match of each query word; higher is better."""
    number_words = 0
    sum_typos = 0.0
    index = 0
    for length in group_lengths(query_index):
        sum_typos = _f32(sum_typos + custom_log10(distance[index]))
        number_words += 1
        index += length
    ratio = _f32(_f32(number_words) / _f32(sum_typos + 1.0))
    return int(_f32(ratio * 1000.0))


class SumOfTypos(Criterion):
    """Documents with the better typo score rank first."""

    def evaluate(self, lhs: RankedDocument, rhs: RankedDocument) -> int:
        return -compare(
            sum_matches_typos(lhs.query_index, lhs.distance),
            sum_matches_typos(rhs.query_index, rhs.distance),
        )

    def name(self) -> str:
        return "SumOfTypos"