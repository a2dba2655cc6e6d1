"""Criteria favouring matches in early attributes and at early positions."""

from __future__ import annotations

from collections.abc import Sequence

from rankcore.criterion import Criterion, RankedDocument, compare, group_lengths


def _sum_first_of_groups(query_index: Sequence[int], values: Sequence[int]) -> int:
    total = 0
    index = 0
    for length in group_lengths(query_index):
        total += values[index]
        index += length
    return total


def sum_matches_attributes(query_index: Sequence[int], attribute: Sequence[int]) -> int:
    """Sum of the attribute of the first match of each query word."""
    return _sum_first_of_groups(query_index, attribute)


def sum_matches_attribute_index(query_index: Sequence[int], word_index: Sequence[int]) -> int:
    """Sum of the word position of the first match of each query word."""
    return _sum_first_of_groups(query_index, word_index)


class SumOfWordsAttribute(Criterion):
    """Documents matching in earlier attributes rank first."""

    def evaluate(self, lhs: RankedDocument, rhs: RankedDocument) -> int:
        return compare(
            sum_matches_attributes(lhs.query_index, lhs.attribute),
            sum_matches_attributes(rhs.query_index, rhs.attribute),
        )

    def name(self) -> str:
        return "SumOfWordsAttribute"


class SumOfWordsPosition(Criterion):
    """Documents matching at earlier word positions rank first."""

    def evaluate(self, lhs: RankedDocument, rhs: RankedDocument) -> int:
        return compare(
            sum_matches_attribute_index(lhs.query_index, lhs.word_index),
            sum_matches_attribute_index(rhs.query_index, rhs.word_index),
        )

    def name(self) -> str:
        return "SumOfWordsPosition"