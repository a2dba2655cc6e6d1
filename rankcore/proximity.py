"""Criterion favouring documents whose matched words lie close together."""

from __future__ import annotations

from collections.abc import Sequence

from rankcore.criterion import Criterion, RankedDocument, compare, group_lengths

MAX_DISTANCE = 8

# Proximity reported when one of the sides has no match at all.
_NO_PROXIMITY = 2**16 - 1

_AttrWordIndex = tuple[Sequence[int], Sequence[int]]


def index_proximity(lhs: int, rhs: int) -> int:
    """Distance between two word positions; words out of order cost one more."""
    if lhs < rhs:
        return min(rhs - lhs, MAX_DISTANCE)
    return min(lhs - rhs, MAX_DISTANCE) + 1


def attribute_proximity(lhs: tuple[int, int], rhs: tuple[int, int]) -> int:
    """Distance between two ``(attribute, word_index)`` positions."""
    lattr, lwi = lhs
    rattr, rwi = rhs
    if lattr != rattr:
        return MAX_DISTANCE
    return index_proximity(lwi, rwi)


def min_proximity(lhs: _AttrWordIndex, rhs: _AttrWordIndex) -> int:
    """Smallest distance between any position of ``lhs`` and any of ``rhs``."""
    left = list(zip(*lhs))
    right = list(zip(*rhs))
    return min(
        (attribute_proximity(a, b) for a in left for b in right),
        default=_NO_PROXIMITY,
    )


def matches_proximity(
    query_index: Sequence[int],
    distance: Sequence[int],
    attribute: Sequence[int],
    word_index: Sequence[int],
) -> int:
    """Sum of the proximities between consecutive matched query words.

    Only the matches with the fewest typos of each query word are used.
    """

    def best_positions(start: int, length: int) -> _AttrWordIndex:
        best = group_lengths(distance[start : start + length])[0]
        return attribute[start : start + best], word_index[start : start + best]

    proximity = 0
    index = 0
    previous: _AttrWordIndex | None = None
    for length in group_lengths(query_index):
        current = best_positions(index, length)
        if previous is not None:
            proximity += min_proximity(previous, current)
        previous = current
        index += length
    return proximity


class WordsProximity(Criterion):
    """Documents whose query words are closer together rank first."""

    @staticmethod
    def _score(document: RankedDocument) -> int:
        return matches_proximity(
            document.query_index,
            document.distance,
            document.attribute,
            document.word_index,
        )

    def evaluate(self, lhs: RankedDocument, rhs: RankedDocument) -> int:
        return compare(self._score(lhs), self._score(rhs))

    def name(self) -> str:
        return "WordsProximity"