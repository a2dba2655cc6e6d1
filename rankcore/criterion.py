"""Ranking criteria that compare documents found by a query."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable, Mapping, Sequence
from dataclasses import dataclass
from itertools import groupby
from typing import Any, Protocol

from rankcore.errors import MeiliError


@dataclass(frozen=True)
class RankedDocument:
    """A document matched by a query, with one entry per match in each sequence.

    The match sequences are sorted by query index, so matches of the same
    query word are consecutive. ``fields_counts`` pairs each attribute with
    its number of words.
    """

    id: int
    query_index: Sequence[int] = ()
    distance: Sequence[int] = ()
    attribute: Sequence[int] = ()
    word_index: Sequence[int] = ()
    is_exact: Sequence[bool] = ()
    fields_counts: Sequence[tuple[int, int]] = ()


def compare(lhs: Any, rhs: Any) -> int:
    """Three-way comparison: negative, zero or positive."""
    return (lhs > rhs) - (lhs < rhs)


def group_lengths(values: Sequence[Any]) -> list[int]:
    """Lengths of the runs of consecutive equal values."""
    return [sum(1 for _ in run) for _, run in groupby(values)]


class Criterion(ABC):
    """Orders two documents; ``evaluate`` returns a negative number when ``lhs`` ranks first."""

    @abstractmethod
    def evaluate(self, lhs: RankedDocument, rhs: RankedDocument) -> int:
        """Compare two documents."""

    @abstractmethod
    def name(self) -> str:
        """Name of the criterion."""

    def eq(self, lhs: RankedDocument, rhs: RankedDocument) -> bool:
        """Tell whether the criterion cannot tell the documents apart."""
        return self.evaluate(lhs, rhs) == 0


class DocumentId(Criterion):
    """Lower document ids rank first."""

    def evaluate(self, lhs: RankedDocument, rhs: RankedDocument) -> int:
        return compare(lhs.id, rhs.id)

    def name(self) -> str:
        return "DocumentId"


def number_of_query_words(query_index: Sequence[int]) -> int:
    """Number of distinct query words matched, given sorted query indices."""
    return len(group_lengths(query_index))


class NumberOfWords(Criterion):
    """Documents that match more query words rank first."""

    def evaluate(self, lhs: RankedDocument, rhs: RankedDocument) -> int:
        return -compare(
            number_of_query_words(lhs.query_index),
            number_of_query_words(rhs.query_index),
        )

    def name(self) -> str:
        return "NumberOfWords"


class SortByAttrError(MeiliError):
    """A sort criterion could not be built from the schema."""


class AttributeNotFound(SortByAttrError):
    default_message = "attribute not found in the schema"


class AttributeNotRegisteredForRanking(SortByAttrError):
    default_message = "attribute not registered for ranking"


class _AttributeProps(Protocol):
    def is_ranked(self) -> bool: ...


class Schema(Protocol):
    """What a sort criterion needs to know about a schema."""

    def attribute(self, name: str) -> Hashable | None: ...

    def props(self, attr: Hashable) -> _AttributeProps: ...


class SortByAttr(Criterion):
    """Sorts documents by a ranked attribute value.

    ``ranked_map`` maps ``(document_id, attribute)`` to a comparable value.
    Documents without a value rank after those that have one.
    """

    def __init__(
        self,
        ranked_map: Mapping[tuple[int, Hashable], Any],
        attr: Hashable,
        reversed: bool = False,
    ) -> None:
        self.ranked_map = ranked_map
        self.attr = attr
        self.reversed = reversed

    @classmethod
    def _from_schema(
        cls,
        ranked_map: Mapping[tuple[int, Hashable], Any],
        schema: Schema,
        attr_name: str,
        reversed: bool,
    ) -> SortByAttr:
        attr = schema.attribute(attr_name)
        if attr is None:
            raise AttributeNotFound()
        if not schema.props(attr).is_ranked():
            raise AttributeNotRegisteredForRanking()
        return cls(ranked_map, attr, reversed)

    @classmethod
    def lower_is_better(
        cls, ranked_map: Mapping[tuple[int, Hashable], Any], schema: Schema, attr_name: str
    ) -> SortByAttr:
        """Documents with lower values rank first."""
        return cls._from_schema(ranked_map, schema, attr_name, reversed=False)

    @classmethod
    def higher_is_better(
        cls, ranked_map: Mapping[tuple[int, Hashable], Any], schema: Schema, attr_name: str
    ) -> SortByAttr:
        """Documents with higher values rank first."""
        return cls._from_schema(ranked_map, schema, attr_name, reversed=True)

    def evaluate(self, lhs: RankedDocument, rhs: RankedDocument) -> int:
        left = self.ranked_map.get((lhs.id, self.attr))
        right = self.ranked_map.get((rhs.id, self.attr))
        if left is None and right is None:
            return 0
        if left is None:
            return 1
        if right is None:
            return -1
        order = compare(left, right)
        return -order if self.reversed else order

    def name(self) -> str:
        return "SortByAttr"