"""Ordered lists of ranking criteria."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import overload

from rankcore.criterion import Criterion, DocumentId, NumberOfWords
from rankcore.exactness import Exact
from rankcore.position import SumOfWordsAttribute, SumOfWordsPosition
from rankcore.proximity import WordsProximity
from rankcore.typos import SumOfTypos


class CriteriaBuilder:
    """Collects criteria in the order they are to be applied."""

    def __init__(self) -> None:
        self._criteria: list[Criterion] = []

    def add(self, criterion: Criterion) -> CriteriaBuilder:
        """Append ``criterion`` and return the builder for chaining."""
        self.push(criterion)
        return self

    def push(self, criterion: Criterion) -> None:
        """Append ``criterion``."""
        self._criteria.append(criterion)

    def build(self) -> Criteria:
        return Criteria(self._criteria)


class Criteria:
    """An immutable sequence of criteria, the most important first."""

    def __init__(self, criteria: Iterable[Criterion]) -> None:
        self._criteria = tuple(criteria)

    @classmethod
    def default(cls) -> Criteria:
        """The standard ranking rules."""
        return (
            CriteriaBuilder()
            .add(SumOfTypos())
            .add(NumberOfWords())
            .add(WordsProximity())
            .add(SumOfWordsAttribute())
            .add(SumOfWordsPosition())
            .add(Exact())
            .add(DocumentId())
            .build()
        )

    def __iter__(self) -> Iterator[Criterion]:
        return iter(self._criteria)

    def __len__(self) -> int:
        return len(self._criteria)

    @overload
    def __getitem__(self, index: int) -> Criterion: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Criterion, ...]: ...

    def __getitem__(self, index: int | slice) -> Criterion | tuple[Criterion, ...]:
        return self._criteria[index]