"""Criterion favouring documents that match query words exactly."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from rankcore.criterion import Criterion, RankedDocument, compare, group_lengths

# Returned when an exact match fills a whole single-word field.
WHOLE_FIELD_MATCH = sys.maxsize


def number_exact_matches(
    query_index: Sequence[int],
    attribute: Sequence[int],
    is_exact: Sequence[bool],
    fields_counts: Sequence[tuple[int, int]],
) -> int:
    """Count query words with at least one exact match.

    An exact match in a field holding a single word wins outright and
    yields :data:`WHOLE_FIELD_MATCH`.
    """
    counts = dict(fields_counts)
    count = 0
    index = 0
    for length in group_lengths(query_index):
        found_exact = False
        for attr, exact in zip(attribute[index : index + length], is_exact[index : index + length]):
            if exact:
                found_exact = True
                if counts.get(attr) == 1:
                    return WHOLE_FIELD_MATCH
        count += found_exact
        index += length
    return count


class Exact(Criterion):
    """Documents with more exact matches rank first."""

    @staticmethod
    def _score(document: RankedDocument) -> int:
        return number_exact_matches(
            document.query_index,
            document.attribute,
            document.is_exact,
            document.fields_counts,
        )

    def evaluate(self, lhs: RankedDocument, rhs: RankedDocument) -> int:
        return -compare(self._score(lhs), self._score(rhs))

    def name(self) -> str:
        return "Exact"