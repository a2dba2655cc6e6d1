"""Mapping of rewritten query word indices back onto the original query."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence
from itertools import pairwise

# (origin, real_length) attached to each declared range of real indices.
_Link = tuple[int, int]


def rewrite_range_with(query: Sequence[str], range: range, words: Sequence[str]) -> bool:
    """Tell whether ``words`` may replace the words of ``query`` covered by ``range``.

    Replacements that are not longer than the range, or that already
    appear in the query at that place, are refused.
    """
    if len(words) <= len(range):
        return False
    original = list(query[range.start : range.start + len(words)])
    return original != list(words)


class _IntervalLookup:
    """Sorted intervals searched by point; the last one starting at or before it wins."""

    def __init__(self, intervals: list[tuple[range, _Link]]) -> None:
        self._intervals = sorted(intervals, key=lambda item: (item[0].start, item[0].stop))
        self._starts = [interval.start for interval, _ in self._intervals]

    def query(self, point: int) -> tuple[range, _Link] | None:
        position = bisect_right(self._starts, point) - 1
        if position < 0:
            return None
        interval, link = self._intervals[position]
        return (interval, link) if point in interval else None


class QueryEnhancerBuilder:
    """Collects the replacements declared for ranges of the original query."""

    def __init__(self, query: Sequence[str]) -> None:
        self._query = list(query)
        # origins query indices start out as their own positions
        self._origins = list(range(len(self._query) + 1))
        self._real_to_origin: list[tuple[range, _Link]] = [
            (range(origin, origin + 1), (origin, 1)) for origin in self._origins
        ]

    def declare(self, range: range, real: int, replacement: Sequence[str]) -> None:
        """Record that ``replacement``, starting at real index ``real``, stands for ``range``."""
        replacement = list(replacement)
        if rewrite_range_with(self._query, range, replacement):
            offset = len(replacement) - len(range)
            end = range.stop
            previous_padding = self._origins[end - 1]
            current_offset = (self._origins[end] - 1) - previous_padding
            diff = max(offset - current_offset, 0)
            self._origins[end:] = [origin + diff for origin in self._origins[end:]]

        span = max(len(replacement), len(range))
        real_range = type(range)(real, real + span) if isinstance(range, type(range)) else None
        self._real_to_origin.append((real_range, (range.start, len(replacement))))

    def build(self) -> QueryEnhancer:
        """Freeze the declarations into a :class:`QueryEnhancer`."""
        return QueryEnhancer(list(self._origins), _IntervalLookup(list(self._real_to_origin)))


class QueryEnhancer:
    """Answers which original query indices a real query index stands for."""

    def __init__(self, origins: list[int], real_to_origin: _IntervalLookup) -> None:
        self._origins = origins
        self._real_to_origin = real_to_origin

    def replacement(self, real: int) -> range:
        """Return the range of query indices to use in place of ``real``."""
        found = self._real_to_origin.query(real)
        if found is None:
            raise ValueError(f"real query index {real} has never been declared")
        interval, (origin, real_length) = found
        offset = real - interval.start

        if interval.start + real_length - 1 == real:
            # the last word of the replacement covers what remains of the range
            count = len(interval)
            new_origin = origin
            for i, (low, high) in enumerate(pairwise(self._origins[origin:])):
                count = max(count - (high - low), 0)
                if count == 0:
                    new_origin = origin + i
                    break

            start = self._origins[origin]
            end = self._origins[new_origin + 1]
            return range(start + offset, end)

        start = self._origins[origin]
        return range(start + offset, start + offset + 1)