"""Typo-tolerant word matchers sized by the length of the query."""

from __future__ import annotations

from dataclasses import dataclass


def max_typos(query: str) -> int:
    """Number of typos allowed for ``query``, based on its UTF-8 byte length."""
    length = len(query.encode("utf-8"))
    if length <= 4:
        return 0
    if length <= 8:
        return 1
    return 2


def _last_row(query: str, word: str) -> list[int]:
    """Last row of the optimal-string-alignment distance table of query x word."""
    before_previous: list[int] = []
    previous = list(range(len(word) + 1))
    for i, query_char in enumerate(query, start=1):
        row = [i]
        for j, word_char in enumerate(word, start=1):
            best = min(
                previous[j] + 1,
                row[j - 1] + 1,
                previous[j - 1] + (query_char != word_char),
            )
            if i > 1 and j > 1 and query_char == word[j - 2] and query[i - 2] == word_char:
                best = min(best, before_previous[j - 2] + 1)
            row.append(best)
        before_previous, previous = previous, row
    return previous


@dataclass(frozen=True)
class LevenshteinDfa:
    """Matches words within ``max_distance`` edits, transpositions included.

    A prefix matcher accepts any word that starts with something close
    enough to the query.
    """

    query: str
    max_distance: int
    prefix: bool = False

    def distance(self, word: str) -> int:
        """Edit distance to ``word``, capped at ``max_distance + 1``."""
        row = _last_row(self.query, word)
        found = min(row) if self.prefix else row[-1]
        return min(found, self.max_distance + 1)

    def is_match(self, word: str) -> bool:
        return self.distance(word) <= self.max_distance


def build_dfa(query: str) -> LevenshteinDfa:
    """Matcher for whole words close to ``query``."""
    return LevenshteinDfa(query, max_typos(query), prefix=False)


def build_prefix_dfa(query: str) -> LevenshteinDfa:
    """Matcher for words whose beginning is close to ``query``."""
    return LevenshteinDfa(query, max_typos(query), prefix=True)