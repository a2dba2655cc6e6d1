"""Counting of documents per distinct key, with a per-key limit."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable


class DistinctMap:
    """Counts accepted entries, allowing at most ``limit`` per key."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        self._seen: Counter[Hashable] = Counter()
        self._len = 0

    def __len__(self) -> int:
        return self._len


class BufferedDistinctMap:
    """Staging area over a :class:`DistinctMap`; commit with :meth:`transfer_to_internal`."""

    def __init__(self, internal: DistinctMap) -> None:
        self.internal = internal
        self._seen: Counter[Hashable] = Counter()
        self._len = 0

    def register(self, key: Hashable) -> bool:
        """Accept ``key`` unless it already reached the limit; return whether accepted."""
        seen = self.internal._seen[key] + self._seen[key]
        if seen < self.internal.limit:
            self._seen[key] += 1
            self._len += 1
            return True
        return False

    def register_without_key(self) -> bool:
        """Accept an entry that has no distinct key."""
        self._len += 1
        return True

    def transfer_to_internal(self) -> None:
        """Move the buffered counts into the underlying map."""
        self.internal._seen.update(self._seen)
        self._seen.clear()
        self.internal._len += self._len
        self._len = 0

    def __len__(self) -> int:
        return len(self.internal) + self._len