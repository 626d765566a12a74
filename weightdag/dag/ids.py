"""Vertex identifier sources."""

import itertools


class IdSource:
    """Hands out increasing integer identifiers.

    Every graph owns one by default, so identifiers are unique per graph.
    Pass the same instance to several graphs to keep identifiers unique
    across all of them.
    """

    def __init__(self, start: int = 0) -> None:
        self._counter = itertools.count(start)
        self.last: int = start - 1

    def next_id(self) -> int:
        self.last = next(self._counter)
        return self.last
