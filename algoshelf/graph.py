"""Directed graphs stored as adjacency matrices, with reachability queries."""

from __future__ import annotations

from typing import Hashable, Iterable

MAX_VERTICES = 20


class AdjacencyMatrix:
    """A directed graph over named vertices, stored as a boolean matrix.

    Vertices are numbered from 0 in the order given. If a name appears more
    than once, lookups resolve to its first position.
    """

    def __init__(self, vertices: Iterable[Hashable]):
        self.vertices = list(vertices)
        if len(self.vertices) > MAX_VERTICES:
            raise ValueError(
                f"at most {MAX_VERTICES} vertices are supported, got {len(self.vertices)}"
            )
        self._index: dict[Hashable, int] = {}
        for position, vertex in enumerate(self.vertices):
            self._index.setdefault(vertex, position)
        size = len(self.vertices)
        self.arcs = [[False] * size for _ in range(size)]

    def __len__(self) -> int:
        return len(self.vertices)

    def index_of(self, vertex):
        """Position of ``vertex``; raises KeyError if the graph does not hold it."""
        try:
            return self._index[vertex]
        except KeyError:
            raise KeyError(f"unknown vertex: {vertex!r}") from None

    def add_arc(self, src, dst):
        """Add the directed arc ``src -> dst``."""
        self.arcs[self.index_of(src)][self.index_of(dst)] = True

    def has_arc(self, src, dst) -> bool:
        """True if the arc ``src -> dst`` is present."""
        return self.arcs[self.index_of(src)][self.index_of(dst)]

    def has_path(self, src, dst):
        """True if ``dst`` can be reached from ``src`` along arcs.

        A vertex always reaches itself.
        """
        start = self.index_of(src)
        end = self.index_of(dst)
        visited = [False] * len(self.vertices)
        pending = [start]
        while pending:
            current = pending.pop()
            if current == end:
                return True
            if visited[current]:
                continue
            visited[current] = True
            pending.extend(
                neighbour
                for neighbour, linked in reversed(list(enumerate(self.arcs[current])))
                if linked and not visited[neighbour]
            )
        return False