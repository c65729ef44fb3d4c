"""
Edges of an undirected graph.

An edge is an unordered pair of distinct vertices: Edge(a, b) and Edge(b, a)
are the same edge, compare equal and hash identically.
"""

from dataclasses import dataclass
from typing import Generic

from localtypes import E


@dataclass(frozen=True, eq=False)
class Edge(Generic[E]):
    """Unordered pair of vertices."""

    vertex1: E
    vertex2: E

    def endpoints(self) -> frozenset[E]:
        return frozenset((self.vertex1, self.vertex2))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.endpoints() == other.endpoints()

    def __hash__(self) -> int:
        return hash(self.endpoints())

    def __contains__(self, vertex: object) -> bool:
        return vertex == self.vertex1 or vertex == self.vertex2

    def opposite(self, vertex: E) -> E:
        """
        Returns the endpoint facing the given one.

        Raises:
            ValueError: If vertex is not an endpoint of this edge.
        """
        if vertex == self.vertex1:
            return self.vertex2
        if vertex == self.vertex2:
            return self.vertex1
        raise ValueError(f"{vertex!r} is not an endpoint of {self}")

    def __str__(self) -> str:
        return f"({self.vertex1}, {self.vertex2})"
