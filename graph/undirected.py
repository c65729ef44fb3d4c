"""
Adjacency-map implementation of the graph contract.

The graph keeps two views of the same relation:
- an adjacency map, vertex -> neighbours, for constant time neighbour lookup
- a set of unordered Edge pairs, for constant time edge counting and lookup

Neighbour sets are dicts with None values so that insertion order is kept,
which makes traversal orders deterministic.

Views returned by get_all_vertices and get_adjacent_vertices are live:
mutating the graph while iterating over them (or while a traversal is in
flight) is undefined behaviour.
"""

from __future__ import annotations

import logging
from collections.abc import Set

from localtypes import E

from .base import Graph
from .edge import Edge

logger = logging.getLogger(__name__)

_NO_NEIGHBOURS: frozenset = frozenset()


class UndirectedGraph(Graph[E]):
    """
    Undirected graph without self-loops or parallel edges.

    Example:
        >>> graph = UndirectedGraph[str]()
        >>> graph.add_vertex("A"), graph.add_vertex("B")
        (True, True)
        >>> graph.add_edge("A", "B")
        True
        >>> sorted(graph.get_adjacent_vertices("B"))
        ['A']
        >>> graph.get_path_length()
        1
    """

    def __init__(self, graph: Graph[E] | None = None) -> None:
        self._adjacency: dict[E, dict[E, None]] = {}
        self._edges: set[Edge[E]] = set()
        if graph is not None:
            self.add_all(graph)

    # =========================================================================
    # Mutators
    # =========================================================================

    def add_vertex(self, vertex: E | None) -> bool:
        if vertex is None or vertex in self._adjacency:
            return False
        self._adjacency[vertex] = {}
        return True

    def remove_vertex(self, vertex: E | None) -> bool:
        if vertex is None or vertex not in self._adjacency:
            return False

        neighbours = self._adjacency.pop(vertex)
        for neighbour in neighbours:
            del self._adjacency[neighbour][vertex]
            self._edges.discard(Edge(vertex, neighbour))

        logger.debug(f"Removed vertex {vertex!r} and {len(neighbours)} incident edges")
        return True

    def add_edge(self, vertex1: E | None, vertex2: E | None) -> bool:
        if not self._is_candidate_pair(vertex1, vertex2):
            logger.debug(f"Rejected edge ({vertex1!r}, {vertex2!r})")
            return False

        self._adjacency[vertex1][vertex2] = None
        self._adjacency[vertex2][vertex1] = None
        self._edges.add(Edge(vertex1, vertex2))
        return True

    def remove_edge(self, vertex1: E | None, vertex2: E | None) -> bool:
        if not self._is_candidate_pair(vertex1, vertex2):
            return False
        if vertex2 not in self._adjacency[vertex1]:
            return False

        del self._adjacency[vertex1][vertex2]
        del self._adjacency[vertex2][vertex1]
        self._edges.discard(Edge(vertex1, vertex2))
        return True

    def add_all(self, graph: Graph[E]) -> bool:
        vertices = tuple(graph.get_all_vertices())

        # Nothing to merge from an empty graph
        if not vertices:
            return False

        for vertex in vertices:
            self._adjacency.setdefault(vertex, {})

        for vertex in vertices:
            # Copy so that both graphs never share a neighbour container
            neighbours = tuple(graph.get_adjacent_vertices(vertex))
            known = self._adjacency[vertex]
            for neighbour in neighbours:
                known[neighbour] = None
                self._adjacency[neighbour][vertex] = None
                self._edges.add(Edge(vertex, neighbour))

        logger.debug(f"Merged {len(vertices)} vertices into graph")
        return True

    def _is_candidate_pair(self, vertex1: object, vertex2: object) -> bool:
        """Both endpoints known, non-None and distinct."""
        if vertex1 is None or vertex2 is None or vertex1 == vertex2:
            return False
        return vertex1 in self._adjacency and vertex2 in self._adjacency

    # =========================================================================
    # Queries
    # =========================================================================

    def contains_vertex(self, vertex: object) -> bool:
        return vertex is not None and vertex in self._adjacency

    def contains_edge(self, vertex1: object, vertex2: object) -> bool:
        if not self._is_candidate_pair(vertex1, vertex2):
            return False
        return vertex2 in self._adjacency[vertex1]

    def get_vertex_size(self) -> int:
        return len(self._adjacency)

    def get_path_length(self) -> int:
        return len(self._edges)

    def get_all_vertices(self) -> Set[E]:
        return self._adjacency.keys()

    def get_all_edges(self) -> frozenset[Edge[E]]:
        return frozenset(self._edges)

    def get_adjacent_vertices(self, vertex: object) -> Set[E]:
        if vertex is None:
            return _NO_NEIGHBOURS
        neighbours = self._adjacency.get(vertex)
        if neighbours is None:
            return _NO_NEIGHBOURS
        return neighbours.keys()

    # =========================================================================
    # Data model
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        # Edges derive from adjacency, so they take no part in identity
        if not isinstance(other, UndirectedGraph):
            return False
        return self._adjacency == other._adjacency

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        if not self._adjacency:
            return "UndirectedGraph {}"
        lines = [
            f"  {vertex}: {{{', '.join(str(n) for n in neighbours)}}}"
            for vertex, neighbours in self._adjacency.items()
        ]
        return "UndirectedGraph {\n" + ",\n".join(lines) + "\n}"

    def __repr__(self) -> str:
        adjacency = {vertex: set(neighbours) for vertex, neighbours in self._adjacency.items()}
        return f"{self.__class__.__name__}({adjacency!r})"
