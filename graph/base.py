"""
Abstract operation set shared by every graph representation.

Mutators never raise on contract edge cases (None vertex, missing endpoint,
self-loop, duplicate insertion, missing edge): they return False and leave
the graph unchanged, so repeating a call is always safe.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Set
from typing import Generic

from localtypes import E

from .edge import Edge


class Graph(ABC, Generic[E]):
    """Interface for graphs over hashable vertices."""

    @abstractmethod
    def add_vertex(self, vertex: E | None) -> bool:
        """Adds an isolated vertex. False if None or already present."""
        pass

    @abstractmethod
    def remove_vertex(self, vertex: E | None) -> bool:
        """Removes a vertex with all its incident edges. False if absent."""
        pass

    @abstractmethod
    def add_edge(self, vertex1: E | None, vertex2: E | None) -> bool:
        """Connects two distinct vertices already in the graph."""
        pass

    @abstractmethod
    def remove_edge(self, vertex1: E | None, vertex2: E | None) -> bool:
        """Disconnects two vertices. False if there was nothing to remove."""
        pass

    @abstractmethod
    def add_all(self, graph: Graph[E]) -> bool:
        """Merges another graph into this one. False if it has no vertices."""
        pass

    @abstractmethod
    def contains_vertex(self, vertex: object) -> bool:
        pass

    @abstractmethod
    def contains_edge(self, vertex1: object, vertex2: object) -> bool:
        pass

    @abstractmethod
    def get_vertex_size(self) -> int:
        pass

    @abstractmethod
    def get_path_length(self) -> int:
        """Returns the number of edges."""
        pass

    @abstractmethod
    def get_all_vertices(self) -> Set[E]:
        pass

    @abstractmethod
    def get_all_edges(self) -> frozenset[Edge[E]]:
        pass

    @abstractmethod
    def get_adjacent_vertices(self, vertex: object) -> Set[E]:
        """Returns the neighbours of a vertex, empty if it is not in the graph."""
        pass

    def __len__(self) -> int:
        return self.get_vertex_size()

    def __contains__(self, vertex: object) -> bool:
        return self.contains_vertex(vertex)

    def __iter__(self) -> Iterator[E]:
        return iter(self.get_all_vertices())
