"""
Shared machinery of the pull-based graph iterators.

A GraphIterator walks the connected component of a root vertex lazily. Each
instance owns its traversal state; the graph is only read. Abandoning an
iterator before exhaustion is always safe.

The push-style traverse() helper is derived from the iterator itself, so both
entry points agree on visitation order and on when a vertex counts as visited.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from collections.abc import Iterator
from typing import Generic

from graph import Graph
from localtypes import Consumer, E

logger = logging.getLogger(__name__)


class GraphIterator(Iterator[E], Generic[E]):
    """
    Lazy, resumable, non-restartable sequence of vertices.

    Structural mutation of the graph while the iterator is in flight is
    undefined behaviour.

    Raises:
        ValueError: On construction, if graph or root is None or root is not
            a vertex of graph.
    """

    def __init__(self, graph: Graph[E], root: E) -> None:
        name = self.__class__.__name__
        if graph is None:
            raise ValueError(f"{name}.graph is not allowed to be None")
        if root is None:
            raise ValueError(f"{name}.root is not allowed to be None")
        if not graph.contains_vertex(root):
            raise ValueError(f"{name}.root must be in graph as a vertex: '{root}'")

        self._graph = graph
        self._visited: set[E] = set()

    @abstractmethod
    def has_next(self) -> bool:
        pass

    @abstractmethod
    def _emit(self) -> E:
        """Produces the next vertex. Only called when has_next() holds."""
        pass

    def __next__(self) -> E:
        if not self.has_next():
            raise StopIteration(f"{self.__class__.__name__} has no more elements")
        return self._emit()

    def __iter__(self) -> GraphIterator[E]:
        return self

    @classmethod
    def traverse(
        cls, graph: Graph[E], root: E, consumer: Consumer[E] | None = None
    ) -> tuple[E, ...]:
        """
        Walks the whole component of root, calling consumer once per vertex.

        An exception raised by consumer propagates and stops the walk.

        Returns:
            Visited vertices in visitation order.
        """
        visited: list[E] = []
        for vertex in cls(graph, root):
            if consumer is not None:
                consumer(vertex)
            visited.append(vertex)

        logger.debug(f"{cls.__name__} visited {len(visited)} vertices from {root!r}")
        return tuple(visited)
