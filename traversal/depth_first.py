"""
Depth-first traversal of an undirected graph without recursion.

Instead of a stack of vertices or the interpreter's call stack, the iterator
keeps a stack of frames, each frame being the not-yet-consumed part of some
emitted vertex's neighbour sequence. Auxiliary space is therefore bounded by
the depth of the traversal, and deep graphs never hit the recursion limit.

States:
    HAS_NEXT  - a lookahead vertex is ready to be emitted
    EXHAUSTED - terminal, the whole component has been emitted
"""

from collections.abc import Iterator

from graph import Graph
from localtypes import E

from .base import GraphIterator

# Any hashable value may be a vertex, so "no lookahead" needs its own marker
_EXHAUSTED = object()


class DepthFirstIterator(GraphIterator[E]):
    """
    Yields the component of root in depth-first preorder.

    Example:
        >>> from graph import UndirectedGraph
        >>> graph = UndirectedGraph[int]()
        >>> for v in range(4): _ = graph.add_vertex(v)
        >>> graph.add_edge(0, 1), graph.add_edge(0, 2), graph.add_edge(1, 3)
        (True, True, True)
        >>> list(DepthFirstIterator(graph, 0))
        [0, 1, 3, 2]
    """

    def __init__(self, graph: Graph[E], root: E) -> None:
        super().__init__(graph, root)
        self._frames: list[Iterator[E]] = [iter(graph.get_adjacent_vertices(root))]
        self._lookahead: E | object = root

    def has_next(self) -> bool:
        return self._lookahead is not _EXHAUSTED

    def _emit(self) -> E:
        vertex = self._lookahead
        self._visited.add(vertex)
        self._advance()
        return vertex

    def _advance(self) -> None:
        """Moves the lookahead to the next unvisited vertex, backtracking as needed."""
        while self._frames:
            candidate = next(self._frames[-1], _EXHAUSTED)
            if candidate is _EXHAUSTED:
                # Back out a level
                self._frames.pop()
                continue
            if candidate in self._visited:
                continue

            self._lookahead = candidate
            self._frames.append(iter(self._graph.get_adjacent_vertices(candidate)))
            return

        self._lookahead = _EXHAUSTED
