"""
Breadth-first traversal of an undirected graph.
"""

from collections import deque

from graph import Graph
from localtypes import E

from .base import GraphIterator


class BreadthFirstIterator(GraphIterator[E]):
    """
    Yields the component of root by increasing distance from it.

    A vertex is marked visited as soon as it is enqueued, so a vertex reached
    through several paths is queued (and yielded) once.

    Example:
        >>> from graph import UndirectedGraph
        >>> graph = UndirectedGraph[str]()
        >>> for v in "ABCD": _ = graph.add_vertex(v)
        >>> graph.add_edge("A", "B"), graph.add_edge("A", "C"), graph.add_edge("B", "D")
        (True, True, True)
        >>> list(BreadthFirstIterator(graph, "A"))
        ['A', 'B', 'C', 'D']
    """

    def __init__(self, graph: Graph[E], root: E) -> None:
        super().__init__(graph, root)
        self._queue: deque[E] = deque([root])
        self._visited.add(root)

    def has_next(self) -> bool:
        return bool(self._queue)

    def _emit(self) -> E:
        vertex = self._queue.popleft()
        for neighbour in self._graph.get_adjacent_vertices(vertex):
            if neighbour in self._visited:
                continue
            self._queue.append(neighbour)
            self._visited.add(neighbour)
        return vertex
