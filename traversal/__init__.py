"""
Graph traversals.

Each strategy is offered two ways:
    - pull: an iterator the caller advances at its own pace
    - push: traverse(graph, root, consumer) calling consumer once per vertex

Iterators:
    BreadthFirstIterator(graph, root) - vertices by increasing distance
    DepthFirstIterator(graph, root)   - depth-first preorder, no recursion

Functions:
    breadth_first_traverse(graph, root, consumer) - push-style BFS
    depth_first_traverse(graph, root, consumer)   - push-style DFS
    iterate(graph, root, mode)                    - iterator for a TraversalModes
"""

from graph import Graph
from localtypes import Consumer, E, TraversalModes

from .base import GraphIterator
from .breadth_first import BreadthFirstIterator
from .depth_first import DepthFirstIterator

_ITERATORS: dict[TraversalModes, type[GraphIterator]] = {
    TraversalModes.BFS: BreadthFirstIterator,
    TraversalModes.DFS: DepthFirstIterator,
}


def iterate(
    graph: Graph[E], root: E, mode: TraversalModes = TraversalModes.BFS
) -> GraphIterator[E]:
    """Returns a fresh iterator of the requested strategy."""
    return _ITERATORS[TraversalModes(mode)](graph, root)


def breadth_first_traverse(
    graph: Graph[E], root: E, consumer: Consumer[E] | None = None
) -> tuple[E, ...]:
    return BreadthFirstIterator.traverse(graph, root, consumer)


def depth_first_traverse(
    graph: Graph[E], root: E, consumer: Consumer[E] | None = None
) -> tuple[E, ...]:
    return DepthFirstIterator.traverse(graph, root, consumer)


__all__ = [
    "GraphIterator",
    "BreadthFirstIterator",
    "DepthFirstIterator",
    "iterate",
    "breadth_first_traverse",
    "depth_first_traverse",
]
