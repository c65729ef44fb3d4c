"""
Functions related to graphs
"""

import logging

from graph import Graph
from localtypes import Component, E
from traversal import BreadthFirstIterator

logger = logging.getLogger(__name__)


def connected_components(graph: Graph[E]) -> frozenset[Component[E]]:
    """
    Extract connected components from an undirected graph.

    Args:
        graph: Graph to decompose.

    Returns:
        frozenset[frozenset[E]]: set of connected components of the graph
    """

    seen: set[E] = set()
    components = set()

    # Guarantees all the vertices are at least visited once
    for vertex in graph.get_all_vertices():
        # Avoid visiting an already seen component
        if vertex in seen:
            continue

        component = frozenset(BreadthFirstIterator(graph, vertex))
        seen.update(component)
        components.add(component)

    logger.debug(f"Found {len(components)} components over {len(seen)} vertices")
    return frozenset(components)


def is_connected(graph: Graph[E]) -> bool:
    """True when every vertex reaches every other one. The empty graph is connected."""
    vertices = graph.get_all_vertices()
    if not vertices:
        return True
    root = next(iter(vertices))
    return sum(1 for _ in BreadthFirstIterator(graph, root)) == len(vertices)
