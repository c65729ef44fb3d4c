"""
Matrix views of a graph.

Both views index rows and columns by a vertex ordering, returned alongside the
matrix. The matrices are symmetric with a zero diagonal; each edge contributes
two unit entries.
"""

from collections.abc import Sequence

import numpy as np
from scipy.sparse import csr_array

from localtypes import E

from .base import Graph


def _vertex_order(graph: Graph[E], order: Sequence[E] | None) -> tuple[E, ...]:
    vertices = tuple(graph.get_all_vertices())
    if order is None:
        return vertices

    ordered = tuple(order)
    if len(ordered) != len(vertices) or set(ordered) != set(vertices):
        raise ValueError("order must be a permutation of the graph's vertices")
    return ordered


def _edge_indices(
    graph: Graph[E], ordered: tuple[E, ...]
) -> tuple[np.ndarray, np.ndarray]:
    index = {vertex: i for i, vertex in enumerate(ordered)}
    rows: list[int] = []
    cols: list[int] = []
    for vertex in ordered:
        for neighbour in graph.get_adjacent_vertices(vertex):
            rows.append(index[vertex])
            cols.append(index[neighbour])
    return np.asarray(rows, dtype=np.intp), np.asarray(cols, dtype=np.intp)


def adjacency_matrix(
    graph: Graph[E], order: Sequence[E] | None = None
) -> tuple[np.ndarray, tuple[E, ...]]:
    """
    Dense 0/1 adjacency matrix.

    Args:
        graph: Graph to convert.
        order: Vertex ordering for rows and columns, insertion order if None.

    Returns:
        Tuple of (matrix, ordering).

    Raises:
        ValueError: If order is not a permutation of the graph's vertices.
    """
    ordered = _vertex_order(graph, order)
    matrix = np.zeros((len(ordered), len(ordered)), dtype=np.int8)
    rows, cols = _edge_indices(graph, ordered)
    matrix[rows, cols] = 1
    return matrix, ordered


def sparse_adjacency(
    graph: Graph[E], order: Sequence[E] | None = None
) -> tuple[csr_array, tuple[E, ...]]:
    """Same as adjacency_matrix, in compressed sparse row form."""
    ordered = _vertex_order(graph, order)
    rows, cols = _edge_indices(graph, ordered)
    data = np.ones(len(rows), dtype=np.int8)
    matrix = csr_array((data, (rows, cols)), shape=(len(ordered), len(ordered)))
    return matrix, ordered
