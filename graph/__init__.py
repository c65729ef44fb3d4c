"""
Generic undirected graph model.

**Edge** (edge.py)
    Unordered vertex pair: Edge(a, b) == Edge(b, a).

**Contract** (base.py)
    Graph: abstract operation set of every graph representation.
    Mutators report edge cases as False instead of raising.

**UndirectedGraph** (undirected.py)
    Adjacency-map implementation with an edge set for O(1) edge counting.

**Matrix views** (matrix.py)
    - adjacency_matrix(graph, order) -> dense numpy matrix
    - sparse_adjacency(graph, order) -> scipy CSR matrix

Traversals over these graphs live in traversal/.
"""

from .base import Graph
from .edge import Edge
from .matrix import adjacency_matrix, sparse_adjacency
from .undirected import UndirectedGraph

__all__ = [
    "Edge",
    "Graph",
    "UndirectedGraph",
    "adjacency_matrix",
    "sparse_adjacency",
]
