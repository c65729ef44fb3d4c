"""
Type definitions shared by the graph model and its traversals.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from enum import StrEnum
from typing import TypeAlias, TypeVar

# Vertices are opaque values: only equality and hashing are required
E = TypeVar("E", bound=Hashable)

T = TypeVar("T")

Consumer: TypeAlias = Callable[[T], None]
Component: TypeAlias = frozenset[T]


class TraversalModes(StrEnum):
    """Graph Traversal methods"""

    BFS = "bfs"
    DFS = "dfs"


__all__ = ["E", "Consumer", "Component", "TraversalModes"]
