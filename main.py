"""
Build an undirected graph from the command line and walk it.

Example:
    python main.py --edge A B --edge B C --edge A D --root A --mode dfs
"""

import argparse
import logging
import sys
from collections.abc import Sequence

from rich.console import Console

from constants import DEFAULT_LOG_LEVEL, DEFAULT_TRAVERSAL_MODE, LOG_FORMAT
from graph import UndirectedGraph
from localtypes import TraversalModes
from traversal import iterate
from utils.display import components_text, graph_table, traversal_text
from utils.graph import connected_components

logger = logging.getLogger(__name__)


def build_graph(
    vertices: Sequence[str], edges: Sequence[Sequence[str]]
) -> UndirectedGraph[str]:
    """Vertices named by edges are created on the fly."""
    graph = UndirectedGraph[str]()
    for vertex in vertices:
        graph.add_vertex(vertex)
    for vertex1, vertex2 in edges:
        graph.add_vertex(vertex1)
        graph.add_vertex(vertex2)
        if not graph.add_edge(vertex1, vertex2):
            logger.warning(f"Ignoring edge ({vertex1}, {vertex2})")
    return graph


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Traverse an undirected graph")
    parser.add_argument(
        "--vertex",
        action="append",
        default=[],
        metavar="V",
        help="Add an isolated vertex (repeatable)",
    )
    parser.add_argument(
        "--edge",
        action="append",
        nargs=2,
        default=[],
        metavar=("A", "B"),
        help="Add an edge between A and B (repeatable)",
    )
    parser.add_argument("--root", help="Vertex to start the traversal from")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in TraversalModes],
        default=DEFAULT_TRAVERSAL_MODE.value,
        help="Traversal strategy",
    )
    parser.add_argument(
        "--components", action="store_true", help="Also list connected components"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(level=DEFAULT_LOG_LEVEL, format=LOG_FORMAT)
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    console = console or Console()
    graph = build_graph(args.vertex, args.edge)
    logger.debug(
        f"Built graph with {graph.get_vertex_size()} vertices "
        f"and {graph.get_path_length()} edges"
    )
    console.print(graph_table(graph, title="Graph"))

    if args.root is not None:
        try:
            order = tuple(iterate(graph, args.root, TraversalModes(args.mode)))
        except ValueError as e:
            logger.error(str(e))
            return 1
        console.print(traversal_text(order, TraversalModes(args.mode)))

    if args.components:
        console.print(components_text(connected_components(graph)))

    return 0


if __name__ == "__main__":
    sys.exit(main())
