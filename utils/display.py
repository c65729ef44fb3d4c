from collections.abc import Iterable, Sequence

from rich.table import Table
from rich.text import Text

from graph import Graph
from localtypes import Component, TraversalModes


def graph_table(graph: Graph, title: str | None = None) -> Table:
    """One row per vertex with its degree and neighbours, in insertion order."""
    table = Table(title=title)
    table.add_column("Vertex", style="bold")
    table.add_column("Degree", justify="right")
    table.add_column("Neighbours")

    for vertex in graph.get_all_vertices():
        neighbours = graph.get_adjacent_vertices(vertex)
        table.add_row(
            str(vertex),
            str(len(neighbours)),
            ", ".join(str(n) for n in neighbours),
        )
    return table


def traversal_text(order: Sequence, mode: TraversalModes) -> Text:
    text = Text(f"{mode.upper()}: ", style="bold")
    for i, vertex in enumerate(order):
        if i:
            text.append(" -> ", style="dim")
        text.append(str(vertex), style="cyan" if i else "bold green")
    return text


def components_text(components: Iterable[Component]) -> Text:
    text = Text()
    rendered = sorted(
        "{" + ", ".join(sorted(str(v) for v in component)) + "}"
        for component in components
    )
    for i, component in enumerate(rendered):
        text.append(f"Component n°{i}: ", style="bold")
        text.append(component + "\n")
    return text
