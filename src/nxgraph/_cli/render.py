"""Rich rendering utilities for graph commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

from nxgraph._graph import DiGraph

if TYPE_CHECKING:
    from rich.console import Console

    from nxgraph._graph import BaseGraph


def _format_nodes(nodes: list[str]) -> str:
    if not nodes:
        return "[dim]-[/dim]"
    return ", ".join(escape(node) for node in nodes)


def render_graph_table(g: BaseGraph[str], console: Console) -> None:
    """Render the nodes of a graph and their neighbours as a Rich table.

    Args:
        g: Graph to render.
        console: Rich Console to output to.

    """
    directed = isinstance(g, DiGraph)
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Node", style="bold")
    table.add_column("Successors" if directed else "Neighbours")
    if directed:
        table.add_column("In-degree", justify="right", style="yellow")

    in_degrees = g.in_degree_map() if directed else {}
    for node in g.nodes(sorted):
        row = [escape(node), _format_nodes(sorted(g.require_adjacent(node)))]
        if directed:
            row.append(str(in_degrees[node]))
        table.add_row(*row)

    console.print(table)


def render_path(path: list[str], console: Console) -> None:
    """Render a path as ``a -> b -> c``.

    Args:
        path: Nodes on the path.
        console: Rich Console to output to.

    """
    console.print(" [dim]->[/dim] ".join(f"[bold]{escape(node)}[/bold]" for node in path))


def render_generations_table(generations: list[list[str]], console: Console) -> None:
    """Render topological generations as a Rich table.

    Args:
        generations: Generations in the order they were discovered.
        console: Rich Console to output to.

    """
    if not generations:
        console.print("[dim]Graph has no nodes[/dim]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Generation", justify="right", style="yellow")
    table.add_column("Nodes")

    for index, generation in enumerate(generations):
        table.add_row(str(index), _format_nodes(sorted(generation)))

    console.print(table)
