import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from nxgraph._algorithms import (
    CycleError,
    SearchMethod,
    get_search_algorithm,
    topological_generations,
)
from nxgraph._graph import BaseGraph, NodeNotFoundError

from .config import ConfigError, NxgraphConfig, get_config
from .graph_input import EdgeFormatError, build_graph
from .render import render_generations_table, render_graph_table, render_path

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()

EdgesOption = Annotated[
    list[str] | None,
    typer.Option("-e", "--edge", help="Edge given as 'U,V' (repeatable)"),
]
NodesOption = Annotated[
    list[str] | None,
    typer.Option("-n", "--node", help="Node to add even without edges (repeatable)"),
]
DirectedOption = Annotated[
    bool | None,
    typer.Option("--directed/--undirected", help="Graph kind (default from [tool.nxgraph].directed, else undirected)"),
]


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Nxgraph CLI."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


def _load_config() -> NxgraphConfig:
    try:
        config = get_config()
    except ConfigError as e:
        err_console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e
    if config.project_root is not None:
        logger.debug(f"Using configuration from {config.project_root}")
    return config


def _build_graph(
    edges: list[str] | None,
    nodes: list[str] | None,
    *,
    directed: bool | None,
    config: NxgraphConfig,
) -> BaseGraph[str]:
    """Build the graph given on the command line, resolving its kind from config."""
    if directed is None:
        directed = bool(config.directed)
    try:
        g = build_graph(edges or [], nodes or [], directed=directed)
    except EdgeFormatError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e
    kind = "directed" if directed else "undirected"
    logger.debug(f"Built {kind} graph with {len(g)} nodes and {len(g.edges(list))} edges")
    return g


@app.command()
def info(
    *,
    edge: EdgesOption = None,
    node: NodesOption = None,
    directed: DirectedOption = None,
) -> None:
    """Show the nodes of a graph with their neighbours."""
    config = _load_config()
    g = _build_graph(edge, node, directed=directed, config=config)

    kind = "Directed" if g.is_directed() else "Undirected"
    # Undirected edges are stored in both directions
    edge_count = len(g.edges(list)) if g.is_directed() else len({frozenset(e) for e in g.edges()})
    err_console.print(f"[cyan]{kind} graph:[/cyan] {len(g)} nodes, {edge_count} edges")
    render_graph_table(g, out_console)


@app.command()
def path(
    source: Annotated[str, typer.Argument(help="First node of the path")],
    target: Annotated[str, typer.Argument(help="Last node of the path")],
    *,
    edge: EdgesOption = None,
    node: NodesOption = None,
    directed: DirectedOption = None,
    method: Annotated[
        SearchMethod | None,
        typer.Option("-m", "--method", help="Search algorithm (default from [tool.nxgraph].method, else bfs)"),
    ] = None,
) -> None:
    """Find a shortest path between two nodes."""
    source = source.strip()
    target = target.strip()
    config = _load_config()
    g = _build_graph(edge, node, directed=directed, config=config)

    effective_method = method or config.method or SearchMethod.BFS
    algorithm = get_search_algorithm(effective_method)
    err_console.print(f"[cyan]Searching with:[/cyan] {effective_method.value}")

    try:
        result = algorithm.shortest_path_cost_and_predecessors(g, source, target)
    except NodeNotFoundError as e:
        err_console.print(f"[red]Error: node '{escape(str(e.node))}' is not in the graph[/red]")
        raise typer.Exit(code=1) from e

    if result is None:
        err_console.print(f"[yellow]No path from '{escape(source)}' to '{escape(target)}'[/yellow]")
        raise typer.Exit(code=1)

    render_path(result.build_path(source, target), out_console)
    err_console.print(f"[green]Length:[/green] {result.length}")


@app.command()
def toposort(
    *,
    edge: EdgesOption = None,
    node: NodesOption = None,
) -> None:
    """Sort a directed graph into topological generations."""
    config = _load_config()
    g = _build_graph(edge, node, directed=True, config=config)

    try:
        generations = topological_generations(g)
    except CycleError as e:
        remaining = ", ".join(sorted(map(str, e.remaining)))
        err_console.print(f"[red]✗ Cycle detected among: {escape(remaining)}[/red]")
        raise typer.Exit(code=1) from e

    render_generations_table(generations, out_console)
    order = [n for generation in generations for n in generation]
    err_console.print(f"[green]✓ Order:[/green] {escape(', '.join(order))}")


def main() -> None:
    app()
