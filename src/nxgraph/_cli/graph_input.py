"""Building graphs from command line arguments.

Pure functions, no I/O and no Rich rendering.
"""

from nxgraph._graph import BaseGraph, DiGraph, Graph


class EdgeFormatError(ValueError):
    """Raised when an edge argument is not of the form ``U,V``."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid edge '{value}'. Expected format: 'U,V'")


def parse_edge(value: str) -> tuple[str, str]:
    """Parse an edge argument of the form ``U,V``.

    Surrounding whitespace of both labels is ignored.

    Raises:
        EdgeFormatError: If the value does not hold exactly two non-empty labels.

    """
    parts = [part.strip() for part in value.split(",")]
    if len(parts) != 2 or not all(parts):  # noqa: PLR2004
        raise EdgeFormatError(value)
    return parts[0], parts[1]


def build_graph(edges: list[str], nodes: list[str], *, directed: bool) -> BaseGraph[str]:
    """Build a graph from edge and isolated node arguments.

    Args:
        edges: Edge arguments, each ``U,V``.
        nodes: Extra node labels, added even if no edge touches them.
        directed: Build a DiGraph instead of an undirected Graph.

    Returns:
        The populated graph.

    Raises:
        EdgeFormatError: If an edge argument is malformed.

    """
    g: BaseGraph[str] = DiGraph() if directed else Graph()
    g.add_edges_from(parse_edge(edge) for edge in edges)
    for node in nodes:
        g.add_node(node.strip())
    return g
