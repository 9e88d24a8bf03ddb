"""Topological sorting of directed graphs."""

from __future__ import annotations

import logging
from collections.abc import Hashable
from typing import TYPE_CHECKING

from nxgraph._graph import DiGraph

if TYPE_CHECKING:
    from nxgraph._graph import BaseGraph

logger = logging.getLogger(__name__)


class CycleError(ValueError):
    """Raised when a topological order is requested for a cyclic graph."""

    def __init__(self, remaining: frozenset[object]) -> None:
        self.remaining = remaining
        super().__init__(f"Cycle detected in graph ({len(remaining)} nodes could not be ordered)")


def topological_generations[T: Hashable](g: BaseGraph[T]) -> list[list[T]]:
    """Group the nodes of a directed graph into dependency layers.

    Uses Kahn's algorithm: the first generation holds every node without
    incoming edges, each following generation holds the nodes whose
    predecessors all belong to earlier generations. Order within one
    generation is unspecified.

    Args:
        g: A directed graph.

    Returns:
        List of generations, each a list of nodes.

    Raises:
        TypeError: If ``g`` is not directed.
        CycleError: If the graph contains a cycle.

    Example:
        >>> g = DiGraph()
        >>> g.add_edges_from([("a", "b"), ("b", "c")])
        >>> topological_generations(g)
        [['a'], ['b'], ['c']]

    """
    if not isinstance(g, DiGraph):
        msg = f"Topological sort requires a directed graph, got {type(g).__name__}"
        raise TypeError(msg)

    # Nodes still waiting for some predecessor, with the number left
    indegree: dict[T, int] = {}
    zero_indegree: list[T] = []
    for node, degree in g.in_degree_map().items():
        if degree == 0:
            zero_indegree.append(node)
        else:
            indegree[node] = degree

    generations: list[list[T]] = []
    while zero_indegree:
        this_generation = zero_indegree
        zero_indegree = []
        for node in this_generation:
            for child in g.require_adjacent(node):
                indegree[child] -= 1
                if indegree[child] == 0:
                    zero_indegree.append(child)
                    del indegree[child]
        generations.append(this_generation)

    if indegree:
        logger.debug(f"Cycle detected, unresolved nodes: {sorted(map(repr, indegree))}")
        raise CycleError(frozenset(indegree))

    return generations


def topological_sort[T: Hashable](g: BaseGraph[T]) -> list[T]:
    """Sort a directed graph topologically (every edge u -> v puts u before v).

    Returns:
        The generations of ``topological_generations`` concatenated.

    Raises:
        TypeError: If ``g`` is not directed.
        CycleError: If the graph contains a cycle.

    """
    return [node for generation in topological_generations(g) for node in generation]


def has_cycle[T: Hashable](g: BaseGraph[T]) -> bool:
    """Check if a directed graph contains a cycle.

    Returns:
        True if the graph has a cycle, False otherwise.

    """
    try:
        topological_generations(g)
    except CycleError:
        return True
    return False
