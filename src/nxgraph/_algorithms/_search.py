"""Shortest path search in a graph."""

from __future__ import annotations

import heapq
import logging
import math
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Hashable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

from nxgraph._graph import GraphInvariantError, NodeNotFoundError

if TYPE_CHECKING:
    from nxgraph._graph import BaseGraph

logger = logging.getLogger(__name__)


class SearchMethod(StrEnum):
    """Available shortest path algorithms."""

    BFS = "bfs"
    DIJKSTRA = "dijkstra"


@dataclass(frozen=True, slots=True)
class PathSearchResult[T: Hashable]:
    """Outcome of a successful shortest path search.

    Attributes:
        length: Number of hops on a shortest path from source to target.
        predecessors: Mapping from a discovered node to the node it was
            reached from. Enough to rebuild one shortest path.

    """

    length: int
    predecessors: dict[T, T] = field(default_factory=dict)

    def build_path(self, source: T, target: T) -> list[T]:
        """Walk predecessor links back from ``target`` to ``source``.

        Returns:
            Nodes from ``source`` to ``target``, both included.

        Raises:
            GraphInvariantError: If a link on the way back is missing.

        """
        path = [target]
        current = target
        while current != source:
            try:
                current = self.predecessors[current]
            except KeyError:
                msg = f"No predecessor recorded for {current!r} on the way back to {source!r}"
                raise GraphInvariantError(msg) from None
            path.append(current)
        path.reverse()
        return path


class SearchAlgorithm(ABC):
    """A shortest path algorithm over unit-weight edges.

    Implementations only provide ``shortest_path_cost_and_predecessors``;
    path reconstruction and the derived queries are shared.
    """

    @abstractmethod
    def shortest_path_cost_and_predecessors[T: Hashable](
        self,
        g: BaseGraph[T],
        source: T,
        target: T,
    ) -> PathSearchResult[T] | None:
        """Search for a shortest path from ``source`` to ``target``.

        Returns:
            The hop count and predecessor map, or None if ``target`` is
            unreachable.

        Raises:
            NodeNotFoundError: If ``source`` is not in the graph.

        """

    def shortest_path[T: Hashable](self, g: BaseGraph[T], source: T, target: T) -> list[T] | None:
        """A shortest path between ``source`` and ``target``, or None."""
        result = self.shortest_path_cost_and_predecessors(g, source, target)
        if result is None:
            return None
        return result.build_path(source, target)

    def shortest_path_length[T: Hashable](self, g: BaseGraph[T], source: T, target: T) -> int | None:
        """A shortest path's length in hops, or None."""
        result = self.shortest_path_cost_and_predecessors(g, source, target)
        if result is None:
            return None
        return result.length

    def has_path[T: Hashable](self, g: BaseGraph[T], source: T, target: T) -> bool:
        """Return True if ``g`` has a path from ``source`` to ``target``."""
        return self.shortest_path_cost_and_predecessors(g, source, target) is not None

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def _check_source[T: Hashable](g: BaseGraph[T], source: T) -> None:
    """Reject a search that starts outside the graph.

    A missing source is a caller mistake, reported as NodeNotFoundError so
    it can be told apart from GraphInvariantError, which only signals
    corrupted storage met during the traversal itself.
    """
    if source not in g:
        raise NodeNotFoundError(source)


class BFS(SearchAlgorithm):
    """Breadth-first search."""

    def shortest_path_cost_and_predecessors[T: Hashable](
        self,
        g: BaseGraph[T],
        source: T,
        target: T,
    ) -> PathSearchResult[T] | None:
        _check_source(g, source)

        previous: dict[T, T] = {}
        visited = {source}
        queue: deque[tuple[T, int]] = deque([(source, 0)])

        while queue:
            node, dist = queue.popleft()
            if node == target:
                return PathSearchResult(length=dist, predecessors=previous)

            for neighbor in g.require_adjacent(node):
                if neighbor not in visited:
                    previous[neighbor] = node
                    queue.append((neighbor, dist + 1))
                    visited.add(neighbor)

        logger.debug(f"BFS: {target!r} is unreachable from {source!r} ({len(visited)} nodes visited)")
        return None


class Dijkstra(SearchAlgorithm):
    """Dijkstra's algorithm with every edge weighing 1.

    Nodes must be mutually orderable: ties on cost are broken by node.
    """

    def shortest_path_cost_and_predecessors[T: Hashable](
        self,
        g: BaseGraph[T],
        source: T,
        target: T,
    ) -> PathSearchResult[T] | None:
        _check_source(g, source)

        dist: dict[T, float] = dict.fromkeys(g, math.inf)
        dist[source] = 0
        previous: dict[T, T] = {}
        heap: list[tuple[int, T]] = [(0, source)]

        while heap:
            cost, node = heapq.heappop(heap)
            if node == target:
                return PathSearchResult(length=cost, predecessors=previous)
            # Stale entry, a shorter route to node was already settled
            if cost > dist[node]:
                continue

            for neighbor in g.require_adjacent(node):
                next_cost = cost + 1
                if next_cost < dist[neighbor]:
                    dist[neighbor] = next_cost
                    previous[neighbor] = node
                    heapq.heappush(heap, (next_cost, neighbor))

        logger.debug(f"Dijkstra: {target!r} is unreachable from {source!r}")
        return None


_ALGORITHMS: dict[SearchMethod, SearchAlgorithm] = {
    SearchMethod.BFS: BFS(),
    SearchMethod.DIJKSTRA: Dijkstra(),
}


def get_search_algorithm(method: SearchMethod | str) -> SearchAlgorithm:
    """Resolve a method name to its algorithm, ignoring case.

    Raises:
        ValueError: If ``method`` names no known algorithm.

    """
    try:
        return _ALGORITHMS[SearchMethod(method.lower())]
    except ValueError:
        choices = ", ".join(m.value for m in SearchMethod)
        msg = f"Unknown search method {method!r}. Expected one of: {choices}"
        raise ValueError(msg) from None


def shortest_path[T: Hashable](
    g: BaseGraph[T],
    source: T,
    target: T,
    *,
    method: SearchMethod | str = SearchMethod.BFS,
) -> list[T] | None:
    """A shortest path from ``source`` to ``target``.

    Args:
        g: The graph to search.
        source: First node of the path.
        target: Last node of the path.
        method: Algorithm used for the search.

    Returns:
        The nodes on the path, ``source`` and ``target`` included, or None
        if there is no path. When several shortest paths exist, which one
        is returned is unspecified.

    Raises:
        NodeNotFoundError: If ``source`` is not in the graph.

    Example:
        >>> from nxgraph import Graph
        >>> g = Graph()
        >>> g.add_edges_from([(1, 2), (2, 3)])
        >>> shortest_path(g, 1, 3)
        [1, 2, 3]

    """
    return get_search_algorithm(method).shortest_path(g, source, target)


def shortest_path_length[T: Hashable](
    g: BaseGraph[T],
    source: T,
    target: T,
    *,
    method: SearchMethod | str = SearchMethod.BFS,
) -> int | None:
    """Number of hops on a shortest path, or None if there is no path."""
    return get_search_algorithm(method).shortest_path_length(g, source, target)


def has_path[T: Hashable](
    g: BaseGraph[T],
    source: T,
    target: T,
    *,
    method: SearchMethod | str = SearchMethod.BFS,
) -> bool:
    """Return True if ``target`` is reachable from ``source``."""
    return get_search_algorithm(method).has_path(g, source, target)
