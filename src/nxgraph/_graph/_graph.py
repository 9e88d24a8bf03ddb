"""Adjacency-set graph storage for undirected and directed graphs."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Hashable, Iterable, Iterator
from dataclasses import dataclass, field


class NodeNotFoundError(KeyError):
    """Raised when a node that was never added to the graph is queried."""

    def __init__(self, node: object) -> None:
        self.node = node
        super().__init__(f"Node {node!r} is not in the graph")


class GraphInvariantError(RuntimeError):
    """Raised when an algorithm finds the graph storage in an inconsistent state.

    This signals a defect in the store, not a condition callers are expected
    to recover from.
    """


@dataclass(slots=True)
class BaseGraph[T: Hashable](ABC):
    """Storage and queries shared by undirected and directed graphs.

    Every node in the graph has an adjacency entry, possibly empty.
    Adjacency entries are sets, so parallel edges collapse into one.

    Attributes:
        _adj: Mapping from node to the set of its successors.

    """

    _adj: dict[T, set[T]] = field(default_factory=dict)

    @classmethod
    @abstractmethod
    def is_directed(cls) -> bool:
        """Whether edges of this graph kind have a direction."""

    @abstractmethod
    def add_node(self, u: T) -> None:
        """Add a node. Do nothing if it already exists."""

    @abstractmethod
    def add_edge(self, u: T, v: T) -> None:
        """Add an edge between two nodes, creating the nodes if needed."""

    def add_edges_from(self, edges: Iterable[tuple[T, T]]) -> None:
        """Add many edges at once, in the given order.

        Args:
            edges: Iterable of (u, v) pairs.

        """
        for u, v in edges:
            self.add_edge(u, v)

    def nodes[C](self, container: Callable[[Iterator[T]], C] = frozenset) -> C:
        """Get all nodes of the graph.

        Args:
            container: Callable building the result from an iterator of nodes,
                e.g. ``set``, ``list`` or ``sorted``.

        Returns:
            The nodes collected into the requested container.

        Example:
            >>> g = Graph()
            >>> g.add_edge(2, 1)
            >>> g.nodes(sorted)
            [1, 2]

        """
        return container(iter(self._adj))

    def edges[C](self, container: Callable[[Iterator[tuple[T, T]]], C] = frozenset) -> C:
        """Get all edges of the graph as (u, v) pairs.

        Undirected edges are stored in both directions, so both (u, v)
        and (v, u) are reported.

        Args:
            container: Callable building the result from an iterator of pairs.

        Returns:
            The edges collected into the requested container.

        """
        return container((u, v) for u, successors in self._adj.items() for v in successors)

    def adjacent(self, u: T) -> frozenset[T] | None:
        """Get the nodes directly reachable from ``u`` by one edge.

        Args:
            u: The node to query.

        Returns:
            The successor set of ``u``, or None if ``u`` was never added.

        """
        successors = self._adj.get(u)
        if successors is None:
            return None
        return frozenset(successors)

    def require_adjacent(self, u: T) -> frozenset[T]:
        """Get the successors of a node that must already be in the graph.

        Raises:
            GraphInvariantError: If ``u`` has no adjacency entry.

        """
        successors = self._adj.get(u)
        if successors is None:
            msg = f"Node {u!r} was reached through an edge but has no adjacency entry"
            raise GraphInvariantError(msg)
        return frozenset(successors)

    def __iter__(self) -> Iterator[T]:
        """Iterate over the nodes of the graph."""
        return iter(self._adj)

    def __len__(self) -> int:
        """Return the number of nodes in the graph."""
        return len(self._adj)

    def __contains__(self, node: object) -> bool:
        """Check if a node is in the graph."""
        return node in self._adj


@dataclass(slots=True)
class Graph[T: Hashable](BaseGraph[T]):
    """An undirected graph.

    Edge (u, v) exists iff v is adjacent to u and u is adjacent to v.
    """

    @classmethod
    def is_directed(cls) -> bool:
        return False

    def add_node(self, u: T) -> None:
        self._adj.setdefault(u, set())

    def add_edge(self, u: T, v: T) -> None:
        """Add an undirected edge (u <-> v).

        Example:
            >>> g = Graph()
            >>> g.add_edge("a", "b")
            >>> g.adjacent("b")
            frozenset({'a'})

        """
        self._adj.setdefault(u, set()).add(v)
        self._adj.setdefault(v, set()).add(u)


@dataclass(slots=True)
class DiGraph[T: Hashable](BaseGraph[T]):
    """A directed graph.

    Besides successors, the graph tracks the predecessors of every node
    so in-degrees are available without scanning all edges:
    - _adj[a] = {b} means there is an edge a -> b
    - _pred[b] = {a} means the same edge, seen from b

    Attributes:
        _pred: Mapping from node to the set of its predecessors.

    """

    _pred: dict[T, set[T]] = field(default_factory=dict)

    @classmethod
    def is_directed(cls) -> bool:
        return True

    def add_node(self, u: T) -> None:
        self._adj.setdefault(u, set())
        self._pred.setdefault(u, set())

    def add_edge(self, u: T, v: T) -> None:
        """Add a directed edge (u -> v).

        Example:
            >>> g = DiGraph()
            >>> g.add_edge("a", "b")
            >>> g.adjacent("b"), g.in_degree("b")
            (frozenset(), 1)

        """
        self._adj.setdefault(u, set()).add(v)
        self._adj.setdefault(v, set())
        self._pred.setdefault(v, set()).add(u)
        self._pred.setdefault(u, set())

    def predecessors(self, u: T) -> frozenset[T] | None:
        """Get the nodes with an edge into ``u``, or None if ``u`` is absent."""
        preds = self._pred.get(u)
        if preds is None:
            return None
        return frozenset(preds)

    def in_degree(self, u: T) -> int:
        """Number of edges into ``u``; 0 for a node without predecessors."""
        return len(self._pred.get(u, ()))

    def in_degree_map(self) -> dict[T, int]:
        """Map every node of the graph to its in-degree."""
        return {node: self.in_degree(node) for node in self._adj}
