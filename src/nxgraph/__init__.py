"""Graph data structures and classical graph algorithms."""

__all__ = [
    "BFS",
    "BaseGraph",
    "CycleError",
    "DiGraph",
    "Dijkstra",
    "Graph",
    "GraphInvariantError",
    "NodeNotFoundError",
    "PathSearchResult",
    "SearchAlgorithm",
    "SearchMethod",
    "get_search_algorithm",
    "has_cycle",
    "has_path",
    "shortest_path",
    "shortest_path_length",
    "topological_generations",
    "topological_sort",
]

from ._algorithms import (
    BFS,
    CycleError,
    Dijkstra,
    PathSearchResult,
    SearchAlgorithm,
    SearchMethod,
    get_search_algorithm,
    has_cycle,
    has_path,
    shortest_path,
    shortest_path_length,
    topological_generations,
    topological_sort,
)
from ._graph import BaseGraph, DiGraph, Graph, GraphInvariantError, NodeNotFoundError
