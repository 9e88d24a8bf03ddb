"""Graph algorithms: shortest path search and topological sorting."""

from ._search import (
    BFS,
    Dijkstra,
    PathSearchResult,
    SearchAlgorithm,
    SearchMethod,
    get_search_algorithm,
    has_path,
    shortest_path,
    shortest_path_length,
)
from ._sort import CycleError, has_cycle, topological_generations, topological_sort

__all__ = [
    "BFS",
    "CycleError",
    "Dijkstra",
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
