"""Graph module providing adjacency-set graph storage.

This module contains:
- Graph[T]: An undirected graph
- DiGraph[T]: A directed graph with predecessor tracking
"""

from ._graph import BaseGraph, DiGraph, Graph, GraphInvariantError, NodeNotFoundError

__all__ = ["BaseGraph", "DiGraph", "Graph", "GraphInvariantError", "NodeNotFoundError"]
