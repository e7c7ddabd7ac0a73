"""
graphalgo/schema/graph_type.py - Graph Type Definitions

Directed or undirected; fixed for the lifetime of a Graph instance.
"""

from enum import Enum

__all__ = ['GraphType']


class GraphType(Enum):
    """Directedness of a graph."""
    DIRECTED = "directed"      # Edges are one-way
    UNDIRECTED = "undirected"  # Every edge has a reciprocal

    @property
    def is_directed(self) -> bool:
        return self is GraphType.DIRECTED
