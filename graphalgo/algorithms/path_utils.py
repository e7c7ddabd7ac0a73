"""
graphalgo/algorithms/path_utils.py - Path helpers

Small utilities over edge sequences as returned in CostPathPair.path.
"""

from typing import List, Sequence

from ..schema.elements import Edge, Vertex

__all__ = [
    'path_cost',
    'path_vertices',
    'is_contiguous',
]


def path_cost(path: Sequence[Edge]) -> float:
    """
    Total cost of a path.

    Args:
        path: Edges in travel order

    Returns:
        Sum of edge costs, 0.0 for an empty path
    """
    total = 0.0
    for edge in path:
        total += edge.cost
    return total


def path_vertices(path: Sequence[Edge]) -> List[Vertex]:
    """Vertices visited along path, start vertex included."""
    if not path:
        return []
    return [path[0].from_vertex] + [edge.to_vertex for edge in path]


def is_contiguous(path: Sequence[Edge]) -> bool:
    """Whether every edge starts at the vertex the previous one ended at."""
    for previous, edge in zip(path, path[1:]):
        if edge.from_vertex is not previous.to_vertex:
            return False
    return True
