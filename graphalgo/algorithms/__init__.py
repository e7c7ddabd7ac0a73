"""
graphalgo/algorithms - Graph algorithms

Structural:
- TopologicalSort: Kahn ordering of directed acyclic graphs
- CycleDetection: cycle check for undirected graphs

Shortest paths:
- Dijkstra, BellmanFord: single source
- FloydWarshall, Johnson: all pairs

Spanning trees:
- Prim: minimum spanning tree of an undirected graph
"""

from .topological_sort import TopologicalSort
from .cycle_detection import CycleDetection
from .dijkstra import Dijkstra
from .bellman_ford import BellmanFord
from .floyd_warshall import FloydWarshall
from .johnson import Johnson
from .prim import Prim
from .path_utils import (
    path_cost,
    path_vertices,
    is_contiguous,
)

__all__ = [
    'TopologicalSort',
    'CycleDetection',
    'Dijkstra',
    'BellmanFord',
    'FloydWarshall',
    'Johnson',
    'Prim',
    'path_cost',
    'path_vertices',
    'is_contiguous',
]
