"""
graphalgo/__init__.py - Graph Algorithms Package

Weighted graph model plus classical graph algorithms.

This package provides:
- Graph model: GraphType, Vertex, Edge, Graph and result pairs
- Structural algorithms: topological sort, undirected cycle detection
- Shortest paths: Dijkstra, Bellman-Ford, Floyd-Warshall, Johnson
- Minimum spanning tree: Prim
- GraphAnalysisService façade choosing an algorithm per graph
"""

from .errors import (
    GraphErrorCategory,
    GraphError,
    NullInputError,
    InvalidArgumentError,
    NegativeCycleError,
    create_error_from_dict,
)

from .schema import (
    GraphType,
    Vertex,
    Edge,
    INFINITE_COST,
    is_infinite,
    CostVertexPair,
    CostPathPair,
    Graph,
    copy_graph,
)

from .contracts import GraphStoreProtocol
from .store import NetworkXGraphStore
from .integration import GraphConfig, DEFAULT_CONFIG

from .algorithms import (
    TopologicalSort,
    CycleDetection,
    Dijkstra,
    BellmanFord,
    FloydWarshall,
    Johnson,
    Prim,
    path_cost,
    path_vertices,
    is_contiguous,
)

from .service import GraphAnalysisService, AnalysisResult

__version__ = '1.0.0'

__all__ = [
    # Errors
    'GraphErrorCategory',
    'GraphError',
    'NullInputError',
    'InvalidArgumentError',
    'NegativeCycleError',
    'create_error_from_dict',
    # Model
    'GraphType',
    'Vertex',
    'Edge',
    'INFINITE_COST',
    'is_infinite',
    'CostVertexPair',
    'CostPathPair',
    'Graph',
    'copy_graph',
    # Storage
    'GraphStoreProtocol',
    'NetworkXGraphStore',
    # Config
    'GraphConfig',
    'DEFAULT_CONFIG',
    # Algorithms
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
    # Service
    'GraphAnalysisService',
    'AnalysisResult',
]
