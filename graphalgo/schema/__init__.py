"""
graphalgo/schema/__init__.py - Graph Model Exports

Data model shared by all algorithms:
- GraphType: directed / undirected
- Vertex, Edge: graph elements with structural equality
- CostVertexPair, CostPathPair: distance-table cells and results
- Graph: the graph container and its deep copy
"""

from .graph_type import GraphType
from .elements import Vertex, Edge
from .cost_pairs import (
    INFINITE_COST,
    is_infinite,
    CostVertexPair,
    CostPathPair,
)
from .graph import Graph, copy_graph

__all__ = [
    'GraphType',
    'Vertex',
    'Edge',
    'INFINITE_COST',
    'is_infinite',
    'CostVertexPair',
    'CostPathPair',
    'Graph',
    'copy_graph',
]
