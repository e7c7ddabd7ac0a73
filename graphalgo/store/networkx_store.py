"""
graphalgo/store/networkx_store.py - NetworkX Graph Store

Default storage engine for the graph model.

Vertices and edges are held in a networkx.MultiDiGraph whose nodes and
edge keys are monotonically increasing integers, so duplicates by value
and parallel edges are kept apart and registration order is recoverable.
The Vertex/Edge objects ride along as the 'vertex' and 'edge' attributes.
"""

from itertools import count
from operator import itemgetter
from typing import Dict, List, Tuple, TYPE_CHECKING
import logging

import networkx as nx

if TYPE_CHECKING:
    from ..schema.elements import Vertex, Edge

__all__ = ['NetworkXGraphStore']

logger = logging.getLogger(__name__)

_EdgeRef = Tuple[int, int, int]  # (from node, to node, edge key)


class NetworkXGraphStore:
    """
    Vertex/edge registry backed by networkx.

    Implements GraphStoreProtocol.

    Usage:
        store = NetworkXGraphStore()
        store.add_vertex(a)
        store.add_vertex(b)
        store.add_edge(Edge(a, b, 1.0))
        store.edges()  # [Edge('a' -> 'b', cost=1.0)]
    """

    def __init__(self):
        self._graph = nx.MultiDiGraph()
        self._node_ids = count()
        self._edge_keys = count()
        # id(object) -> networkx handle
        self._vertex_nodes: Dict[int, int] = {}
        self._edge_refs: Dict[int, _EdgeRef] = {}

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def graph(self) -> 'nx.MultiDiGraph':
        """Get the underlying networkx graph."""
        return self._graph

    def number_of_vertices(self) -> int:
        return self._graph.number_of_nodes()

    def number_of_edges(self) -> int:
        return self._graph.number_of_edges()

    def contains_vertex(self, vertex: 'Vertex') -> bool:
        return id(vertex) in self._vertex_nodes

    def contains_edge(self, edge: 'Edge') -> bool:
        return id(edge) in self._edge_refs

    # =========================================================================
    # Mutation
    # =========================================================================

    def add_vertex(self, vertex: 'Vertex') -> bool:
        """Register a vertex; False if this object is already registered."""
        if id(vertex) in self._vertex_nodes:
            return False

        node = next(self._node_ids)
        self._graph.add_node(node, vertex=vertex)
        self._vertex_nodes[id(vertex)] = node
        return True

    def add_edge(self, edge: 'Edge') -> bool:
        """Register an edge; both endpoints must already be registered."""
        if id(edge) in self._edge_refs:
            return False

        u = self._vertex_nodes[id(edge.from_vertex)]
        v = self._vertex_nodes[id(edge.to_vertex)]
        key = next(self._edge_keys)
        self._graph.add_edge(u, v, key=key, edge=edge)
        self._edge_refs[id(edge)] = (u, v, key)
        return True

    def remove_edge(self, edge: 'Edge') -> bool:
        """Remove a registered edge."""
        ref = self._edge_refs.pop(id(edge), None)
        if ref is None:
            return False

        u, v, key = ref
        self._graph.remove_edge(u, v, key=key)
        return True

    def remove_vertex(self, vertex: 'Vertex') -> List['Edge']:
        """Remove a vertex together with its incident edges."""
        node = self._vertex_nodes.pop(id(vertex), None)
        if node is None:
            return []

        incident = list(self._graph.out_edges(node, keys=True, data='edge'))
        incident.extend(
            ref for ref in self._graph.in_edges(node, keys=True, data='edge')
            if ref[0] != node  # self-loops already listed as out-edges
        )
        incident.sort(key=itemgetter(2))

        removed = []
        for _, _, _, edge in incident:
            del self._edge_refs[id(edge)]
            removed.append(edge)

        self._graph.remove_node(node)

        if removed:
            logger.debug(
                f"Removed vertex {vertex.value!r} with {len(removed)} incident edges"
            )
        return removed

    # =========================================================================
    # Listing
    # =========================================================================

    def vertices(self) -> List['Vertex']:
        """All vertices in registration order."""
        return [vertex for _, vertex in self._graph.nodes(data='vertex')]

    def edges(self) -> List['Edge']:
        """All edges in registration order."""
        refs = sorted(self._graph.edges(keys=True, data='edge'), key=itemgetter(2))
        return [edge for _, _, _, edge in refs]

    def out_edges(self, vertex: 'Vertex') -> List['Edge']:
        """Edges leaving vertex in registration order."""
        node = self._vertex_nodes[id(vertex)]
        refs = sorted(
            self._graph.out_edges(node, keys=True, data='edge'),
            key=itemgetter(2),
        )
        return [edge for _, _, _, edge in refs]
