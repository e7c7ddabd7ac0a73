"""
graphalgo/algorithms/johnson.py - Johnson All-Pairs

All-pairs shortest paths for sparse graphs that may have negative edge
costs but no negative cycles.

Worst case: O(|V|^2 log |V| + |V| |E|)
"""

from typing import Dict, Optional, Tuple
import logging

from ..integration.config import GraphConfig, DEFAULT_CONFIG
from ..schema.graph import Graph
from ..schema.graph_type import GraphType
from ..schema.elements import Edge, Vertex
from ..schema.cost_pairs import CostPathPair, is_infinite
from .preconditions import require_graph
from .bellman_ford import BellmanFord
from .dijkstra import Dijkstra
from .path_utils import path_cost

__all__ = ['Johnson']

logger = logging.getLogger(__name__)


class Johnson:
    """
    Johnson's algorithm.

    1. Copy the graph and add a connector vertex with zero-cost edges to
       every vertex.
    2. Run Bellman-Ford from the connector to get potentials h(v). A
       negative cycle aborts the call with NegativeCycleError.
    3. Reweight every edge u->v to w + h(u) - h(v), which is never
       negative. Along any u..v path the potentials telescope to
       h(u) - h(v), so shortest paths are unchanged.
    4. Drop the connector.
    5. Run Dijkstra from every vertex on the reweighted copy.

    The working copy (and the connector) never leave the call; the
    caller's graph is not touched.

    With johnson_restore_costs (the default) each returned path is made
    of the caller's own edges and its cost is the true cost. Otherwise
    the reweighted working-copy edges and costs are returned as found.
    """

    def __init__(self, config: Optional[GraphConfig] = None):
        self._config = config or DEFAULT_CONFIG
        self._bellman_ford = BellmanFord(self._config)
        self._dijkstra = Dijkstra(self._config)

    def get_all_pairs_shortest_paths(
        self,
        graph: Graph,
    ) -> Dict[Vertex, Dict[Vertex, CostPathPair]]:
        """
        Shortest path between every ordered pair of vertices.

        Returns:
            from vertex -> to vertex -> CostPathPair; unreachable pairs
            omitted, each vertex maps to itself with a zero cost

        Raises:
            NullInputError: If graph is None
            NegativeCycleError: If the graph has a negative cycle
        """
        require_graph(graph, "Johnson")

        working, originals = self._build_reweighted_graph(graph)
        working_vertices = working.vertices

        vertices = graph.vertices
        restore = self._config.johnson_restore_costs

        all_shortest_paths: Dict[Vertex, Dict[Vertex, CostPathPair]] = {}
        for position, start in enumerate(working_vertices):
            costs, paths = self._dijkstra.shortest_path_table(working, start)
            row = all_shortest_paths.setdefault(vertices[position], {})

            for target, pair in enumerate(costs):
                if is_infinite(pair.cost):
                    continue
                path = paths[target]
                if restore:
                    path = [originals[id(edge)] for edge in path]
                    row[vertices[target]] = CostPathPair(path_cost(path), path)
                else:
                    row[vertices[target]] = CostPathPair(pair.cost, path)

        logger.debug(f"Johnson: all-pairs paths over {len(vertices)} vertices")
        return all_shortest_paths

    def _build_reweighted_graph(self, graph: Graph) -> Tuple[Graph, Dict[int, Edge]]:
        """
        Private copy of graph with every edge cost made non-negative,
        plus the map from each copied edge to the caller's edge.

        The copy is directed so existing reciprocals are kept as plain
        edges and the connector's edges get no reciprocals.
        """
        working, originals = graph.copy_with_origins(GraphType.DIRECTED)
        vertices = working.vertices

        connector = Vertex()
        working.add_vertex(connector)
        for vertex in vertices:
            working.add_edge(Edge(connector, vertex, 0.0))

        potentials, _ = self._bellman_ford.shortest_path_table(working, connector)
        heights = {id(pair.vertex): pair.cost for pair in potentials}

        for edge in working.edges:
            if edge.from_vertex is connector:
                continue
            reweighted = edge.cost + heights[id(edge.from_vertex)] - heights[id(edge.to_vertex)]
            # Absorb float rounding; exact arithmetic never goes below zero
            edge.cost = max(reweighted, 0.0)

        working.remove_vertex(connector)
        logger.debug(f"Johnson: reweighted {working.edge_count} edges")
        return working, originals
