"""
graphalgo/algorithms/bellman_ford.py - Bellman-Ford Shortest Path

Single-source shortest paths with negative edge costs and
negative-cycle detection.

Worst case: O(|V| |E|)
"""

from typing import Dict, List, Optional, Tuple
import logging

from ..errors import NegativeCycleError
from ..integration.config import GraphConfig, DEFAULT_CONFIG
from ..schema.graph import Graph
from ..schema.elements import Edge, Vertex
from ..schema.cost_pairs import INFINITE_COST, CostPathPair, CostVertexPair, is_infinite
from .preconditions import require_graph, require_vertex

__all__ = ['BellmanFord']

logger = logging.getLogger(__name__)


class BellmanFord:
    """
    Bellman-Ford's shortest path.

    Relaxes every edge up to |V|-1 times, then makes one more pass as a
    probe: any further improvement means a negative-weight cycle is
    reachable from the start vertex, and the call fails with
    NegativeCycleError. Vertices still at the infinite sentinel are never
    relaxed from, so cycles the start cannot reach are ignored.

    Usage:
        costs = BellmanFord().get_shortest_paths(graph, a)
        costs[d].cost, costs[d].path
    """

    def __init__(self, config: Optional[GraphConfig] = None):
        self._config = config or DEFAULT_CONFIG

    def get_shortest_paths(
        self,
        graph: Graph,
        start: Vertex,
    ) -> Dict[Vertex, CostPathPair]:
        """
        Shortest paths from start to every vertex.

        Unreachable vertices map to INFINITE_COST and an empty path.

        Raises:
            NullInputError: If graph or start is None
            InvalidArgumentError: If start is not in the graph
            NegativeCycleError: If a negative cycle is reachable from start
        """
        costs, paths = self._run(graph, start)
        return {
            pair.vertex: CostPathPair(pair.cost, paths[position])
            for position, pair in enumerate(costs)
        }

    def get_shortest_path(
        self,
        graph: Graph,
        start: Vertex,
        end: Vertex,
    ) -> CostPathPair:
        """
        Shortest path from start to end.

        Raises:
            NullInputError: If graph, start or end is None
            InvalidArgumentError: If a vertex is not in the graph
            NegativeCycleError: If a negative cycle is reachable from start
        """
        require_graph(graph, "BellmanFord")
        target = require_vertex(graph, end, "end", "BellmanFord")

        costs, paths = self._run(graph, start)
        return CostPathPair(costs[target].cost, paths[target])

    def shortest_path_table(
        self,
        graph: Graph,
        start: Vertex,
    ) -> Tuple[List[CostVertexPair], List[List[Edge]]]:
        """
        Position-indexed cost and path tables from start.

        Entry i belongs to graph.vertices[i]. See Dijkstra.shortest_path_table.
        """
        return self._run(graph, start)

    def _run(
        self,
        graph: Graph,
        start: Vertex,
    ) -> Tuple[List[CostVertexPair], List[List[Edge]]]:
        require_graph(graph, "BellmanFord")
        source = require_vertex(graph, start, "start", "BellmanFord")

        vertices = graph.vertices
        edges = graph.edges
        indices = graph.vertex_indices()

        # Resolve endpoints once; every pass walks the same edge list
        resolved = [
            (indices[id(edge.from_vertex)], indices[id(edge.to_vertex)], edge)
            for edge in edges
        ]

        costs = [CostVertexPair(INFINITE_COST, vertex) for vertex in vertices]
        paths: List[List[Edge]] = [[] for _ in vertices]
        costs[source].cost = 0.0

        passes = 0
        for _ in range(len(vertices) - 1):
            passes += 1
            if not self._relax(resolved, costs, paths) and self._config.bellman_ford_early_exit:
                break

        # Probe pass: the table must already be final
        for u, v, edge in resolved:
            if is_infinite(costs[u].cost):
                continue
            if costs[u].cost + edge.cost < costs[v].cost:
                logger.debug(
                    f"Bellman-Ford from {start.value!r}: negative cycle through {edge!r}"
                )
                raise NegativeCycleError(
                    algorithm="BellmanFord",
                    start=start.value,
                    edge=repr(edge),
                )

        logger.debug(
            f"Bellman-Ford from {start.value!r}: converged after {passes} passes"
        )
        return costs, paths

    @staticmethod
    def _relax(
        resolved: List[Tuple[int, int, Edge]],
        costs: List[CostVertexPair],
        paths: List[List[Edge]],
    ) -> bool:
        """One relaxation pass over every edge; True if anything improved."""
        changed = False
        for u, v, edge in resolved:
            if is_infinite(costs[u].cost):
                continue

            candidate = costs[u].cost + edge.cost
            if candidate < costs[v].cost:
                costs[v].cost = candidate
                paths[v] = paths[u] + [edge]
                changed = True
        return changed
