"""
graphalgo/algorithms/dijkstra.py - Dijkstra Shortest Path

Single-source shortest paths on graphs without negative edge costs.

Worst case: O((|V| + |E|) log |V|)
"""

from itertools import count
from typing import Dict, List, Optional, Tuple
import heapq
import logging

from ..errors import InvalidArgumentError
from ..integration.config import GraphConfig, DEFAULT_CONFIG
from ..schema.graph import Graph
from ..schema.elements import Edge, Vertex
from ..schema.cost_pairs import INFINITE_COST, CostPathPair, CostVertexPair, is_infinite
from .preconditions import require_graph, require_vertex

__all__ = ['Dijkstra']

logger = logging.getLogger(__name__)


class Dijkstra:
    """
    Dijkstra's shortest path.

    Keeps a cost table (infinite except for the start vertex) and a
    priority frontier ordered by best known cost. Ties are popped in the
    order they were pushed. Entries made stale by a later improvement are
    skipped when popped instead of being removed from the heap.

    Usage:
        dijkstra = Dijkstra()
        pair = dijkstra.get_shortest_path(graph, a, d)
        pair.cost, pair.path
    """

    def __init__(self, config: Optional[GraphConfig] = None):
        self._config = config or DEFAULT_CONFIG

    def get_shortest_paths(
        self,
        graph: Graph,
        start: Vertex,
    ) -> Dict[Vertex, CostPathPair]:
        """
        Shortest paths from start to every reachable vertex.

        Unreachable vertices are omitted. The start vertex maps to a zero
        cost, empty path.

        Raises:
            NullInputError: If graph or start is None
            InvalidArgumentError: If start is not in the graph or any
                edge has a negative cost
        """
        costs, paths = self._run(graph, start, None)
        vertices = graph.vertices

        return {
            vertices[position]: CostPathPair(pair.cost, paths[position])
            for position, pair in enumerate(costs)
            if not is_infinite(pair.cost)
        }

    def get_shortest_path(
        self,
        graph: Graph,
        start: Vertex,
        end: Vertex,
    ) -> CostPathPair:
        """
        Shortest path from start to end.

        Returns:
            Cost and edge sequence; INFINITE_COST with an empty path if
            end is unreachable

        Raises:
            NullInputError: If graph, start or end is None
            InvalidArgumentError: If a vertex is not in the graph or any
                edge has a negative cost
        """
        require_graph(graph, "Dijkstra")
        target = require_vertex(graph, end, "end", "Dijkstra")

        costs, paths = self._run(graph, start, target)
        return CostPathPair(costs[target].cost, paths[target])

    def shortest_path_table(
        self,
        graph: Graph,
        start: Vertex,
    ) -> Tuple[List[CostVertexPair], List[List[Edge]]]:
        """
        Position-indexed cost and path tables from start.

        Entry i belongs to graph.vertices[i]; unreachable entries hold
        INFINITE_COST and an empty path. Use this instead of
        get_shortest_paths when structurally equal vertices must not
        collide.
        """
        return self._run(graph, start, None)

    def _run(
        self,
        graph: Graph,
        start: Vertex,
        target: Optional[int],
    ) -> Tuple[List[CostVertexPair], List[List[Edge]]]:
        require_graph(graph, "Dijkstra")
        source = require_vertex(graph, start, "start", "Dijkstra")

        if graph.has_negative_edge():
            raise InvalidArgumentError(
                "Negative cost edges are not allowed",
                algorithm="Dijkstra",
                recovery_hint="Use BellmanFord or Johnson for negative costs.",
            )

        vertices = graph.vertices
        indices = graph.vertex_indices()

        costs = [CostVertexPair(INFINITE_COST, vertex) for vertex in vertices]
        paths: List[List[Edge]] = [[] for _ in vertices]
        costs[source].cost = 0.0

        sequence = count()
        frontier = [(0.0, next(sequence), source)]
        settled = 0

        while frontier:
            cost, _, position = heapq.heappop(frontier)
            if cost > costs[position].cost:
                continue
            settled += 1

            for edge in graph.out_edges(vertices[position]):
                neighbour = indices.get(id(edge.to_vertex))
                if neighbour is None:
                    continue

                candidate = cost + edge.cost
                if candidate < costs[neighbour].cost:
                    costs[neighbour].cost = candidate
                    paths[neighbour] = paths[position] + [edge]
                    heapq.heappush(frontier, (candidate, next(sequence), neighbour))

            if position == target and self._config.dijkstra_early_exit:
                break

        logger.debug(
            f"Dijkstra from {start.value!r}: settled {settled} of {len(vertices)} vertices"
        )
        return costs, paths
