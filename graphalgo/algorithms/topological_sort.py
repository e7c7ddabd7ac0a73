"""
graphalgo/algorithms/topological_sort.py - Topological Sort

Kahn's algorithm over out-degrees for directed graphs.
"""

from collections import deque
from typing import Deque, List, Optional
import logging

from ..integration.config import GraphConfig, DEFAULT_CONFIG
from ..schema.graph import Graph
from ..schema.graph_type import GraphType
from ..schema.elements import Vertex
from .preconditions import require_graph

__all__ = ['TopologicalSort']

logger = logging.getLogger(__name__)


class TopologicalSort:
    """
    Linear ordering of a directed graph's vertices.

    Works sinks-first: the frontier holds vertices with no remaining
    outgoing edges. Each popped vertex consumes the edges pointing at it,
    and a source whose out-degree drops to zero joins the frontier. The
    frontier is FIFO and is seeded in vertex order, which fixes the
    tie-break when several vertices are free at once.

    The caller's graph is not modified; out-degrees are tracked in a
    table keyed by vertex position.

    Usage:
        order = TopologicalSort().sort(graph)
        if order is None:
            ...  # graph has a cycle
    """

    def __init__(self, config: Optional[GraphConfig] = None):
        self._config = config or DEFAULT_CONFIG

    def sort(
        self,
        graph: Graph,
        sinks_first: Optional[bool] = None,
    ) -> Optional[List[Vertex]]:
        """
        Topologically sort a directed graph.

        Args:
            graph: Directed graph
            sinks_first: Return the raw sinks-first order (every edge's
                target before its source) instead of the default
                sources-first order. Defaults to the configured value.

        Returns:
            Ordered vertices, or None if the graph has a cycle

        Raises:
            NullInputError: If graph is None
            InvalidArgumentError: If graph is undirected
        """
        require_graph(graph, "TopologicalSort", GraphType.DIRECTED)
        if sinks_first is None:
            sinks_first = self._config.topological_sinks_first

        vertices = graph.vertices
        edges = graph.edges
        indices = graph.vertex_indices()

        out_degree = [0] * len(vertices)
        incoming: List[List[int]] = [[] for _ in vertices]
        for edge in edges:
            source = indices[id(edge.from_vertex)]
            out_degree[source] += 1
            incoming[indices[id(edge.to_vertex)]].append(source)

        frontier: Deque[int] = deque(
            position for position, degree in enumerate(out_degree) if degree == 0
        )

        order: List[int] = []
        remaining = len(edges)
        while frontier:
            current = frontier.popleft()
            order.append(current)

            for source in incoming[current]:
                remaining -= 1
                out_degree[source] -= 1
                if out_degree[source] == 0:
                    frontier.append(source)

        if remaining > 0:
            logger.debug(
                f"Topological sort found a cycle: {remaining} of {len(edges)} "
                f"edges unconsumed"
            )
            return None

        if not sinks_first:
            order.reverse()
        return [vertices[position] for position in order]
