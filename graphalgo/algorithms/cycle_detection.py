"""
graphalgo/algorithms/cycle_detection.py - Cycle Detection

Depth-first cycle detection on undirected graphs.
"""

from typing import Iterator, List, Optional, Set, Tuple
import logging

from ..integration.config import GraphConfig, DEFAULT_CONFIG
from ..schema.graph import Graph
from ..schema.graph_type import GraphType
from ..schema.elements import Edge
from .preconditions import require_graph

__all__ = ['CycleDetection']

logger = logging.getLogger(__name__)

_EdgeKey = Tuple[int, int, float]  # (from position, to position, cost)


class CycleDetection:
    """
    Cycle detection in an undirected graph.

    Walks depth-first from the first vertex of the graph. Every traversed
    edge is marked together with its reciprocal, so walking back along
    the edge just taken is not mistaken for a cycle. Reaching an already
    visited vertex over an unmarked edge means there is a cycle.

    Only the component containing the first vertex is inspected; cycles
    in components unreachable from it are not reported.

    Parallel edges with equal cost are indistinguishable from a
    reciprocal and do not count as a cycle.
    """

    def __init__(self, config: Optional[GraphConfig] = None):
        self._config = config or DEFAULT_CONFIG

    def detect(self, graph: Graph) -> bool:
        """
        Check an undirected graph for a cycle.

        Returns:
            True if a cycle is reachable from the first vertex

        Raises:
            NullInputError: If graph is None
            InvalidArgumentError: If graph is directed
        """
        require_graph(graph, "CycleDetection", GraphType.UNDIRECTED)

        vertices = graph.vertices
        if not vertices:
            return False

        indices = graph.vertex_indices()
        visited_vertices: Set[int] = {0}
        visited_edges: Set[_EdgeKey] = set()

        # Iterative DFS: one edge iterator per vertex on the current path
        stack: List[Iterator[Edge]] = [iter(graph.out_edges(vertices[0]))]
        while stack:
            edge = next(stack[-1], None)
            if edge is None:
                stack.pop()
                continue

            source = indices[id(edge.from_vertex)]
            target = indices.get(id(edge.to_vertex))
            if target is None:
                continue

            key = (source, target, edge.cost)
            if key in visited_edges:
                continue
            visited_edges.add(key)
            visited_edges.add((target, source, edge.cost))

            if target in visited_vertices:
                logger.debug(
                    f"Cycle closed by edge {edge!r} "
                    f"after visiting {len(visited_vertices)} vertices"
                )
                return True

            visited_vertices.add(target)
            stack.append(iter(graph.out_edges(vertices[target])))

        return False
