"""
graphalgo/algorithms/floyd_warshall.py - Floyd-Warshall All-Pairs

All-pairs shortest path costs for dense graphs, positive or negative
edge costs.

Worst case: O(|V|^3)
"""

from typing import Dict, Optional
import logging

import numpy as np

from ..errors import NegativeCycleError
from ..integration.config import GraphConfig, DEFAULT_CONFIG
from ..schema.graph import Graph
from ..schema.elements import Vertex
from .preconditions import require_graph

__all__ = ['FloydWarshall']

logger = logging.getLogger(__name__)


class FloydWarshall:
    """
    Floyd-Warshall all-pairs shortest path costs.

    Works on a |V|x|V| float matrix: infinity where no edge exists, zero
    on the diagonal, and the cheapest direct edge for every ordered pair.
    Each intermediate vertex k relaxes the whole matrix at once with
    d[i][j] = min(d[i][j], d[i][k] + d[k][j]). Float infinity absorbs
    addition, so unreachable sums stay unreachable.

    Negative cycles:
        With floyd_warshall_detect_negative_cycles (the default) a
        negative diagonal entry after relaxation raises
        NegativeCycleError. Otherwise the diagonal is pinned to zero
        after every k and no check is made; costs are then meaningless
        for pairs routed through a negative cycle.
    """

    def __init__(self, config: Optional[GraphConfig] = None):
        self._config = config or DEFAULT_CONFIG

    def get_all_pairs_shortest_paths(
        self,
        graph: Graph,
    ) -> Dict[Vertex, Dict[Vertex, float]]:
        """
        Shortest path cost between every ordered pair of vertices.

        Returns:
            from vertex -> to vertex -> cost; unreachable pairs omitted

        Raises:
            NullInputError: If graph is None
            NegativeCycleError: If detection is enabled and the graph
                has a negative cycle
        """
        require_graph(graph, "FloydWarshall")

        vertices = graph.vertices
        sums = self._seed(graph)
        detect = self._config.floyd_warshall_detect_negative_cycles

        for k in range(len(vertices)):
            np.minimum(sums, sums[:, k, np.newaxis] + sums[np.newaxis, k, :], out=sums)
            if not detect:
                np.fill_diagonal(sums, 0.0)

        if detect:
            negative = np.flatnonzero(np.diagonal(sums) < 0)
            if negative.size:
                raise NegativeCycleError(
                    algorithm="FloydWarshall",
                    vertices=[vertices[i].value for i in negative],
                )

        reachable = np.isfinite(sums)
        all_shortest_paths: Dict[Vertex, Dict[Vertex, float]] = {}
        for i, from_vertex in enumerate(vertices):
            row = all_shortest_paths.setdefault(from_vertex, {})
            for j in np.flatnonzero(reachable[i]):
                row[vertices[j]] = float(sums[i, j])

        logger.debug(
            f"Floyd-Warshall: {int(reachable.sum())} reachable pairs "
            f"over {len(vertices)} vertices"
        )
        return all_shortest_paths

    @staticmethod
    def _seed(graph: Graph) -> np.ndarray:
        """Direct edge costs; the cheapest edge wins for parallel edges."""
        n = graph.vertex_count
        indices = graph.vertex_indices()

        sums = np.full((n, n), np.inf, dtype=float)
        np.fill_diagonal(sums, 0.0)

        for edge in graph.edges:
            i = indices[id(edge.from_vertex)]
            j = indices[id(edge.to_vertex)]
            if edge.cost < sums[i, j]:
                sums[i, j] = edge.cost

        return sums
