"""
graphalgo/service/analysis_service.py - Graph Analysis Service Façade

Single entry point that picks the right algorithm for a graph and
reports what it ran and how long it took.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional
import logging
import time

from ..integration.config import GraphConfig, DEFAULT_CONFIG
from ..schema.graph import Graph
from ..schema.elements import Vertex
from ..algorithms.preconditions import require_graph
from ..algorithms.topological_sort import TopologicalSort
from ..algorithms.cycle_detection import CycleDetection
from ..algorithms.dijkstra import Dijkstra
from ..algorithms.bellman_ford import BellmanFord
from ..algorithms.floyd_warshall import FloydWarshall
from ..algorithms.johnson import Johnson
from ..algorithms.prim import Prim

__all__ = ['GraphAnalysisService', 'AnalysisResult']

logger = logging.getLogger(__name__)


@dataclass
class AnalysisResult:
    """Result from the analysis service."""
    algorithm: str
    value: Any = None
    elapsed_ms: float = 0.0


class GraphAnalysisService:
    """
    Analysis service façade over the graph algorithms.

    Selection rules:
    - Single-source paths: Dijkstra, or Bellman-Ford when any edge cost
      is negative
    - All-pairs costs: Floyd-Warshall for dense graphs (density at or
      above dense_graph_threshold, at most max_dense_vertices vertices),
      Johnson otherwise

    Algorithm errors propagate unchanged.

    Usage:
        service = GraphAnalysisService()
        result = service.shortest_paths(graph, a, d)
        result.algorithm, result.value.cost
    """

    def __init__(self, config: Optional[GraphConfig] = None):
        """
        Initialize analysis service.

        Args:
            config: Algorithm configuration (defaults to DEFAULT_CONFIG)
        """
        self._config = config or DEFAULT_CONFIG

        self._topological_sort = TopologicalSort(self._config)
        self._cycle_detection = CycleDetection(self._config)
        self._dijkstra = Dijkstra(self._config)
        self._bellman_ford = BellmanFord(self._config)
        self._floyd_warshall = FloydWarshall(self._config)
        # All-pairs results always carry true costs
        self._johnson = Johnson(replace(self._config, johnson_restore_costs=True))
        self._prim = Prim(self._config)

    @property
    def config(self) -> GraphConfig:
        return self._config

    # =========================================================================
    # Shortest paths
    # =========================================================================

    def shortest_paths(
        self,
        graph: Graph,
        start: Vertex,
        end: Optional[Vertex] = None,
    ) -> AnalysisResult:
        """
        Single-source shortest paths.

        Args:
            graph: Graph to search
            start: Source vertex
            end: Target vertex; all targets when omitted

        Returns:
            AnalysisResult whose value is a CostPathPair when end is
            given, else a vertex -> CostPathPair mapping
        """
        require_graph(graph, "GraphAnalysisService")
        started = time.perf_counter()

        if graph.has_negative_edge():
            algorithm = self._bellman_ford
            name = "BellmanFord"
        else:
            algorithm = self._dijkstra
            name = "Dijkstra"

        if end is None:
            value = algorithm.get_shortest_paths(graph, start)
        else:
            value = algorithm.get_shortest_path(graph, start, end)

        return self._finish(name, value, started)

    def all_pairs_shortest_paths(self, graph: Graph) -> AnalysisResult:
        """
        Shortest path cost between every ordered pair of vertices.

        Returns:
            AnalysisResult whose value maps from vertex -> to vertex ->
            cost, unreachable pairs omitted
        """
        require_graph(graph, "GraphAnalysisService")
        started = time.perf_counter()

        if self._is_dense(graph):
            costs = self._floyd_warshall.get_all_pairs_shortest_paths(graph)
            return self._finish("FloydWarshall", costs, started)

        paths = self._johnson.get_all_pairs_shortest_paths(graph)
        costs: Dict[Vertex, Dict[Vertex, float]] = {
            from_vertex: {to_vertex: pair.cost for to_vertex, pair in row.items()}
            for from_vertex, row in paths.items()
        }
        return self._finish("Johnson", costs, started)

    # =========================================================================
    # Structure
    # =========================================================================

    def minimum_spanning_tree(
        self,
        graph: Graph,
        start: Optional[Vertex] = None,
    ) -> AnalysisResult:
        """
        Minimum spanning tree of an undirected graph.

        Args:
            graph: Undirected graph
            start: Root vertex; the first vertex when omitted

        Returns:
            AnalysisResult whose value is a CostPathPair, or None if the
            graph is disconnected
        """
        started = time.perf_counter()
        if start is None and graph is not None and graph.vertices:
            start = graph.vertices[0]

        tree = self._prim.get_minimum_spanning_tree(graph, start)
        return self._finish("Prim", tree, started)

    def topological_order(self, graph: Graph) -> AnalysisResult:
        """Topological order of a directed graph; value None on a cycle."""
        started = time.perf_counter()
        order = self._topological_sort.sort(graph)
        return self._finish("TopologicalSort", order, started)

    def has_cycle(self, graph: Graph) -> AnalysisResult:
        """Cycle check of an undirected graph; value is a bool."""
        started = time.perf_counter()
        found = self._cycle_detection.detect(graph)
        return self._finish("CycleDetection", found, started)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _is_dense(self, graph: Graph) -> bool:
        if graph.vertex_count > self._config.max_dense_vertices:
            return False
        return graph.density() >= self._config.dense_graph_threshold

    @staticmethod
    def _finish(algorithm: str, value: Any, started: float) -> AnalysisResult:
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(f"{algorithm} completed in {elapsed_ms:.2f}ms")
        return AnalysisResult(algorithm=algorithm, value=value, elapsed_ms=elapsed_ms)
