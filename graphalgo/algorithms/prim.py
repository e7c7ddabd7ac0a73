"""
graphalgo/algorithms/prim.py - Prim Minimum Spanning Tree

Minimum spanning tree of a connected undirected graph.

Worst case: O(|E| log |E|)
"""

from itertools import count
from typing import List, Optional, Set, Tuple
import heapq
import logging

from ..integration.config import GraphConfig, DEFAULT_CONFIG
from ..schema.graph import Graph
from ..schema.graph_type import GraphType
from ..schema.elements import Edge, Vertex
from ..schema.cost_pairs import CostPathPair
from .preconditions import require_graph, require_vertex

__all__ = ['Prim']

logger = logging.getLogger(__name__)


class Prim:
    """
    Prim's minimum spanning tree.

    Grows the tree from the start vertex. The frontier holds every edge
    leaving the tree, cheapest first; equal-cost edges come out in the
    order they were pushed. An edge whose target joined the tree after it
    was pushed is discarded when popped.

    Usage:
        mst = Prim().get_minimum_spanning_tree(graph, a)
        if mst is not None:
            mst.cost, mst.path
    """

    def __init__(self, config: Optional[GraphConfig] = None):
        self._config = config or DEFAULT_CONFIG

    def get_minimum_spanning_tree(
        self,
        graph: Graph,
        start: Vertex,
    ) -> Optional[CostPathPair]:
        """
        Minimum spanning tree rooted at start.

        Returns:
            Total cost and tree edges in the order they were added, or
            None if some vertex cannot be reached from start

        Raises:
            NullInputError: If graph or start is None
            InvalidArgumentError: If graph is directed or start is not in it
        """
        require_graph(graph, "Prim", GraphType.UNDIRECTED)
        root = require_vertex(graph, start, "start", "Prim")

        vertices = graph.vertices
        indices = graph.vertex_indices()

        unvisited: Set[int] = set(range(len(vertices)))
        sequence = count()
        frontier: List[Tuple[float, int, Edge]] = []

        def visit(position: int) -> None:
            unvisited.discard(position)
            for edge in graph.out_edges(vertices[position]):
                if indices.get(id(edge.to_vertex)) in unvisited:
                    heapq.heappush(frontier, (edge.cost, next(sequence), edge))

        tree: List[Edge] = []
        total = 0.0
        visit(root)

        while unvisited and frontier:
            _, _, edge = heapq.heappop(frontier)
            target = indices[id(edge.to_vertex)]
            if target not in unvisited:
                continue

            tree.append(edge)
            total += edge.cost
            visit(target)

        if unvisited:
            logger.warning(
                f"Prim from {start.value!r}: graph is disconnected, "
                f"{len(unvisited)} of {len(vertices)} vertices unreachable"
            )
            return None

        logger.debug(f"Prim from {start.value!r}: {len(tree)} edges, cost {total}")
        return CostPathPair(total, tree)
