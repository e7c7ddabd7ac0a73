"""
graphalgo/schema/graph.py - Weighted Graph

The shared graph model every algorithm operates on.

A Graph is directed or undirected for its whole lifetime. It registers
its vertices and edges with a storage engine (networkx-backed by default)
and wires each edge into the edge list of its source vertex. Undirected
graphs materialise a reciprocal edge for every edge they are given, so
algorithms never have to special-case direction.

Algorithms must not mutate a caller's Graph. Anything that needs to
change a graph works on copy() and discards it.
"""

from typing import Dict, Iterable, List, Optional, Tuple
import logging

from ..errors import InvalidArgumentError
from ..contracts.protocols import GraphStoreProtocol
from ..store.networkx_store import NetworkXGraphStore
from .graph_type import GraphType
from .elements import Edge, Vertex

__all__ = ['Graph', 'copy_graph']

logger = logging.getLogger(__name__)


class Graph:
    """
    Directed or undirected weighted graph.

    Creates a graph from the given vertices and edges. The graph takes
    ownership of the Vertex objects: edges are appended to the edge list
    of their source vertex. Edges whose endpoints are not among the
    vertices are ignored. Duplicate vertices and edges (by value) are
    allowed.

    Usage:
        a, b, c = Vertex('A'), Vertex('B'), Vertex('C')
        graph = Graph(
            GraphType.UNDIRECTED,
            [a, b, c],
            [Edge(a, b, 1), Edge(b, c, 2), Edge(a, c, 4)],
        )
        len(graph.edges)  # 6, reciprocals included
    """

    def __init__(
        self,
        graph_type: GraphType = GraphType.UNDIRECTED,
        vertices: Iterable[Vertex] = (),
        edges: Iterable[Edge] = (),
        store: Optional[GraphStoreProtocol] = None,
    ):
        """
        Initialize graph.

        Args:
            graph_type: Directedness, fixed for this instance
            vertices: Vertices in the order they should be listed
            edges: Edges in the order they should be listed
            store: Storage engine (defaults to NetworkXGraphStore)
        """
        self._type = graph_type
        self._store: GraphStoreProtocol = store if store is not None else NetworkXGraphStore()
        self._index_cache: Optional[Dict[int, int]] = None

        for vertex in vertices:
            self._store.add_vertex(vertex)

        # Reciprocals are listed after all supplied edges
        reciprocals: List[Edge] = []
        skipped = 0
        for edge in edges:
            if self._store.contains_edge(edge):
                continue
            if not self._wire(edge):
                skipped += 1
                continue
            if self._type is GraphType.UNDIRECTED:
                reciprocal = Edge(edge.to_vertex, edge.from_vertex, edge.cost)
                edge.to_vertex.add_edge(reciprocal)
                reciprocals.append(reciprocal)

        for reciprocal in reciprocals:
            self._store.add_edge(reciprocal)

        if skipped:
            logger.debug(f"Ignored {skipped} edges with endpoints outside the graph")

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def graph_type(self) -> GraphType:
        return self._type

    @property
    def is_directed(self) -> bool:
        return self._type is GraphType.DIRECTED

    @property
    def vertices(self) -> List[Vertex]:
        """Vertices in registration order."""
        return self._store.vertices()

    @property
    def edges(self) -> List[Edge]:
        """Edges in registration order (reciprocals included)."""
        return self._store.edges()

    @property
    def store(self) -> GraphStoreProtocol:
        """Get the underlying storage engine."""
        return self._store

    @property
    def vertex_count(self) -> int:
        return self._store.number_of_vertices()

    @property
    def edge_count(self) -> int:
        return self._store.number_of_edges()

    # =========================================================================
    # Lookup
    # =========================================================================

    def vertex_indices(self) -> Dict[int, int]:
        """
        Map id(vertex) -> position in `vertices`.

        The table is cached until the vertex set changes. Algorithms key
        their cost and path tables by these positions.
        """
        if self._index_cache is None:
            self._index_cache = {
                id(vertex): position
                for position, vertex in enumerate(self._store.vertices())
            }
        return self._index_cache

    def index_of(self, vertex: Vertex) -> int:
        """
        Position of vertex in `vertices`.

        The vertex object itself is looked up first; failing that, the
        first structurally equal vertex is used.

        Raises:
            InvalidArgumentError: If no such vertex is in the graph
        """
        position = self.vertex_indices().get(id(vertex))
        if position is not None:
            return position

        for position, candidate in enumerate(self.vertices):
            if candidate == vertex:
                return position

        raise InvalidArgumentError(f"Vertex {vertex!r} is not in the graph")

    def out_edges(self, vertex: Vertex) -> List[Edge]:
        """
        Edges leaving vertex that are registered in this graph.

        Listed in the vertex's own edge order. A Vertex shared with
        another graph carries that graph's edges too; those are skipped.
        """
        registered = self._store.out_edges(vertex)
        pending = {id(edge): edge for edge in registered}

        ordered = []
        for edge in vertex.edges:
            if pending.pop(id(edge), None) is not None:
                ordered.append(edge)

        # Still registered here but unlinked from the vertex by another graph
        ordered.extend(edge for edge in registered if id(edge) in pending)
        return ordered

    def contains_vertex(self, vertex: Vertex) -> bool:
        try:
            self.index_of(vertex)
        except InvalidArgumentError:
            return False
        return True

    def has_negative_edge(self) -> bool:
        return any(edge.cost < 0 for edge in self.edges)

    def density(self) -> float:
        """Edges over the |V|(|V|-1) ordered pairs; 0.0 for fewer than 2 vertices."""
        n = self.vertex_count
        if n < 2:
            return 0.0
        return self.edge_count / (n * (n - 1))

    # =========================================================================
    # Mutation
    # =========================================================================

    def add_vertex(self, vertex: Vertex) -> None:
        """Register a vertex. Edges it already carries stay unregistered until add_edge."""
        if self._store.add_vertex(vertex):
            self._index_cache = None

    def add_edge(self, edge: Edge) -> Optional[Edge]:
        """
        Wire and register an edge.

        On undirected graphs a reciprocal edge is created as well.

        Returns:
            The reciprocal edge, or None for directed graphs and for an
            edge that is already registered

        Raises:
            InvalidArgumentError: If an endpoint is not in the graph
        """
        if self._store.contains_edge(edge):
            return None
        if not self._wire(edge):
            raise InvalidArgumentError(
                f"Edge {edge!r} has an endpoint outside the graph"
            )
        if self._type is not GraphType.UNDIRECTED:
            return None

        reciprocal = Edge(edge.to_vertex, edge.from_vertex, edge.cost)
        edge.to_vertex.add_edge(reciprocal)
        self._store.add_edge(reciprocal)
        return reciprocal

    def remove_edge(self, edge: Edge) -> bool:
        """
        Remove a single edge.

        Reciprocals are independent edges and are not removed.
        """
        if not self._store.remove_edge(edge):
            return False
        _unlink(edge)
        return True

    def remove_vertex(self, vertex: Vertex) -> bool:
        """Remove a vertex and every edge entering or leaving it."""
        if not self._store.contains_vertex(vertex):
            return False

        for edge in self._store.remove_vertex(vertex):
            _unlink(edge)
        self._index_cache = None
        return True

    def _wire(self, edge: Edge) -> bool:
        """Register edge and append it to its source's edge list."""
        if not (
            self._store.contains_vertex(edge.from_vertex)
            and self._store.contains_vertex(edge.to_vertex)
        ):
            return False

        if self._store.add_edge(edge) and not _holds(edge.from_vertex.edges, edge):
            edge.from_vertex.add_edge(edge)
        return True

    # =========================================================================
    # Copying
    # =========================================================================

    def copy(self, graph_type: Optional[GraphType] = None) -> 'Graph':
        """
        Deep, structurally independent clone.

        New Vertex and Edge objects are created; vertex order, each
        vertex's edge order and the global edge order are preserved, so
        `clone.vertices[i]` corresponds to `self.vertices[i]` and
        `clone.edges[j]` to `self.edges[j]`.

        Args:
            graph_type: Re-type the clone. Edges are copied as they are;
                no reciprocals are added or dropped.
        """
        clone, _ = self.copy_with_origins(graph_type)
        return clone

    def copy_with_origins(
        self,
        graph_type: Optional[GraphType] = None,
    ) -> Tuple['Graph', Dict[int, Edge]]:
        """
        Clone as copy() does and report where each cloned edge came from.

        Returns:
            (clone, origins) where origins maps id(cloned edge) to the
            edge of this graph it was made from
        """
        vertices = self.vertices
        clones = [Vertex(vertex.value, vertex.weight) for vertex in vertices]
        indices = self.vertex_indices()

        clone = Graph(graph_type or self._type, store=type(self._store)())
        for vertex in clones:
            clone._store.add_vertex(vertex)

        # Preserve per-vertex edge order first, then register globally
        copies: Dict[int, Edge] = {}
        for position, vertex in enumerate(vertices):
            for edge in self.out_edges(vertex):
                target = indices[id(edge.to_vertex)]
                duplicate = Edge(clones[position], clones[target], edge.cost)
                clones[position].add_edge(duplicate)
                copies[id(edge)] = duplicate

        origins: Dict[int, Edge] = {}
        for edge in self.edges:
            duplicate = copies[id(edge)]
            clone._store.add_edge(duplicate)
            origins[id(duplicate)] = edge

        return clone, origins

    # =========================================================================
    # Comparison
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        if self._type is not other._type:
            return False
        if self.vertex_count != other.vertex_count:
            return False
        if self.edge_count != other.edge_count:
            return False

        # Same elements, possibly in a different order
        if sorted(self.vertices) != sorted(other.vertices):
            return False
        return sorted(self.edges) == sorted(other.edges)

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"Graph(type={self._type.value}, vertices={self.vertex_count}, "
            f"edges={self.edge_count})"
        )

    def __str__(self) -> str:
        lines = []
        for vertex in self.vertices:
            targets = ", ".join(
                f"{edge.to_vertex.value!r}({edge.cost})" for edge in self.out_edges(vertex)
            )
            lines.append(f"{vertex.value!r} [w={vertex.weight}] -> {targets}")
        return "\n".join(lines)


def copy_graph(graph: Graph) -> Graph:
    """Deep copy of graph. See Graph.copy."""
    return graph.copy()


def _holds(edges: List[Edge], edge: Edge) -> bool:
    return any(candidate is edge for candidate in edges)


def _unlink(edge: Edge) -> None:
    """Drop edge from its source vertex's edge list (by identity)."""
    edges = edge.from_vertex.edges
    for position, candidate in enumerate(edges):
        if candidate is edge:
            del edges[position]
            return
