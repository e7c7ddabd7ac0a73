"""
graphalgo/schema/elements.py - Vertex and Edge

Graph elements with structural (value-based) equality.

A Vertex owns the ordered list of its outgoing edges. Two vertices are
equal when their value, weight, edge count and outgoing edge costs (in
edge order) match; object identity plays no part. An Edge is a directed
(from, to, cost) triple compared lexicographically by (cost, from, to).

Because equality is structural, algorithms key their internal tables by
vertex position (see Graph.vertex_indices) rather than by Vertex.
"""

from dataclasses import dataclass, field
from functools import total_ordering
from numbers import Real
from typing import Any, List, Optional, Tuple

__all__ = ['Vertex', 'Edge']


@total_ordering
@dataclass(eq=False)
class Vertex:
    """
    A graph node.

    Attributes:
        value: Opaque comparable payload (typically a label)
        weight: Scalar weight carried by the vertex
        edges: Outgoing edges in insertion order
    """
    value: Any = None
    weight: float = 0.0
    edges: List['Edge'] = field(default_factory=list)

    def add_edge(self, edge: 'Edge') -> None:
        """Append an outgoing edge."""
        self.edges.append(edge)

    def get_edge(self, to_vertex: 'Vertex') -> Optional['Edge']:
        """First outgoing edge whose target equals to_vertex, if any."""
        for edge in self.edges:
            if edge.to_vertex == to_vertex:
                return edge
        return None

    def path_to(self, to_vertex: 'Vertex') -> bool:
        """Whether an outgoing edge leads directly to to_vertex."""
        return self.get_edge(to_vertex) is not None

    @property
    def out_degree(self) -> int:
        return len(self.edges)

    def _edge_costs(self) -> Tuple[float, ...]:
        return tuple(edge.cost for edge in self.edges)

    def _sort_key(self) -> Tuple:
        return (_value_key(self.value), self.weight, len(self.edges), self._edge_costs())

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Vertex):
            return NotImplemented
        return (
            self.value == other.value
            and self.weight == other.weight
            and len(self.edges) == len(other.edges)
            and self._edge_costs() == other._edge_costs()
        )

    def __hash__(self) -> int:
        return hash((self.value, self.weight, len(self.edges)))

    def __lt__(self, other: 'Vertex') -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __repr__(self) -> str:
        return (
            f"Vertex(value={self.value!r}, weight={self.weight}, "
            f"edges={len(self.edges)})"
        )


@total_ordering
@dataclass(eq=False)
class Edge:
    """
    A directed, weighted connection.

    Attributes:
        from_vertex: Source vertex (the edge appears in its edge list)
        to_vertex: Target vertex
        cost: Real-valued cost, may be negative
    """
    from_vertex: Vertex
    to_vertex: Vertex
    cost: float = 0.0

    def _key(self) -> Tuple[float, Vertex, Vertex]:
        return (self.cost, self.from_vertex, self.to_vertex)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Edge):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: 'Edge') -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self._key() < other._key()

    def __repr__(self) -> str:
        return (
            f"Edge({self.from_vertex.value!r} -> {self.to_vertex.value!r}, "
            f"cost={self.cost})"
        )


def _value_key(value: Any) -> Tuple:
    """Order numbers together, other values grouped by type name."""
    if isinstance(value, Real):
        return (0, '', value)
    return (1, type(value).__name__, value)
