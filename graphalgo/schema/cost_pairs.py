"""
graphalgo/schema/cost_pairs.py - Cost/Vertex and Cost/Path Pairs

Result and bookkeeping records shared by the shortest-path and
spanning-tree algorithms.

INFINITE_COST is the "unreachable" sentinel. It is float infinity, so
any sum involving it stays infinite and it compares greater than every
finite cost.
"""

from functools import total_ordering
from typing import List, Tuple
import math

from ..errors import NullInputError
from .elements import Edge, Vertex

__all__ = [
    'INFINITE_COST',
    'is_infinite',
    'CostVertexPair',
    'CostPathPair',
]


INFINITE_COST: float = math.inf


def is_infinite(cost: float) -> bool:
    """Whether cost is the unreachable sentinel."""
    return cost == INFINITE_COST


@total_ordering
class CostVertexPair:
    """
    Mutable (cost, vertex) cell.

    Used as a distance-table entry; ordered by cost, then vertex.
    """

    __slots__ = ('cost', 'vertex')

    def __init__(self, cost: float, vertex: Vertex):
        if vertex is None:
            raise NullInputError("vertex")
        self.cost = cost
        self.vertex = vertex

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CostVertexPair):
            return NotImplemented
        return self.cost == other.cost and self.vertex == other.vertex

    def __hash__(self) -> int:
        return hash((self.cost, self.vertex))

    def __lt__(self, other: 'CostVertexPair') -> bool:
        if not isinstance(other, CostVertexPair):
            return NotImplemented
        return (self.cost, self.vertex) < (other.cost, other.vertex)

    def __repr__(self) -> str:
        return f"CostVertexPair(cost={self.cost}, vertex={self.vertex.value!r})"


@total_ordering
class CostPathPair:
    """
    Total cost plus the concrete edge sequence achieving it.

    Returned by shortest-path queries and by the minimum spanning tree.
    Equality and ordering look at the cost, the path length and the edge
    costs pairwise, not at edge identity.
    """

    __slots__ = ('cost', 'path')

    def __init__(self, cost: float, path: List[Edge]):
        if path is None:
            raise NullInputError("path")
        self.cost = cost
        self.path = path

    @property
    def is_reachable(self) -> bool:
        return not is_infinite(self.cost)

    @property
    def vertices(self) -> List[Vertex]:
        """Vertices visited along the path, in order."""
        if not self.path:
            return []
        return [self.path[0].from_vertex] + [edge.to_vertex for edge in self.path]

    def _key(self) -> Tuple[float, int, Tuple[float, ...]]:
        return (self.cost, len(self.path), tuple(edge.cost for edge in self.path))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CostPathPair):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash((self.cost, len(self.path)))

    def __lt__(self, other: 'CostPathPair') -> bool:
        if not isinstance(other, CostPathPair):
            return NotImplemented
        return self._key() < other._key()

    def __repr__(self) -> str:
        return f"CostPathPair(cost={self.cost}, path={self.path!r})"
