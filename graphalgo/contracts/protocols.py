"""
graphalgo/contracts/protocols.py - Protocol Definitions

Defines the storage-engine boundary the graph model depends on, so that
the physical vertex/edge store can be swapped without touching the
algorithms.
"""

from typing import Protocol, List, TYPE_CHECKING

if TYPE_CHECKING:
    from graphalgo.schema.elements import Vertex, Edge

__all__ = [
    'GraphStoreProtocol',
]


class GraphStoreProtocol(Protocol):
    """
    Protocol for vertex/edge storage engines.

    Implementations hold the physical records of a graph. Each capability
    is expected to run in O(1) amortised or O(log n) time. Listing
    operations return records in registration order.

    Records are tracked by object identity: registering the same object
    twice is a no-op, while distinct objects with equal values are
    separate records.
    """

    def add_vertex(self, vertex: 'Vertex') -> bool:
        """
        Register a vertex.

        Returns:
            True if the vertex was added, False if already registered
        """
        ...

    def add_edge(self, edge: 'Edge') -> bool:
        """
        Register an edge between two registered vertices.

        Returns:
            True if the edge was added, False if already registered

        Raises:
            KeyError: If either endpoint is not registered
        """
        ...

    def remove_vertex(self, vertex: 'Vertex') -> List['Edge']:
        """
        Remove a vertex and every edge incident to it.

        Returns:
            The removed incident edges, in registration order
        """
        ...

    def remove_edge(self, edge: 'Edge') -> bool:
        """
        Remove an edge.

        Returns:
            True if the edge was registered and has been removed
        """
        ...

    def vertices(self) -> List['Vertex']:
        """All registered vertices."""
        ...

    def edges(self) -> List['Edge']:
        """All registered edges."""
        ...

    def out_edges(self, vertex: 'Vertex') -> List['Edge']:
        """Registered edges leaving vertex."""
        ...

    def contains_vertex(self, vertex: 'Vertex') -> bool:
        ...

    def contains_edge(self, edge: 'Edge') -> bool:
        ...

    def number_of_vertices(self) -> int:
        ...

    def number_of_edges(self) -> int:
        ...
