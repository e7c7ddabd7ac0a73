"""
graphalgo/algorithms/preconditions.py - Argument checks

Shared entry-point validation for the graph algorithms.
"""

from typing import Optional

from ..errors import NullInputError, InvalidArgumentError
from ..schema.graph import Graph
from ..schema.graph_type import GraphType
from ..schema.elements import Vertex

__all__ = ['require_graph', 'require_vertex']


def require_graph(
    graph: Optional[Graph],
    algorithm: str,
    graph_type: Optional[GraphType] = None,
) -> Graph:
    """
    Check the graph argument.

    Args:
        graph: Graph passed by the caller
        algorithm: Algorithm name for error context
        graph_type: Required directedness, if any

    Raises:
        NullInputError: If graph is None
        InvalidArgumentError: If graph has the wrong directedness
    """
    if graph is None:
        raise NullInputError("graph", algorithm=algorithm)

    if graph_type is not None and graph.graph_type is not graph_type:
        raise InvalidArgumentError(
            f"{algorithm} requires a {graph_type.value} graph, "
            f"got {graph.graph_type.value}",
            algorithm=algorithm,
            graph_type=graph.graph_type.value,
        )
    return graph


def require_vertex(
    graph: Graph,
    vertex: Optional[Vertex],
    argument: str,
    algorithm: str,
) -> int:
    """
    Check a vertex argument and resolve its position in the graph.

    Raises:
        NullInputError: If vertex is None
        InvalidArgumentError: If vertex is not in the graph
    """
    if vertex is None:
        raise NullInputError(argument, algorithm=algorithm)

    try:
        return graph.index_of(vertex)
    except InvalidArgumentError as e:
        raise InvalidArgumentError(
            f"{argument} {vertex!r} is not in the graph",
            algorithm=algorithm,
        ) from e
