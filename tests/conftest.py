"""
tests/conftest.py - Test Fixtures

Pytest fixtures for graphalgo tests: a graph factory, the canonical
example graphs and a networkx oracle.
"""

import random
from typing import Callable, Dict, Iterable, List, Tuple

import networkx as nx
import pytest

from graphalgo.schema import Edge, Graph, GraphType, Vertex


EdgeSpec = Tuple[str, str, float]


# =============================================================================
# Builders
# =============================================================================

def build_graph(
    graph_type: GraphType,
    names: Iterable[str],
    edges: Iterable[EdgeSpec],
) -> Tuple[Graph, Dict[str, Vertex]]:
    """Graph over named vertices; returns the graph and name -> vertex."""
    vertices = {name: Vertex(name) for name in names}
    graph = Graph(
        graph_type,
        list(vertices.values()),
        [Edge(vertices[u], vertices[v], cost) for u, v, cost in edges],
    )
    return graph, vertices


def random_edges(
    seed: int,
    size: int,
    probability: float,
    low: int,
    high: int,
    directed: bool,
) -> Tuple[List[str], List[EdgeSpec]]:
    """Seeded random edge list over vertices 'v0'..'v<size-1>'."""
    rng = random.Random(seed)
    names = [f"v{i}" for i in range(size)]
    edges: List[EdgeSpec] = []
    for i in range(size):
        others = range(size) if directed else range(i + 1, size)
        for j in others:
            if i != j and rng.random() < probability:
                edges.append((names[i], names[j], float(rng.randint(low, high))))
    return names, edges


def to_networkx(graph: Graph) -> nx.DiGraph:
    """
    networkx view of graph keyed by vertex position.

    Parallel edges collapse to the cheapest one. Undirected graphs
    already hold both directions, so a DiGraph covers both cases.
    """
    indices = graph.vertex_indices()
    oracle = nx.DiGraph()
    oracle.add_nodes_from(range(graph.vertex_count))
    for edge in graph.edges:
        u = indices[id(edge.from_vertex)]
        v = indices[id(edge.to_vertex)]
        if not oracle.has_edge(u, v) or edge.cost < oracle[u][v]['weight']:
            oracle.add_edge(u, v, weight=edge.cost)
    return oracle


# =============================================================================
# Factories
# =============================================================================

@pytest.fixture
def make_graph() -> Callable[..., Tuple[Graph, Dict[str, Vertex]]]:
    """Factory: make_graph(graph_type, names, [(from, to, cost), ...])."""
    return build_graph


@pytest.fixture
def make_random_graph() -> Callable[..., Tuple[Graph, Dict[str, Vertex]]]:
    """Factory for seeded random graphs with integer costs."""

    def make(
        seed: int,
        size: int = 8,
        probability: float = 0.35,
        low: int = 0,
        high: int = 9,
        graph_type: GraphType = GraphType.DIRECTED,
    ) -> Tuple[Graph, Dict[str, Vertex]]:
        names, edges = random_edges(
            seed, size, probability, low, high, graph_type is GraphType.DIRECTED
        )
        return build_graph(graph_type, names, edges)

    return make


# =============================================================================
# Canonical graphs
# =============================================================================

@pytest.fixture
def diamond():
    """Directed A..D: A->B(1), A->C(4), B->C(2), B->D(5), C->D(1)."""
    return build_graph(
        GraphType.DIRECTED,
        "ABCD",
        [("A", "B", 1), ("A", "C", 4), ("B", "C", 2), ("B", "D", 5), ("C", "D", 1)],
    )


@pytest.fixture
def triangle():
    """Undirected A-B(1), B-C(2), A-C(4)."""
    return build_graph(
        GraphType.UNDIRECTED,
        "ABC",
        [("A", "B", 1), ("B", "C", 2), ("A", "C", 4)],
    )


@pytest.fixture
def dag():
    """Directed acyclic graph with several valid orderings."""
    return build_graph(
        GraphType.DIRECTED,
        "ABCDEF",
        [
            ("A", "B", 1), ("A", "C", 1), ("B", "D", 1),
            ("C", "D", 1), ("D", "E", 1), ("F", "E", 1),
        ],
    )


@pytest.fixture
def negative_edges():
    """Directed graph with negative edges and no negative cycle."""
    return build_graph(
        GraphType.DIRECTED,
        "ABCDE",
        [
            ("A", "B", 4), ("A", "C", 2), ("C", "B", -3),
            ("B", "D", 2), ("C", "D", 5), ("D", "E", -1), ("E", "B", 3),
        ],
    )


@pytest.fixture
def negative_cycle():
    """Directed graph whose cycle B->C->D->B costs -1."""
    return build_graph(
        GraphType.DIRECTED,
        "ABCDE",
        [
            ("A", "B", 1), ("B", "C", 2), ("C", "D", -4),
            ("D", "B", 1), ("D", "E", 3),
        ],
    )


@pytest.fixture
def networkx_view() -> Callable[[Graph], nx.DiGraph]:
    """Oracle: networkx DiGraph of a Graph, nodes are vertex positions."""
    return to_networkx
