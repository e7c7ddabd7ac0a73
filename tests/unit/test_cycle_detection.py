"""
tests/unit/test_cycle_detection.py - Undirected cycle detection tests
"""

import networkx as nx
import pytest

from graphalgo.algorithms.cycle_detection import CycleDetection
from graphalgo.errors import NullInputError, InvalidArgumentError
from graphalgo.schema import GraphType


class TestCycleDetection:
    """Tests for CycleDetection."""

    def test_triangle_has_cycle(self, triangle):
        """A triangle is a cycle."""
        assert CycleDetection().detect(triangle[0])

    def test_tree_has_no_cycle(self, make_graph):
        """Walking back along a reciprocal is not a cycle."""
        graph, _ = make_graph(
            GraphType.UNDIRECTED,
            "ABCDE",
            [("A", "B", 1), ("B", "C", 1), ("B", "D", 1), ("D", "E", 1)],
        )

        assert not CycleDetection().detect(graph)

    def test_square(self, make_graph):
        """A four-cycle is found."""
        graph, _ = make_graph(
            GraphType.UNDIRECTED,
            "ABCD",
            [("A", "B", 1), ("B", "C", 1), ("C", "D", 1), ("D", "A", 1)],
        )

        assert CycleDetection().detect(graph)

    def test_self_loop(self, make_graph):
        """A self-loop closes a cycle."""
        graph, _ = make_graph(GraphType.UNDIRECTED, "AB", [("A", "B", 1), ("A", "A", 1)])

        assert CycleDetection().detect(graph)

    def test_parallel_edges_with_different_costs(self, make_graph):
        """Two parallel edges with different costs form a cycle."""
        graph, _ = make_graph(GraphType.UNDIRECTED, "AB", [("A", "B", 1), ("A", "B", 2)])

        assert CycleDetection().detect(graph)

    def test_parallel_edges_with_equal_costs(self, make_graph):
        """Equal-cost parallel edges look like a reciprocal and are not reported."""
        graph, _ = make_graph(GraphType.UNDIRECTED, "AB", [("A", "B", 1), ("A", "B", 1)])

        assert not CycleDetection().detect(graph)

    def test_only_root_component_inspected(self, make_graph):
        """A cycle unreachable from the first vertex is not reported."""
        graph, _ = make_graph(
            GraphType.UNDIRECTED,
            "ABCDE",
            [("A", "B", 1), ("C", "D", 1), ("D", "E", 1), ("E", "C", 1)],
        )

        assert not CycleDetection().detect(graph)

    def test_empty_graph(self, make_graph):
        """No vertices, no cycle."""
        graph, _ = make_graph(GraphType.UNDIRECTED, "", [])

        assert not CycleDetection().detect(graph)

    @pytest.mark.parametrize("seed", range(12))
    def test_matches_networkx(self, make_random_graph, seed):
        """Agrees with an edge count check on the root component."""
        graph, _ = make_random_graph(
            seed, size=7, probability=0.25, graph_type=GraphType.UNDIRECTED
        )

        simple = nx.Graph()
        simple.add_nodes_from(range(graph.vertex_count))
        indices = graph.vertex_indices()
        simple.add_edges_from(
            (indices[id(e.from_vertex)], indices[id(e.to_vertex)]) for e in graph.edges
        )
        component = simple.subgraph(nx.node_connected_component(simple, 0))
        expected = component.number_of_edges() >= component.number_of_nodes()

        assert CycleDetection().detect(graph) == expected

    def test_directed_rejected(self, diamond):
        """Directed graphs are refused."""
        with pytest.raises(InvalidArgumentError):
            CycleDetection().detect(diamond[0])

    def test_none_rejected(self):
        """A missing graph is refused."""
        with pytest.raises(NullInputError):
            CycleDetection().detect(None)
