"""
tests/unit/test_dijkstra.py - Dijkstra shortest path tests
"""

import pytest

from graphalgo.algorithms.dijkstra import Dijkstra
from graphalgo.errors import NullInputError, InvalidArgumentError
from graphalgo.integration.config import GraphConfig
from graphalgo.schema import GraphType, Vertex, INFINITE_COST


def hops(pair):
    return [(e.from_vertex.value, e.to_vertex.value, e.cost) for e in pair.path]


class TestDijkstra:
    """Tests for Dijkstra."""

    def test_diamond_a_to_d(self, diamond):
        """A to D costs 4 through B and C."""
        graph, v = diamond
        pair = Dijkstra().get_shortest_path(graph, v['A'], v['D'])

        assert pair.cost == 4
        assert hops(pair) == [('A', 'B', 1), ('B', 'C', 2), ('C', 'D', 1)]
        assert pair.path[0] is v['A'].edges[0]

    def test_all_targets(self, diamond):
        """Every reachable vertex gets its cost; the start costs nothing."""
        graph, v = diamond
        paths = Dijkstra().get_shortest_paths(graph, v['A'])

        assert {x.value: pair.cost for x, pair in paths.items()} == {
            'A': 0, 'B': 1, 'C': 3, 'D': 4,
        }
        assert paths[v['A']].path == []

    def test_unreachable_omitted(self, diamond):
        """Unreachable vertices are left out of the map."""
        graph, v = diamond
        paths = Dijkstra().get_shortest_paths(graph, v['D'])

        assert list(paths) == [v['D']]

    def test_unreachable_target(self, diamond):
        """An unreachable target costs INFINITE_COST with an empty path."""
        graph, v = diamond
        pair = Dijkstra().get_shortest_path(graph, v['D'], v['A'])

        assert pair.cost == INFINITE_COST
        assert pair.path == []
        assert not pair.is_reachable

    def test_start_equals_end(self, diamond):
        """A path to itself is free."""
        graph, v = diamond
        pair = Dijkstra().get_shortest_path(graph, v['B'], v['B'])

        assert pair.cost == 0
        assert pair.path == []

    def test_undirected(self, triangle):
        """Reciprocals make undirected graphs walkable both ways."""
        graph, v = triangle

        assert Dijkstra().get_shortest_path(graph, v['C'], v['A']).cost == 3
        assert Dijkstra().get_shortest_path(graph, v['A'], v['C']).cost == 3

    def test_ties_keep_first_found(self, make_graph):
        """On equal costs the path found first is kept."""
        graph, v = make_graph(
            GraphType.DIRECTED,
            "ABCD",
            [("A", "B", 1), ("A", "C", 1), ("B", "D", 1), ("C", "D", 1)],
        )
        pair = Dijkstra().get_shortest_path(graph, v['A'], v['D'])

        assert [x.value for x in pair.vertices] == ['A', 'B', 'D']

    def test_early_exit_gives_same_answer(self, diamond):
        """Stopping at the target does not change the result."""
        graph, v = diamond
        eager = Dijkstra(GraphConfig(dijkstra_early_exit=False))

        assert eager.get_shortest_path(graph, v['A'], v['D']) == \
            Dijkstra().get_shortest_path(graph, v['A'], v['D'])

    def test_shortest_path_table(self, diamond):
        """The table is indexed by vertex position."""
        graph, v = diamond
        costs, paths = Dijkstra().shortest_path_table(graph, v['B'])

        assert [pair.cost for pair in costs] == [INFINITE_COST, 0, 2, 3]
        assert paths[0] == []
        assert len(paths[3]) == 2

    def test_structural_start_lookup(self, diamond):
        """A structurally equal vertex finds the graph's own vertex."""
        graph, v = diamond
        pair = Dijkstra().get_shortest_path(graph, v['A'], Vertex('D'))

        assert pair.cost == 4

    def test_negative_edge_rejected(self, negative_edges):
        """Any negative edge is refused, cycle or not."""
        graph, v = negative_edges

        with pytest.raises(InvalidArgumentError) as excinfo:
            Dijkstra().get_shortest_paths(graph, v['A'])
        assert excinfo.value.recovery_hint

    def test_graph_untouched(self, diamond):
        """The caller's graph is not modified."""
        graph, v = diamond
        before = [(e.cost, len(e.from_vertex.edges)) for e in graph.edges]

        Dijkstra().get_shortest_paths(graph, v['A'])

        assert [(e.cost, len(e.from_vertex.edges)) for e in graph.edges] == before

    def test_missing_arguments(self, diamond):
        """None graph, start or end are refused."""
        graph, v = diamond

        with pytest.raises(NullInputError):
            Dijkstra().get_shortest_paths(None, v['A'])
        with pytest.raises(NullInputError):
            Dijkstra().get_shortest_paths(graph, None)
        with pytest.raises(NullInputError):
            Dijkstra().get_shortest_path(graph, v['A'], None)

    def test_foreign_vertex(self, diamond):
        """Vertices outside the graph are refused."""
        graph, v = diamond

        with pytest.raises(InvalidArgumentError):
            Dijkstra().get_shortest_path(graph, Vertex('Z'), v['A'])
        with pytest.raises(InvalidArgumentError):
            Dijkstra().get_shortest_path(graph, v['A'], Vertex('Z'))
