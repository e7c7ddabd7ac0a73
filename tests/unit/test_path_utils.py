"""
tests/unit/test_path_utils.py - Path helper tests
"""

from graphalgo.algorithms.path_utils import path_cost, path_vertices, is_contiguous
from graphalgo.schema import Edge, Vertex


class TestPathUtils:
    """Tests for path_utils.py"""

    def test_path_cost(self):
        """Costs are summed; an empty path is free."""
        a, b, c = Vertex('A'), Vertex('B'), Vertex('C')

        assert path_cost([Edge(a, b, 1.5), Edge(b, c, -0.5)]) == 1.0
        assert path_cost([]) == 0.0

    def test_path_vertices(self):
        """The start vertex is followed by each edge's target."""
        a, b, c = Vertex('A'), Vertex('B'), Vertex('C')

        assert path_vertices([Edge(a, b), Edge(b, c)]) == [a, b, c]
        assert path_vertices([]) == []

    def test_is_contiguous(self):
        """Each edge must start where the previous one ended."""
        a, b, c = Vertex('A'), Vertex('B'), Vertex('C')

        assert is_contiguous([Edge(a, b), Edge(b, c)])
        assert not is_contiguous([Edge(a, b), Edge(a, c)])
        assert is_contiguous([Edge(a, b)])
        assert is_contiguous([])
