"""
tests/unit/test_errors.py - Error taxonomy tests
"""

import pytest

from graphalgo.errors import (
    GraphErrorCategory,
    GraphError,
    NullInputError,
    InvalidArgumentError,
    NegativeCycleError,
    GRAPH_ERROR_CODES,
    create_error_from_dict,
)


class TestGraphErrors:
    """Tests for the error classes."""

    def test_codes_are_unique(self):
        """Each error type has its own code."""
        codes = [cls.code for cls in (GraphError, NullInputError,
                                      InvalidArgumentError, NegativeCycleError)]
        assert len(set(codes)) == 4
        assert set(GRAPH_ERROR_CODES) == set(codes)

    def test_null_input_error(self):
        """NullInputError names the missing argument."""
        error = NullInputError("start", algorithm="Dijkstra")

        assert error.code == "GRAPH_001"
        assert error.category is GraphErrorCategory.INPUT
        assert "start" in error.message
        assert error.details["argument"] == "start"
        assert error.algorithm == "Dijkstra"

    def test_argument_errors_are_value_errors(self):
        """Argument errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            raise NullInputError("graph")
        with pytest.raises(ValueError):
            raise InvalidArgumentError("bad")

    def test_negative_cycle_error_defaults(self):
        """NegativeCycleError has a default message and hint."""
        error = NegativeCycleError(algorithm="BellmanFord", start="A")

        assert error.category is GraphErrorCategory.NEGATIVE_CYCLE
        assert "negative" in error.message
        assert error.recovery_hint
        assert error.details == {"start": "A"}
        assert not isinstance(error, ValueError)

    def test_str_includes_code_and_algorithm(self):
        """String form shows code, message and algorithm."""
        text = str(InvalidArgumentError("wrong type", algorithm="Prim"))

        assert text.startswith("[GRAPH_002] wrong type")
        assert "Prim" in text

    def test_details_not_shared(self):
        """The details dict passed in is not modified."""
        details = {"graph": "g1"}
        error = GraphError("boom", details=details, extra=1)

        assert error.details == {"graph": "g1", "extra": 1}
        assert details == {"graph": "g1"}


class TestErrorSerialization:
    """Tests for to_dict / create_error_from_dict."""

    def test_to_dict(self):
        """to_dict exposes every field."""
        data = InvalidArgumentError("directed graph", algorithm="Prim").to_dict()

        assert data["code"] == "GRAPH_002"
        assert data["category"] == "graph_argument"
        assert data["message"] == "directed graph"
        assert data["algorithm"] == "Prim"
        assert data["details"]["reason"] == "directed graph"

    @pytest.mark.parametrize("error", [
        NullInputError("end", algorithm="Dijkstra"),
        InvalidArgumentError("foreign vertex", algorithm="BellmanFord"),
        NegativeCycleError(algorithm="Johnson"),
    ])
    def test_round_trip_keeps_type(self, error):
        """create_error_from_dict rebuilds the same error type."""
        rebuilt = create_error_from_dict(error.to_dict())

        assert type(rebuilt) is type(error)
        assert rebuilt.message == error.message
        assert rebuilt.algorithm == error.algorithm
        assert rebuilt.details == error.details

    def test_unknown_code(self):
        """Unknown codes fall back to GraphError."""
        rebuilt = create_error_from_dict({"code": "X_999", "message": "odd"})

        assert type(rebuilt) is GraphError
        assert rebuilt.message == "odd"
