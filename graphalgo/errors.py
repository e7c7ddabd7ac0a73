"""
graphalgo/errors.py - Graph error taxonomy

Structured error types raised by the graph model and algorithms.

Every error carries a stable code, a category for programmatic handling,
a human-readable message, a recovery hint and a details dictionary.
Errors are always raised synchronously from the algorithm entry point
that detected them; no partial result accompanies an error.
"""

from __future__ import annotations
from typing import Any, Dict, Optional
from enum import Enum
import logging

__all__ = [
    'GraphErrorCategory',
    'GraphError',
    'NullInputError',
    'InvalidArgumentError',
    'NegativeCycleError',
    'GRAPH_ERROR_CODES',
    'create_error_from_dict',
]

logger = logging.getLogger(__name__)


# =============================================================================
# ERROR CATEGORIES
# =============================================================================

class GraphErrorCategory(Enum):
    """Categories of graph errors."""
    INPUT = "graph_input"              # Graph or vertex argument missing
    ARGUMENT = "graph_argument"        # Wrong directedness or precondition violated
    NEGATIVE_CYCLE = "negative_cycle"  # Negative-weight cycle makes result undefined


# =============================================================================
# BASE ERROR CLASS
# =============================================================================

class GraphError(Exception):
    """
    Base class for graph errors.

    Provides structured error information with:
    - Error code for programmatic handling
    - Human-readable message
    - Recovery hint for the caller
    - Detailed context for debugging
    """

    code: str = "GRAPH_000"
    category: GraphErrorCategory = GraphErrorCategory.ARGUMENT

    def __init__(
        self,
        message: str = "",
        *,
        algorithm: str = "",
        recovery_hint: str = "",
        details: Optional[Dict[str, Any]] = None,
        **kwargs,
    ):
        self.message = message or self.__class__.__doc__ or "Graph error"
        self.algorithm = algorithm
        self.recovery_hint = recovery_hint
        self.details = dict(details or {})
        self.details.update(kwargs)

        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary."""
        return {
            "code": self.code,
            "category": self.category.value,
            "message": self.message,
            "algorithm": self.algorithm,
            "recovery_hint": self.recovery_hint,
            "details": self.details,
        }

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.algorithm:
            parts.append(f"(algorithm: {self.algorithm})")
        if self.recovery_hint:
            parts.append(f"Hint: {self.recovery_hint}")
        return " ".join(parts)


# =============================================================================
# SPECIFIC ERROR TYPES
# =============================================================================

class NullInputError(GraphError, ValueError):
    """Required graph or vertex argument is missing."""

    code = "GRAPH_001"
    category = GraphErrorCategory.INPUT

    def __init__(
        self,
        argument: str,
        **kwargs,
    ):
        super().__init__(
            message=f"{argument} must not be None",
            recovery_hint=f"Pass a non-None {argument}.",
            argument=argument,
            **kwargs,
        )


class InvalidArgumentError(GraphError, ValueError):
    """Argument violates an algorithm precondition."""

    code = "GRAPH_002"
    category = GraphErrorCategory.ARGUMENT

    def __init__(
        self,
        reason: str,
        **kwargs,
    ):
        super().__init__(
            message=reason,
            reason=reason,
            **kwargs,
        )


class NegativeCycleError(GraphError):
    """Graph contains a negative-weight cycle reachable from the source."""

    code = "GRAPH_003"
    category = GraphErrorCategory.NEGATIVE_CYCLE

    def __init__(
        self,
        message: str = "Graph contains a negative weight cycle",
        **kwargs,
    ):
        kwargs.setdefault(
            "recovery_hint",
            "Shortest paths are undefined; remove or reweight the cycle.",
        )
        super().__init__(message=message, **kwargs)


# =============================================================================
# ERROR REGISTRY
# =============================================================================

GRAPH_ERROR_CODES: Dict[str, type] = {
    GraphError.code: GraphError,
    NullInputError.code: NullInputError,
    InvalidArgumentError.code: InvalidArgumentError,
    NegativeCycleError.code: NegativeCycleError,
}


def create_error_from_dict(data: Dict[str, Any]) -> GraphError:
    """
    Create appropriate error type from dictionary.

    Inverse of GraphError.to_dict(); unknown codes yield a plain GraphError.
    """
    code = data.get("code", GraphError.code)
    message = data.get("message", "Unknown error")
    algorithm = data.get("algorithm", "")
    details = dict(data.get("details", {}))

    error_cls = GRAPH_ERROR_CODES.get(code, GraphError)

    if error_cls is NullInputError:
        details.pop("argument", None)
        return NullInputError(
            data.get("details", {}).get("argument", "argument"),
            algorithm=algorithm,
            details=details,
        )
    elif error_cls is InvalidArgumentError:
        details.pop("reason", None)
        return InvalidArgumentError(
            data.get("details", {}).get("reason", message),
            algorithm=algorithm,
            details=details,
        )
    elif error_cls is NegativeCycleError:
        return NegativeCycleError(
            message,
            algorithm=algorithm,
            details=details,
        )

    if code not in GRAPH_ERROR_CODES:
        logger.debug(f"Unknown graph error code {code}, using GraphError")

    return GraphError(
        message=message,
        algorithm=algorithm,
        recovery_hint=data.get("recovery_hint", ""),
        details=details,
    )
