"""
graphalgo/integration/config.py - Graph analysis configuration

Configuration dataclass shared by the algorithms and the analysis service.
"""

from dataclasses import dataclass, fields
from typing import Dict, Any
import logging

__all__ = [
    'GraphConfig',
    'DEFAULT_CONFIG',
]

logger = logging.getLogger(__name__)


# =============================================================================
# GRAPH CONFIGURATION
# =============================================================================

@dataclass
class GraphConfig:
    """
    Configuration for the graph algorithms.

    Controls early-exit behaviour, negative-cycle policy, result
    contracts and the service's algorithm selection.
    """

    # =========================================================================
    # SINGLE-SOURCE SHORTEST PATH
    # =========================================================================

    # Stop Dijkstra as soon as the requested target is settled
    dijkstra_early_exit: bool = True

    # Stop Bellman-Ford relaxation once a full pass changes nothing
    bellman_ford_early_exit: bool = True

    # =========================================================================
    # ALL-PAIRS SHORTEST PATH
    # =========================================================================

    # Raise NegativeCycleError when Floyd-Warshall finds a negative diagonal.
    # False keeps the diagonal pinned at 0 and performs no check.
    floyd_warshall_detect_negative_cycles: bool = True

    # Map Johnson's paths back onto the caller's edges and report true costs.
    # False returns the reweighted working-copy paths and costs.
    johnson_restore_costs: bool = True

    # =========================================================================
    # STRUCTURAL
    # =========================================================================

    # Default output order of TopologicalSort (True: sinks first)
    topological_sinks_first: bool = False

    # =========================================================================
    # ALGORITHM SELECTION (service)
    # =========================================================================

    # Density at or above which all-pairs queries use Floyd-Warshall
    dense_graph_threshold: float = 0.5

    # Never use Floyd-Warshall above this many vertices
    max_dense_vertices: int = 2000

    def __post_init__(self):
        if not 0.0 <= self.dense_graph_threshold <= 1.0:
            raise ValueError(
                f"dense_graph_threshold must be within [0, 1], "
                f"got {self.dense_graph_threshold}"
            )
        if self.max_dense_vertices < 0:
            raise ValueError(
                f"max_dense_vertices must be non-negative, "
                f"got {self.max_dense_vertices}"
            )

    # =========================================================================
    # SERIALIZATION
    # =========================================================================

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            # Single-source
            'dijkstra_early_exit': self.dijkstra_early_exit,
            'bellman_ford_early_exit': self.bellman_ford_early_exit,

            # All-pairs
            'floyd_warshall_detect_negative_cycles': self.floyd_warshall_detect_negative_cycles,
            'johnson_restore_costs': self.johnson_restore_costs,

            # Structural
            'topological_sinks_first': self.topological_sinks_first,

            # Selection
            'dense_graph_threshold': self.dense_graph_threshold,
            'max_dense_vertices': self.max_dense_vertices,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GraphConfig":
        """Deserialize from dictionary."""
        # Filter to known fields
        known_fields = {f.name for f in fields(cls)}
        unknown = set(data) - known_fields
        if unknown:
            logger.debug(f"Ignoring unknown config keys: {sorted(unknown)}")

        filtered = {k: v for k, v in data.items() if k in known_fields}
        return cls(**filtered)


# =============================================================================
# DEFAULT CONFIGURATION
# =============================================================================

DEFAULT_CONFIG = GraphConfig()
