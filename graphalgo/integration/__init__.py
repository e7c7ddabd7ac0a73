"""
graphalgo/integration/__init__.py - Integration Exports

Configuration shared across the algorithms and the analysis service.
"""

from .config import (
    GraphConfig,
    DEFAULT_CONFIG,
)

__all__ = [
    'GraphConfig',
    'DEFAULT_CONFIG',
]
