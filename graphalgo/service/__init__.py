"""
graphalgo/service - Analysis Service Layer

Provides the GraphAnalysisService façade that selects an algorithm for a
graph and reports the result with timing.
"""

from .analysis_service import (
    GraphAnalysisService,
    AnalysisResult,
)

__all__ = [
    'GraphAnalysisService',
    'AnalysisResult',
]
