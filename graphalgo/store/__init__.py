"""
graphalgo/store/__init__.py - Storage Engine Exports

Physical vertex/edge storage used by the graph model.
"""

from .networkx_store import NetworkXGraphStore

__all__ = [
    'NetworkXGraphStore',
]
