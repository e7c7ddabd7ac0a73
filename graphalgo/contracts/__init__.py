"""
graphalgo/contracts/__init__.py - Contract Exports

Protocols for the boundaries of the graph model.
"""

from .protocols import GraphStoreProtocol

__all__ = [
    'GraphStoreProtocol',
]
