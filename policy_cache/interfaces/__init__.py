"""
Interfaces for the cache layer.

Concrete eviction policies implement these, keeping the cache store
independent of any particular replacement algorithm.
"""

from .eviction import EvictionPolicy

__all__ = [
    "EvictionPolicy",
]
