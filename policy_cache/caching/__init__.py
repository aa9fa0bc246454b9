"""
Cache store implementations.

The store delegates replacement decisions to an EvictionPolicy, so the
same cache can run LRU, LFU or FIFO and switch between them at runtime.
"""

from .policy_cache import PolicyCache

__all__ = [
    "PolicyCache",
]
