"""
Bounded in-process key-value cache with swappable eviction policies.
"""

from .caching import PolicyCache
from .exceptions import CacheError, InvalidConfiguration, EvictionImpossible, NoCandidates
from .interfaces import EvictionPolicy
from .models import PolicyKind, Lookup, CacheStats
from .policies import LRUPolicy, LFUPolicy, FIFOPolicy, create_policy

__all__ = [
    "PolicyCache",
    "CacheError",
    "InvalidConfiguration",
    "EvictionImpossible",
    "NoCandidates",
    "EvictionPolicy",
    "PolicyKind",
    "Lookup",
    "CacheStats",
    "LRUPolicy",
    "LFUPolicy",
    "FIFOPolicy",
    "create_policy",
]
