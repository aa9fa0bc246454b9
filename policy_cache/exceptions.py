"""
Error taxonomy for the policy cache.

Cache misses are not errors; ``PolicyCache.get`` reports them through the
``found`` flag of its result instead.
"""


class CacheError(Exception):
    """Base class for all cache errors"""


class InvalidConfiguration(CacheError, ValueError):
    """Raised when a cache cannot be built from the given settings."""


class EvictionImpossible(CacheError, RuntimeError):
    """
    Raised when an eviction is requested but the store holds no entries.

    ``put`` only evicts when the store is full, so this signals a defect in
    the caller or in a policy implementation.
    """


class NoCandidates(CacheError, LookupError):
    """Raised by a policy asked for a victim while tracking no keys."""
