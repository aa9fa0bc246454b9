from .cache import PolicyKind, Lookup, CacheStats, Value

__all__ = [
    "PolicyKind",
    "Lookup",
    "CacheStats",
    "Value",
]
