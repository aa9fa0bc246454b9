"""
Value objects shared by the cache store, its policies and the CLI.
"""

from enum import Enum
from typing import NamedTuple, Optional, Union

from pydantic import BaseModel


Value = Union[str, bytes]


class PolicyKind(str, Enum):
    """Eviction strategies a cache can be built with"""
    LRU = "lru"
    LFU = "lfu"
    FIFO = "fifo"


class Lookup(NamedTuple):
    """Result of a cache read. Unpacks as ``(value, found)``."""
    value: Optional[Value]
    found: bool


class CacheStats(BaseModel):
    """Statistics about cache performance"""
    hits: int = 0
    misses: int = 0
    evictions: int = 0
    size: int = 0
    max_size: int = 0
    policy: str = ""

    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate"""
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0
