"""
Bounded key-value cache with a pluggable eviction policy.

The store owns the values and the capacity bound; victim selection is
delegated entirely to the active EvictionPolicy.
"""

import logging
import threading
from typing import Any, Dict, List, Optional, Union

from ..exceptions import EvictionImpossible, InvalidConfiguration, NoCandidates
from ..interfaces.eviction import EvictionPolicy
from ..models.cache import CacheStats, Lookup, PolicyKind, Value
from ..policies import create_policy

logger = logging.getLogger(__name__)


PolicySpec = Union[str, PolicyKind, EvictionPolicy]


class PolicyCache:
    """
    Fixed-capacity cache whose eviction strategy can be swapped at runtime.

    Features:
    - Exactly one eviction before an insert into a full cache
    - Reads and overwrites are reported to the policy as accesses
    - A single lock covers entries, stats and policy metadata, so the
      cache can be shared between threads
    """

    def __init__(self, policy: PolicySpec, max_capacity: int, **policy_options: Any):
        """
        Initialize the cache.

        Args:
            policy: Policy name ("lru", "lfu", "fifo"), PolicyKind, or an
                EvictionPolicy instance
            max_capacity: Maximum number of entries, must be positive
            **policy_options: Passed to the policy when built from a name

        Raises:
            InvalidConfiguration: If max_capacity is not a positive int, the
                policy cannot be built, or the policy instance already
                belongs to another cache
        """
        if isinstance(max_capacity, bool) or not isinstance(max_capacity, int) or max_capacity <= 0:
            raise InvalidConfiguration(f"max_capacity must be a positive integer, got {max_capacity!r}")

        self._max_capacity = max_capacity
        # Insertion-ordered; values only, usage metadata lives in the policy
        self._entries: Dict[str, Value] = {}
        self._lock = threading.RLock()
        self._stats = CacheStats(max_size=max_capacity)
        self._policy: EvictionPolicy = self._install(self._build_policy(policy, policy_options))

        logger.debug(f"Cache initialized: policy={self._policy.kind.value}, max_capacity={max_capacity}")

    @classmethod
    def from_settings(cls, settings) -> "PolicyCache":
        """Build a cache from a Settings object."""
        options = {}
        if settings.default_policy == PolicyKind.LFU:
            options["tie_break"] = settings.lfu_tie_break
        return cls(settings.default_policy, settings.max_capacity, **options)

    # --- Public API ---

    def get(self, key: str) -> Lookup:
        """
        Retrieve a value and record the access with the policy.

        Args:
            key: Cache key

        Returns:
            Lookup(value, True) on a hit, Lookup(None, False) on a miss
        """
        with self._lock:
            if key in self._entries:
                self._policy.on_access(key)
                self._stats.hits += 1
                return Lookup(self._entries[key], True)

            self._stats.misses += 1
            return Lookup(None, False)

    def put(self, key: str, value: Value) -> None:
        """
        Store a value, evicting one entry first if the cache is full.

        Overwriting an existing key counts as an access and never evicts.

        Args:
            key: Non-empty cache key
            value: str or bytes payload

        Raises:
            TypeError: If key is not a str or value is not str/bytes
            ValueError: If key is empty
        """
        self._validate(key, value)

        with self._lock:
            if key in self._entries:
                self._entries[key] = value
                self._policy.on_access(key)
                return

            if len(self._entries) >= self._max_capacity:
                victim = self._evict_locked()
                logger.debug(f"Evicted {victim!r} to make room for {key!r}")

            self._entries[key] = value
            self._policy.on_insert(key)
            self._stats.size = len(self._entries)

    def evict(self) -> str:
        """
        Remove the entry chosen by the active policy.

        Returns:
            The evicted key

        Raises:
            EvictionImpossible: If the cache is empty or the policy cannot
                name a stored key
        """
        with self._lock:
            return self._evict_locked()

    def set_policy(self, policy: PolicySpec, **policy_options: Any) -> None:
        """
        Replace the active eviction policy.

        Usage metadata is not carried over from the previous policy. The
        new policy starts tracking every stored key as a fresh insert, in
        the order the keys were first inserted.

        Args:
            policy: Policy name, PolicyKind, or EvictionPolicy instance
            **policy_options: Passed to the policy when built from a name

        Raises:
            InvalidConfiguration: If the policy cannot be built or the
                instance already belongs to another cache
        """
        new_policy = self._build_policy(policy, policy_options)
        with self._lock:
            old_policy = self._policy
            old_kind = old_policy.kind
            self._policy = self._install(new_policy)
            if old_policy is not new_policy:
                old_policy.release(self)
        logger.info(f"Eviction policy switched: {old_kind.value} -> {new_policy.kind.value}")

    def contains(self, key: str) -> bool:
        """
        Check if key is cached without counting it as an access.

        Args:
            key: Cache key

        Returns:
            True if key is in cache, False otherwise
        """
        with self._lock:
            return key in self._entries

    def keys(self) -> List[str]:
        """Get cached keys in first-insertion order."""
        with self._lock:
            return list(self._entries)

    def eviction_order(self) -> List[str]:
        """
        Get cached keys in the order the active policy would evict them.

        Useful for debugging and monitoring.
        """
        with self._lock:
            return self._policy.order()

    def get_stats(self) -> CacheStats:
        """
        Get a snapshot of cache statistics.

        Returns:
            CacheStats with hits, misses, evictions, size and hit_rate
        """
        with self._lock:
            self._stats.size = len(self._entries)
            return self._stats.model_copy()

    @property
    def capacity(self) -> int:
        """Current number of entries."""
        with self._lock:
            return len(self._entries)

    @property
    def max_capacity(self) -> int:
        return self._max_capacity

    @property
    def policy(self) -> EvictionPolicy:
        """
        The active policy.

        The returned object is live; calling its methods directly bypasses
        the cache lock.
        """
        with self._lock:
            return self._policy

    @property
    def policy_kind(self) -> PolicyKind:
        with self._lock:
            return self._policy.kind

    def __len__(self) -> int:
        return self.capacity

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __repr__(self) -> str:
        return (
            f"PolicyCache(policy={self._policy.kind.value!r}, "
            f"capacity={len(self._entries)}, max_capacity={self._max_capacity})"
        )

    # --- Internal helpers (call with the lock held) ---

    def _evict_locked(self) -> str:
        """Evict the policy's victim. Caller must hold the lock."""
        if not self._entries:
            logger.error("Eviction requested on an empty cache")
            raise EvictionImpossible("Cannot evict from an empty cache")

        try:
            victim = self._policy.select_victim()
        except NoCandidates as e:
            logger.error(f"Policy {self._policy!r} has no candidates with {len(self._entries)} entries stored")
            raise EvictionImpossible("Eviction policy returned no victim") from e

        if victim not in self._entries:
            logger.error(f"Policy {self._policy!r} selected unknown key {victim!r}")
            raise EvictionImpossible(f"Eviction policy selected a key that is not cached: {victim!r}")

        del self._entries[victim]
        self._policy.on_evict(victim)
        self._stats.evictions += 1
        self._stats.size = len(self._entries)
        return victim

    def _install(self, policy: EvictionPolicy) -> EvictionPolicy:
        """Align a policy's tracked keys with the stored keys."""
        for key in policy.order():
            if key not in self._entries:
                policy.on_evict(key)
        for key in self._entries:
            if key not in policy:
                policy.on_insert(key)
        self._stats.policy = policy.kind.value
        return policy

    def _build_policy(self, policy: PolicySpec, options: Dict[str, Any]) -> EvictionPolicy:
        """Build or accept a policy and bind it to this cache."""
        if isinstance(policy, EvictionPolicy):
            if options:
                raise InvalidConfiguration("Policy options cannot be combined with a policy instance")
        else:
            policy = create_policy(policy, **options)

        if not policy.bind(self):
            raise InvalidConfiguration(f"{policy!r} is already in use by another cache")
        return policy

    @staticmethod
    def _validate(key: str, value: Optional[Value]) -> None:
        if not isinstance(key, str):
            raise TypeError(f"key must be a str, got {type(key).__name__}")
        if not key:
            raise ValueError("key cannot be empty")
        if not isinstance(value, (str, bytes)):
            raise TypeError(f"value must be str or bytes, got {type(value).__name__}")
