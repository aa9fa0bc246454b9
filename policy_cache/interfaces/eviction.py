"""
Eviction policy interface - unified contract for all replacement strategies.
"""

import threading
import weakref
from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.cache import PolicyKind


_binding_lock = threading.Lock()


class EvictionPolicy(ABC):
    """
    Unified eviction policy interface following Strategy Pattern.

    A policy tracks usage metadata for the keys a cache holds and picks
    the next key to remove. It never sees cached values. All policies
    (LRU, LFU, FIFO) implement this interface, making them interchangeable
    on a live cache.

    Policies are not thread-safe on their own; the owning cache serializes
    every call under its lock.
    """

    kind: PolicyKind
    _owner: Optional[weakref.ref] = None

    @abstractmethod
    def select_victim(self) -> str:
        """
        Choose the key to evict next without removing it.

        Returns:
            Key of the victim

        Raises:
            NoCandidates: If no keys are tracked
        """
        pass

    @abstractmethod
    def on_access(self, key: str) -> None:
        """
        Record a read or overwrite of a tracked key.

        Args:
            key: Cache key
        """
        pass

    @abstractmethod
    def on_insert(self, key: str) -> None:
        """
        Start tracking a newly inserted key.

        Args:
            key: Cache key
        """
        pass

    @abstractmethod
    def on_evict(self, key: str) -> None:
        """
        Drop metadata for a removed key.

        Args:
            key: Cache key
        """
        pass

    @abstractmethod
    def order(self) -> List[str]:
        """
        Get tracked keys in eviction order (next victim first).

        Returns:
            List of keys
        """
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    @abstractmethod
    def __contains__(self, key: object) -> bool:
        pass

    def bind(self, owner: object) -> bool:
        """
        Claim this policy for a cache.

        A policy holds metadata for exactly one cache, so it can be bound
        to at most one live owner at a time.

        Args:
            owner: The cache installing this policy

        Returns:
            True if claimed, False if another live cache already holds it
        """
        with _binding_lock:
            current = self._owner() if self._owner is not None else None
            if current is not None and current is not owner:
                return False
            self._owner = weakref.ref(owner)
            return True

    def release(self, owner: object) -> None:
        """Give up the claim taken by ``bind``, if ``owner`` holds it."""
        with _binding_lock:
            if self._owner is not None and self._owner() is owner:
                self._owner = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(tracked={len(self)})"
