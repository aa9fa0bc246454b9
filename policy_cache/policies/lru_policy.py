"""
LRU (Least Recently Used) eviction policy.

Uses OrderedDict for O(1) access tracking and victim selection.
"""

from collections import OrderedDict
from typing import List, OrderedDict as OrderedDictType

from ..exceptions import NoCandidates
from ..interfaces.eviction import EvictionPolicy
from ..models.cache import PolicyKind


class LRUPolicy(EvictionPolicy):
    """
    Least Recently Used (LRU) implementation using an OrderedDict.

    The first key in the dict is the least recently used, the last key
    the most recently used. Two keys can never share a position, so ties
    cannot occur; keys never accessed since insertion keep their
    insertion order.
    """

    kind = PolicyKind.LRU

    def __init__(self):
        # Keys only; order dictates recency.
        self._order: OrderedDictType[str, None] = OrderedDict()

    def select_victim(self) -> str:
        if not self._order:
            raise NoCandidates("LRU policy is not tracking any keys")
        # First item is the least recently used
        return next(iter(self._order))

    def on_access(self, key: str) -> None:
        if key in self._order:
            self._order.move_to_end(key)

    def on_insert(self, key: str) -> None:
        self._order[key] = None
        self._order.move_to_end(key)

    def on_evict(self, key: str) -> None:
        self._order.pop(key, None)

    def order(self) -> List[str]:
        return list(self._order)

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, key: object) -> bool:
        return key in self._order
