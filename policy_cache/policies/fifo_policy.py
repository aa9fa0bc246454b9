from collections import OrderedDict
from typing import List, OrderedDict as OrderedDictType

from ..exceptions import NoCandidates
from ..interfaces.eviction import EvictionPolicy
from ..models.cache import PolicyKind


class FIFOPolicy(EvictionPolicy):
    """First In, First Out: evicts the oldest insert, ignoring reads."""

    kind = PolicyKind.FIFO

    def __init__(self):
        self._queue: OrderedDictType[str, None] = OrderedDict()

    def select_victim(self) -> str:
        if not self._queue:
            raise NoCandidates("FIFO policy is not tracking any keys")
        return next(iter(self._queue))

    def on_access(self, key: str) -> None:
        # Reads and overwrites do not change arrival order
        pass

    def on_insert(self, key: str) -> None:
        self._queue.pop(key, None)
        self._queue[key] = None

    def on_evict(self, key: str) -> None:
        self._queue.pop(key, None)

    def order(self) -> List[str]:
        return list(self._queue)

    def __len__(self) -> int:
        return len(self._queue)

    def __contains__(self, key: object) -> bool:
        return key in self._queue
