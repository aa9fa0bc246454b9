"""
LFU (Least Frequently Used) eviction policy.

Keeps an access count per key plus sequence numbers used to break ties
between keys with the same count.
"""

import itertools
from typing import Dict, List, Literal, Tuple

from pydantic import BaseModel

from ..exceptions import NoCandidates
from ..interfaces.eviction import EvictionPolicy
from ..models.cache import PolicyKind


TieBreak = Literal["insertion", "recency"]


class FrequencyEntry(BaseModel):
    """Usage metadata for one tracked key"""
    count: int = 1
    inserted_seq: int
    accessed_seq: int


class LFUPolicy(EvictionPolicy):
    """
    Least Frequently Used (LFU) implementation.

    An insert counts as the first access, so a new key starts at count 1.
    The victim is the key with the lowest count. Keys with equal counts
    are ordered by ``tie_break``:

    - ``"insertion"`` (default): least recently inserted goes first
    - ``"recency"``: least recently accessed goes first

    Sequence numbers come from a per-policy monotonic counter, so the
    ordering is deterministic for a given sequence of calls.
    """

    kind = PolicyKind.LFU

    def __init__(self, tie_break: TieBreak = "insertion"):
        if tie_break not in ("insertion", "recency"):
            raise ValueError(f"Invalid tie_break: {tie_break}. Must be 'insertion' or 'recency'.")
        self.tie_break = tie_break
        self._entries: Dict[str, FrequencyEntry] = {}
        self._clock = itertools.count()

    def select_victim(self) -> str:
        if not self._entries:
            raise NoCandidates("LFU policy is not tracking any keys")
        return min(self._entries, key=self._rank)

    def on_access(self, key: str) -> None:
        entry = self._entries.get(key)
        if entry is None:
            return
        entry.count += 1
        entry.accessed_seq = next(self._clock)

    def on_insert(self, key: str) -> None:
        seq = next(self._clock)
        self._entries[key] = FrequencyEntry(inserted_seq=seq, accessed_seq=seq)

    def on_evict(self, key: str) -> None:
        self._entries.pop(key, None)

    def order(self) -> List[str]:
        return sorted(self._entries, key=self._rank)

    def frequency(self, key: str) -> int:
        """
        Get the access count for a key.

        Args:
            key: Cache key

        Returns:
            Access count, or 0 if the key is not tracked
        """
        entry = self._entries.get(key)
        return entry.count if entry else 0

    def _rank(self, key: str) -> Tuple[int, int]:
        """Sort key for victim selection: lowest count, then oldest sequence."""
        entry = self._entries[key]
        if self.tie_break == "recency":
            return entry.count, entry.accessed_seq
        return entry.count, entry.inserted_seq

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __repr__(self) -> str:
        return f"LFUPolicy(tracked={len(self)}, tie_break={self.tie_break!r})"
