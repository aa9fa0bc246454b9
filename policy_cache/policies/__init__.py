"""
Eviction policy implementations following Strategy Pattern.

All policies implement the EvictionPolicy interface, making them
interchangeable on a live cache.
"""

from typing import Any, Dict, Type, Union

from ..exceptions import InvalidConfiguration
from ..interfaces.eviction import EvictionPolicy
from ..models.cache import PolicyKind
from .fifo_policy import FIFOPolicy
from .lfu_policy import LFUPolicy
from .lru_policy import LRUPolicy


POLICY_TYPES: Dict[PolicyKind, Type[EvictionPolicy]] = {
    PolicyKind.LRU: LRUPolicy,
    PolicyKind.LFU: LFUPolicy,
    PolicyKind.FIFO: FIFOPolicy,
}


def resolve_kind(kind: Union[str, PolicyKind]) -> PolicyKind:
    """
    Normalize a policy name such as ``"LRU"`` or ``" lfu "`` to a PolicyKind.

    Raises:
        InvalidConfiguration: If the name is not a known policy
    """
    if isinstance(kind, PolicyKind):
        return kind
    try:
        return PolicyKind(str(kind).lower().strip())
    except ValueError:
        valid = ", ".join(k.value for k in PolicyKind)
        raise InvalidConfiguration(f"Unknown eviction policy: {kind!r}. Must be one of: {valid}") from None


def create_policy(kind: Union[str, PolicyKind], **options: Any) -> EvictionPolicy:
    """
    Build a fresh policy instance for the given kind.

    Args:
        kind: Policy name or PolicyKind
        **options: Policy-specific options (e.g. ``tie_break`` for LFU)

    Returns:
        New EvictionPolicy with no tracked keys

    Raises:
        InvalidConfiguration: If the kind or its options are invalid
    """
    policy_type = POLICY_TYPES[resolve_kind(kind)]
    try:
        return policy_type(**options)
    except (TypeError, ValueError) as e:
        raise InvalidConfiguration(f"Invalid options for {policy_type.__name__}: {e}") from e


__all__ = [
    "LRUPolicy",
    "LFUPolicy",
    "FIFOPolicy",
    "POLICY_TYPES",
    "resolve_kind",
    "create_policy",
]
