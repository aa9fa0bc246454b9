"""
Unit tests for the eviction policies.

Policies are exercised directly, without a cache, to pin down victim
selection and tie-breaking.
"""

import pytest

from policy_cache.exceptions import InvalidConfiguration, NoCandidates
from policy_cache.interfaces import EvictionPolicy
from policy_cache.models import PolicyKind
from policy_cache.policies import FIFOPolicy, LFUPolicy, LRUPolicy, create_policy, resolve_kind


@pytest.mark.parametrize("policy_type", [LRUPolicy, LFUPolicy, FIFOPolicy])
def test_empty_policy_has_no_candidates(policy_type):
    policy = policy_type()
    with pytest.raises(NoCandidates):
        policy.select_victim()
    assert len(policy) == 0
    assert policy.order() == []


@pytest.mark.parametrize("policy_type", [LRUPolicy, LFUPolicy, FIFOPolicy])
def test_select_victim_does_not_remove(policy_type):
    policy = policy_type()
    policy.on_insert("a")
    policy.on_insert("b")

    assert policy.select_victim() == policy.select_victim()
    assert len(policy) == 2


@pytest.mark.parametrize("policy_type", [LRUPolicy, LFUPolicy, FIFOPolicy])
def test_on_evict_drops_metadata(policy_type):
    policy = policy_type()
    policy.on_insert("a")
    policy.on_insert("b")

    policy.on_evict("a")

    assert "a" not in policy
    assert "b" in policy
    assert policy.select_victim() == "b"

    # Unknown keys are ignored
    policy.on_evict("missing")
    policy.on_access("missing")
    assert len(policy) == 1


class TestLRUPolicy:
    """LRU victim is the least recently inserted or accessed key."""

    def test_insertion_order_without_access(self):
        policy = LRUPolicy()
        for key in ["a", "b", "c"]:
            policy.on_insert(key)
        assert policy.select_victim() == "a"
        assert policy.order() == ["a", "b", "c"]

    def test_access_refreshes_recency(self):
        policy = LRUPolicy()
        for key in ["a", "b", "c"]:
            policy.on_insert(key)

        policy.on_access("a")
        policy.on_access("b")

        assert policy.select_victim() == "c"
        assert policy.order() == ["c", "a", "b"]


class TestLFUPolicy:
    """LFU victim is the lowest count; ties go to the earliest insert."""

    def test_insert_counts_as_first_access(self):
        policy = LFUPolicy()
        policy.on_insert("a")
        assert policy.frequency("a") == 1
        assert policy.frequency("missing") == 0

    def test_lowest_count_is_victim(self):
        policy = LFUPolicy()
        policy.on_insert("a")
        policy.on_insert("b")
        for _ in range(3):
            policy.on_access("a")
        policy.on_access("b")

        assert policy.frequency("a") == 4
        assert policy.frequency("b") == 2
        assert policy.select_victim() == "b"

    def test_ties_broken_by_insertion(self):
        policy = LFUPolicy()
        for key in ["a", "b", "c"]:
            policy.on_insert(key)
        # Equal counts, c accessed least recently but inserted last
        policy.on_access("b")
        policy.on_access("a")
        policy.on_access("c")

        assert policy.select_victim() == "a"
        assert policy.order() == ["a", "b", "c"]

    def test_ties_broken_by_recency_when_configured(self):
        policy = LFUPolicy(tie_break="recency")
        for key in ["a", "b", "c"]:
            policy.on_insert(key)
        policy.on_access("b")
        policy.on_access("a")
        policy.on_access("c")

        assert policy.select_victim() == "b"
        assert policy.order() == ["b", "a", "c"]

    def test_reinserted_key_starts_over(self):
        policy = LFUPolicy()
        policy.on_insert("a")
        policy.on_access("a")
        policy.on_evict("a")
        policy.on_insert("a")
        assert policy.frequency("a") == 1

    def test_invalid_tie_break(self):
        with pytest.raises(ValueError):
            LFUPolicy(tie_break="random")


class TestFIFOPolicy:
    """FIFO ignores accesses entirely."""

    def test_access_does_not_reorder(self):
        policy = FIFOPolicy()
        policy.on_insert("a")
        policy.on_insert("b")
        policy.on_access("a")
        policy.on_access("a")

        assert policy.select_victim() == "a"


class TestCreatePolicy:
    """Policy factory by kind name."""

    @pytest.mark.parametrize("name,expected", [
        ("lru", LRUPolicy),
        ("LFU", LFUPolicy),
        (" fifo ", FIFOPolicy),
        (PolicyKind.LRU, LRUPolicy),
    ])
    def test_known_kinds(self, name, expected):
        policy = create_policy(name)
        assert isinstance(policy, expected)
        assert isinstance(policy, EvictionPolicy)
        assert len(policy) == 0

    def test_each_call_returns_a_new_instance(self):
        assert create_policy("lru") is not create_policy("lru")

    def test_unknown_kind(self):
        with pytest.raises(InvalidConfiguration, match="Unknown eviction policy"):
            create_policy("mru")

    def test_options_are_forwarded(self):
        policy = create_policy("lfu", tie_break="recency")
        assert policy.tie_break == "recency"

    def test_invalid_options(self):
        with pytest.raises(InvalidConfiguration):
            create_policy("lru", tie_break="recency")
        with pytest.raises(InvalidConfiguration):
            create_policy("lfu", tie_break="random")

    def test_resolve_kind(self):
        assert resolve_kind("Lfu") is PolicyKind.LFU
        assert resolve_kind(PolicyKind.FIFO) is PolicyKind.FIFO
