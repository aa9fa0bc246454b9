"""
Tests for environment-driven settings.
"""

import pytest

from policy_cache.config import Settings, load_settings
from policy_cache.exceptions import InvalidConfiguration
from policy_cache.models import PolicyKind


def test_defaults(monkeypatch):
    for name in ["CACHE_DEFAULT_POLICY", "CACHE_MAX_CAPACITY", "CACHE_LFU_TIE_BREAK", "CACHE_LOG_LEVEL"]:
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.default_policy is PolicyKind.LRU
    assert settings.max_capacity == 2
    assert settings.lfu_tie_break == "insertion"
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CACHE_DEFAULT_POLICY", "lfu")
    monkeypatch.setenv("CACHE_MAX_CAPACITY", "64")
    monkeypatch.setenv("cache_lfu_tie_break", "recency")

    settings = Settings(_env_file=None)

    assert settings.default_policy is PolicyKind.LFU
    assert settings.max_capacity == 64
    assert settings.lfu_tie_break == "recency"


def test_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("CACHE_DEFAULT_POLICY=fifo\nCACHE_MAX_CAPACITY=7\n")

    settings = Settings(_env_file=str(env_file))

    assert settings.default_policy is PolicyKind.FIFO
    assert settings.max_capacity == 7


def test_names_are_normalized(monkeypatch):
    monkeypatch.setenv("CACHE_DEFAULT_POLICY", " LFU ")
    monkeypatch.setenv("CACHE_LFU_TIE_BREAK", "Recency")
    monkeypatch.setenv("CACHE_LOG_LEVEL", "debug")

    settings = load_settings(_env_file=None)

    assert settings.default_policy is PolicyKind.LFU
    assert settings.lfu_tie_break == "recency"
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("name,value", [
    ("CACHE_DEFAULT_POLICY", "random"),
    ("CACHE_MAX_CAPACITY", "lots"),
    ("CACHE_LFU_TIE_BREAK", "coin-flip"),
    ("CACHE_LOG_LEVEL", "verbose"),
])
def test_invalid_environment_raises_invalid_configuration(monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    with pytest.raises(InvalidConfiguration, match="Invalid cache settings"):
        load_settings(_env_file=None)
