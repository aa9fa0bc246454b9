from typing import Any, Literal

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import InvalidConfiguration
from .models.cache import PolicyKind


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Cache configuration"""

    # App Settings
    app_name: str = "Policy Cache"
    app_version: str = "1.0.0"

    # Cache Settings
    default_policy: PolicyKind = PolicyKind.LRU
    max_capacity: int = 2
    lfu_tie_break: Literal["insertion", "recency"] = "insertion"

    # Logging
    log_level: LogLevel = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="CACHE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("default_policy", "lfu_tie_break", mode="before")
    @classmethod
    def normalize_name(cls, v: Any) -> Any:
        """Accept names like 'LFU' or ' lru '"""
        if isinstance(v, str) and not isinstance(v, PolicyKind):
            return v.lower().strip()
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.upper().strip()
        return v


def load_settings(**overrides: Any) -> Settings:
    """
    Read settings from the environment and ``.env``.

    Args:
        **overrides: Values that take precedence over the environment

    Returns:
        Validated Settings

    Raises:
        InvalidConfiguration: If any setting fails validation
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        raise InvalidConfiguration(f"Invalid cache settings: {e}") from e
