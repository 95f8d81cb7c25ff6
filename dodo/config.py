"""Configuration and settings for dodo."""

import os
from functools import lru_cache

from pydantic import BaseModel, Field, field_validator


class Settings(BaseModel):
    """Application settings loaded from environment variables."""

    # Remotes
    default_remote: str = Field(default_factory=lambda: os.getenv("DODO_DEFAULT_REMOTE", "origin"))

    # Commit identity overrides (empty = use git config)
    author_name: str = Field(default_factory=lambda: os.getenv("DODO_AUTHOR_NAME", ""))
    author_email: str = Field(default_factory=lambda: os.getenv("DODO_AUTHOR_EMAIL", ""))

    # Logging
    log_level: str = Field(default_factory=lambda: os.getenv("DODO_LOG_LEVEL", "WARNING"))

    model_config = {"extra": "ignore", "validate_default": True}

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def has_author_override(self) -> bool:
        """Whether both author fields come from the environment."""
        return bool(self.author_name and self.author_email)


@lru_cache
def get_settings() -> Settings:
    """
    Get the global settings instance (cached).

    Settings are loaded from environment variables:
    - DODO_DEFAULT_REMOTE: Remote used when none is given (origin)
    - DODO_AUTHOR_NAME / DODO_AUTHOR_EMAIL: Override the git commit identity
    - DODO_LOG_LEVEL: Log level when --verbose is not passed (WARNING)
    """
    return Settings()


def reload_settings() -> Settings:
    """Force reload settings (clears cache)."""
    get_settings.cache_clear()
    return get_settings()
