"""Lightweight configuration for statcraft."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Minimal library settings."""

    model_config = SettingsConfigDict(
        env_prefix="STATCRAFT_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    rules_version: str = Field(default="1.0", description="Ruleset version the catalog follows")
    synchronized_holders: bool = Field(
        default=True,
        description="Whether create_holder returns a lock-guarded holder",
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
