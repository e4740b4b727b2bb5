"""Application settings using pydantic-settings."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration for kv-facade."""

    model_config = SettingsConfigDict(env_prefix="KV_", env_file=".env")

    # --- Redis ---
    redis_url: str = Field(
        default="redis://localhost:6379/0",
        description="Redis connection URL (redis-py default address)",
    )

    # --- Heartbeat ---
    heartbeat_enabled: bool = Field(
        default=True,
        description="Ping Redis in the background to track connection state",
    )
    heartbeat_interval_seconds: float = Field(
        default=1.0,
        gt=0,
        description="Delay between heartbeat pings",
    )
    heartbeat_timeout_seconds: float = Field(
        default=1.0,
        gt=0,
        description="Upper bound on a single heartbeat ping",
    )

    # --- Logging ---
    log_level: str = Field(
        default="INFO",
        description="Root log level",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Log renderer: 'console' for humans, 'json' for shipping",
    )
