"""Engine settings with environment variable support.

Uses pydantic-settings for typed configuration validation.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class EngineSettings(BaseSettings):
    """Engine configuration loaded from environment variables."""

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(default=False, description="Render logs as JSON")
    log_file: str | None = Field(default=None, description="Rotating log file path")

    # Feature flags
    debug_mode: bool = Field(default=False, description="Log at DEBUG level")

    # Defaults for estimates
    default_yield_threshold: float = Field(
        default=5.50, ge=0, description="Viability threshold % used when the caller gives none"
    )
    default_tax_rate: float = Field(
        default=0.08, ge=0, le=1, description="Transfer tax rate for unresolved regions"
    )

    # Export
    export_dir: str = Field(default="results", description="Directory for exported estimates")

    model_config = {
        "env_prefix": "PROFITABILITY_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> EngineSettings:
    """Get cached engine settings."""
    return EngineSettings()
