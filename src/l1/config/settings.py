"""Application settings."""

from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from l1.core.types import INT64_MAX


class L1Settings(BaseSettings):
    """Settings for the l1 command line tool."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="L1_",
        case_sensitive=False,
        extra="ignore",
    )

    log_filter: str = Field(default="info")
    demo_counter: int = Field(default=100, ge=0, le=INT64_MAX)
    demo_cross_check: bool = Field(default=True)
    trace: bool = Field(default=False)


def load_settings(**overrides: Any) -> L1Settings:
    """Load settings from the environment, ignoring overrides that are None."""
    return L1Settings(**{key: value for key, value in overrides.items() if value is not None})
