"""Application settings."""

from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tinyts.core.levels import Level


class CheckerSettings(BaseSettings):
    """Type checker settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="TINYTS_",
        case_sensitive=False,
        extra="ignore",
    )

    level: Level = Field(default=Level.OBJ)
    recursion_limit: int = Field(default=10000, ge=1000)
    show_term: bool = Field(default=True)


def load_settings(**overrides: Any) -> CheckerSettings:
    """Load settings, letting explicit non-None overrides win over the environment."""
    values = {key: value for key, value in overrides.items() if value is not None}
    return CheckerSettings(**values)
