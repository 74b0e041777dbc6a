"""Process settings using Pydantic Settings v2."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from sector_analyzer.sectors import REFERENCE_RATE_KEY


class Settings(BaseSettings):
    """Scoring settings with environment variable support.

    Variables use the ``SECTOR_ANALYZER_`` prefix, e.g.
    ``SECTOR_ANALYZER_WEIGHTS='{"momentum": 0.4, "valuation": 0.6}'``.
    """

    model_config = SettingsConfigDict(
        env_prefix="SECTOR_ANALYZER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Macro series the rate-sensitivity signal correlates against
    reference_rate_key: str = Field(default=REFERENCE_RATE_KEY)

    # Signal weights; unset means library defaults
    weights: dict[str, float] | None = Field(default=None)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings read once from the environment."""
    return Settings()
