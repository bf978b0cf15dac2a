"""Configuration settings for the Training Zones package."""

from enum import Enum
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


# __file__ = src/training_zones/config.py
# .parent.parent.parent = project root
PROJECT_ROOT = Path(__file__).parent.parent.parent


class UnitSystem(str, Enum):
    """Unit system used when displaying paces."""
    METRIC = "metric"
    IMPERIAL = "imperial"


class Settings(BaseSettings):
    """Settings loaded from environment variables (prefix TRAINING_ZONES_)."""

    # Display
    units: UnitSystem = UnitSystem.METRIC

    # Logging
    log_level: str = "INFO"

    # Input gathering windows
    effort_lookback_weeks: int = Field(default=26, gt=0)
    max_hr_lookback_days: int = Field(default=365, gt=0)
    gather_timeout_sec: float = Field(default=10.0, gt=0)

    class Config:
        env_prefix = "TRAINING_ZONES_"
        env_file = str(PROJECT_ROOT / ".env")
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
