from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service settings, read from GACHA_* environment variables or .env."""

    store_path: Path = Path("gacha.json")

    # Only used when no snapshot exists yet; a stored catalog keeps its own.
    window_capacity: int = Field(35, gt=0)
    pity_denominator: int = Field(100, gt=0)

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="GACHA_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
