"""Build configuration management.

Loads settings from environment with validation.
"""

from functools import lru_cache
from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Lexicon build settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="NORDUM_",
        case_sensitive=False
    )

    # Paths
    source_dir: Path = Path("data/dictionary/sources")
    build_dir: Path = Path("build/assets/data")

    # Assembly
    alternative_frequency_factor: float = Field(default=0.7, gt=0.0, le=1.0)
    cognate_score_floor: float = Field(default=0.5, ge=0.0, le=1.0)
    default_frequency: int = Field(default=1000, ge=0)
    irregular_verbs: bool = True

    # Development
    debug: bool = False
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
