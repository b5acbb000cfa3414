"""Application settings using pydantic-settings."""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CamelCardsSettings(BaseSettings):
    """Camel-cards configuration.

    Loaded from environment variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Input location
    input_dir: Path = Field(
        default=Path("."),
        alias="AOC_2023_07_PATH",
        description="Directory containing the puzzle input",
    )
    input_filename: str = Field(default="input.txt", alias="CAMEL_CARDS_INPUT_FILE")

    # Ranking variant
    joker_wild: bool = Field(
        default=False,
        alias="CAMEL_CARDS_JOKER_WILD",
        description="Treat J as a wild joker",
    )

    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept standard logging level names only."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def input_path(self) -> Path:
        """Full path to the input file."""
        return self.input_dir / self.input_filename


@lru_cache
def get_settings() -> CamelCardsSettings:
    """Get cached settings instance."""
    return CamelCardsSettings()
