"""
Configuration management for the JSONL validator.
Uses Pydantic Settings for environment variable support and validation.
"""

import os
from pathlib import Path
from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from config.constants import DEFAULT_FILE_PATTERN

# Repository root: config/ sits directly beneath it
REPO_ROOT = Path(__file__).resolve().parent.parent


class ValidationSettings(BaseSettings):
    """Settings for locating and validating JSONL files."""

    model_config = SettingsConfigDict(
        env_prefix="JSONL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    data_dir: Path = Field(
        default=REPO_ROOT / "data",
        description="Directory searched for bare filenames and in zero-argument mode"
    )
    file_pattern: str = Field(
        default=DEFAULT_FILE_PATTERN,
        description="Glob pattern for files discovered in data_dir"
    )

    # Parallelism
    workers: int = Field(
        default=1,
        description="Number of worker processes across files (0 = auto)"
    )

    # Output
    color: bool = Field(default=True, description="Colorize status markers")

    @property
    def effective_workers(self) -> int:
        """Return the effective number of workers."""
        if self.workers > 0:
            return self.workers
        return os.cpu_count() or 1

    @field_validator("data_dir", mode="before")
    @classmethod
    def ensure_path(cls, v):
        """Convert string to Path if needed."""
        return Path(v) if isinstance(v, str) else v


class Settings(BaseSettings):
    """Main configuration container."""

    model_config = SettingsConfigDict(
        env_prefix="JSONL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    validation: ValidationSettings = Field(default_factory=ValidationSettings)

    # Logging
    log_level: str = Field(default="WARNING", description="Logging level")
    log_file: Optional[Path] = Field(default=None, description="Log file path")


# Global settings instance
settings = Settings()
