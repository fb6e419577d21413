"""Pydantic configuration models for the mood tracker."""

import os
from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator

DATA_FILE_ENV = "MOOD_DATA_FILE"


class PathsConfig(BaseModel):
    """File paths configuration."""

    data_file: Path = Path("~/.mood/mood-data.json")

    @model_validator(mode="after")
    def expand_paths(self):
        """Expand ~ in all paths."""
        self.data_file = self.data_file.expanduser()
        return self


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    json_mode: bool = Field(default=False, alias="json")

    model_config = {"populate_by_name": True}

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        v_upper = v.upper()
        if v_upper not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {VALID_LOG_LEVELS}")
        return v_upper


class InsightsConfig(BaseModel):
    """Insight rule tuning."""

    max_insights: int = Field(default=3, ge=1)
    recent_window: int = Field(default=7, ge=1)


class ChartConfig(BaseModel):
    """Trend chart defaults."""

    days: int = Field(default=30, ge=1, le=365)


class MoodConfig(BaseModel):
    """Main configuration model."""

    paths: PathsConfig = Field(default_factory=PathsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    insights: InsightsConfig = Field(default_factory=InsightsConfig)
    chart: ChartConfig = Field(default_factory=ChartConfig)

    @model_validator(mode="after")
    def apply_env_overrides(self):
        """MOOD_DATA_FILE overrides paths.data_file."""
        override = os.getenv(DATA_FILE_ENV)
        if override:
            self.paths.data_file = Path(override).expanduser()
        return self

    @classmethod
    def from_dict(cls, data: dict) -> "MoodConfig":
        """Create config from dict, dropping empty YAML sections."""
        cleaned = {k: v for k, v in data.items() if v is not None}
        return cls.model_validate(cleaned)
