"""
Pydantic models for configuration validation.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

from hypa.constants import DEFAULT_LOG_LEVEL, DEFAULT_TITLE

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class HypaConfigModel(BaseModel):
    """
    Main configuration model for the application.
    Validates input from a TOML config file.
    """
    model_config = ConfigDict(extra="forbid")

    # Document
    title: str = DEFAULT_TITLE
    stylesheet: Path | None = None

    # Logging
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Path | None = None

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level
