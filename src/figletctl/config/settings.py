"""Configuration settings for figletctl."""

import logging
import sys
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

DEFAULT_FONT = "standard"


class FontDirection(str, Enum):
    """Print direction passed to the FIGlet engine."""

    AUTO = "auto"
    LEFT_TO_RIGHT = "left-to-right"
    RIGHT_TO_LEFT = "right-to-left"


class FontConfig(BaseModel):
    """Configuration for the font and how a message is laid out."""

    name: str = Field(
        default=DEFAULT_FONT,
        min_length=1,
        description="Name of the bundled FIGlet font",
    )
    # Wide enough that a message is never wrapped onto a second row of glyphs.
    width: int = Field(
        default=sys.maxsize,
        ge=1,
        description="Maximum figure width in columns before wrapping",
    )
    direction: FontDirection = Field(
        default=FontDirection.AUTO,
        description="Print direction (auto uses the font's own default)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )

    @field_validator("log_level", "file_log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level


class FigletCtlSettings(BaseModel):
    """Main application settings."""

    font: FontConfig = Field(default_factory=FontConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> FigletCtlSettings:
    """Get default application settings."""
    return FigletCtlSettings()
