"""Configuration management for figletctl.

This module provides configuration management using Pydantic models.
Settings are built from CLI arguments or defaults; there are no
configuration files or environment variables.

Key classes:
- FontConfig: Font and render width settings
- LoggingConfig: Logging settings
- FigletCtlSettings: Main application settings
"""

from figletctl.config.settings import (
    DEFAULT_FONT,
    FigletCtlSettings,
    FontConfig,
    FontDirection,
    LoggingConfig,
    get_default_settings,
)

__all__ = [
    "DEFAULT_FONT",
    "FigletCtlSettings",
    "FontConfig",
    "FontDirection",
    "LoggingConfig",
    "get_default_settings",
]
