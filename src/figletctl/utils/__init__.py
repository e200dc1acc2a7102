"""Utility functions for figletctl.

This module provides logging setup and render statistics tracking.
"""

from figletctl.utils.logging import (
    RenderLogger,
    RenderStats,
    configure_logging,
)

__all__ = [
    "RenderLogger",
    "RenderStats",
    "configure_logging",
]
