"""Core rendering service for figletctl.

Key classes:
- FigureRenderer: Validates a message against the font and renders it
"""

from figletctl.core.renderer import FigureRenderer

__all__ = [
    "FigureRenderer",
]
