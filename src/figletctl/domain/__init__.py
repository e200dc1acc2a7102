"""Domain models for figletctl.

Key classes:
- Figure: A message rendered as rows of FIGlet text
"""

from figletctl.domain.figure import Figure

__all__: list[str] = [
    "Figure",
]
