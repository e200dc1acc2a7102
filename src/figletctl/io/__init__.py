"""Font and output I/O layer for figletctl.

This module wraps pyfiglet behind a small interface and writes rendered
figures to a text stream.

Key classes:
- FontReader: Load a bundled FIGlet font and query its glyph set
- FigureWriter: Write rendered figures to standard output
"""

from figletctl.io.reader import FontReader
from figletctl.io.writer import FigureWriter

__all__ = [
    "FigureWriter",
    "FontReader",
]
