"""Figure writer for printing rendered figures."""

import sys
from typing import TextIO

from figletctl.domain import Figure


class FigureWriter:
    """Writes figures to a text stream, one figure per call.

    The stream defaults to whatever ``sys.stdout`` is at write time, so
    output follows any redirection made after the writer was created.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        """Return the stream figures are written to."""
        return self._stream if self._stream is not None else sys.stdout

    def write(self, figure: Figure) -> None:
        """Write a figure followed by a newline and flush.

        Args:
            figure: Figure to write
        """
        stream = self.stream
        stream.write(f"{figure}\n")
        stream.flush()
