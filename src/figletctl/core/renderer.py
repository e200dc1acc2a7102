"""Figure rendering.

The FigureRenderer turns a message into a Figure. The font is loaded once
and reused; glyph composition itself is done by pyfiglet. Rendering is
strict: a message is rejected as a whole if any character has no glyph,
rather than being rendered with gaps.
"""

import time

from figletctl.config import FigletCtlSettings
from figletctl.domain import Figure
from figletctl.exceptions import (
    EmptyMessageError,
    FigletCtlError,
    RenderError,
    UnsupportedCharacterError,
)
from figletctl.io import FontReader
from figletctl.utils import RenderLogger


class FigureRenderer:
    """Renders messages with a single, fixed font.

    Example:
        with FigureRenderer(FigletCtlSettings()) as renderer:
            figure = renderer.render("HI")
            print(figure)
    """

    def __init__(
        self,
        settings: FigletCtlSettings,
        render_logger: RenderLogger | None = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            settings: Application settings
            render_logger: Logger for render events (created if None)
        """
        self.settings = settings
        self._reader = FontReader(settings.font)
        self._render_logger = render_logger if render_logger is not None else RenderLogger()

    @property
    def reader(self) -> FontReader:
        """Font reader backing this renderer."""
        return self._reader

    @property
    def render_logger(self) -> RenderLogger:
        """Logger collecting render statistics."""
        return self._render_logger

    def load(self) -> None:
        """Load the font if it is not loaded yet.

        Raises:
            FontLoadError: If the font cannot be loaded
        """
        if self._reader.is_loaded:
            return
        self._reader.load()
        self._render_logger.log_font_loaded(
            font_name=self._reader.name,
            height=self._reader.height,
            glyph_count=len(self._reader.code_points),
        )

    def render(self, message: str) -> Figure:
        """Render a message into a figure.

        Args:
            message: Text to render

        Returns:
            The rendered figure

        Raises:
            FontLoadError: If the font cannot be loaded
            EmptyMessageError: If the message is empty
            UnsupportedCharacterError: If the font lacks a glyph for any character
            RenderError: If the rendering library fails
        """
        self.load()
        start = time.perf_counter()

        try:
            if not message:
                raise EmptyMessageError()

            missing = self._reader.missing_characters(message)
            if missing:
                raise UnsupportedCharacterError(self._reader.name, missing)

            try:
                text = self._reader.render(message)
            except Exception as e:
                raise RenderError(str(e) or type(e).__name__) from e
        except FigletCtlError as e:
            self._render_logger.log_render_failed(message, e)
            raise

        figure = Figure.from_text(message=message, font_name=self._reader.name, text=text)
        self._render_logger.log_render_complete(
            message=message,
            height=figure.height,
            width=figure.width,
            duration_ms=(time.perf_counter() - start) * 1000,
        )
        return figure

    def close(self) -> None:
        """Release the font."""
        self._reader.close()

    def __enter__(self) -> "FigureRenderer":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
