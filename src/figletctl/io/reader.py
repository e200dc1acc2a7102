"""Font reader for loading bundled FIGlet fonts.

This module provides the FontReader class, the only place that talks to
pyfiglet. It loads a font once and answers questions about its glyph set.
"""

from pyfiglet import Figlet

from figletctl.config import FontConfig
from figletctl.exceptions import FontLoadError

# Row break, handled by the engine rather than by a glyph.
LINE_BREAK = "\n"


class FontReader:
    """Loads a FIGlet font and exposes its glyph set.

    Example:
        with FontReader(FontConfig()) as reader:
            print(reader.height)
            print(reader.render("HI"))
    """

    def __init__(self, config: FontConfig) -> None:
        """Initialize the font reader.

        Args:
            config: Font configuration (name, width, direction)
        """
        self._config = config
        self._figlet: Figlet | None = None
        self._code_points: frozenset[int] = frozenset()

    def load(self) -> None:
        """Load the font.

        Raises:
            FontLoadError: If the font does not exist or cannot be parsed
        """
        try:
            figlet = Figlet(
                font=self._config.name,
                direction=self._config.direction.value,
                justify="left",
                width=self._config.width,
            )
            code_points = frozenset(figlet.Font.chars)
        except Exception as e:
            raise FontLoadError(self._config.name, str(e) or type(e).__name__) from e
        self._figlet = figlet
        self._code_points = code_points

    @property
    def is_loaded(self) -> bool:
        """Whether load() has completed."""
        return self._figlet is not None

    @property
    def name(self) -> str:
        """Return the font name."""
        return self._config.name

    @property
    def height(self) -> int:
        """Return the glyph height in rows.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return self._loaded().Font.height

    @property
    def code_points(self) -> frozenset[int]:
        """Return the code points the font has glyphs for.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        self._loaded()
        return self._code_points

    def supports(self, char: str) -> bool:
        """Check whether a single character can be rendered.

        Args:
            char: A single character

        Returns:
            True if the font has a glyph for it (newlines always count)
        """
        return char == LINE_BREAK or ord(char) in self.code_points

    def missing_characters(self, text: str) -> list[str]:
        """Find characters in text the font cannot render.

        Args:
            text: Text to check

        Returns:
            Distinct unsupported characters in order of first appearance
        """
        missing: list[str] = []
        for char in text:
            if char not in missing and not self.supports(char):
                missing.append(char)
        return missing

    def render(self, text: str) -> str:
        """Render text with the loaded font.

        Args:
            text: Text to render

        Returns:
            Raw rendered text, rows separated by newlines

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return str(self._loaded().renderText(text))

    def close(self) -> None:
        """Release the loaded font."""
        self._figlet = None
        self._code_points = frozenset()

    def _loaded(self) -> Figlet:
        if self._figlet is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._figlet

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
