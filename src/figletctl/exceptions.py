"""Exception hierarchy for figletctl."""


class FigletCtlError(Exception):
    """Base exception for all figletctl errors."""

    pass


class FontError(FigletCtlError):
    """Errors related to loading a FIGlet font."""

    pass


class FontLoadError(FontError):
    """Error loading a FIGlet font."""

    def __init__(self, font_name: str, reason: str) -> None:
        self.font_name = font_name
        self.reason = reason
        super().__init__(f"Failed to load font '{font_name}': {reason}")


class RenderError(FigletCtlError):
    """Error rendering a message into a figure."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Rendering failed: {reason}")


class EmptyMessageError(RenderError):
    """The message contains nothing to render."""

    def __init__(self) -> None:
        super().__init__("message is empty")


class UnsupportedCharacterError(RenderError):
    """The message contains characters the font has no glyph for."""

    def __init__(self, font_name: str, characters: list[str]) -> None:
        self.font_name = font_name
        self.characters = characters
        listed = ", ".join(repr(c) for c in characters)
        super().__init__(f"font '{font_name}' has no glyph for {listed}")
