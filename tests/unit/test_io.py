"""Unit tests for the font and output I/O layer.

Tests for FontReader and FigureWriter.
"""

import io
import sys

import pytest

from figletctl.config import FontConfig
from figletctl.domain import Figure
from figletctl.exceptions import FontLoadError
from figletctl.io.reader import FontReader
from figletctl.io.writer import FigureWriter


class TestFontReader:
    """Tests for FontReader class."""

    def test_init(self):
        """Test FontReader initialization."""
        reader = FontReader(FontConfig())
        assert reader.name == "standard"
        assert reader._figlet is None
        assert not reader.is_loaded

    def test_height_before_load(self):
        """Test accessing height before loading raises RuntimeError."""
        reader = FontReader(FontConfig())
        with pytest.raises(RuntimeError, match="Font not loaded"):
            _ = reader.height

    def test_code_points_before_load(self):
        """Test accessing code points before loading raises RuntimeError."""
        reader = FontReader(FontConfig())
        with pytest.raises(RuntimeError, match="Font not loaded"):
            _ = reader.code_points

    def test_render_before_load(self):
        """Test rendering before loading raises RuntimeError."""
        reader = FontReader(FontConfig())
        with pytest.raises(RuntimeError, match="Font not loaded"):
            reader.render("HI")

    def test_load_standard_font(self):
        """Test the standard font loads with its usual height."""
        with FontReader(FontConfig()) as reader:
            assert reader.is_loaded
            assert reader.height == 6

    def test_load_unknown_font(self):
        """Test loading an unknown font raises FontLoadError."""
        reader = FontReader(FontConfig(name="no-such-font-anywhere"))
        with pytest.raises(FontLoadError) as exc_info:
            reader.load()
        assert exc_info.value.font_name == "no-such-font-anywhere"
        assert exc_info.value.__cause__ is not None

    def test_close(self):
        """Test close releases the font."""
        reader = FontReader(FontConfig())
        reader.load()
        reader.close()
        assert not reader.is_loaded

    def test_code_points_cover_printable_ascii(self):
        """Test every printable ASCII character has a glyph."""
        with FontReader(FontConfig()) as reader:
            assert set(range(32, 127)) <= reader.code_points

    def test_supports(self):
        """Test single character support checks."""
        with FontReader(FontConfig()) as reader:
            assert reader.supports("A")
            assert reader.supports(" ")
            assert reader.supports("\n")
            assert not reader.supports("☃")

    def test_missing_characters(self):
        """Test unsupported characters are reported once, in order."""
        with FontReader(FontConfig()) as reader:
            missing = reader.missing_characters("a☃b\t☃c")
        assert missing == ["☃", "\t"]

    def test_missing_characters_before_load(self):
        """Test checking characters before loading raises RuntimeError."""
        reader = FontReader(FontConfig())
        with pytest.raises(RuntimeError, match="Font not loaded"):
            reader.missing_characters("HI")

    def test_missing_characters_match_supports(self):
        """Test a character is reported missing exactly when unsupported."""
        text = "Az 9\n\té☃"
        with FontReader(FontConfig()) as reader:
            missing = reader.missing_characters(text)
            assert missing == [c for c in text if not reader.supports(c)]

    def test_code_points_cleared_on_close(self):
        """Test a closed reader no longer reports a glyph set."""
        reader = FontReader(FontConfig())
        reader.load()
        reader.close()
        assert reader._code_points == frozenset()
        with pytest.raises(RuntimeError, match="Font not loaded"):
            reader.supports("A")

    def test_missing_characters_none(self):
        """Test a fully supported message has nothing missing."""
        with FontReader(FontConfig()) as reader:
            assert reader.missing_characters("Hello, World!") == []

    def test_render_returns_text(self):
        """Test raw rendering output."""
        with FontReader(FontConfig()) as reader:
            text = reader.render("HI")
        assert isinstance(text, str)
        assert "|" in text


class TestFigureWriter:
    """Tests for FigureWriter class."""

    def test_write_adds_trailing_newline(self):
        """Test a figure is written followed by one newline."""
        stream = io.StringIO()
        writer = FigureWriter(stream)

        writer.write(Figure("x", "standard", ("ab", "cd")))

        assert stream.getvalue() == "ab\ncd\n"

    def test_default_stream_is_current_stdout(self, monkeypatch):
        """Test the default stream is resolved at write time."""
        writer = FigureWriter()
        stream = io.StringIO()
        monkeypatch.setattr(sys, "stdout", stream)

        writer.write(Figure("x", "standard", ("ab",)))

        assert writer.stream is stream
        assert stream.getvalue() == "ab\n"
