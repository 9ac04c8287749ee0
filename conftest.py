"""Shared fixtures: a Courier document in points and a fixed-width fake font."""

import io
from typing import Callable

import pytest

from cellflow.config import TextProperties
from cellflow.render.pdf import PDFDocument
from cellflow.text.encoding import unicode_translator
from cellflow.text.metrics import FontMetrics, TextSink


class FixedWidthFont(FontMetrics, TextSink):
    """Every code point is char_width wide; records each draw with the active color."""

    def __init__(self, char_width: float = 10.0, scale: float = 1.0, margins=(0.0, 0.0, 0.0, 0.0)):
        self.char_width = char_width
        self.scale = scale
        self.margins = margins
        self.font = ("arial", "normal", 10.0)
        self.color = (0.0, 0.0, 0.0)
        self.drawn: list[tuple[float, float, str, tuple[float, float, float]]] = []

    def set_font(self, family, style, size):
        self.font = (family, style, size)

    def get_font(self):
        return self.font

    def get_color(self):
        return self.color

    def set_color(self, color):
        self.color = color

    def get_scale_factor(self):
        return self.scale

    def get_string_width(self, text):
        return len(text) * self.char_width

    def unicode_translator_from_descriptor(self, descriptor) -> Callable[[str], str]:
        return unicode_translator(descriptor)

    def get_margins(self):
        return self.margins

    def draw_text(self, x, y, text):
        self.drawn.append((x, y, text, self.color))


@pytest.fixture
def doc() -> PDFDocument:
    """A4 document in points, no margins, Courier 10pt (every glyph is 6pt wide)."""
    document = PDFDocument(io.BytesIO(), page_size="a4", unit="pt", margins=(0.0, 0.0, 0.0, 0.0))
    document.set_font("courier", "normal", 10.0)
    return document


@pytest.fixture
def courier() -> TextProperties:
    return TextProperties(family="courier", size=10.0)


@pytest.fixture
def fake_font() -> FixedWidthFont:
    return FixedWidthFont()


@pytest.fixture
def font_factory() -> Callable[..., FixedWidthFont]:
    """Build a FixedWidthFont with custom width, scale or margins."""
    return FixedWidthFont
