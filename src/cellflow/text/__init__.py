"""Text flow: normalization, line breaking, counting and placement."""

from cellflow.text.breaker import break_lines
from cellflow.text.counter import count_lines, text_height
from cellflow.text.encoding import normalize, unicode_translator
from cellflow.text.metrics import FontMetrics, FontSnapshot, TextSink, font_state
from cellflow.text.placement import Cell, DrawInstruction, add_text, place

__all__ = [
    "Cell",
    "DrawInstruction",
    "FontMetrics",
    "FontSnapshot",
    "TextSink",
    "add_text",
    "break_lines",
    "count_lines",
    "font_state",
    "normalize",
    "place",
    "text_height",
    "unicode_translator",
]
