"""Text flow into fixed-width cells for PDF documents."""

__version__ = "0.1.0"

# High-level Python API
from cellflow.config import Config, DocumentConfig, TextProperties, load_config
from cellflow.render.pdf import PDFDocument
from cellflow.text import (
    Cell,
    DrawInstruction,
    FontMetrics,
    TextSink,
    add_text,
    break_lines,
    count_lines,
    normalize,
    place,
    text_height,
)

__all__ = [
    "Cell",
    "Config",
    "DocumentConfig",
    "DrawInstruction",
    "FontMetrics",
    "PDFDocument",
    "TextProperties",
    "TextSink",
    "add_text",
    "break_lines",
    "count_lines",
    "load_config",
    "normalize",
    "place",
    "text_height",
]
