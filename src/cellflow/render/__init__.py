"""Rendering backends."""

from cellflow.render.pdf import PDFDocument

__all__ = [
    "PDFDocument",
]
