"""PDF document backed by a ReportLab canvas."""

import logging
from pathlib import Path
from typing import BinaryIO, Callable

from reportlab.lib.colors import Color
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfgen import canvas

from cellflow.config import DocumentConfig
from cellflow.fonts import resolve_font
from cellflow.text.encoding import unicode_translator
from cellflow.text.metrics import FontMetrics, TextSink
from cellflow.types import Margins, RGBColor
from cellflow.utils.dimensions import get_page_size, inches_to_points, scale_factor

logger = logging.getLogger(__name__)


class PDFDocument(FontMetrics, TextSink):
    """
    Font state, width oracle and text sink on top of a ReportLab canvas.

    Coordinates are in user units measured from the top-left corner of the
    page, the way the layout engine stacks lines. They are converted to
    ReportLab's bottom-left point space only when drawing.
    """

    def __init__(
        self,
        output: Path | str | BinaryIO,
        page_size: str = "a4",
        unit: str = "mm",
        margins: Margins = (10.0, 10.0, 10.0, 10.0),
    ) -> None:
        """
        Initialize PDF document.

        Args:
            output: Output PDF path or binary file object.
            page_size: Page size name (e.g., "letter", "a4", "a5").
            unit: User unit for coordinates and widths ("pt", "mm", "cm", "in").
            margins: Page margins (left, top, right, bottom) in user units.

        Raises:
            ValueError: If the unit is unknown.
        """
        self.output = output
        self.scale_factor = scale_factor(unit)
        self.margins = margins

        ps = get_page_size(page_size)
        self.page_width = inches_to_points(ps.width)
        self.page_height = inches_to_points(ps.height)

        target = str(output) if isinstance(output, Path) else output
        self.canvas = canvas.Canvas(target, pagesize=(self.page_width, self.page_height))

        self._family = "arial"
        self._style = "normal"
        self._size = 10.0
        self._font_name = resolve_font(self._family, self._style)
        self._color: RGBColor = (0.0, 0.0, 0.0)

    @classmethod
    def from_config(cls, output: Path | str | BinaryIO, config: DocumentConfig) -> "PDFDocument":
        """Create a document from the [document] section of the configuration."""
        return cls(
            output,
            page_size=config.page_size,
            unit=config.unit,
            margins=(
                config.margin_left,
                config.margin_top,
                config.margin_right,
                config.margin_bottom,
            ),
        )

    # ------------------------------------------------------------------------
    # Font state
    # ------------------------------------------------------------------------

    def set_font(self, family: str, style: str, size: float) -> None:
        self._family = family
        self._style = style
        self._size = size
        self._font_name = resolve_font(family, style)

    def get_font(self) -> tuple[str, str, float]:
        return self._family, self._style, self._size

    @property
    def font_name(self) -> str:
        """ReportLab name of the active font (e.g., "Helvetica-Bold")."""
        return self._font_name

    def get_color(self) -> RGBColor:
        return self._color

    def set_color(self, color: RGBColor) -> None:
        self._color = color

    def get_scale_factor(self) -> float:
        return self.scale_factor

    def get_margins(self) -> Margins:
        return self.margins

    # ------------------------------------------------------------------------
    # Measurement
    # ------------------------------------------------------------------------

    def get_string_width(self, text: str) -> float:
        """Width of text in the active font, in user units."""
        return pdfmetrics.stringWidth(text, self._font_name, self._size) / self.scale_factor

    def unicode_translator_from_descriptor(self, descriptor: str) -> Callable[[str], str]:
        return unicode_translator(descriptor)

    # ------------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------------

    def draw_text(self, x: float, y: float, text: str) -> None:
        """
        Draw one line with its baseline at (x, y).

        Args:
            x: Distance from the left page edge, in user units.
            y: Distance from the top page edge, in user units.
            text: Text already translated for the active font.
        """
        self.canvas.setFont(self._font_name, self._size)
        self.canvas.setFillColor(Color(*self._color))
        self.canvas.drawString(
            x * self.scale_factor,
            self.page_height - y * self.scale_factor,
            text,
        )

    def show_page(self) -> None:
        """Close the current page and start a new one."""
        self.canvas.showPage()

    def save(self) -> None:
        """Write the PDF to its output."""
        self.canvas.save()
        logger.info(f"PDF saved to: {self.output}")
