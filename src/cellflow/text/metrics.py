"""Font metrics and text sink contracts used by the layout engine."""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterator

from cellflow.types import Margins, RGBColor

if TYPE_CHECKING:
    from cellflow.config import TextProperties


class FontMetrics(ABC):
    """
    Mutable font state plus a width oracle for the active font.

    Widths, margins and coordinates are in user units; font sizes are in points.
    """

    @abstractmethod
    def set_font(self, family: str, style: str, size: float) -> None:
        """Make family/style/size the active font."""

    @abstractmethod
    def get_font(self) -> tuple[str, str, float]:
        """Return the active (family, style, size)."""

    @abstractmethod
    def get_color(self) -> RGBColor:
        """Return the active text color."""

    @abstractmethod
    def set_color(self, color: RGBColor) -> None:
        """Make color the active text color."""

    @abstractmethod
    def get_scale_factor(self) -> float:
        """Return points per user unit (always > 0)."""

    @abstractmethod
    def get_string_width(self, text: str) -> float:
        """Return the width of text in the active font, in user units."""

    @abstractmethod
    def unicode_translator_from_descriptor(self, descriptor: str) -> Callable[[str], str]:
        """Return a function translating text into the code page named by descriptor."""

    @abstractmethod
    def get_margins(self) -> Margins:
        """Return the page margins (left, top, right, bottom)."""


class TextSink(ABC):
    """Destination that paints one line of text at absolute coordinates."""

    @abstractmethod
    def draw_text(self, x: float, y: float, text: str) -> None:
        """Draw text with its baseline starting at (x, y)."""


@dataclass(frozen=True)
class FontSnapshot:
    """Active font as seen by one layout call."""

    family: str
    style: str
    size: float  # points
    scale_factor: float  # points per user unit

    @property
    def line_height(self) -> float:
        """Height of one line in user units."""
        return self.size / self.scale_factor


def snapshot(font: FontMetrics) -> FontSnapshot:
    """Capture the active font of a provider."""
    family, style, size = font.get_font()
    return FontSnapshot(family, style, size, font.get_scale_factor())


@contextmanager
def font_state(font: FontMetrics, props: "TextProperties") -> Iterator[FontSnapshot]:
    """
    Apply the font and color of props for the duration of a block.

    Only the color is restored on exit; family, style and size stay as set so
    later measurements keep using the font the text was laid out in.

    Yields:
        Snapshot of the font that was applied.
    """
    font.set_font(props.family, props.style, props.size)
    original_color = font.get_color()
    font.set_color(props.color)
    try:
        yield snapshot(font)
    finally:
        font.set_color(original_color)
