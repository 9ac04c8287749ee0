"""Placement of wrapped lines inside a cell."""

import logging
from dataclasses import dataclass
from typing import Collection

from cellflow.config import LEGACY_ENCODED_FAMILIES, TextProperties
from cellflow.text.breaker import break_lines
from cellflow.text.encoding import normalize
from cellflow.text.metrics import FontMetrics, TextSink, font_state

logger = logging.getLogger(__name__)

# Divisor applied to the free width of a line for each alignment
_ALIGN_DIVISORS = {
    "center": 2.0,
    "right": 1.0,
}


@dataclass(frozen=True)
class Cell:
    """
    Target rectangle for a block of text.

    Attributes:
        x: Left edge, relative to the left margin (user units)
        y: Top edge, relative to the top margin (user units, growing downwards)
        width: Available width (user units, must be > 0)
    """
    x: float
    y: float
    width: float


@dataclass(frozen=True)
class DrawInstruction:
    """One line of text at absolute page coordinates."""
    x: float
    y: float
    text: str
    width: float  # measured width of text


def horizontal_offset(align: str, col_width: float, line_width: float) -> float:
    """
    Offset of a line from the left edge of its cell.

    Left: 0. Center: half the free width. Right: all of the free width.
    """
    divisor = _ALIGN_DIVISORS.get(align)
    if divisor is None:
        return 0.0
    return (col_width - line_width) / divisor


def _place_lines(
    font: FontMetrics, text: str, cell: Cell, props: TextProperties,
    line_height: float, legacy_families: Collection[str],
) -> tuple[list[DrawInstruction], float]:
    left, top, _, _ = font.get_margins()

    # Reserve the first line's ascent
    anchor_y = cell.y + line_height

    # Widths are only valid for translated text
    unicode_text = normalize(font, text, props.family, legacy_families)
    lines = break_lines(font, unicode_text, cell.width)

    instructions: list[DrawInstruction] = []
    accumulated_padding = 0.0
    last_y = cell.y

    for index, line in enumerate(lines):
        line_width = font.get_string_width(line)
        last_y = anchor_y + index * line_height + accumulated_padding
        dx = horizontal_offset(props.align, cell.width, line_width)
        instructions.append(DrawInstruction(
            x=cell.x + dx + left,
            y=last_y + top,
            text=line,
            width=line_width,
        ))
        accumulated_padding += props.vertical_padding

    logger.debug(
        f"Placed {len(instructions)} line(s) in cell x={cell.x} y={cell.y} "
        f"width={cell.width} ({props.align})"
    )
    return instructions, last_y


def place(
    font: FontMetrics,
    text: str,
    cell: Cell,
    props: TextProperties,
    legacy_families: Collection[str] = LEGACY_ENCODED_FAMILIES,
) -> tuple[list[DrawInstruction], float]:
    """
    Lay text out inside a cell without drawing it.

    Lines are stacked top-down: the first baseline sits one line height below
    cell.y, and each following line is one line height plus the accumulated
    vertical padding further down. Instruction coordinates include the page
    margins.

    Args:
        font: Provider measuring widths. Its font is set from props and its
            color is restored before returning.
        text: Raw text; explicit line breaks are kept.
        cell: Target rectangle.
        props: Text formatting.
        legacy_families: Families translated before measurement.

    Returns:
        Draw instructions in order, and the baseline y of the last line
        (without the top margin) for stacking further content. cell.y when
        there is nothing to draw.
    """
    with font_state(font, props) as active:
        return _place_lines(font, text, cell, props, active.line_height, legacy_families)


def add_text(
    font: FontMetrics,
    sink: TextSink,
    text: str,
    cell: Cell,
    props: TextProperties,
    legacy_families: Collection[str] = LEGACY_ENCODED_FAMILIES,
) -> float:
    """
    Lay text out inside a cell and draw every line.

    Lines are drawn while the font and color from props are active; the
    previous color is restored afterwards.

    Returns:
        Baseline y of the last line drawn (see place).
    """
    with font_state(font, props) as active:
        instructions, last_y = _place_lines(
            font, text, cell, props, active.line_height, legacy_families
        )
        for instruction in instructions:
            sink.draw_text(instruction.x, instruction.y, instruction.text)

    return last_y
