"""Cheap line-count estimate for layout sizing."""

import logging
from typing import Collection

from cellflow.config import LEGACY_ENCODED_FAMILIES, TextProperties
from cellflow.text.breaker import break_lines
from cellflow.text.encoding import normalize
from cellflow.text.metrics import FontMetrics, snapshot

logger = logging.getLogger(__name__)


def count_lines(
    font: FontMetrics,
    text: str,
    props: TextProperties,
    col_width: float,
    legacy_families: Collection[str] = LEGACY_ENCODED_FAMILIES,
) -> int:
    """
    Count the lines text will occupy in a column of col_width.

    Returns 1 without breaking the text when it already fits, when props allow
    it to extrapolate, or when it is a single word. A lone word wider than the
    column is therefore counted as one line even though it overflows.

    Args:
        font: Provider measuring widths. Its font is set from props; color is untouched.
        text: Raw text.
        props: Text formatting.
        col_width: Available width in user units (must be > 0).
        legacy_families: Families translated before measurement.

    Returns:
        Number of lines, at least 1.
    """
    font.set_font(props.family, props.style, props.size)
    translated = normalize(font, text, props.family, legacy_families)

    if (
        font.get_string_width(translated) < col_width
        or props.extrapolate
        or len(translated.split()) <= 1
    ):
        return 1

    count = len(break_lines(font, translated, col_width))
    logger.debug(f"Counted {count} line(s) at width {col_width}")
    return count


def text_height(
    font: FontMetrics,
    text: str,
    props: TextProperties,
    col_width: float,
    legacy_families: Collection[str] = LEGACY_ENCODED_FAMILIES,
) -> float:
    """
    Height a block of text occupies once laid out in a column.

    Formula: lines × line_height + (lines - 1) × vertical_padding

    Returns:
        Height in user units.
    """
    count = count_lines(font, text, props, col_width, legacy_families)
    return count * snapshot(font).line_height + (count - 1) * props.vertical_padding
