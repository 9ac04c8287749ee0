"""Greedy line breaking against measured string widths."""

import logging

from cellflow.text.metrics import FontMetrics

logger = logging.getLogger(__name__)


def _split_word(
    font: FontMetrics, word: str, col_width: float, lines: list[str]
) -> tuple[str, float]:
    """
    Split a word that is too wide for the column, code point by code point.

    Completed pieces are appended to lines. An empty piece always takes the next
    code point, so a single code point wider than the column ends up alone on
    its own line instead of looping forever.

    Returns:
        The unfinished last piece and its width.
    """
    piece = ""
    piece_width = 0.0

    for char in word:
        char_width = font.get_string_width(char)
        if piece and piece_width + char_width >= col_width:
            lines.append(piece)
            piece, piece_width = char, char_width
        else:
            piece += char
            piece_width += char_width

    return piece, piece_width


def _wrap_segment(
    font: FontMetrics, segment: str, col_width: float, space_width: float
) -> list[str]:
    """Pack the words of one forced segment into lines narrower than col_width."""
    lines: list[str] = []
    current_line = ""
    current_width = 0.0

    for word in segment.split():
        word_width = font.get_string_width(word)

        if word_width >= col_width:
            if current_line:
                lines.append(current_line)
            current_line, current_width = _split_word(font, word, col_width, lines)
            continue

        if not current_line:
            current_line, current_width = word, word_width
        elif current_width + space_width + word_width < col_width:
            current_line += " " + word
            current_width += space_width + word_width
        else:
            lines.append(current_line)
            current_line, current_width = word, word_width

    if current_line:
        lines.append(current_line)

    return lines


def break_lines(font: FontMetrics, text: str, col_width: float) -> list[str]:
    """
    Break text into lines that fit inside a column.

    Explicit line breaks are always honoured, and a segment that already fits is
    kept verbatim. Wider segments are wrapped greedily at whitespace; a word
    wider than the column is split between code points. Every line is strictly
    narrower than col_width except a line holding one code point that is wider
    than the column on its own.

    Args:
        font: Provider measuring widths in the active font.
        text: Text already normalized for the active font.
        col_width: Available width in user units (must be > 0).

    Returns:
        Lines in reading order. Empty text gives no lines.
    """
    space_width = font.get_string_width(" ")
    lines: list[str] = []

    for segment in text.splitlines():
        if font.get_string_width(segment) < col_width:
            # Segment fits as is
            lines.append(segment)
            continue

        wrapped = _wrap_segment(font, segment, col_width, space_width)
        logger.debug(f"Wrapped {len(segment)}-char segment into {len(wrapped)} line(s)")
        lines.extend(wrapped)

    return lines
