"""Single-byte code page translation for the standard PDF fonts."""

import codecs
import logging
from typing import Callable, Collection

from cellflow.config import LEGACY_ENCODED_FAMILIES
from cellflow.text.metrics import FontMetrics

logger = logging.getLogger(__name__)

DEFAULT_CODE_PAGE = "cp1252"
REPLACEMENT_CHAR = "."


def unicode_translator(descriptor: str = "") -> Callable[[str], str]:
    """
    Build a function that maps text onto a single-byte code page.

    ASCII passes through untouched. Other code points are kept when the code
    page can represent them and replaced with "." otherwise, so the result can
    be measured and drawn by a font that only knows that code page.

    Args:
        descriptor: Code page name ("cp1250", "iso-8859-2", ...). Empty means cp1252.

    Returns:
        Translation function.

    Raises:
        LookupError: If the code page is unknown.
    """
    code_page = codecs.lookup(descriptor or DEFAULT_CODE_PAGE).name
    cache: dict[str, str] = {}

    def representable(char: str) -> str:
        if char not in cache:
            try:
                char.encode(code_page)
                cache[char] = char
            except UnicodeEncodeError:
                cache[char] = REPLACEMENT_CHAR
        return cache[char]

    def translate(text: str) -> str:
        if text.isascii():
            return text
        return "".join(char if char < "\x80" else representable(char) for char in text)

    return translate


def needs_translation(
    family: str, legacy_families: Collection[str] = LEGACY_ENCODED_FAMILIES
) -> bool:
    """Whether text set in family has to be translated before measurement."""
    return family.strip().lower() in legacy_families


def normalize(
    font: FontMetrics,
    text: str,
    family: str,
    legacy_families: Collection[str] = LEGACY_ENCODED_FAMILIES,
) -> str:
    """
    Translate text for families that use a legacy single-byte encoding.

    Must run before any width measurement: widths are only meaningful in the
    encoding the font actually draws with.

    Args:
        font: Provider supplying the translator for the default descriptor.
        text: Raw text.
        family: Font family the text will be set in.
        legacy_families: Lowercase families that need translation.

    Returns:
        Translated text, or text unchanged for other families.
    """
    if not needs_translation(family, legacy_families):
        return text

    translated = font.unicode_translator_from_descriptor("")(text)
    if translated != text:
        logger.debug(f"Translated text for legacy-encoded family '{family}'")
    return translated
