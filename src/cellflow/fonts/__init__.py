"""Font registration and family/style resolution."""

import logging
from pathlib import Path

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

logger = logging.getLogger(__name__)

FONTS_DIR = Path(__file__).parent

# Standard PDF fonts: family -> style -> PostScript name
_BUILTIN_FAMILIES: dict[str, dict[str, str]] = {
    "helvetica": {
        "normal": "Helvetica",
        "bold": "Helvetica-Bold",
        "italic": "Helvetica-Oblique",
        "bold_italic": "Helvetica-BoldOblique",
    },
    "times": {
        "normal": "Times-Roman",
        "bold": "Times-Bold",
        "italic": "Times-Italic",
        "bold_italic": "Times-BoldItalic",
    },
    "courier": {
        "normal": "Courier",
        "bold": "Courier-Bold",
        "italic": "Courier-Oblique",
        "bold_italic": "Courier-BoldOblique",
    },
    "symbol": dict.fromkeys(("normal", "bold", "italic", "bold_italic"), "Symbol"),
    "zapfdingbats": dict.fromkeys(("normal", "bold", "italic", "bold_italic"), "ZapfDingbats"),
}

_FAMILY_ALIASES = {
    "arial": "helvetica",
    "timesroman": "times",
    "times-roman": "times",
}

# Suffix appended to a registered TTF family for each style
_STYLE_SUFFIXES = {
    "normal": "",
    "bold": "-Bold",
    "italic": "-Italic",
    "bold_italic": "-Bolditalic",
}


def _normalize_font_name(name: str) -> str:
    """
    Normalize a font name to TitleCase convention.

    Converts hyphen-separated parts to Title Case to match PostScript naming.

    Examples:
        "iosevka-regular" → "Iosevka-Regular"
        "dejavu-sans" → "Dejavu-Sans"
        "stop" → "Stop"

    Args:
        name: Font name to normalize (can be any case)

    Returns:
        TitleCase font name
    """
    parts = name.split('-')
    return '-'.join(part.title() for part in parts)


def _is_registered(font_name: str) -> bool:
    try:
        pdfmetrics.getFont(font_name)
        return True
    except Exception:
        return False


def register_fonts(fonts_dir: Path = FONTS_DIR) -> int:
    """
    Register TTF fonts with ReportLab.

    Each .ttf file in the directory is registered with a TitleCase name based on
    its filename (without extension), so "dejavusans-bold.ttf" becomes
    "Dejavusans-Bold" and is picked up by resolve_font("dejavusans", "bold").

    Args:
        fonts_dir: Directory to scan (default: the package fonts directory).

    Returns:
        Number of fonts registered.
    """
    ttf_files = sorted(fonts_dir.glob("*.ttf"))

    if not ttf_files:
        logger.info(f"No TTF font files found in {fonts_dir}. Using built-in PDF fonts.")
        return 0

    registered_count = 0
    for font_path in ttf_files:
        font_name = _normalize_font_name(font_path.stem)

        try:
            pdfmetrics.registerFont(TTFont(font_name, str(font_path)))
        except Exception as e:
            logger.warning(
                f"Failed to register font {font_name} from {font_path.name}: {e}. "
                "Skipping this font."
            )
            continue

        logger.info(f"Registered font: {font_name} from {font_path.name}")
        registered_count += 1

    logger.info(f"Registered {registered_count} custom font(s) from {fonts_dir}.")
    return registered_count


def resolve_font(family: str, style: str = "normal", fallback: str = "helvetica") -> str:
    """
    Resolve a family and style to a registered ReportLab font name (case-insensitive).

    Resolution priority:
    1. Standard PDF families (and the "arial" alias of Helvetica)
    2. Registered TTF fonts, styled variant first ("Family-Bold"), then the plain family
    3. The fallback family in the requested style

    Args:
        family: Font family, e.g. "arial", "Courier", "dejavusans".
        style: "normal", "bold", "italic" or "bold_italic".
        fallback: Standard family used when nothing else matches.

    Returns:
        Font name suitable for Canvas.setFont and pdfmetrics.stringWidth.

    Examples:
        >>> resolve_font("arial", "bold")
        "Helvetica-Bold"

        >>> resolve_font("NonExistentFont")
        "Helvetica"
    """
    key = family.strip().lower()
    key = _FAMILY_ALIASES.get(key, key)

    if key in _BUILTIN_FAMILIES:
        return _BUILTIN_FAMILIES[key].get(style, _BUILTIN_FAMILIES[key]["normal"])

    base_name = _normalize_font_name(family.strip())
    styled_name = base_name + _STYLE_SUFFIXES.get(style, "")
    for candidate in (styled_name, base_name):
        if _is_registered(candidate):
            logger.debug(f"Font '{family}' ({style}) resolved to '{candidate}'")
            return candidate

    fallback_key = _FAMILY_ALIASES.get(fallback.lower(), fallback.lower())
    fallback_name = _BUILTIN_FAMILIES[fallback_key].get(style, _BUILTIN_FAMILIES[fallback_key]["normal"])
    logger.info(f"Using fallback font '{fallback_name}' for '{family}' ({style})")
    return fallback_name

