"""Page sizes and unit conversion."""

from dataclasses import dataclass as _dataclass


@_dataclass(frozen=True)
class PageSize:
    """Page size specification."""

    width: float   # inches
    height: float  # inches
    label: str     # display label for CLI/help


# Registry of standard page sizes
PAGE_SIZES = {
    "letter": PageSize(8.5, 11.0, "Letter (8.5×11)"),
    "legal": PageSize(8.5, 14.0, "Legal (8.5×14)"),
    "half": PageSize(8.5, 5.5, "Half Sheet (8.5×5.5)"),
    "a3": PageSize(11.69, 16.54, "A3 (297×420mm)"),
    "a4": PageSize(8.27, 11.69, "A4 (210×297mm)"),
    "a5": PageSize(5.83, 8.27, "A5 (148×210mm)"),
}

# Points per user unit (72 points = 1 inch)
UNIT_SCALE = {
    "pt": 1.0,
    "mm": 72 / 25.4,
    "cm": 72 / 2.54,
    "in": 72.0,
}


def get_page_size(name: str) -> PageSize:
    """
    Get page size by name.

    Args:
        name: Page size name (e.g., "letter", "half", "a4").

    Returns:
        PageSize object. Defaults to A4 if name not found.
    """
    return PAGE_SIZES.get(name.lower(), PAGE_SIZES["a4"])


def scale_factor(unit: str) -> float:
    """
    Get the number of points in one user unit.

    Args:
        unit: Unit name ("pt", "mm", "cm" or "in").

    Returns:
        Points per unit.

    Raises:
        ValueError: If the unit is unknown.
    """
    try:
        return UNIT_SCALE[unit.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown unit '{unit}'. Supported: {', '.join(UNIT_SCALE)}"
        ) from None


def inches_to_points(inches: float) -> float:
    """
    Convert inches to points (72 points per inch).

    Args:
        inches: Measurement in inches.

    Returns:
        Measurement in points.
    """
    return inches * 72

