"""Utility modules."""

from cellflow.utils.dimensions import (
    PAGE_SIZES,
    UNIT_SCALE,
    PageSize,
    get_page_size,
    inches_to_points,
    scale_factor,
)

__all__ = [
    "PAGE_SIZES",
    "UNIT_SCALE",
    "PageSize",
    "get_page_size",
    "inches_to_points",
    "scale_factor",
]
