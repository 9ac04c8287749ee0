"""Type aliases used across the cellflow package."""

from typing import Literal, Tuple

# Color types
RGBColor = Tuple[float, float, float]  # RGB color in 0-1 range

# Measurements
Margins = Tuple[float, float, float, float]  # left, top, right, bottom in user units

# Text formatting options
Align = Literal["left", "center", "right"]
FontStyle = Literal["normal", "bold", "italic", "bold_italic"]
Unit = Literal["pt", "mm", "cm", "in"]
