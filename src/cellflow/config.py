"""Configuration loading and validation."""

import logging
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cellflow.types import Align, FontStyle, RGBColor, Unit

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "cellflow.toml"

# Families whose built-in PDF fonts only understand a single-byte code page.
# Text set in one of these must be translated before it is measured or drawn.
LEGACY_ENCODED_FAMILIES = frozenset(
    {"arial", "helvetica", "symbol", "zapfdingbats", "courier"}
)


class TextProperties(BaseModel):
    """
    Per-call text formatting.

    Invalid values are corrected rather than rejected, so a layout call never
    fails on formatting alone. Derive variants with model_copy():

        base = TextProperties(family="courier", size=9)
        heading = base.model_copy(update={"style": "bold", "align": "center"})
    """

    model_config = ConfigDict(frozen=True)

    family: str = "arial"
    """Font family (e.g., "arial", "helvetica", "courier", or a registered TTF family)."""

    style: FontStyle = "normal"
    """Font style: "normal", "bold", "italic" or "bold_italic"."""

    size: float = 10.0
    """Font size in points."""

    color: RGBColor = (0.0, 0.0, 0.0)
    """Text color as RGB in 0-1 range. Default: black."""

    align: Align = "left"
    """Horizontal alignment inside the cell."""

    vertical_padding: float = 0.0
    """Extra space between consecutive lines, in user units."""

    extrapolate: bool = False
    """Let the text run past the cell instead of wrapping it."""

    @field_validator("family", mode="before")
    @classmethod
    def _default_family(cls, value: str | None) -> str:
        if not value or not str(value).strip():
            return "arial"
        return str(value).strip()

    @field_validator("style", "align", mode="before")
    @classmethod
    def _lowercase(cls, value: str) -> str:
        return value.lower() if isinstance(value, str) else value

    @field_validator("size", mode="before")
    @classmethod
    def _default_size(cls, value: float) -> float:
        if value is None or float(value) <= 0:
            return 10.0
        return value

    @field_validator("vertical_padding", mode="before")
    @classmethod
    def _clamp_padding(cls, value: float) -> float:
        if value is None or float(value) < 0:
            return 0.0
        return value


class DocumentConfig(BaseModel):
    """Page setup for the PDF document."""

    page_size: str = "a4"
    """Page size name from cellflow.utils.dimensions.PAGE_SIZES."""

    unit: Unit = "mm"
    """User unit for cell coordinates and widths."""

    margin_left: float = Field(default=10.0, ge=0)
    margin_top: float = Field(default=10.0, ge=0)
    margin_right: float = Field(default=10.0, ge=0)
    margin_bottom: float = Field(default=10.0, ge=0)


class Config(BaseModel):
    """Root configuration."""

    document: DocumentConfig = DocumentConfig()
    text: TextProperties = TextProperties()
    legacy_encoded_families: frozenset[str] = LEGACY_ENCODED_FAMILIES
    """Families translated to a single-byte code page before measurement."""

    fonts_dir: Path | None = None
    """Directory of TTF files to register at startup."""

    @field_validator("legacy_encoded_families", mode="after")
    @classmethod
    def _lowercase_families(cls, value: frozenset[str]) -> frozenset[str]:
        return frozenset(family.lower() for family in value)


def load_config(config_path: Path | None = None) -> Config:
    """
    Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, looks for cellflow.toml in the
            current directory and falls back to defaults when there is none.

    Returns:
        Validated Config object.

    Raises:
        FileNotFoundError: If an explicit config file doesn't exist.
        ValueError: If config is invalid.
    """
    if config_path is None:
        config_path = Path.cwd() / DEFAULT_CONFIG_NAME
        if not config_path.exists():
            logger.debug(f"No {DEFAULT_CONFIG_NAME} in {Path.cwd()}, using defaults")
            return Config()

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "rb") as f:
        config_dict = tomllib.load(f)

    logger.info(f"Loaded config from {config_path}")
    return Config(**config_dict)
