"""CLI interface for laying text into PDF cells."""

import io
import logging
from pathlib import Path
from typing import Callable

import click

from cellflow.config import Config, TextProperties, load_config
from cellflow.fonts import register_fonts
from cellflow.render.pdf import PDFDocument
from cellflow.text import Cell, add_text, count_lines
from cellflow.utils.dimensions import PAGE_SIZES, UNIT_SCALE


def _parse_color(value: str) -> tuple[float, float, float]:
    """Parse an "r,g,b" color with components in the 0-1 range."""
    parts = value.split(",")
    if len(parts) != 3:
        raise ValueError(f"Invalid color '{value}': expected three comma-separated values")
    r, g, b = (float(part.strip()) for part in parts)
    for component in (r, g, b):
        if not 0.0 <= component <= 1.0:
            raise ValueError(f"Invalid color '{value}': components must be between 0 and 1")
    return (r, g, b)


def _read_text(text: str) -> str:
    """Return text, or standard input when text is "-"."""
    if text == "-":
        return click.get_text_stream("stdin").read()
    return text


def text_options(func: Callable) -> Callable:
    """Options overriding the [text] section of the configuration."""
    options = [
        click.option("--family", type=str, help="Font family (e.g., arial, courier, times)."),
        click.option(
            "--style",
            type=click.Choice(["normal", "bold", "italic", "bold_italic"], case_sensitive=False),
            help="Font style.",
        ),
        click.option("--size", type=float, help="Font size in points."),
        click.option(
            "--align",
            type=click.Choice(["left", "center", "right"], case_sensitive=False),
            help="Horizontal alignment inside the cell.",
        ),
        click.option("--padding", type=float, help="Vertical padding between lines, in user units."),
        click.option("--color", type=str, help="Text color as 'r,g,b' in the 0-1 range."),
        click.option(
            "--extrapolate",
            is_flag=True,
            help="Let the text run past the cell instead of wrapping.",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _build_props(base: TextProperties, **overrides: object) -> TextProperties:
    """Merge CLI overrides into the configured text properties."""
    # Unset options arrive as None, an absent --extrapolate as False
    updates = {
        key: value for key, value in overrides.items()
        if value is not None and value is not False
    }
    if "padding" in updates:
        updates["vertical_padding"] = updates.pop("padding")
    if "color" in updates:
        updates["color"] = _parse_color(str(updates["color"]))
    # Rebuild rather than model_copy() so the validators run on the overrides
    return TextProperties(**{**base.model_dump(), **updates})


@click.group()
@click.version_option()
@click.option(
    "--config",
    type=click.Path(exists=True, path_type=Path),
    help="Path to cellflow.toml. Defaults to ./cellflow.toml when present.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log layout decisions.")
@click.pass_context
def main(ctx: click.Context, config: Path | None, verbose: bool) -> None:
    """Lay text out in fixed-width cells of a PDF page."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        cfg = load_config(config)
    except (FileNotFoundError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    if cfg.fonts_dir is not None:
        register_fonts(cfg.fonts_dir)

    ctx.obj = cfg


@main.command()
@click.argument("text")
@click.option(
    "-o",
    "--output",
    type=click.Path(path_type=Path),
    default=Path("cellflow.pdf"),
    show_default=True,
    help="Output PDF file path.",
)
@click.option("--x", "x", type=float, default=0.0, help="Cell left edge, relative to the left margin.")
@click.option("--y", "y", type=float, default=0.0, help="Cell top edge, relative to the top margin.")
@click.option("--width", type=float, required=True, help="Cell width in user units.")
@click.option(
    "--page-size",
    type=click.Choice(list(PAGE_SIZES.keys()), case_sensitive=False),
    help="Page size. Uses config default if not specified.",
)
@click.option(
    "--unit",
    type=click.Choice(list(UNIT_SCALE.keys()), case_sensitive=False),
    help="User unit. Uses config default if not specified.",
)
@text_options
@click.pass_obj
def render(
    cfg: Config,
    text: str,
    output: Path,
    x: float,
    y: float,
    width: float,
    page_size: str | None,
    unit: str | None,
    **text_overrides: object,
) -> None:
    """
    Render TEXT into a cell and write a one-page PDF.

    Pass "-" as TEXT to read it from standard input. Prints the baseline of the
    last line so further content can be stacked below it.
    """
    try:
        if width <= 0:
            raise ValueError("Cell width must be greater than 0")

        props = _build_props(cfg.text, **text_overrides)

        doc_updates = {}
        if page_size:
            doc_updates["page_size"] = page_size
        if unit:
            doc_updates["unit"] = unit
        doc_config = cfg.document.model_copy(update=doc_updates)

        doc = PDFDocument.from_config(output, doc_config)
        last_y = add_text(
            doc, doc, _read_text(text), Cell(x, y, width), props,
            cfg.legacy_encoded_families,
        )
        doc.save()

        click.echo(f"Last baseline: {last_y:g} {doc_config.unit}")
        click.echo(f"✓ PDF saved to: {output}")

    except (FileNotFoundError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)


@main.command()
@click.argument("text")
@click.option("--width", type=float, required=True, help="Cell width in user units.")
@click.option(
    "--unit",
    type=click.Choice(list(UNIT_SCALE.keys()), case_sensitive=False),
    help="User unit. Uses config default if not specified.",
)
@text_options
@click.pass_obj
def count(
    cfg: Config,
    text: str,
    width: float,
    unit: str | None,
    **text_overrides: object,
) -> None:
    """Print the number of lines TEXT occupies in a cell of the given width."""
    try:
        if width <= 0:
            raise ValueError("Cell width must be greater than 0")

        props = _build_props(cfg.text, **text_overrides)
        doc_config = cfg.document.model_copy(update={"unit": unit} if unit else {})

        # Measurement only; the document is never saved
        doc = PDFDocument.from_config(io.BytesIO(), doc_config)
        click.echo(count_lines(doc, _read_text(text), props, width, cfg.legacy_encoded_families))

    except (FileNotFoundError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
