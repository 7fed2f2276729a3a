"""
Palette CLI commands.

Commands:
- palette generate: Build a 9-step palette from one or two seed colours
- palette position: Show which shade slot a seed colour lands in
- palette adjust: Override lightness/chroma/hue of a colour
"""

from __future__ import annotations

import json
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.markup import escape
from rich.table import Table

from tintwind.core.dtcg_export import generate_dtcg_tokens, write_dtcg_tokens
from tintwind.core.ir import ColorAdjustment, ColorEntry
from tintwind.core.manifest import OUTPUT_FORMATS
from tintwind.core.oklch import (
    adjust_color,
    determine_palette_position,
    generate_palette,
    generate_palette_from_two_colors,
    normalize_hex,
)
from tintwind.core.theme_generators import (
    generate_css_variables,
    generate_tailwind_theme,
    text_color_for,
)

from .utils import console, err_console, load_manifest_or_exit

palette_app = typer.Typer(help="Generate colour palettes from seed colours")


def _swatch_table(palette: list[ColorEntry], base_position: int | None = None) -> Table:
    table = Table(show_header=True, header_style="bold")
    table.add_column("Shade", justify="right")
    table.add_column("Swatch")
    table.add_column("Hex")
    table.add_column("OKLCH")
    for position, entry in enumerate(palette):
        marker = " *" if position == base_position else ""
        swatch = f"[{text_color_for(entry.hex)} on {entry.hex}]  {entry.index}  [/]"
        table.add_row(f"{entry.index}{marker}", swatch, entry.hex, entry.oklch)
    return table


def render_palette(name: str, palette: list[ColorEntry], output_format: str) -> str:
    """Serialize a palette in one of the supported output formats."""
    if output_format == "css":
        return f":root {{\n{generate_css_variables(name, palette)}}}"
    if output_format == "dtcg":
        return json.dumps(generate_dtcg_tokens(name, palette), indent=2)
    if output_format == "json":
        return json.dumps([entry.model_dump() for entry in palette], indent=2)
    return generate_tailwind_theme(name, palette)


@palette_app.command("generate")
def generate_command(
    seed: str | None = typer.Argument(None, help="Seed colour (hex, rgb(), hsl(), name or oklch())"),
    second: str | None = typer.Option(
        None, "--second", "-s", help="Second seed; interpolates between the two"
    ),
    name: str | None = typer.Option(None, "--name", "-n", help="Colour name used in output"),
    count: int | None = typer.Option(None, "--count", "-c", min=1, help="Number of shades"),
    output_format: str | None = typer.Option(
        None, "--format", "-f", help=f"Output format ({'/'.join(OUTPUT_FORMATS)})"
    ),
    output: str | None = typer.Option(None, "--output", "-o", help="Write output to a file"),
    manifest: str | None = typer.Option(None, "--manifest", "-m", help="Path to tintwind.toml"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print the serialized output"),
) -> None:
    """
    Generate a palette and print it as a Tailwind theme, CSS variables or tokens.
    """
    project = load_manifest_or_exit(manifest)
    config = project.palette

    seed = seed or config.seed
    second = second or config.second_seed
    name = name or config.name
    count = count or config.count
    output_format = output_format or config.format
    if output_format not in OUTPUT_FORMATS:
        err_console.print(f"[red]Unknown format: {escape(output_format)}[/red]")
        raise typer.Exit(code=1)

    base_position = None
    if second:
        palette = generate_palette_from_two_colors(seed, second, count)
    else:
        base_position = determine_palette_position(seed)
        palette = generate_palette(seed, count)

    rendered = render_palette(name, palette, output_format)

    if not quiet:
        console.print(_swatch_table(palette, base_position))
        if base_position is not None:
            console.print(f"Seed {normalize_hex(seed)} placed at shade {(base_position + 1) * 100}")

    if output:
        output_path = Path(output)
        if output_format == "dtcg":
            write_dtcg_tokens(name, palette, output_path)
        else:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(rendered + "\n", encoding="utf-8")
        if not quiet:
            console.print(f"[green]Wrote {escape(str(output_path))}[/green]")
    else:
        typer.echo(rendered)


@palette_app.command("position")
def position_command(
    seed: str = typer.Argument(..., help="Seed colour"),
) -> None:
    """
    Show the palette slot (0 = lightest, 8 = darkest) for a colour.
    """
    position = determine_palette_position(seed)
    typer.echo(f"{position} (shade {(position + 1) * 100})")


@palette_app.command("adjust")
def adjust_command(
    seed: str = typer.Argument(..., help="Colour to adjust"),
    lightness: float | None = typer.Option(None, "--lightness", "-l", help="Lightness 0-1"),
    chroma: float | None = typer.Option(None, "--chroma", "-c", help="Chroma 0-0.4"),
    hue: float | None = typer.Option(None, "--hue", "-h", help="Hue 0-360"),
    index: int | None = typer.Option(None, "--index", "-i", help="Shade index of the result"),
) -> None:
    """
    Override lightness, chroma or hue of a colour and print the result.
    """
    try:
        adjustment = ColorAdjustment(lightness=lightness, chroma=chroma, hue=hue, index=index)
    except ValidationError as e:
        err_console.print(f"[red]Invalid adjustment:[/red] {e.errors()[0]['msg']}")
        raise typer.Exit(code=1) from e

    entry = adjust_color(seed, adjustment)
    typer.echo(json.dumps(entry.model_dump(), indent=2))
