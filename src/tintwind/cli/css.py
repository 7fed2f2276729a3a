"""
CSS-to-Tailwind CLI commands.

Commands:
- css convert: Convert declarations, a CSS rule or a style="" attribute
- css examples: List the built-in sample snippets
"""

from __future__ import annotations

import sys
from pathlib import Path

import typer
from rich.markup import escape

from tintwind.core.tailwind import (
    EXAMPLE_SNIPPETS,
    convert_css_to_tailwind,
    preprocess_css_input,
)

from .utils import console, err_console, load_manifest_or_exit

css_app = typer.Typer(help="Convert CSS declarations to Tailwind classes")


def convert_text(text: str) -> str:
    """Preprocess pasted input and convert it to a class string."""
    return convert_css_to_tailwind(preprocess_css_input(text))


@css_app.command("convert")
def convert_command(
    text: str | None = typer.Argument(None, help="CSS text; read from stdin when omitted"),
    file: str | None = typer.Option(None, "--file", "-f", help="Read CSS from a file"),
    manifest: str | None = typer.Option(None, "--manifest", "-m", help="Path to tintwind.toml"),
) -> None:
    """
    Convert CSS declarations to a Tailwind class list.
    """
    load_manifest_or_exit(manifest)

    if file:
        path = Path(file)
        if not path.is_file():
            err_console.print(f"[red]File not found: {escape(str(path))}[/red]")
            raise typer.Exit(code=1)
        text = path.read_text(encoding="utf-8")
    elif text is None:
        text = sys.stdin.read()

    typer.echo(convert_text(text))


@css_app.command("examples")
def examples_command(
    convert: bool = typer.Option(False, "--convert", help="Also show the converted classes"),
) -> None:
    """
    Show the built-in example snippets.
    """
    for name, css in EXAMPLE_SNIPPETS.items():
        console.print(f"[bold]{name}[/bold]")
        typer.echo(css)
        if convert:
            console.print(f"[green]→[/green] {escape(convert_text(css))}", soft_wrap=True)
        typer.echo("")
