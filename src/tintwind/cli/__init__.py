"""
tintwind CLI package.

- palette.py: palette generation commands
- css.py: CSS-to-Tailwind commands
- utils.py: shared helpers
"""

import typer

from tintwind.cli.css import css_app
from tintwind.cli.palette import palette_app
from tintwind.cli.utils import version_callback

app = typer.Typer(
    help="tintwind – colour palettes and CSS-to-Tailwind conversion",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """tintwind command-line interface."""


app.add_typer(palette_app, name="palette")
app.add_typer(css_app, name="css")


def main() -> None:
    app()


__all__ = ["app", "main", "css_app", "palette_app"]
