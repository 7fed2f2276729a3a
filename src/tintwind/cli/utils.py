"""
Shared CLI helpers: version, logging setup, manifest loading.
"""

from __future__ import annotations

import logging
import platform
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from tintwind._version import get_version
from tintwind.core.errors import TintwindError
from tintwind.core.manifest import ProjectManifest, load_project_manifest

console = Console()
err_console = Console(stderr=True)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"tintwind version {get_version()}")
        typer.echo(f"  Python:        {platform.python_implementation()} {platform.python_version()}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        raise typer.Exit()


def configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.WARNING), format=LOG_FORMAT)


def load_manifest_or_exit(manifest: str | None) -> ProjectManifest:
    """Load configuration, turning config errors into a clean exit."""
    try:
        project = load_project_manifest(Path(manifest) if manifest else None)
    except TintwindError as e:
        err_console.print(f"[red]{escape(e.message)}[/red]")
        raise typer.Exit(code=1) from e
    configure_logging(project.logging.level)
    return project
