import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ManifestError

MANIFEST_FILENAME = "tintwind.toml"
LOG_LEVEL_ENV = "TINTWIND_LOG_LEVEL"

OUTPUT_FORMATS: tuple[str, ...] = ("tailwind", "css", "dtcg", "json")


@dataclass
class PaletteConfig:
    """Defaults for palette generation."""

    name: str = "theme"
    count: int = 9
    format: str = "tailwind"  # "tailwind" | "css" | "dtcg" | "json"
    seed: str = "#3b82f6"
    second_seed: str | None = None  # Enables two-seed mode when set


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"


@dataclass
class ProjectManifest:
    """Contents of tintwind.toml, with defaults for anything omitted."""

    palette: PaletteConfig = field(default_factory=PaletteConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    path: Path | None = None


def find_manifest(start: Path) -> Path | None:
    candidate = start / MANIFEST_FILENAME
    return candidate if candidate.is_file() else None


def _resolve_level(name: str) -> str:
    level = name.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ManifestError(f"Unknown log level: {name!r}")
    return level


def load_manifest(path: Path) -> ProjectManifest:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ManifestError(f"Invalid TOML in {path}: {e}") from e

    palette_data = data.get("palette", {})
    logging_data = data.get("logging", {})

    count = palette_data.get("count", 9)
    if not isinstance(count, int) or isinstance(count, bool) or count < 1:
        raise ManifestError(f"palette.count must be a positive integer, got {count!r}")

    output_format = palette_data.get("format", "tailwind")
    if output_format not in OUTPUT_FORMATS:
        raise ManifestError(
            f"palette.format must be one of {', '.join(OUTPUT_FORMATS)}, got {output_format!r}"
        )

    palette_config = PaletteConfig(
        name=palette_data.get("name") or "theme",
        count=count,
        format=output_format,
        seed=palette_data.get("seed", "#3b82f6"),
        # An empty string in the file means "single seed"
        second_seed=palette_data.get("second_seed") or None,
    )

    level = os.environ.get(LOG_LEVEL_ENV) or logging_data.get("level", "WARNING")
    logging_config = LoggingConfig(level=_resolve_level(level))

    return ProjectManifest(palette=palette_config, logging=logging_config, path=path)


def load_project_manifest(manifest: Path | None = None, cwd: Path | None = None) -> ProjectManifest:
    """Load an explicit manifest, the one in ``cwd``, or the defaults."""
    if manifest is not None:
        if not manifest.is_file():
            raise ManifestError(f"Manifest not found: {manifest}")
        return load_manifest(manifest)

    found = find_manifest(cwd or Path.cwd())
    if found is not None:
        return load_manifest(found)

    level = os.environ.get(LOG_LEVEL_ENV)
    if level:
        return ProjectManifest(logging=LoggingConfig(level=_resolve_level(level)))
    return ProjectManifest()
